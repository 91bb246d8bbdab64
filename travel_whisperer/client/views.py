"""
Client-side call sites for the two AI endpoints.

Each view keeps the state a page would hold (form fields, busy flag, the last
good result, toast notifications) and issues at most one request at a time
through a `requests` session.
"""

import logging
from datetime import date
from typing import Any, Dict, List, Optional

import requests
from pydantic import BaseModel, Field

from travel_whisperer.agents.destination_agent.prompt import DEFAULT_QUERY

logger = logging.getLogger(__name__)

EXPLORE_PATH = "/functions/v1/explore-destinations"
ITINERARY_PATH = "/functions/v1/generate-itinerary"

INTEREST_OPTIONS = [
    "Food & Dining",
    "Nature & Parks",
    "Nightlife",
    "Adventure Sports",
    "Museums & Culture",
    "Shopping",
    "Photography",
    "Local Experiences",
]


class Notification(BaseModel):
    title: str
    description: str
    variant: str = "default"  # default | destructive


class ApiError(Exception):
    pass


class _View:
    def __init__(self, base_url: str, api_key: str, session: Optional[Any] = None):
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.session = session or requests.Session()
        self.loading = False
        self.notifications: List[Notification] = []

    def notify(self, title: str, description: str, variant: str = "default") -> None:
        self.notifications.append(Notification(title=title, description=description, variant=variant))

    def _post(self, path: str, body: Dict[str, Any]) -> Dict[str, Any]:
        response = self.session.post(
            f"{self.base_url}{path}",
            json=body,
            headers={
                "Content-Type": "application/json",
                "Authorization": f"Bearer {self.api_key}",
            },
        )
        data = response.json()
        if data.get("error"):
            raise ApiError(data["error"])
        return data


class ExploreView(_View):
    def __init__(self, base_url: str, api_key: str, session: Optional[Any] = None):
        super().__init__(base_url, api_key, session)
        self.search_query = ""
        self.destinations: List[Dict[str, Any]] = []

    def load(self) -> None:
        if self.loading:
            return
        self.loading = True
        try:
            data = self._post(EXPLORE_PATH, {"query": self.search_query or DEFAULT_QUERY})
            self.destinations = data.get("destinations") or []
        except Exception as e:
            logger.error("Error loading destinations: %s", e)
            self.notify("Error", "Failed to load destinations", variant="destructive")
        finally:
            self.loading = False

    def search(self, query: str) -> None:
        self.search_query = query
        self.load()

    def add_to_itinerary(self, destination: Dict[str, Any]) -> None:
        self.notify(
            "Added to Itinerary! 🎉",
            f"{destination.get('name')} has been added to your travel plans",
        )


class PlanForm(BaseModel):
    current_location: str = ""
    destination: str = ""
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    budget: float = 100
    interests: List[str] = Field(default_factory=list)
    activity_type: str = "walking"

    def is_complete(self) -> bool:
        return bool(self.destination and self.start_date and self.end_date)

    def to_payload(self) -> Dict[str, Any]:
        return {
            "destination": self.destination,
            "startDate": self.start_date.isoformat(),
            "endDate": self.end_date.isoformat(),
            "budget": self.budget,
            "interests": list(self.interests),
            "activityType": self.activity_type,
        }


class PlanView(_View):
    def __init__(self, base_url: str, api_key: str, session: Optional[Any] = None):
        super().__init__(base_url, api_key, session)
        self.form = PlanForm()
        self.itinerary: Optional[str] = None

    def toggle_interest(self, interest: str) -> None:
        if interest in self.form.interests:
            self.form.interests = [i for i in self.form.interests if i != interest]
        else:
            self.form.interests = self.form.interests + [interest]

    def submit(self) -> bool:
        """Returns True when a request was sent."""
        if self.loading:
            return False
        if not self.form.is_complete():
            self.notify("Missing Information", "Please fill in all required fields", variant="destructive")
            return False

        self.loading = True
        try:
            data = self._post(ITINERARY_PATH, self.form.to_payload())
            self.itinerary = data["itinerary"]
            self.notify("Itinerary Generated! ✈️", "Your personalized travel plan is ready")
        except Exception as e:
            logger.error("Error: %s", e)
            self.notify("Error", "Failed to generate itinerary. Please try again.", variant="destructive")
        finally:
            self.loading = False
        return True


class ContactForm(BaseModel):
    # The about page has no backend for messages; submitting only acknowledges.
    name: str = ""
    email: str = ""
    message: str = ""
    notifications: List[Notification] = Field(default_factory=list)

    def submit(self) -> None:
        logger.info("Form submitted: name=%s email=%s message=%s", self.name, self.email, self.message)
        self.notifications.append(
            Notification(
                title="Message Sent! 📧",
                description="Thank you for reaching out. We'll get back to you soon!",
            )
        )
        self.name = ""
        self.email = ""
        self.message = ""
