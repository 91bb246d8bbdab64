from typing import List, Optional

from pydantic import BaseModel, Field


class ItineraryRequest(BaseModel):
    destination: Optional[str] = None
    startDate: Optional[str] = None  # ISO date or datetime
    endDate: Optional[str] = None  # ISO date or datetime
    budget: float = 100  # per day
    interests: List[str] = Field(default_factory=list)
    activityType: str = "walking"

    def missing_fields(self) -> List[str]:
        return [
            name for name in ("destination", "startDate", "endDate")
            if not (getattr(self, name) or "").strip()
        ]


class ItineraryResponse(BaseModel):
    itinerary: str
