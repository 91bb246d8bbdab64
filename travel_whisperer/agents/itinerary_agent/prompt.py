import math
from datetime import datetime, timezone

from travel_whisperer.schemas.itinerary_schemas import ItineraryRequest
from travel_whisperer.utils.security import sanitize

ITINERARY_SYSTEM_PROMPT = (
    "You are a helpful travel planning assistant that creates detailed, personalized itineraries."
)

SECONDS_PER_DAY = 24 * 60 * 60

_PROMPT_TEMPLATE = """You are an expert travel planner. Create a detailed {days}-day itinerary for {destination} with the following preferences:

Budget: ${budget} per day
Interests: {interests}
Activity type: {activity_type}
Dates: {start} to {end}

Please provide:
1. Day-by-day breakdown with morning, afternoon, and evening activities
2. Specific place recommendations with brief descriptions
3. Estimated costs for each activity
4. Travel tips and local insights
5. Restaurant recommendations
6. Transportation suggestions

Format the itinerary in a clear, easy-to-read manner with proper spacing and organization."""


def parse_trip_date(value: str) -> datetime:
    """
    Accepts '2025-06-02' or a full ISO timestamp such as '2025-06-02T00:00:00.000Z'.
    Values without an offset are read as UTC. Raises ValueError when unparseable.
    """
    text = (value or "").strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    parsed = datetime.fromisoformat(text)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def trip_length_days(start: datetime, end: datetime) -> int:
    # ceil of the span in whole days, never less than a single day
    days = math.ceil((end - start).total_seconds() / SECONDS_PER_DAY)
    return max(1, days)


def format_trip_date(value: datetime) -> str:
    return value.strftime("%a %b %d %Y")


def _format_budget(budget: float) -> str:
    if float(budget).is_integer():
        return str(int(budget))
    return str(budget)


def build_itinerary_prompt(request: ItineraryRequest) -> str:
    # free-text fields are sanitized: 300 characters max, tag-like text such as "<b>" removed
    start = parse_trip_date(request.startDate)
    end = parse_trip_date(request.endDate)

    return _PROMPT_TEMPLATE.format(
        days=trip_length_days(start, end),
        destination=sanitize(request.destination),
        budget=_format_budget(request.budget),
        interests=", ".join(sanitize(i) for i in request.interests),
        activity_type=sanitize(request.activityType),
        start=format_trip_date(start),
        end=format_trip_date(end),
    )
