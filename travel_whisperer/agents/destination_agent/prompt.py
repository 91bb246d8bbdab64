from travel_whisperer.schemas.destination_schemas import DESTINATION_CATEGORIES, DestinationRecord
from travel_whisperer.utils.security import sanitize

DESTINATION_SYSTEM_PROMPT = "You are a travel destination expert. Always respond with valid JSON only."

DESTINATION_COUNT = 9
DEFAULT_QUERY = "popular travel destinations"

_EXAMPLE_RECORD = DestinationRecord(
    id="1",
    name="Santorini, Greece",
    description="...",
    image="https://images.unsplash.com/...",
    category="Beach",
    rating=4.8,
)

_PROMPT_TEMPLATE = """Generate a JSON array of {count} diverse travel destinations based on: "{query}". 

For each destination, provide:
- id: a unique identifier
- name: the destination name
- description: a compelling 2-3 sentence description
- image: a realistic Unsplash image URL (use format: https://images.unsplash.com/photo-[random-id]?w=800&h=600&fit=crop)
- category: one of [{categories}]
- rating: a realistic rating between 4.0 and 5.0

Return ONLY valid JSON array, no additional text. Example format:
[{example}]"""


def resolve_query(query) -> str:
    """
    The query goes through `sanitize`: it is capped at 300 characters and
    anything bleach reads as a tag is dropped, so "<Paris>" becomes empty
    and the default query is used instead.
    """
    cleaned = sanitize(query)
    return cleaned or DEFAULT_QUERY


def build_destination_prompt(query) -> str:
    return _PROMPT_TEMPLATE.format(
        count=DESTINATION_COUNT,
        query=resolve_query(query),
        categories=", ".join(DESTINATION_CATEGORIES),
        example=_EXAMPLE_RECORD.model_dump_json(),
    )
