# utils/normalizer.py
import copy
import json
import logging
import math
import re
from typing import Any, Dict, List

from travel_whisperer.schemas.destination_schemas import DestinationResult

logger = logging.getLogger(__name__)

_JSON_FENCE = re.compile(r"```json\n?")
_PLAIN_FENCE = re.compile(r"```\n?")

FALLBACK_DESTINATIONS: List[Dict[str, Any]] = [
    {
        "id": "1",
        "name": "Santorini, Greece",
        "description": "Famous for its stunning sunsets and white-washed buildings with blue domes.",
        "image": "https://images.unsplash.com/photo-1613395877344-13d4a8e0d49e?w=800&h=600&fit=crop",
        "category": "Beach",
        "rating": 4.9,
    },
    {
        "id": "2",
        "name": "Kyoto, Japan",
        "description": "Historic city with beautiful temples, gardens, and traditional culture.",
        "image": "https://images.unsplash.com/photo-1493976040374-85c8e12f0c0e?w=800&h=600&fit=crop",
        "category": "Historical",
        "rating": 4.8,
    },
    {
        "id": "3",
        "name": "Swiss Alps",
        "description": "Breathtaking mountain scenery perfect for skiing and hiking adventures.",
        "image": "https://images.unsplash.com/photo-1531366936337-7c912a4589a7?w=800&h=600&fit=crop",
        "category": "Mountain",
        "rating": 4.9,
    },
]


def strip_code_fences(text: str) -> str:
    """Remove ```json / ``` markers anywhere in the model output and trim."""
    text = _JSON_FENCE.sub("", text or "")
    text = _PLAIN_FENCE.sub("", text)
    return text.strip()


def fallback_destinations() -> DestinationResult:
    return DestinationResult(destinations=copy.deepcopy(FALLBACK_DESTINATIONS), source="fallback")


def _reject_constant(name: str):
    # NaN / Infinity are not JSON and cannot be rendered back out
    raise ValueError(f"non-standard JSON constant: {name}")


def _finite_float(text: str) -> float:
    value = float(text)
    if math.isinf(value):
        raise ValueError(f"number out of range: {text}")
    return value


def parse_destinations(text: str) -> DestinationResult:
    """
    Parse the cleaned model output as a JSON array of destination records.
    Records are passed through untouched. Anything that is not a strict
    JSON array degrades to the static sample list.
    """
    content = strip_code_fences(text)
    try:
        parsed = json.loads(content, parse_constant=_reject_constant, parse_float=_finite_float)
    except ValueError:
        logger.error("Failed to parse AI response: %s", content)
        return fallback_destinations()

    if not isinstance(parsed, list):
        logger.error("AI response is not a JSON array: %s", content)
        return fallback_destinations()

    return DestinationResult(destinations=parsed, source="parsed")
