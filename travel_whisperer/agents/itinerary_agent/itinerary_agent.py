import logging

from travel_whisperer.agents.itinerary_agent.prompt import ITINERARY_SYSTEM_PROMPT, build_itinerary_prompt
from travel_whisperer.schemas.itinerary_schemas import ItineraryRequest, ItineraryResponse
from travel_whisperer.utils.normalizer import strip_code_fences
from travel_whisperer.utils.openai_client import ChatCompletionClient

logger = logging.getLogger(__name__)

FAILURE_MESSAGE = "Failed to generate itinerary"


def generate_itinerary(request: ItineraryRequest, client: ChatCompletionClient) -> ItineraryResponse:
    """Build the day-by-day prompt and hand the model's prose back untouched (fences aside)."""
    logger.info("Generating itinerary for: %s", request.destination)

    prompt = build_itinerary_prompt(request)
    raw = client.complete(ITINERARY_SYSTEM_PROMPT, prompt, failure_message=FAILURE_MESSAGE)

    logger.info("Itinerary generated successfully")
    return ItineraryResponse(itinerary=strip_code_fences(raw))
