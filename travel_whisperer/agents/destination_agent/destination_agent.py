# agents/destination_agent/destination_agent.py
import logging

from travel_whisperer.agents.destination_agent.prompt import (
    DESTINATION_SYSTEM_PROMPT,
    build_destination_prompt,
    resolve_query,
)
from travel_whisperer.schemas.destination_schemas import DestinationResult, DestinationSearchRequest
from travel_whisperer.utils.normalizer import parse_destinations
from travel_whisperer.utils.openai_client import ChatCompletionClient

logger = logging.getLogger(__name__)

FAILURE_MESSAGE = "Failed to fetch destinations"


def search_destinations(request: DestinationSearchRequest, client: ChatCompletionClient) -> DestinationResult:
    """
    Ask the model for destination cards matching the free-text query.
    Upstream errors propagate; an unparseable answer degrades to the sample list.
    """
    logger.info("Searching destinations for: %s", resolve_query(request.query))

    raw = client.complete(
        DESTINATION_SYSTEM_PROMPT,
        build_destination_prompt(request.query),
        failure_message=FAILURE_MESSAGE,
    )
    result = parse_destinations(raw)

    if result.is_fallback:
        logger.warning("Serving fallback destinations")
    else:
        logger.info("Destinations loaded successfully (%d)", len(result.destinations))
    return result
