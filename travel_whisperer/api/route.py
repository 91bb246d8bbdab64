# api/route.py

import logging
import traceback
from typing import Optional

from fastapi import APIRouter, Depends, Response
from fastapi.responses import JSONResponse

from travel_whisperer.agents.destination_agent import destination_agent
from travel_whisperer.agents.itinerary_agent import itinerary_agent
from travel_whisperer.agents.itinerary_agent.prompt import parse_trip_date
from travel_whisperer.schemas.destination_schemas import (
    DestinationSearchRequest,
    DestinationSearchResponse,
    ErrorResponse,
)
from travel_whisperer.schemas.itinerary_schemas import ItineraryRequest
from travel_whisperer.utils.config import Settings, get_settings
from travel_whisperer.utils.errors import RequestValidationFailed, TravelWhispererError
from travel_whisperer.utils.openai_client import ChatCompletionClient, client_for

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/functions/v1", tags=["travel"])

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "authorization, x-client-info, apikey, content-type",
}


def get_inference_client(settings: Settings = Depends(get_settings)) -> ChatCompletionClient:
    return client_for(settings)


def error_response(message: str, status_code: int) -> JSONResponse:
    return JSONResponse(
        content=ErrorResponse(error=message).model_dump(),
        status_code=status_code,
        headers=CORS_HEADERS,
    )


def _handle_failure(exc: Exception, endpoint: str, default_message: str) -> JSONResponse:
    if isinstance(exc, TravelWhispererError):
        if exc.status_code >= 500:
            logger.error("Error in %s: %s", endpoint, exc.message)
        return error_response(exc.message, exc.status_code)

    logger.error("Error in %s: %s\n%s", endpoint, exc, traceback.format_exc())
    return error_response(str(exc) or default_message, 500)


def _preflight() -> Response:
    return Response(status_code=200, headers=CORS_HEADERS)


@router.options("/explore-destinations")
def explore_destinations_preflight():
    return _preflight()


@router.options("/generate-itinerary")
def generate_itinerary_preflight():
    return _preflight()


@router.post("/explore-destinations")
def explore_destinations(
    payload: Optional[DestinationSearchRequest] = None,
    client: ChatCompletionClient = Depends(get_inference_client),
):
    request = payload or DestinationSearchRequest()
    try:
        result = destination_agent.search_destinations(request, client)
        return JSONResponse(
            content=DestinationSearchResponse(destinations=result.destinations).model_dump(),
            headers={**CORS_HEADERS, "X-Destinations-Source": result.source},
        )
    except Exception as e:
        return _handle_failure(e, "explore-destinations", destination_agent.FAILURE_MESSAGE)


@router.post("/generate-itinerary")
def generate_itinerary(
    payload: ItineraryRequest,
    client: ChatCompletionClient = Depends(get_inference_client),
):
    try:
        missing = payload.missing_fields()
        if missing:
            raise RequestValidationFailed(f"Missing required fields: {', '.join(missing)}")
        for field in ("startDate", "endDate"):
            try:
                parse_trip_date(getattr(payload, field))
            except ValueError:
                raise RequestValidationFailed(f"Invalid date for {field}: {getattr(payload, field)}")

        result = itinerary_agent.generate_itinerary(payload, client)
        return JSONResponse(content=result.model_dump(), headers=CORS_HEADERS)
    except Exception as e:
        return _handle_failure(e, "generate-itinerary", itinerary_agent.FAILURE_MESSAGE)
