from typing import Any, List, Literal, Optional, get_args

from pydantic import BaseModel, Field

DestinationCategory = Literal["Landmark", "Nature", "Museum", "Beach", "Mountain", "City", "Historical"]
DESTINATION_CATEGORIES = get_args(DestinationCategory)


class DestinationSearchRequest(BaseModel):
    query: Optional[str] = None


class DestinationRecord(BaseModel):
    # Shape requested from the model; responses are not validated against it
    id: str
    name: str
    description: str
    image: str
    category: DestinationCategory
    rating: float = Field(ge=4.0, le=5.0)


class DestinationResult(BaseModel):
    destinations: List[Any] = Field(default_factory=list)
    source: Literal["parsed", "fallback"] = "parsed"

    @property
    def is_fallback(self) -> bool:
        return self.source == "fallback"


class DestinationSearchResponse(BaseModel):
    destinations: List[Any]


class ErrorResponse(BaseModel):
    error: str
