from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from nladdress.models.address import Coordinates


class MatchKind(str, Enum):
    EXACT = "exact"
    STARTS = "starts"
    CONTAINS = "contains"
    MUNICIPALITY = "municipality"
    PROVINCE = "province"


class PlaceCandidate(BaseModel):
    """
    A place returned by place search.

    Remote results keep provider order and carry no score; local results
    carry a 0-100 score and the kind of match that produced it.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    municipality: Optional[str] = None
    province: Optional[str] = None
    coordinates: Optional[Coordinates] = None
    score: Optional[int] = Field(default=None, ge=0, le=100)
    match: Optional[MatchKind] = None


class PlaceSearchResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    places: List[PlaceCandidate] = Field(default_factory=list, max_length=20)
    fallback: bool = False
