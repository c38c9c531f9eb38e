"""
Data Models Module
----------------
Contains Pydantic models for data validation and serialization.
Defines the canonical address, place and geocoding job shapes shared by all providers.
"""
from nladdress.models.address import Address, Coordinates, Postcode, PostcodeQuery
from nladdress.models.geocode import GeocodeJobRecord, GeocodeSummary
from nladdress.models.place import MatchKind, PlaceCandidate, PlaceSearchResult

__all__ = [
    "Address",
    "Coordinates",
    "Postcode",
    "PostcodeQuery",
    "GeocodeJobRecord",
    "GeocodeSummary",
    "MatchKind",
    "PlaceCandidate",
    "PlaceSearchResult",
]
