"""
Place Search Module
-----------------
Autocomplete-style search for Dutch place names: PDOK Locatieserver first,
a local scored dataset as fallback, both behind a process-lifetime cache.
"""
from nladdress.places.cache import PlaceSearchCache
from nladdress.places.local_index import LocalPlaceIndex
from nladdress.places.pdok import RemotePlaceProvider
from nladdress.places.resolver import LocalPlaceSearch, PlaceSearchResolver

__all__ = [
    "LocalPlaceIndex",
    "LocalPlaceSearch",
    "PlaceSearchCache",
    "PlaceSearchResolver",
    "RemotePlaceProvider",
]
