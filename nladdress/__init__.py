"""nladdress: resolve Dutch addresses and places through cascading geodata providers."""

from nladdress.errors import (
    AllProvidersFailedError,
    ConfigMissing,
    InvalidFormat,
    NLAddressError,
    NotFoundError,
    ProviderError,
    QueryTooShort,
    Unauthorized,
)
from nladdress.lookup.cascade import AddressResolutionCascade
from nladdress.models.address import Address, Coordinates, Postcode
from nladdress.models.place import PlaceCandidate
from nladdress.places.resolver import PlaceSearchResolver

__all__ = [
    "AddressResolutionCascade",
    "PlaceSearchResolver",
    "Address",
    "Coordinates",
    "Postcode",
    "PlaceCandidate",
    "NLAddressError",
    "InvalidFormat",
    "QueryTooShort",
    "ProviderError",
    "NotFoundError",
    "AllProvidersFailedError",
    "Unauthorized",
    "ConfigMissing",
]
