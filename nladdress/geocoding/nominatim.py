"""
Geocoding Module
--------------
Forward geocoding of free-text addresses through OpenStreetMap's Nominatim API.
The usage policy allows one request per second; pacing is left to the caller.
"""
import logging
from typing import Any, Dict, Optional

from nladdress.config import DEFAULT_USER_AGENT, REQUEST_TIMEOUT
from nladdress.errors import ProviderError, ProviderErrorCause
from nladdress.models.address import Coordinates
from nladdress.providers.base import ProviderAdapter
from nladdress.providers.fields import float_field

# Constants
NOMINATIM_SEARCH_URL = "https://nominatim.openstreetmap.org/search"

# Get logger
logger = logging.getLogger(__name__)


class NominatimGeocoder(ProviderAdapter):
    """Text address -> Coordinates; an empty result array is a no match."""

    name = "nominatim"
    FIELD_ALIASES = {
        "lat": ("lat",),
        "lng": ("lon",),
    }

    def __init__(self, session=None, timeout: float = REQUEST_TIMEOUT, user_agent: str = DEFAULT_USER_AGENT):
        super().__init__(session=session, timeout=timeout)
        self.user_agent = user_agent

    def build_request(self, query: str) -> Dict[str, Any]:
        return {
            "url": NOMINATIM_SEARCH_URL,
            "params": {
                "q": query,
                "format": "json",
                "countrycodes": "nl",
                "limit": 1,
            },
            "headers": {
                "User-Agent": self.user_agent,
                "Accept": "application/json",
            },
        }

    def parse(self, payload: Any, query: str) -> Optional[Coordinates]:
        if not isinstance(payload, list):
            raise ProviderError(self.name, ProviderErrorCause.MALFORMED_RESPONSE, "expected a JSON array")
        if not payload:
            return None
        item = payload[0]
        coords = Coordinates(
            lat=float_field(item, self.FIELD_ALIASES, "lat"),
            lng=float_field(item, self.FIELD_ALIASES, "lng"),
        )
        if not coords.is_complete:
            logger.warning(f"Nominatim returned a result without usable coordinates for '{query}'")
            return None
        return coords
