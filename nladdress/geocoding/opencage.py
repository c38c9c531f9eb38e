"""OpenCage forward geocoder, used by the batch pipeline on its free tier."""
import logging
from typing import Any, Dict, Optional

from nladdress.errors import ProviderError, ProviderErrorCause
from nladdress.models.address import Coordinates
from nladdress.providers.base import ProviderAdapter
from nladdress.providers.fields import float_field

OPENCAGE_URL = "https://api.opencagedata.com/geocode/v1/json"

logger = logging.getLogger(__name__)


class OpenCageGeocoder(ProviderAdapter):
    name = "opencage"
    FIELD_ALIASES = {
        "lat": ("geometry.lat",),
        "lng": ("geometry.lng",),
    }

    def __init__(self, api_key: Optional[str], session=None, **kwargs):
        super().__init__(session=session, **kwargs)
        self.api_key = api_key

    def is_configured(self) -> bool:
        return bool(self.api_key)

    def build_request(self, query: str) -> Dict[str, Any]:
        return {
            "url": OPENCAGE_URL,
            "params": {
                "q": query,
                "key": self.api_key,
                "language": "nl",
                "countrycode": "nl",
                "limit": 1,
            },
        }

    def parse(self, payload: Any, query: str) -> Optional[Coordinates]:
        if not isinstance(payload, dict):
            raise ProviderError(self.name, ProviderErrorCause.MALFORMED_RESPONSE, "expected a JSON object")
        results = payload.get("results") or []
        if not results:
            return None
        best = results[0]
        coords = Coordinates(
            lat=float_field(best, self.FIELD_ALIASES, "lat"),
            lng=float_field(best, self.FIELD_ALIASES, "lng"),
        )
        if not coords.is_complete:
            logger.warning(f"OpenCage result without geometry for '{query}'")
            return None
        return coords
