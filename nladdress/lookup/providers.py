"""
Postcode Provider Adapters
------------------------
Each adapter issues one request to its provider and maps that provider's field
names onto the canonical Address through its FIELD_ALIASES table. The first
non-empty alias wins. Adding a provider means adding a class here and an entry
in POSTCODE_PROVIDERS; the cascade itself never changes.
"""
import logging
from typing import Any, Dict, List, Optional, Type

import requests

from nladdress.config import Settings
from nladdress.errors import ProviderError, ProviderErrorCause
from nladdress.geocoding.nominatim import NOMINATIM_SEARCH_URL
from nladdress.models.address import Address, Coordinates, PostcodeQuery
from nladdress.providers.base import ProviderAdapter
from nladdress.providers.fields import FieldAliases, float_field, text_field

logger = logging.getLogger(__name__)

# English and Dutch field names seen across the REST postcode services
_REST_ALIASES: FieldAliases = {
    "street": ("street", "straat", "straatnaam"),
    "house_number": ("houseNumber", "huisnummer"),
    "house_number_addition": ("houseNumberAddition", "huisnummer_toevoeging", "huisnummertoevoeging", "huisletter"),
    "city": ("city", "plaats", "woonplaats"),
    "municipality": ("municipality", "gemeente"),
    "province": ("province", "provincie"),
    "lat": ("latitude", "lat"),
    "lng": ("longitude", "lng", "lon"),
    "provider_id": ("bagId", "id"),
}


class PostcodeProvider(ProviderAdapter):
    """Adapter whose provider answers a postcode + house number with one JSON object."""

    FIELD_ALIASES: FieldAliases = _REST_ALIASES
    url_template = ""

    def build_request(self, query: PostcodeQuery) -> Dict[str, Any]:
        # The house number is opaque input and must stay a single path segment
        number = requests.utils.quote(query.house_number, safe="")
        return {
            "url": self.url_template.format(postcode=query.postcode.value, number=number),
            "headers": self.headers(),
        }

    def headers(self) -> Dict[str, str]:
        return {"Accept": "application/json"}

    def select_record(self, payload: Any) -> Optional[Any]:
        if not isinstance(payload, dict):
            raise ProviderError(self.name, ProviderErrorCause.MALFORMED_RESPONSE, "expected a JSON object")
        return payload or None

    def parse(self, payload: Any, query: PostcodeQuery) -> Optional[Address]:
        record = self.select_record(payload)
        if record is None:
            return None

        aliases = self.FIELD_ALIASES
        street = text_field(record, aliases, "street")
        if not street:
            return None

        return Address(
            street=street,
            house_number=text_field(record, aliases, "house_number") or query.house_number,
            house_number_addition=text_field(record, aliases, "house_number_addition"),
            postcode=query.postcode.formatted,
            city=text_field(record, aliases, "city"),
            province=text_field(record, aliases, "province"),
            municipality=text_field(record, aliases, "municipality"),
            coordinates=Coordinates(
                lat=float_field(record, aliases, "lat"),
                lng=float_field(record, aliases, "lng"),
            ),
            provider_id=text_field(record, aliases, "provider_id"),
        )


class PostcodeApiNuProvider(PostcodeProvider):
    """PostcodeAPI.nu v3, backed by the BAG registry. Needs an API key."""

    name = "postcodeapi_nu"
    url_template = "https://postcodeapi.nu/api/v3/lookup/{postcode}/{number}"
    not_found_statuses = frozenset({404})
    FIELD_ALIASES = {
        **_REST_ALIASES,
        # GeoJSON point: [lng, lat]
        "lat": ("latitude", "location.coordinates.1"),
        "lng": ("longitude", "location.coordinates.0"),
        "provider_id": ("bagId",),
    }

    def __init__(self, api_key: Optional[str], **kwargs):
        super().__init__(**kwargs)
        self.api_key = api_key

    def is_configured(self) -> bool:
        return bool(self.api_key)

    def headers(self) -> Dict[str, str]:
        return {"Accept": "application/json", "X-Api-Key": self.api_key or ""}


class PostcodeTechProvider(PostcodeProvider):
    name = "postcode_tech"
    url_template = "https://api.postcode.tech/v1/postcode/{postcode}/{number}"
    not_found_statuses = frozenset({404})

    def __init__(self, token: Optional[str] = None, **kwargs):
        super().__init__(**kwargs)
        self.token = token

    def headers(self) -> Dict[str, str]:
        headers = {"Accept": "application/json"}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers


class PostcodeEuProvider(PostcodeProvider):
    """postcode.eu answers 404 for unsupported routes too, so a 404 is a failure here."""

    name = "postcode_eu"
    url_template = "https://api.postcode.eu/nl/v1/postcode/{postcode}/{number}"
    FIELD_ALIASES = {
        **_REST_ALIASES,
        "provider_id": ("bagAddressableObjectId", "bagNumberDesignationId"),
    }

    def __init__(self, key: Optional[str] = None, secret: Optional[str] = None, **kwargs):
        super().__init__(**kwargs)
        self.key = key
        self.secret = secret

    def build_request(self, query: PostcodeQuery) -> Dict[str, Any]:
        request = super().build_request(query)
        if self.key and self.secret:
            request["auth"] = (self.key, self.secret)
        return request


class NominatimPostcodeProvider(PostcodeProvider):
    """
    Generic coordinate search: answers with an array of candidates.
    The first candidate is used and its nested ``address`` object is mapped.
    """

    name = "nominatim"
    FIELD_ALIASES = {
        "street": ("address.road", "address.street", "address.pedestrian"),
        "house_number": ("address.house_number",),
        "house_number_addition": (),
        "city": ("address.city", "address.town", "address.village", "address.municipality"),
        "municipality": ("address.municipality",),
        "province": ("address.state", "address.province"),
        "lat": ("lat",),
        "lng": ("lon",),
        "provider_id": ("place_id", "osm_id"),
    }

    def __init__(self, user_agent: str, **kwargs):
        super().__init__(**kwargs)
        self.user_agent = user_agent

    def build_request(self, query: PostcodeQuery) -> Dict[str, Any]:
        return {
            "url": NOMINATIM_SEARCH_URL,
            "params": {
                "q": f"{query.house_number}, {query.postcode.formatted}, Netherlands",
                "format": "json",
                "addressdetails": 1,
                "countrycodes": "nl",
                "limit": 1,
            },
            "headers": {"User-Agent": self.user_agent, "Accept": "application/json"},
        }

    def select_record(self, payload: Any) -> Optional[Any]:
        if not isinstance(payload, list):
            raise ProviderError(self.name, ProviderErrorCause.MALFORMED_RESPONSE, "expected a JSON array")
        return payload[0] if payload else None


POSTCODE_PROVIDERS: Dict[str, Type[PostcodeProvider]] = {
    "postcodeapi_nu": PostcodeApiNuProvider,
    "postcode_tech": PostcodeTechProvider,
    "postcode_eu": PostcodeEuProvider,
    "nominatim": NominatimPostcodeProvider,
}


def build_postcode_providers(settings: Settings, session=None) -> List[PostcodeProvider]:
    """Instantiate the providers named in settings, keeping their priority order."""
    common = {"session": session, "timeout": settings.request_timeout}
    options = {
        "postcodeapi_nu": {"api_key": settings.postcodeapi_nu_key},
        "postcode_tech": {"token": settings.postcode_tech_token},
        "postcode_eu": {"key": settings.postcode_eu_key, "secret": settings.postcode_eu_secret},
        "nominatim": {"user_agent": settings.user_agent},
    }

    providers = []
    for name in settings.postcode_provider_order:
        provider_cls = POSTCODE_PROVIDERS.get(name)
        if provider_cls is None:
            logger.warning(f"Ignoring unknown postcode provider '{name}'")
            continue
        providers.append(provider_cls(**common, **options[name]))
    return providers
