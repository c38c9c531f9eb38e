"""
Configuration Module
------------------
Reads runtime settings from environment variables.
"""
import os
from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict

DEFAULT_DB_URL = "sqlite:///./nladdress.db"
DEFAULT_PROVIDER_ORDER = ("postcodeapi_nu", "postcode_tech", "postcode_eu", "nominatim")
DEFAULT_PDOK_URL = "https://api.pdok.nl/bzk/locatieserver/search/v3_1/free"
DEFAULT_USER_AGENT = "nladdress/1.0"
REQUEST_TIMEOUT = 10
GEOCODE_PAGE_SIZE = 50
RATE_LIMIT_DELAY = 1.1


def _env(name: str) -> Optional[str]:
    value = os.getenv(name)
    if value is None or not value.strip():
        return None
    return value.strip()


def _split(value: Optional[str], default: Tuple[str, ...]) -> Tuple[str, ...]:
    if not value:
        return default
    return tuple(part.strip().lower() for part in value.split(",") if part.strip())


class Settings(BaseModel):
    model_config = ConfigDict(frozen=True)

    db_url: str = DEFAULT_DB_URL
    geocode_job_token: Optional[str] = None
    geocoder: str = "opencage"
    opencage_api_key: Optional[str] = None
    postcodeapi_nu_key: Optional[str] = None
    postcode_tech_token: Optional[str] = None
    postcode_eu_key: Optional[str] = None
    postcode_eu_secret: Optional[str] = None
    postcode_provider_order: Tuple[str, ...] = DEFAULT_PROVIDER_ORDER
    pdok_url: str = DEFAULT_PDOK_URL
    user_agent: str = DEFAULT_USER_AGENT
    request_timeout: float = REQUEST_TIMEOUT
    geocode_page_size: int = GEOCODE_PAGE_SIZE
    geocode_delay: float = RATE_LIMIT_DELAY
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            db_url=_env("DB_URL") or DEFAULT_DB_URL,
            geocode_job_token=_env("GEOCODE_JOB_TOKEN"),
            geocoder=(_env("GEOCODER") or "opencage").lower(),
            opencage_api_key=_env("OPENCAGE_API_KEY"),
            postcodeapi_nu_key=_env("POSTCODEAPI_NU_KEY"),
            postcode_tech_token=_env("POSTCODE_TECH_TOKEN"),
            postcode_eu_key=_env("POSTCODE_EU_KEY"),
            postcode_eu_secret=_env("POSTCODE_EU_SECRET"),
            postcode_provider_order=_split(_env("POSTCODE_PROVIDER_ORDER"), DEFAULT_PROVIDER_ORDER),
            pdok_url=_env("PDOK_LOCATIESERVER_URL") or DEFAULT_PDOK_URL,
            user_agent=_env("NOMINATIM_USER_AGENT") or DEFAULT_USER_AGENT,
            request_timeout=float(_env("REQUEST_TIMEOUT") or REQUEST_TIMEOUT),
            geocode_page_size=int(_env("GEOCODE_PAGE_SIZE") or GEOCODE_PAGE_SIZE),
            geocode_delay=float(_env("GEOCODE_DELAY") or RATE_LIMIT_DELAY),
            log_level=(_env("LOG_LEVEL") or "INFO").upper(),
        )

    def missing_for_geocode_job(self) -> List[str]:
        """Names of the settings the batch geocoding job cannot run without."""
        missing = []
        if self.geocoder == "opencage" and not self.opencage_api_key:
            missing.append("OPENCAGE_API_KEY")
        elif self.geocoder not in ("opencage", "nominatim"):
            missing.append("GEOCODER")
        return missing
