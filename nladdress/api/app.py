from functools import lru_cache
import hmac
import logging
from typing import Optional

import requests
from fastapi import Depends, FastAPI, Header, HTTPException, Query, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from nladdress.config import Settings
from nladdress.db.database import get_session_factory
from nladdress.db.store import GeocodeRecordStore
from nladdress.errors import (
    AllProvidersFailedError,
    ConfigMissing,
    InvalidFormat,
    NotFoundError,
    QueryTooShort,
    Unauthorized,
)
from nladdress.geocoding.pipeline import BatchGeocodingPipeline, build_geocoder
from nladdress.lookup.cascade import AddressResolutionCascade
from nladdress.lookup.providers import build_postcode_providers
from nladdress.places.local_index import LocalPlaceIndex
from nladdress.places.pdok import RemotePlaceProvider
from nladdress.places.resolver import LocalPlaceSearch, PlaceSearchResolver

# Configure logging
logging.basicConfig(
    level=Settings.from_env().log_level,
    format="%(asctime)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler()]
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Dutch Address API",
    description="Postcode lookup, place search and batch geocoding for Dutch addresses",
    version="1.0.0"
)


class AddressRequest(BaseModel):
    postcode: str = Field(min_length=1)
    huisnummer: str = Field(min_length=1)


# Dependencies, overridable in tests through app.dependency_overrides
@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings.from_env()

# Providers share one HTTP session and live as long as the app
@lru_cache(maxsize=4)
def _build_cascade(settings: Settings) -> AddressResolutionCascade:
    return AddressResolutionCascade(build_postcode_providers(settings, session=requests.Session()))

def get_cascade(settings: Settings = Depends(get_settings)) -> AddressResolutionCascade:
    return _build_cascade(settings)

# Built once per process so the place search cache lives as long as the app
@lru_cache(maxsize=1)
def _build_place_resolver(pdok_url: str, user_agent: str, timeout: float) -> PlaceSearchResolver:
    remote = RemotePlaceProvider(url=pdok_url, user_agent=user_agent, timeout=timeout)
    return PlaceSearchResolver(remote=remote, local=LocalPlaceIndex())

def get_place_resolver(settings: Settings = Depends(get_settings)) -> PlaceSearchResolver:
    return _build_place_resolver(settings.pdok_url, settings.user_agent, settings.request_timeout)

@lru_cache(maxsize=1)
def get_local_place_search() -> LocalPlaceSearch:
    return LocalPlaceSearch(LocalPlaceIndex())

def require_job_token(
    authorization: Optional[str] = Header(default=None),
    settings: Settings = Depends(get_settings),
) -> None:
    if not settings.geocode_job_token:
        raise ConfigMissing(["GEOCODE_JOB_TOKEN"])
    token = ""
    if authorization and authorization.startswith("Bearer "):
        token = authorization[len("Bearer "):]
    if not token or not hmac.compare_digest(token.encode(), settings.geocode_job_token.encode()):
        raise Unauthorized()

def get_record_store(settings: Settings = Depends(get_settings)) -> GeocodeRecordStore:
    return GeocodeRecordStore(get_session_factory(settings.db_url))

@lru_cache(maxsize=4)
def _build_geocoder(settings: Settings):
    return build_geocoder(settings, session=requests.Session())

def get_geocoder(settings: Settings = Depends(get_settings)):
    return _build_geocoder(settings)

def get_pipeline(
    _: None = Depends(require_job_token),
    geocoder=Depends(get_geocoder),
    store: GeocodeRecordStore = Depends(get_record_store),
) -> BatchGeocodingPipeline:
    return BatchGeocodingPipeline(store=store, geocoder=geocoder)


# Domain errors -> JSON responses
@app.exception_handler(InvalidFormat)
async def invalid_format_handler(request: Request, exc: InvalidFormat):
    return JSONResponse(status_code=400, content={"error": str(exc), "field": exc.field})

@app.exception_handler(QueryTooShort)
async def query_too_short_handler(request: Request, exc: QueryTooShort):
    return JSONResponse(status_code=400, content={"error": "Query too short"})

@app.exception_handler(NotFoundError)
async def not_found_handler(request: Request, exc: NotFoundError):
    return JSONResponse(
        status_code=404,
        content={
            "error": str(exc),
            "reason": exc.reason.value,
            "attempts": [attempt.to_dict() for attempt in exc.attempts],
        },
    )

@app.exception_handler(AllProvidersFailedError)
async def all_providers_failed_handler(request: Request, exc: AllProvidersFailedError):
    return JSONResponse(status_code=503, content={"error": str(exc), "reason": "not_configured"})

@app.exception_handler(Unauthorized)
async def unauthorized_handler(request: Request, exc: Unauthorized):
    return JSONResponse(status_code=401, content={"error": "unauthorized"})

@app.exception_handler(ConfigMissing)
async def config_missing_handler(request: Request, exc: ConfigMissing):
    logger.error(f"Configuration missing: {', '.join(exc.names)}")
    return JSONResponse(status_code=500, content={"error": "env-missing", "missing": exc.names})


def _address_response(cascade: AddressResolutionCascade, postcode: str, huisnummer: str):
    try:
        address = cascade.lookup(postcode, huisnummer)
        return address.model_dump(mode="json")
    except (InvalidFormat, NotFoundError, AllProvidersFailedError):
        raise
    except Exception as e:
        logger.error(f"Error looking up address {postcode} {huisnummer}: {str(e)}", exc_info=True)
        raise HTTPException(status_code=500, detail="An error occurred while looking up the address")


@app.get("/")
def read_root():
    return {"message": "Welcome to the Dutch Address API"}

@app.get("/postcode")
def lookup_postcode(
    postcode: str = Query(..., min_length=1),
    huisnummer: str = Query(..., min_length=1),
    cascade: AddressResolutionCascade = Depends(get_cascade),
):
    """Resolve a postcode + house number through the provider cascade."""
    return _address_response(cascade, postcode, huisnummer)

@app.post("/address")
def lookup_address(body: AddressRequest, cascade: AddressResolutionCascade = Depends(get_cascade)):
    return _address_response(cascade, body.postcode, body.huisnummer)

@app.get("/plaatsen")
def search_places(
    query: Optional[str] = None,
    resolver: PlaceSearchResolver = Depends(get_place_resolver),
):
    """
    Place name autocomplete. Falls back to the built-in places list when PDOK is
    unavailable; only a too-short query is ever reported as an error.
    """
    result = resolver.resolve(query)
    return {
        "success": True,
        "places": [place.model_dump(mode="json") for place in result.places],
        "total": len(result.places),
        "fallback": result.fallback,
    }

@app.get("/search-places")
def search_local_places(
    q: Optional[str] = None,
    search: LocalPlaceSearch = Depends(get_local_place_search),
):
    places = search.search(q)
    return {"results": [place.model_dump(mode="json") for place in places]}

@app.api_route("/geocode", methods=["GET", "POST"])
def geocode_backlog(
    limit: Optional[int] = Query(default=None, ge=1, le=500),
    settings: Settings = Depends(get_settings),
    pipeline: BatchGeocodingPipeline = Depends(get_pipeline),
):
    """
    Geocode one page of business records that still lack coordinates.
    Requires `Authorization: Bearer <GEOCODE_JOB_TOKEN>`; meant to be called on a schedule.
    """
    page_size = limit or settings.geocode_page_size
    try:
        summary = pipeline.run(page_size=page_size, per_call_delay=settings.geocode_delay)
    except Exception as e:
        logger.error(f"Error running geocoding job: {str(e)}", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))
    return summary.model_dump()
