"""
Place Search Resolver
-------------------
Best-effort place search for autocomplete: the remote PDOK provider first, the
local scored index whenever the remote call fails. Never raises past the
query-length check.
"""
import logging
from typing import List, Optional

from nladdress.errors import QueryTooShort
from nladdress.models.place import PlaceCandidate, PlaceSearchResult
from nladdress.places.cache import PlaceSearchCache
from nladdress.places.local_index import LocalPlaceIndex
from nladdress.places.pdok import REMOTE_RESULT_LIMIT, RemotePlaceProvider
from nladdress.providers.base import Failed, Resolved

logger = logging.getLogger(__name__)

MIN_QUERY_LENGTH = 2


def check_query(query: Optional[str]) -> str:
    if query is None or len(query.strip()) < MIN_QUERY_LENGTH:
        raise QueryTooShort(query)
    return query


class PlaceSearchResolver:
    def __init__(
        self,
        remote: Optional[RemotePlaceProvider],
        local: LocalPlaceIndex,
        cache: Optional[PlaceSearchCache] = None,
    ):
        self.remote = remote
        self.local = local
        self.cache = cache if cache is not None else PlaceSearchCache()

    def search(self, query: str) -> List[PlaceCandidate]:
        return self.resolve(query).places

    def resolve(self, query: str) -> PlaceSearchResult:
        check_query(query)

        cached = self.cache.get(query)
        if cached is not None:
            logger.debug(f"Place search cache hit for '{query}'")
            return cached

        result = self._search_remote(query)
        if result is None:
            result = PlaceSearchResult(places=self.local.search(query), fallback=True)
            logger.info(f"Local place index answered '{query}' with {len(result.places)} places")

        self.cache.put(query, result)
        return result

    def _search_remote(self, query: str) -> Optional[PlaceSearchResult]:
        """Return the remote answer, or None when the local index has to take over."""
        if self.remote is None:
            return None

        outcome = self.remote.resolve(query)
        if isinstance(outcome, Resolved):
            return PlaceSearchResult(places=outcome.value[:REMOTE_RESULT_LIMIT])
        if isinstance(outcome, Failed):
            logger.warning(f"Remote place search failed ({outcome.error.cause.value}), using local places")
            return None
        return PlaceSearchResult(places=[])


class LocalPlaceSearch:
    """Local-only place search with its own result cache."""

    def __init__(self, local: LocalPlaceIndex, cache: Optional[PlaceSearchCache] = None):
        self.local = local
        self.cache = cache if cache is not None else PlaceSearchCache()

    def search(self, query: str) -> List[PlaceCandidate]:
        check_query(query)

        cached = self.cache.get(query)
        if cached is not None:
            return cached.places

        result = PlaceSearchResult(places=self.local.search(query), fallback=True)
        self.cache.put(query, result)
        logger.info(f"Found {len(result.places)} local places for '{query}'")
        return result.places
