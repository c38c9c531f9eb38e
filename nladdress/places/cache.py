from threading import Lock
from typing import Dict, Optional

from nladdress.models.place import PlaceSearchResult


class PlaceSearchCache:
    """
    Process-lifetime cache of place search results, keyed on the exact query
    string (case sensitive). No eviction. Safe for concurrent get/put; two
    requests racing on the same key just store equal values twice.
    """

    def __init__(self):
        self._entries: Dict[str, PlaceSearchResult] = {}
        self._lock = Lock()

    def get(self, query: str) -> Optional[PlaceSearchResult]:
        with self._lock:
            return self._entries.get(query)

    def put(self, query: str, result: PlaceSearchResult) -> None:
        with self._lock:
            self._entries[query] = result

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
