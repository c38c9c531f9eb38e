"""Scored search over the built-in places dataset."""
from typing import Iterable, List, Mapping, Optional, Tuple

from nladdress.models.place import MatchKind, PlaceCandidate
from nladdress.places.dataset import PLACES

LOCAL_RESULT_LIMIT = 8


def score_place(place: Mapping[str, str], query: str) -> Optional[Tuple[int, MatchKind]]:
    """
    Score one place against an already lower-cased query.

    exact name 100, name prefix 90, name substring 70,
    municipality substring 60, province substring 50, otherwise None.
    """
    name = (place.get("name") or "").lower()
    municipality = (place.get("municipality") or "").lower()
    province = (place.get("province") or "").lower()

    if name == query:
        return 100, MatchKind.EXACT
    if name.startswith(query):
        return 90, MatchKind.STARTS
    if query in name:
        return 70, MatchKind.CONTAINS
    if query in municipality:
        return 60, MatchKind.MUNICIPALITY
    if query in province:
        return 50, MatchKind.PROVINCE
    return None


class LocalPlaceIndex:
    def __init__(self, places: Iterable[Mapping[str, str]] = PLACES, limit: int = LOCAL_RESULT_LIMIT):
        self.places = [p for p in places if p.get("name")]
        self.limit = limit

    def search(self, query: str) -> List[PlaceCandidate]:
        needle = query.strip().lower()
        if not needle:
            return []

        results = []
        for place in self.places:
            scored = score_place(place, needle)
            if scored is None:
                continue
            score, match = scored
            results.append(
                PlaceCandidate(
                    id=place.get("id") or place["name"].lower(),
                    name=place["name"],
                    municipality=place.get("municipality") or None,
                    province=place.get("province") or None,
                    score=score,
                    match=match,
                )
            )

        # sorted() is stable: equal scores keep dataset order
        results = sorted(results, key=lambda candidate: candidate.score, reverse=True)
        return results[: self.limit]
