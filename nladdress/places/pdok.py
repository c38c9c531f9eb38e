"""
PDOK Locatieserver Module
-----------------------
Full-text place search against the Dutch national location server.
"""
import re
from typing import Any, Dict, List, Optional

from nladdress.config import DEFAULT_PDOK_URL, DEFAULT_USER_AGENT
from nladdress.errors import ProviderError, ProviderErrorCause
from nladdress.models.address import Coordinates
from nladdress.models.place import PlaceCandidate
from nladdress.providers.base import ProviderAdapter
from nladdress.providers.fields import FieldAliases, text_field

REMOTE_RESULT_LIMIT = 20

# centroide_ll is WKT in lng/lat order: "POINT(6.56650 53.21920)"
_POINT_RE = re.compile(r"POINT\s*\(\s*(-?[\d.]+)\s+(-?[\d.]+)\s*\)", re.IGNORECASE)


def parse_point(wkt: Optional[str]) -> Optional[Coordinates]:
    if not wkt:
        return None
    match = _POINT_RE.search(wkt)
    if not match:
        return None
    return Coordinates(lng=float(match.group(1)), lat=float(match.group(2)))


class RemotePlaceProvider(ProviderAdapter):
    name = "pdok"
    FIELD_ALIASES: FieldAliases = {
        "id": ("id",),
        "name": ("weergavenaam", "woonplaatsnaam", "display_name"),
        "municipality": ("gemeentenaam", "municipality"),
        "province": ("provincienaam", "province"),
        "centroid": ("centroide_ll",),
    }

    def __init__(self, url: str = DEFAULT_PDOK_URL, user_agent: str = DEFAULT_USER_AGENT, **kwargs):
        super().__init__(**kwargs)
        self.url = url
        self.user_agent = user_agent

    def build_request(self, query: str) -> Dict[str, Any]:
        return {
            "url": self.url,
            "params": {
                "q": query,
                "fq": "type:woonplaats",
                "rows": REMOTE_RESULT_LIMIT,
                "wt": "json",
            },
            "headers": {"Accept": "application/json", "User-Agent": self.user_agent},
        }

    def parse(self, payload: Any, query: str) -> Optional[List[PlaceCandidate]]:
        if not isinstance(payload, dict):
            raise ProviderError(self.name, ProviderErrorCause.MALFORMED_RESPONSE, "expected a JSON object")
        docs = (payload.get("response") or {}).get("docs") or []

        places = []
        for doc in docs:
            name = text_field(doc, self.FIELD_ALIASES, "name")
            if not name:
                continue
            places.append(
                PlaceCandidate(
                    id=text_field(doc, self.FIELD_ALIASES, "id") or name.lower(),
                    name=name,
                    municipality=text_field(doc, self.FIELD_ALIASES, "municipality"),
                    province=text_field(doc, self.FIELD_ALIASES, "province"),
                    coordinates=parse_point(text_field(doc, self.FIELD_ALIASES, "centroid")),
                )
            )
        return places[:REMOTE_RESULT_LIMIT] or None
