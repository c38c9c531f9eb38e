"""
Provider Adapter Base
-------------------
Every external provider issues exactly one HTTP request per lookup and reports
one of three outcomes: Resolved, NoMatch or Failed. Failures are logged here and
returned as values so that callers decide how to fall back.
"""
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, FrozenSet, Optional, Union

import requests

from nladdress.config import REQUEST_TIMEOUT
from nladdress.errors import ProviderError, ProviderErrorCause

# Get logger
logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Resolved:
    provider: str
    value: Any


@dataclass(frozen=True)
class NoMatch:
    provider: str


@dataclass(frozen=True)
class Failed:
    provider: str
    error: ProviderError


ProviderResult = Union[Resolved, NoMatch, Failed]


def classify_status(status_code: int) -> ProviderErrorCause:
    if status_code in (401, 403):
        return ProviderErrorCause.AUTH
    if status_code == 404:
        return ProviderErrorCause.NOT_FOUND
    if status_code in (402, 429):
        return ProviderErrorCause.RATE_LIMITED
    return ProviderErrorCause.SERVER_ERROR


class ProviderAdapter(ABC):
    """
    Base class for a single external provider.

    Subclasses build the request (``build_request``) and map the decoded JSON
    payload onto a canonical value (``parse``), returning ``None`` when the
    provider understood the request but found nothing.
    """

    name = "provider"
    # HTTP statuses this provider uses to say "no data" rather than "failure"
    not_found_statuses: FrozenSet[int] = frozenset()

    def __init__(self, session: Optional[requests.Session] = None, timeout: float = REQUEST_TIMEOUT):
        self.session = session or requests.Session()
        self.timeout = timeout

    def is_configured(self) -> bool:
        return True

    @abstractmethod
    def build_request(self, query: Any) -> Dict[str, Any]:
        """Return keyword arguments for ``session.get``: url, params, headers, auth."""

    @abstractmethod
    def parse(self, payload: Any, query: Any) -> Any:
        """Map a decoded payload to a value, or ``None`` for no match."""

    def resolve(self, query: Any) -> ProviderResult:
        try:
            payload = self._request(query)
            value = None if payload is None else self._parse(payload, query)
        except ProviderError as e:
            logger.warning(f"Provider {self.name} failed: {e}")
            return Failed(self.name, e)

        if value is None:
            logger.info(f"Provider {self.name} found no match")
            return NoMatch(self.name)
        logger.info(f"Provider {self.name} resolved the query")
        return Resolved(self.name, value)

    def _request(self, query: Any) -> Any:
        request = self.build_request(query)
        url = request.pop("url")
        # Exception text can echo the request URL, and with it any API key
        try:
            response = self.session.get(url, timeout=self.timeout, **request)
        except requests.Timeout as e:
            raise ProviderError(self.name, ProviderErrorCause.TIMEOUT, type(e).__name__)
        except requests.RequestException as e:
            raise ProviderError(self.name, ProviderErrorCause.NETWORK, type(e).__name__)

        status = response.status_code
        if status in self.not_found_statuses:
            return None
        if not 200 <= status < 300:
            raise ProviderError(self.name, classify_status(status), status_code=status)

        try:
            return response.json()
        except ValueError as e:
            raise ProviderError(
                self.name, ProviderErrorCause.MALFORMED_RESPONSE, f"invalid JSON: {e}", status
            )

    def _parse(self, payload: Any, query: Any) -> Any:
        try:
            return self.parse(payload, query)
        except ProviderError:
            raise
        except (KeyError, IndexError, TypeError, ValueError, AttributeError) as e:
            raise ProviderError(self.name, ProviderErrorCause.MALFORMED_RESPONSE, str(e))
