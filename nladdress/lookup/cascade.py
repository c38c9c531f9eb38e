"""
Address Resolution Cascade
------------------------
Validates the input, then asks each configured postcode provider in a fixed
priority order. The first provider that resolves the address wins; answers are
never merged. A provider outage only moves the lookup on to the next provider.
"""
import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence, Union

from nladdress.errors import (
    AllProvidersFailedError,
    NotFoundError,
    NotFoundReason,
    ProviderErrorCause,
)
from nladdress.lookup import validator
from nladdress.models.address import Address, PostcodeQuery
from nladdress.providers.base import Failed, NoMatch, ProviderAdapter, Resolved

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProviderAttempt:
    provider: str
    outcome: str  # "no_match" or "error"
    cause: Optional[ProviderErrorCause] = None

    def to_dict(self) -> dict:
        return {
            "provider": self.provider,
            "outcome": self.outcome,
            "cause": self.cause.value if self.cause else None,
        }


class AddressResolutionCascade:
    def __init__(self, providers: Sequence[ProviderAdapter]):
        self.providers = list(providers)

    def lookup(self, raw_postcode: str, house_number: Union[str, int]) -> Address:
        """
        Resolve a postcode + house number to an Address.

        Raises InvalidFormat before any provider call, NotFoundError when the
        providers were exhausted, AllProvidersFailedError when none is configured.
        """
        postcode = validator.normalize(raw_postcode)
        number = validator.normalize_house_number(house_number)
        query = PostcodeQuery(postcode=postcode, house_number=number)

        providers = [p for p in self.providers if p.is_configured()]
        if not providers:
            logger.error("Address lookup impossible: no postcode provider is configured")
            raise AllProvidersFailedError(postcode.formatted, number)

        attempts: List[ProviderAttempt] = []
        for provider in providers:
            result = provider.resolve(query)

            if isinstance(result, Resolved):
                logger.info(f"Resolved {postcode.formatted} {number} via {result.provider}")
                return result.value
            if isinstance(result, NoMatch):
                attempts.append(ProviderAttempt(result.provider, "no_match"))
            elif isinstance(result, Failed):
                attempts.append(ProviderAttempt(result.provider, "error", result.error.cause))

        # A provider that understood the request and found nothing beats a generic outage
        if any(a.outcome == "no_match" for a in attempts):
            reason = NotFoundReason.NO_MATCH
        else:
            reason = NotFoundReason.UNAVAILABLE
        logger.info(
            f"No address for {postcode.formatted} {number} after {len(attempts)} providers ({reason.value})"
        )
        raise NotFoundError(postcode.formatted, number, attempts, reason)
