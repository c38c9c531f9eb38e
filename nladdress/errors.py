"""
Errors Module
-----------
Exception hierarchy shared by the address lookup, place search and batch geocoding code.
"""
from enum import Enum
from typing import Optional, Sequence


class NLAddressError(Exception):
    """Base exception for all nladdress errors."""


class InvalidFormat(NLAddressError):
    """Input rejected before any provider is contacted."""

    def __init__(self, field: str, value: object):
        self.field = field
        self.value = value
        if field == "postcode":
            message = f"Invalid postcode format: '{value}'. Use the format 1234AB"
        else:
            message = f"Invalid {field.replace('_', ' ')}: '{value}'"
        super().__init__(message)


class QueryTooShort(NLAddressError):
    def __init__(self, query: Optional[str]):
        self.query = query
        super().__init__("Query too short")


class ProviderErrorCause(str, Enum):
    TIMEOUT = "timeout"
    NETWORK = "network"
    AUTH = "auth"
    NOT_FOUND = "not_found"
    RATE_LIMITED = "rate_limited"
    SERVER_ERROR = "server_error"
    MALFORMED_RESPONSE = "malformed_response"


class ProviderError(NLAddressError):
    """A single provider call failed; never escapes the cascade, resolver or pipeline."""

    def __init__(
        self,
        provider: str,
        cause: ProviderErrorCause,
        detail: str = "",
        status_code: Optional[int] = None,
    ):
        self.provider = provider
        self.cause = cause
        self.detail = detail
        self.status_code = status_code
        message = f"{provider}: {cause.value}"
        if status_code is not None:
            message += f" (HTTP {status_code})"
        if detail:
            message += f" - {detail}"
        super().__init__(message)


class NotFoundReason(str, Enum):
    NO_MATCH = "no_match"
    UNAVAILABLE = "unavailable"


class NotFoundError(NLAddressError):
    """
    Every configured postcode provider was tried without success.

    ``reason`` tells a genuine "no such address" apart from
    "every provider that was tried failed".
    """

    def __init__(
        self,
        postcode: str,
        house_number: str,
        attempts: Sequence = (),
        reason: NotFoundReason = NotFoundReason.NO_MATCH,
    ):
        self.postcode = postcode
        self.house_number = house_number
        self.attempts = list(attempts)
        self.reason = reason
        if reason is NotFoundReason.NO_MATCH:
            message = f"No address found for postcode {postcode} and house number {house_number}"
        else:
            message = "The address lookup service is currently unavailable, please try again later"
        super().__init__(message)


class AllProvidersFailedError(NLAddressError):
    """No postcode provider is configured, so no lookup could be attempted."""

    def __init__(self, postcode: str, house_number: str):
        self.postcode = postcode
        self.house_number = house_number
        super().__init__("No postcode provider is configured")


class Unauthorized(NLAddressError):
    def __init__(self):
        super().__init__("unauthorized")


class ConfigMissing(NLAddressError):
    def __init__(self, names: Sequence[str]):
        self.names = list(names)
        super().__init__(f"Missing configuration: {', '.join(self.names)}")


class RecordStoreError(NLAddressError):
    def __init__(self, record_id: str, detail: str):
        self.record_id = record_id
        self.detail = detail
        super().__init__(f"Record store error for {record_id}: {detail}")
