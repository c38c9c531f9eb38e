"""Tests for nladdress.lookup.cascade module."""

import pytest

from conftest import FakeResponse, StubProvider
from nladdress.errors import (
    AllProvidersFailedError,
    InvalidFormat,
    NotFoundError,
    NotFoundReason,
    ProviderError,
    ProviderErrorCause,
)
from nladdress.lookup.cascade import AddressResolutionCascade, ProviderAttempt
from nladdress.lookup.providers import PostcodeTechProvider
from nladdress.models.address import Address
from nladdress.providers.base import Failed, NoMatch, Resolved


def make_address(street="Grote Markt", provider_id=None):
    return Address(
        street=street,
        house_number="10",
        postcode="9711 AC",
        city="Groningen",
        provider_id=provider_id,
    )


def failed(name, cause=ProviderErrorCause.SERVER_ERROR):
    return Failed(name, ProviderError(name, cause))


class TestCascadeOrder:
    def test_first_resolved_provider_wins(self):
        first = StubProvider("p1", NoMatch("p1"))
        second = StubProvider("p2", Resolved("p2", make_address(provider_id="from-p2")))
        third = StubProvider("p3", Resolved("p3", make_address(provider_id="from-p3")))

        address = AddressResolutionCascade([first, second, third]).lookup("9711AC", "10")

        assert address.provider_id == "from-p2"
        assert (first.calls, second.calls, third.calls) == (1, 1, 0)

    def test_outage_moves_on_to_next_provider(self):
        first = StubProvider("p1", failed("p1", ProviderErrorCause.TIMEOUT))
        second = StubProvider("p2", Resolved("p2", make_address()))

        address = AddressResolutionCascade([first, second]).lookup("9711AC", "10")

        assert address.street == "Grote Markt"
        assert first.calls == 1

    def test_unconfigured_providers_are_skipped(self):
        unconfigured = StubProvider("p1", Resolved("p1", make_address(street="Wrong")), configured=False)
        configured = StubProvider("p2", Resolved("p2", make_address()))

        address = AddressResolutionCascade([unconfigured, configured]).lookup("9711AC", "10")

        assert address.street == "Grote Markt"
        assert unconfigured.calls == 0

    def test_query_is_normalized_before_providers_see_it(self):
        provider = StubProvider("p1", Resolved("p1", make_address()))

        AddressResolutionCascade([provider]).lookup(" 9711 ac ", " 10 ")

        query = provider.queries[0]
        assert query.postcode.value == "9711AC"
        assert query.house_number == "10"


class TestCascadeFailures:
    def test_invalid_postcode_calls_no_provider(self):
        provider = StubProvider("p1", Resolved("p1", make_address()))

        with pytest.raises(InvalidFormat) as exc_info:
            AddressResolutionCascade([provider]).lookup("ABCDEF", "10")

        assert exc_info.value.field == "postcode"
        assert provider.calls == 0

    def test_empty_house_number_calls_no_provider(self):
        provider = StubProvider("p1", Resolved("p1", make_address()))

        with pytest.raises(InvalidFormat):
            AddressResolutionCascade([provider]).lookup("9711AC", "")

        assert provider.calls == 0

    def test_every_provider_no_match(self):
        providers = [StubProvider("p1"), StubProvider("p2")]

        with pytest.raises(NotFoundError) as exc_info:
            AddressResolutionCascade(providers).lookup("9711AC", "999")

        error = exc_info.value
        assert error.reason is NotFoundReason.NO_MATCH
        assert error.postcode == "9711 AC"
        assert error.house_number == "999"
        assert error.attempts == [ProviderAttempt("p1", "no_match"), ProviderAttempt("p2", "no_match")]

    def test_every_provider_failing_is_unavailable(self):
        providers = [
            StubProvider("p1", failed("p1", ProviderErrorCause.AUTH)),
            StubProvider("p2", failed("p2", ProviderErrorCause.TIMEOUT)),
        ]

        with pytest.raises(NotFoundError) as exc_info:
            AddressResolutionCascade(providers).lookup("9711AC", "10")

        error = exc_info.value
        assert error.reason is NotFoundReason.UNAVAILABLE
        assert [a.to_dict() for a in error.attempts] == [
            {"provider": "p1", "outcome": "error", "cause": "auth"},
            {"provider": "p2", "outcome": "error", "cause": "timeout"},
        ]

    def test_mixed_failure_and_no_match_is_no_match(self):
        providers = [
            StubProvider("p1", failed("p1")),
            StubProvider("p2", NoMatch("p2")),
        ]

        with pytest.raises(NotFoundError) as exc_info:
            AddressResolutionCascade(providers).lookup("9711AC", "10")

        assert exc_info.value.reason is NotFoundReason.NO_MATCH

    def test_no_configured_provider(self):
        providers = [StubProvider("p1", configured=False)]

        with pytest.raises(AllProvidersFailedError):
            AddressResolutionCascade(providers).lookup("9711AC", "10")

        assert providers[0].calls == 0

    def test_empty_provider_list(self):
        with pytest.raises(AllProvidersFailedError):
            AddressResolutionCascade([]).lookup("9711AC", "10")


class TestCascadeWithHttpProvider:
    def test_lowercase_postcode_resolves_to_full_address(self, fake_session):
        session = fake_session(
            FakeResponse(200, {"street": "Street", "houseNumber": "10", "city": "City"})
        )
        cascade = AddressResolutionCascade([PostcodeTechProvider(session=session)])

        address = cascade.lookup("9711 ac", "10")

        assert address.postcode == "9711 AC"
        assert address.full_address == "Street 10, 9711 AC City"
        assert session.calls[0]["url"].endswith("/9711AC/10")

    def test_provider_outage_then_resolved(self, fake_session):
        down = PostcodeTechProvider(session=fake_session(FakeResponse(503, {})))
        up = PostcodeTechProvider(session=fake_session(FakeResponse(200, {"street": "Street", "city": "City"})))

        address = AddressResolutionCascade([down, up]).lookup("9711AC", 10)

        assert address.house_number == "10"
        assert address.city == "City"
