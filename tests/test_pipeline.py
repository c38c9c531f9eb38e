"""Tests for nladdress.geocoding.pipeline and the record store it drives."""

import pytest

from conftest import MappingGeocoder
from nladdress.config import Settings
from nladdress.errors import ConfigMissing, ProviderError, ProviderErrorCause, RecordStoreError
from nladdress.geocoding.nominatim import NominatimGeocoder
from nladdress.geocoding.opencage import OpenCageGeocoder
from nladdress.geocoding.pipeline import BatchGeocodingPipeline, build_geocoder
from nladdress.models.address import Coordinates
from nladdress.providers.base import Failed, NoMatch, Resolved


def resolved(lat, lng):
    return Resolved("stub-geocoder", Coordinates(lat=lat, lng=lng))


@pytest.fixture()
def sleeps():
    return []


@pytest.fixture()
def make_pipeline(store, sleeps):
    def _make(results):
        geocoder = MappingGeocoder(results)
        return BatchGeocodingPipeline(store, geocoder, sleep=sleeps.append), geocoder

    return _make


class TestBatchGeocodingPipeline:
    def test_failing_record_does_not_stop_the_run(self, seed, make_pipeline, fetch_record, sleeps):
        seed(
            {"id": "r1", "address": "Grote Markt 1, Groningen"},
            {"id": "r2", "address": "Dam 1, Amsterdam"},
            {"id": "r3", "address": "Coolsingel 40, Rotterdam"},
        )
        pipeline, geocoder = make_pipeline(
            {
                "Grote Markt 1, Groningen": resolved(53.2192, 6.5665),
                "Dam 1, Amsterdam": Failed(
                    "stub-geocoder", ProviderError("stub-geocoder", ProviderErrorCause.SERVER_ERROR)
                ),
                "Coolsingel 40, Rotterdam": resolved(51.9225, 4.4792),
            }
        )

        summary = pipeline.run(page_size=50, per_call_delay=1.1)

        assert (summary.updated, summary.skipped, summary.failed) == (2, 0, 1)
        assert summary.processed == 3
        assert len(geocoder.calls) == 3
        assert sleeps == [1.1, 1.1]
        assert fetch_record("r1").latitude == 53.2192
        assert fetch_record("r2").latitude is None
        assert fetch_record("r2").longitude is None
        assert fetch_record("r3").longitude == 4.4792

    def test_empty_address_is_skipped_without_a_call(self, seed, make_pipeline, sleeps):
        seed(
            {"id": "r1", "address": ""},
            {"id": "r2", "address": None},
            {"id": "r3", "address": "   "},
            {"id": "r4", "address": "Dam 1, Amsterdam"},
        )
        pipeline, geocoder = make_pipeline({"Dam 1, Amsterdam": resolved(52.37, 4.89)})

        summary = pipeline.run(per_call_delay=0)

        assert (summary.updated, summary.skipped, summary.failed) == (1, 3, 0)
        assert geocoder.calls == ["Dam 1, Amsterdam"]
        assert sleeps == []

    def test_no_match_is_skipped(self, seed, make_pipeline, fetch_record):
        seed({"id": "r1", "address": "Nergens 1"})
        pipeline, _ = make_pipeline({"Nergens 1": NoMatch("stub-geocoder")})

        summary = pipeline.run()

        assert (summary.updated, summary.skipped, summary.failed) == (0, 1, 0)
        assert fetch_record("r1").latitude is None

    def test_unexpected_exception_counts_as_failed(self, seed, make_pipeline):
        seed({"id": "r1", "address": "Boom 1"}, {"id": "r2", "address": "Dam 1"})
        pipeline, _ = make_pipeline({"Boom 1": RuntimeError("boom"), "Dam 1": resolved(52.37, 4.89)})

        summary = pipeline.run()

        assert (summary.updated, summary.failed) == (1, 1)

    def test_store_error_counts_as_failed(self, seed, make_pipeline, store, monkeypatch):
        seed({"id": "r1", "address": "Dam 1"})
        pipeline, _ = make_pipeline({"Dam 1": resolved(52.37, 4.89)})

        def broken_update(record_id, latitude, longitude):
            raise RecordStoreError(record_id, "database is locked")

        monkeypatch.setattr(store, "update_coordinates", broken_update)

        summary = pipeline.run()

        assert (summary.updated, summary.failed) == (0, 1)

    def test_only_records_without_coordinates_are_read(self, seed, make_pipeline):
        seed(
            {"id": "done", "address": "Dam 1", "latitude": 52.37, "longitude": 4.89},
            {"id": "half", "address": "Coolsingel 40", "latitude": 51.92},
        )
        pipeline, geocoder = make_pipeline({"Coolsingel 40": resolved(51.9225, 4.4792)})

        summary = pipeline.run()

        assert summary.updated == 1
        assert geocoder.calls == ["Coolsingel 40"]

    def test_page_size_bounds_the_run(self, seed, make_pipeline):
        seed(*[{"id": f"r{i}", "address": f"Straat {i}"} for i in range(5)])
        pipeline, geocoder = make_pipeline({f"Straat {i}": resolved(52.0, 5.0) for i in range(5)})

        assert pipeline.run(page_size=2).updated == 2
        assert pipeline.run(page_size=10).updated == 3
        assert pipeline.run(page_size=10).processed == 0
        assert len(geocoder.calls) == 5

    def test_empty_backlog(self, make_pipeline, sleeps):
        pipeline, geocoder = make_pipeline({})

        summary = pipeline.run()

        assert summary.processed == 0
        assert geocoder.calls == []
        assert sleeps == []

    @pytest.mark.parametrize(("page_size", "delay"), [(0, 1.1), (-1, 1.1), (10, -0.5)])
    def test_invalid_arguments(self, make_pipeline, page_size, delay):
        pipeline, _ = make_pipeline({})
        with pytest.raises(ValueError):
            pipeline.run(page_size=page_size, per_call_delay=delay)


class TestRecordStore:
    def test_update_unknown_record(self, store):
        with pytest.raises(RecordStoreError) as exc_info:
            store.update_coordinates("missing", 52.0, 5.0)
        assert exc_info.value.record_id == "missing"

    def test_select_needing_review(self, seed, store):
        seed(
            {"id": "no-address", "address": None},
            {"id": "blank", "address": ""},
            {"id": "ok", "address": "Dam 1"},
            {"id": "done", "address": None, "latitude": 52.0, "longitude": 5.0},
        )
        ids = sorted(record.id for record in store.select_needing_review())
        assert ids == ["blank", "no-address"]

    def test_records_are_detached_snapshots(self, seed, store):
        seed({"id": "r1", "name": "Bakkerij", "address": "Dam 1"})
        record = store.select_pending_geocode(10)[0]
        assert record.address == "Dam 1"
        assert record.latitude is None


class TestBuildGeocoder:
    def test_opencage_requires_key(self):
        with pytest.raises(ConfigMissing) as exc_info:
            build_geocoder(Settings(geocoder="opencage"))
        assert exc_info.value.names == ["OPENCAGE_API_KEY"]

    def test_unknown_geocoder(self):
        with pytest.raises(ConfigMissing) as exc_info:
            build_geocoder(Settings(geocoder="google"))
        assert exc_info.value.names == ["GEOCODER"]

    def test_opencage(self):
        geocoder = build_geocoder(Settings(opencage_api_key="key", request_timeout=4))
        assert isinstance(geocoder, OpenCageGeocoder)
        assert geocoder.timeout == 4

    def test_nominatim_needs_no_key(self):
        geocoder = build_geocoder(Settings(geocoder="nominatim", user_agent="test/1.0"))
        assert isinstance(geocoder, NominatimGeocoder)
        assert geocoder.user_agent == "test/1.0"
