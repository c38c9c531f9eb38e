"""
Batch Geocoding Pipeline
----------------------
Geocodes one bounded page of stored records that still lack coordinates.
Records are handled strictly one after another with a fixed pause between
provider calls, so the provider's rate limit holds. Each resolved record is
committed on its own: a crash or a failing record never loses earlier progress,
and the next run simply picks up whatever still has no coordinates.
"""
import logging
import time
from typing import Callable

from nladdress.config import GEOCODE_PAGE_SIZE, RATE_LIMIT_DELAY, Settings
from nladdress.db.store import GeocodeRecordStore
from nladdress.errors import ConfigMissing, RecordStoreError
from nladdress.geocoding.nominatim import NominatimGeocoder
from nladdress.geocoding.opencage import OpenCageGeocoder
from nladdress.models.geocode import GeocodeJobRecord, GeocodeSummary
from nladdress.providers.base import Failed, ProviderAdapter, Resolved

# Get logger
logger = logging.getLogger(__name__)


def build_geocoder(settings: Settings, session=None) -> ProviderAdapter:
    """Pick the single geocoding provider the job runs against."""
    missing = settings.missing_for_geocode_job()
    if missing:
        raise ConfigMissing(missing)
    if settings.geocoder == "nominatim":
        return NominatimGeocoder(session=session, timeout=settings.request_timeout, user_agent=settings.user_agent)
    return OpenCageGeocoder(settings.opencage_api_key, session=session, timeout=settings.request_timeout)


class BatchGeocodingPipeline:
    def __init__(
        self,
        store: GeocodeRecordStore,
        geocoder: ProviderAdapter,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.store = store
        self.geocoder = geocoder
        self._sleep = sleep

    def run(self, page_size: int = GEOCODE_PAGE_SIZE, per_call_delay: float = RATE_LIMIT_DELAY) -> GeocodeSummary:
        """
        Process one page of the backlog.

        Args:
            page_size: Maximum number of pending records to read
            per_call_delay: Seconds to wait between two provider calls, whatever the outcome

        Returns:
            GeocodeSummary with updated / skipped / failed counts
        """
        if page_size < 1:
            raise ValueError("page_size must be at least 1")
        if per_call_delay < 0:
            raise ValueError("per_call_delay must not be negative")

        start_time = time.time()
        records = self.store.select_pending_geocode(page_size)
        logger.info(f"Found {len(records)} records without coordinates. Geocoding with {self.geocoder.name}...")

        summary = GeocodeSummary()
        calls_made = 0
        for i, record in enumerate(records):
            address = (record.address or "").strip()
            if not address:
                summary.skipped += 1
                logger.info(f"Skipped {record.id}: no address")
                continue

            if calls_made:
                self._sleep(per_call_delay)
            calls_made += 1

            try:
                outcome = self._geocode_record(record, address)
            except Exception as e:
                outcome = "failed"
                logger.error(f"Unexpected error geocoding {record.id}: {e}", exc_info=True)

            if outcome == "updated":
                summary.updated += 1
            elif outcome == "skipped":
                summary.skipped += 1
            else:
                summary.failed += 1

            # Log progress every 10 records or at the end
            if (i + 1) % 10 == 0 or (i + 1) == len(records):
                logger.info(f"Geocoding progress: {i + 1}/{len(records)}")

        duration = time.time() - start_time
        logger.info(
            f"Geocoding run completed in {duration:.1f} seconds: "
            f"{summary.updated} updated, {summary.skipped} skipped, {summary.failed} failed"
        )
        return summary

    def _geocode_record(self, record: GeocodeJobRecord, address: str) -> str:
        result = self.geocoder.resolve(address)

        if isinstance(result, Failed):
            logger.error(f"Geocoding failed for {record.id}: {result.error}")
            return "failed"
        if not isinstance(result, Resolved):
            logger.info(f"No geocoding result for {record.id}")
            return "skipped"

        coords = result.value
        try:
            self.store.update_coordinates(record.id, coords.lat, coords.lng)
        except RecordStoreError as e:
            logger.error(f"Could not store coordinates for {record.id}: {e}")
            return "failed"
        logger.info(f"Updated {record.id} with ({coords.lat}, {coords.lng})")
        return "updated"
