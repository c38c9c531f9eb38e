"""
Main entrypoint for the batch geocoding job.

Usage:
    Run one page of the backlog directly (`python main.py`), e.g. from cron.
    Every run geocodes at most GEOCODE_PAGE_SIZE records without coordinates;
    schedule it repeatedly until the backlog is empty.

Configuration is read from environment variables (DB_URL, GEOCODER, OPENCAGE_API_KEY, ...).
"""
import logging

from nladdress.config import Settings
from nladdress.db.database import create_tables, get_engine, get_session_factory
from nladdress.db.store import GeocodeRecordStore
from nladdress.errors import ConfigMissing
from nladdress.geocoding.pipeline import BatchGeocodingPipeline, build_geocoder

logger = logging.getLogger(__name__)

def main():
    """
    Main function to run one geocoding pass.
    """
    settings = Settings.from_env()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler()]
    )

    try:
        geocoder = build_geocoder(settings)
    except ConfigMissing as e:
        print(f"Missing configuration: {', '.join(e.names)}")
        return 2

    try:
        # Initialize database tables
        create_tables(get_engine(settings.db_url))
        session_factory = get_session_factory(settings.db_url)

        pipeline = BatchGeocodingPipeline(GeocodeRecordStore(session_factory), geocoder)
        print(f"Geocoding up to {settings.geocode_page_size} records without coordinates...")
        summary = pipeline.run(page_size=settings.geocode_page_size, per_call_delay=settings.geocode_delay)

        print(f"\nGeocoding run completed")
        print(f"  Records updated: {summary.updated}")
        print(f"  Records skipped: {summary.skipped}")
        print(f"  Records failed: {summary.failed}")

        return 0
    except Exception as e:
        logger.error(f"An error occurred in the main function: {str(e)}", exc_info=True)
        return 1


if __name__ == "__main__":
    exit_code = main()
    print(f"Exiting with code {exit_code}")
    raise SystemExit(exit_code)
