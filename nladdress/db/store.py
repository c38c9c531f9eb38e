"""
Record Store
----------
The geocoding job's view of the business table: read a bounded page of records
without coordinates, write coordinates back one record at a time.
"""
import logging
from typing import List

from sqlalchemy import or_
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from nladdress.db.database import BusinessDB
from nladdress.errors import RecordStoreError
from nladdress.models.geocode import GeocodeJobRecord

logger = logging.getLogger(__name__)


class GeocodeRecordStore:
    def __init__(self, session_factory: sessionmaker):
        self.session_factory = session_factory

    def select_pending_geocode(self, limit: int) -> List[GeocodeJobRecord]:
        """Up to *limit* records lacking coordinates, in the database's own order."""
        db = self.session_factory()
        try:
            rows = (
                db.query(BusinessDB)
                .filter(or_(BusinessDB.latitude == None, BusinessDB.longitude == None))  # noqa: E711
                .limit(limit)
                .all()
            )
            return [GeocodeJobRecord.model_validate(row) for row in rows]
        finally:
            db.close()

    def select_needing_review(self, limit: int = 100) -> List[GeocodeJobRecord]:
        """Records without coordinates that cannot be geocoded because they have no address."""
        db = self.session_factory()
        try:
            rows = (
                db.query(BusinessDB)
                .filter(or_(BusinessDB.latitude == None, BusinessDB.longitude == None))  # noqa: E711
                .filter(or_(BusinessDB.address == None, BusinessDB.address == ""))  # noqa: E711
                .limit(limit)
                .all()
            )
            return [GeocodeJobRecord.model_validate(row) for row in rows]
        finally:
            db.close()

    def update_coordinates(self, record_id: str, latitude: float, longitude: float) -> None:
        """Write coordinates to a single record and commit immediately."""
        db = self.session_factory()
        try:
            updated = (
                db.query(BusinessDB)
                .filter(BusinessDB.id == record_id)
                .update({"latitude": latitude, "longitude": longitude}, synchronize_session=False)
            )
            if updated == 0:
                db.rollback()
                raise RecordStoreError(record_id, "record not found")
            db.commit()
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Database error updating coordinates of {record_id}: {e}")
            raise RecordStoreError(record_id, str(e))
        finally:
            db.close()
