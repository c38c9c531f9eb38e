from typing import Optional

from pydantic import BaseModel, ConfigDict


class GeocodeJobRecord(BaseModel):
    """Detached snapshot of a stored business record awaiting coordinates."""

    model_config = ConfigDict(frozen=True, from_attributes=True)

    id: str
    address: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None


class GeocodeSummary(BaseModel):
    updated: int = 0
    skipped: int = 0
    failed: int = 0

    @property
    def processed(self) -> int:
        return self.updated + self.skipped + self.failed
