"""Records decoded from the remote doctor source."""

from dataclasses import dataclass
from datetime import datetime

from slotsync.domain.exceptions import SlotSyncError


@dataclass(frozen=True)
class DoctorRecord:
    """Roster entry as returned by the source."""

    id: int
    name: str


@dataclass(frozen=True)
class SlotRecord:
    """Slot entry as returned by the source for one doctor."""

    start: datetime
    end: datetime


@dataclass(frozen=True)
class SlotFetchFailure:
    """Marker for a doctor whose slots could not be fetched or decoded."""

    doctor_id: int
    error: SlotSyncError


SlotFetchResult = SlotRecord | SlotFetchFailure
