"""Slot entity - one bookable time range of a doctor."""

from dataclasses import dataclass
from datetime import datetime, timedelta

STALE_AFTER = timedelta(minutes=5)


def is_stale(last_touched: datetime, now: datetime) -> bool:
    """True when the slot was last touched more than STALE_AFTER ago."""
    return now - last_touched > STALE_AFTER


@dataclass
class Slot:
    """Slot identified by (doctor_id, start). Only end and touched_at change."""

    doctor_id: int
    start: datetime
    end: datetime
    touched_at: datetime

    @classmethod
    def create(
        cls, doctor_id: int, start: datetime, end: datetime, now: datetime
    ) -> "Slot":
        return cls(doctor_id=doctor_id, start=start, end=end, touched_at=now)

    @property
    def key(self) -> tuple[int, datetime]:
        return self.doctor_id, self.start

    def is_stale(self, now: datetime) -> bool:
        return is_stale(self.touched_at, now)

    def refresh(self, end: datetime, now: datetime) -> None:
        """Overwrite end time and mark the slot as touched at now."""
        self.end = end
        self.touched_at = now
