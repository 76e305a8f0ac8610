"""Slot repository port."""

from datetime import datetime
from typing import Protocol

from slotsync.domain.entities import Slot


class SlotRepository(Protocol):
    """Port for slot persistence, keyed by (doctor_id, start)."""

    def get_by_key(self, doctor_id: int, start: datetime) -> Slot | None: ...

    def save(self, slot: Slot) -> Slot: ...
