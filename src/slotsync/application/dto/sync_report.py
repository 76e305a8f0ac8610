"""Synchronization run report DTO."""

from dataclasses import dataclass, field

from slotsync.domain.exceptions import SlotSyncError
from slotsync.domain.value_objects import SyncOutcome


@dataclass
class SyncReport:
    """Summary of one synchronization run."""

    outcome: SyncOutcome = SyncOutcome.COMPLETED
    doctors_synced: int = 0
    slots_synced: int = 0
    failed_doctor_ids: list[int] = field(default_factory=list)
    error: SlotSyncError | None = None
