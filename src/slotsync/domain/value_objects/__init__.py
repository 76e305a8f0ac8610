"""Domain value objects."""

from slotsync.domain.value_objects.doctor_name import normalize_name
from slotsync.domain.value_objects.sync_outcome import SyncOutcome

__all__ = [
    "SyncOutcome",
    "normalize_name",
]
