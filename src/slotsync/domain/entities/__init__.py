"""Domain entities."""

from slotsync.domain.entities.doctor import Doctor
from slotsync.domain.entities.slot import Slot

__all__ = [
    "Doctor",
    "Slot",
]
