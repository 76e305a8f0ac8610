"""Repository ports."""

from slotsync.application.ports.repositories.doctor_repository import (
    DoctorRepository,
)
from slotsync.application.ports.repositories.slot_repository import SlotRepository

__all__ = [
    "DoctorRepository",
    "SlotRepository",
]
