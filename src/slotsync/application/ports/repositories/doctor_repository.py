"""Doctor repository port."""

from typing import Protocol

from slotsync.domain.entities import Doctor


class DoctorRepository(Protocol):
    """Port for doctor persistence."""

    def get_by_id(self, doctor_id: int) -> Doctor | None: ...

    def save(self, doctor: Doctor) -> Doctor: ...
