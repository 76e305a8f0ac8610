"""Doctor source port - authoritative roster and slots."""

from typing import Protocol

from slotsync.application.dto.source_records import DoctorRecord, SlotFetchResult


class DoctorSource(Protocol):
    """Port for the remote doctors/slots provider.

    fetch_doctors raises SourceUnavailable or MalformedRecord on failure.
    fetch_slots raises SourceUnavailable or MalformedRecord when the whole
    response is unusable; a malformed item is returned as a trailing
    SlotFetchFailure after the slots parsed before it.
    """

    def fetch_doctors(self) -> list[DoctorRecord]: ...

    def fetch_slots(self, doctor_id: int) -> list[SlotFetchResult]: ...
