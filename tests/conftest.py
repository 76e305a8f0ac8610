"""Pytest fixtures for SlotSync tests."""

from __future__ import annotations

from datetime import UTC, datetime

import pytest

from slotsync.application.dto.source_records import DoctorRecord, SlotFetchResult
from slotsync.application.reporting import ErrorReporter
from slotsync.domain.entities import Doctor, Slot
from slotsync.domain.exceptions import SlotSyncError


# --- Fake repositories ---


class FakeDoctorRepository:
    """In-memory doctor repository recording every save."""

    def __init__(self) -> None:
        self._by_id: dict[int, Doctor] = {}
        self.saved: list[Doctor] = []
        self.save_error: SlotSyncError | None = None

    def get_by_id(self, doctor_id: int) -> Doctor | None:
        return self._by_id.get(doctor_id)

    def save(self, doctor: Doctor) -> Doctor:
        if self.save_error:
            raise self.save_error
        self._by_id[doctor.id] = doctor
        self.saved.append(doctor)
        return doctor

    def add(self, doctor: Doctor) -> None:
        """Helper to seed storage without recording a save."""
        self._by_id[doctor.id] = doctor

    def all(self) -> list[Doctor]:
        return list(self._by_id.values())


class FakeSlotRepository:
    """In-memory slot repository keyed by (doctor_id, start)."""

    def __init__(self) -> None:
        self._by_key: dict[tuple[int, datetime], Slot] = {}
        self.saved: list[Slot] = []

    def get_by_key(self, doctor_id: int, start: datetime) -> Slot | None:
        return self._by_key.get((doctor_id, start))

    def save(self, slot: Slot) -> Slot:
        self._by_key[slot.key] = slot
        self.saved.append(slot)
        return slot

    def add(self, slot: Slot) -> None:
        """Helper to seed storage without recording a save."""
        self._by_key[slot.key] = slot

    def all(self) -> list[Slot]:
        return list(self._by_key.values())


# --- Fake source and clock ---


class FakeDoctorSource:
    """Doctor source serving predefined roster and slots."""

    def __init__(self) -> None:
        self.doctors: list[DoctorRecord] = []
        self.slots: dict[int, list[SlotFetchResult]] = {}
        self.roster_error: SlotSyncError | None = None
        self.slot_errors: dict[int, SlotSyncError] = {}
        self.slot_calls: list[int] = []

    def fetch_doctors(self) -> list[DoctorRecord]:
        if self.roster_error:
            raise self.roster_error
        return list(self.doctors)

    def fetch_slots(self, doctor_id: int) -> list[SlotFetchResult]:
        self.slot_calls.append(doctor_id)
        if doctor_id in self.slot_errors:
            raise self.slot_errors[doctor_id]
        return list(self.slots.get(doctor_id, []))


class FixedClock:
    """Clock returning a settable instant."""

    def __init__(self, now: datetime) -> None:
        self.current = now

    def now(self) -> datetime:
        return self.current


# --- Fixtures ---


@pytest.fixture
def clock() -> FixedClock:
    """Clock fixed on Wednesday 2022-12-07 12:00 UTC."""
    return FixedClock(datetime(2022, 12, 7, 12, 0, tzinfo=UTC))


@pytest.fixture
def source() -> FakeDoctorSource:
    return FakeDoctorSource()


@pytest.fixture
def doctors() -> FakeDoctorRepository:
    return FakeDoctorRepository()


@pytest.fixture
def slots() -> FakeSlotRepository:
    return FakeSlotRepository()


@pytest.fixture
def reporter(clock: FixedClock) -> ErrorReporter:
    return ErrorReporter(clock)
