"""Synchronize doctor slots use case."""

import logging

from slotsync.application.dto.source_records import (
    DoctorRecord,
    SlotFetchFailure,
    SlotFetchResult,
    SlotRecord,
)
from slotsync.application.dto.sync_report import SyncReport
from slotsync.application.ports import Clock, DoctorSource
from slotsync.application.ports.repositories import DoctorRepository, SlotRepository
from slotsync.application.reporting import ErrorReporter
from slotsync.domain.entities import Doctor, Slot
from slotsync.domain.exceptions import MalformedRecord, SlotSyncError, SourceUnavailable
from slotsync.domain.value_objects import SyncOutcome, normalize_name

logger = logging.getLogger(__name__)


class SynchronizeDoctorSlotsUseCase:
    """Upsert the remote roster and each doctor's slots into local storage.

    A roster failure aborts the run before anything is saved. A slot fetch
    failure only marks that doctor with an error. Persistence failures are
    not isolated and abort the run at whatever point they happen.
    """

    def __init__(
        self,
        source: DoctorSource,
        doctors: DoctorRepository,
        slots: SlotRepository,
        clock: Clock,
        reporter: ErrorReporter,
    ) -> None:
        self._source = source
        self._doctors = doctors
        self._slots = slots
        self._clock = clock
        self._reporter = reporter

    def execute(self) -> SyncReport:
        """Run one synchronization pass."""
        report = SyncReport()
        try:
            roster = self._source.fetch_doctors()
            logger.debug("Fetched %d doctors", len(roster))
            for record in roster:
                self._synchronize_doctor(record, report)
        except SlotSyncError as e:
            report.outcome = SyncOutcome.ABORTED
            report.error = e
            self._reporter.run_failed(e)
        return report

    def _synchronize_doctor(self, record: DoctorRecord, report: SyncReport) -> None:
        doctor = self._get_doctor(record.id)
        doctor.name = normalize_name(record.name)
        doctor.clear_error()

        for result in self._fetch_slot_results(doctor.id):
            if isinstance(result, SlotFetchFailure):
                self._reporter.slot_fetch_failed(doctor.id, result.error)
                doctor.mark_error()
                continue
            self._slots.save(self._reconcile_slot(doctor.id, result))
            report.slots_synced += 1

        self._doctors.save(doctor)
        report.doctors_synced += 1
        if doctor.error:
            report.failed_doctor_ids.append(doctor.id)

    def _get_doctor(self, doctor_id: int) -> Doctor:
        return self._doctors.get_by_id(doctor_id) or Doctor.placeholder(doctor_id)

    def _fetch_slot_results(self, doctor_id: int) -> list[SlotFetchResult]:
        try:
            return list(self._source.fetch_slots(doctor_id))
        except (SourceUnavailable, MalformedRecord) as e:
            return [SlotFetchFailure(doctor_id=doctor_id, error=e)]

    def _reconcile_slot(self, doctor_id: int, record: SlotRecord) -> Slot:
        now = self._clock.now()
        slot = self._slots.get_by_key(doctor_id, record.start)
        if slot is None:
            slot = Slot.create(doctor_id, record.start, record.end, now)
        # Stale slots are saved again unchanged.
        if not slot.is_stale(now):
            slot.refresh(record.end, now)
        return slot
