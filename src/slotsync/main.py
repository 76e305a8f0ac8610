"""Application entry point and composition root."""

import argparse
import logging

from slotsync import __version__
from slotsync.application.dto.sync_report import SyncReport
from slotsync.application.reporting import ErrorReporter
from slotsync.application.use_cases.synchronization.synchronize_doctor_slots import (
    SynchronizeDoctorSlotsUseCase,
)
from slotsync.config import get_settings
from slotsync.domain.value_objects import SyncOutcome
from slotsync.infrastructure.clock.system_clock import SystemClock
from slotsync.infrastructure.persistence.postgres.connection import create_pool
from slotsync.infrastructure.persistence.postgres.doctor_repository import (
    PostgresDoctorRepository,
)
from slotsync.infrastructure.persistence.postgres.slot_repository import (
    PostgresSlotRepository,
)
from slotsync.infrastructure.source.http_doctor_source import HttpDoctorSource
from slotsync.logging_config import setup_logging

logger = logging.getLogger(__name__)


def run() -> SyncReport:
    """Composition root - build dependencies from settings and sync once."""
    settings = get_settings()
    clock = SystemClock()
    reporter = ErrorReporter(clock, quiet_weekday=settings.quiet_weekday)

    with (
        create_pool(settings.database_url) as pool,
        HttpDoctorSource(
            base_url=settings.source_base_url,
            username=settings.source_username,
            password=settings.source_password,
            timeout=settings.source_timeout_seconds,
        ) as source,
    ):
        use_case = SynchronizeDoctorSlotsUseCase(
            source=source,
            doctors=PostgresDoctorRepository(pool),
            slots=PostgresSlotRepository(pool),
            clock=clock,
            reporter=reporter,
        )
        return use_case.execute()


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Exit code 1 when the run was aborted or crashed."""
    parser = argparse.ArgumentParser(description="Synchronize doctors and slots once")
    parser.add_argument("--log-level", default=None, help="Override LOG_LEVEL setting")
    args = parser.parse_args(argv)

    setup_logging(args.log_level or get_settings().log_level)
    logger.info("SlotSync v%s starting", __version__)

    try:
        report = run()
    except Exception:
        # Not part of the SlotSyncError taxonomy, e.g. a bad SOURCE_BASE_URL.
        logger.exception("Synchronization crashed")
        return 1

    logger.info(
        "Synchronization %s: %d doctors, %d slots, %d doctors with errors",
        report.outcome.value,
        report.doctors_synced,
        report.slots_synced,
        len(report.failed_doctor_ids),
    )
    return 0 if report.outcome is SyncOutcome.COMPLETED else 1


if __name__ == "__main__":
    raise SystemExit(main())
