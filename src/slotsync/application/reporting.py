"""Error reporting gate - keeps the quiet day free of log noise."""

import logging
from datetime import date

from slotsync.application.ports import Clock

SUNDAY = 6


def should_report(today: date, quiet_weekday: int = SUNDAY) -> bool:
    """False only when today is the quiet weekday (Monday=0 ... Sunday=6)."""
    return today.weekday() != quiet_weekday


class ErrorReporter:
    """Emits synchronization failures unless the clock says it is the quiet day."""

    def __init__(
        self,
        clock: Clock,
        logger: logging.Logger | None = None,
        quiet_weekday: int = SUNDAY,
    ) -> None:
        self._clock = clock
        self._logger = logger or logging.getLogger(__name__)
        self._quiet_weekday = quiet_weekday

    def _enabled(self) -> bool:
        return should_report(self._clock.now().date(), self._quiet_weekday)

    def run_failed(self, exc: Exception) -> None:
        if not self._enabled():
            return
        self._logger.error(
            "Error synchronizing doctor slots: %s",
            exc,
            extra={"exception": str(exc)},
        )

    def slot_fetch_failed(self, doctor_id: int, exc: Exception) -> None:
        if not self._enabled():
            return
        self._logger.info(
            "Error fetching slots for doctor %s: %s",
            doctor_id,
            exc,
            extra={"doctor_id": doctor_id, "exception": str(exc)},
        )
