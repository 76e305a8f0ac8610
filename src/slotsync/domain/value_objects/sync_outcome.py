"""Synchronization run outcome."""

from enum import StrEnum


class SyncOutcome(StrEnum):
    """Terminal state of one synchronization run."""

    COMPLETED = "completed"
    ABORTED = "aborted"
