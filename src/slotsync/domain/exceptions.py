"""Domain exceptions."""


class SlotSyncError(Exception):
    """Base exception for SlotSync."""

    pass


class SourceUnavailable(SlotSyncError):
    """Remote source could not be reached or returned an unreadable body."""

    pass


class MalformedRecord(SlotSyncError):
    """Remote source returned a record with missing or invalid fields."""

    pass


class PersistenceFailure(SlotSyncError):
    """Storage layer failed to read or write an entity."""

    pass
