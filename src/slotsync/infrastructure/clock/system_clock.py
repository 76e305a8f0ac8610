"""System wall clock."""

from datetime import datetime


class SystemClock:
    """Clock backed by the system time, in the host's local time zone.

    The quiet-day gate reads the weekday from this value, so it follows the
    server's calendar rather than UTC.
    """

    def now(self) -> datetime:
        return datetime.now().astimezone()
