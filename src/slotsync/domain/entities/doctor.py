"""Doctor entity."""

from dataclasses import dataclass

PLACEHOLDER_NAME = "New unnamed doctor"


@dataclass
class Doctor:
    """Doctor as known to the remote source. Id is assigned remotely."""

    id: int
    name: str
    error: bool = False

    @classmethod
    def placeholder(cls, doctor_id: int) -> "Doctor":
        """Doctor seen for the first time, before its name is applied."""
        return cls(id=doctor_id, name=PLACEHOLDER_NAME)

    def mark_error(self) -> None:
        self.error = True

    def clear_error(self) -> None:
        self.error = False
