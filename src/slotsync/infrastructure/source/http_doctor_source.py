"""HTTP doctor source - roster and slots over Basic-authenticated JSON API."""

from datetime import datetime

import httpx

from slotsync.application.dto.source_records import (
    DoctorRecord,
    SlotFetchFailure,
    SlotFetchResult,
    SlotRecord,
)
from slotsync.domain.exceptions import MalformedRecord, SourceUnavailable


def _parse_timestamp(value: object) -> datetime:
    """Parse ISO-8601 timestamp with explicit offset ("Z" accepted as UTC)."""
    if not isinstance(value, str):
        raise MalformedRecord(f"Timestamp must be a string, got {value!r}")
    text = value[:-1] + "+00:00" if value.endswith("Z") else value
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError as e:
        raise MalformedRecord(f"Invalid timestamp {value!r}") from e
    if parsed.tzinfo is None:
        raise MalformedRecord(f"Timestamp {value!r} has no UTC offset")
    return parsed


def _parse_doctor(item: object) -> DoctorRecord:
    if not isinstance(item, dict):
        raise MalformedRecord(f"Doctor entry must be an object, got {item!r}")
    try:
        doctor_id, name = item["id"], item["name"]
    except KeyError as e:
        raise MalformedRecord(f"Doctor entry missing field {e}") from e
    if isinstance(doctor_id, bool) or not isinstance(doctor_id, int) or doctor_id < 0:
        raise MalformedRecord(f"Invalid doctor id {doctor_id!r}")
    if not isinstance(name, str):
        raise MalformedRecord(f"Invalid doctor name {name!r}")
    return DoctorRecord(id=doctor_id, name=name)


def _parse_slot(item: object) -> SlotRecord:
    if not isinstance(item, dict):
        raise MalformedRecord(f"Slot entry must be an object, got {item!r}")
    try:
        start, end = item["start"], item["end"]
    except KeyError as e:
        raise MalformedRecord(f"Slot entry missing field {e}") from e
    return SlotRecord(start=_parse_timestamp(start), end=_parse_timestamp(end))


class HttpDoctorSource:
    """Doctor source using the remote HTTP API. One GET per call, no retries."""

    def __init__(
        self,
        base_url: str,
        username: str,
        password: str,
        timeout: float = 10.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._client = httpx.Client(
            base_url=base_url.rstrip("/"),
            auth=httpx.BasicAuth(username, password),
            timeout=timeout,
            transport=transport,
        )

    def __enter__(self) -> "HttpDoctorSource":
        return self

    def __exit__(self, exc_type: object, exc_val: object, exc_tb: object) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    def _get_list(self, path: str) -> list:
        try:
            r = self._client.get(path)
            r.raise_for_status()
            data = r.json()
        except httpx.HTTPError as e:
            raise SourceUnavailable(f"Error loading {path} from external source: {e}") from e
        except ValueError as e:
            raise SourceUnavailable(f"Invalid JSON in response for {path}") from e
        if not isinstance(data, list):
            raise MalformedRecord(f"Expected JSON array for {path}")
        return data

    def fetch_doctors(self) -> list[DoctorRecord]:
        """Fetch the doctor roster."""
        return [_parse_doctor(item) for item in self._get_list("/doctors")]

    def fetch_slots(self, doctor_id: int) -> list[SlotFetchResult]:
        """Fetch available slots for one doctor.

        Items are parsed in order. The first malformed item becomes a
        SlotFetchFailure and ends the list; slots before it are kept.
        """
        results: list[SlotFetchResult] = []
        for item in self._get_list(f"/doctors/{doctor_id}/slots"):
            try:
                results.append(_parse_slot(item))
            except MalformedRecord as e:
                results.append(SlotFetchFailure(doctor_id=doctor_id, error=e))
                break
        return results
