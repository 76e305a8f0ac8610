"""PostgreSQL slot repository implementation."""

from datetime import datetime

import psycopg
from psycopg_pool import ConnectionPool

from slotsync.domain.entities import Slot
from slotsync.domain.exceptions import PersistenceFailure


class PostgresSlotRepository:
    """Slot repository implementation, keyed by (doctor_id, start)."""

    def __init__(self, pool: ConnectionPool) -> None:
        self._pool = pool

    def get_by_key(self, doctor_id: int, start: datetime) -> Slot | None:
        """Get slot by doctor id and start time."""
        try:
            with self._pool.connection() as conn:
                r = conn.execute(
                    "SELECT doctor_id, start_at, end_at, touched_at FROM slot "
                    "WHERE doctor_id = %s AND start_at = %s",
                    (doctor_id, start),
                ).fetchone()
        except psycopg.Error as e:
            raise PersistenceFailure(
                f"Failed to load slot {doctor_id}/{start.isoformat()}: {e}"
            ) from e
        if not r:
            return None
        return Slot(doctor_id=r[0], start=r[1], end=r[2], touched_at=r[3])

    def save(self, slot: Slot) -> Slot:
        """Insert or update slot. Start is never changed."""
        try:
            with self._pool.connection() as conn:
                conn.execute(
                    "INSERT INTO slot (doctor_id, start_at, end_at, touched_at) "
                    "VALUES (%s, %s, %s, %s) "
                    "ON CONFLICT (doctor_id, start_at) DO UPDATE "
                    "SET end_at = EXCLUDED.end_at, touched_at = EXCLUDED.touched_at",
                    (slot.doctor_id, slot.start, slot.end, slot.touched_at),
                )
        except psycopg.Error as e:
            raise PersistenceFailure(
                f"Failed to save slot {slot.doctor_id}/{slot.start.isoformat()}: {e}"
            ) from e
        return slot
