"""PostgreSQL doctor repository implementation."""

import psycopg
from psycopg_pool import ConnectionPool

from slotsync.domain.entities import Doctor
from slotsync.domain.exceptions import PersistenceFailure


class PostgresDoctorRepository:
    """Doctor repository implementation. Each call is its own transaction."""

    def __init__(self, pool: ConnectionPool) -> None:
        self._pool = pool

    def get_by_id(self, doctor_id: int) -> Doctor | None:
        """Get doctor by id."""
        try:
            with self._pool.connection() as conn:
                r = conn.execute(
                    "SELECT id, name, error FROM doctor WHERE id = %s",
                    (doctor_id,),
                ).fetchone()
        except psycopg.Error as e:
            raise PersistenceFailure(f"Failed to load doctor {doctor_id}: {e}") from e
        if not r:
            return None
        return Doctor(id=r[0], name=r[1], error=r[2])

    def save(self, doctor: Doctor) -> Doctor:
        """Insert or update doctor."""
        try:
            with self._pool.connection() as conn:
                conn.execute(
                    "INSERT INTO doctor (id, name, error) VALUES (%s, %s, %s) "
                    "ON CONFLICT (id) DO UPDATE SET name = EXCLUDED.name, error = EXCLUDED.error",
                    (doctor.id, doctor.name, doctor.error),
                )
        except psycopg.Error as e:
            raise PersistenceFailure(f"Failed to save doctor {doctor.id}: {e}") from e
        return doctor
