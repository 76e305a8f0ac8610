"""PostgreSQL connection pool."""

from psycopg_pool import ConnectionPool


def create_pool(conninfo: str, min_size: int = 1, max_size: int = 4) -> ConnectionPool:
    """Create connection pool.

    Pool is created with open=False. Caller must call pool.open() before
    use, or use the pool as a context manager.
    """
    return ConnectionPool(
        conninfo=conninfo,
        min_size=min_size,
        max_size=max_size,
        open=False,
    )
