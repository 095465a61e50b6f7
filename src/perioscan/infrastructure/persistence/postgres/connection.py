"""PostgreSQL async connection pool."""

from psycopg_pool import AsyncConnectionPool

from perioscan.config import Settings


def create_pool(settings: Settings) -> AsyncConnectionPool:
    """Connection pool sized from settings, left closed.

    PoolLifespanMiddleware opens it on ASGI startup; opening here would
    need a running event loop.
    """
    if settings.db_pool_min_size > settings.db_pool_max_size:
        raise ValueError("db_pool_min_size must not exceed db_pool_max_size")
    return AsyncConnectionPool(
        conninfo=settings.database_url,
        min_size=settings.db_pool_min_size,
        max_size=settings.db_pool_max_size,
        open=False,
        name="perioscan",
    )
