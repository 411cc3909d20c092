"""Lifespan middleware - opens the pool and seeds roles on startup."""

import logging
from collections.abc import Awaitable, Callable
from typing import Any

from psycopg_pool import AsyncConnectionPool

logger = logging.getLogger(__name__)


class LifespanMiddleware:
    """Opens the connection pool (if any), then runs startup hooks; closes on shutdown."""

    def __init__(
        self,
        pool: AsyncConnectionPool | None = None,
        on_startup: list[Callable[[], Awaitable[Any]]] | None = None,
    ) -> None:
        self._pool = pool
        self._on_startup = on_startup or []

    async def process_startup(
        self, scope: dict[str, Any], event: dict[str, Any]
    ) -> None:
        """Open pool and run startup hooks when ASGI server starts."""
        if self._pool is not None:
            await self._pool.open()
        for hook in self._on_startup:
            await hook()
        logger.info("Startup complete")

    async def process_shutdown(
        self, scope: dict[str, Any], event: dict[str, Any]
    ) -> None:
        """Close pool when ASGI server shuts down."""
        if self._pool is not None:
            await self._pool.close()
