"""In-memory Unit of Work.

Repositories live for the lifetime of the factory, so every unit of work
created by one factory sees the same data while separate factories are
fully isolated. Writes apply immediately; commit and rollback are no-ops.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from rolegate.infrastructure.persistence.memory.role_repository import (
    InMemoryRoleRepository,
)
from rolegate.infrastructure.persistence.memory.user_role_repository import (
    InMemoryUserRoleRepository,
)


class InMemoryUnitOfWork:
    """In-memory Unit of Work with shared repositories."""

    def __init__(
        self,
        roles: InMemoryRoleRepository | None = None,
        user_roles: InMemoryUserRoleRepository | None = None,
    ) -> None:
        self.roles = roles or InMemoryRoleRepository()
        self.user_roles = user_roles or InMemoryUserRoleRepository()

    async def commit(self) -> None:
        pass

    async def rollback(self) -> None:
        pass


def create_memory_uow_factory(uow: InMemoryUnitOfWork | None = None) -> object:
    """Create UnitOfWork factory yielding the same in-memory store each call."""
    uow = uow or InMemoryUnitOfWork()

    @asynccontextmanager
    async def factory() -> AsyncIterator[InMemoryUnitOfWork]:
        yield uow

    return factory
