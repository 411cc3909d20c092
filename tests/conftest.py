"""Pytest fixtures for RoleGate tests."""

from __future__ import annotations

import pytest

from rolegate.domain.entities import Role, UserRoleAssignment
from rolegate.infrastructure.permission.access_gate import AccessGate
from rolegate.infrastructure.permission.authorization_engine import AuthorizationEngine
from rolegate.infrastructure.persistence.memory.unit_of_work import (
    InMemoryUnitOfWork,
    create_memory_uow_factory,
)


def add_role(uow: InMemoryUnitOfWork, role_id: str, *perms: str) -> Role:
    """Helper to add role for tests."""
    role = Role(id=role_id, permissions=frozenset(perms))
    uow.roles._by_id[role_id] = role
    return role


def assign(uow: InMemoryUnitOfWork, user_id: str, role_id: str | None) -> None:
    """Helper to set a user's role for tests."""
    uow.user_roles._by_user[user_id] = UserRoleAssignment(user_id=user_id, role_id=role_id)


class StaticIdentityProvider:
    """Identity provider returning a fixed user id."""

    def __init__(self, user_id: str | None) -> None:
        self.user_id = user_id

    def current_user_id(self) -> str | None:
        return self.user_id


# --- Fixtures ---


@pytest.fixture
def fake_uow() -> InMemoryUnitOfWork:
    """Fresh in-memory UnitOfWork for each test, seeded with the editor scenario.

    Roles: editor = {edit, publish}, viewer = {read}, empty = {}.
    Users: u1 -> editor, u2 -> explicitly no role, u3 -> deleted role "ghost".
    """
    uow = InMemoryUnitOfWork()
    add_role(uow, "editor", "edit", "publish")
    add_role(uow, "viewer", "read")
    add_role(uow, "empty")
    assign(uow, "u1", "editor")
    assign(uow, "u2", None)
    assign(uow, "u3", "ghost")
    return uow


@pytest.fixture
def uow_factory(fake_uow: InMemoryUnitOfWork):
    """Factory returning async context manager over the seeded store."""
    return create_memory_uow_factory(fake_uow)


@pytest.fixture
def engine(uow_factory) -> AuthorizationEngine:
    """Authorization engine without a current identity."""
    return AuthorizationEngine(uow_factory)


@pytest.fixture
def access_gate(engine: AuthorizationEngine) -> AccessGate:
    return AccessGate(engine)


@pytest.fixture
def mock_permission_checker():
    """AsyncMock for PermissionChecker - grants everything by default."""
    from unittest.mock import AsyncMock

    mock = AsyncMock()
    mock.role_can.return_value = True
    mock.user_can.return_value = True
    mock.current_user_can.return_value = True
    return mock
