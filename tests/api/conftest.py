"""Fixtures for API tests."""

import pytest
from falcon.testing import TestClient

from rolegate.application.use_cases.role.create_role import CreateRoleUseCase
from rolegate.application.use_cases.role.delete_role import DeleteRoleUseCase
from rolegate.application.use_cases.role.get_role import GetRoleUseCase, ListRolesUseCase
from rolegate.application.use_cases.user_role.get_own_role import GetOwnRoleUseCase
from rolegate.application.use_cases.user_role.set_user_role import SetUserRoleUseCase
from rolegate.infrastructure.auth.identity import RequestIdentityProvider
from rolegate.infrastructure.permission.access_gate import AccessGate
from rolegate.infrastructure.permission.authorization_engine import AuthorizationEngine
from rolegate.interfaces.api.app import create_app
from rolegate.interfaces.api.middleware.auth import AuthMiddleware
from rolegate.interfaces.api.middleware.cors import CORSMiddleware
from rolegate.interfaces.api.resources.health import HealthResource
from rolegate.interfaces.api.resources.me import MeCanResource, MeRoleResource
from rolegate.interfaces.api.resources.roles import RoleResource, RolesResource
from rolegate.interfaces.api.resources.users import UserRoleResource

from tests.conftest import add_role, assign

ADMIN_PERMISSION = "roles.manage"


@pytest.fixture
def app(fake_uow, uow_factory):
    """Falcon ASGI app over the in-memory store; X-User-Id identifies callers."""
    add_role(fake_uow, "admin", ADMIN_PERMISSION)
    assign(fake_uow, "root", "admin")

    engine = AuthorizationEngine(uow_factory, identity_provider=RequestIdentityProvider())
    gate = AccessGate(engine)
    return create_app(
        RolesResource(
            ListRolesUseCase(uow_factory), CreateRoleUseCase(uow_factory), gate, ADMIN_PERMISSION
        ),
        RoleResource(
            GetRoleUseCase(uow_factory), DeleteRoleUseCase(uow_factory), gate, ADMIN_PERMISSION
        ),
        UserRoleResource(SetUserRoleUseCase(uow_factory), gate, ADMIN_PERMISSION),
        MeRoleResource(GetOwnRoleUseCase(uow_factory)),
        MeCanResource(engine),
        HealthResource(uow_factory),
        middleware=[
            CORSMiddleware(["http://app.local"]),
            AuthMiddleware(trust_user_header=True),
        ],
    )


@pytest.fixture
def client(app):
    """Falcon ASGI test client."""
    return TestClient(app)


@pytest.fixture
def admin_headers():
    return {"X-User-Id": "root"}
