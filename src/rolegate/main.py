"""Application entry point and composition root."""

import argparse

from rolegate import __version__
from rolegate.application.use_cases.role.create_role import CreateRoleUseCase
from rolegate.application.use_cases.role.delete_role import DeleteRoleUseCase
from rolegate.application.use_cases.role.get_role import GetRoleUseCase, ListRolesUseCase
from rolegate.application.use_cases.role.seed_roles import SeedRolesUseCase
from rolegate.application.use_cases.user_role.get_own_role import GetOwnRoleUseCase
from rolegate.application.use_cases.user_role.set_user_role import SetUserRoleUseCase
from rolegate.config import Settings, get_settings
from rolegate.infrastructure.auth.identity import RequestIdentityProvider
from rolegate.infrastructure.auth.keycloak_provider import KeycloakProvider
from rolegate.infrastructure.permission.access_gate import AccessGate
from rolegate.infrastructure.permission.authorization_engine import AuthorizationEngine
from rolegate.infrastructure.persistence.memory.unit_of_work import (
    create_memory_uow_factory,
)
from rolegate.infrastructure.persistence.postgres.connection import create_pool
from rolegate.infrastructure.persistence.postgres.unit_of_work import (
    create_uow_factory,
)
from rolegate.interfaces.api.app import create_app
from rolegate.interfaces.api.middleware.auth import AuthMiddleware
from rolegate.interfaces.api.middleware.cors import CORSMiddleware
from rolegate.interfaces.api.middleware.lifespan import LifespanMiddleware
from rolegate.interfaces.api.resources.health import HealthResource
from rolegate.interfaces.api.resources.me import MeCanResource, MeRoleResource
from rolegate.interfaces.api.resources.roles import RoleResource, RolesResource
from rolegate.interfaces.api.resources.users import UserRoleResource
from rolegate.logging_config import configure_logging


def main() -> None:
    """CLI entry point - run the API server."""
    parser = argparse.ArgumentParser(description=f"RoleGate v{__version__}")
    parser.add_argument("--host", default="0.0.0.0")
    parser.add_argument("--port", type=int, default=8000)
    args = parser.parse_args()
    run_server(args.host, args.port)


def create_rolegate_app(settings: Settings | None = None):
    """Composition root - build Falcon app with all dependencies."""
    settings = settings or get_settings()
    configure_logging(settings.log_level, settings.debug)

    pool = None
    if settings.storage_backend == "memory":
        uow_factory = create_memory_uow_factory()
    else:
        pool = create_pool(settings.database_url)
        uow_factory = create_uow_factory(pool)

    keycloak = (
        KeycloakProvider(
            server_url=settings.keycloak_url,
            realm=settings.keycloak_realm,
            client_id=settings.keycloak_client_id,
            client_secret=settings.keycloak_client_secret,
        )
        if settings.keycloak_client_secret
        else None
    )

    engine = AuthorizationEngine(uow_factory, identity_provider=RequestIdentityProvider())
    access_gate = AccessGate(engine)

    seed_roles = SeedRolesUseCase(unit_of_work_factory=uow_factory)

    async def seed() -> None:
        await seed_roles.execute(settings.bootstrap_roles, settings.bootstrap_assignments)

    roles_resource = RolesResource(
        ListRolesUseCase(unit_of_work_factory=uow_factory),
        CreateRoleUseCase(unit_of_work_factory=uow_factory),
        access_gate,
        settings.admin_permission,
    )
    role_resource = RoleResource(
        GetRoleUseCase(unit_of_work_factory=uow_factory),
        DeleteRoleUseCase(unit_of_work_factory=uow_factory),
        access_gate,
        settings.admin_permission,
    )
    user_role_resource = UserRoleResource(
        SetUserRoleUseCase(unit_of_work_factory=uow_factory),
        access_gate,
        settings.admin_permission,
    )
    me_role_resource = MeRoleResource(GetOwnRoleUseCase(unit_of_work_factory=uow_factory))
    me_can_resource = MeCanResource(engine)
    health_resource = HealthResource(uow_factory)

    cors_origins = [
        o.strip() for o in settings.cors_origins.split(",") if o.strip()
    ]
    return create_app(
        roles_resource,
        role_resource,
        user_role_resource,
        me_role_resource,
        me_can_resource,
        health_resource,
        middleware=[
            CORSMiddleware(cors_origins),
            LifespanMiddleware(pool, on_startup=[seed]),
            AuthMiddleware(keycloak, trust_user_header=settings.trust_user_header),
        ],
    )


def run_server(host: str = "0.0.0.0", port: int = 8000) -> None:
    """Run uvicorn server."""
    import uvicorn

    app = create_rolegate_app()
    uvicorn.run(app, host=host, port=port)
