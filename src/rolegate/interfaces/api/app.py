"""Falcon ASGI application."""

import logging

import falcon
import falcon.asgi
from falcon.asgi import App

from rolegate.interfaces.api.resources.health import HealthResource
from rolegate.interfaces.api.resources.me import MeCanResource, MeRoleResource
from rolegate.interfaces.api.resources.roles import RoleResource, RolesResource
from rolegate.interfaces.api.resources.users import UserRoleResource

logger = logging.getLogger(__name__)


async def log_exception(req, resp, ex, params) -> None:
    """Log unhandled errors and answer 500."""
    logger.exception("Unhandled error on %s %s", req.method, req.path)
    resp.status = falcon.HTTP_500
    resp.media = {"title": "500 Internal Server Error"}


def create_app(
    roles_resource: RolesResource,
    role_resource: RoleResource,
    user_role_resource: UserRoleResource,
    me_role_resource: MeRoleResource,
    me_can_resource: MeCanResource,
    health_resource: HealthResource,
    middleware: list | None = None,
) -> App:
    """Create Falcon ASGI app with routes."""
    app = falcon.asgi.App(middleware=middleware or [])
    app.add_error_handler(Exception, log_exception)
    app.add_route("/v1/health", health_resource)
    app.add_route("/v1/health/ready", health_resource, suffix="ready")
    app.add_route("/v1/roles", roles_resource)
    app.add_route("/v1/roles/{role_id}", role_resource)
    app.add_route("/v1/users/{user_id}/role", user_role_resource)
    app.add_route("/v1/me/role", me_role_resource)
    app.add_route("/v1/me/can", me_can_resource)
    return app
