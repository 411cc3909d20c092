"""Current caller API resources."""

import falcon.asgi

from rolegate.application.ports import PermissionChecker
from rolegate.application.use_cases.user_role.get_own_role import GetOwnRoleUseCase
from rolegate.interfaces.api.resources.serializers import assignment_to_dict, role_to_dict


class MeRoleResource:
    """GET /v1/me/role - the caller's own role and assignment record."""

    def __init__(self, get_own_role: GetOwnRoleUseCase) -> None:
        self._get_own_role = get_own_role

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        user = getattr(req.context, "user", None)
        own = await self._get_own_role.execute(user.user_id if user else None)
        if own is None:
            resp.media = {"role": None, "user": None}
        else:
            resp.media = {
                "role": role_to_dict(own.role) if own.role else None,
                "user": assignment_to_dict(own.assignment),
            }
        resp.status = falcon.HTTP_200


class MeCanResource:
    """GET /v1/me/can?permission=... - check permissions of the caller."""

    def __init__(self, permission_checker: PermissionChecker) -> None:
        self._checker = permission_checker

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        perms = req.get_param_as_list("permission") or []
        allowed = await self._checker.current_user_can(perms)
        resp.media = {"allowed": allowed}
        resp.status = falcon.HTTP_200
