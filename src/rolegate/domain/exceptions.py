"""Domain exceptions."""


class RoleGateError(Exception):
    """Base exception for RoleGate."""

    pass


class Forbidden(RoleGateError):
    """Caller does not hold the permissions required for the operation."""

    pass


class NotFound(RoleGateError):
    """Requested resource was not found."""

    pass


class RoleNotFound(NotFound):
    """Assignment references a role id that does not exist."""

    def __init__(self, role_id: str) -> None:
        super().__init__(f"The role does not exist: {role_id}")
        self.role_id = role_id


class DuplicateRole(RoleGateError):
    """Role id is already in use, or was used by a deleted role."""

    pass


class InvalidPermissions(RoleGateError):
    """Permissions must be a string or a collection of strings."""

    pass


class ValidationError(RoleGateError):
    """Validation failed for input data."""

    pass
