"""Application ports - interfaces for external adapters."""

from rolegate.application.ports.identity_provider import CurrentIdentityProvider
from rolegate.application.ports.permission_checker import PermissionChecker, PermissionGate
from rolegate.application.ports.unit_of_work import UnitOfWork, UnitOfWorkFactory

__all__ = [
    "CurrentIdentityProvider",
    "PermissionChecker",
    "PermissionGate",
    "UnitOfWork",
    "UnitOfWorkFactory",
]
