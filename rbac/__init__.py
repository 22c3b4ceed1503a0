# UniResearch - RBAC (role table, evaluator, route guards)
from .models import Principal, ErrorResponse, AccessDecision, AuditEntry
from .roles import Role, ROLE_PERMISSIONS, ROLE_HIERARCHY, RoleTableError, compose, permissions_for
from .policy import has_permission, has_any_permission, has_all_permissions, owns_resource
from .errors import AccessControlError, Unauthenticated, Forbidden
from .guards import (
    request_principal,
    require_permission,
    require_any_permission,
    require_all_permissions,
    require_ownership_or_permission,
    access_control_error_handler,
)

__all__ = [
    "Principal",
    "ErrorResponse",
    "AccessDecision",
    "AuditEntry",
    "Role",
    "ROLE_PERMISSIONS",
    "ROLE_HIERARCHY",
    "RoleTableError",
    "compose",
    "permissions_for",
    "has_permission",
    "has_any_permission",
    "has_all_permissions",
    "owns_resource",
    "AccessControlError",
    "Unauthenticated",
    "Forbidden",
    "request_principal",
    "require_permission",
    "require_any_permission",
    "require_all_permissions",
    "require_ownership_or_permission",
    "access_control_error_handler",
]
