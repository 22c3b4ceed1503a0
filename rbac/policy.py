# UniResearch - Access control evaluator (pure lookups over the role table)
from typing import Any, Iterable

from .roles import permissions_for


def has_permission(role: str, permission: str) -> bool:
    """True iff `role` holds `permission`. Unknown roles hold nothing; never raises."""
    return permission in permissions_for(role)


def has_any_permission(role: str, permissions: Iterable[str]) -> bool:
    """At least one of `permissions` is held. An empty list matches nothing."""
    granted = permissions_for(role)
    return any(p in granted for p in permissions)


def has_all_permissions(role: str, permissions: Iterable[str]) -> bool:
    """Every one of `permissions` is held. An empty list is vacuously satisfied."""
    granted = permissions_for(role)
    return all(p in granted for p in permissions)


def owns_resource(principal_id: Any, resource_id: Any) -> bool:
    """
    Ownership check: the resource id from the route equals the caller's id.
    Both sides are compared in canonical str() form (ints, ObjectIds, UUIDs).
    """
    if resource_id is None or principal_id is None:
        return False
    resource = str(resource_id)
    if not resource:
        return False
    return str(principal_id) == resource
