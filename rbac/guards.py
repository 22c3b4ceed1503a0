# UniResearch - Route guards: FastAPI dependencies wrapping the evaluator
#
# Each factory captures only its permission argument(s) and returns a dependency.
# The principal is read from request.state (set by the authentication middleware);
# the guard either returns it unchanged or raises Unauthenticated / Forbidden.
from typing import Iterable

from fastapi import Depends, Request
from fastapi.responses import JSONResponse

from .audit import record_decision
from .errors import AccessControlError, Forbidden, Unauthenticated
from .models import AccessDecision, AuditEntry, Principal
from .policy import has_all_permissions, has_any_permission, has_permission, owns_resource


def request_principal(request: Request) -> Principal | None:
    """Principal attached by the authentication layer, or None."""
    return getattr(request.state, "principal", None)


def _authenticated(principal: Principal | None) -> Principal:
    if principal is None:
        raise Unauthenticated()
    return principal


def _decide(
    principal: Principal,
    guard: str,
    required: tuple[str, ...],
    allowed: bool,
    reason: str,
    resource_id: str | None = None,
) -> Principal:
    record_decision(AuditEntry(
        principal_id=principal.id,
        role=principal.role,
        guard=guard,
        required=list(required),
        resource_id=resource_id,
        decision=AccessDecision.ALLOW if allowed else AccessDecision.DENY,
        reason=reason,
    ))
    if not allowed:
        raise Forbidden()
    return principal


def require_permission(permission: str):
    async def permission_guard(principal: Principal | None = Depends(request_principal)) -> Principal:
        principal = _authenticated(principal)
        allowed = has_permission(principal.role, permission)
        return _decide(principal, "require_permission", (permission,), allowed,
                       "role_permission" if allowed else "missing_permission")

    return permission_guard


def require_any_permission(permissions: Iterable[str]):
    required = tuple(permissions)

    async def any_permission_guard(principal: Principal | None = Depends(request_principal)) -> Principal:
        principal = _authenticated(principal)
        allowed = has_any_permission(principal.role, required)
        return _decide(principal, "require_any_permission", required, allowed,
                       "role_permission" if allowed else "missing_permission")

    return any_permission_guard


def require_all_permissions(permissions: Iterable[str]):
    required = tuple(permissions)

    async def all_permissions_guard(principal: Principal | None = Depends(request_principal)) -> Principal:
        principal = _authenticated(principal)
        allowed = has_all_permissions(principal.role, required)
        return _decide(principal, "require_all_permissions", required, allowed,
                       "role_permission" if allowed else "missing_permission")

    return all_permissions_guard


def require_ownership_or_permission(permission: str, param: str = "id"):
    """
    Allow when the role holds `permission`, or when the route parameter `param`
    names the caller's own id (exact match on the str() form).
    """
    async def ownership_guard(
        request: Request,
        principal: Principal | None = Depends(request_principal),
    ) -> Principal:
        principal = _authenticated(principal)
        resource_id = request.path_params.get(param)
        resource = None if resource_id is None else str(resource_id)
        if has_permission(principal.role, permission):
            return _decide(principal, "require_ownership_or_permission", (permission,), True,
                           "role_permission", resource)
        if owns_resource(principal.id, resource_id):
            return _decide(principal, "require_ownership_or_permission", (permission,), True,
                           "owner", resource)
        return _decide(principal, "require_ownership_or_permission", (permission,), False,
                       "not_owner", resource)

    return ownership_guard


async def access_control_error_handler(request: Request, exc: AccessControlError) -> JSONResponse:
    """Serialize a guard failure as {success: false, message} with 401/403."""
    headers = {"WWW-Authenticate": "Bearer"} if exc.status_code == 401 else None
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_response().model_dump(),
        headers=headers,
    )
