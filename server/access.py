# UniResearch - Access introspection and self-service routes (who am I, own account, role table, audit)
from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel, Field
from sqlalchemy.ext.asyncio import AsyncSession

from auth import hash_password, verify_password
from database import User, get_db
from rbac import (
    Principal,
    ROLE_PERMISSIONS,
    permissions_for,
    require_permission,
    require_any_permission,
    require_all_permissions,
)
from rbac import permissions as P
from rbac.audit import get_audit_sample

router = APIRouter(prefix="/api", tags=["Access"])

# No permission required: any authenticated principal passes
authenticated = require_all_permissions([])


class PasswordChange(BaseModel):
    current_password: str
    new_password: str = Field(..., min_length=6)


class ProfileUpdate(BaseModel):
    full_name: str | None = None
    department: str | None = None


async def _own_account(db: AsyncSession, principal: Principal) -> User:
    user = await db.get(User, int(principal.id))
    if user is None:
        raise HTTPException(status_code=404, detail="Account not found")
    return user


@router.get("/me")
async def me(principal: Principal = Depends(authenticated)):
    return {
        "success": True,
        "principal": principal.model_dump(),
        "permissions": sorted(permissions_for(principal.role)),
    }


@router.put("/me/password")
async def change_password(
    body: PasswordChange,
    principal: Principal = Depends(authenticated),
    db: AsyncSession = Depends(get_db),
):
    user = await _own_account(db, principal)
    if not verify_password(body.current_password, user.password_hash):
        raise HTTPException(status_code=400, detail="Current password is incorrect")
    user.password_hash = hash_password(body.new_password)
    await db.flush()
    return {"success": True, "message": "Password changed"}


@router.put("/me/profile")
async def update_profile(
    body: ProfileUpdate,
    principal: Principal = Depends(authenticated),
    db: AsyncSession = Depends(get_db),
):
    user = await _own_account(db, principal)
    for field, value in body.model_dump(exclude_unset=True).items():
        setattr(user, field, value)
    await db.flush()
    return {"success": True, "full_name": user.full_name, "department": user.department}


@router.get("/roles")
async def list_roles(_: Principal = Depends(require_any_permission([P.USER_MANAGE_ROLES, P.SYSTEM_ADMIN]))):
    return {
        "success": True,
        "roles": {role: sorted(perms) for role, perms in ROLE_PERMISSIONS.items()},
    }


@router.get("/reports/access")
async def reports_access(
    principal: Principal = Depends(require_all_permissions([P.REPORTS_VIEW, P.ANALYTICS_VIEW])),
):
    """Per research resource, which workflow actions the caller's role can take."""
    granted = permissions_for(principal.role)
    return {
        "success": True,
        "role": principal.role,
        "resources": {
            resource: {
                action: f"{resource}:{action}" in granted
                for action in ("approve", "review", "delete")
            }
            for resource in P.RESEARCH_RESOURCES
        },
    }


@router.get("/audit/sample")
async def audit_sample(
    limit: int = Query(20, ge=1, le=500),
    _: Principal = Depends(require_permission(P.SYSTEM_ADMIN)),
):
    """Recent guard decisions (no tokens or passwords are recorded)."""
    return {"success": True, "entries": get_audit_sample(limit)}
