# UniResearch - User administration routes (every route behind an RBAC guard)
import logging
from datetime import datetime

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, ConfigDict, Field
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from auth import hash_password
from database import User, get_db
from rbac import (
    Principal,
    Role,
    require_permission,
    require_ownership_or_permission,
)
from rbac import permissions as P

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/users", tags=["Users"])


class UserOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    role: str
    full_name: str | None = None
    department: str | None = None
    created_at: datetime | None = None


class UserCreate(BaseModel):
    username: str = Field(..., min_length=3, max_length=64)
    password: str = Field(..., min_length=6)
    role: Role
    full_name: str | None = None
    department: str | None = None


class UserUpdate(BaseModel):
    full_name: str | None = None
    department: str | None = None


class RoleUpdate(BaseModel):
    role: Role


class PasswordReset(BaseModel):
    new_password: str = Field(..., min_length=6)


async def _get_user_or_404(db: AsyncSession, user_id: int) -> User:
    user = await db.get(User, user_id)
    if user is None:
        raise HTTPException(status_code=404, detail=f"User {user_id} not found")
    return user


@router.get("", response_model=list[UserOut])
async def list_users(
    _: Principal = Depends(require_permission(P.USER_READ)),
    db: AsyncSession = Depends(get_db),
):
    r = await db.execute(select(User).order_by(User.id))
    return r.scalars().all()


@router.get("/stats")
async def user_stats(
    _: Principal = Depends(require_permission(P.USER_READ)),
    db: AsyncSession = Depends(get_db),
):
    """Account counts per role; declared roles with no accounts report 0."""
    r = await db.execute(select(User.role, func.count(User.id)).group_by(User.role))
    by_role = {role.value: 0 for role in Role}
    by_role.update({role: count for role, count in r.all()})
    return {"success": True, "total": sum(by_role.values()), "by_role": by_role}


@router.get("/{user_id}", response_model=UserOut)
async def get_user(
    user_id: int,
    _: Principal = Depends(require_ownership_or_permission(P.USER_READ, param="user_id")),
    db: AsyncSession = Depends(get_db),
):
    return await _get_user_or_404(db, user_id)


@router.post("", response_model=UserOut, status_code=201)
async def create_user(
    body: UserCreate,
    principal: Principal = Depends(require_permission(P.USER_CREATE)),
    db: AsyncSession = Depends(get_db),
):
    r = await db.execute(select(User.id).where(User.username == body.username))
    if r.scalar_one_or_none() is not None:
        raise HTTPException(status_code=409, detail=f"Username {body.username} already exists")
    user = User(
        username=body.username,
        password_hash=hash_password(body.password),
        role=body.role.value,
        full_name=body.full_name,
        department=body.department,
    )
    db.add(user)
    await db.flush()
    await db.refresh(user)
    logger.info("User %s created by %s (role=%s)", user.username, principal.id, user.role)
    return user


@router.put("/{user_id}", response_model=UserOut)
async def update_user(
    user_id: int,
    body: UserUpdate,
    _: Principal = Depends(require_ownership_or_permission(P.USER_UPDATE, param="user_id")),
    db: AsyncSession = Depends(get_db),
):
    user = await _get_user_or_404(db, user_id)
    for field, value in body.model_dump(exclude_unset=True).items():
        setattr(user, field, value)
    await db.flush()
    await db.refresh(user)
    return user


@router.delete("/{user_id}")
async def delete_user(
    user_id: int,
    principal: Principal = Depends(require_permission(P.USER_DELETE)),
    db: AsyncSession = Depends(get_db),
):
    user = await _get_user_or_404(db, user_id)
    await db.delete(user)
    logger.info("User %s deleted by %s", user_id, principal.id)
    return {"success": True, "message": "User deleted"}


@router.put("/{user_id}/role", response_model=UserOut)
async def change_role(
    user_id: int,
    body: RoleUpdate,
    principal: Principal = Depends(require_permission(P.USER_MANAGE_ROLES)),
    db: AsyncSession = Depends(get_db),
):
    user = await _get_user_or_404(db, user_id)
    previous = user.role
    user.role = body.role.value
    await db.flush()
    await db.refresh(user)
    # Takes effect on the user's next login (role is carried in the token)
    logger.info("User %s role %s -> %s by %s", user_id, previous, user.role, principal.id)
    return user


@router.put("/{user_id}/reset-password")
async def reset_password(
    user_id: int,
    body: PasswordReset,
    principal: Principal = Depends(require_ownership_or_permission(P.USER_MANAGE_ROLES, param="user_id")),
    db: AsyncSession = Depends(get_db),
):
    user = await _get_user_or_404(db, user_id)
    user.password_hash = hash_password(body.new_password)
    await db.flush()
    logger.info("Password for user %s reset by %s", user_id, principal.id)
    return {"success": True, "message": "Password reset"}
