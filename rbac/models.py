# UniResearch - RBAC payloads (principal, error body, audit entry)
from datetime import datetime, timezone
from enum import Enum
from typing import Any
from pydantic import BaseModel, Field, field_validator


# --- Principal (populated by the authentication layer) ---
class Principal(BaseModel):
    """Who is making the request. Unknown roles are allowed and hold no permissions."""
    id: str = Field(..., description="Account identifier, canonical string form")
    role: str = Field(..., description="faculty | hod | dean | oric | admin | external")
    username: str | None = None

    @field_validator("id", mode="before")
    @classmethod
    def _normalize_id(cls, value: Any) -> str:
        # ints, ObjectId, UUID -> str so ownership checks compare like with like
        return value if isinstance(value, str) else str(value)

    @field_validator("role", mode="before")
    @classmethod
    def _normalize_role(cls, value: Any) -> str:
        if isinstance(value, Enum):
            return value.value
        return value


# --- Failure body returned for 401 / 403 ---
class ErrorResponse(BaseModel):
    success: bool = False
    message: str


class AccessDecision(str, Enum):
    ALLOW = "allow"
    DENY = "deny"


# --- Audit entry (one per authenticated guard decision) ---
class AuditEntry(BaseModel):
    principal_id: str
    role: str
    guard: str
    required: list[str] = Field(default_factory=list)
    resource_id: str | None = None
    decision: AccessDecision
    reason: str = ""
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
