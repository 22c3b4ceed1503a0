# UniResearch - Auth (JWT + principal on request.state for the RBAC guards)
import logging
from datetime import datetime, timedelta, timezone

from fastapi import Request
from jose import JWTError, jwt
from passlib.context import CryptContext
from starlette.middleware.base import BaseHTTPMiddleware

from config import get_settings
from database import User, database
from rbac import Principal

logger = logging.getLogger(__name__)

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

ALGORITHM = "HS256"
# Bcrypt limit: password must be <= 72 bytes
MAX_PASSWORD_BYTES = 72


def _truncate_password(password: str) -> str:
    """Bcrypt accepts max 72 bytes; truncate to avoid ValueError."""
    if not password:
        return password
    enc = password.encode("utf-8")
    if len(enc) <= MAX_PASSWORD_BYTES:
        return password
    return enc[:MAX_PASSWORD_BYTES].decode("utf-8", errors="ignore")


def get_secret():
    return get_settings().secret_key


def verify_password(plain: str, hashed: str) -> bool:
    return pwd_context.verify(_truncate_password(plain), hashed)


def hash_password(plain: str) -> str:
    return pwd_context.hash(_truncate_password(plain))


def create_access_token(data: dict, expires_minutes: int | None = None) -> str:
    to_encode = data.copy()
    if expires_minutes is None:
        expires_minutes = get_settings().access_expire_minutes
    expire = datetime.now(timezone.utc) + timedelta(minutes=expires_minutes)
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, get_secret(), algorithm=ALGORITHM)


def decode_token(token: str) -> dict | None:
    try:
        return jwt.decode(token, get_secret(), algorithms=[ALGORITHM])
    except JWTError:
        return None


def principal_from_token(token: str) -> Principal | None:
    payload = decode_token(token)
    if not payload or "sub" not in payload or "role" not in payload:
        return None
    return Principal(id=payload["sub"], role=payload["role"], username=payload.get("username"))


def principal_from_header(authorization: str | None) -> Principal | None:
    """`Authorization: Bearer <jwt>` -> Principal; anything else -> None."""
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return principal_from_token(token.strip())


async def load_principal(claims: Principal | None) -> Principal | None:
    """
    Re-read the account behind a verified token. A deleted account yields None;
    the role always comes from the row, so role changes apply immediately.
    """
    if claims is None or not claims.id.isdigit():
        return None
    async with database.async_session() as session:
        user = await session.get(User, int(claims.id))
    if user is None:
        return None
    return Principal(id=user.id, role=user.role, username=user.username)


class AuthenticationMiddleware(BaseHTTPMiddleware):
    """
    Attach request.state.principal before routing. A missing or invalid token,
    or one for an account that no longer exists, leaves it as None; the guards
    decide whether that is a 401.
    """

    async def dispatch(self, request: Request, call_next):
        authorization = request.headers.get("Authorization")
        principal = await load_principal(principal_from_header(authorization))
        if principal is None and authorization:
            logger.debug("Rejected bearer token on %s", request.url.path)
        request.state.principal = principal
        return await call_next(request)
