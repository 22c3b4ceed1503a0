# UniResearch - University research portal API
# Access control: every guarded route goes through the RBAC guards in rbac/guards.py.
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Depends, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from config import get_settings
from database import User, get_db, init_db, close_db
from auth import AuthenticationMiddleware, verify_password, create_access_token
from rbac import AccessControlError, access_control_error_handler
from rbac.audit import configure_audit, shutdown_audit
from server.users import router as users_router
from server.access import router as access_router

logger = logging.getLogger(__name__)


class LoginRequest(BaseModel):
    username: str
    password: str


class LoginResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    role: str
    user_id: str


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    await init_db(settings.database_url)
    configure_audit(settings.audit_log_file, settings.audit_buffer)
    logger.info("UniResearch API started (database=%s)", settings.database_url)
    yield
    shutdown_audit()
    await close_db()


app = FastAPI(
    title="UniResearch API",
    description="Research management portal: publications, theses, projects, travel grants, events",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(AuthenticationMiddleware)
app.add_exception_handler(AccessControlError, access_control_error_handler)


@app.post("/api/login", response_model=LoginResponse)
async def login(body: LoginRequest, db: AsyncSession = Depends(get_db)):
    """Login: username, password. Returns JWT carrying the account's role."""
    r = await db.execute(select(User).where(User.username == body.username))
    user = r.scalar_one_or_none()
    if not user or not verify_password(body.password, user.password_hash):
        raise HTTPException(status_code=401, detail="Invalid username or password")
    token = create_access_token(
        {"sub": str(user.id), "username": user.username, "role": user.role}
    )
    return LoginResponse(access_token=token, role=user.role, user_id=str(user.id))


@app.get("/health")
async def health():
    return {"status": "ok"}


app.include_router(users_router)
app.include_router(access_router)


if __name__ == "__main__":
    import os
    import uvicorn
    logging.basicConfig(level=get_settings().log_level)
    host = os.environ.get("UVICORN_HOST", "127.0.0.1")
    port = int(os.environ.get("PORT", "8000"))
    uvicorn.run("main:app", host=host, port=port, reload=False)
