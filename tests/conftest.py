"""Global test fixtures."""

import asyncio
import os

# Settings are read from the environment on every get_settings() call;
# pin the secret before anything mints a token.
os.environ.setdefault("SECRET_KEY", "test-secret-for-unit-tests")

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from auth import create_access_token, hash_password
from database import User, database
from rbac import (
    AccessControlError,
    Principal,
    access_control_error_handler,
    request_principal,
)
from rbac.audit import clear_audit_log

from tests.accounts import ACCOUNTS, PASSWORD


@pytest.fixture(autouse=True)
def _clean_audit_log():
    clear_audit_log()
    yield
    clear_audit_log()


@pytest.fixture(scope="session")
def password_hash() -> str:
    return hash_password(PASSWORD)


@pytest.fixture
def guard_app():
    """
    Build a bare app with the given guarded routes and a fixed principal.

    Usage: client = guard_app(principal, register) where register(app) adds routes.
    """

    def _build(principal: Principal | None, register) -> TestClient:
        app = FastAPI()
        app.add_exception_handler(AccessControlError, access_control_error_handler)
        app.dependency_overrides[request_principal] = lambda: principal
        register(app)
        return TestClient(app)

    return _build


async def _prepare_db(url: str, password_hash: str) -> dict[str, int]:
    try:
        await database.init_db(url)
        async with database.async_session() as session:
            users = [
                User(username=username, password_hash=password_hash, role=role, full_name=username.title())
                for username, role in ACCOUNTS.items()
            ]
            session.add_all(users)
            await session.commit()
            return {u.username: u.id for u in users}
    finally:
        await database.close_db()


@pytest.fixture
def api(tmp_path, monkeypatch, password_hash):
    """TestClient on the real app, backed by a fresh SQLite file with one account per role."""
    url = f"sqlite+aiosqlite:///{tmp_path / 'test.db'}"
    monkeypatch.setenv("DATABASE_URL", url)
    ids = asyncio.run(_prepare_db(url, password_hash))

    from main import app

    with TestClient(app) as client:
        client.user_ids = ids
        yield client


@pytest.fixture
def token_for(api):
    """Authorization header for a seeded account."""

    def _headers(username: str) -> dict[str, str]:
        token = create_access_token({
            "sub": str(api.user_ids[username]),
            "username": username,
            "role": ACCOUNTS[username],
        })
        return {"Authorization": f"Bearer {token}"}

    return _headers
