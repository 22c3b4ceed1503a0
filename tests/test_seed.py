"""Tests for the seed script: one account per role, idempotent."""

import asyncio

from sqlalchemy import select

from database import User, database
from database.seed import SEED_USERS, seed
from rbac import Role


async def _seed_twice(url: str) -> tuple[int, int, list[str]]:
    try:
        first = await seed(url)
        second = await seed(url)
        async with database.async_session() as session:
            roles = (await session.execute(select(User.role))).scalars().all()
        return first, second, roles
    finally:
        await database.close_db()


def test_seed_inserts_each_role_once(tmp_path) -> None:
    url = f"sqlite+aiosqlite:///{tmp_path / 'seed.db'}"
    first, second, roles = asyncio.run(_seed_twice(url))
    assert first == len(SEED_USERS)
    assert second == 0
    assert sorted(roles) == sorted(r.value for r in Role)
