# UniResearch - seed database with one account per role
import asyncio
import logging

from sqlalchemy import select

from auth import hash_password
from config import get_settings
from rbac import Role
from . import database
from .models import User

logger = logging.getLogger(__name__)

# username, password, role, full name, department
SEED_USERS = [
    ("admin", "admin123", Role.admin, "System Administrator", None),
    ("dean.eng", "dean123", Role.dean, "Dr. Amna Qureshi", "Faculty of Engineering"),
    ("hod.cs", "hod123", Role.hod, "Dr. Bilal Ahmed", "Computer Science"),
    ("oric", "oric123", Role.oric, "ORIC Office", None),
    ("faculty1", "faculty123", Role.faculty, "Dr. Sana Malik", "Computer Science"),
    ("guest", "guest123", Role.external, "External Reviewer", None),
]


async def seed(database_url: str | None = None) -> int:
    """Insert the seed accounts into an empty users table. Returns rows inserted."""
    await database.init_db(database_url or get_settings().database_url)
    async with database.async_session() as session:
        r = await session.execute(select(User).limit(1))
        if r.scalar_one_or_none():
            logger.info("Database already seeded. Skip.")
            return 0
        session.add_all([
            User(
                username=username,
                password_hash=hash_password(password),
                role=role.value,
                full_name=full_name,
                department=department,
            )
            for username, password, role, full_name, department in SEED_USERS
        ])
        await session.commit()
    logger.info("Seed completed: %d users", len(SEED_USERS))
    return len(SEED_USERS)


async def _main():
    try:
        await seed()
    finally:
        await database.close_db()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    asyncio.run(_main())
