# UniResearch database
from .models import Base, User
from .database import get_db, init_db, close_db

__all__ = [
    "Base",
    "User",
    "get_db",
    "init_db",
    "close_db",
]
