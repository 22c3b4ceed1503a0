# UniResearch - configuration
from pathlib import Path
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    secret_key: str = "dev-secret-change-in-production"
    database_url: str = "sqlite+aiosqlite:///./uniresearch.db"
    access_expire_minutes: int = 60
    audit_log_file: Path | None = None  # JSON lines; unset = memory + logger only
    audit_buffer: int = 500
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        extra = "ignore"


def get_settings() -> Settings:
    return Settings()
