import os
from functools import lru_cache
from pathlib import Path

from pydantic import computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Data directory: FINANCE_DATA_DIR if set (e.g. /data in Docker),
# otherwise ~/.config/finance-tracker for local dev
_data_dir = os.environ.get("FINANCE_DATA_DIR")
DEFAULT_DATA_DIR = Path(_data_dir) if _data_dir else Path.home() / ".config" / "finance-tracker"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="FINANCE_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    DATA_DIR: Path = DEFAULT_DATA_DIR
    DATABASE_URL: str | None = None

    ALLOWED_ORIGINS: list[str] = ["http://localhost:3000", "http://127.0.0.1:3000"]
    LOG_LEVEL: str = "INFO"

    # for jwt
    SECRET_KEY: str = "change-me-in-production"
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24

    @computed_field
    @property
    def SQLALCHEMY_DATABASE_URL(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return f"sqlite:///{self.DATA_DIR / 'finance.db'}"


def ensure_data_dir(settings: Settings) -> None:
    """Ensure the data directory exists when the default SQLite file lives there."""
    if settings.DATABASE_URL is None:
        settings.DATA_DIR.mkdir(parents=True, exist_ok=True)


@lru_cache
def get_settings() -> Settings:
    return Settings()
