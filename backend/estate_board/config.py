# backend/estate_board/config.py
from functools import lru_cache
from pathlib import Path
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    SERVICE_NAME: str = "estate-board"

    # Database
    DATABASE_URL: str = "sqlite:///./estate_board.db"  # Default if not in .env

    # Storage Paths
    STORAGE_PATH: Path = Path("storage")
    UPLOADS_PATH: Path | None = None  # Will be set based on STORAGE_PATH
    LOGS_PATH: Path | None = None  # Will be set based on STORAGE_PATH

    # Auth
    APP_PASSWORD: str = ""
    JWT_SECRET: str = "change-me"
    JWT_ALGORITHM: str = "HS256"
    TOKEN_EXPIRE_HOURS: int = 12

    # Limits
    MAX_UPLOAD_BYTES: int = 10 * 1024 * 1024  # 10MB per file
    LIST_DEFAULT_LIMIT: int = 200
    LIST_MAX_LIMIT: int = 500

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 4000
    RELOAD: bool = False  # uvicorn file watcher, development only
    CORS_ORIGINS: List[str] = ["*"]

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    def model_post_init(self, __context) -> None:
        """Post initialization hook to set derived paths"""
        if isinstance(self.STORAGE_PATH, str):
            self.STORAGE_PATH = Path(self.STORAGE_PATH)

        self.UPLOADS_PATH = Path(self.UPLOADS_PATH) if self.UPLOADS_PATH else self.STORAGE_PATH / "uploads"
        self.LOGS_PATH = Path(self.LOGS_PATH) if self.LOGS_PATH else self.STORAGE_PATH / "logs"

    def create_storage_dirs(self) -> None:
        """Create necessary storage directories if they don't exist"""
        for path in [self.STORAGE_PATH, self.UPLOADS_PATH, self.LOGS_PATH]:
            path.mkdir(parents=True, exist_ok=True)


@lru_cache
def get_settings() -> Settings:
    return Settings()
