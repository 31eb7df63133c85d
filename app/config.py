# app/config.py
"""
Application configuration using Pydantic-Settings.
All settings can be overridden via environment variables or .env file.
"""

from pydantic_settings import BaseSettings
from typing import List, Optional


class Settings(BaseSettings):
    # ── Database ──────────────────────────────────────────────────────────
    DATABASE_URL: str = "sqlite:///./parking.db"

    # ── Network ───────────────────────────────────────────────────────────
    BACKEND_IP: str = "0.0.0.0"
    BACKEND_PORT: int = 9090
    CORS_ORIGINS: List[str] = ["*"]

    # ── Security ──────────────────────────────────────────────────────────
    API_KEY: Optional[str] = None   # Set in .env to enable auth on API endpoints
    PASSWORD_HASH_ITERATIONS: int = 390_000

    # ── Parking rules ─────────────────────────────────────────────────────
    REJECT_REPEATED_EXIT: bool = False   # True → second exit on a departed vehicle is a 409

    # ── Logging ───────────────────────────────────────────────────────────
    LOG_LEVEL: str = "INFO"
    LOG_TO_FILE: bool = True
    LOG_DIR: Optional[str] = None        # Defaults to <project>/logs
    LOG_FILE: str = "parking.log"
    LOG_SQL: bool = False                # True → SQL statements logged at INFO

    class Config:
        env_file = ".env"
        extra = "ignore"


settings = Settings()
