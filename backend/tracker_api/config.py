"""Application settings and validation."""

import os
from pathlib import Path

BASE = Path(__file__).resolve().parent.parent


def _normalize_db_url(url: str) -> str:
    # hosted Postgres providers still hand out the legacy scheme
    if url.startswith("postgres://"):
        return "postgresql://" + url[len("postgres://"):]
    return url


class Settings:
    ENV: str
    DATABASE_URL: str
    ALLOW_DEV_CORS: bool
    ALLOWED_ORIGINS: list
    LOG_LEVEL: str
    SQL_ECHO: bool

    def __init__(self):
        self.ENV = os.getenv("ENV", "dev").lower()
        self.DATABASE_URL = _normalize_db_url(os.getenv("DATABASE_URL", f"sqlite:///{BASE / 'tracker.db'}"))
        default_cors = "true" if self.ENV == "dev" else "false"
        self.ALLOW_DEV_CORS = os.getenv("ALLOW_DEV_CORS", default_cors).lower() == "true"
        self.ALLOWED_ORIGINS = [
            o.strip() for o in os.getenv("ALLOWED_ORIGINS", "http://localhost:4200").split(",") if o.strip()
        ]
        self.LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
        self.SQL_ECHO = os.getenv("SQL_ECHO", "false").lower() == "true"
        self._validate()

    @property
    def is_sqlite(self) -> bool:
        return self.DATABASE_URL.startswith("sqlite")

    def _validate(self):
        if self.ENV != "dev" and self.ALLOW_DEV_CORS:
            raise RuntimeError("ALLOW_DEV_CORS opens the API to every origin and is only allowed when ENV=dev")
        if not self.ALLOW_DEV_CORS and not self.ALLOWED_ORIGINS:
            raise RuntimeError("ALLOWED_ORIGINS must list at least one origin when ALLOW_DEV_CORS is off")


settings = Settings()
