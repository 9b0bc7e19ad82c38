# processdesk/config.py

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# ---------------- ENV ----------------
load_dotenv(dotenv_path=os.path.join(os.path.dirname(__file__), ".env"))

FIXTURES_DIR = Path(__file__).parent / "fixtures"

STORAGE_BACKENDS = ("memory", "database")


@dataclass
class Settings:
    app_env: str = "development"
    storage_backend: str = "memory"
    database_url: str = "sqlite:///./app.db"
    sql_echo: bool = False
    frontend_origin: Optional[str] = None
    seed_fixture: Path = FIXTURES_DIR / "demo_seed.json"
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        backend = os.getenv("STORAGE_BACKEND", "memory").lower()
        if backend not in STORAGE_BACKENDS:
            raise RuntimeError(f"Unknown STORAGE_BACKEND {backend!r} in .env!")

        seed_fixture = os.getenv("SEED_FIXTURE")

        return cls(
            app_env=os.getenv("APP_ENV", "development").lower(),
            storage_backend=backend,
            # If DATABASE_URL is NOT provided -> use local SQLite
            database_url=os.getenv("DATABASE_URL", "sqlite:///./app.db"),
            sql_echo=os.getenv("SQL_ECHO", "false").lower() == "true",
            frontend_origin=os.getenv("FRONTEND_ORIGIN"),
            seed_fixture=Path(seed_fixture) if seed_fixture else FIXTURES_DIR / "demo_seed.json",
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )

    @property
    def is_development(self) -> bool:
        return self.app_env == "development"
