# processdesk/init_db.py
"""
Seed the configured store with the demonstration dataset.

    python -m processdesk.init_db

Only meaningful with STORAGE_BACKEND=database: the in-memory store is gone
as soon as this process exits.
"""

import logging
import sys

from processdesk.config import Settings
from processdesk.storage.factory import build_storage
from processdesk.storage.seed import load_seed_fixture

logger = logging.getLogger("processdesk.init_db")


def initialize_database(settings: Settings) -> bool:
    storage = build_storage(settings)
    try:
        return storage.seed(load_seed_fixture(settings.seed_fixture))
    finally:
        storage.close()


def main() -> int:
    settings = Settings.from_env()
    logging.basicConfig(level=settings.log_level)

    print("🔧 Initializing database with dummy data...")
    try:
        seeded = initialize_database(settings)
    except Exception:
        logger.exception("init_db_failed")
        print("❌ Error initializing database")
        return 1

    print("✅ Database initialized successfully!" if seeded else "✅ Projects already exist, nothing to seed.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
