# processdesk/storage/factory.py

import logging

from processdesk.config import Settings
from processdesk.storage.base import Storage
from processdesk.storage.memory_storage import MemoryStorage
from processdesk.storage.sql_storage import SqlStorage

logger = logging.getLogger("processdesk.storage")


def build_storage(settings: Settings) -> Storage:
    if settings.storage_backend == "database":
        logger.info("storage_selected", extra={"backend": "database"})
        return SqlStorage.from_url(settings.database_url, echo=settings.sql_echo)

    logger.info("storage_selected", extra={"backend": "memory"})
    return MemoryStorage()
