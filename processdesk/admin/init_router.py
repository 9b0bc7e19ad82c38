# processdesk/admin/init_router.py

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from processdesk.config import Settings
from processdesk.dependencies import get_settings, get_storage
from processdesk.storage.base import Storage
from processdesk.storage.seed import load_seed_fixture

logger = logging.getLogger("processdesk.admin")

router = APIRouter(tags=["admin"])


@router.post("/init-db")
def init_db(
    storage: Storage = Depends(get_storage),
    settings: Settings = Depends(get_settings),
):
    """Insert the demonstration dataset; a no-op when projects already exist."""
    try:
        seeded = storage.seed(load_seed_fixture(settings.seed_fixture))
    except Exception as exc:
        logger.exception("init_db_failed", extra={"fixture": str(settings.seed_fixture)})
        return JSONResponse(
            status_code=500,
            content={"message": "Failed to initialize database", "error": str(exc)},
        )

    return {"message": "Database initialized successfully", "seeded": seeded}
