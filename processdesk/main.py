# processdesk/main.py

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from processdesk.config import Settings
from processdesk.errors import register_error_handlers
from processdesk.storage.base import Storage
from processdesk.storage.factory import build_storage
from processdesk.storage.seed import load_seed_fixture

from processdesk.activity.activity_router import router as activity_router
from processdesk.admin.init_router import router as init_router
from processdesk.cost.cost_item_router import router as cost_item_router
from processdesk.process.process_router import router as process_router
from processdesk.project.project_router import router as project_router
from processdesk.requirement.requirement_router import router as requirement_router
from processdesk.team.team_member_router import router as team_member_router
from processdesk.template.template_router import router as template_router
from processdesk.testing.test_case_router import router as test_case_router

logger = logging.getLogger("processdesk")

# ---------------- CORS ----------------
DEFAULT_ORIGINS = [
    "http://localhost:5173",
    "http://127.0.0.1:5173",
    "http://localhost:5000",
    "http://127.0.0.1:5000",
    "http://localhost:3000",
    "http://127.0.0.1:3000",
]


def seed_on_startup(storage: Storage, settings: Settings) -> None:
    # the server keeps serving even if seeding fails
    try:
        logger.info("Initializing database with dummy data...")
        seeded = storage.seed(load_seed_fixture(settings.seed_fixture))
        logger.info("seed_on_startup_finished", extra={"seeded": seeded})
    except Exception:
        logger.exception("seed_on_startup_failed")


def create_app(settings: Optional[Settings] = None, storage: Optional[Storage] = None) -> FastAPI:
    settings = settings or Settings.from_env()
    logging.basicConfig(level=settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if getattr(app.state, "storage", None) is None:
            app.state.storage = build_storage(settings)
        if settings.is_development:
            seed_on_startup(app.state.storage, settings)
        logger.info("Storage ready.")
        yield
        app.state.storage.close()

    app = FastAPI(title="ProcessDesk Backend", lifespan=lifespan)
    app.state.settings = settings
    app.state.storage = storage

    origins = list(DEFAULT_ORIGINS)
    if settings.frontend_origin:
        origins.append(settings.frontend_origin)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)

    # ---------------- ROUTERS ----------------
    api = APIRouter(prefix="/api")
    api.include_router(project_router)
    api.include_router(team_member_router)
    api.include_router(process_router)
    api.include_router(requirement_router)
    api.include_router(test_case_router)
    api.include_router(cost_item_router)
    api.include_router(activity_router)
    api.include_router(template_router)
    api.include_router(init_router)
    app.include_router(api)

    # ---------------- ROOT ----------------
    @app.get("/")
    def read_root():
        return {"message": "Backend running successfully"}

    return app


# uvicorn processdesk.main:app
app = create_app()
