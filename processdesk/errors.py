# processdesk/errors.py

import logging
from typing import Any, Optional, Type

from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from processdesk.schemas.base_schema import InsertSchema
from processdesk.storage.base import InvalidChangesError

logger = logging.getLogger("processdesk.api")


def parse_insert(
    schema: Type[InsertSchema],
    payload: Any,
    message: str,
    project_id: Optional[int] = None,
) -> InsertSchema:
    """Validate a creation body; the owning project always comes from the path."""
    if not isinstance(payload, dict):
        raise HTTPException(400, message)

    body = {k: v for k, v in payload.items() if k not in ("projectId", "project_id")}
    if project_id is not None:
        body["projectId"] = project_id

    try:
        return schema.model_validate(body)
    except ValidationError as exc:
        # details stay in the logs, the caller only gets the generic message
        logger.info(
            "invalid_payload",
            extra={"schema": schema.__name__, "errors": exc.errors(include_url=False)},
        )
        raise HTTPException(400, message) from exc


def require_changes(payload: Any, message: str) -> dict:
    if not isinstance(payload, dict):
        raise HTTPException(400, message)
    return payload


# ================= HANDLERS =================
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(status_code=exc.status_code, content={"message": exc.detail})


async def invalid_changes_handler(request: Request, exc: InvalidChangesError):
    # nothing was stored, same generic message as a rejected creation
    logger.info("invalid_changes", extra={"kind": exc.kind, "errors": exc.errors})
    return JSONResponse(status_code=400, content={"message": str(exc)})


async def request_validation_handler(request: Request, exc: RequestValidationError):
    logger.info("invalid_request", extra={"path": request.url.path})
    return JSONResponse(status_code=400, content={"message": "Invalid request data"})


async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception("unhandled_error", extra={"path": request.url.path, "method": request.method})
    return JSONResponse(status_code=500, content={"message": "Internal server error"})


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(InvalidChangesError, invalid_changes_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
