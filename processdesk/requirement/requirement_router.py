# processdesk/requirement/requirement_router.py

from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException

from processdesk.dependencies import get_storage
from processdesk.errors import parse_insert, require_changes
from processdesk.schemas.requirement_schema import RequirementCreate, RequirementRead
from processdesk.storage.base import Storage

router = APIRouter(tags=["requirements"])


@router.get("/projects/{project_id}/requirements", response_model=list[RequirementRead])
def get_requirements(project_id: int, storage: Storage = Depends(get_storage)):
    return storage.requirements.list(project_id)


@router.post("/projects/{project_id}/requirements", response_model=RequirementRead)
def create_requirement(
    project_id: int,
    payload: Any = Body(None),
    storage: Storage = Depends(get_storage),
):
    data = parse_insert(RequirementCreate, payload, "Invalid requirement data", project_id=project_id)
    return storage.requirements.create(data)


@router.patch("/requirements/{requirement_id}", response_model=RequirementRead)
def update_requirement(
    requirement_id: int,
    payload: Any = Body(None),
    storage: Storage = Depends(get_storage),
):
    changes = require_changes(payload, "Invalid requirement data")
    requirement = storage.requirements.update(requirement_id, changes)
    if not requirement:
        raise HTTPException(404, "Requirement not found")
    return requirement
