# processdesk/project/project_router.py

from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException

from processdesk.dependencies import get_storage
from processdesk.errors import parse_insert, require_changes
from processdesk.schemas.project_schema import ProjectCreate, ProjectRead
from processdesk.storage.base import Storage

router = APIRouter(tags=["projects"])


# ==========================
#  GET ALL PROJECTS
# ==========================
@router.get("/projects", response_model=list[ProjectRead])
def get_all_projects(storage: Storage = Depends(get_storage)):
    return storage.projects.list()


# ==========================
#  GET PROJECT BY ID
# ==========================
@router.get("/projects/{project_id}", response_model=ProjectRead)
def get_project(project_id: int, storage: Storage = Depends(get_storage)):
    project = storage.projects.get(project_id)
    if not project:
        raise HTTPException(404, "Project not found")
    return project


# ==========================
#  CREATE PROJECT
# ==========================
@router.post("/projects", response_model=ProjectRead)
def create_project(payload: Any = Body(None), storage: Storage = Depends(get_storage)):
    data = parse_insert(ProjectCreate, payload, "Invalid project data")
    return storage.projects.create(data)


# ==========================
#  UPDATE PROJECT (PATCH)
# ==========================
@router.patch("/projects/{project_id}", response_model=ProjectRead)
def update_project(
    project_id: int,
    payload: Any = Body(None),
    storage: Storage = Depends(get_storage),
):
    changes = require_changes(payload, "Invalid project data")
    project = storage.projects.update(project_id, changes)
    if not project:
        raise HTTPException(404, "Project not found")
    return project
