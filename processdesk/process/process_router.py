# processdesk/process/process_router.py

from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException

from processdesk.dependencies import get_storage
from processdesk.errors import parse_insert, require_changes
from processdesk.schemas.process_schema import ProcessCreate, ProcessRead
from processdesk.storage.base import Storage

router = APIRouter(tags=["processes"])


@router.get("/projects/{project_id}/processes", response_model=list[ProcessRead])
def get_processes_by_project(project_id: int, storage: Storage = Depends(get_storage)):
    return storage.processes.list(project_id)


@router.get("/processes/{process_id}", response_model=ProcessRead)
def get_process(process_id: int, storage: Storage = Depends(get_storage)):
    process = storage.processes.get(process_id)
    if not process:
        raise HTTPException(404, "Process not found")
    return process


@router.post("/projects/{project_id}/processes", response_model=ProcessRead)
def create_process(
    project_id: int,
    payload: Any = Body(None),
    storage: Storage = Depends(get_storage),
):
    data = parse_insert(ProcessCreate, payload, "Invalid process data", project_id=project_id)
    return storage.processes.create(data)


@router.patch("/processes/{process_id}", response_model=ProcessRead)
def update_process(
    process_id: int,
    payload: Any = Body(None),
    storage: Storage = Depends(get_storage),
):
    # the designer only sends {"mermaidCode": ...}, but any field goes through
    changes = require_changes(payload, "Invalid process data")
    process = storage.processes.update(process_id, changes)
    if not process:
        raise HTTPException(404, "Process not found")
    return process
