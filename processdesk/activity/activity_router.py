# processdesk/activity/activity_router.py

from typing import Any

from fastapi import APIRouter, Body, Depends

from processdesk.dependencies import get_storage
from processdesk.errors import parse_insert
from processdesk.schemas.activity_schema import ActivityCreate, ActivityRead
from processdesk.storage.base import Storage

router = APIRouter(tags=["activities"])


@router.get("/projects/{project_id}/activities", response_model=list[ActivityRead])
def get_activities(project_id: int, storage: Storage = Depends(get_storage)):
    return storage.activities.list(project_id)


@router.post("/projects/{project_id}/activities", response_model=ActivityRead)
def create_activity(
    project_id: int,
    payload: Any = Body(None),
    storage: Storage = Depends(get_storage),
):
    # timestamp is set by the store
    data = parse_insert(ActivityCreate, payload, "Invalid activity data", project_id=project_id)
    return storage.activities.create(data)
