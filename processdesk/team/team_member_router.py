# processdesk/team/team_member_router.py

from typing import Any

from fastapi import APIRouter, Body, Depends

from processdesk.dependencies import get_storage
from processdesk.errors import parse_insert
from processdesk.schemas.team_member_schema import TeamMemberCreate, TeamMemberRead
from processdesk.storage.base import Storage

router = APIRouter(tags=["team-members"])


@router.get("/projects/{project_id}/team-members", response_model=list[TeamMemberRead])
def get_team_members(project_id: int, storage: Storage = Depends(get_storage)):
    return storage.team_members.list(project_id)


@router.post("/projects/{project_id}/team-members", response_model=TeamMemberRead)
def create_team_member(
    project_id: int,
    payload: Any = Body(None),
    storage: Storage = Depends(get_storage),
):
    data = parse_insert(TeamMemberCreate, payload, "Invalid team member data", project_id=project_id)
    return storage.team_members.create(data)
