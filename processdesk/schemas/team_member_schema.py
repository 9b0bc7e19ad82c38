# processdesk/schemas/team_member_schema.py

from processdesk.schemas.base_schema import InsertSchema, ProjectScopedRecord


class TeamMemberCreate(InsertSchema):
    project_id: int
    name: str
    role: str
    initials: str   # "JD"
    color: str      # avatar colour name, ex: "blue"


class TeamMemberRead(ProjectScopedRecord):
    name: str
    role: str
    initials: str
    color: str
