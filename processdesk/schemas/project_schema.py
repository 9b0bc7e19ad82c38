# processdesk/schemas/project_schema.py

from datetime import datetime
from typing import Optional

from processdesk.schemas.base_schema import InsertSchema, RecordSchema


# --------- Base schema (common fields) ---------
class ProjectBase(InsertSchema):
    name: str
    description: str
    status: str = "In Progress"
    completion: int = 0       # percentage, 0-100
    due_date: str             # "2024-12-15"


# --------- For creating a project (POST) ---------
class ProjectCreate(ProjectBase):
    pass


# --------- For reading a project (GET responses) ---------
class ProjectRead(RecordSchema):
    name: str
    description: str
    status: str
    completion: int
    due_date: str
    created_at: Optional[datetime] = None
