# processdesk/schemas/activity_schema.py

from datetime import datetime
from typing import Optional

from processdesk.schemas.base_schema import InsertSchema, ProjectScopedRecord


class ActivityCreate(InsertSchema):
    project_id: int
    type: str
    title: str
    description: str


class ActivityRead(ProjectScopedRecord):
    type: str
    title: str
    description: str
    timestamp: Optional[datetime] = None
