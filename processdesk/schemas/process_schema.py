# processdesk/schemas/process_schema.py

from typing import List

from processdesk.schemas.base_schema import InsertSchema, ProjectScopedRecord


class ProcessCreate(InsertSchema):
    project_id: int
    name: str
    description: str
    mermaid_code: str
    swimlanes: List[str]


class ProcessRead(ProjectScopedRecord):
    name: str
    description: str
    mermaid_code: str
    swimlanes: List[str]
