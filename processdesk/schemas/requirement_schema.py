# processdesk/schemas/requirement_schema.py

from processdesk.schemas.base_schema import InsertSchema, ProjectScopedRecord


# --------- Pentru CREATE ----------
class RequirementCreate(InsertSchema):
    project_id: int
    code: str
    title: str
    description: str
    type: str = "Functional"     # Functional / Non-Functional / Business / Technical
    priority: str = "Medium"     # High / Medium / Low
    status: str = "Draft"
    owner: str


# --------- Pentru READ ----------
class RequirementRead(ProjectScopedRecord):
    code: str
    title: str
    description: str
    type: str
    priority: str
    status: str
    owner: str
