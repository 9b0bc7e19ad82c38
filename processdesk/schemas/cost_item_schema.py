# processdesk/schemas/cost_item_schema.py

from processdesk.schemas.base_schema import InsertSchema, ProjectScopedRecord


class CostItemCreate(InsertSchema):
    project_id: int
    category: str
    budgeted: int
    actual: int = 0
    status: str = "Not Started"   # Not Started / In Progress / Under Budget / Over Budget


class CostItemRead(ProjectScopedRecord):
    category: str
    budgeted: int
    actual: int
    status: str
