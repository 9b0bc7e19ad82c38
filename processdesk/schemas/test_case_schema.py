# processdesk/schemas/test_case_schema.py

from typing import Optional

from processdesk.schemas.base_schema import InsertSchema, ProjectScopedRecord


class TestCaseCreate(InsertSchema):
    __test__ = False

    project_id: int
    code: str
    title: str
    description: str
    steps: str
    expected: str
    priority: str = "Medium"
    status: str = "Pending"   # Pending / Passed / Failed / Blocked
    tester: str
    issue: Optional[str] = None


class TestCaseRead(ProjectScopedRecord):
    __test__ = False

    code: str
    title: str
    description: str
    steps: str
    expected: str
    priority: str
    status: str
    tester: str
    issue: Optional[str] = None
