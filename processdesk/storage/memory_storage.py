# processdesk/storage/memory_storage.py

from __future__ import annotations

import itertools
from typing import Any, Callable, Dict, List, Mapping, Optional, Type

from pydantic import BaseModel

from processdesk.models.project import utcnow
from processdesk.schemas.activity_schema import ActivityRead
from processdesk.schemas.base_schema import RecordSchema
from processdesk.schemas.cost_item_schema import CostItemRead
from processdesk.schemas.process_schema import ProcessRead
from processdesk.schemas.project_schema import ProjectRead
from processdesk.schemas.requirement_schema import RequirementRead
from processdesk.schemas.team_member_schema import TeamMemberRead
from processdesk.schemas.test_case_schema import TestCaseRead
from processdesk.storage.base import Collection, Storage


class MemoryCollection(Collection):
    def __init__(
        self,
        kind: str,
        record_schema: Type[RecordSchema],
        next_id: Callable[[], int],
        stamp_field: Optional[str] = None,
    ):
        super().__init__(kind, record_schema, stamp_field)
        self._next_id = next_id
        # dicts keep insertion order
        self._records: Dict[int, RecordSchema] = {}

    def list(self, project_id: Optional[int] = None) -> List[RecordSchema]:
        records = list(self._records.values())
        if project_id is None or not self.project_scoped:
            return records
        return [r for r in records if r.project_id == project_id]

    def get(self, record_id: int) -> Optional[RecordSchema]:
        return self._records.get(record_id)

    def create(self, data: BaseModel) -> RecordSchema:
        values = data.model_dump()
        values["id"] = self._next_id()
        if self.stamp_field:
            values[self.stamp_field] = utcnow()

        record = self.record_schema.model_validate(values)
        self._records[record.id] = record
        return record

    def update(self, record_id: int, changes: Mapping[str, Any]) -> Optional[RecordSchema]:
        record = self._records.get(record_id)
        if record is None:
            return None

        updated = self._merge(record, changes)
        self._records[record_id] = updated
        return updated


class MemoryStorage(Storage):
    """Process-local store; everything is lost on restart."""

    def __init__(self):
        # one counter shared by every kind
        counter = itertools.count(1)

        def next_id() -> int:
            return next(counter)

        self.projects = MemoryCollection("project", ProjectRead, next_id, stamp_field="created_at")
        self.team_members = MemoryCollection("team member", TeamMemberRead, next_id)
        self.processes = MemoryCollection("process", ProcessRead, next_id)
        self.requirements = MemoryCollection("requirement", RequirementRead, next_id)
        self.test_cases = MemoryCollection("test case", TestCaseRead, next_id)
        self.cost_items = MemoryCollection("cost item", CostItemRead, next_id)
        self.activities = MemoryCollection("activity", ActivityRead, next_id, stamp_field="timestamp")
