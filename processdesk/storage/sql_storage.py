# processdesk/storage/sql_storage.py

from __future__ import annotations

import logging
from typing import Any, List, Mapping, Optional, Type

from pydantic import BaseModel
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from processdesk.database import Base, build_engine, build_session_factory
from processdesk.models.activity import Activity
from processdesk.models.cost_item import CostItem
from processdesk.models.process import Process
from processdesk.models.project import Project
from processdesk.models.requirement import Requirement
from processdesk.models.team_member import TeamMember
from processdesk.models.test_case import TestCase
from processdesk.schemas.activity_schema import ActivityRead
from processdesk.schemas.base_schema import RecordSchema
from processdesk.schemas.cost_item_schema import CostItemRead
from processdesk.schemas.process_schema import ProcessRead
from processdesk.schemas.project_schema import ProjectRead
from processdesk.schemas.requirement_schema import RequirementRead
from processdesk.schemas.team_member_schema import TeamMemberRead
from processdesk.schemas.test_case_schema import TestCaseRead
from processdesk.storage.base import Collection, Storage, normalize_changes

logger = logging.getLogger("processdesk.storage")


class SqlCollection(Collection):
    def __init__(
        self,
        kind: str,
        model: Type[Base],
        record_schema: Type[RecordSchema],
        sessions: sessionmaker,
        stamp_field: Optional[str] = None,
    ):
        super().__init__(kind, record_schema, stamp_field)
        self.model = model
        self._sessions = sessions
        self._columns = set(model.__table__.columns.keys())

    def _read(self, row) -> RecordSchema:
        return self.record_schema.model_validate(row)

    def list(self, project_id: Optional[int] = None) -> List[RecordSchema]:
        with self._sessions() as db:
            q = db.query(self.model)
            if project_id is not None and self.project_scoped:
                q = q.filter(self.model.project_id == project_id)
            return [self._read(row) for row in q.order_by(self.model.id).all()]

    def get(self, record_id: int) -> Optional[RecordSchema]:
        with self._sessions() as db:
            row = db.get(self.model, record_id)
            return self._read(row) if row else None

    def create(self, data: BaseModel) -> RecordSchema:
        with self._sessions() as db:
            # id and created_at / timestamp come from the table defaults
            row = self.model(**data.model_dump())
            db.add(row)
            db.commit()
            db.refresh(row)
            return self._read(row)

    def update(self, record_id: int, changes: Mapping[str, Any]) -> Optional[RecordSchema]:
        with self._sessions() as db:
            row = db.get(self.model, record_id)
            if not row:
                return None

            # checked before anything touches the row, a bad value is never committed
            merged = self._merge(self._read(row), changes)

            for name in normalize_changes(self.record_schema, changes):
                if name not in self._columns:
                    logger.debug("update_field_dropped", extra={"kind": self.kind, "field": name})
                    continue
                setattr(row, name, getattr(merged, name))

            db.commit()
            db.refresh(row)
            return self._read(row)


class SqlStorage(Storage):
    """Relational store, one table per entity kind."""

    def __init__(self, engine: Engine):
        self.engine = engine

        # Creează tabelele o singură dată, aici
        Base.metadata.create_all(bind=engine)

        sessions = build_session_factory(engine)
        self.projects = SqlCollection("project", Project, ProjectRead, sessions, stamp_field="created_at")
        self.team_members = SqlCollection("team member", TeamMember, TeamMemberRead, sessions)
        self.processes = SqlCollection("process", Process, ProcessRead, sessions)
        self.requirements = SqlCollection("requirement", Requirement, RequirementRead, sessions)
        self.test_cases = SqlCollection("test case", TestCase, TestCaseRead, sessions)
        self.cost_items = SqlCollection("cost item", CostItem, CostItemRead, sessions)
        self.activities = SqlCollection("activity", Activity, ActivityRead, sessions, stamp_field="timestamp")

    @classmethod
    def from_url(cls, database_url: str, echo: bool = False) -> "SqlStorage":
        return cls(build_engine(database_url, echo=echo))

    def close(self) -> None:
        self.engine.dispose()
