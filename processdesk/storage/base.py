# processdesk/storage/base.py
"""
Storage contract shared by the in-memory and the SQL backends.

Every entity kind is exposed as a ``Collection`` with the same four
operations (list / get / create / update). Collections never validate the
shape of what they store: creation payloads are validated by the routers,
updates are merged as given.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Mapping, Optional, Type

from pydantic import BaseModel, ValidationError

from processdesk.schemas.base_schema import RecordSchema
from processdesk.storage.seed import seed_storage

# assigned by the store, never overwritten through update()
SERVER_FIELDS = frozenset({"id", "created_at", "timestamp"})


def normalize_changes(record_schema: Type[RecordSchema], changes: Mapping[str, Any]) -> Dict[str, Any]:
    """Map wire (camelCase) keys onto attribute names; unknown keys pass through."""
    names = {}
    for name, field in record_schema.model_fields.items():
        names[name] = name
        if field.alias:
            names[field.alias] = name

    normalized = {}
    for key, value in changes.items():
        name = names.get(key, key)
        if name in SERVER_FIELDS:
            continue
        normalized[name] = value
    return normalized


class InvalidChangesError(ValueError):
    """An update carried a value that does not fit the field it targets."""

    def __init__(self, kind: str, errors):
        super().__init__(f"Invalid {kind} data")
        self.kind = kind
        self.errors = errors


def merge_changes(record: RecordSchema, changes: Mapping[str, Any]) -> RecordSchema:
    """
    Build the record an update would produce, without storing anything.

    Any field may be replaced and unknown keys ride along as extras, but
    values of known fields go through the record schema (lax mode, so "50"
    still becomes 50). A value that cannot be read back raises
    ValidationError before either store writes it.
    """
    # model_dump hands back fresh containers, the old record is left untouched
    merged = {**record.model_dump(), **normalize_changes(type(record), changes)}
    return type(record).model_validate(merged)


class Collection(ABC):
    """CRUD access to one entity kind."""

    def __init__(self, kind: str, record_schema: Type[RecordSchema], stamp_field: Optional[str] = None):
        self.kind = kind
        self.record_schema = record_schema
        # "created_at" / "timestamp", set on create
        self.stamp_field = stamp_field

    @property
    def project_scoped(self) -> bool:
        return "project_id" in self.record_schema.model_fields

    @abstractmethod
    def list(self, project_id: Optional[int] = None) -> List[RecordSchema]:
        ...

    @abstractmethod
    def get(self, record_id: int) -> Optional[RecordSchema]:
        ...

    @abstractmethod
    def create(self, data: BaseModel) -> RecordSchema:
        ...

    @abstractmethod
    def update(self, record_id: int, changes: Mapping[str, Any]) -> Optional[RecordSchema]:
        ...

    def _merge(self, record: RecordSchema, changes: Mapping[str, Any]) -> RecordSchema:
        try:
            return merge_changes(record, changes)
        except ValidationError as exc:
            raise InvalidChangesError(self.kind, exc.errors(include_url=False)) from exc


class Storage(ABC):
    projects: Collection
    team_members: Collection
    processes: Collection
    requirements: Collection
    test_cases: Collection
    cost_items: Collection
    activities: Collection

    def seed(self, dataset: Mapping[str, Any]) -> bool:
        """Insert the demonstration dataset unless projects already exist."""
        return seed_storage(self, dataset)

    def close(self) -> None:
        pass
