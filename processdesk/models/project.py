# processdesk/models/project.py
from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, Integer, String
from processdesk.database import Base


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Project(Base):
    __tablename__ = "projects"

    id = Column(Integer, primary_key=True, index=True)

    name = Column(String, nullable=False)
    description = Column(String, nullable=False)

    # "In Progress" / "Planning" / "Completed" / "On Hold"
    status = Column(String, nullable=False, default="In Progress")
    completion = Column(Integer, nullable=False, default=0)

    # kept as the client sends it (ISO date text)
    due_date = Column(String, nullable=False)

    created_at = Column(DateTime(timezone=True), default=utcnow)
