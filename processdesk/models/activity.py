# processdesk/models/activity.py
from __future__ import annotations

from sqlalchemy import Column, DateTime, Integer, String
from processdesk.database import Base
from processdesk.models.project import utcnow


class Activity(Base):
    __tablename__ = "activities"

    id = Column(Integer, primary_key=True, index=True)
    project_id = Column(Integer, nullable=False, index=True)

    type = Column(String, nullable=False)  # ex: "process" | "requirement" | "test" | "cost"
    title = Column(String, nullable=False)
    description = Column(String, nullable=False)

    timestamp = Column(DateTime(timezone=True), default=utcnow)
