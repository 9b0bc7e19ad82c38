# processdesk/models/requirement.py
from __future__ import annotations

from sqlalchemy import Column, Integer, String
from processdesk.database import Base


class Requirement(Base):
    __tablename__ = "requirements"

    id = Column(Integer, primary_key=True, index=True)
    project_id = Column(Integer, nullable=False, index=True)

    code = Column(String, nullable=False)  # ex: "REQ-001"
    title = Column(String, nullable=False)
    description = Column(String, nullable=False)

    type = Column(String, nullable=False, default="Functional")
    priority = Column(String, nullable=False, default="Medium")
    status = Column(String, nullable=False, default="Draft")
    owner = Column(String, nullable=False)
