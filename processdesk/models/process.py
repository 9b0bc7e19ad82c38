# processdesk/models/process.py
from __future__ import annotations

from sqlalchemy import Column, Integer, JSON, String, Text
from processdesk.database import Base


class Process(Base):
    __tablename__ = "processes"

    id = Column(Integer, primary_key=True, index=True)
    project_id = Column(Integer, nullable=False, index=True)

    name = Column(String, nullable=False)
    description = Column(String, nullable=False)

    # Mermaid flowchart source, rendered by the client
    mermaid_code = Column(Text, nullable=False)
    # ordered lane names
    swimlanes = Column(JSON, nullable=False, default=list)
