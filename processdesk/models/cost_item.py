# processdesk/models/cost_item.py
from __future__ import annotations

from sqlalchemy import Column, Integer, String
from processdesk.database import Base


class CostItem(Base):
    __tablename__ = "cost_items"

    id = Column(Integer, primary_key=True, index=True)
    project_id = Column(Integer, nullable=False, index=True)

    category = Column(String, nullable=False)

    # whole currency units
    budgeted = Column(Integer, nullable=False)
    actual = Column(Integer, nullable=False, default=0)

    status = Column(String, nullable=False, default="Not Started")
