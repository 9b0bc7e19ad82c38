# processdesk/models/team_member.py
from __future__ import annotations

from sqlalchemy import Column, Integer, String
from processdesk.database import Base


class TeamMember(Base):
    __tablename__ = "team_members"

    id = Column(Integer, primary_key=True, index=True)

    # no ForeignKey: members may point at a project that does not exist (yet)
    project_id = Column(Integer, nullable=False, index=True)

    name = Column(String, nullable=False)
    role = Column(String, nullable=False)
    initials = Column(String, nullable=False)
    color = Column(String, nullable=False)
