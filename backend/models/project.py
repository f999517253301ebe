# ---------------------------------------------------------------------------
# Author  : Kyle <kyle@hacking-linux.com>
# Version : 20261019v1
# ---------------------------------------------------------------------------
"""Project ORM model."""

from sqlalchemy import Column, Integer, String, Text, Boolean, JSON

from database import Base


class Project(Base):
    __tablename__ = "projects"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(150), nullable=False)
    period = Column(String(50), nullable=True)
    description = Column(Text, nullable=True)
    technologies = Column(JSON, nullable=False, default=list)
    image = Column(String(255), nullable=True)
    demo_link = Column(String(255), nullable=True)
    code_link = Column(String(255), nullable=True)
    # Rewritten wholesale by POST /api/projects/reorder
    display_order = Column(Integer, nullable=False, default=0, index=True)
    featured = Column(Boolean, nullable=False, default=False)
