# ---------------------------------------------------------------------------
# Author  : Kyle <kyle@hacking-linux.com>
# Version : 20261019v1
# ---------------------------------------------------------------------------
"""Education ORM model."""

from sqlalchemy import Column, Integer, String, Text, JSON

from database import Base


class Education(Base):
    __tablename__ = "education"

    id = Column(Integer, primary_key=True, autoincrement=True)
    degree = Column(String(150), nullable=False)
    institution = Column(String(150), nullable=False)
    location = Column(String(100), nullable=True)
    period = Column(String(50), nullable=True)
    description = Column(Text, nullable=True)
    courses = Column(JSON, nullable=False, default=list)
    achievements = Column(Text, nullable=True)
    display_order = Column(Integer, nullable=False, default=0)
