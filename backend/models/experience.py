# ---------------------------------------------------------------------------
# Author  : Kyle <kyle@hacking-linux.com>
# Version : 20261019v1
# ---------------------------------------------------------------------------
"""Experience ORM model."""

from sqlalchemy import Column, Integer, String, JSON

from database import Base


class Experience(Base):
    __tablename__ = "experiences"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(150), nullable=False)
    company = Column(String(150), nullable=False)
    period = Column(String(50), nullable=True)
    responsibilities = Column(JSON, nullable=False, default=list)
    display_order = Column(Integer, nullable=False, default=0)
