# ---------------------------------------------------------------------------
# Author  : Kyle <kyle@hacking-linux.com>
# Version : 20261019v1
# ---------------------------------------------------------------------------
"""OpenSourceContribution ORM model."""

from sqlalchemy import Column, Integer, String, Text

from database import Base


class OpenSourceContribution(Base):
    __tablename__ = "open_source_contributions"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(150), nullable=False)
    description = Column(Text, nullable=True)
    link = Column(String(255), nullable=True)
    link_text = Column(String(100), nullable=True)
    icon = Column(String(50), nullable=True)
    display_order = Column(Integer, nullable=False, default=0)
