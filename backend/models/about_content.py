# ---------------------------------------------------------------------------
# Author  : Kyle <kyle@hacking-linux.com>
# Version : 20261019v1
# ---------------------------------------------------------------------------
"""AboutContent ORM model – single-row "About me" section."""

from sqlalchemy import Column, Integer, Text, JSON

from database import Base


class AboutContent(Base):
    __tablename__ = "about_content"

    id = Column(Integer, primary_key=True, autoincrement=True)
    journey_text = Column(Text, nullable=True)
    quote = Column(Text, nullable=True)
    # [{"icon": ..., "title": ..., "description": ...}, ...]
    expertise_items = Column(JSON, nullable=False, default=list)
    traits = Column(JSON, nullable=False, default=list)
