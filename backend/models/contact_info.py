# ---------------------------------------------------------------------------
# Author  : Kyle <kyle@hacking-linux.com>
# Version : 20261019v1
# ---------------------------------------------------------------------------
"""ContactInfo ORM model – single-row public contact details."""

from sqlalchemy import Column, Integer, String

from database import Base


class ContactInfo(Base):
    __tablename__ = "contact_info"

    id = Column(Integer, primary_key=True, autoincrement=True)
    email = Column(String(150), nullable=True)
    phone = Column(String(50), nullable=True)
    location = Column(String(150), nullable=True)
    github = Column(String(255), nullable=True)
    linkedin = Column(String(255), nullable=True)
    stackoverflow = Column(String(255), nullable=True)
