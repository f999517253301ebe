# ---------------------------------------------------------------------------
# Author  : Kyle <kyle@hacking-linux.com>
# Version : 20261019v1
# ---------------------------------------------------------------------------
"""SkillCategory and Skill ORM models."""

from sqlalchemy import Column, Integer, String, ForeignKey

from database import Base


class SkillCategory(Base):
    __tablename__ = "skills_categories"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False)
    icon = Column(String(50), nullable=False)
    display_order = Column(Integer, nullable=False, default=0)


class Skill(Base):
    __tablename__ = "skills"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False)
    level = Column(Integer, nullable=False)
    # Cascade delete: removing a category removes all its skills atomically.
    category_id = Column(
        Integer,
        ForeignKey("skills_categories.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
