# ---------------------------------------------------------------------------
# Author  : Kyle <kyle@hacking-linux.com>
# Version : 20261019v1
# ---------------------------------------------------------------------------
"""
SQL storage backend (SQLAlchemy ORM).

Each storage call runs in its own short session that commits on success and
rolls back on any exception.  ORM rows are converted to the pydantic row
schemas before the session closes, so callers never hold ORM instances.

Category → skill cascade is left to the ``ON DELETE CASCADE`` foreign key;
no skill rows are touched explicitly here.
"""

from contextlib import contextmanager
from typing import Dict, Iterator, List, Optional

from pydantic import BaseModel
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session

from auth.schemas import UserRow
from content.kinds import KINDS, EntityKind
from core.security import hash_password, verify_password
from database import Base, make_session_factory
from models.about_content import AboutContent
from models.contact_info import ContactInfo
from models.education import Education
from models.experience import Experience
from models.open_source import OpenSourceContribution
from models.portfolio_settings import PortfolioSettings
from models.project import Project
from models.skill import Skill, SkillCategory
from models.user import User
from storage.base import ConflictError, Storage

_ORM = {
    EntityKind.SKILL_CATEGORIES: SkillCategory,
    EntityKind.SKILLS: Skill,
    EntityKind.EDUCATION: Education,
    EntityKind.EXPERIENCE: Experience,
    EntityKind.PROJECTS: Project,
    EntityKind.OPEN_SOURCE: OpenSourceContribution,
    EntityKind.PORTFOLIO_SETTINGS: PortfolioSettings,
    EntityKind.ABOUT_CONTENT: AboutContent,
    EntityKind.CONTACT_INFO: ContactInfo,
}


def _to_row(kind: EntityKind, obj) -> BaseModel:
    return KINDS[kind].row.model_validate(obj)


# Signed 64-bit, the widest integer a column can hold (SQLite INTEGER, BIGINT)
_INT_MIN, _INT_MAX = -(2 ** 63), 2 ** 63 - 1


def _storable(value) -> bool:
    """False for ints no row can hold; binding them overflows in the driver."""
    return not isinstance(value, int) or _INT_MIN <= value <= _INT_MAX


class SqlStorage(Storage):

    def __init__(self, engine: Engine, auto_create_tables: bool = True):
        self._engine = engine
        self._sessions = make_session_factory(engine)
        self._auto_create_tables = auto_create_tables

    @contextmanager
    def _session(self) -> Iterator[Session]:
        db = self._sessions()
        try:
            yield db
            db.commit()
        except Exception:
            db.rollback()
            raise
        finally:
            db.close()

    def _prepare(self) -> None:
        if self._auto_create_tables:
            # create_all only issues CREATE TABLE for tables that are missing
            Base.metadata.create_all(self._engine)

    # -- content primitives -------------------------------------------------

    def _select(self, kind: EntityKind, filters: Dict) -> List[BaseModel]:
        orm = _ORM[kind]
        if not all(_storable(value) for value in filters.values()):
            return []
        with self._session() as db:
            q = db.query(orm)
            for field, value in filters.items():
                q = q.filter(getattr(orm, field) == value)
            if KINDS[kind].ordered:
                q = q.order_by(orm.display_order, orm.id)
            else:
                q = q.order_by(orm.id)
            return [_to_row(kind, obj) for obj in q.all()]

    def _select_one(self, kind: EntityKind, item_id: int) -> Optional[BaseModel]:
        if not _storable(item_id):
            return None
        with self._session() as db:
            obj = db.get(_ORM[kind], item_id)
            return _to_row(kind, obj) if obj is not None else None

    def _insert(self, kind: EntityKind, values: Dict) -> BaseModel:
        with self._session() as db:
            obj = _ORM[kind](**values)
            db.add(obj)
            db.flush()
            db.refresh(obj)  # pick up the id and server-side timestamps
            return _to_row(kind, obj)

    def _update(self, kind: EntityKind, item_id: int, values: Dict) -> Optional[BaseModel]:
        if not _storable(item_id):
            return None
        with self._session() as db:
            obj = db.get(_ORM[kind], item_id)
            if obj is None:
                return None
            for field, value in values.items():
                setattr(obj, field, value)
            db.flush()
            db.refresh(obj)
            return _to_row(kind, obj)

    def _delete(self, kind: EntityKind, item_id: int) -> bool:
        if not _storable(item_id):
            return False
        with self._session() as db:
            obj = db.get(_ORM[kind], item_id)
            if obj is None:
                return False
            db.delete(obj)
            return True

    def _apply_display_order(self, kind: EntityKind, positions: Dict[int, int]) -> None:
        orm = _ORM[kind]
        # One session, one transaction for the whole batch
        with self._session() as db:
            for item_id, position in positions.items():
                db.query(orm).filter(orm.id == item_id).update(
                    {orm.display_order: position}, synchronize_session=False
                )

    # -- users --------------------------------------------------------------

    def get_user(self, user_id: int) -> Optional[UserRow]:
        if not _storable(user_id):
            return None
        with self._session() as db:
            user = db.get(User, user_id)
            return UserRow.model_validate(user) if user else None

    def get_user_by_username(self, username: str) -> Optional[UserRow]:
        with self._session() as db:
            user = db.query(User).filter(User.username == username).first()
            return UserRow.model_validate(user) if user else None

    def create_user(self, username: str, password: str, is_admin: bool = False) -> UserRow:
        with self._session() as db:
            if db.query(User).filter(User.username == username).first():
                raise ConflictError(f"Username '{username}' already exists")
            user = User(username=username, password=hash_password(password), is_admin=is_admin)
            db.add(user)
            db.flush()
            db.refresh(user)
            return UserRow.model_validate(user)

    def validate_user(self, username: str, password: str) -> Optional[UserRow]:
        with self._session() as db:
            user = db.query(User).filter(User.username == username).first()
            # Unified failure path – unknown user and wrong password look the same
            if not user or not verify_password(password, user.password):
                return None
            return UserRow.model_validate(user)

    def has_admin(self) -> bool:
        with self._session() as db:
            return db.query(User).filter(User.is_admin.is_(True)).first() is not None

    def set_user_password(self, user_id: int, password: str) -> bool:
        if not _storable(user_id):
            return False
        with self._session() as db:
            user = db.get(User, user_id)
            if user is None:
                return False
            user.password = hash_password(password)
            return True
