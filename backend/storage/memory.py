# ---------------------------------------------------------------------------
# Author  : Kyle <kyle@hacking-linux.com>
# Version : 20261019v1
# ---------------------------------------------------------------------------
"""
In-memory storage backend.

Used when no DATABASE_URL is configured.  One dict per content kind maps
id → row, with a per-kind counter for id allocation; ids are never reused
for the lifetime of the instance.  Everything is lost on restart.

Route handlers run in FastAPI's threadpool, so every read and write goes
through one re-entrant lock, and rows leave the store as deep copies.

Development only: passwords are kept and compared in plaintext.
"""

import threading
from datetime import datetime, timezone
from typing import Dict, List, Optional

from pydantic import BaseModel

from auth.schemas import UserRow
from content.kinds import KINDS, EntityKind
from storage.base import ConflictError, Storage


def _now() -> datetime:
    return datetime.now(timezone.utc)


class MemStorage(Storage):

    def __init__(self):
        self._tables: Dict[EntityKind, Dict[int, BaseModel]] = {kind: {} for kind in EntityKind}
        self._users: Dict[int, UserRow] = {}
        self._passwords: Dict[int, str] = {}
        self._next_ids: Dict[str, int] = {kind.value: 1 for kind in EntityKind}
        self._next_ids["users"] = 1
        self._lock = threading.RLock()

    def _exclusive(self):
        return self._lock

    def _allocate_id(self, table: str) -> int:
        with self._lock:
            new_id = self._next_ids[table]
            self._next_ids[table] += 1
            return new_id

    # -- content primitives -------------------------------------------------

    def _select(self, kind: EntityKind, filters: Dict) -> List[BaseModel]:
        with self._lock:
            rows = [
                row.model_copy(deep=True) for row in self._tables[kind].values()
                if all(getattr(row, field) == value for field, value in filters.items())
            ]
        if KINDS[kind].ordered:
            # dicts keep insertion order and sort() is stable, so ties stay in id order
            rows.sort(key=lambda row: row.display_order)
        return rows

    def _select_one(self, kind: EntityKind, item_id: int) -> Optional[BaseModel]:
        with self._lock:
            row = self._tables[kind].get(item_id)
            return row.model_copy(deep=True) if row is not None else None

    def _insert(self, kind: EntityKind, values: Dict) -> BaseModel:
        meta = KINDS[kind]
        values = dict(values, id=self._allocate_id(kind.value))
        if "updated_at" in meta.row.model_fields:
            values["updated_at"] = _now()
        row = meta.row.model_validate(values)
        with self._lock:
            self._tables[kind][row.id] = row
        return row.model_copy(deep=True)

    def _update(self, kind: EntityKind, item_id: int, values: Dict) -> Optional[BaseModel]:
        meta = KINDS[kind]
        with self._lock:
            existing = self._tables[kind].get(item_id)
            if existing is None:
                return None
            merged = existing.model_dump()
            merged.update(values)
            merged["id"] = item_id
            if "updated_at" in meta.row.model_fields:
                merged["updated_at"] = _now()
            row = meta.row.model_validate(merged)
            self._tables[kind][item_id] = row
            return row.model_copy(deep=True)

    def _delete(self, kind: EntityKind, item_id: int) -> bool:
        with self._lock:
            if self._tables[kind].pop(item_id, None) is None:
                return False

            if kind is EntityKind.SKILL_CATEGORIES:
                skills = self._tables[EntityKind.SKILLS]
                for skill_id in [s.id for s in skills.values() if s.category_id == item_id]:
                    del skills[skill_id]
            return True

    def _apply_display_order(self, kind: EntityKind, positions: Dict[int, int]) -> None:
        with self._lock:
            table = self._tables[kind]
            for item_id, position in positions.items():
                table[item_id] = table[item_id].model_copy(update={"display_order": position})

    # -- users --------------------------------------------------------------

    def get_user(self, user_id: int) -> Optional[UserRow]:
        with self._lock:
            user = self._users.get(user_id)
            return user.model_copy() if user is not None else None

    def get_user_by_username(self, username: str) -> Optional[UserRow]:
        with self._lock:
            user = next((u for u in self._users.values() if u.username == username), None)
            return user.model_copy() if user is not None else None

    def create_user(self, username: str, password: str, is_admin: bool = False) -> UserRow:
        with self._lock:
            if self.get_user_by_username(username) is not None:
                raise ConflictError(f"Username '{username}' already exists")
            user = UserRow(
                id=self._allocate_id("users"),
                username=username,
                is_admin=is_admin,
                created_at=_now(),
            )
            self._users[user.id] = user
            self._passwords[user.id] = password
            return user.model_copy()

    def validate_user(self, username: str, password: str) -> Optional[UserRow]:
        with self._lock:
            user = self.get_user_by_username(username)
            if user is None or self._passwords[user.id] != password:
                return None
            return user

    def has_admin(self) -> bool:
        with self._lock:
            return any(u.is_admin for u in self._users.values())

    def set_user_password(self, user_id: int, password: str) -> bool:
        with self._lock:
            if user_id not in self._users:
                return False
            self._passwords[user_id] = password
            return True
