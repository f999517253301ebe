# ---------------------------------------------------------------------------
# Author  : Kyle <kyle@hacking-linux.com>
# Version : 20261019v1
# ---------------------------------------------------------------------------
"""
Storage contract shared by the in-memory and the SQL backend.

The public methods here hold every rule that must behave identically on both
backends – defaulting, patch semantics, reference checks, singleton upserts,
reordering and the startup bootstrap.  A backend only supplies the raw
row-level primitives (``_select``, ``_insert`` …) and the user methods.

"Not found" is a normal return value (``None`` / ``False``), not an
exception.  Exceptions are reserved for :class:`StorageError` subclasses the
API layer maps to client errors, and for genuine backend failures.
"""

import abc
import contextlib
from typing import Dict, Iterable, List, Optional, Union

from pydantic import BaseModel

from auth.schemas import UserRow
from content.kinds import KINDS, EntityKind
from core.logger import logger


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------


class StorageError(Exception):
    """Base class for storage failures the API layer reports to the client."""


class ReferenceNotFoundError(StorageError):
    """An id supplied by the caller does not resolve to an existing row."""

    def __init__(self, kind: EntityKind, item_id: int, field: Optional[str] = None):
        self.kind = kind
        self.item_id = item_id
        self.field = field
        super().__init__(f"{KINDS[kind].label} with ID {item_id} not found")


class ConflictError(StorageError):
    """A uniqueness constraint would be violated (duplicate username)."""


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

Payload = Union[BaseModel, Dict]


def _coerce(model, data: Payload) -> BaseModel:
    """Accept either a validated schema instance or a plain dict."""
    if isinstance(data, model):
        return data
    if isinstance(data, BaseModel):
        data = data.model_dump(exclude_unset=True)
    return model.model_validate(data)


def _check_kind(kind: EntityKind, singleton: bool) -> None:
    if KINDS[kind].singleton != singleton:
        expected = "single-row" if singleton else "list"
        raise ValueError(f"{kind.value} is not a {expected} content kind")


# ---------------------------------------------------------------------------
# Storage
# ---------------------------------------------------------------------------


class Storage(abc.ABC):

    # -- list kinds ---------------------------------------------------------

    def list_items(self, kind: EntityKind, **filters) -> List[BaseModel]:
        """
        All rows of *kind*, ordered by ``display_order`` (ties by insertion
        order) where the kind has one, otherwise by insertion order.
        *filters* are equality matches on row attributes, e.g.
        ``list_items(EntityKind.SKILLS, category_id=3)``.
        """
        _check_kind(kind, singleton=False)
        return self._select(kind, filters)

    def get_item(self, kind: EntityKind, item_id: int) -> Optional[BaseModel]:
        _check_kind(kind, singleton=False)
        return self._select_one(kind, item_id)

    def create_item(self, kind: EntityKind, data: Payload) -> BaseModel:
        """Insert a row; omitted optional fields get their documented defaults."""
        _check_kind(kind, singleton=False)
        values = _coerce(KINDS[kind].create, data).model_dump()
        with self._exclusive():
            self._check_references(kind, values)
            return self._insert(kind, values)

    def update_item(self, kind: EntityKind, item_id: int, patch: Payload) -> Optional[BaseModel]:
        """
        Apply a partial patch.  Only fields present in *patch* change; an empty
        patch returns the row untouched.  Returns None for an unknown id.
        """
        _check_kind(kind, singleton=False)
        values = _coerce(KINDS[kind].update, patch).model_dump(exclude_unset=True)
        with self._exclusive():
            existing = self._select_one(kind, item_id)
            if existing is None:
                return None
            if not values:
                return existing
            self._check_references(kind, values)
            return self._update(kind, item_id, values)

    def delete_item(self, kind: EntityKind, item_id: int) -> bool:
        """Delete a row.  Deleting a skill category also deletes its skills."""
        _check_kind(kind, singleton=False)
        with self._exclusive():
            return self._delete(kind, item_id)

    def reorder_items(self, kind: EntityKind, ids: Iterable[int]) -> List[BaseModel]:
        """
        Rewrite ``display_order`` from the position of each id in *ids*.

        Every id is checked before anything is written, so an unknown id
        leaves all rows untouched.  Rows not listed keep their old value.
        Returns the freshly sorted list.
        """
        _check_kind(kind, singleton=False)
        if not KINDS[kind].ordered:
            raise ValueError(f"{kind.value} has no display order")

        ids = list(ids)
        with self._exclusive():
            known = {row.id for row in self._select(kind, {})}
            for item_id in ids:
                if item_id not in known:
                    raise ReferenceNotFoundError(kind, item_id)

            self._apply_display_order(kind, {item_id: position for position, item_id in enumerate(ids)})
            logger.info("Reordered %s: %s", kind.value, ids)
            return self._select(kind, {})

    # -- single-row kinds ---------------------------------------------------

    def get_singleton(self, kind: EntityKind) -> BaseModel:
        """
        The stored row, or an unsaved row built from the documented defaults
        (``id`` is None).  Never creates a row.
        """
        _check_kind(kind, singleton=True)
        existing = self._first(kind)
        if existing is not None:
            return existing
        meta = KINDS[kind]
        return meta.row.model_validate(meta.create().model_dump())

    def upsert_singleton(self, kind: EntityKind, patch: Payload) -> BaseModel:
        """Create the row on the first write, patch that same row afterwards."""
        _check_kind(kind, singleton=True)
        meta = KINDS[kind]
        values = _coerce(meta.update, patch).model_dump(exclude_unset=True)
        with self._exclusive():
            existing = self._first(kind)
            if existing is None:
                return self._insert(kind, meta.create.model_validate(values).model_dump())
            return self._update(kind, existing.id, values)

    # -- bootstrap ----------------------------------------------------------

    def initialize_database(self, admin_username: str = "admin", admin_password: str = "admin123") -> None:
        """
        Idempotent startup bootstrap: make sure an admin account and the
        portfolio settings row exist.  Existing data is never touched.
        """
        self._prepare()

        with self._exclusive():
            if not self.has_admin():
                self.create_user(admin_username, admin_password, is_admin=True)
                logger.warning(
                    "Created default admin user '%s' – change its password after the first login",
                    admin_username,
                )

            if self._first(EntityKind.PORTFOLIO_SETTINGS) is None:
                self.upsert_singleton(EntityKind.PORTFOLIO_SETTINGS, {})
                logger.info("Created default portfolio settings")

    # -- shared rules -------------------------------------------------------

    def _check_references(self, kind: EntityKind, values: Dict) -> None:
        if kind is EntityKind.SKILLS and "category_id" in values:
            category_id = values["category_id"]
            if self._select_one(EntityKind.SKILL_CATEGORIES, category_id) is None:
                raise ReferenceNotFoundError(EntityKind.SKILL_CATEGORIES, category_id, field="categoryId")

    def _first(self, kind: EntityKind) -> Optional[BaseModel]:
        rows = self._select(kind, {})
        return rows[0] if rows else None

    # -- backend primitives -------------------------------------------------

    def _exclusive(self):
        """
        Context manager held around every check-then-write sequence above.
        The SQL backend relies on the database and needs no lock here.
        """
        return contextlib.nullcontext()

    def _prepare(self) -> None:
        """Backend-specific setup run at the start of initialize_database()."""

    @abc.abstractmethod
    def _select(self, kind: EntityKind, filters: Dict) -> List[BaseModel]:
        ...

    @abc.abstractmethod
    def _select_one(self, kind: EntityKind, item_id: int) -> Optional[BaseModel]:
        ...

    @abc.abstractmethod
    def _insert(self, kind: EntityKind, values: Dict) -> BaseModel:
        ...

    @abc.abstractmethod
    def _update(self, kind: EntityKind, item_id: int, values: Dict) -> Optional[BaseModel]:
        ...

    @abc.abstractmethod
    def _delete(self, kind: EntityKind, item_id: int) -> bool:
        ...

    @abc.abstractmethod
    def _apply_display_order(self, kind: EntityKind, positions: Dict[int, int]) -> None:
        ...

    # -- users --------------------------------------------------------------

    @abc.abstractmethod
    def get_user(self, user_id: int) -> Optional[UserRow]:
        ...

    @abc.abstractmethod
    def get_user_by_username(self, username: str) -> Optional[UserRow]:
        ...

    @abc.abstractmethod
    def create_user(self, username: str, password: str, is_admin: bool = False) -> UserRow:
        """Raises :class:`ConflictError` if the username is taken."""

    @abc.abstractmethod
    def validate_user(self, username: str, password: str) -> Optional[UserRow]:
        """Return the user if the credentials match, else None."""

    @abc.abstractmethod
    def has_admin(self) -> bool:
        ...

    @abc.abstractmethod
    def set_user_password(self, user_id: int, password: str) -> bool:
        ...
