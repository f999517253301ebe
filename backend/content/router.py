# ---------------------------------------------------------------------------
# Author  : Kyle <kyle@hacking-linux.com>
# Version : 20261019v1
# ---------------------------------------------------------------------------
"""
Portfolio content endpoints.

Every list kind gets the same five routes::

    GET    /api/<collection>           public
    GET    /api/<collection>/{id}      public
    POST   /api/<collection>           admin   → 201
    PUT    /api/<collection>/{id}      admin   (partial update)
    DELETE /api/<collection>/{id}      admin   → {"success": true}

Single-row kinds (settings, about, contact-info) only have GET and PUT.
``POST /api/projects/reorder`` rewrites the project display order.

Write routes carry ``require_admin`` as a route dependency, so the guard runs
before the body is validated and before storage is touched.  Unexpected
storage failures are logged with their traceback and answered with a generic
500 that names the operation but nothing about the backend.
"""

from contextlib import contextmanager
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from fastapi.exceptions import RequestValidationError

from content.kinds import KINDS, EntityKind
from content.schemas import ProjectReorderRequest, ProjectRow, SkillRow
from core.logger import logger
from core.security import require_admin
from storage.base import ReferenceNotFoundError, Storage
from storage.factory import get_storage

router = APIRouter(prefix="/api", tags=["content"])


# ---------------------------------------------------------------------------
# Error helpers
# ---------------------------------------------------------------------------


@contextmanager
def _storage_errors(action: str):
    """Turn any unexpected storage exception into a generic 500."""
    try:
        yield
    except HTTPException:
        raise
    except RequestValidationError:
        raise
    except Exception:
        logger.exception("Failed to %s", action)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to {action}",
        )


def _invalid_reference(exc: ReferenceNotFoundError) -> RequestValidationError:
    # Reported exactly like a schema validation failure on the offending field
    return RequestValidationError(
        [{"loc": ("body", exc.field), "msg": str(exc), "type": "value_error"}]
    )


# ---------------------------------------------------------------------------
# Route factories
# ---------------------------------------------------------------------------


def _register_collection(path: str, kind: EntityKind, with_list: bool = True) -> None:
    meta = KINDS[kind]
    Row, Create, Update = meta.row, meta.create, meta.update
    label = meta.label.lower()
    not_found = f"{meta.label} not found"

    if with_list:
        @router.get(path, response_model=List[Row], name=f"list_{kind.value}")
        def list_items(storage: Storage = Depends(get_storage)):
            with _storage_errors(f"fetch {meta.plural}"):
                return storage.list_items(kind)

    @router.get(path + "/{item_id}", response_model=Row, name=f"get_{kind.value}")
    def get_item(item_id: int, storage: Storage = Depends(get_storage)):
        with _storage_errors(f"fetch {label}"):
            item = storage.get_item(kind, item_id)
        if item is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=not_found)
        return item

    @router.post(
        path,
        response_model=Row,
        status_code=status.HTTP_201_CREATED,
        dependencies=[Depends(require_admin)],
        name=f"create_{kind.value}",
    )
    def create_item(body: Create, storage: Storage = Depends(get_storage)):
        with _storage_errors(f"create {label}"):
            try:
                item = storage.create_item(kind, body)
            except ReferenceNotFoundError as exc:
                raise _invalid_reference(exc)
        logger.info("Created %s id=%s", kind.value, item.id)
        return item

    @router.put(
        path + "/{item_id}",
        response_model=Row,
        dependencies=[Depends(require_admin)],
        name=f"update_{kind.value}",
    )
    def update_item(item_id: int, body: Update, storage: Storage = Depends(get_storage)):
        with _storage_errors(f"update {label}"):
            try:
                item = storage.update_item(kind, item_id, body)
            except ReferenceNotFoundError as exc:
                raise _invalid_reference(exc)
        if item is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=not_found)
        logger.info("Updated %s id=%s", kind.value, item_id)
        return item

    @router.delete(
        path + "/{item_id}",
        dependencies=[Depends(require_admin)],
        name=f"delete_{kind.value}",
    )
    def delete_item(item_id: int, storage: Storage = Depends(get_storage)):
        with _storage_errors(f"delete {label}"):
            deleted = storage.delete_item(kind, item_id)
        if not deleted:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=not_found)
        logger.info("Deleted %s id=%s", kind.value, item_id)
        return {"success": True}


def _register_singleton(path: str, kind: EntityKind) -> None:
    meta = KINDS[kind]
    Row, Update = meta.row, meta.update
    label = meta.label.lower()

    @router.get(path, response_model=Row, name=f"get_{kind.value}")
    def get_singleton(storage: Storage = Depends(get_storage)):
        """The stored row, or the documented defaults if nothing was saved yet."""
        with _storage_errors(f"fetch {label}"):
            return storage.get_singleton(kind)

    @router.put(
        path,
        response_model=Row,
        dependencies=[Depends(require_admin)],
        name=f"update_{kind.value}",
    )
    def upsert_singleton(body: Update, storage: Storage = Depends(get_storage)):
        with _storage_errors(f"update {label}"):
            item = storage.upsert_singleton(kind, body)
        logger.info("Updated %s", kind.value)
        return item


# ---------------------------------------------------------------------------
# GET /api/skills?categoryId=  – the one list route with a filter
# ---------------------------------------------------------------------------


@router.get("/skills", response_model=List[SkillRow])
def list_skills(
    category_id: Optional[int] = Query(None, alias="categoryId"),
    storage: Storage = Depends(get_storage),
):
    """Return all skills, optionally only those of one category."""
    filters = {} if category_id is None else {"category_id": category_id}
    with _storage_errors("fetch skills"):
        return storage.list_items(EntityKind.SKILLS, **filters)


# ---------------------------------------------------------------------------
# POST /api/projects/reorder  – rewrite project display order
# ---------------------------------------------------------------------------


@router.post(
    "/projects/reorder",
    response_model=List[ProjectRow],
    dependencies=[Depends(require_admin)],
)
def reorder_projects(body: ProjectReorderRequest, storage: Storage = Depends(get_storage)):
    """
    ``{"projectIds": [3, 1, 2]}`` sets displayOrder 0, 1, 2 on those projects
    and returns the re-sorted list.  An unknown id is a 404 and nothing is
    changed.
    """
    with _storage_errors("reorder projects"):
        try:
            return storage.reorder_items(EntityKind.PROJECTS, body.project_ids)
        except ReferenceNotFoundError as exc:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))


# ---------------------------------------------------------------------------
# Registration
# ---------------------------------------------------------------------------

_register_collection("/skill-categories", EntityKind.SKILL_CATEGORIES)
_register_collection("/skills", EntityKind.SKILLS, with_list=False)
_register_collection("/education", EntityKind.EDUCATION)
_register_collection("/experience", EntityKind.EXPERIENCE)
_register_collection("/projects", EntityKind.PROJECTS)
_register_collection("/open-source", EntityKind.OPEN_SOURCE)

_register_singleton("/settings", EntityKind.PORTFOLIO_SETTINGS)
_register_singleton("/about", EntityKind.ABOUT_CONTENT)
_register_singleton("/contact-info", EntityKind.CONTACT_INFO)
