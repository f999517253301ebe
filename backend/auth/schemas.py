# ---------------------------------------------------------------------------
# Author  : Kyle <kyle@hacking-linux.com>
# Version : 20261019v1
# ---------------------------------------------------------------------------
"""Pydantic request / response models for the auth endpoints."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class _Schema(BaseModel):
    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
        "from_attributes": True,
    }


# -- Requests --------------------------------------------------------------


class LoginRequest(_Schema):
    username: str
    password: str


class ChangePasswordRequest(_Schema):
    old_password: str
    new_password: str


# -- Responses -------------------------------------------------------------


class UserRow(_Schema):
    """A back-office account.  The password (hash) is never part of it."""

    id: int
    username: str
    is_admin: bool
    created_at: Optional[datetime] = None


class LoginResponse(_Schema):
    access_token: str
    token_type: str  # always "bearer"
    user: UserRow
