# ---------------------------------------------------------------------------
# Author  : Kyle <kyle@hacking-linux.com>
# Version : 20261019v1
# ---------------------------------------------------------------------------
"""
Back-office security: password hashes, bearer tokens and the two guards
that protect every content write.  Routers and storage import from here and
never call passlib or PyJWT themselves.

Responsibilities
----------------
1. Password hashing / verification          (passlib pbkdf2_sha256)
2. JWT creation / decoding                  (PyJWT / HS256)
3. FastAPI dependency guards                (get_current_user, require_auth,
                                             require_admin)

The guards only ever *read* the caller's identity.  They run as route
dependencies, so a rejected request never reaches body validation or the
storage layer.
"""

from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt as _jwt        # PyJWT
from passlib.hash import pbkdf2_sha256 as _pbkdf2  # pure Python, no binary deps
from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer

from auth.schemas import UserRow
from core.config import settings
from core.logger import logger
from storage.factory import get_storage

# ---------------------------------------------------------------------------
# 1.  pbkdf2_sha256 – password hashing
# ---------------------------------------------------------------------------
# Only the SQL storage backend hashes; the in-memory backend is for local
# development and keeps plaintext.
# ---------------------------------------------------------------------------


def hash_password(plain: str) -> str:
    """
    Hash a plaintext password with PBKDF2-SHA256 (600 000 rounds).

    The salt is embedded inside the returned passlib hash string
    (e.g. ``"$pbkdf2-sha256$600000$..."``).
    """
    return _pbkdf2.using(rounds=600_000).hash(plain)


def verify_password(plain: str, stored_hash: str) -> bool:
    """
    Constant-time verification of a plaintext password against a
    pbkdf2_sha256 hash produced by :func:`hash_password`.
    """
    return _pbkdf2.verify(plain, stored_hash)


# ---------------------------------------------------------------------------
# 2.  JWT – access tokens
# ---------------------------------------------------------------------------


def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    """
    Sign a JWT with HS256.

    *data* should contain at minimum: sub (username), user_id, is_admin.
    An ``exp`` claim is added automatically.
    """
    to_encode = data.copy()
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=settings.access_token_expire_minutes)
    )
    to_encode["exp"] = expire
    return _jwt.encode(to_encode, settings.secret_key, algorithm="HS256")


def decode_access_token(token: str) -> Optional[dict]:
    """
    Decode and verify a JWT.  Returns None on any failure (expired, bad
    signature, malformed) – the guards decide how to answer.
    """
    try:
        return _jwt.decode(token, settings.secret_key, algorithms=["HS256"])
    except _jwt.InvalidTokenError as exc:
        logger.info("Rejected access token: %s", exc)
        return None


# ---------------------------------------------------------------------------
# 3.  FastAPI dependency guards
# ---------------------------------------------------------------------------

# The tokenUrl here is only used by the auto-generated OpenAPI docs.
# auto_error=False: public routes share get_current_user, so a missing
# header must not fail on its own.
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/login", auto_error=False)


def get_current_user(
    token: Optional[str] = Depends(oauth2_scheme),
    storage=Depends(get_storage),
) -> Optional[UserRow]:
    """
    Dependency: resolve the bearer token to a user, or None for anonymous
    callers, invalid tokens and deleted accounts.
    """
    if not token:
        return None
    payload = decode_access_token(token)
    if payload is None or "user_id" not in payload:
        return None
    return storage.get_user(payload["user_id"])


def require_auth(current_user: Optional[UserRow] = Depends(get_current_user)) -> UserRow:
    """Dependency: any logged-in user.  Raises 401 otherwise."""
    if current_user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return current_user


def require_admin(current_user: UserRow = Depends(require_auth)) -> UserRow:
    """
    Dependency: wraps :func:`require_auth` and additionally asserts
    ``is_admin``.  Raises 401 for anonymous callers, 403 for non-admins.
    """
    if not current_user.is_admin:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin access required",
        )
    return current_user
