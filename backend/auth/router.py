# ---------------------------------------------------------------------------
# Author  : Kyle <kyle@hacking-linux.com>
# Version : 20261019v1
# ---------------------------------------------------------------------------
"""
Auth endpoints – login, logout, password change, current-user info.

Security notes
--------------
* Login returns the *same* error message whether the username doesn't exist
  or the password is wrong.  This prevents user-enumeration attacks.
* Tokens are stateless JWTs; logout is a client-side operation and the
  endpoint exists so the back-office has a uniform API to call.
* change-password verifies the old password before accepting the new one,
  so a stolen (but not yet expired) token alone cannot reset the password.
"""

import re

from fastapi import APIRouter, Depends, HTTPException, status

from auth.schemas import ChangePasswordRequest, LoginRequest, LoginResponse, UserRow
from core.logger import logger
from core.security import create_access_token, get_current_user, require_auth
from storage.base import Storage
from storage.factory import get_storage

router = APIRouter(prefix="/api", tags=["auth"])

# Generic message used for both "no such user" and "wrong password"
_LOGIN_FAIL = "Invalid username or password"


def _validate_new_password(pw: str) -> str | None:
    """
    Return an error string if the password does not meet the minimum policy,
    or None if it is acceptable.

    Policy: >= 8 chars, at least one uppercase, one lowercase, one digit.
    """
    if len(pw) < 8:
        return "Password must be at least 8 characters"
    if not re.search(r"[A-Z]", pw):
        return "Password must contain at least one uppercase letter"
    if not re.search(r"[a-z]", pw):
        return "Password must contain at least one lowercase letter"
    if not re.search(r"[0-9]", pw):
        return "Password must contain at least one digit"
    return None


# ---------------------------------------------------------------------------
# POST /api/login
# ---------------------------------------------------------------------------


@router.post("/login", response_model=LoginResponse)
def login(body: LoginRequest, storage: Storage = Depends(get_storage)):
    """Authenticate and return a signed JWT."""
    user = storage.validate_user(body.username, body.password)
    if user is None:
        logger.info("Failed login attempt for '%s'", body.username)
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=_LOGIN_FAIL)

    token = create_access_token(
        {"sub": user.username, "user_id": user.id, "is_admin": user.is_admin}
    )
    logger.info("User '%s' logged in", user.username)
    return LoginResponse(access_token=token, token_type="bearer", user=user)


# ---------------------------------------------------------------------------
# POST /api/logout
# ---------------------------------------------------------------------------


@router.post("/logout")
def logout(current_user: UserRow | None = Depends(get_current_user)):
    """Nothing to revoke server-side; the client discards its token."""
    if current_user is not None:
        logger.info("User '%s' logged out", current_user.username)
    return {"success": True}


# ---------------------------------------------------------------------------
# GET /api/user
# ---------------------------------------------------------------------------


@router.get("/user", response_model=UserRow)
def me(current_user: UserRow = Depends(require_auth)):
    """Return the authenticated user's public profile (no secrets)."""
    return current_user


# ---------------------------------------------------------------------------
# PUT /api/change-password
# ---------------------------------------------------------------------------


@router.put("/change-password")
def change_password(
    body: ChangePasswordRequest,
    current_user: UserRow = Depends(require_auth),
    storage: Storage = Depends(get_storage),
):
    """Change the authenticated user's login password."""
    if storage.validate_user(current_user.username, body.old_password) is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Old password is incorrect",
        )

    err = _validate_new_password(body.new_password)
    if err:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=err)

    storage.set_user_password(current_user.id, body.new_password)
    logger.info("User '%s' changed their password", current_user.username)
    return {"detail": "Password changed successfully"}
