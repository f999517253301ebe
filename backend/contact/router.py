# ---------------------------------------------------------------------------
# Author  : Kyle <kyle@hacking-linux.com>
# Version : 20261019v1
# ---------------------------------------------------------------------------
"""
Contact form endpoint – public and write-only.

The submission is validated here and handed to the configured mailer.  It is
never written to storage.
"""

import re

from fastapi import APIRouter, Depends, HTTPException, status

from contact.mailer import Mailer, get_mailer
from contact.schemas import ContactMessage, ContactResponse
from core.logger import logger

router = APIRouter(prefix="/api", tags=["contact"])

_EMAIL_RE = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")


def _validate_message(body: ContactMessage) -> str | None:
    """
    Return an error string if the submission is unusable, or None if it is
    acceptable.
    """
    if not body.name or not body.email or not body.message:
        return "Missing required fields"
    if not _EMAIL_RE.fullmatch(body.email):
        return "Invalid email format"
    return None


# ---------------------------------------------------------------------------
# POST /api/contact
# ---------------------------------------------------------------------------


@router.post("/contact", response_model=ContactResponse)
def send_contact_message(body: ContactMessage, mailer: Mailer = Depends(get_mailer)):
    """Validate a contact-form submission and hand it to the mailer."""
    err = _validate_message(body)
    if err:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=err)

    try:
        mailer.send(body)
    except Exception:
        logger.exception("Failed to deliver contact form submission from %s", body.email)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to send message. Please try again later.",
        )

    return ContactResponse(success=True, message="Message received!")
