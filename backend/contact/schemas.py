# ---------------------------------------------------------------------------
# Author  : Kyle <kyle@hacking-linux.com>
# Version : 20261019v1
# ---------------------------------------------------------------------------
"""Pydantic request / response models for the contact form."""

from typing import Optional

from pydantic import BaseModel


# -- Requests --------------------------------------------------------------
# Everything is optional at the schema level: presence and e-mail format are
# checked by the endpoint so the visitor gets a plain-language message.


class ContactMessage(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    subject: Optional[str] = None
    message: Optional[str] = None


# -- Responses -------------------------------------------------------------


class ContactResponse(BaseModel):
    success: bool
    message: str
