"""
Passwordless session schemas.
"""
from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import EmailStr, Field

from ..core.models import RequestParams, WorkOsModel


class PasswordlessSessionType(str, Enum):
    MAGIC_LINK = "MagicLink"


class PasswordlessSession(WorkOsModel):
    """A Magic Link session."""

    id: str
    email: str
    link: str
    expires_at: datetime


class CreatePasswordlessSessionParams(RequestParams):
    email: EmailStr
    type: PasswordlessSessionType = PasswordlessSessionType.MAGIC_LINK
    redirect_uri: Optional[str] = None
    state: Optional[str] = None
    connection: Optional[str] = None
    expires_in: Optional[int] = Field(None, ge=900, le=86400)
