"""
Passwordless (Magic Link) API area.
"""
from .models import (
    CreatePasswordlessSessionParams,
    PasswordlessSession,
    PasswordlessSessionType,
)
from .operations import Passwordless

__all__ = [
    "CreatePasswordlessSessionParams",
    "Passwordless",
    "PasswordlessSession",
    "PasswordlessSessionType",
]
