"""
Directory sync API area.
"""
from .models import (
    Directory,
    DirectoryEvent,
    DirectoryGroup,
    DirectoryState,
    DirectoryType,
    DirectoryUser,
    DirectoryUserEmail,
    DirectoryUserRole,
    DirectoryUserState,
    ListDirectoriesParams,
    ListDirectoryGroupsParams,
    ListDirectoryUsersParams,
)
from .operations import DirectorySync

__all__ = [
    "Directory",
    "DirectoryEvent",
    "DirectoryGroup",
    "DirectoryState",
    "DirectorySync",
    "DirectoryType",
    "DirectoryUser",
    "DirectoryUserEmail",
    "DirectoryUserRole",
    "DirectoryUserState",
    "ListDirectoriesParams",
    "ListDirectoryGroupsParams",
    "ListDirectoryUsersParams",
]
