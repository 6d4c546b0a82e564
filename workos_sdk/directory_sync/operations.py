"""
Directory sync API.

https://workos.com/docs/reference/directory-sync
"""
import logging
from typing import Optional

from ..core.api import ApiArea
from ..core.models import PaginatedList
from ..core.validation import path_segment
from .models import (
    Directory,
    DirectoryGroup,
    DirectoryUser,
    ListDirectoriesParams,
    ListDirectoryGroupsParams,
    ListDirectoryUsersParams,
)

logger = logging.getLogger(__name__)


class DirectorySync(ApiArea):
    """Read access to synced directories, their users and groups."""

    async def get_directory(self, directory_id: str) -> Directory:
        return await self._make_request(
            "GET", f"/directories/{path_segment(directory_id)}", Directory
        )

    async def list_directories(
        self, params: Optional[ListDirectoriesParams] = None
    ) -> PaginatedList[Directory]:
        params = params or ListDirectoriesParams()
        return await self._make_request(
            "GET", "/directories", PaginatedList[Directory], params=params.to_query()
        )

    async def delete_directory(self, directory_id: str) -> None:
        await self._make_request("DELETE", f"/directories/{path_segment(directory_id)}")
        logger.info(f"Deleted directory: {directory_id}")

    async def get_directory_user(self, directory_user_id: str) -> DirectoryUser:
        return await self._make_request(
            "GET", f"/directory_users/{path_segment(directory_user_id)}", DirectoryUser
        )

    async def list_directory_users(
        self, params: ListDirectoryUsersParams
    ) -> PaginatedList[DirectoryUser]:
        return await self._make_request(
            "GET", "/directory_users", PaginatedList[DirectoryUser], params=params.to_query()
        )

    async def get_directory_group(self, directory_group_id: str) -> DirectoryGroup:
        return await self._make_request(
            "GET", f"/directory_groups/{path_segment(directory_group_id)}", DirectoryGroup
        )

    async def list_directory_groups(
        self, params: ListDirectoryGroupsParams
    ) -> PaginatedList[DirectoryGroup]:
        return await self._make_request(
            "GET", "/directory_groups", PaginatedList[DirectoryGroup], params=params.to_query()
        )
