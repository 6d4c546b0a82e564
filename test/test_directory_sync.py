"""
Test suite for the directory sync API.
"""
import httpx
import pytest

from conftest import TIMESTAMPS, page
from workos_sdk.directory_sync import (
    DirectoryState,
    DirectoryType,
    ListDirectoriesParams,
    ListDirectoryGroupsParams,
    ListDirectoryUsersParams,
)


@pytest.fixture
def directory_json() -> dict:
    return {
        "object": "directory",
        "id": "directory_01ECAZ4NV9QMV47GW873HDCX74",
        "domain": "foo-corp.com",
        "name": "Foo Corp",
        "organization_id": "org_01EHZNVPK3SFK441A1RGBFSHRT",
        "state": "linked",
        "type": "gsuite directory",
        **TIMESTAMPS,
    }


@pytest.fixture
def group_json() -> dict:
    return {
        "object": "directory_group",
        "id": "directory_group_01E1JJS84MFPPQ3G655FHTKX6Z",
        "idp_id": "02grqrue4294w24",
        "directory_id": "directory_01ECAZ4NV9QMV47GW873HDCX74",
        "organization_id": "org_01EZTR6WYX1A0DSE2CYMGXQ24Y",
        "name": "Developers",
        "raw_attributes": {},
        **TIMESTAMPS,
    }


class TestDirectories:
    @pytest.mark.asyncio
    async def test_get_directory(self, workos, mock_api, directory_json):
        """Test retrieving a directory by ID."""
        mock_api.get(f"/directories/{directory_json['id']}").mock(
            return_value=httpx.Response(200, json=directory_json)
        )

        directory = await workos.directory_sync().get_directory(directory_json["id"])

        assert directory.type == DirectoryType.GOOGLE_WORKSPACE
        assert directory.state == DirectoryState.ACTIVE

    @pytest.mark.asyncio
    async def test_list_directories(self, workos, mock_api, directory_json):
        """Test listing directories with filters."""
        route = mock_api.get("/directories").mock(
            return_value=httpx.Response(200, json=page({**directory_json, "state": "unlinked"}))
        )

        directories = await workos.directory_sync().list_directories(
            ListDirectoriesParams(organization_id="org_1")
        )

        assert directories.data[0].state == DirectoryState.INACTIVE
        assert route.calls.last.request.url.params["organization_id"] == "org_1"

    @pytest.mark.asyncio
    async def test_delete_directory(self, workos, mock_api):
        """Test deleting a directory."""
        route = mock_api.delete("/directories/directory_1").mock(return_value=httpx.Response(202))

        await workos.directory_sync().delete_directory("directory_1")

        assert route.called


class TestDirectoryUsersAndGroups:
    @pytest.mark.asyncio
    async def test_get_directory_user(self, workos, mock_api, directory_user_json):
        """Test retrieving a directory user."""
        mock_api.get(f"/directory_users/{directory_user_json['id']}").mock(
            return_value=httpx.Response(200, json=directory_user_json)
        )

        user = await workos.directory_sync().get_directory_user(directory_user_json["id"])

        assert user.primary_email() == "marcelina@foo-corp.com"
        assert user.custom_attributes["department"] == "Engineering"

    @pytest.mark.asyncio
    async def test_list_directory_users(self, workos, mock_api, directory_user_json):
        """Test listing directory users."""
        route = mock_api.get("/directory_users").mock(
            return_value=httpx.Response(200, json=page(directory_user_json))
        )

        users = await workos.directory_sync().list_directory_users(
            ListDirectoryUsersParams(directory="directory_1")
        )

        assert len(users.data) == 1
        assert route.calls.last.request.url.params["directory"] == "directory_1"

    @pytest.mark.asyncio
    async def test_get_directory_group(self, workos, mock_api, group_json):
        """Test retrieving a directory group."""
        mock_api.get(f"/directory_groups/{group_json['id']}").mock(
            return_value=httpx.Response(200, json=group_json)
        )

        group = await workos.directory_sync().get_directory_group(group_json["id"])

        assert group.name == "Developers"

    @pytest.mark.asyncio
    async def test_list_directory_groups(self, workos, mock_api, group_json):
        """Test listing directory groups."""
        route = mock_api.get("/directory_groups").mock(
            return_value=httpx.Response(200, json=page(group_json))
        )

        groups = await workos.directory_sync().list_directory_groups(
            ListDirectoryGroupsParams(user="directory_user_1")
        )

        assert groups.data[0].idp_id == "02grqrue4294w24"
        assert route.calls.last.request.url.params["user"] == "directory_user_1"
