"""
Test suite for the SSO API.
"""
from urllib.parse import parse_qs

import httpx
import pytest

from conftest import API_KEY, BASE_URL, CLIENT_ID, page
from workos_sdk import OperationError, UnauthorizedError
from workos_sdk.sso import (
    ConnectionState,
    ConnectionType,
    ListConnectionsParams,
    SsoAuthorizationUrlParams,
)


@pytest.fixture
def profile_json() -> dict:
    return {
        "object": "profile",
        "id": "prof_01DMC79VCBZ0NY2099737PSVF1",
        "connection_id": "conn_01E4ZCR3C56J083X43JQXF3JK5",
        "connection_type": "OktaSAML",
        "organization_id": "org_01EHWNCE74X7JSDV0X3SZ3KJNY",
        "email": "todd@foo-corp.com",
        "first_name": "Todd",
        "last_name": "Rundgren",
        "idp_id": "00u1a0ufowBJlzPlk357",
        "raw_attributes": {"groups": ["Engineering"]},
    }


class TestSso:
    """Test SSO endpoints."""

    @pytest.mark.asyncio
    async def test_authorization_url(self, workos):
        """Test building the SSO authorization URL."""
        url = workos.sso().get_authorization_url(
            SsoAuthorizationUrlParams(
                redirect_uri="https://your-app.com/callback", connection="conn_123"
            )
        )

        prefix = f"{BASE_URL}/sso/authorize?"
        assert url.startswith(prefix)
        assert parse_qs(url[len(prefix):]) == {
            "client_id": [CLIENT_ID],
            "connection": ["conn_123"],
            "redirect_uri": ["https://your-app.com/callback"],
            "response_type": ["code"],
        }

    @pytest.mark.asyncio
    async def test_authorization_url_requires_selector(self, workos):
        """Test that the authorization URL requires a connection selector."""
        with pytest.raises(ValueError):
            workos.sso().get_authorization_url(
                SsoAuthorizationUrlParams(redirect_uri="https://your-app.com/callback")
            )

    @pytest.mark.asyncio
    async def test_get_profile_and_token(self, workos, mock_api, profile_json):
        """Test exchanging a code for a profile and token."""
        route = mock_api.post("/sso/token").mock(
            return_value=httpx.Response(
                200, json={"access_token": "01DMEK0J53CVMC32CK5SE0KZ8Q", "profile": profile_json}
            )
        )

        result = await workos.sso().get_profile_and_token("abc123")

        assert result.access_token == "01DMEK0J53CVMC32CK5SE0KZ8Q"
        assert result.profile.connection_type == ConnectionType.OKTA_SAML
        request = route.calls.last.request
        assert request.headers["Content-Type"] == "application/x-www-form-urlencoded"
        assert parse_qs(request.content.decode()) == {
            "client_id": [CLIENT_ID],
            "client_secret": [API_KEY],
            "grant_type": ["authorization_code"],
            "code": ["abc123"],
        }

    @pytest.mark.asyncio
    async def test_get_profile_and_token_invalid_client(self, workos, mock_api):
        """Test that an invalid client raises UnauthorizedError."""
        mock_api.post("/sso/token").mock(
            return_value=httpx.Response(
                400, json={"error": "invalid_client", "error_description": "Invalid client ID."}
            )
        )

        with pytest.raises(UnauthorizedError):
            await workos.sso().get_profile_and_token("abc123")

    @pytest.mark.asyncio
    async def test_get_profile_and_token_invalid_grant(self, workos, mock_api):
        """Test that an invalid grant raises OperationError."""
        mock_api.post("/sso/token").mock(
            return_value=httpx.Response(
                400, json={"error": "invalid_grant", "error_description": "The code 'abc123' has expired."}
            )
        )

        with pytest.raises(OperationError) as exc_info:
            await workos.sso().get_profile_and_token("abc123")

        assert exc_info.value.error.code == "invalid_grant"

    @pytest.mark.asyncio
    async def test_get_profile_uses_access_token(self, workos, mock_api, profile_json):
        """Test that the profile is fetched with the access token."""
        route = mock_api.get("/sso/profile").mock(
            return_value=httpx.Response(200, json=profile_json)
        )

        profile = await workos.sso().get_profile("01DMEK0J53CVMC32CK5SE0KZ8Q")

        assert profile.email == "todd@foo-corp.com"
        assert route.calls.last.request.headers["Authorization"] == "Bearer 01DMEK0J53CVMC32CK5SE0KZ8Q"

    @pytest.mark.asyncio
    async def test_get_connection(self, workos, mock_api, connection_json):
        """Test retrieving a connection."""
        mock_api.get(f"/connections/{connection_json['id']}").mock(
            return_value=httpx.Response(200, json=connection_json)
        )

        connection = await workos.sso().get_connection(connection_json["id"])

        assert connection.connection_type == ConnectionType.GOOGLE_OAUTH
        assert connection.state == ConnectionState.ACTIVE

    @pytest.mark.asyncio
    async def test_unknown_connection_type_is_kept(self, workos, mock_api, connection_json):
        """Test that an unknown connection type is kept as a string."""
        mock_api.get(f"/connections/{connection_json['id']}").mock(
            return_value=httpx.Response(200, json={**connection_json, "connection_type": "BrandNewSAML"})
        )

        connection = await workos.sso().get_connection(connection_json["id"])

        assert connection.connection_type == "BrandNewSAML"
        assert not isinstance(connection.connection_type, ConnectionType)

    @pytest.mark.asyncio
    async def test_list_connections(self, workos, mock_api, connection_json):
        """Test listing connections."""
        route = mock_api.get("/connections").mock(
            return_value=httpx.Response(200, json=page(connection_json))
        )

        connections = await workos.sso().list_connections(
            ListConnectionsParams(connection_type=ConnectionType.GOOGLE_OAUTH)
        )

        assert connections.data[0].name == "Foo Corp"
        assert route.calls.last.request.url.params["connection_type"] == "GoogleOAuth"

    @pytest.mark.asyncio
    async def test_delete_connection(self, workos, mock_api):
        """Test deleting a connection."""
        route = mock_api.delete("/connections/conn_1").mock(return_value=httpx.Response(204))

        await workos.sso().delete_connection("conn_1")

        assert route.called
