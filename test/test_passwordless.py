"""
Test suite for the passwordless (Magic Link) API.
"""
import json

import httpx
import pytest

from workos_sdk.passwordless import CreatePasswordlessSessionParams


class TestPasswordless:
    @pytest.mark.asyncio
    async def test_create_session(self, workos, mock_api):
        """Test creating a passwordless session."""
        route = mock_api.post("/passwordless/sessions").mock(
            return_value=httpx.Response(
                201,
                json={
                    "object": "passwordless_session",
                    "id": "passwordless_session_01EHDAK2BFGWCSZXP9HGZ3VK8C",
                    "email": "marcelina@foo-corp.com",
                    "expires_at": "2020-08-13T05:50:00.000Z",
                    "link": "https://auth.workos.com/passwordless/4TeRexuejWCKs9rrFOIuLRYEr/confirm",
                },
            )
        )

        session = await workos.passwordless().create_session(
            CreatePasswordlessSessionParams(email="marcelina@foo-corp.com", state="abc")
        )

        assert session.link.endswith("/confirm")
        assert json.loads(route.calls.last.request.content) == {
            "email": "marcelina@foo-corp.com",
            "type": "MagicLink",
            "state": "abc",
        }

    @pytest.mark.asyncio
    async def test_send_session(self, workos, mock_api):
        """Test sending a passwordless session email."""
        route = mock_api.post(
            "/passwordless/sessions/passwordless_session_01EHDAK2BFGWCSZXP9HGZ3VK8C/send"
        ).mock(return_value=httpx.Response(200, json={"success": True}))

        await workos.passwordless().send_session("passwordless_session_01EHDAK2BFGWCSZXP9HGZ3VK8C")

        assert route.called

    def test_expires_in_bounds(self):
        """Test the allowed session lifetime range."""
        with pytest.raises(ValueError):
            CreatePasswordlessSessionParams(email="marcelina@foo-corp.com", expires_in=60)
