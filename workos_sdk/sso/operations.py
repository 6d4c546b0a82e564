"""
Single Sign-On API.

https://workos.com/docs/reference/sso
"""
import logging
from typing import Optional

from ..core.api import ApiArea
from ..core.models import PaginatedList
from ..core.response import (
    handle_oauth_error,
    handle_unauthorized_or_generic_error,
    parse_json,
)
from ..core.validation import path_segment
from .models import (
    Connection,
    GetProfileAndTokenError,
    ListConnectionsParams,
    Profile,
    ProfileAndToken,
    SsoAuthorizationUrlParams,
)

logger = logging.getLogger(__name__)


class Sso(ApiArea):
    """Operations on SSO connections and the SSO sign-in flow."""

    def get_authorization_url(self, params: SsoAuthorizationUrlParams) -> str:
        """
        Build the URL that starts an SSO sign-in. No request is sent.

        Raises:
            ValueError: If no client ID is available or not exactly one of
                connection, organization and provider is set
        """
        selectors = [params.connection, params.organization, params.provider]
        if sum(selector is not None for selector in selectors) != 1:
            raise ValueError("exactly one of connection, organization or provider is required")

        client_id = params.client_id or self.workos.client_id
        if not client_id:
            raise ValueError("client_id is required; pass it or configure WorkOs(client_id=...)")

        query = params.to_query()
        query["client_id"] = client_id
        query["response_type"] = "code"
        return self.workos.join_url("/sso/authorize", query)

    async def get_profile_and_token(
        self, code: str, client_id: Optional[str] = None
    ) -> ProfileAndToken:
        """
        Exchange an authorization code for a profile and access token.

        Raises:
            UnauthorizedError: On 401, or when the client credentials are rejected
            OperationError: With a ``GetProfileAndTokenError`` for other 400 payloads
        """
        client_id = client_id or self.workos.client_id
        if not client_id:
            raise ValueError("client_id is required; pass it or configure WorkOs(client_id=...)")

        url = self.workos.join_url("/sso/token")
        response = await (
            self.workos.client()
            .post(url)
            .form(
                {
                    "client_id": client_id,
                    "client_secret": str(self.workos.key),
                    "grant_type": "authorization_code",
                    "code": code,
                }
            )
            .send()
        )
        response = await handle_oauth_error(response, GetProfileAndTokenError)
        return await parse_json(response, ProfileAndToken)

    async def get_profile(self, access_token: str) -> Profile:
        """Fetch the profile behind an access token from ``get_profile_and_token``."""
        url = self.workos.join_url("/sso/profile")
        response = await self.workos.client().get(url).bearer_auth(access_token).send()
        response = await handle_unauthorized_or_generic_error(response)
        return await parse_json(response, Profile)

    async def get_connection(self, connection_id: str) -> Connection:
        return await self._make_request(
            "GET", f"/connections/{path_segment(connection_id)}", Connection
        )

    async def list_connections(
        self, params: Optional[ListConnectionsParams] = None
    ) -> PaginatedList[Connection]:
        params = params or ListConnectionsParams()
        return await self._make_request(
            "GET", "/connections", PaginatedList[Connection], params=params.to_query()
        )

    async def delete_connection(self, connection_id: str) -> None:
        await self._make_request("DELETE", f"/connections/{path_segment(connection_id)}")
        logger.info(f"Deleted connection: {connection_id}")
