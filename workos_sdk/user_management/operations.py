"""
User management (AuthKit) API.

https://workos.com/docs/reference/user-management
"""
import logging
from typing import Any, Dict, Optional, Union

from ..core.api import ApiArea
from ..core.models import PaginatedList, PaginationParams
from ..core.response import handle_oauth_error, parse_json
from ..core.validation import path_segment, validate_ip_address
from .models import (
    AuthenticateError,
    AuthenticationFactor,
    AuthenticationResponse,
    Invitation,
    OrganizationMembership,
    PasswordReset,
    RefreshTokenResponse,
    Session,
    User,
)
from .params import (
    AuthenticateWithCodeParams,
    AuthenticateWithPasswordParams,
    AuthenticateWithRefreshTokenParams,
    AuthorizationUrlParams,
    CreateOrganizationMembershipParams,
    CreatePasswordResetParams,
    CreateUserParams,
    ListInvitationsParams,
    ListOrganizationMembershipsParams,
    ListSessionsParams,
    ListUsersParams,
    SendInvitationParams,
    UpdateOrganizationMembershipParams,
    UpdateUserParams,
)

logger = logging.getLogger(__name__)

AuthenticateParams = Union[
    AuthenticateWithCodeParams,
    AuthenticateWithPasswordParams,
    AuthenticateWithRefreshTokenParams,
]

USERS = "/user_management/users"
INVITATIONS = "/user_management/invitations"
MEMBERSHIPS = "/user_management/organization_memberships"


class UserManagement(ApiArea):
    """Operations on AuthKit users, invitations, memberships and sessions."""

    def _client_id(self, client_id: Optional[str]) -> str:
        client_id = client_id or self.workos.client_id
        if not client_id:
            raise ValueError("client_id is required; pass it or configure WorkOs(client_id=...)")
        return client_id

    # URL builders

    def get_authorization_url(self, params: AuthorizationUrlParams) -> str:
        """
        Build the AuthKit authorization URL to redirect a user to.

        No request is sent.

        Raises:
            ValueError: If no client ID is available or not exactly one of
                provider, connection_id and organization_id is set
            UrlParseError: If the resulting URL is invalid
        """
        selectors = [params.provider, params.connection_id, params.organization_id]
        if sum(selector is not None for selector in selectors) != 1:
            raise ValueError(
                "exactly one of provider, connection_id or organization_id is required"
            )

        query = params.to_query()
        query["client_id"] = self._client_id(params.client_id)
        query["response_type"] = "code"
        return self.workos.join_url("/user_management/authorize", query)

    def get_logout_url(self, session_id: str, return_to: Optional[str] = None) -> str:
        return self.workos.join_url(
            "/user_management/sessions/logout",
            {"session_id": session_id, "return_to": return_to},
        )

    def get_jwks_url(self, client_id: Optional[str] = None) -> str:
        """URL of the JSON Web Key Set used to verify AuthKit access tokens."""
        return self.workos.join_url(f"/sso/jwks/{path_segment(self._client_id(client_id))}")

    # Authentication

    async def _authenticate(
        self, grant_type: str, params: AuthenticateParams, response_type: Any
    ) -> Any:
        ip_address = validate_ip_address(params.ip_address)

        body: Dict[str, Any] = params.to_body()
        body["grant_type"] = grant_type
        body["client_id"] = self._client_id(params.client_id)
        body["client_secret"] = str(self.workos.key)
        if ip_address is not None:
            body["ip_address"] = ip_address

        url = self.workos.join_url("/user_management/authenticate")
        response = await self.workos.client().post(url).json(body).send()
        response = await handle_oauth_error(
            response, AuthenticateError, operation_statuses=(400, 403)
        )
        return await parse_json(response, response_type)

    async def authenticate_with_code(
        self, params: AuthenticateWithCodeParams
    ) -> AuthenticationResponse:
        """
        Exchange an authorization code for a user and tokens.

        Args:
            params: The code plus optional PKCE verifier and client context

        Returns:
            The authenticated user with access and refresh tokens

        Raises:
            AddressParseError: If ``params.ip_address`` is not an IP address
            UnauthorizedError: On 401, or when the client credentials are rejected
            OperationError: With an ``AuthenticateError`` for other 400/403 payloads
        """
        return await self._authenticate("authorization_code", params, AuthenticationResponse)

    async def authenticate_with_refresh_token(
        self, params: AuthenticateWithRefreshTokenParams
    ) -> RefreshTokenResponse:
        """Trade a refresh token for a new access/refresh token pair."""
        return await self._authenticate("refresh_token", params, RefreshTokenResponse)

    async def authenticate_with_password(
        self, params: AuthenticateWithPasswordParams
    ) -> AuthenticationResponse:
        return await self._authenticate("password", params, AuthenticationResponse)

    # Users

    async def create_user(self, params: CreateUserParams) -> User:
        user = await self._make_request("POST", USERS, User, json=params.to_body())
        logger.info(f"Created user: {user.id}")
        return user

    async def get_user(self, user_id: str) -> User:
        return await self._make_request("GET", f"{USERS}/{path_segment(user_id)}", User)

    async def get_user_by_external_id(self, external_id: str) -> User:
        return await self._make_request(
            "GET", f"{USERS}/external_id/{path_segment(external_id)}", User
        )

    async def list_users(self, params: Optional[ListUsersParams] = None) -> PaginatedList[User]:
        params = params or ListUsersParams()
        return await self._make_request(
            "GET", USERS, PaginatedList[User], params=params.to_query()
        )

    async def update_user(self, params: UpdateUserParams) -> User:
        user = await self._make_request(
            "PUT", f"{USERS}/{path_segment(params.user_id)}", User, json=params.to_body()
        )
        logger.info(f"Updated user: {user.id}")
        return user

    async def delete_user(self, user_id: str) -> None:
        await self._make_request("DELETE", f"{USERS}/{path_segment(user_id)}")
        logger.info(f"Deleted user: {user_id}")

    # Invitations

    async def get_invitation(self, invitation_id: str) -> Invitation:
        return await self._make_request(
            "GET", f"{INVITATIONS}/{path_segment(invitation_id)}", Invitation
        )

    async def get_invitation_by_token(self, token: str) -> Invitation:
        return await self._make_request(
            "GET", f"{INVITATIONS}/by_token/{path_segment(token)}", Invitation
        )

    async def list_invitations(
        self, params: Optional[ListInvitationsParams] = None
    ) -> PaginatedList[Invitation]:
        params = params or ListInvitationsParams()
        return await self._make_request(
            "GET", INVITATIONS, PaginatedList[Invitation], params=params.to_query()
        )

    async def send_invitation(self, params: SendInvitationParams) -> Invitation:
        """Invite an email address, optionally into an organization with a role."""
        invitation = await self._make_request(
            "POST", INVITATIONS, Invitation, json=params.to_body()
        )
        logger.info(f"Sent invitation: {invitation.id}")
        return invitation

    async def accept_invitation(self, invitation_id: str) -> Invitation:
        return await self._make_request(
            "POST", f"{INVITATIONS}/{path_segment(invitation_id)}/accept", Invitation
        )

    async def revoke_invitation(self, invitation_id: str) -> Invitation:
        invitation = await self._make_request(
            "POST", f"{INVITATIONS}/{path_segment(invitation_id)}/revoke", Invitation
        )
        logger.info(f"Revoked invitation: {invitation.id}")
        return invitation

    # Organization memberships

    async def create_organization_membership(
        self, params: CreateOrganizationMembershipParams
    ) -> OrganizationMembership:
        membership = await self._make_request(
            "POST", MEMBERSHIPS, OrganizationMembership, json=params.to_body()
        )
        logger.info(
            f"Added user {membership.user_id} to organization {membership.organization_id}"
        )
        return membership

    async def get_organization_membership(
        self, organization_membership_id: str
    ) -> OrganizationMembership:
        return await self._make_request(
            "GET",
            f"{MEMBERSHIPS}/{path_segment(organization_membership_id)}",
            OrganizationMembership,
        )

    async def list_organization_memberships(
        self, params: Optional[ListOrganizationMembershipsParams] = None
    ) -> PaginatedList[OrganizationMembership]:
        """
        List organization memberships.

        Filter by ``user_id`` or ``organization_id``; ``statuses`` narrows
        the result to memberships in the given states.
        """
        params = params or ListOrganizationMembershipsParams()
        return await self._make_request(
            "GET",
            MEMBERSHIPS,
            PaginatedList[OrganizationMembership],
            params=params.to_query(),
        )

    async def update_organization_membership(
        self, params: UpdateOrganizationMembershipParams
    ) -> OrganizationMembership:
        return await self._make_request(
            "PUT",
            f"{MEMBERSHIPS}/{path_segment(params.organization_membership_id)}",
            OrganizationMembership,
            json=params.to_body(),
        )

    async def delete_organization_membership(self, organization_membership_id: str) -> None:
        await self._make_request(
            "DELETE", f"{MEMBERSHIPS}/{path_segment(organization_membership_id)}"
        )
        logger.info(f"Deleted organization membership: {organization_membership_id}")

    async def deactivate_organization_membership(
        self, organization_membership_id: str
    ) -> OrganizationMembership:
        return await self._make_request(
            "PUT",
            f"{MEMBERSHIPS}/{path_segment(organization_membership_id)}/deactivate",
            OrganizationMembership,
        )

    async def reactivate_organization_membership(
        self, organization_membership_id: str
    ) -> OrganizationMembership:
        return await self._make_request(
            "PUT",
            f"{MEMBERSHIPS}/{path_segment(organization_membership_id)}/reactivate",
            OrganizationMembership,
        )

    # Passwords, factors and sessions

    async def create_password_reset(self, params: CreatePasswordResetParams) -> PasswordReset:
        return await self._make_request(
            "POST", "/user_management/password_reset", PasswordReset, json=params.to_body()
        )

    async def list_auth_factors(
        self, user_id: str, params: Optional[PaginationParams] = None
    ) -> PaginatedList[AuthenticationFactor]:
        params = params or PaginationParams()
        return await self._make_request(
            "GET",
            f"{USERS}/{path_segment(user_id)}/auth_factors",
            PaginatedList[AuthenticationFactor],
            params=params.to_query(),
        )

    async def list_sessions(self, params: ListSessionsParams) -> PaginatedList[Session]:
        return await self._make_request(
            "GET",
            f"{USERS}/{path_segment(params.user_id)}/sessions",
            PaginatedList[Session],
            params=params.to_query(),
        )

    async def revoke_session(self, session_id: str) -> None:
        await self._make_request(
            "POST", "/user_management/sessions/revoke", json={"session_id": session_id}
        )
        logger.info(f"Revoked session: {session_id}")
