"""
Request parameters for the user management API.
"""
from enum import Enum
from typing import List, Optional

from pydantic import EmailStr, Field

from ..core.models import Metadata, PaginationParams, RequestParams
from .models import OrganizationMembershipStatus


class Provider(str, Enum):
    AUTHKIT = "authkit"
    APPLE_OAUTH = "AppleOAuth"
    GITHUB_OAUTH = "GitHubOAuth"
    GOOGLE_OAUTH = "GoogleOAuth"
    MICROSOFT_OAUTH = "MicrosoftOAuth"


class ScreenHint(str, Enum):
    SIGN_IN = "sign-in"
    SIGN_UP = "sign-up"


class PasswordHashType(str, Enum):
    BCRYPT = "bcrypt"
    FIREBASE_SCRYPT = "firebase-scrypt"
    SSHA = "ssha"


class AuthorizationUrlParams(RequestParams):
    """
    Parameters for the AuthKit authorization URL.

    Exactly one of ``provider``, ``connection_id`` or ``organization_id``
    selects where the user signs in.
    """

    redirect_uri: str
    client_id: Optional[str] = None
    provider: Optional[Provider] = None
    connection_id: Optional[str] = None
    organization_id: Optional[str] = None
    state: Optional[str] = None
    code_challenge: Optional[str] = None
    code_challenge_method: Optional[str] = None
    domain_hint: Optional[str] = None
    login_hint: Optional[str] = None
    screen_hint: Optional[ScreenHint] = None


class AuthenticateWithCodeParams(RequestParams):
    client_id: Optional[str] = None
    code: str
    code_verifier: Optional[str] = None
    invitation_token: Optional[str] = None
    ip_address: Optional[str] = None
    user_agent: Optional[str] = None


class AuthenticateWithRefreshTokenParams(RequestParams):
    client_id: Optional[str] = None
    refresh_token: str
    organization_id: Optional[str] = None
    ip_address: Optional[str] = None
    user_agent: Optional[str] = None


class AuthenticateWithPasswordParams(RequestParams):
    client_id: Optional[str] = None
    email: EmailStr
    password: str
    invitation_token: Optional[str] = None
    ip_address: Optional[str] = None
    user_agent: Optional[str] = None


class CreateUserParams(RequestParams):
    email: EmailStr
    password: Optional[str] = None
    password_hash: Optional[str] = None
    password_hash_type: Optional[PasswordHashType] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email_verified: Optional[bool] = None
    external_id: Optional[str] = None
    metadata: Optional[Metadata] = None


class UpdateUserParams(RequestParams):
    user_id: str = Field(..., exclude=True)
    email: Optional[EmailStr] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email_verified: Optional[bool] = None
    password: Optional[str] = None
    password_hash: Optional[str] = None
    password_hash_type: Optional[PasswordHashType] = None
    external_id: Optional[str] = None
    metadata: Optional[Metadata] = None


class ListUsersParams(PaginationParams):
    email: Optional[str] = None
    organization_id: Optional[str] = None


class ListInvitationsParams(PaginationParams):
    email: Optional[str] = None
    organization_id: Optional[str] = None


class SendInvitationParams(RequestParams):
    email: EmailStr
    organization_id: Optional[str] = None
    expires_in_days: Optional[int] = Field(None, ge=1, le=30)
    inviter_user_id: Optional[str] = None
    role_slug: Optional[str] = None


class CreateOrganizationMembershipParams(RequestParams):
    user_id: str
    organization_id: str
    role_slug: Optional[str] = None


class UpdateOrganizationMembershipParams(RequestParams):
    organization_membership_id: str = Field(..., exclude=True)
    role_slug: Optional[str] = None


class ListOrganizationMembershipsParams(PaginationParams):
    user_id: Optional[str] = None
    organization_id: Optional[str] = None
    statuses: Optional[List[OrganizationMembershipStatus]] = None


class CreatePasswordResetParams(RequestParams):
    email: EmailStr


class ListSessionsParams(PaginationParams):
    user_id: str = Field(..., exclude=True)
