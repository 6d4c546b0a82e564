"""
User management schemas: users, invitations, organization memberships,
sessions and authentication results.
"""
from datetime import datetime
from enum import Enum
from typing import Literal, Optional

from pydantic import AliasChoices, Field

from ..core.models import KnownOrUnknown, Metadata, TimestampSchema, WorkOsModel


class User(TimestampSchema):
    """
    AuthKit user.

    https://workos.com/docs/reference/user-management/user
    """

    id: str
    email: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email_verified: bool = False
    profile_picture_url: Optional[str] = None
    last_sign_in_at: Optional[datetime] = None
    external_id: Optional[str] = None
    metadata: Metadata = Field(default_factory=dict)


class Impersonator(WorkOsModel):
    email: str
    reason: Optional[str] = None


class AuthenticationResponse(WorkOsModel):
    """Result of a successful authenticate call."""

    user: User
    organization_id: Optional[str] = None
    access_token: str
    refresh_token: str
    authentication_method: Optional[str] = None
    impersonator: Optional[Impersonator] = None


class RefreshTokenResponse(WorkOsModel):
    user: User
    organization_id: Optional[str] = None
    access_token: str
    refresh_token: str
    impersonator: Optional[Impersonator] = None


class AuthenticateError(WorkOsModel):
    """
    Error payload of the authenticate endpoint.

    The endpoint answers either in the OAuth shape (``error`` /
    ``error_description``) or the WorkOS shape (``code`` / ``message``).
    """

    code: str = Field(validation_alias=AliasChoices("code", "error"))
    message: str = Field(
        default="", validation_alias=AliasChoices("message", "error_description")
    )

    def __str__(self) -> str:
        return f"{self.code}: {self.message}"


class InvitationState(str, Enum):
    PENDING = "pending"
    ACCEPTED = "accepted"
    EXPIRED = "expired"
    REVOKED = "revoked"


class Invitation(TimestampSchema):
    """
    An invitation for an email address to join an organization.

    https://workos.com/docs/reference/user-management/invitation
    """

    id: str
    email: str
    state: KnownOrUnknown[InvitationState]
    accepted_at: Optional[datetime] = None
    revoked_at: Optional[datetime] = None
    expires_at: datetime
    token: str
    accept_invitation_url: str
    organization_id: Optional[str] = None
    inviter_user_id: Optional[str] = None
    accepted_user_id: Optional[str] = None


class InvitationEvent(TimestampSchema):
    """Invitation as delivered in events; never carries the token."""

    id: str
    email: str
    state: KnownOrUnknown[InvitationState]
    accepted_at: Optional[datetime] = None
    revoked_at: Optional[datetime] = None
    expires_at: datetime
    organization_id: Optional[str] = None
    inviter_user_id: Optional[str] = None
    accepted_user_id: Optional[str] = None


class OrganizationMembershipStatus(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"
    PENDING = "pending"


class OrganizationMembershipRole(WorkOsModel):
    slug: str


class OrganizationMembership(TimestampSchema):
    """
    Links a user to an organization with a role.

    https://workos.com/docs/reference/user-management/organization-membership
    """

    id: str
    user_id: str
    organization_id: str
    role: OrganizationMembershipRole
    status: KnownOrUnknown[OrganizationMembershipStatus]


class SessionStatus(str, Enum):
    ACTIVE = "active"
    EXPIRED = "expired"
    REVOKED = "revoked"


class SessionAuthMethod(str, Enum):
    EXTERNAL_AUTH = "external_auth"
    IMPERSONATION = "impersonation"
    MAGIC_CODE = "magic_code"
    MIGRATED_SESSION = "migrated_session"
    OAUTH = "oauth"
    PASSKEY = "passkey"
    PASSWORD = "password"
    SSO = "sso"
    UNKNOWN = "unknown"


class Session(TimestampSchema):
    id: str
    user_id: str
    organization_id: Optional[str] = None
    status: KnownOrUnknown[SessionStatus]
    auth_method: KnownOrUnknown[SessionAuthMethod]
    ip_address: Optional[str] = None
    user_agent: Optional[str] = None
    expires_at: datetime
    ended_at: Optional[datetime] = None


class TotpFactor(WorkOsModel):
    issuer: Optional[str] = None
    user: Optional[str] = None
    qr_code: Optional[str] = None
    secret: Optional[str] = None
    uri: Optional[str] = None


class AuthenticationFactor(TimestampSchema):
    """An MFA factor enrolled by an AuthKit user."""

    id: str
    type: Literal["totp"] = "totp"
    user_id: str
    totp: Optional[TotpFactor] = None


class PasswordReset(WorkOsModel):
    id: str
    user_id: str
    email: str
    password_reset_token: str
    password_reset_url: str
    expires_at: datetime
    created_at: datetime


class AuthenticationEventType(str, Enum):
    SSO = "sso"
    PASSWORD = "password"
    OAUTH = "oauth"
    MFA = "mfa"
    MAGIC_AUTH = "magic_auth"
    EMAIL_VERIFICATION = "email_verification"


class AuthenticationEventStatus(str, Enum):
    FAILED = "failed"
    SUCCEEDED = "succeeded"


class AuthenticationEventError(WorkOsModel):
    code: str
    message: str


class AuthenticationEvent(WorkOsModel):
    """Payload of the ``authentication.*`` events."""

    type: KnownOrUnknown[AuthenticationEventType]
    status: KnownOrUnknown[AuthenticationEventStatus]
    user_id: Optional[str] = None
    email: Optional[str] = None
    ip_address: Optional[str] = None
    user_agent: Optional[str] = None
    error: Optional[AuthenticationEventError] = None


class RadarRiskAction(str, Enum):
    SIGNUP = "signup"
    LOGIN = "login"


class AuthenticationRadarRiskDetectedEvent(WorkOsModel):
    auth_method: str
    action: KnownOrUnknown[RadarRiskAction]
    blocklist_type: Optional[str] = None
    ip_address: Optional[str] = None
    user_agent: Optional[str] = None
    user_id: str
    email: str
