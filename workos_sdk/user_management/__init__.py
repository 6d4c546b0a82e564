"""
User management (AuthKit) API area.
"""
from .models import (
    AuthenticateError,
    AuthenticationEvent,
    AuthenticationEventError,
    AuthenticationEventStatus,
    AuthenticationEventType,
    AuthenticationFactor,
    AuthenticationRadarRiskDetectedEvent,
    AuthenticationResponse,
    Impersonator,
    Invitation,
    InvitationEvent,
    InvitationState,
    OrganizationMembership,
    OrganizationMembershipRole,
    OrganizationMembershipStatus,
    PasswordReset,
    RadarRiskAction,
    RefreshTokenResponse,
    Session,
    SessionAuthMethod,
    SessionStatus,
    TotpFactor,
    User,
)
from .operations import UserManagement
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
    PasswordHashType,
    Provider,
    ScreenHint,
    SendInvitationParams,
    UpdateOrganizationMembershipParams,
    UpdateUserParams,
)

__all__ = [
    "AuthenticateError",
    "AuthenticateWithCodeParams",
    "AuthenticateWithPasswordParams",
    "AuthenticateWithRefreshTokenParams",
    "AuthenticationEvent",
    "AuthenticationEventError",
    "AuthenticationEventStatus",
    "AuthenticationEventType",
    "AuthenticationFactor",
    "AuthenticationRadarRiskDetectedEvent",
    "AuthenticationResponse",
    "AuthorizationUrlParams",
    "CreateOrganizationMembershipParams",
    "CreatePasswordResetParams",
    "CreateUserParams",
    "Impersonator",
    "Invitation",
    "InvitationEvent",
    "InvitationState",
    "ListInvitationsParams",
    "ListOrganizationMembershipsParams",
    "ListSessionsParams",
    "ListUsersParams",
    "OrganizationMembership",
    "OrganizationMembershipRole",
    "OrganizationMembershipStatus",
    "PasswordHashType",
    "PasswordReset",
    "Provider",
    "RadarRiskAction",
    "RefreshTokenResponse",
    "ScreenHint",
    "SendInvitationParams",
    "Session",
    "SessionAuthMethod",
    "SessionStatus",
    "TotpFactor",
    "UpdateOrganizationMembershipParams",
    "UpdateUserParams",
    "User",
    "UserManagement",
]
