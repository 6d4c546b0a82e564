"""
Event schemas.

``Event.data`` is kept as the raw mapping the API sent; ``Event.parse_data()``
decodes it into the model registered for the event name in
``EVENT_DATA_MODELS``.
"""
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional, Type, Union

from pydantic import BaseModel, Field, ValidationError

from ..core.models import KnownOrUnknown, RequestParams, TimestampSchema, WorkOsModel
from ..directory_sync.models import DirectoryEvent, DirectoryGroup, DirectoryUser
from ..exceptions import RequestError
from ..organizations.models import Organization, OrganizationDomain
from ..roles.models import RoleEvent
from ..sso.models import ConnectionState, ConnectionType, SamlCertificate
from ..user_management.models import (
    AuthenticationEvent,
    AuthenticationRadarRiskDetectedEvent,
    InvitationEvent,
    OrganizationMembership,
    Session,
    User,
)


class EventName(str, Enum):
    AUTHENTICATION_EMAIL_VERIFICATION_FAILED = "authentication.email_verification_failed"
    AUTHENTICATION_EMAIL_VERIFICATION_SUCCEEDED = "authentication.email_verification_succeeded"
    AUTHENTICATION_MAGIC_AUTH_FAILED = "authentication.magic_auth_failed"
    AUTHENTICATION_MAGIC_AUTH_SUCCEEDED = "authentication.magic_auth_succeeded"
    AUTHENTICATION_MFA_FAILED = "authentication.mfa_failed"
    AUTHENTICATION_MFA_SUCCEEDED = "authentication.mfa_succeeded"
    AUTHENTICATION_OAUTH_FAILED = "authentication.oauth_failed"
    AUTHENTICATION_OAUTH_SUCCEEDED = "authentication.oauth_succeeded"
    AUTHENTICATION_PASSWORD_FAILED = "authentication.password_failed"
    AUTHENTICATION_PASSWORD_SUCCEEDED = "authentication.password_succeeded"
    AUTHENTICATION_PASSKEY_FAILED = "authentication.passkey_failed"
    AUTHENTICATION_PASSKEY_SUCCEEDED = "authentication.passkey_succeeded"
    AUTHENTICATION_SSO_FAILED = "authentication.sso_failed"
    AUTHENTICATION_SSO_SUCCEEDED = "authentication.sso_succeeded"
    AUTHENTICATION_RADAR_RISK_DETECTED = "authentication.radar_risk_detected"
    CONNECTION_ACTIVATED = "connection.activated"
    CONNECTION_DEACTIVATED = "connection.deactivated"
    CONNECTION_DELETED = "connection.deleted"
    CONNECTION_SAML_CERTIFICATE_RENEWED = "connection.saml_certificate_renewed"
    CONNECTION_SAML_CERTIFICATE_RENEWAL_REQUIRED = "connection.saml_certificate_renewal_required"
    DSYNC_ACTIVATED = "dsync.activated"
    DSYNC_DELETED = "dsync.deleted"
    DSYNC_GROUP_CREATED = "dsync.group.created"
    DSYNC_GROUP_DELETED = "dsync.group.deleted"
    DSYNC_GROUP_UPDATED = "dsync.group.updated"
    DSYNC_GROUP_USER_ADDED = "dsync.group.user_added"
    DSYNC_GROUP_USER_REMOVED = "dsync.group.user_removed"
    DSYNC_USER_CREATED = "dsync.user.created"
    DSYNC_USER_DELETED = "dsync.user.deleted"
    DSYNC_USER_UPDATED = "dsync.user.updated"
    EMAIL_VERIFICATION_CREATED = "email_verification.created"
    INVITATION_ACCEPTED = "invitation.accepted"
    INVITATION_CREATED = "invitation.created"
    INVITATION_REVOKED = "invitation.revoked"
    MAGIC_AUTH_CREATED = "magic_auth.created"
    ORGANIZATION_CREATED = "organization.created"
    ORGANIZATION_UPDATED = "organization.updated"
    ORGANIZATION_DELETED = "organization.deleted"
    ORGANIZATION_DOMAIN_CREATED = "organization_domain.created"
    ORGANIZATION_DOMAIN_UPDATED = "organization_domain.updated"
    ORGANIZATION_DOMAIN_DELETED = "organization_domain.deleted"
    ORGANIZATION_DOMAIN_VERIFIED = "organization_domain.verified"
    ORGANIZATION_DOMAIN_VERIFICATION_FAILED = "organization_domain.verification_failed"
    ORGANIZATION_MEMBERSHIP_CREATED = "organization_membership.created"
    ORGANIZATION_MEMBERSHIP_DELETED = "organization_membership.deleted"
    ORGANIZATION_MEMBERSHIP_UPDATED = "organization_membership.updated"
    PASSWORD_RESET_CREATED = "password_reset.created"
    PASSWORD_RESET_SUCCEEDED = "password_reset.succeeded"
    ROLE_CREATED = "role.created"
    ROLE_DELETED = "role.deleted"
    ROLE_UPDATED = "role.updated"
    SESSION_CREATED = "session.created"
    SESSION_REVOKED = "session.revoked"
    USER_CREATED = "user.created"
    USER_DELETED = "user.deleted"
    USER_UPDATED = "user.updated"


class ConnectionEvent(WorkOsModel):
    """Connection as delivered in ``connection.*`` events."""

    id: str
    organization_id: Optional[str] = None
    connection_type: KnownOrUnknown[ConnectionType]
    name: Optional[str] = None
    state: Union[ConnectionState, str, None] = Field(None, union_mode="left_to_right")


class SamlCertificateRenewedEvent(WorkOsModel):
    connection: ConnectionEvent
    certificate: SamlCertificate
    renewed_at: datetime


class SamlCertificateRenewalRequiredEvent(WorkOsModel):
    connection: ConnectionEvent
    certificate: SamlCertificate
    days_until_expiry: int


class DsyncGroupUserEvent(WorkOsModel):
    directory_id: str
    user: DirectoryUser
    group: DirectoryGroup


class EmailVerificationEvent(TimestampSchema):
    id: str
    user_id: str
    email: str
    expires_at: datetime


class MagicAuthEvent(TimestampSchema):
    id: str
    user_id: str
    email: str
    expires_at: datetime


class PasswordResetEvent(WorkOsModel):
    id: str
    user_id: str
    email: str
    expires_at: datetime
    created_at: datetime


_AUTHENTICATION_EVENTS = [
    name for name in EventName
    if name.value.startswith("authentication.")
    and name is not EventName.AUTHENTICATION_RADAR_RISK_DETECTED
]

EVENT_DATA_MODELS: Dict[str, Type[BaseModel]] = {
    **{name.value: AuthenticationEvent for name in _AUTHENTICATION_EVENTS},
    EventName.AUTHENTICATION_RADAR_RISK_DETECTED.value: AuthenticationRadarRiskDetectedEvent,
    EventName.CONNECTION_ACTIVATED.value: ConnectionEvent,
    EventName.CONNECTION_DEACTIVATED.value: ConnectionEvent,
    EventName.CONNECTION_DELETED.value: ConnectionEvent,
    EventName.CONNECTION_SAML_CERTIFICATE_RENEWED.value: SamlCertificateRenewedEvent,
    EventName.CONNECTION_SAML_CERTIFICATE_RENEWAL_REQUIRED.value: SamlCertificateRenewalRequiredEvent,
    EventName.DSYNC_ACTIVATED.value: DirectoryEvent,
    EventName.DSYNC_DELETED.value: DirectoryEvent,
    EventName.DSYNC_GROUP_CREATED.value: DirectoryGroup,
    EventName.DSYNC_GROUP_DELETED.value: DirectoryGroup,
    EventName.DSYNC_GROUP_UPDATED.value: DirectoryGroup,
    EventName.DSYNC_GROUP_USER_ADDED.value: DsyncGroupUserEvent,
    EventName.DSYNC_GROUP_USER_REMOVED.value: DsyncGroupUserEvent,
    EventName.DSYNC_USER_CREATED.value: DirectoryUser,
    EventName.DSYNC_USER_DELETED.value: DirectoryUser,
    EventName.DSYNC_USER_UPDATED.value: DirectoryUser,
    EventName.EMAIL_VERIFICATION_CREATED.value: EmailVerificationEvent,
    EventName.INVITATION_ACCEPTED.value: InvitationEvent,
    EventName.INVITATION_CREATED.value: InvitationEvent,
    EventName.INVITATION_REVOKED.value: InvitationEvent,
    EventName.MAGIC_AUTH_CREATED.value: MagicAuthEvent,
    EventName.ORGANIZATION_CREATED.value: Organization,
    EventName.ORGANIZATION_UPDATED.value: Organization,
    EventName.ORGANIZATION_DELETED.value: Organization,
    EventName.ORGANIZATION_DOMAIN_CREATED.value: OrganizationDomain,
    EventName.ORGANIZATION_DOMAIN_UPDATED.value: OrganizationDomain,
    EventName.ORGANIZATION_DOMAIN_DELETED.value: OrganizationDomain,
    EventName.ORGANIZATION_DOMAIN_VERIFIED.value: OrganizationDomain,
    EventName.ORGANIZATION_DOMAIN_VERIFICATION_FAILED.value: OrganizationDomain,
    EventName.ORGANIZATION_MEMBERSHIP_CREATED.value: OrganizationMembership,
    EventName.ORGANIZATION_MEMBERSHIP_DELETED.value: OrganizationMembership,
    EventName.ORGANIZATION_MEMBERSHIP_UPDATED.value: OrganizationMembership,
    EventName.PASSWORD_RESET_CREATED.value: PasswordResetEvent,
    EventName.PASSWORD_RESET_SUCCEEDED.value: PasswordResetEvent,
    EventName.ROLE_CREATED.value: RoleEvent,
    EventName.ROLE_DELETED.value: RoleEvent,
    EventName.ROLE_UPDATED.value: RoleEvent,
    EventName.SESSION_CREATED.value: Session,
    EventName.SESSION_REVOKED.value: Session,
    EventName.USER_CREATED.value: User,
    EventName.USER_DELETED.value: User,
    EventName.USER_UPDATED.value: User,
}


class Event(WorkOsModel):
    """
    An activity record from the events API.

    https://workos.com/docs/reference/events
    """

    id: str
    event: KnownOrUnknown[EventName]
    data: Dict[str, Any] = Field(default_factory=dict)
    created_at: datetime
    context: Optional[Dict[str, Any]] = None

    @property
    def name(self) -> str:
        return self.event.value if isinstance(self.event, EventName) else self.event

    def parse_data(self) -> Union[BaseModel, Dict[str, Any]]:
        """
        Decode ``data`` into the model registered for this event's name.

        Unregistered names return the raw mapping. A payload that does not
        match its model raises ``RequestError``.
        """
        model = EVENT_DATA_MODELS.get(self.name)
        if model is None:
            return self.data
        try:
            return model.model_validate(self.data)
        except ValidationError as e:
            raise RequestError(
                f"failed to decode {self.name} event data as {model.__name__}: {e}", cause=e
            ) from e


class ListEventsParams(RequestParams):
    """
    Filters for the events API.

    Results are ordered oldest first; ``after`` continues from a previous
    page's ``list_metadata.after`` cursor.
    """

    events: List[Union[EventName, str]] = Field(..., min_length=1)
    organization_id: Optional[str] = None
    range_start: Optional[datetime] = None
    range_end: Optional[datetime] = None
    limit: Optional[int] = Field(None, ge=1, le=100)
    after: Optional[str] = None
