"""
SSO schemas: connections, profiles and token exchange.
"""
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional

from pydantic import AliasChoices, Field

from ..core.models import (
    KnownOrUnknown,
    PaginationParams,
    RequestParams,
    TimestampSchema,
    WorkOsModel,
)


class ConnectionType(str, Enum):
    ADFS_SAML = "ADFSSAML"
    ADP_OIDC = "AdpOidc"
    APPLE_OAUTH = "AppleOAuth"
    AUTH0_SAML = "Auth0SAML"
    AZURE_SAML = "AzureSAML"
    CAS_SAML = "CasSAML"
    CLASSLINK_SAML = "ClassLinkSAML"
    CLOUDFLARE_SAML = "CloudflareSAML"
    CYBERARK_SAML = "CyberArkSAML"
    DUO_SAML = "DuoSAML"
    GENERIC_OIDC = "GenericOIDC"
    GENERIC_SAML = "GenericSAML"
    GITHUB_OAUTH = "GitHubOAuth"
    GOOGLE_OAUTH = "GoogleOAuth"
    GOOGLE_SAML = "GoogleSAML"
    JUMPCLOUD_SAML = "JumpCloudSAML"
    KEYCLOAK_SAML = "KeycloakSAML"
    LASTPASS_SAML = "LastPassSAML"
    LOGIN_GOV_OIDC = "LoginGovOidc"
    MAGIC_LINK = "MagicLink"
    MICROSOFT_OAUTH = "MicrosoftOAuth"
    MINIORANGE_SAML = "MiniOrangeSAML"
    NETIQ_SAML = "NetIqSAML"
    OKTA_SAML = "OktaSAML"
    ONELOGIN_SAML = "OneLoginSAML"
    ORACLE_SAML = "OracleSAML"
    PINGFEDERATE_SAML = "PingFederateSAML"
    PINGONE_SAML = "PingOneSAML"
    RIPPLING_SAML = "RipplingSAML"
    SALESFORCE_SAML = "SalesforceSAML"
    SHIBBOLETH_GENERIC_SAML = "ShibbolethGenericSAML"
    SHIBBOLETH_SAML = "ShibbolethSAML"
    SIMPLE_SAML_PHP_SAML = "SimpleSamlPhpSAML"
    VMWARE_SAML = "VMwareSAML"


class ConnectionState(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"


class Connection(TimestampSchema):
    """
    An SSO connection between an organization and its identity provider.

    https://workos.com/docs/reference/sso/connection
    """

    id: str
    organization_id: Optional[str] = None
    connection_type: KnownOrUnknown[ConnectionType]
    name: str
    state: KnownOrUnknown[ConnectionState]


class Profile(WorkOsModel):
    """User profile returned by the identity provider."""

    id: str
    idp_id: str
    connection_id: str
    connection_type: KnownOrUnknown[ConnectionType]
    organization_id: Optional[str] = None
    email: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    raw_attributes: Dict[str, Any] = Field(default_factory=dict)


class ProfileAndToken(WorkOsModel):
    access_token: str
    profile: Profile


class GetProfileAndTokenError(WorkOsModel):
    """OAuth-style error payload of the SSO token endpoint."""

    code: str = Field(validation_alias=AliasChoices("error", "code"))
    message: str = Field(
        default="", validation_alias=AliasChoices("error_description", "message")
    )

    def __str__(self) -> str:
        return f"{self.code}: {self.message}"


class SamlCertificateType(str, Enum):
    REQUEST_SIGNING = "RequestSigning"
    RESPONSE_ENCRYPTION = "ResponseEncryption"
    RESPONSE_SIGNING = "ResponseSigning"


class SamlCertificate(WorkOsModel):
    certificate_type: KnownOrUnknown[SamlCertificateType]
    expiry_date: datetime
    is_expired: Optional[bool] = None


class SsoAuthorizationUrlParams(RequestParams):
    """
    Parameters for the SSO authorization URL.

    Exactly one of ``connection``, ``organization`` or ``provider`` is
    required.
    """

    redirect_uri: str
    client_id: Optional[str] = None
    connection: Optional[str] = None
    organization: Optional[str] = None
    provider: Optional[ConnectionType] = None
    state: Optional[str] = None
    domain_hint: Optional[str] = None
    login_hint: Optional[str] = None


class ListConnectionsParams(PaginationParams):
    connection_type: Optional[ConnectionType] = None
    domain: Optional[str] = None
    organization_id: Optional[str] = None
