"""
Single Sign-On API area.
"""
from .models import (
    Connection,
    ConnectionState,
    ConnectionType,
    GetProfileAndTokenError,
    ListConnectionsParams,
    Profile,
    ProfileAndToken,
    SamlCertificate,
    SamlCertificateType,
    SsoAuthorizationUrlParams,
)
from .operations import Sso

__all__ = [
    "Connection",
    "ConnectionState",
    "ConnectionType",
    "GetProfileAndTokenError",
    "ListConnectionsParams",
    "Profile",
    "ProfileAndToken",
    "SamlCertificate",
    "SamlCertificateType",
    "Sso",
    "SsoAuthorizationUrlParams",
]
