"""
Events API area.
"""
from .models import (
    EVENT_DATA_MODELS,
    ConnectionEvent,
    DsyncGroupUserEvent,
    EmailVerificationEvent,
    Event,
    EventName,
    ListEventsParams,
    MagicAuthEvent,
    PasswordResetEvent,
    SamlCertificateRenewalRequiredEvent,
    SamlCertificateRenewedEvent,
)
from .operations import Events

__all__ = [
    "EVENT_DATA_MODELS",
    "ConnectionEvent",
    "DsyncGroupUserEvent",
    "EmailVerificationEvent",
    "Event",
    "EventName",
    "Events",
    "ListEventsParams",
    "MagicAuthEvent",
    "PasswordResetEvent",
    "SamlCertificateRenewalRequiredEvent",
    "SamlCertificateRenewedEvent",
]
