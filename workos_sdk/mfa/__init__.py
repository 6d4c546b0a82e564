"""
Multi-factor authentication API area.
"""
from .models import (
    AuthenticationChallenge,
    AuthenticationFactor,
    ChallengeFactorParams,
    EnrollFactorParams,
    FactorType,
    SmsDetails,
    TotpDetails,
    VerifyChallengeParams,
    VerifyChallengeResponse,
)
from .operations import Mfa

__all__ = [
    "AuthenticationChallenge",
    "AuthenticationFactor",
    "ChallengeFactorParams",
    "EnrollFactorParams",
    "FactorType",
    "Mfa",
    "SmsDetails",
    "TotpDetails",
    "VerifyChallengeParams",
    "VerifyChallengeResponse",
]
