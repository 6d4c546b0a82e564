"""
Multi-factor authentication schemas.
"""
from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import Field, model_validator

from ..core.models import KnownOrUnknown, RequestParams, TimestampSchema, WorkOsModel


class FactorType(str, Enum):
    GENERIC_OTP = "generic_otp"
    SMS = "sms"
    TOTP = "totp"


class TotpDetails(WorkOsModel):
    issuer: Optional[str] = None
    user: Optional[str] = None
    qr_code: Optional[str] = None
    secret: Optional[str] = None
    uri: Optional[str] = None


class SmsDetails(WorkOsModel):
    phone_number: str


class AuthenticationFactor(TimestampSchema):
    """
    An enrolled MFA factor.

    ``totp`` is set for TOTP factors and ``sms`` for SMS factors.
    """

    id: str
    type: KnownOrUnknown[FactorType]
    user_id: Optional[str] = None
    totp: Optional[TotpDetails] = None
    sms: Optional[SmsDetails] = None


class AuthenticationChallenge(TimestampSchema):
    id: str
    authentication_factor_id: str
    expires_at: Optional[datetime] = None
    code: Optional[str] = None


class VerifyChallengeResponse(WorkOsModel):
    challenge: AuthenticationChallenge
    valid: bool


class EnrollFactorParams(RequestParams):
    type: FactorType
    totp_issuer: Optional[str] = None
    totp_user: Optional[str] = None
    phone_number: Optional[str] = None

    @model_validator(mode="after")
    def check_type_fields(self) -> "EnrollFactorParams":
        if self.type == FactorType.SMS and not self.phone_number:
            raise ValueError("phone_number is required for sms factors")
        if self.type == FactorType.TOTP and not (self.totp_issuer and self.totp_user):
            raise ValueError("totp_issuer and totp_user are required for totp factors")
        return self


class ChallengeFactorParams(RequestParams):
    authentication_factor_id: str = Field(..., exclude=True)
    sms_template: Optional[str] = None


class VerifyChallengeParams(RequestParams):
    authentication_challenge_id: str = Field(..., exclude=True)
    code: str
