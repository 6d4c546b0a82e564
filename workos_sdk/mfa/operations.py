"""
Multi-factor authentication API.

https://workos.com/docs/reference/mfa
"""
import logging

from ..core.api import ApiArea
from ..core.validation import path_segment
from .models import (
    AuthenticationChallenge,
    AuthenticationFactor,
    ChallengeFactorParams,
    EnrollFactorParams,
    VerifyChallengeParams,
    VerifyChallengeResponse,
)

logger = logging.getLogger(__name__)


class Mfa(ApiArea):
    """Enroll factors, issue challenges and verify codes."""

    async def enroll_factor(self, params: EnrollFactorParams) -> AuthenticationFactor:
        factor = await self._make_request(
            "POST", "/auth/factors/enroll", AuthenticationFactor, json=params.to_body()
        )
        logger.info(f"Enrolled {params.type.value} factor: {factor.id}")
        return factor

    async def get_factor(self, authentication_factor_id: str) -> AuthenticationFactor:
        return await self._make_request(
            "GET", f"/auth/factors/{path_segment(authentication_factor_id)}", AuthenticationFactor
        )

    async def delete_factor(self, authentication_factor_id: str) -> None:
        await self._make_request(
            "DELETE", f"/auth/factors/{path_segment(authentication_factor_id)}"
        )
        logger.info(f"Deleted factor: {authentication_factor_id}")

    async def challenge_factor(self, params: ChallengeFactorParams) -> AuthenticationChallenge:
        """
        Create a challenge for an enrolled factor.

        For SMS factors the API sends the code; ``sms_template`` may embed it
        with ``{{code}}``.
        """
        return await self._make_request(
            "POST",
            f"/auth/factors/{path_segment(params.authentication_factor_id)}/challenge",
            AuthenticationChallenge,
            json=params.to_body(),
        )

    async def verify_challenge(self, params: VerifyChallengeParams) -> VerifyChallengeResponse:
        """
        Check a one-time code against a challenge.

        A wrong code is not an error: the response comes back with
        ``valid=False``.
        """
        return await self._make_request(
            "POST",
            f"/auth/challenges/{path_segment(params.authentication_challenge_id)}/verify",
            VerifyChallengeResponse,
            json=params.to_body(),
        )
