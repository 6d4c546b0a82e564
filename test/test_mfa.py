"""
Test suite for the MFA API.
"""
import json

import httpx
import pytest

from conftest import TIMESTAMPS
from workos_sdk import ApiError
from workos_sdk.mfa import (
    ChallengeFactorParams,
    EnrollFactorParams,
    FactorType,
    VerifyChallengeParams,
)


@pytest.fixture
def totp_factor_json() -> dict:
    return {
        "object": "authentication_factor",
        "id": "auth_factor_01FVYZ5QM8N98T9ME5BCB2BBMJ",
        "type": "totp",
        "totp": {
            "qr_code": "data:image/png;base64,{base64EncodedPng}",
            "secret": "NAGCCFS3EYRB422HNAKAKY3XDUORMSRF",
            "uri": "otpauth://totp/FooCorp:alan.turing@foo-corp.com?secret=NAGCCFS3EYRB422HNAKAKY3XDUORMSRF&issuer=FooCorp",
        },
        **TIMESTAMPS,
    }


@pytest.fixture
def challenge_json() -> dict:
    return {
        "object": "authentication_challenge",
        "id": "auth_challenge_01FVYZWQTZQ5VB6BC5MPG2EYC5",
        "expires_at": "2022-02-15T15:36:53.279Z",
        "authentication_factor_id": "auth_factor_01FVYZ5QM8N98T9ME5BCB2BBMJ",
        **TIMESTAMPS,
    }


class TestMfa:
    """Test MFA factor and challenge endpoints."""

    @pytest.mark.asyncio
    async def test_enroll_totp_factor(self, workos, mock_api, totp_factor_json):
        """Test enrolling a TOTP factor."""
        route = mock_api.post("/auth/factors/enroll").mock(
            return_value=httpx.Response(201, json=totp_factor_json)
        )

        factor = await workos.mfa().enroll_factor(
            EnrollFactorParams(type=FactorType.TOTP, totp_issuer="Foo Corp", totp_user="alan@foo-corp.com")
        )

        assert factor.type == FactorType.TOTP
        assert factor.totp.secret == "NAGCCFS3EYRB422HNAKAKY3XDUORMSRF"
        assert json.loads(route.calls.last.request.content) == {
            "type": "totp",
            "totp_issuer": "Foo Corp",
            "totp_user": "alan@foo-corp.com",
        }

    @pytest.mark.asyncio
    async def test_enroll_sms_factor(self, workos, mock_api):
        """Test enrolling an SMS factor."""
        mock_api.post("/auth/factors/enroll").mock(
            return_value=httpx.Response(
                201,
                json={
                    "object": "authentication_factor",
                    "id": "auth_factor_01FVYZ5QM8N98T9ME5BCB2BBMJ",
                    "type": "sms",
                    "sms": {"phone_number": "+15005550006"},
                    **TIMESTAMPS,
                },
            )
        )

        factor = await workos.mfa().enroll_factor(
            EnrollFactorParams(type=FactorType.SMS, phone_number="+15005550006")
        )

        assert factor.sms.phone_number == "+15005550006"

    def test_enroll_params_require_type_fields(self):
        """Test that enrollment requires the fields of its factor type."""
        with pytest.raises(ValueError):
            EnrollFactorParams(type=FactorType.SMS)
        with pytest.raises(ValueError):
            EnrollFactorParams(type=FactorType.TOTP, totp_issuer="Foo Corp")

    @pytest.mark.asyncio
    async def test_get_and_delete_factor(self, workos, mock_api, totp_factor_json):
        """Test retrieving and deleting a factor."""
        mock_api.get(f"/auth/factors/{totp_factor_json['id']}").mock(
            return_value=httpx.Response(200, json=totp_factor_json)
        )
        delete = mock_api.delete(f"/auth/factors/{totp_factor_json['id']}").mock(
            return_value=httpx.Response(200)
        )

        factor = await workos.mfa().get_factor(totp_factor_json["id"])
        await workos.mfa().delete_factor(factor.id)

        assert delete.called

    @pytest.mark.asyncio
    async def test_challenge_factor(self, workos, mock_api, challenge_json):
        """Test creating a challenge for a factor."""
        route = mock_api.post(
            f"/auth/factors/{challenge_json['authentication_factor_id']}/challenge"
        ).mock(return_value=httpx.Response(201, json=challenge_json))

        challenge = await workos.mfa().challenge_factor(
            ChallengeFactorParams(
                authentication_factor_id=challenge_json["authentication_factor_id"],
                sms_template="Your code is {{code}}",
            )
        )

        assert challenge.id == challenge_json["id"]
        assert json.loads(route.calls.last.request.content) == {
            "sms_template": "Your code is {{code}}"
        }

    @pytest.mark.asyncio
    async def test_verify_challenge(self, workos, mock_api, challenge_json):
        """Test verifying a challenge code."""
        route = mock_api.post(f"/auth/challenges/{challenge_json['id']}/verify").mock(
            return_value=httpx.Response(200, json={"challenge": challenge_json, "valid": False})
        )

        result = await workos.mfa().verify_challenge(
            VerifyChallengeParams(authentication_challenge_id=challenge_json["id"], code="123456")
        )

        assert result.valid is False
        assert json.loads(route.calls.last.request.content) == {"code": "123456"}

    @pytest.mark.asyncio
    async def test_verify_expired_challenge(self, workos, mock_api):
        """Test verifying an expired challenge."""
        mock_api.post("/auth/challenges/auth_challenge_1/verify").mock(
            return_value=httpx.Response(
                422, json={"code": "authentication_challenge_expired", "message": "expired"}
            )
        )

        with pytest.raises(ApiError) as exc_info:
            await workos.mfa().verify_challenge(
                VerifyChallengeParams(authentication_challenge_id="auth_challenge_1", code="123456")
            )

        assert exc_info.value.status == 422
        assert "authentication_challenge_expired" in exc_info.value.body
