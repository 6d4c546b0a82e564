"""
Test configuration and fixtures for the WorkOS SDK.
Provides API clients wired to respx-mocked httpx or to the in-memory fake
transport, plus sample API payloads.
"""
from typing import AsyncGenerator

import pytest
import pytest_asyncio
import respx

from workos_sdk import WorkOs

API_KEY = "sk_example_123456789"
BASE_URL = "https://api.workos.test"
CLIENT_ID = "client_123456789"

TIMESTAMPS = {
    "created_at": "2021-06-25T19:07:33.155Z",
    "updated_at": "2021-06-25T19:07:33.155Z",
}


@pytest.fixture
def mock_api():
    """respx router intercepting every httpx request to the test base URL."""
    with respx.mock(base_url=BASE_URL, assert_all_called=False) as router:
        yield router


@pytest_asyncio.fixture
async def workos() -> AsyncGenerator[WorkOs, None]:
    """Client using the default httpx transport; pair with ``mock_api``."""
    async with WorkOs(API_KEY, base_url=BASE_URL, client_id=CLIENT_ID) as client:
        yield client


@pytest.fixture
def organization_json() -> dict:
    return {
        "object": "organization",
        "id": "org_01EHZNVPK3SFK441A1RGBFSHRT",
        "name": "Foo Corporation",
        "allow_profiles_outside_organization": False,
        "domains": [
            {
                "object": "organization_domain",
                "id": "org_domain_01EHZNVPK2QXHMVWCEDQEKY69A",
                "organization_id": "org_01EHZNVPK3SFK441A1RGBFSHRT",
                "domain": "foo-corp.com",
                "state": "verified",
                "verification_strategy": "dns",
                "verification_token": "m5Oztg3jdK4NJLgs8uIlIprMw",
                **TIMESTAMPS,
            }
        ],
        "external_id": "2fe01467-f7ea-4dd2-8b79-c2b4f56d0191",
        "metadata": {"tier": "diamond"},
        **TIMESTAMPS,
    }


@pytest.fixture
def user_json() -> dict:
    return {
        "object": "user",
        "id": "user_01E4ZCR3C56J083X43JQXF3JK5",
        "email": "marcelina.davis@example.com",
        "first_name": "Marcelina",
        "last_name": "Davis",
        "email_verified": True,
        "profile_picture_url": "https://workoscdn.com/images/v1/123abc",
        "last_sign_in_at": "2021-06-25T19:07:33.155Z",
        "external_id": "f1ffa2b2-c20b-4d39-be5c-212726e11222",
        "metadata": {"language": "en"},
        **TIMESTAMPS,
    }


@pytest.fixture
def membership_json() -> dict:
    return {
        "object": "organization_membership",
        "id": "om_01E4ZCR3C56J083X43JQXF3JK5",
        "user_id": "user_01E4ZCR3C56J083X43JQXF3JK5",
        "organization_id": "org_01E4ZCR3C56J083X43JQXF3JK5",
        "role": {"slug": "member"},
        "status": "active",
        **TIMESTAMPS,
    }


@pytest.fixture
def invitation_json() -> dict:
    return {
        "object": "invitation",
        "id": "invitation_01E4ZCR3C56J083X43JQXF3JK5",
        "email": "marcelina.davis@example.com",
        "state": "pending",
        "accepted_at": None,
        "revoked_at": None,
        "expires_at": "2021-07-01T19:07:33.155Z",
        "token": "Z1uX3RbwcIl5fIGJJJCXXisdI",
        "accept_invitation_url": "https://your-app.com/invite?invitation_token=Z1uX3RbwcIl5fIGJJJCXXisdI",
        "organization_id": "org_01E4ZCR3C56J083X43JQXF3JK5",
        "inviter_user_id": "user_01HYGBX8ZGD19949T3BM4FW1C3",
        "accepted_user_id": None,
        **TIMESTAMPS,
    }


@pytest.fixture
def connection_json() -> dict:
    return {
        "object": "connection",
        "id": "conn_01E4ZCR3C56J083X43JQXF3JK5",
        "organization_id": "org_01EHWNCE74X7JSDV0X3SZ3KJNY",
        "connection_type": "GoogleOAuth",
        "name": "Foo Corp",
        "state": "active",
        **TIMESTAMPS,
    }


@pytest.fixture
def directory_user_json() -> dict:
    return {
        "object": "directory_user",
        "id": "directory_user_01E1JG7J09H96KYP8HM9B0G5SJ",
        "idp_id": "2836",
        "directory_id": "directory_01ECAZ4NV9QMV47GW873HDCX74",
        "organization_id": "org_01EZTR6WYX1A0DSE2CYMGXQ24Y",
        "first_name": "Marcelina",
        "last_name": "Davis",
        "email": "marcelina@foo-corp.com",
        "emails": [{"primary": True, "type": "work", "value": "marcelina@foo-corp.com"}],
        "username": "marcelina@foo-corp.com",
        "groups": [],
        "state": "active",
        "role": {"slug": "member"},
        "custom_attributes": {"department": "Engineering"},
        "raw_attributes": {},
        **TIMESTAMPS,
    }


def page(*items: dict, before=None, after=None) -> dict:
    return {
        "object": "list",
        "data": list(items),
        "list_metadata": {"before": before, "after": after},
    }
