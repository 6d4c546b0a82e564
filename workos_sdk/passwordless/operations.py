"""
Passwordless (Magic Link) API.

https://workos.com/docs/reference/magic-link
"""
import logging

from ..core.api import ApiArea
from ..core.validation import path_segment
from .models import CreatePasswordlessSessionParams, PasswordlessSession

logger = logging.getLogger(__name__)


class Passwordless(ApiArea):
    async def create_session(
        self, params: CreatePasswordlessSessionParams
    ) -> PasswordlessSession:
        """
        Create a Magic Link session.

        The returned ``link`` can be emailed by your own application, or by
        WorkOS through ``send_session``.
        """
        session = await self._make_request(
            "POST", "/passwordless/sessions", PasswordlessSession, json=params.to_body()
        )
        logger.info(f"Created passwordless session: {session.id}")
        return session

    async def send_session(self, session_id: str) -> None:
        await self._make_request(
            "POST", f"/passwordless/sessions/{path_segment(session_id)}/send"
        )
        logger.info(f"Sent passwordless session: {session_id}")
