"""
Shared plumbing for the per-area API classes.
"""
from typing import TYPE_CHECKING, Any, Mapping, Optional

from .response import handle_unauthorized_or_generic_error, parse_json

if TYPE_CHECKING:
    from ..workos import WorkOs


class ApiArea:
    """Base class for ``Organizations``, ``UserManagement`` and friends."""

    def __init__(self, workos: "WorkOs"):
        self.workos = workos

    async def _make_request(
        self,
        method: str,
        path: str,
        response_type: Any = None,
        json: Optional[Mapping[str, Any]] = None,
        params: Optional[Mapping[str, Any]] = None,
    ) -> Any:
        """
        Send an authenticated request and classify the response.

        Args:
            method: HTTP method (GET, POST, PUT, DELETE)
            path: API path, already percent-encoded
            response_type: Type to decode a successful body into; None to skip
                reading the body
            json: JSON request body
            params: Query parameters

        Returns:
            The decoded body, or None when ``response_type`` is None

        Raises:
            UnauthorizedError: On HTTP 401
            ApiError: On any other unsuccessful status
            RequestError: On transport or decode failures
        """
        url = self.workos.join_url(path)
        client = self.workos.client()
        request = getattr(client, method.lower())(url).bearer_auth(self.workos.key)
        if params is not None:
            request = request.query(params)
        if json is not None:
            request = request.json(json)

        response = await request.send()
        response = await handle_unauthorized_or_generic_error(response)
        if response_type is None:
            return None
        return await parse_json(response, response_type)
