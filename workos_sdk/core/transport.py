"""
HTTP transport abstraction.

Operations only talk to the ``HttpClient`` / ``ClientRequest`` /
``ClientResponse`` protocols below, so the httpx-backed implementation can be
swapped for a test double without touching any operation code.

Builders and responses are single-use: every builder method hands back a new
builder and retires the old one, and reading a response body retires the
response. Reusing a retired object raises ``AlreadyConsumedError``.
"""
import json as jsonlib
import logging
from typing import Any, Dict, Mapping, Optional, Protocol, runtime_checkable

import httpx

from ..exceptions import RequestError

logger = logging.getLogger(__name__)


class AlreadyConsumedError(RuntimeError):
    """Raised when a spent request builder or response is used again."""


@runtime_checkable
class ClientResponse(Protocol):
    """A received HTTP response whose body can be read once."""

    @property
    def status(self) -> int: ...

    @property
    def headers(self) -> Mapping[str, str]: ...

    def error_for_status(self) -> "ClientResponse": ...

    async def text(self) -> str: ...

    async def json(self) -> Any: ...


@runtime_checkable
class ClientRequest(Protocol):
    """A single-use request builder."""

    def bearer_auth(self, token: object) -> "ClientRequest": ...

    def json(self, body: Any) -> "ClientRequest": ...

    def query(self, params: Mapping[str, Any]) -> "ClientRequest": ...

    def form(self, data: Mapping[str, Any]) -> "ClientRequest": ...

    async def send(self) -> ClientResponse: ...


@runtime_checkable
class HttpClient(Protocol):
    """Creates request builders for a URL."""

    def get(self, url: str) -> ClientRequest: ...

    def post(self, url: str) -> ClientRequest: ...

    def put(self, url: str) -> ClientRequest: ...

    def delete(self, url: str) -> ClientRequest: ...


class SingleUse:
    """Tracks whether an object has been consumed."""

    _consumed_by: Optional[str] = None

    def _consume(self, action: str) -> None:
        if self._consumed_by is not None:
            raise AlreadyConsumedError(
                f"{type(self).__name__} cannot be used for {action}(): "
                f"already consumed by {self._consumed_by}()"
            )
        self._consumed_by = action

    @property
    def consumed(self) -> bool:
        return self._consumed_by is not None


def _drop_none(values: Mapping[str, Any]) -> Dict[str, Any]:
    return {key: value for key, value in values.items() if value is not None}


class HttpxResponse(SingleUse):
    """``ClientResponse`` backed by an ``httpx.Response``."""

    def __init__(self, response: httpx.Response):
        self._response = response

    @property
    def status(self) -> int:
        return self._response.status_code

    @property
    def headers(self) -> Mapping[str, str]:
        return self._response.headers

    def error_for_status(self) -> "HttpxResponse":
        self._consume("error_for_status")
        if self._response.is_success:
            return HttpxResponse(self._response)
        raise RequestError(f"unsuccessful HTTP status {self.status}", status=self.status)

    async def text(self) -> str:
        self._consume("text")
        try:
            await self._response.aread()
        except httpx.HTTPError as e:
            raise RequestError(f"failed to read response body: {e}", cause=e) from e
        return self._response.text

    async def json(self) -> Any:
        body = await self.text()
        try:
            return jsonlib.loads(body)
        except ValueError as e:
            raise RequestError(f"response body is not valid JSON: {e}", cause=e) from e


class HttpxRequest(SingleUse):
    """``ClientRequest`` that sends through an ``httpx.AsyncClient``."""

    def __init__(
        self,
        client: httpx.AsyncClient,
        method: str,
        url: str,
        headers: Optional[Dict[str, str]] = None,
        params: Optional[Dict[str, Any]] = None,
        content: Optional[bytes] = None,
        form_data: Optional[Dict[str, Any]] = None,
    ):
        self._client = client
        self.method = method
        self.url = url
        self._headers = headers or {}
        self._params = params or {}
        self._content = content
        self._form_data = form_data

    def _derive(self, action: str, **changes: Any) -> "HttpxRequest":
        self._consume(action)
        state: Dict[str, Any] = {
            "headers": dict(self._headers),
            "params": dict(self._params),
            "content": self._content,
            "form_data": self._form_data,
        }
        state.update(changes)
        return HttpxRequest(self._client, self.method, self.url, **state)

    def bearer_auth(self, token: object) -> "HttpxRequest":
        headers = dict(self._headers)
        headers["Authorization"] = f"Bearer {token}"
        return self._derive("bearer_auth", headers=headers)

    def json(self, body: Any) -> "HttpxRequest":
        try:
            content = jsonlib.dumps(body).encode("utf-8")
        except (TypeError, ValueError) as e:
            self._consume("json")
            raise RequestError(f"failed to serialize JSON body: {e}", cause=e) from e
        headers = dict(self._headers)
        headers["Content-Type"] = "application/json"
        return self._derive("json", headers=headers, content=content, form_data=None)

    def query(self, params: Mapping[str, Any]) -> "HttpxRequest":
        merged = dict(self._params)
        merged.update(_drop_none(params))
        return self._derive("query", params=merged)

    def form(self, data: Mapping[str, Any]) -> "HttpxRequest":
        return self._derive("form", form_data=_drop_none(data), content=None)

    async def send(self) -> HttpxResponse:
        self._consume("send")
        kwargs: Dict[str, Any] = {"headers": self._headers}
        if self._params:
            kwargs["params"] = self._params
        if self._content is not None:
            kwargs["content"] = self._content
        elif self._form_data is not None:
            kwargs["data"] = self._form_data

        logger.debug(f"Sending request: {self.method} {self.url}")
        try:
            response = await self._client.request(self.method, self.url, **kwargs)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.warning(f"Request failed: {self.method} {self.url} - {str(e)}")
            raise RequestError(f"request error: {e}", cause=e) from e

        logger.debug(f"Received response: {self.method} {self.url} - {response.status_code}")
        return HttpxResponse(response)


class HttpxClient:
    """``HttpClient`` backed by a shared ``httpx.AsyncClient``."""

    def __init__(
        self,
        client: Optional[httpx.AsyncClient] = None,
        *,
        timeout: Optional[float] = 30.0,
        headers: Optional[Dict[str, str]] = None,
    ):
        self._client = client or httpx.AsyncClient(timeout=timeout, headers=headers)

    def get(self, url: str) -> HttpxRequest:
        return HttpxRequest(self._client, "GET", url)

    def post(self, url: str) -> HttpxRequest:
        return HttpxRequest(self._client, "POST", url)

    def put(self, url: str) -> HttpxRequest:
        return HttpxRequest(self._client, "PUT", url)

    def delete(self, url: str) -> HttpxRequest:
        return HttpxRequest(self._client, "DELETE", url)

    async def aclose(self) -> None:
        await self._client.aclose()
