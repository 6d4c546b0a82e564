"""
WorkOS client - entry point for every API area.
"""
from typing import Any, Mapping, Optional, Union

import httpx

from .config import DEFAULT_BASE_URL, WorkOsSettings, get_settings
from .core.api_key import ApiKey
from .core.transport import HttpClient, HttpxClient
from .directory_sync import DirectorySync
from .events import Events
from .exceptions import UrlParseError
from .mfa import Mfa
from .organizations import Organizations
from .passwordless import Passwordless
from .roles import Roles
from .sso import Sso
from .user_management import UserManagement
from .version import __version__


def _parse_base_url(base_url: str) -> str:
    try:
        url = httpx.URL(base_url)
    except httpx.InvalidURL as e:
        raise UrlParseError(base_url, str(e)) from e
    if url.scheme not in ("http", "https") or not url.host:
        raise UrlParseError(base_url, "expected an absolute http(s) URL")
    return str(url).rstrip("/")


class WorkOs:
    """
    WorkOS API client.

    Holds the credential, the base URL and the HTTP transport. All three are
    read-only after construction, so one instance can serve concurrent calls.
    """

    def __init__(
        self,
        api_key: Union[ApiKey, str],
        *,
        base_url: str = DEFAULT_BASE_URL,
        client_id: Optional[str] = None,
        client: Optional[HttpClient] = None,
        timeout: Optional[float] = 30.0,
        user_agent: Optional[str] = None,
    ):
        """
        Initialize the WorkOS client.

        Args:
            api_key: WorkOS API key
            base_url: WorkOS API base URL
            client_id: Default client ID for AuthKit/SSO helpers
            client: HTTP transport; defaults to an httpx-backed client
            timeout: Request timeout in seconds for the default transport
            user_agent: User-Agent header for the default transport
        """
        self._key = api_key if isinstance(api_key, ApiKey) else ApiKey(api_key)
        self._base_url = _parse_base_url(base_url)
        self.client_id = client_id

        self._owns_client = client is None
        if client is None:
            client = HttpxClient(
                timeout=timeout,
                headers={"User-Agent": user_agent or f"workos-sdk-python/{__version__}"},
            )
        self._client = client

    @classmethod
    def from_settings(
        cls,
        settings: Optional[WorkOsSettings] = None,
        client: Optional[HttpClient] = None,
    ) -> "WorkOs":
        """Create a client from ``WorkOsSettings`` (environment by default)."""
        settings = settings or get_settings()
        return cls(
            settings.api_key.get_secret_value(),
            base_url=settings.base_url,
            client_id=settings.client_id,
            client=client,
            timeout=settings.timeout,
            user_agent=settings.user_agent,
        )

    async def __aenter__(self) -> "WorkOs":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the default transport. Injected transports are left open."""
        if self._owns_client and isinstance(self._client, HttpxClient):
            await self._client.aclose()

    @property
    def key(self) -> ApiKey:
        return self._key

    @property
    def base_url(self) -> str:
        return self._base_url

    def client(self) -> HttpClient:
        return self._client

    def join_url(self, path: str, params: Optional[Mapping[str, Any]] = None) -> str:
        """Build an absolute URL for an API path, optionally with a query string."""
        raw = f"{self._base_url}/{path.lstrip('/')}"
        try:
            url = httpx.URL(raw)
            if params:
                url = url.copy_merge_params(
                    {key: value for key, value in params.items() if value is not None}
                )
        except httpx.InvalidURL as e:
            raise UrlParseError(raw, str(e)) from e
        return str(url)

    def directory_sync(self) -> DirectorySync:
        return DirectorySync(self)

    def events(self) -> Events:
        return Events(self)

    def mfa(self) -> Mfa:
        return Mfa(self)

    def organizations(self) -> Organizations:
        return Organizations(self)

    def passwordless(self) -> Passwordless:
        return Passwordless(self)

    def roles(self) -> Roles:
        return Roles(self)

    def sso(self) -> Sso:
        return Sso(self)

    def user_management(self) -> UserManagement:
        return UserManagement(self)
