"""
WorkOS Python SDK - async client for the WorkOS REST API.
Covers organizations, user management, SSO, directory sync, MFA, roles,
events and passwordless sessions.
"""

from .config import WorkOsSettings, get_settings
from .core.api_key import ApiKey
from .core.models import ListMetadata, Order, PaginatedList, PaginationParams
from .core.transport import (
    AlreadyConsumedError, ClientRequest, ClientResponse, HttpClient, HttpxClient
)
from .exceptions import (
    AddressParseError, ApiError, OperationError, RequestError,
    UnauthorizedError, UrlParseError, WorkOsError
)
from .version import __version__
from .workos import WorkOs

__all__ = [
    "WorkOs",
    "ApiKey", "WorkOsSettings", "get_settings",
    "ListMetadata", "Order", "PaginatedList", "PaginationParams",
    "AlreadyConsumedError", "ClientRequest", "ClientResponse", "HttpClient", "HttpxClient",
    "AddressParseError", "ApiError", "OperationError", "RequestError",
    "UnauthorizedError", "UrlParseError", "WorkOsError",
    "__version__",
]
