"""
Core infrastructure: credentials, transport, response classification and
shared schemas.
"""
from .api import ApiArea
from .api_key import ApiKey
from .models import (
    KnownOrUnknown, ListMetadata, Metadata, Order, PaginatedList,
    PaginationParams, RequestParams, TimestampSchema, WorkOsModel
)
from .response import (
    handle_generic_error, handle_oauth_error, handle_unauthorized_error,
    handle_unauthorized_or_generic_error, parse_json
)
from .transport import (
    AlreadyConsumedError, ClientRequest, ClientResponse, HttpClient,
    HttpxClient, HttpxRequest, HttpxResponse
)

__all__ = [
    "ApiArea", "ApiKey",
    "KnownOrUnknown", "ListMetadata", "Metadata", "Order", "PaginatedList",
    "PaginationParams", "RequestParams", "TimestampSchema", "WorkOsModel",
    "handle_generic_error", "handle_oauth_error", "handle_unauthorized_error",
    "handle_unauthorized_or_generic_error", "parse_json",
    "AlreadyConsumedError", "ClientRequest", "ClientResponse", "HttpClient",
    "HttpxClient", "HttpxRequest", "HttpxResponse",
]
