"""
Response classification.

Every operation runs the response it gets back from ``send()`` through one of
the handlers below before decoding it:

* 401 always becomes ``UnauthorizedError``; the body is never read.
* 2xx passes through untouched.
* Any other status becomes ``ApiError`` carrying the status and raw body text.

Endpoints that document a structured error payload (the OAuth-style token
exchanges) use ``handle_oauth_error``, which keeps the 401 rule and then
decodes the payload into the caller's error type.
"""
import logging
from typing import Any, Iterable, Type, TypeVar

from pydantic import TypeAdapter, ValidationError

from ..exceptions import ApiError, OperationError, RequestError, UnauthorizedError
from .transport import ClientResponse

logger = logging.getLogger(__name__)

T = TypeVar("T")

UNREADABLE_BODY = "Failed to read response body"
UNAUTHORIZED_CLIENT_CODES = frozenset({"invalid_client", "unauthorized_client"})


def is_success(status: int) -> bool:
    return 200 <= status < 300


async def handle_unauthorized_error(response: ClientResponse) -> ClientResponse:
    """Raise ``UnauthorizedError`` for a 401 response."""
    if response.status == 401:
        logger.warning("Unauthorized response from WorkOS API")
        raise UnauthorizedError()
    return response


async def handle_generic_error(response: ClientResponse) -> ClientResponse:
    """Raise ``ApiError`` for any unsuccessful status."""
    if is_success(response.status):
        return response

    status = response.status
    try:
        body = await response.text()
    except RequestError:
        body = UNREADABLE_BODY

    logger.warning(f"WorkOS API error: {status}")
    raise ApiError(status, body)


async def handle_unauthorized_or_generic_error(response: ClientResponse) -> ClientResponse:
    response = await handle_unauthorized_error(response)
    return await handle_generic_error(response)


async def parse_json(response: ClientResponse, target: Any) -> Any:
    """Decode the response body into ``target``.

    ``target`` may be a model class or any type pydantic understands, such as
    ``PaginatedList[User]``. Decode failures raise ``RequestError``.
    """
    body = await response.text()
    try:
        return TypeAdapter(target).validate_json(body)
    except ValidationError as e:
        name = getattr(target, "__name__", repr(target))
        raise RequestError(f"failed to decode response as {name}: {e}", cause=e) from e


async def handle_oauth_error(
    response: ClientResponse,
    error_type: Type[T],
    operation_statuses: Iterable[int] = (400,),
) -> ClientResponse:
    """Classify a token-exchange response.

    A payload returned with one of ``operation_statuses`` is decoded into
    ``error_type`` and raised as ``OperationError``, except that a 400 whose
    code marks the client credentials as invalid becomes ``UnauthorizedError``.
    """
    response = await handle_unauthorized_error(response)
    if is_success(response.status):
        return response

    status = response.status
    if status not in tuple(operation_statuses):
        return await handle_generic_error(response)

    error = await parse_json(response, error_type)
    if status == 400 and getattr(error, "code", None) in UNAUTHORIZED_CLIENT_CODES:
        logger.warning(f"WorkOS rejected client credentials: {error.code}")
        raise UnauthorizedError()
    raise OperationError(error)
