"""Typed shapes for request configuration and transport requests."""

from collections.abc import Awaitable, Callable, Mapping, Sequence
from typing import Any, Literal, Protocol, TypedDict

HttpMethod = Literal[
    "get", "post", "put", "patch", "delete", "options", "head",
    "GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "HEAD",
]

ResponseType = Literal["text", "json", "bytes", "blob", "stream"]


class RequestInit(TypedDict):
    """Request descriptor handed to a transport."""

    method: str
    body: Any
    headers: dict[str, str]
    credentials: Literal["include"] | None
    signal: Any


class RawResponse(Protocol):
    """What a transport must return.

    Any public non-callable attribute is copied onto the normalized
    Response; the decode methods named by ``response_type`` are awaited.
    """

    status: int
    ok: bool

    async def text(self) -> str: ...


Transport = Callable[[str, RequestInit], Awaitable[Any]]


class Options(TypedDict, total=False):
    """Recognized request options.

    Unknown keys are carried through resolution untouched. ``data`` holds the
    request payload; ``body`` is accepted for compatibility and is not read by
    the pipeline.
    """

    url: str
    method: HttpMethod
    headers: Mapping[str, str]
    body: Any
    data: Any
    response_type: ResponseType
    params: Mapping[str, Any]
    params_serializer: Callable[[Any], str]
    with_credentials: bool
    auth: str
    xsrf_cookie_name: str
    xsrf_header_name: str
    validate_status: Callable[[int], bool]
    transform_request: Sequence[Callable[[Any, Any], Any]]
    base_url: str
    transport: Transport
    signal: Any
    cookies: str | Callable[[], str]
