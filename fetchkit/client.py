"""Callable HTTP client instances.

Example:
    from fetchkit import create

    api = create({"base_url": "https://api.example.com", "auth": "Bearer abc"})

    response = await api.get("/posts/1")
    print(response.data["title"])

    try:
        await api.post("/posts", {"title": "Hello"})
    except FetchkitStatusError as e:
        print(e.response.status, e.response.data)
"""

import asyncio
import os
import sys
from collections.abc import Awaitable, Callable, Iterable, Mapping
from typing import Any, TypeVar

from fetchkit._internal.cancel import CancelToken
from fetchkit._internal.http import DEFAULT_TIMEOUT, HttpxTransport
from fetchkit._internal.merge import deep_merge
from fetchkit._internal.redaction import redact_headers
from fetchkit._internal.request import (
    JSON_CONTENT_TYPE,
    apply_base_url,
    apply_params,
    encode_json_body,
    encode_primitive_body,
    is_json_body,
    is_primitive_body,
    parse_json_text,
    read_cookie,
)
from fetchkit.exceptions import FetchkitConfigError, FetchkitStatusError
from fetchkit.models import Options, RequestInit, Response, Transport

DEFAULT_TIMEOUT_MS = int(DEFAULT_TIMEOUT * 1000)
DEFAULT_METHOD = "get"
DEFAULT_RESPONSE_TYPE = "text"
STREAM_RESPONSE_TYPE = "stream"

T = TypeVar("T")
R = TypeVar("R")


class Client:
    """Callable HTTP client holding its own default configuration.

    Calling the instance performs one request and returns a Response:

        await client(config)
        await client(url, config)
        await client(url, config, method, body)

    A completed request whose status fails validation raises
    FetchkitStatusError carrying the Response. Transport and JSON encoding
    errors propagate unchanged.

    Use `Client.from_env()` to create a client from environment variables.
    """

    CancelToken = CancelToken

    def __init__(
        self,
        defaults: Options | Mapping[str, Any] | None = None,
        *,
        transport: Transport | None = None,
        debug: bool = False,
    ) -> None:
        """Initialize the client.

        Args:
            defaults: Configuration merged under every call's configuration.
            transport: Transport used when no ``transport`` option is given.
                Defaults to an httpx-based transport.
            debug: Enable debug logging to stderr.
        """
        self.defaults: dict[str, Any] = dict(defaults or {})
        self._transport: Transport = transport or HttpxTransport()
        self._debug = debug

    @classmethod
    def from_env(cls) -> "Client":
        """Create a client from environment variables.

        Optional environment variables:
            FETCHKIT_BASE_URL: Default base URL for relative request URLs.
            FETCHKIT_TIMEOUT_MS: Default transport timeout in milliseconds.
            FETCHKIT_DEBUG: Set to "1" to enable debug logging.

        Returns:
            A configured Client.

        Raises:
            ValueError: FETCHKIT_TIMEOUT_MS is not a valid integer.
        """
        base_url = os.environ.get("FETCHKIT_BASE_URL")
        debug = os.environ.get("FETCHKIT_DEBUG", "") == "1"
        timeout_ms = int(os.environ.get("FETCHKIT_TIMEOUT_MS", str(DEFAULT_TIMEOUT_MS)))

        defaults: dict[str, Any] = {}
        if base_url:
            defaults["base_url"] = base_url

        return cls(
            defaults,
            transport=HttpxTransport(timeout=timeout_ms / 1000),
            debug=debug,
        )

    def _log_debug(self, message: str) -> None:
        """Log a debug message to stderr if debug mode is enabled."""
        if self._debug:
            print(f"[fetchkit] {message}", file=sys.stderr)

    async def __call__(
        self,
        url_or_config: str | Options | Mapping[str, Any] | None = None,
        config: Options | Mapping[str, Any] | None = None,
        method: str | None = None,
        body: Any = None,
    ) -> Response:
        """Perform one request.

        Args:
            url_or_config: Request URL, or the whole configuration with the
                URL under ``url``.
            config: Call-site configuration when a URL is given first.
            method: Explicit HTTP method, overriding the configured one.
            body: Explicit payload, overriding the ``data`` option.

        Returns:
            The normalized Response.

        Raises:
            FetchkitStatusError: The status failed validation.
            FetchkitConfigError: ``response_type`` names no decoder.
        """
        if not isinstance(url_or_config, str):
            config = url_or_config
            url = (config or {}).get("url") or ""
        else:
            url = url_or_config

        call_config = dict(config or {})
        options = deep_merge(self.defaults, call_config)
        custom_headers: dict[str, str] = {}

        data = body if body is not None else options.get("data")

        for transform in options.get("transform_request") or []:
            data = transform(data, options.get("headers")) or data

        if options.get("auth"):
            custom_headers["authorization"] = options["auth"]

        if is_json_body(data):
            data = encode_json_body(data)
            custom_headers["content-type"] = JSON_CONTENT_TYPE
        elif is_primitive_body(data):
            data = encode_primitive_body(data)

        xsrf_cookie_name = options.get("xsrf_cookie_name")
        xsrf_header_name = options.get("xsrf_header_name")
        if xsrf_cookie_name and xsrf_header_name and options.get("cookies") is not None:
            try:
                token = read_cookie(options["cookies"], xsrf_cookie_name)
                if token is not None:
                    custom_headers[xsrf_header_name] = token
            except Exception as e:
                self._log_debug(f"XSRF cookie read failed: {e}")

        url = apply_base_url(url, options.get("base_url"))
        url = apply_params(url, options.get("params"), options.get("params_serializer"))

        headers = deep_merge(options.get("headers") or {}, custom_headers, True)
        request_method = (method or options.get("method") or DEFAULT_METHOD).upper()

        init: RequestInit = {
            "method": request_method,
            "body": data,
            "headers": headers,
            "credentials": "include" if options.get("with_credentials") else None,
            "signal": options.get("signal"),
        }

        extra_keys = frozenset({xsrf_header_name.lower()}) if xsrf_header_name else frozenset()
        self._log_debug(
            f"{request_method} {url} headers={redact_headers(headers, extra_keys=extra_keys)}"
        )

        transport = options.get("transport") or self._transport
        raw = await transport(url, init)

        return await self._normalize(raw, call_config, options)

    async def _normalize(
        self, raw: Any, call_config: dict[str, Any], options: dict[str, Any]
    ) -> Response:
        """Turn a raw transport response into a Response, validating status."""
        fields: dict[str, Any] = {}
        for name in dir(raw):
            if name.startswith("_"):
                continue
            value = getattr(raw, name)
            if not callable(value):
                fields[name] = value
        fields["config"] = call_config

        response_type = options.get("response_type")
        if response_type == STREAM_RESPONSE_TYPE:
            fields["data"] = getattr(raw, "body", None)
            return Response(**fields)

        response_type = response_type or DEFAULT_RESPONSE_TYPE
        decode: Callable[[], Awaitable[Any]] | None = getattr(raw, response_type, None)
        if not callable(decode):
            raise FetchkitConfigError(f"Unsupported response_type: {response_type!r}")

        try:
            data = await decode()
            fields["data"] = data
            if isinstance(data, str):
                try:
                    fields["data"] = parse_json_text(data)
                except ValueError:
                    pass  # Not JSON; keep the decoded text
        except Exception as e:
            self._log_debug(f"Response decode failed: {e}")

        response = Response(**fields)

        validate_status = options.get("validate_status")
        ok = validate_status(raw.status) if validate_status else raw.ok
        if not ok:
            self._log_debug(f"Request failed with status {raw.status}")
            raise FetchkitStatusError(
                f"Request failed with status {raw.status}", response
            )
        return response

    request = __call__

    # =========================================================================
    # Convenience Methods
    # =========================================================================

    async def get(self, url: str, config: Options | None = None) -> Response:
        return await self(url, config, "get")

    async def delete(self, url: str, config: Options | None = None) -> Response:
        return await self(url, config, "delete")

    async def head(self, url: str, config: Options | None = None) -> Response:
        return await self(url, config, "head")

    async def options(self, url: str, config: Options | None = None) -> Response:
        return await self(url, config, "options")

    async def post(self, url: str, body: Any = None, config: Options | None = None) -> Response:
        return await self(url, config, "post", body)

    async def put(self, url: str, body: Any = None, config: Options | None = None) -> Response:
        return await self(url, config, "put", body)

    async def patch(self, url: str, body: Any = None, config: Options | None = None) -> Response:
        return await self(url, config, "patch", body)

    # =========================================================================
    # Helpers
    # =========================================================================

    @staticmethod
    async def all(awaitables: Iterable[Awaitable[T]]) -> list[T]:
        """Await requests concurrently, returning results in input order."""
        return list(await asyncio.gather(*awaitables))

    @staticmethod
    def spread(fn: Callable[..., R]) -> Callable[[Iterable[Any]], R]:
        """Adapt ``fn(a, b, ...)`` into ``fn([a, b, ...])``."""

        def unpack(values: Iterable[Any]) -> R:
            return fn(*values)

        return unpack

    def create(self, defaults: Options | Mapping[str, Any] | None = None) -> "Client":
        """Create an independent client; it does not inherit these defaults."""
        return create(defaults)


def create(defaults: Options | Mapping[str, Any] | None = None) -> Client:
    """Create a new client instance with its own defaults.

    Args:
        defaults: Configuration merged under every call's configuration.

    Returns:
        A new Client.
    """
    return Client(defaults)


default_client = create()
