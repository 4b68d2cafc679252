"""Default httpx-based transport."""

import asyncio
from collections.abc import AsyncIterator, Mapping
from typing import Any

import httpx

from fetchkit._internal.cancel import AbortSignal
from fetchkit._version import __version__
from fetchkit.exceptions import FetchkitAbortError
from fetchkit.models import Blob, FormData, RequestInit

DEFAULT_TIMEOUT = 30.0


def create_http_client(
    *,
    timeout: float = DEFAULT_TIMEOUT,
    cookies: Mapping[str, str] | None = None,
) -> httpx.AsyncClient:
    """Create configured async HTTP client.

    Args:
        timeout: Request timeout in seconds.
        cookies: Optional cookies sent with the request.

    Returns:
        Configured httpx.AsyncClient instance.
    """
    return httpx.AsyncClient(
        timeout=timeout,
        cookies=cookies,
        headers={"User-Agent": f"fetchkit/{__version__}"},
    )


class HttpxRawResponse:
    """Fetch-style view of an httpx.Response.

    Public attributes mirror the fields of a fetch Response; decoding goes
    through the async ``text``/``json``/``bytes``/``blob`` methods.
    """

    def __init__(self, response: httpx.Response) -> None:
        self._response = response
        self.status = response.status_code
        self.status_text = response.reason_phrase
        self.ok = response.is_success
        self.headers = response.headers
        self.url = str(response.url)
        self.redirected = bool(response.history)
        self.type = "basic"
        self.body_used = False

    @property
    def body(self) -> AsyncIterator[bytes]:
        return self._response.aiter_bytes()

    async def text(self) -> str:
        self.body_used = True
        return self._response.text

    async def json(self) -> Any:
        self.body_used = True
        return self._response.json()

    async def bytes(self) -> bytes:
        self.body_used = True
        return self._response.content

    async def blob(self) -> Blob:
        self.body_used = True
        return Blob(
            content=self._response.content,
            type=self._response.headers.get("content-type", ""),
        )


class HttpxTransport:
    """Transport that performs requests with httpx.

    Cookies configured here are only attached when the request init asks for
    ``credentials="include"``. A ``signal`` in the request init aborts the
    in-flight request.
    """

    def __init__(
        self,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        cookies: Mapping[str, str] | None = None,
    ) -> None:
        self._timeout = timeout
        self._cookies = dict(cookies or {})

    async def __call__(self, url: str, init: RequestInit) -> HttpxRawResponse:
        signal: AbortSignal | None = init.get("signal")
        if signal is not None and signal.aborted:
            raise FetchkitAbortError(f"Request aborted: {signal.reason or 'aborted'}")

        cookies = self._cookies if init.get("credentials") == "include" else None
        async with create_http_client(timeout=self._timeout, cookies=cookies) as client:
            request = self._build_request(client, url, init)
            if signal is None:
                response = await client.send(request)
            else:
                response = await self._send_abortable(client, request, signal)
        return HttpxRawResponse(response)

    def _build_request(
        self, client: httpx.AsyncClient, url: str, init: RequestInit
    ) -> httpx.Request:
        headers = dict(init.get("headers") or {})
        body = init.get("body")
        kwargs: dict[str, Any] = {}

        if isinstance(body, FormData):
            data: dict[str, list[str]] = {}
            files: list[tuple[str, tuple[str | None, bytes, str | None]]] = []
            for entry in body.entries:
                if isinstance(entry.value, str) and entry.filename is None:
                    data.setdefault(entry.name, []).append(entry.value)
                elif isinstance(entry.value, Blob):
                    files.append(
                        (entry.name, (entry.filename or "blob", entry.value.content, entry.value.type or None))
                    )
                else:
                    content = entry.value.encode("utf-8") if isinstance(entry.value, str) else entry.value
                    files.append((entry.name, (entry.filename, content, None)))
            kwargs["data"] = data
            if files:
                kwargs["files"] = files
        elif isinstance(body, Blob):
            kwargs["content"] = body.content
            if body.type and "content-type" not in {k.lower() for k in headers}:
                headers["content-type"] = body.type
        elif body is not None:
            kwargs["content"] = body

        return client.build_request(init["method"], url, headers=headers, **kwargs)

    async def _send_abortable(
        self, client: httpx.AsyncClient, request: httpx.Request, signal: AbortSignal
    ) -> httpx.Response:
        send = asyncio.ensure_future(client.send(request))
        aborted = asyncio.ensure_future(signal.wait())
        try:
            await asyncio.wait({send, aborted}, return_when=asyncio.FIRST_COMPLETED)
        finally:
            aborted.cancel()
            if not send.done():
                send.cancel()
        if send.done() and not send.cancelled():
            return send.result()
        await asyncio.wait({send})
        raise FetchkitAbortError(f"Request aborted: {signal.reason or 'aborted'}")
