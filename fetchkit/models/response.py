"""Normalized response model."""

from typing import Any

from pydantic import BaseModel


class Response(BaseModel):
    """Normalized result of one request.

    The same shape is produced whether the status passed validation or not;
    on failure it travels inside FetchkitStatusError. Any extra non-callable
    attribute of the raw transport response is kept as an extra field.

    Fields:
        status: HTTP status code
        status_text: Reason phrase
        ok: Transport's own success flag (2xx)
        config: Configuration passed at the call site
        data: Decoded body (or the raw byte stream for response_type="stream")
        headers: Response headers
        url: Effective URL after redirects
        redirected: Whether a redirect was followed
        type: Transport response type
        body: Raw byte stream
        body_used: Whether the raw body had been consumed when copied
    """

    status: int = 0
    status_text: str = ""
    ok: bool = False
    config: dict[str, Any] = {}
    data: Any = None
    headers: Any = None
    url: str = ""
    redirected: bool = False
    type: str | None = None
    body: Any = None
    body_used: bool = False

    model_config = {"extra": "allow", "frozen": True, "arbitrary_types_allowed": True}
