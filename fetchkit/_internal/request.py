"""Request assembly: body encoding, XSRF token lookup and URL composition."""

import json
import re
from collections.abc import Callable, Mapping
from typing import Any
from urllib.parse import unquote

import httpx
from pydantic import BaseModel

JSON_CONTENT_TYPE = "application/json"


def is_json_body(data: Any) -> bool:
    """Decide whether a request payload gets JSON-encoded.

    Text, bytes and primitives are sent as-is, as is anything exposing
    ``append`` (multipart form) or ``text`` (blob-like). Lists, tuples and
    mappings are always JSON.
    """
    if data is None:
        return False
    if isinstance(data, (str, bytes, bytearray, memoryview)):
        return False
    if is_primitive_body(data):
        return False
    if isinstance(data, (list, tuple, Mapping)):
        return True
    if callable(getattr(data, "append", None)):
        return False
    if callable(getattr(data, "text", None)):
        return False
    return True


def is_primitive_body(data: Any) -> bool:
    """True for numbers and booleans, which are sent as plain text."""
    return isinstance(data, (bool, int, float))


def encode_primitive_body(data: bool | int | float) -> str:
    """Render a number or boolean the way String() would (``5``, ``true``)."""
    return json.dumps(data)


def parse_json_text(text: str) -> Any:
    """Parse JSON text, rejecting the NaN/Infinity constants JSON.parse rejects.

    Raises:
        ValueError: ``text`` is not strict JSON.
    """
    return json.loads(text, parse_constant=_reject_constant)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Invalid JSON constant: {name}")


def encode_json_body(data: Any) -> str:
    """Serialize a payload the way JSON.stringify would.

    Raises:
        TypeError: The payload is not JSON-serializable.
        ValueError: The payload contains circular references or NaN-like
            values json rejects.
    """
    if isinstance(data, BaseModel):
        data = data.model_dump(mode="json")
    return json.dumps(data, separators=(",", ":"), ensure_ascii=False)


def read_cookie(cookies: str | Callable[[], str] | None, name: str) -> str | None:
    """Read one cookie value from a ``document.cookie`` shaped string.

    ``name`` is used as a regular expression fragment. The value is
    URL-decoded.

    Raises:
        re.error: ``name`` is not a valid pattern fragment.
    """
    if cookies is None:
        return None
    jar = cookies() if callable(cookies) else cookies
    match = re.search("(^|; )" + name + "=([^;]*)", jar)
    if match is None:
        return None
    return unquote(match.group(2))


def apply_base_url(url: str, base_url: str | None) -> str:
    """Prefix ``base_url`` unless ``url`` already contains ``//`` anywhere."""
    if not base_url:
        return url
    return re.sub(r"^(?!.*//)/?", lambda _: base_url + "/", url, count=1)


def apply_params(
    url: str,
    params: Any,
    serializer: Callable[[Any], str] | None = None,
) -> str:
    """Append serialized query parameters to ``url``."""
    if not params:
        return url
    query = serializer(params) if serializer else str(httpx.QueryParams(params))
    return url + ("&" if "?" in url else "?") + query
