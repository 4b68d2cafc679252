"""Redaction of sensitive header values in debug output."""

from collections.abc import Mapping
from typing import Any

REDACT_HEADERS: frozenset[str] = frozenset({
    "authorization",
    "proxy-authorization",
    "cookie",
    "set-cookie",
    "x-api-key",
    "x-auth-token",
    "x-xsrf-token",
    "x-csrf-token",
})

REDACTED_VALUE = "[REDACTED]"


def redact_headers(
    headers: Mapping[str, Any] | None,
    *,
    extra_keys: frozenset[str] = frozenset(),
) -> dict[str, Any]:
    """Return a copy of ``headers`` with sensitive values replaced.

    Header names are compared case-insensitively. The original mapping is
    never mutated.

    Args:
        headers: Header mapping to redact.
        extra_keys: Additional lower-case header names to redact, such as a
            configured XSRF header name.

    Returns:
        A new dictionary with sensitive values replaced by "[REDACTED]".
    """
    if not headers:
        return {}
    sensitive = REDACT_HEADERS | extra_keys
    result = {}
    for name, value in headers.items():
        if isinstance(name, str) and name.lower() in sensitive:
            result[name] = REDACTED_VALUE
        else:
            result[name] = value
    return result
