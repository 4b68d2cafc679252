"""fetchkit: a small async HTTP request facade.

Public API:
    create - Build a Client with its own defaults
    Client - Callable client (get/post/put/patch/delete/head/options/request)
    default_client - Shared instance with empty defaults
    Response - Normalized response model
    FormData, Blob - Request bodies sent without JSON encoding
    CancelToken - Cancellation handle whose signal the transport honors

Internal (not for direct use):
    _internal - Merging, request assembly and the default httpx transport
"""

from fetchkit._internal.cancel import CancelToken
from fetchkit._internal.merge import deep_merge
from fetchkit._version import __version__
from fetchkit.client import Client, create, default_client
from fetchkit.exceptions import (
    FetchkitAbortError,
    FetchkitConfigError,
    FetchkitError,
    FetchkitStatusError,
)
from fetchkit.models import Blob, FormData, Options, RequestInit, Response

__all__ = [
    "__version__",
    "create",
    "Client",
    "default_client",
    "deep_merge",
    "CancelToken",
    "Options",
    "RequestInit",
    "Response",
    "FormData",
    "Blob",
    "FetchkitError",
    "FetchkitStatusError",
    "FetchkitConfigError",
    "FetchkitAbortError",
]
