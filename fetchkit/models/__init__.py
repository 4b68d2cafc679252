"""Public models for fetchkit.

Example:
    from fetchkit.models import FormData

    form = FormData()
    form.append("file", b"...", filename="report.csv")
    await client.post("/upload", form)
"""

from fetchkit.models.body import Blob, FormData, FormField
from fetchkit.models.options import (
    HttpMethod,
    Options,
    RawResponse,
    RequestInit,
    ResponseType,
    Transport,
)
from fetchkit.models.response import Response

__all__ = [
    "Blob",
    "FormData",
    "FormField",
    "HttpMethod",
    "Options",
    "RawResponse",
    "RequestInit",
    "ResponseType",
    "Transport",
    "Response",
]
