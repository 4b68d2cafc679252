"""Request body types that bypass JSON encoding."""

from pydantic import BaseModel, Field


class Blob(BaseModel):
    """Opaque binary payload with an optional media type.

    Exposes ``text()``, which marks it as blob-like so the request pipeline
    sends it as-is.
    """

    content: bytes = b""
    type: str = ""

    model_config = {"frozen": True}

    async def text(self) -> str:
        return self.content.decode("utf-8")

    async def bytes(self) -> bytes:
        return self.content

    @property
    def size(self) -> int:
        return len(self.content)


class FormField(BaseModel):
    """One multipart form entry."""

    name: str
    value: str | bytes | Blob
    filename: str | None = None


class FormData(BaseModel):
    """Multipart form payload.

    Exposes ``append()``, which marks it as multipart so the request pipeline
    sends it as-is.
    """

    entries: list[FormField] = Field(default_factory=list)

    def append(
        self, name: str, value: str | bytes | Blob, filename: str | None = None
    ) -> None:
        self.entries.append(FormField(name=name, value=value, filename=filename))

    def get(self, name: str) -> str | bytes | Blob | None:
        for entry in self.entries:
            if entry.name == name:
                return entry.value
        return None
