"""Public exceptions for fetchkit."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from fetchkit.models import Response


class FetchkitError(Exception):
    """Base exception for all fetchkit errors."""


class FetchkitStatusError(FetchkitError):
    """A request completed but its status failed validation.

    The normalized response is attached unchanged, so callers can inspect the
    status, headers and decoded data of the failed exchange.
    """

    def __init__(self, message: str, response: "Response") -> None:
        super().__init__(message)
        self.response = response

    @property
    def status_code(self) -> int:
        return self.response.status


class FetchkitConfigError(FetchkitError):
    """Configuration error (unsupported option values)."""


class FetchkitAbortError(FetchkitError):
    """The request was aborted through its cancellation signal."""
