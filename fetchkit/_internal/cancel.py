"""Abort-controller style cancellation primitive."""

import asyncio
from typing import Any


class AbortSignal:
    """Read side of a CancelToken, handed to the transport."""

    def __init__(self) -> None:
        self._event = asyncio.Event()
        self.reason: Any = None

    @property
    def aborted(self) -> bool:
        return self._event.is_set()

    async def wait(self) -> None:
        """Suspend until the signal is aborted."""
        await self._event.wait()


class CancelToken:
    """Cancellation handle for one or more requests.

    Pass ``token.signal`` as the ``signal`` option and call ``abort()`` to
    cancel. The request pipeline only forwards the signal; honoring it is up
    to the transport.
    """

    def __init__(self) -> None:
        self.signal = AbortSignal()

    def abort(self, reason: Any = None) -> None:
        if self.signal.aborted:
            return
        self.signal.reason = reason
        self.signal._event.set()
