"""
Cancellable - Cooperative cancellation for search coroutines.

A Cancellable is handed in by the host with every asynchronous request.
Observers connected to it fire once when cancel() is called, or right
away if the token was already cancelled when they connect.
"""

import asyncio
import itertools
from typing import Callable, TypeVar

from loguru import logger

T = TypeVar("T")


class Cancelled(Exception):
    """Raised when a pending operation's Cancellable fires first."""


class Cancellable:
    """Cancellation token shared between the host and a pending request."""

    def __init__(self):
        self._cancelled = False
        self._observers: dict[int, Callable[[], None]] = {}
        self._ids = itertools.count(1)

    def is_cancelled(self) -> bool:
        return self._cancelled

    def cancel(self) -> None:
        """Cancel the token and notify every connected observer once."""
        if self._cancelled:
            return
        self._cancelled = True
        observers = list(self._observers.values())
        self._observers.clear()
        for callback in observers:
            callback()

    def connect(self, callback: Callable[[], None]) -> int:
        """
        Register an observer for cancellation.

        Args:
            callback: Called with no arguments when the token is cancelled

        Returns:
            Handler id for disconnect(). If the token is already cancelled
            the callback runs immediately and 0 is returned.
        """
        if self._cancelled:
            callback()
            return 0
        handler_id = next(self._ids)
        self._observers[handler_id] = callback
        return handler_id

    def disconnect(self, handler_id: int) -> None:
        self._observers.pop(handler_id, None)

    def raise_if_cancelled(self, message: str = "Operation cancelled") -> None:
        if self._cancelled:
            raise Cancelled(message)


async def run_cancellable(
    cancellable: Cancellable,
    produce: Callable[[], T],
    message: str = "Operation cancelled",
) -> T:
    """
    Produce a result unless the Cancellable fires first.

    The observer is connected before the result is built and the loop is
    given one chance to deliver a pending cancel, so a cancelled request
    never sees a partial result.

    Args:
        cancellable: Token supplied by the host
        produce: Synchronous function building the full result
        message: Message for the Cancelled error

    Returns:
        Whatever produce() returned

    Raises:
        Cancelled: If the token fired before the result was delivered
    """
    future: asyncio.Future = asyncio.get_running_loop().create_future()

    def _reject():
        if not future.done():
            future.set_exception(Cancelled(message))

    handler_id = cancellable.connect(_reject)
    try:
        if not future.done():
            result = produce()
            await asyncio.sleep(0)
            if not future.done():
                future.set_result(result)
    finally:
        cancellable.disconnect(handler_id)

    if future.exception() is not None:
        logger.debug(f"Request cancelled: {message}")
    return await future

