"""Client-side list interaction helpers.

The browser front end reorders and toggles locally before confirming
with the server, and debounces search input.  These helpers implement
the same steps for Python callers.
"""

from __future__ import annotations

import asyncio
import contextlib
import logging
from collections.abc import Awaitable, Callable, Iterable, Sequence
from typing import Generic, TypeVar

from pylistserver._constants import SEARCH_DEBOUNCE_S

_logger = logging.getLogger(__name__)

T = TypeVar("T")


def move_item(seq: Sequence[T], source: int, destination: int) -> list[T]:
    """Return a copy of *seq* with the element at *source* moved to *destination*.

    Mirrors a drag-and-drop release: the element is removed first, then
    inserted at the destination index of the shortened list.
    """
    if not 0 <= source < len(seq):
        raise IndexError(f"source index {source} out of range for {len(seq)} items")
    if not 0 <= destination < len(seq):
        raise IndexError(f"destination index {destination} out of range for {len(seq)} items")
    result = list(seq)
    moved = result.pop(source)
    result.insert(destination, moved)
    return result


def toggle_selection(selected: Iterable[int], item_id: int) -> set[int]:
    """Return a new selection with *item_id* added, or removed if present."""
    result = set(selected)
    if item_id in result:
        result.remove(item_id)
    else:
        result.add(item_id)
    return result


class Debouncer(Generic[T]):
    """Call an async callback with the latest value once input goes quiet.

    Every :meth:`push` restarts the timer; only the value pushed last
    before *delay* seconds of silence reaches the callback.
    Callback failures are logged rather than raised.
    """

    def __init__(self, callback: Callable[[T], Awaitable[None]], *, delay: float = SEARCH_DEBOUNCE_S) -> None:
        self._callback = callback
        self._delay = delay
        self._task: asyncio.Task[None] | None = None

    @property
    def pending(self) -> bool:
        return self._task is not None and not self._task.done()

    def push(self, value: T) -> None:
        """Schedule *value*, cancelling any value still waiting."""
        self.cancel()
        self._task = asyncio.get_running_loop().create_task(self._fire(value))

    def cancel(self) -> None:
        if self._task is not None and not self._task.done():
            self._task.cancel()
        self._task = None

    async def flush(self) -> None:
        """Wait for the scheduled call, if any, to finish."""
        task = self._task
        if task is None:
            return
        with contextlib.suppress(asyncio.CancelledError):
            await task

    async def _fire(self, value: T) -> None:
        await asyncio.sleep(self._delay)
        try:
            await self._callback(value)
        except Exception:
            _logger.warning("Debounced callback failed for %r", value, exc_info=True)
