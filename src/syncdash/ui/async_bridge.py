"""Async bridge — qasync event loop integration for PySide6."""

from __future__ import annotations

import asyncio
import functools
import logging
from collections.abc import Callable, Coroutine
from typing import Any

from PySide6.QtWidgets import QApplication
from qasync import QEventLoop

logger = logging.getLogger(__name__)
_PENDING: set[asyncio.Task[Any]] = set()


def create_event_loop(app: QApplication) -> QEventLoop:
    """Create and install a qasync event loop bridging Qt and asyncio."""
    loop = QEventLoop(app)
    asyncio.set_event_loop(loop)
    return loop


def schedule[T](coro: Coroutine[Any, Any, T]) -> asyncio.Task[T]:
    """Run ``coro`` on the loop and keep a reference until it finishes."""
    task: asyncio.Task[T] = asyncio.create_task(coro)
    _PENDING.add(task)
    task.add_done_callback(_forget)
    return task


def async_slot[**P, T](
    func: Callable[P, Coroutine[Any, Any, T]],
) -> Callable[P, None]:
    """Let a coroutine method be connected to a Qt signal.

    Usage::

        @async_slot
        async def _on_sync_clicked(self) -> None:
            await self._operation.run(self._owner.text(), self._repo.text())
    """

    @functools.wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> None:
        schedule(func(*args, **kwargs))

    return wrapper


def cancel_all_tasks() -> None:
    """Cancel every outstanding task started through this bridge."""
    current = asyncio.current_task()
    for task in list(_PENDING):
        if task is not current:
            task.cancel()


def _forget(task: asyncio.Task[Any]) -> None:
    _PENDING.discard(task)
    if task.cancelled():
        return
    exc = task.exception()
    if exc is not None:
        logger.error("Unhandled exception in background task", exc_info=exc)
