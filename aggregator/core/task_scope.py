"""
Task Scope
Fan-out/fan-in with first-failure-wins cancellation

A scope spawns one asyncio task per awaitable and joins them:
- All succeed: results come back in input order, whatever the completion order
- One fails: every unfinished sibling is cancelled and awaited, then the
  chronologically first failure is re-raised unchanged
- The awaiting task is cancelled: all children are cancelled and awaited,
  then CancelledError propagates

Scopes nest naturally: a child cancelled by its parent scope is suspended in
its own scope.run(), which then cancels its own children.
"""
import asyncio
import logging
from enum import Enum
from typing import Any, Coroutine, Iterable, List, Optional, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ScopeState(str, Enum):
    """
    Scope lifecycle

    PENDING -> RUNNING -> SUCCEEDED | FAILED | CANCELLED
    """
    PENDING = "pending"
    RUNNING = "running"
    SUCCEEDED = "succeeded"
    FAILED = "failed"
    CANCELLED = "cancelled"


class TaskScope:
    """Single-use cancellation scope"""

    def __init__(self, name: str = "scope"):
        self.name = name
        self.state = ScopeState.PENDING
        self._tasks: List[asyncio.Task] = []
        self._remaining = 0
        self._first_failure: Optional[BaseException] = None
        self._failed_task: Optional[str] = None
        self._wakeup: Optional[asyncio.Event] = None

    async def run(self, coros: Iterable[Coroutine[Any, Any, T]]) -> List[T]:
        """
        Run every coroutine concurrently and join them

        Returns:
            Results in the same order as coros

        Raises:
            The first exception raised by any child
            RuntimeError: The scope was already used
        """
        if self.state != ScopeState.PENDING:
            for coro in coros:
                coro.close()
            raise RuntimeError(f"TaskScope '{self.name}' already used (state={self.state.value})")

        coros = list(coros)
        self.state = ScopeState.RUNNING

        if not coros:
            self.state = ScopeState.SUCCEEDED
            return []

        self._wakeup = asyncio.Event()
        self._remaining = len(coros)
        for index, coro in enumerate(coros):
            task = asyncio.create_task(coro, name=f"{self.name}[{index}]")
            task.add_done_callback(self._on_task_done)
            self._tasks.append(task)

        logger.debug(f"[SCOPE] {self.name}: spawned {len(self._tasks)} tasks")

        try:
            await self._wakeup.wait()
        except asyncio.CancelledError:
            self.state = ScopeState.CANCELLED
            logger.debug(f"[SCOPE] {self.name}: cancelled by parent")
            await self._cancel_pending()
            raise

        if self._first_failure is not None:
            self.state = ScopeState.FAILED
            logger.debug(f"[SCOPE] {self.name}: {self._failed_task} failed first: {self._first_failure!r}")
            await self._cancel_pending()
            raise self._first_failure

        self.state = ScopeState.SUCCEEDED
        return [task.result() for task in self._tasks]

    def _on_task_done(self, task: asyncio.Task):
        # Done callbacks run in completion order, so the first failure seen here is the earliest one
        self._remaining -= 1
        exc = None if task.cancelled() else task.exception()
        if exc is not None and self._first_failure is None:
            self._first_failure = exc
            self._failed_task = task.get_name()
            self._wakeup.set()
        elif self._remaining == 0:
            self._wakeup.set()

    async def _cancel_pending(self):
        pending = [task for task in self._tasks if not task.done()]
        if not pending:
            return
        for task in pending:
            task.cancel()
        # Late failures and cancellations from siblings are discarded
        await asyncio.gather(*pending, return_exceptions=True)
        logger.debug(f"[SCOPE] {self.name}: {len(pending)} tasks cancelled")


async def gather_or_cancel(coros: Iterable[Coroutine[Any, Any, T]], name: str = "scope") -> List[T]:
    """Run coros in a fresh TaskScope"""
    return await TaskScope(name).run(coros)
