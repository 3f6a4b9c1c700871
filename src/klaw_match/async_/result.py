"""AsyncResult type: a Result that settles asynchronously, exactly once.

An AsyncResult is built from a settlement callback, the same way a future
is completed by its producer:

    ```python
    def executor(succeed, fail):
        client.get(url, on_done=succeed, on_error=fail)

    response = await AsyncResult(executor)   # Ok(...) or Err(...)
    ```

The executor may also be an ``async def``. It starts as a task right away
when an asyncio loop is running, otherwise on first observation, and it
runs to completion even if the observer that started it is cancelled.
Either way the settled Result is stored once and every
``await`` (and every derived AsyncResult) sees that same Result, so the
producing computation is never run twice.

Example:
    ```python
    async def fetch_user(id: int) -> User: ...

    async def main():
        user = await to_async_result(fetch_user(1)).map(lambda u: u.name)
        match user:
            case Ok(value=name): print(name)
            case Err(error=exc): print(f'lookup failed: {exc}')
    ```
"""

from __future__ import annotations

import asyncio
import inspect
from collections.abc import Awaitable, Callable, Coroutine, Generator
from typing import Any

import aiologic
import anyio

from klaw_match._config import active_config
from klaw_match._internal.sync import WriteOnce
from klaw_match._logging import get_logger
from klaw_match.result import Err, Ok, Result

__all__ = ['AsyncResult', 'to_async_result']

logger = get_logger(__name__)

type Executor[T, E] = Callable[[Callable[[T], bool], Callable[[E], bool]], Any]


class AsyncResult[T, E]:
    """Async-aware, single-resolution Result.

    Attributes:
        _cell: Write-once cell holding the settled Result.
        _driver: Awaitable returned by an async executor, not yet started.
        _driver_lock: Hands the driver to exactly one runner.
        _task: The asyncio task running the driver, kept alive until done.
    """

    __slots__ = ('_cell', '_driver', '_driver_lock', '_task')

    def __init__(self, executor: Executor[T, E]) -> None:
        """Create an AsyncResult from a settlement callback.

        Args:
            executor: Called immediately with ``(succeed, fail)``. ``succeed(v)``
                settles ``Ok(v)``, ``fail(e)`` settles ``Err(e)``; the first
                call wins. If the executor raises before settling, the
                AsyncResult settles as ``Err(exception)``.
        """
        self._cell: WriteOnce[Result[T, E]] = WriteOnce()
        self._driver: Awaitable[Any] | None = None
        self._driver_lock = aiologic.Lock()
        self._task: asyncio.Task[None] | None = None
        try:
            outcome = executor(self._succeed, self._fail)
        except Exception as exc:
            self._fail(exc)  # type: ignore[arg-type]
        else:
            if inspect.isawaitable(outcome):
                self._driver = outcome
                self._start_driver()

    def _settle(self, result: Result[T, E]) -> bool:
        stored = self._cell.set(result)
        if stored and active_config().trace:
            logger.debug('async result settled', result=repr(result))
        return stored

    def _succeed(self, value: T) -> bool:
        return self._settle(Ok(value))

    def _fail(self, error: E) -> bool:
        return self._settle(Err(error))

    def _take_driver(self) -> Awaitable[Any] | None:
        with self._driver_lock:
            driver, self._driver = self._driver, None
        return driver

    def _start_driver(self) -> bool:
        """Run the driver as a task on the running asyncio loop.

        Returns:
            False when no asyncio loop is running in this thread.
        """
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            return False
        driver = self._take_driver()
        if driver is not None:
            self._task = loop.create_task(self._run(driver))
        return True

    async def _run(self, driver: Awaitable[Any]) -> None:
        """Await the async executor, turning its exceptions into Err."""
        try:
            await driver
        except Exception as exc:
            self._fail(exc)  # type: ignore[arg-type]

    async def _observe(self) -> Result[T, E]:
        if not self._cell.is_set() and self._driver is not None and not self._start_driver():
            # No asyncio loop (trio): the producer runs here, shielded from this observer.
            driver = self._take_driver()
            if driver is not None:
                with anyio.CancelScope(shield=True):
                    await self._run(driver)
        return await self._cell

    def __await__(self) -> Generator[Any, Any, Result[T, E]]:
        """Support await syntax to get the settled Result.

        Awaiting again returns the same Result object.
        """
        return self._observe().__await__()

    @classmethod
    def from_ok(cls, value: T) -> AsyncResult[T, E]:
        """Create an AsyncResult already settled as Ok(value)."""
        return cls(lambda succeed, _fail: succeed(value))

    @classmethod
    def from_err(cls, error: E) -> AsyncResult[T, E]:
        """Create an AsyncResult already settled as Err(error)."""
        return cls(lambda _succeed, fail: fail(error))

    @classmethod
    def from_result(cls, result: Result[T, E]) -> AsyncResult[T, E]:
        """Create an AsyncResult already settled with a synchronous Result."""

        def executor(succeed: Callable[[T], bool], fail: Callable[[E], bool]) -> None:
            if isinstance(result, Ok):
                succeed(result.value)
            else:
                fail(result.error)

        return cls(executor)

    @classmethod
    def from_awaitable(cls, awaitable: Awaitable[T]) -> AsyncResult[T, Exception]:
        """Convert an awaitable into an AsyncResult.

        The awaitable's value settles ``Ok(value)``; an Exception it raises
        settles ``Err(exception)``. You should narrow the error type
        yourself when annotating, e.g. ``AsyncResult[int, ValueError]``.

        Args:
            awaitable: A coroutine, Task or Future. Awaited at most once.

        Returns:
            AsyncResult settling with the awaitable's outcome.
        """

        async def executor(succeed: Callable[[T], bool], fail: Callable[[Exception], bool]) -> None:
            try:
                value = await awaitable
            except Exception as exc:
                fail(exc)
            else:
                succeed(value)

        return AsyncResult(executor)

    def is_settled(self) -> bool:
        """Check if the AsyncResult has settled."""
        return self._cell.is_set()

    def result(self) -> Result[T, E]:
        """Get the settled Result without waiting.

        Raises:
            NotSettledError: If the AsyncResult has not settled yet.
        """
        return self._cell.get()

    def map[U](self, f: Callable[[T], U]) -> AsyncResult[U, E]:
        """Apply a sync function to the Ok value once settled.

        Args:
            f: Function to apply to the Ok value.

        Returns:
            New AsyncResult with the transformed value; an Err passes through.

        Example:
            ```python
            async def example():
                result = await AsyncResult.from_ok(5).map(lambda x: x * 2)
                assert result == Ok(10)
            ```
        """

        async def executor(succeed: Callable[[U], bool], fail: Callable[[E], bool]) -> None:
            match await self:
                case Ok(value=value):
                    succeed(f(value))
                case Err(error=error):
                    fail(error)

        return AsyncResult(executor)

    def map_err[F](self, f: Callable[[E], F]) -> AsyncResult[T, F]:
        """Apply a sync function to the Err value once settled.

        Args:
            f: Function to apply to the error.

        Returns:
            New AsyncResult with the transformed error; an Ok passes through.
        """

        async def executor(succeed: Callable[[T], bool], fail: Callable[[F], bool]) -> None:
            match await self:
                case Ok(value=value):
                    succeed(value)
                case Err(error=error):
                    fail(f(error))

        return AsyncResult(executor)

    def and_then[U](self, f: Callable[[T], Result[U, E]]) -> AsyncResult[U, E]:
        """Chain a sync function returning a Result onto the Ok value.

        Args:
            f: Function that takes T and returns Result[U, E].

        Returns:
            New AsyncResult settling with f's Result, or the original Err.
        """

        async def executor(succeed: Callable[[U], bool], fail: Callable[[E], bool]) -> None:
            match await self:
                case Ok(value=value):
                    chained = f(value)
                    if isinstance(chained, Ok):
                        succeed(chained.value)
                    else:
                        fail(chained.error)
                case Err(error=error):
                    fail(error)

        return AsyncResult(executor)

    def or_else[F](self, f: Callable[[E], Result[T, F]]) -> AsyncResult[T, F]:
        """Recover from an Err with a sync function returning a Result.

        Args:
            f: Function that takes E and returns Result[T, F].

        Returns:
            New AsyncResult settling with f's Result, or the original Ok.
        """

        async def executor(succeed: Callable[[T], bool], fail: Callable[[F], bool]) -> None:
            match await self:
                case Ok(value=value):
                    succeed(value)
                case Err(error=error):
                    recovered = f(error)
                    if isinstance(recovered, Ok):
                        succeed(recovered.value)
                    else:
                        fail(recovered.error)

        return AsyncResult(executor)

    def unwrap_or(self, default: T) -> Coroutine[Any, Any, T]:
        """Unwrap with a default value.

        Returns:
            Coroutine that produces the Ok value or the default.
        """

        async def _unwrap() -> T:
            return (await self).unwrap_or(default)

        return _unwrap()

    def zip[U](self, other: AsyncResult[U, E]) -> AsyncResult[tuple[T, U], E]:
        """Combine two AsyncResults into a tuple.

        Observes both concurrently. If both are Ok, settles
        Ok((self.value, other.value)). If either is Err, settles with the
        first Err by position: self first, then other.

        Args:
            other: Another AsyncResult to combine with.

        Returns:
            AsyncResult containing the tuple or first error.
        """

        async def executor(succeed: Callable[[tuple[T, U]], bool], fail: Callable[[E], bool]) -> None:
            results: dict[str, Result[Any, E]] = {}

            async def observe(key: str, source: AsyncResult[Any, E]) -> None:
                results[key] = await source

            async with anyio.create_task_group() as tg:
                tg.start_soon(observe, 'self', self)
                tg.start_soon(observe, 'other', other)

            first, second = results['self'], results['other']
            if isinstance(first, Err):
                fail(first.error)
            elif isinstance(second, Err):
                fail(second.error)
            else:
                succeed((first.value, second.value))

        return AsyncResult(executor)

    def __repr__(self) -> str:
        if self._cell.is_set():
            return f'AsyncResult({self._cell.get()!r})'
        return 'AsyncResult(<pending>)'


def to_async_result[T](awaitable: Awaitable[T]) -> AsyncResult[T, Exception]:
    """Convert any awaitable into an AsyncResult.

    Free-function form of ``AsyncResult.from_awaitable``: call it wherever a
    coroutine, Task or Future should be observed as a Result.

    Example:
        ```python
        async def main():
            result = await to_async_result(asyncio.sleep(0, result=42))
            assert result == Ok(42)
        ```
    """
    return AsyncResult.from_awaitable(awaitable)
