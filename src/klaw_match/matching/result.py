"""ResultMatcher: two-branch matching over Ok / Err."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, overload

from klaw_match.matching.option import Pending
from klaw_match.result import Err, Ok

__all__ = ['ResultMatcher']


class ResultMatcher[T, E, O = Pending, X = Pending]:
    """Collects an ``ok`` and an ``err`` handler, then evaluates.

    Mirrors OptionMatcher: free registration order, last registration of a
    branch wins, and the call completing the pair returns the output of
    ``subject.map_or_else(err_handler, ok_handler)``, typed ``O | X``.

    Example:
        ```python
        match(Err('boom')).ok(lambda x: 2 * x).err(lambda e: f'Err: {e}')  # 'Err: boom'
        ```
    """

    __slots__ = ('_err', '_ok', '_subject')

    def __init__(
        self,
        subject: Ok[T] | Err[E],
        _ok: Callable[[T], Any] | None = None,
        _err: Callable[[E], Any] | None = None,
    ) -> None:
        self._subject = subject
        self._ok = _ok
        self._err = _err

    def _settle(self, ok: Callable[[T], Any] | None, err: Callable[[E], Any] | None) -> Any:
        if ok is None or err is None:
            return ResultMatcher(self._subject, ok, err)
        return self._subject.map_or_else(err, ok)

    @overload
    def ok[R](self: ResultMatcher[T, E, Any, Pending], handler: Callable[[T], R]) -> ResultMatcher[T, E, R, Pending]: ...
    @overload
    def ok[R, M](self: ResultMatcher[T, E, Any, M], handler: Callable[[T], R]) -> R | M: ...  # type: ignore[overload-overlap]
    def ok(self, handler: Callable[[T], Any]) -> Any:
        """Register the handler for Ok; it receives the value."""
        return self._settle(handler, self._err)

    @overload
    def err[R](self: ResultMatcher[T, E, Pending, Any], handler: Callable[[E], R]) -> ResultMatcher[T, E, Pending, R]: ...
    @overload
    def err[R, M](self: ResultMatcher[T, E, M, Any], handler: Callable[[E], R]) -> M | R: ...  # type: ignore[overload-overlap]
    def err(self, handler: Callable[[E], Any]) -> Any:
        """Register the handler for Err; it receives the error."""
        return self._settle(self._ok, handler)

    def __repr__(self) -> str:
        pending = [name for name, h in (('ok', self._ok), ('err', self._err)) if h is not None]
        return f'ResultMatcher({self._subject!r}, registered={pending})'
