"""OptionMatcher: two-branch matching over Some / Nothing."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, overload

from klaw_match.option import NothingType, Some

__all__ = ['OptionMatcher', 'Pending']


class Pending:
    """Type-level marker for a branch that has no handler yet."""


class OptionMatcher[T, S = Pending, N = Pending]:
    """Collects a ``some`` and a ``none`` handler, then evaluates.

    The two branches may be registered in either order. Until both are
    present each call returns a new OptionMatcher; registering the same
    branch twice keeps the last handler. The call that completes the pair
    returns the handler output directly.

    ``S`` and ``N`` track the output types of the registered handlers, so a
    type checker sees ``match(opt).some(f).none(g)`` as ``S | N``.

    Example:
        ```python
        match(Some(1)).some(lambda x: x + 1).none(lambda: 'no value')  # 2
        match(Nothing).none(lambda: 'no value').some(lambda x: x + 1)  # 'no value'
        ```
    """

    __slots__ = ('_none', '_some', '_subject')

    def __init__(
        self,
        subject: Some[T] | NothingType,
        _some: Callable[[T], Any] | None = None,
        _none: Callable[[], Any] | None = None,
    ) -> None:
        self._subject = subject
        self._some = _some
        self._none = _none

    def _settle(self, some: Callable[[T], Any] | None, none: Callable[[], Any] | None) -> Any:
        if some is None or none is None:
            return OptionMatcher(self._subject, some, none)
        return self._subject.map_or_else(none, some)

    @overload
    def some[R](self: OptionMatcher[T, Any, Pending], handler: Callable[[T], R]) -> OptionMatcher[T, R, Pending]: ...
    @overload
    def some[R, M](self: OptionMatcher[T, Any, M], handler: Callable[[T], R]) -> R | M: ...  # type: ignore[overload-overlap]
    def some(self, handler: Callable[[T], Any]) -> Any:
        """Register the handler for Some; it receives the contained value."""
        return self._settle(handler, self._none)

    @overload
    def none[R](self: OptionMatcher[T, Pending, Any], handler: Callable[[], R]) -> OptionMatcher[T, Pending, R]: ...
    @overload
    def none[R, M](self: OptionMatcher[T, M, Any], handler: Callable[[], R]) -> M | R: ...  # type: ignore[overload-overlap]
    def none(self, handler: Callable[[], Any]) -> Any:
        """Register the handler for Nothing; it takes no arguments."""
        return self._settle(self._some, handler)

    def __repr__(self) -> str:
        pending = [name for name, h in (('some', self._some), ('none', self._none)) if h is not None]
        return f'OptionMatcher({self._subject!r}, registered={pending})'
