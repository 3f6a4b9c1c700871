"""Generic matcher: first-match-wins evaluation of patterns against a subject.

A Matcher is either open (no branch matched yet) or closed (a branch
matched and its handler output is stored). Each ``with_``/``otherwise``
call returns a new Matcher; once closed, later branches are neither
evaluated nor run, so at most one handler is ever called.

Example:
    ```python
    from klaw_match import P, match

    def abs_(x: int) -> int:
        return (
            match(x)
            .with_(0, lambda _: 0)
            .with_(P.fn(lambda v: v > 0), lambda v: v)
            .otherwise(lambda v: -v)
            .exhaust()
        )
    ```
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from klaw_match._config import active_config
from klaw_match._logging import get_logger
from klaw_match._types import MISSING, is_record, read_field, scalar_equals
from klaw_match.errors import NoPatternMatchedError, UnsupportedPatternError
from klaw_match.matching.pattern import (
    Pattern,
    PLiteral,
    PPredicate,
    PStructural,
    PWildcard,
    to_pattern,
)
from klaw_match.option import Nothing, NothingType, Some

__all__ = ['Matcher']

logger = get_logger(__name__)


def _test(pattern: Pattern, value: Any, enclosing: Pattern | None) -> bool:
    """Return whether ``value`` matches ``pattern``.

    Raises:
        UnsupportedPatternError: For pattern kinds the matcher cannot evaluate.
    """
    match pattern:
        case PWildcard():
            return True
        case PPredicate():
            return value is not MISSING and pattern(value)
        case PStructural(fields=fields):
            if not is_record(value):
                return False
            return all(_test(sub, read_field(value, key), pattern) for key, sub in fields.items())
        case PLiteral(value=expected):
            return scalar_equals(value, expected)
        case _:
            raise UnsupportedPatternError(pattern, enclosing)


class Matcher[T, R]:
    """Matches a subject against an ordered sequence of patterns.

    Attributes:
        _subject: The value being matched. Never copied or mutated.
        _result: Nothing while open, Some(handler output) once closed.
    """

    __slots__ = ('_result', '_subject')

    def __init__(self, subject: T, _result: Some[R] | NothingType = Nothing) -> None:
        self._subject = subject
        self._result = _result

    def _close(self, handler: Callable[[T], R]) -> Matcher[T, R]:
        return Matcher(self._subject, Some(handler(self._subject)))

    def _keep(self) -> Matcher[T, R]:
        return Matcher(self._subject, self._result)

    @property
    def subject(self) -> T:
        """The value being matched."""
        return self._subject

    def is_matched(self) -> bool:
        """Return True once a branch has matched."""
        return self._result.is_some()

    def with_[U](self, pattern: Any, handler: Callable[[T], U]) -> Matcher[T, R | U]:
        """Branch on a pattern.

        Args:
            pattern: A Pattern, or a raw scalar / mapping turned into one
                with ``to_pattern``.
            handler: Called with the subject if this is the first branch
                to match.

        Returns:
            A new matcher, closed if this branch matched.

        Raises:
            UnsupportedPatternError: If the pattern, or one of its fields,
                is not a supported kind.
        """
        if self._result.is_some():
            return self._keep()  # type: ignore[return-value]

        compiled = to_pattern(pattern)
        matched = _test(compiled, self._subject, None)
        if active_config().trace:
            logger.debug(
                'pattern evaluated',
                pattern_kind=type(compiled).__name__,
                pattern=repr(compiled),
                subject=repr(self._subject),
                matched=matched,
            )
        if matched:
            return self._close(handler)  # type: ignore[return-value, arg-type]
        return self._keep()  # type: ignore[return-value]

    def otherwise[U](self, handler: Callable[[T], U]) -> Matcher[T, R | U]:
        """Add a fallback branch that matches anything.

        Register it after every specific branch.

        Args:
            handler: Called with the subject if no earlier branch matched.

        Returns:
            A new matcher, always closed.
        """
        if self._result.is_some():
            return self._keep()  # type: ignore[return-value]
        if active_config().trace:
            logger.debug('fallback taken', subject=repr(self._subject))
        return self._close(handler)  # type: ignore[return-value, arg-type]

    def assert_exhaust(self) -> R:
        """Return the match result, asserting some branch matched.

        When using ``assert_exhaust`` you vouch for exhaustiveness yourself.

        Raises:
            NoPatternMatchedError: If no branch matched.
        """
        if isinstance(self._result, Some):
            return self._result.value
        raise NoPatternMatchedError(self._subject)

    def exhaust(self) -> R:
        """Return the match result.

        Same runtime behavior as ``assert_exhaust``; use it where every
        case is known to be covered (e.g. after ``otherwise``).

        Raises:
            NoPatternMatchedError: If no branch matched.
        """
        return self.assert_exhaust()

    def then[U](self, f: Callable[[R], U]) -> U:
        """Return ``f`` applied to the match result.

        Raises:
            NoPatternMatchedError: If no branch matched.
        """
        return f(self.exhaust())

    def __repr__(self) -> str:
        state = 'closed' if self._result.is_some() else 'open'
        return f'Matcher({self._subject!r}, {state})'
