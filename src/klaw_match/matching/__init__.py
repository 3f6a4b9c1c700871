"""Pattern matching: the ``match`` entry point, matchers and patterns.

``match(subject)`` picks a matcher from the subject's runtime type:

- ``Some`` / ``Nothing`` -> OptionMatcher (``.some`` / ``.none``)
- ``Ok`` / ``Err`` -> ResultMatcher (``.ok`` / ``.err``)
- anything else -> Matcher (``.with_`` / ``.otherwise`` / ``.exhaust``)

Examples:
    >>> match('message').with_(200, lambda _: 'ok').with_('message', lambda _: 'recv').exhaust()
    'recv'
    >>> match(Some(1)).some(lambda x: x + 1).none(lambda: 0)
    2
"""

from __future__ import annotations

from typing import Any, overload

from klaw_match.matching.matcher import Matcher
from klaw_match.matching.option import OptionMatcher
from klaw_match.matching.pattern import (
    P,
    PLiteral,
    PPredicate,
    PStructural,
    PWildcard,
    Pattern,
    to_pattern,
)
from klaw_match.matching.result import ResultMatcher
from klaw_match.option import NothingType, Some
from klaw_match.result import Err, Ok

__all__ = [
    'Matcher',
    'OptionMatcher',
    'P',
    'PLiteral',
    'PPredicate',
    'PStructural',
    'PWildcard',
    'Pattern',
    'ResultMatcher',
    'match',
    'to_pattern',
]


@overload
def match[T](subject: Some[T] | NothingType) -> OptionMatcher[T]: ...


@overload
def match[T, E](subject: Ok[T] | Err[E]) -> ResultMatcher[T, E]: ...


@overload
def match[T](subject: T) -> Matcher[T, Any]: ...


def match(subject: Any) -> Any:
    """Create the matcher suited to ``subject``.

    Args:
        subject: The value to match.

    Returns:
        An OptionMatcher, a ResultMatcher or a generic Matcher.
    """
    if isinstance(subject, Some | NothingType):
        return OptionMatcher(subject)
    if isinstance(subject, Ok | Err):
        return ResultMatcher(subject)
    return Matcher(subject)
