"""Pattern vocabulary: wildcard, predicate, literal and structural patterns.

Patterns are an explicit tagged union of frozen structs. Raw Python values
handed to ``Matcher.with_`` are turned into patterns by ``to_pattern``:

    >>> to_pattern(200)
    PLiteral(value=200)
    >>> to_pattern({'global': True, 'city': P._})
    PStructural(fields={'global': PLiteral(value=True), 'city': PWildcard()})

Predicates are never inferred from bare callables; wrap them with ``P.fn``
so they cannot be confused with data.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any, Final

import msgspec

from klaw_match._types import is_scalar
from klaw_match.errors import UnsupportedPatternError

__all__ = [
    'P',
    'PLiteral',
    'PPredicate',
    'PStructural',
    'PWildcard',
    'Pattern',
    'to_pattern',
]


class Pattern(msgspec.Struct, frozen=True, tag=True):
    """Base class of all patterns.

    Subclasses outside this module are accepted by ``to_pattern`` but the
    matcher only evaluates the kinds defined here; anything else raises
    UnsupportedPatternError when evaluated.
    """


class PWildcard(Pattern, frozen=True, tag=True):
    """Matches any value and binds nothing."""


class PPredicate[T](Pattern, frozen=True, tag=True):
    """Matches when ``test(value)`` is truthy.

    Attributes:
        test: A pure function deciding whether the value matches.
    """

    test: Callable[[T], bool]

    def __call__(self, value: T) -> bool:
        return bool(self.test(value))


class PLiteral[T](Pattern, frozen=True, tag=True):
    """Matches a value equal to ``value``."""

    value: T


class PStructural(Pattern, frozen=True, tag=True):
    """Matches a record whose declared fields all match their sub-patterns.

    Fields not named in the pattern are ignored.

    Attributes:
        fields: Field name to sub-pattern.
    """

    fields: dict[str, Pattern]


WILDCARD: Final = PWildcard()


def to_pattern(raw: Any, enclosing: Any = None) -> Pattern:
    """Turn a raw value into a Pattern.

    Args:
        raw: A Pattern, a mapping of field patterns, or a scalar literal.
        enclosing: The pattern containing ``raw``, for diagnostics.

    Returns:
        The corresponding Pattern.

    Raises:
        UnsupportedPatternError: If ``raw`` is none of the accepted kinds.
    """
    if isinstance(raw, Pattern):
        return raw
    if isinstance(raw, Mapping):
        return PStructural({key: to_pattern(sub, raw) for key, sub in raw.items()})
    if is_scalar(raw):
        return PLiteral(raw)
    raise UnsupportedPatternError(raw, enclosing)


class P:
    """Pattern builders.

    Examples:
        >>> P._
        PWildcard()
        >>> P.fn(lambda x: x > 0)(3)
        True
        >>> P.struct(id=P._, state='delivered')
        PStructural(fields={'id': PWildcard(), 'state': PLiteral(value='delivered')})
    """

    _: Final = WILDCARD

    @staticmethod
    def fn[T](test: Callable[[T], bool]) -> PPredicate[T]:
        """Return a pattern that matches when ``test(value)`` is truthy."""
        return PPredicate(test)

    @staticmethod
    def lit[T](value: T) -> PLiteral[T]:
        """Return a pattern that matches values equal to ``value``.

        Unlike implicit literals, any value is accepted here, e.g.
        ``P.lit((1, 2))``.
        """
        return PLiteral(value)

    @staticmethod
    def struct(fields: Mapping[str, Any] | None = None, /, **kwargs: Any) -> PStructural:
        """Return a structural pattern from a mapping and/or keyword fields."""
        merged = {**(fields or {}), **kwargs}
        return PStructural({key: to_pattern(sub, merged) for key, sub in merged.items()})
