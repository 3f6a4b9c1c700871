"""Tests for curry."""

import operator

from hypothesis import given

from klaw_match import P, curry, match
from strategies import integers


def add3(a, b, c):
    """Add three numbers."""
    return a + b + c


class TestCurry:
    """Tests for positional currying."""

    def test_one_at_a_time(self):
        """Arguments can be supplied one call at a time."""
        assert curry(add3)(1)(2)(3) == 6

    def test_grouped_arguments(self):
        """Arguments can be grouped freely across calls."""
        curried = curry(add3)
        assert curried(1, 2)(3) == 6
        assert curried(1)(2, 3) == 6
        assert curried(1, 2, 3) == 6

    def test_partials_are_reusable(self):
        """A partial application can be called many times."""
        add_one = curry(add3)(0, 1)
        assert [add_one(x) for x in range(3)] == [1, 2, 3]

    def test_defaults_not_counted(self):
        """Parameters with defaults do not delay the call."""

        def scale(x, factor=2):
            return x * factor

        assert curry(scale)(5) == 10

    def test_extra_arguments_pass_through(self):
        """Surplus arguments in the completing call reach the function."""

        def total(*args):
            return sum(args)

        def first_plus(a, *rest):
            return a + len(rest)

        assert curry(total)(1, 2, 3) == 6
        assert curry(first_plus)(1, 'x', 'y') == 3

    def test_metadata_preserved(self):
        """The curried function keeps the wrapped name and docstring."""
        curried = curry(add3)
        assert curried.__name__ == 'add3'
        assert curried.__doc__ == 'Add three numbers.'

    def test_builtin_as_predicate(self):
        """Curried builtins compose with P.fn."""
        is_positive = curry(operator.lt)(0)
        assert match(5).with_(P.fn(is_positive), lambda x: 'positive').otherwise(lambda _: 'other').exhaust() == (
            'positive'
        )

    @given(integers, integers, integers)
    def test_equivalent_to_direct_call(self, a, b, c):
        """Currying never changes the result."""
        assert curry(add3)(a)(b)(c) == add3(a, b, c)
