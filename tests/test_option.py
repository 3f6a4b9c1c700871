"""Tests for Option type (Some and Nothing)."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from klaw_match import (
    Err,
    ExpectationFailedError,
    Nothing,
    NothingType,
    Ok,
    Some,
    ValueAbsentError,
)
from strategies import integers, options


class TestOptionCreation:
    """Tests for Some and Nothing instantiation."""

    def test_some_wraps_value(self):
        """Some wraps a value."""
        assert Some(42).value == 42

    def test_some_with_none(self):
        """Some can wrap None, distinct from Nothing."""
        some = Some(None)
        assert some.value is None
        assert some != Nothing

    def test_some_is_frozen(self):
        """Some instances are immutable."""
        some = Some(42)
        with pytest.raises(AttributeError):
            some.value = 100  # type: ignore[misc]

    def test_nothing_is_singleton_instance(self):
        """Nothing is the NothingType instance and renders as Nothing."""
        assert isinstance(Nothing, NothingType)
        assert repr(Nothing) == 'Nothing'
        assert NothingType() == Nothing

    def test_equality(self):
        """Options compare by variant and value."""
        assert Some(1) == Some(1)
        assert Some(1) != Some(2)
        assert Some(1) != Ok(1)


class TestOptionQueries:
    """Tests for is_some, is_none, is_some_and."""

    def test_some_queries(self, sample_some):
        """Some reports presence."""
        assert sample_some.is_some()
        assert not sample_some.is_none()

    def test_nothing_queries(self, sample_nothing):
        """Nothing reports absence."""
        assert not sample_nothing.is_some()
        assert sample_nothing.is_none()

    def test_is_some_and(self):
        """is_some_and applies the predicate only to Some."""
        assert Some(2).is_some_and(lambda x: x > 1)
        assert not Some(0).is_some_and(lambda x: x > 1)
        assert not Nothing.is_some_and(lambda x: True)


class TestOptionExtraction:
    """Tests for unwrap, unwrap_or, unwrap_or_else and expect."""

    def test_unwrap_some(self):
        """unwrap returns the value of Some."""
        assert Some(5).unwrap() == 5

    def test_unwrap_nothing_raises(self):
        """unwrap on Nothing raises ValueAbsentError."""
        with pytest.raises(ValueAbsentError, match='called unwrap\\(\\) on Nothing'):
            Nothing.unwrap()

    def test_unwrap_or(self):
        """unwrap_or returns the default only for Nothing."""
        assert Some(1).unwrap_or(9) == 1
        assert Nothing.unwrap_or(9) == 9

    def test_unwrap_or_else_is_lazy(self):
        """unwrap_or_else does not call the fallback for Some."""
        calls = []

        def fallback():
            calls.append(1)
            return 0

        assert Some(1).unwrap_or_else(fallback) == 1
        assert calls == []
        assert Nothing.unwrap_or_else(fallback) == 0
        assert calls == [1]

    def test_expect_nothing_raises_with_message(self):
        """expect raises with exactly the caller's message."""
        with pytest.raises(ExpectationFailedError) as exc_info:
            Nothing.expect('config must be loaded')
        assert str(exc_info.value) == 'config must be loaded'
        assert exc_info.value.message == 'config must be loaded'

    def test_expect_some(self):
        """expect returns the value of Some."""
        assert Some('x').expect('unused') == 'x'


class TestOptionTransformation:
    """Tests for map, map_or, map_or_else, filter and inspect."""

    def test_map(self):
        """map transforms Some and leaves Nothing alone."""
        assert Some(2).map(lambda x: x * 2) == Some(4)
        assert Nothing.map(lambda x: x * 2) is Nothing

    def test_map_or(self):
        """map_or applies f or returns the default."""
        assert Some(2).map_or(0, lambda x: x + 1) == 3
        assert Nothing.map_or(0, lambda x: x + 1) == 0

    def test_map_or_else(self):
        """map_or_else calls the zero-argument default for Nothing."""
        assert Some(2).map_or_else(lambda: -1, str) == '2'
        assert Nothing.map_or_else(lambda: -1, str) == -1

    def test_filter(self):
        """filter keeps Some only when the predicate holds."""
        assert Some(4).filter(lambda x: x % 2 == 0) == Some(4)
        assert Some(3).filter(lambda x: x % 2 == 0) is Nothing

    def test_filter_never_calls_predicate_on_nothing(self):
        """filter on Nothing does not invoke the predicate."""

        def boom(_):
            raise AssertionError('predicate called')

        assert Nothing.filter(boom) is Nothing

    def test_inspect(self):
        """inspect sees the value and returns the option unchanged."""
        seen = []
        some = Some(7)
        assert some.inspect(seen.append) is some
        assert Nothing.inspect(seen.append) is Nothing
        assert seen == [7]


class TestOptionCombinators:
    """Tests for and_, or_, xor, and_then, or_else, zip and flatten."""

    def test_and(self):
        """and_ returns other when self is Some."""
        assert Some(1).and_(Some('a')) == Some('a')
        assert Some(1).and_(Nothing) is Nothing
        assert Nothing.and_(Some('a')) is Nothing

    def test_or(self):
        """or_ returns self when Some, else other."""
        assert Some(1).or_(Some(2)) == Some(1)
        assert Nothing.or_(Some(2)) == Some(2)
        assert Nothing.or_(Nothing) is Nothing

    def test_xor(self):
        """xor returns the Some when exactly one side is Some."""
        assert Some(1).xor(Nothing) == Some(1)
        assert Nothing.xor(Some(2)) == Some(2)
        assert Some(1).xor(Some(2)) is Nothing
        assert Nothing.xor(Nothing) is Nothing

    def test_and_then(self):
        """and_then chains Option-returning functions."""

        def half(x):
            return Some(x // 2) if x % 2 == 0 else Nothing

        assert Some(8).and_then(half).and_then(half) == Some(2)
        assert Some(3).and_then(half) is Nothing
        assert Nothing.and_then(half) is Nothing

    def test_or_else(self):
        """or_else computes an alternative only for Nothing."""
        assert Some(1).or_else(lambda: Some(2)) == Some(1)
        assert Nothing.or_else(lambda: Some(2)) == Some(2)

    def test_zip(self):
        """zip pairs two Somes."""
        assert Some(1).zip(Some('a')) == Some((1, 'a'))
        assert Some(1).zip(Nothing) is Nothing
        assert Nothing.zip(Some('a')) is Nothing

    def test_flatten(self):
        """flatten removes one level of nesting."""
        assert Some(Some(1)).flatten() == Some(1)
        assert Some(Nothing).flatten() is Nothing
        assert Nothing.flatten() is Nothing


class TestOptionConversion:
    """Tests for ok_or and ok_or_else."""

    def test_ok_or(self):
        """ok_or maps Some to Ok and Nothing to Err."""
        assert Some(1).ok_or('missing') == Ok(1)
        assert Nothing.ok_or('missing') == Err('missing')

    def test_ok_or_else(self):
        """ok_or_else builds the error lazily."""
        assert Some(1).ok_or_else(lambda: 'missing') == Ok(1)
        assert Nothing.ok_or_else(lambda: 'missing') == Err('missing')


class TestOptionPatternMatching:
    """Option variants work with Python's match statement."""

    @pytest.mark.parametrize(('option', 'expected'), [(Some(3), 3), (Nothing, None)])
    def test_match_statement(self, option, expected):
        """Some destructures, Nothing matches by type."""
        match option:
            case Some(value=v):
                got = v
            case NothingType():
                got = None
        assert got == expected


class TestOptionLaws:
    """Property-based checks of the functor and monad laws."""

    @given(options)
    def test_map_identity(self, option):
        """map(identity) is the identity."""
        assert option.map(lambda x: x) == option

    @given(options, integers, integers)
    def test_map_composition(self, option, a, b):
        """map(f).map(g) == map(g . f)."""

        def f(x):
            return x + a

        def g(x):
            return x * b

        assert option.map(f).map(g) == option.map(lambda x: g(f(x)))

    @given(integers)
    def test_left_identity(self, value):
        """Some(v).and_then(f) == f(v)."""

        def f(x):
            return Some(x + 1)

        assert Some(value).and_then(f) == f(value)

    @given(options)
    def test_right_identity(self, option):
        """option.and_then(Some) == option."""
        assert option.and_then(Some) == option

    @given(options, st.integers())
    def test_unwrap_or_agrees_with_is_some(self, option, default):
        """unwrap_or returns the default exactly when the option is Nothing."""
        if option.is_some():
            assert option.unwrap_or(default) == option.unwrap()
        else:
            assert option.unwrap_or(default) == default

    @given(options)
    def test_map_preserves_variant(self, option):
        """map never changes Some into Nothing or back."""
        assert option.map(str).is_none() == option.is_none()
