"""Tests for the dual struct/exception error types."""

import msgspec
import pytest

from klaw_match import (
    Err,
    ExpectationFailed,
    ExpectationFailedError,
    KlawMatchError,
    NoPatternMatched,
    NoPatternMatchedError,
    NotSettled,
    NotSettledError,
    UnsupportedPattern,
    UnsupportedPatternError,
    ValueAbsent,
    ValueAbsentError,
    ValueNotFailure,
    ValueNotFailureError,
    ValueNotSuccess,
    ValueNotSuccessError,
)


class TestErrorHierarchy:
    """All exceptions share one base class."""

    @pytest.mark.parametrize(
        'exc',
        [
            ValueAbsentError(),
            ValueNotSuccessError(),
            ValueNotFailureError(),
            ExpectationFailedError('msg'),
            NoPatternMatchedError(1),
            UnsupportedPatternError(object()),
            NotSettledError(),
        ],
    )
    def test_base_class(self, exc):
        """Every exception is a KlawMatchError and a RuntimeError."""
        assert isinstance(exc, KlawMatchError)
        assert isinstance(exc, RuntimeError)


class TestErrorMessages:
    """Exception messages are stable."""

    def test_no_pattern_matched_message(self):
        """The subject appears in the message and on the exception."""
        exc = NoPatternMatchedError({'a': 1})
        assert str(exc) == "MatchError: no pattern matched {'a': 1}"
        assert exc.subject == {'a': 1}

    def test_unsupported_pattern_top_level(self):
        """A top-level offender has no enclosing pattern."""
        exc = UnsupportedPatternError([1, 2])
        assert str(exc) == 'Unsupported pattern: [1, 2]'
        assert exc.enclosing is None

    def test_unsupported_pattern_nested(self):
        """A nested offender names its enclosing pattern."""
        exc = UnsupportedPatternError([1], {'a': [1]})
        assert str(exc) == "Unsupported pattern: [1] at pattern {'a': [1]}"

    def test_not_settled_default_message(self):
        """NotSettledError explains how to fix the misuse."""
        assert str(NotSettledError()) == 'AsyncResult not yet settled. Await it first.'
        assert str(NotSettledError('custom')) == 'custom'


class TestErrorConversion:
    """to_exception and to_struct convert between the two shapes."""

    @pytest.mark.parametrize(
        ('struct', 'exc_type'),
        [
            (ValueAbsent(), ValueAbsentError),
            (ValueNotSuccess(), ValueNotSuccessError),
            (ValueNotFailure(), ValueNotFailureError),
            (ExpectationFailed('boom'), ExpectationFailedError),
            (NoPatternMatched('42'), NoPatternMatchedError),
            (UnsupportedPattern('[1]', None), UnsupportedPatternError),
            (NotSettled(), NotSettledError),
        ],
    )
    def test_struct_to_exception(self, struct, exc_type):
        """Each struct builds its paired exception."""
        assert isinstance(struct.to_exception(), exc_type)

    def test_expectation_round_trip(self):
        """The message survives the round trip."""
        assert ExpectationFailedError('boom').to_struct() == ExpectationFailed('boom')
        assert ExpectationFailed('boom').to_exception().message == 'boom'

    def test_no_pattern_matched_struct_holds_repr(self):
        """The struct variant stores the subject's repr."""
        assert NoPatternMatchedError('x').to_struct() == NoPatternMatched("'x'")

    def test_unsupported_pattern_struct(self):
        """Both pattern and enclosing are stored as reprs."""
        struct = UnsupportedPatternError([1], {'a': [1]}).to_struct()
        assert struct == UnsupportedPattern('[1]', "{'a': [1]}")

    def test_struct_as_err_payload(self):
        """Struct variants travel in Err and encode with msgspec."""
        err = Err(ExpectationFailed('boom'))
        assert msgspec.json.encode(err.error) == b'{"message":"boom"}'

    def test_structs_are_frozen(self):
        """Struct variants are immutable."""
        struct = ExpectationFailed('boom')
        with pytest.raises(AttributeError):
            struct.message = 'other'  # type: ignore[misc]
