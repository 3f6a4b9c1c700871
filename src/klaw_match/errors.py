"""Error types: dual struct+exception for Result payloads and raise-based code.

Every failure the library can signal has two shapes:

- a frozen ``msgspec.Struct`` that can travel as an ``Err`` payload, and
- an exception raised by the unchecked extraction operations.

``to_exception()`` and ``to_struct()`` convert between the two.
"""

from __future__ import annotations

from typing import Any

import msgspec

__all__ = [
    'ExpectationFailed',
    'ExpectationFailedError',
    'KlawMatchError',
    'NoPatternMatched',
    'NoPatternMatchedError',
    'NotSettled',
    'NotSettledError',
    'UnsupportedPattern',
    'UnsupportedPatternError',
    'ValueAbsent',
    'ValueAbsentError',
    'ValueNotFailure',
    'ValueNotFailureError',
    'ValueNotSuccess',
    'ValueNotSuccessError',
]


class KlawMatchError(RuntimeError):
    """Base class for every exception raised by klaw-match."""


# --- Extraction Errors ---


class ValueAbsent(msgspec.Struct, frozen=True, gc=False):
    """Option was Nothing - struct variant for Result[T, ValueAbsent]."""

    def to_exception(self) -> ValueAbsentError:
        """Convert to exception for raise-based code."""
        return ValueAbsentError()


class ValueAbsentError(KlawMatchError):
    """Option was Nothing - exception variant."""

    def __init__(self) -> None:
        super().__init__('called unwrap() on Nothing')

    def to_struct(self) -> ValueAbsent:
        """Convert to struct for Result-based code."""
        return ValueAbsent()


class ValueNotSuccess(msgspec.Struct, frozen=True, gc=False):
    """Result was Err where Ok was required - struct variant."""

    def to_exception(self) -> ValueNotSuccessError:
        """Convert to exception for raise-based code."""
        return ValueNotSuccessError()


class ValueNotSuccessError(KlawMatchError):
    """Result was Err where Ok was required - exception variant."""

    def __init__(self) -> None:
        super().__init__('called unwrap() on an Err value')

    def to_struct(self) -> ValueNotSuccess:
        """Convert to struct for Result-based code."""
        return ValueNotSuccess()


class ValueNotFailure(msgspec.Struct, frozen=True, gc=False):
    """Result was Ok where Err was required - struct variant."""

    def to_exception(self) -> ValueNotFailureError:
        """Convert to exception for raise-based code."""
        return ValueNotFailureError()


class ValueNotFailureError(KlawMatchError):
    """Result was Ok where Err was required - exception variant."""

    def __init__(self) -> None:
        super().__init__('called unwrap_err() on an Ok value')

    def to_struct(self) -> ValueNotFailure:
        """Convert to struct for Result-based code."""
        return ValueNotFailure()


class ExpectationFailed(msgspec.Struct, frozen=True, gc=False):
    """expect()/expect_err() hit the wrong variant - struct variant."""

    message: str

    def to_exception(self) -> ExpectationFailedError:
        """Convert to exception for raise-based code."""
        return ExpectationFailedError(self.message)


class ExpectationFailedError(KlawMatchError):
    """expect()/expect_err() hit the wrong variant - exception variant.

    The exception message is exactly the caller-supplied message.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def to_struct(self) -> ExpectationFailed:
        """Convert to struct for Result-based code."""
        return ExpectationFailed(self.message)


# --- Matching Errors ---


class NoPatternMatched(msgspec.Struct, frozen=True, gc=False):
    """No branch matched the subject - struct variant."""

    subject: str

    def to_exception(self) -> NoPatternMatchedError:
        """Convert to exception for raise-based code."""
        return NoPatternMatchedError(self.subject)


class NoPatternMatchedError(KlawMatchError):
    """No branch matched the subject - exception variant.

    Attributes:
        subject: The value that was matched against. Holds the subject's
            repr when rebuilt from the struct variant.
    """

    def __init__(self, subject: Any) -> None:
        self.subject = subject
        super().__init__(f'MatchError: no pattern matched {subject!r}')

    def to_struct(self) -> NoPatternMatched:
        """Convert to struct for Result-based code."""
        return NoPatternMatched(repr(self.subject))


class UnsupportedPattern(msgspec.Struct, frozen=True, gc=False):
    """A pattern of unknown kind was used - struct variant."""

    pattern: str
    enclosing: str | None = None

    def to_exception(self) -> UnsupportedPatternError:
        """Convert to exception for raise-based code."""
        return UnsupportedPatternError(self.pattern, self.enclosing)


class UnsupportedPatternError(KlawMatchError):
    """A pattern of unknown kind was used - exception variant.

    Attributes:
        pattern: The offending (sub-)pattern.
        enclosing: The structural pattern that contains it, or None when the
            offending value was given at the top level.
    """

    def __init__(self, pattern: Any, enclosing: Any = None) -> None:
        self.pattern = pattern
        self.enclosing = enclosing
        msg = f'Unsupported pattern: {pattern!r}'
        if enclosing is not None:
            msg = f'{msg} at pattern {enclosing!r}'
        super().__init__(msg)

    def to_struct(self) -> UnsupportedPattern:
        """Convert to struct for Result-based code."""
        enclosing = None if self.enclosing is None else repr(self.enclosing)
        return UnsupportedPattern(repr(self.pattern), enclosing)


# --- Async Errors ---


class NotSettled(msgspec.Struct, frozen=True, gc=False):
    """AsyncResult read before it settled - struct variant."""

    def to_exception(self) -> NotSettledError:
        """Convert to exception for raise-based code."""
        return NotSettledError()


class NotSettledError(KlawMatchError):
    """AsyncResult read before it settled - exception variant."""

    def __init__(self, detail: str | None = None) -> None:
        self.detail = detail
        super().__init__(detail or 'AsyncResult not yet settled. Await it first.')

    def to_struct(self) -> NotSettled:
        """Convert to struct for Result-based code."""
        return NotSettled()
