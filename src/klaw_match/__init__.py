"""klaw-match: Option, Result, AsyncResult and structural pattern matching.

Flat imports (preferred):
    from klaw_match import Option, Some, Nothing, Result, Ok, Err
    from klaw_match import match, P, AsyncResult, to_async_result

Submodule imports (for organization):
    from klaw_match.matching import Matcher, OptionMatcher, ResultMatcher
    from klaw_match.async_ import AsyncResult
    from klaw_match.fn import curry

Example:
    ```python
    from klaw_match import P, match

    match({'id': 3, 'state': 'delivered'}).with_(
        {'state': 'delivered'}, lambda parcel: parcel['id']
    ).otherwise(lambda _: None).exhaust()  # 3
    ```
"""

# Containers
from klaw_match.option import Nothing, NothingType, Option, Some
from klaw_match.result import Err, Ok, Result, collect

# Async
from klaw_match.async_ import AsyncResult, to_async_result

# Matching
from klaw_match.matching import (
    Matcher,
    OptionMatcher,
    P,
    PLiteral,
    PPredicate,
    PStructural,
    PWildcard,
    Pattern,
    ResultMatcher,
    match,
    to_pattern,
)

# Function helpers
from klaw_match.fn import curry

# Errors
from klaw_match.errors import (
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

# Configuration & logging
from klaw_match._config import MatchConfig, get_config, init
from klaw_match._logging import configure_logging, get_logger

__version__ = '0.1.0'

__all__ = [
    'AsyncResult',
    'Err',
    'ExpectationFailed',
    'ExpectationFailedError',
    'KlawMatchError',
    'MatchConfig',
    'Matcher',
    'NoPatternMatched',
    'NoPatternMatchedError',
    'NotSettled',
    'NotSettledError',
    'Nothing',
    'NothingType',
    'Ok',
    'Option',
    'OptionMatcher',
    'P',
    'PLiteral',
    'PPredicate',
    'PStructural',
    'PWildcard',
    'Pattern',
    'Result',
    'ResultMatcher',
    'Some',
    'UnsupportedPattern',
    'UnsupportedPatternError',
    'ValueAbsent',
    'ValueAbsentError',
    'ValueNotFailure',
    'ValueNotFailureError',
    'ValueNotSuccess',
    'ValueNotSuccessError',
    'collect',
    'configure_logging',
    'curry',
    'get_config',
    'get_logger',
    'init',
    'match',
    'to_async_result',
    'to_pattern',
]
