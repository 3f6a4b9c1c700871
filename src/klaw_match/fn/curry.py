"""Positional currying for plain functions."""

from __future__ import annotations

import functools
import inspect
from collections.abc import Callable
from typing import Any

__all__ = ['curry']

_POSITIONAL = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)


def _arity(f: Callable[..., Any]) -> int:
    """Count the required positional parameters of ``f``."""
    return sum(
        1
        for param in inspect.signature(f).parameters.values()
        if param.kind in _POSITIONAL and param.default is inspect.Parameter.empty
    )


def curry[R](f: Callable[..., R]) -> Callable[..., Any]:
    """Curry ``f`` over its required positional parameters.

    The returned callable collects positional arguments across calls and
    invokes ``f`` once enough have been supplied. Extra arguments given in
    the completing call are passed through to ``f``.

    Args:
        f: Function to curry. Optional and keyword-only parameters are not
            counted.

    Returns:
        A callable returning either ``f``'s result or another partial.

    Example:
        ```python
        add3 = curry(lambda a, b, c: a + b + c)
        add3(1)(2)(3)  # 6
        add3(1, 2)(3)  # 6
        match(5).with_(P.fn(curry(operator.lt)(0)), lambda x: x).exhaust()  # 5
        ```
    """
    arity = _arity(f)

    def curried(*args: Any) -> Any:
        if len(args) >= arity:
            return f(*args)
        return functools.partial(curried, *args)

    return functools.wraps(f)(curried)
