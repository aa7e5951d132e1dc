"""Annotate a function with the maximum number of arguments it accepts."""

from __future__ import annotations

import operator
import sys
from typing import Any, Callable

UNLIMITED = sys.maxsize


class LimitAdaptor:
    """Callable that refuses calls with more than ``param_limit`` arguments."""

    __slots__ = ("function", "param_limit")

    def __init__(self, param_limit: int, function: Callable[..., Any]) -> None:
        if not callable(function):
            raise TypeError(f"{function!r} is not callable")
        self.param_limit = _check_limit(param_limit)
        self.function = function

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        given = len(args) + len(kwargs)
        if given > self.param_limit:
            raise TypeError(
                f"function accepts at most {self.param_limit} arguments, {given} given"
            )
        return self.function(*args, **kwargs)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.param_limit!r}, {self.function!r})"


def _check_limit(n: Any) -> int:
    value = operator.index(n)
    if value < 0:
        raise ValueError(f"parameter limit must not be negative, got {value}")
    return value


def limit(n: Any) -> Callable[[Callable[..., Any]], LimitAdaptor]:
    """Return a decorator that limits a function to ``n`` arguments."""
    value = _check_limit(n)

    def decorate(f: Callable[..., Any]) -> LimitAdaptor:
        return LimitAdaptor(value, f)

    return decorate


def limit_c(n: Any, f: Callable[..., Any]) -> LimitAdaptor:
    """Limit ``f`` to at most ``n`` arguments."""
    return LimitAdaptor(n, f)


def function_param_limit(f: Any) -> int:
    """Return the declared argument limit of ``f``, or ``UNLIMITED``."""
    return getattr(f, "param_limit", UNLIMITED)