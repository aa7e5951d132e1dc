"""Fixed-point combinator for writing recursive functions."""

from __future__ import annotations

from typing import Any, Callable


class FixAdaptor:
    """Calls ``function`` with the adaptor itself as the first argument.

    ``fix(f)(*args)`` is ``f(fix(f), *args)``, so ``f`` can recurse through
    the first argument it receives.
    """

    __slots__ = ("function",)

    def __init__(self, function: Callable[..., Any]) -> None:
        if not callable(function):
            raise TypeError(f"{function!r} is not callable")
        self.function = function

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        return self.function(self, *args, **kwargs)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.function!r})"


def fix(f: Callable[..., Any]) -> FixAdaptor:
    """Make ``f`` recursive by passing it a handle to itself."""
    return FixAdaptor(f)