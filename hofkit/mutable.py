"""Wrap a stateful function object so it can be used where a plain function is expected."""

from __future__ import annotations

from typing import Any, Callable


class MutableAdaptor:
    """Forwards calls to a function object that may change its own state."""

    __slots__ = ("function",)

    def __init__(self, function: Callable[..., Any]) -> None:
        if not callable(function):
            raise TypeError(f"{function!r} is not callable")
        self.function = function

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        return self.function(*args, **kwargs)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.function!r})"


def mutable_(f: Callable[..., Any]) -> MutableAdaptor:
    """Wrap ``f`` in a :class:`MutableAdaptor`."""
    return MutableAdaptor(f)