"""Mask a function so binding helpers treat it as an ordinary function."""

from __future__ import annotations

from typing import Any, Callable


class ProtectAdaptor:
    """Forwards calls to ``function`` while hiding its own type."""

    __slots__ = ("function",)

    def __init__(self, function: Callable[..., Any]) -> None:
        if not callable(function):
            raise TypeError(f"{function!r} is not callable")
        self.function = function

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        return self.function(*args, **kwargs)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.function!r})"


def protect(f: Callable[..., Any]) -> ProtectAdaptor:
    """Wrap ``f`` in a :class:`ProtectAdaptor`."""
    return ProtectAdaptor(f)