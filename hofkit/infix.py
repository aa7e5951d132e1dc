"""Use a binary function as an infix operator: ``x |f| y``."""

from __future__ import annotations

from typing import Any, Callable


class PostfixAdaptor:
    """A function with its left operand bound, waiting for the right one."""

    __slots__ = ("left", "function")

    def __init__(self, left: Any, function: Callable[..., Any]) -> None:
        self.left = left
        self.function = function

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        return self.function(self.left, *args, **kwargs)

    def __or__(self, right: Any) -> Any:
        return self.function(self.left, right)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.left!r}, {self.function!r})"


class InfixAdaptor:
    """Binary function usable as ``x |f| y`` or called directly."""

    __slots__ = ("function",)

    def __init__(self, function: Callable[..., Any]) -> None:
        if not callable(function):
            raise TypeError(f"{function!r} is not callable")
        self.function = function

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        return self.function(*args, **kwargs)

    def __ror__(self, left: Any) -> PostfixAdaptor:
        return PostfixAdaptor(left, self.function)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.function!r})"


def infix(f: Callable[..., Any]) -> InfixAdaptor:
    """Wrap ``f`` so that ``x |infix(f)| y == f(x, y)``."""
    return InfixAdaptor(f)