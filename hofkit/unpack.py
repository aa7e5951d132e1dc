"""Call a function with the elements of one or more sequences as its arguments."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, Callable


def is_unpackable(x: Any) -> bool:
    """Tell whether ``x`` can be spread into arguments.

    Any iterable is unpackable except text and byte strings.
    """
    return isinstance(x, Iterable) and not isinstance(x, (str, bytes, bytearray))


class UnpackAdaptor:
    """Calls ``function`` with the elements of every sequence, in order."""

    __slots__ = ("function",)

    def __init__(self, function: Callable[..., Any]) -> None:
        if not callable(function):
            raise TypeError(f"{function!r} is not callable")
        self.function = function

    def __call__(self, *args: Any) -> Any:
        if not args:
            raise TypeError("unpack needs at least one sequence")
        for sequence in args:
            if not is_unpackable(sequence):
                raise TypeError(f"{sequence!r} is not an unpackable sequence")
        return self.function(*(x for sequence in args for x in sequence))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.function!r})"


def unpack(f: Callable[..., Any]) -> UnpackAdaptor:
    """Wrap ``f`` so that it takes sequences and receives their elements."""
    return UnpackAdaptor(f)