"""Capture values that are prepended to a function's arguments."""

from __future__ import annotations

import copy
from typing import Any, Callable, Iterable


class CaptureInvoke:
    """Calls ``function`` with the captured values before the call's own."""

    __slots__ = ("function", "captured")

    def __init__(self, function: Callable[..., Any], captured: Iterable[Any]) -> None:
        if not callable(function):
            raise TypeError(f"{function!r} is not callable")
        self.function = function
        self.captured = tuple(captured)

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        return self.function(*self.captured, *args, **kwargs)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.function!r}, {self.captured!r})"


class CapturePack:
    """Holds captured values; calling it with a function binds them."""

    __slots__ = ("captured",)

    def __init__(self, captured: Iterable[Any]) -> None:
        self.captured = tuple(captured)

    def __call__(self, f: Callable[..., Any]) -> CaptureInvoke:
        return CaptureInvoke(f, self.captured)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.captured!r})"


def capture(*args: Any) -> CapturePack:
    """Capture shallow copies of the values, detached from the originals."""
    return CapturePack(copy.copy(x) for x in args)


def capture_forward(*args: Any) -> CapturePack:
    """Capture the values themselves, by reference."""
    return CapturePack(args)


def capture_basic(*args: Any) -> CapturePack:
    """Capture the values as given, by reference."""
    return CapturePack(args)