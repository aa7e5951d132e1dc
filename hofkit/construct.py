"""Function objects that construct instances of a type."""

from __future__ import annotations

from typing import Any, Callable


class Construct:
    """Calls a constructor with the given arguments.

    When ``meta`` is true, ``target`` is a metafunction: it is called with
    the types of the arguments and returns the type to construct.
    """

    __slots__ = ("target", "meta")

    def __init__(self, target: Callable[..., Any], meta: bool = False) -> None:
        if not callable(target):
            raise TypeError(f"{target!r} is not callable")
        self.target = target
        self.meta = meta

    def _resolve(self, args: tuple, kwargs: dict) -> Callable[..., Any]:
        if not self.meta:
            return self.target
        result = self.target(*(type(x) for x in args), **{k: type(v) for k, v in kwargs.items()})
        if not callable(result):
            raise TypeError(f"metafunction produced non-constructible {result!r}")
        return result

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        return self._resolve(args, kwargs)(*args, **kwargs)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.target!r}, meta={self.meta!r})"


def construct(target: Callable[..., Any]) -> Construct:
    """Return a function that constructs ``target`` from its arguments."""
    return Construct(target)


def construct_forward(target: Callable[..., Any]) -> Construct:
    """Same as :func:`construct`; provided for consistency."""
    return Construct(target)


def construct_basic(target: Callable[..., Any]) -> Construct:
    """Same as :func:`construct`; provided for consistency."""
    return Construct(target)


def construct_meta(metafunction: Callable[..., Any]) -> Construct:
    """Construct the type that ``metafunction`` derives from the argument types."""
    return Construct(metafunction, meta=True)