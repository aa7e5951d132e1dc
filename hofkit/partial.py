"""Partial application: keep collecting arguments until the function can be called."""

from __future__ import annotations

from typing import Any, Callable, Iterable

from hofkit.limit import LimitAdaptor, function_param_limit

_NOT_ACCEPTED = object()


def _call_if_accepted(f: Callable[..., Any], args: tuple) -> Any:
    """Call ``f`` with ``args``, or return ``_NOT_ACCEPTED`` if it rejects them.

    A ``TypeError`` raised while binding the arguments counts as rejection;
    one raised from inside the function body propagates.
    """
    while isinstance(f, LimitAdaptor):
        if len(args) > f.param_limit:
            return _NOT_ACCEPTED
        f = f.function
    try:
        return f(*args)
    except TypeError as error:
        trace = error.__traceback__
        if trace is not None and trace.tb_next is None:
            return _NOT_ACCEPTED
        raise


class PartialAdaptor:
    """Calls ``function`` once it accepts the arguments gathered so far.

    Until then each call returns a new adaptor holding the arguments
    collected up to that point. The held arguments are never changed, so
    an adaptor can be reused with different remaining arguments.
    """

    __slots__ = ("function", "args")

    def __init__(self, function: Callable[..., Any], args: Iterable[Any] = ()) -> None:
        if not callable(function):
            raise TypeError(f"{function!r} is not callable")
        self.function = function
        self.args = tuple(args)

    def __call__(self, *args: Any) -> Any:
        combined = self.args + args
        result = _call_if_accepted(self.function, combined)
        if result is not _NOT_ACCEPTED:
            return result
        limit = function_param_limit(self.function)
        if len(combined) < limit:
            return PartialAdaptor(self.function, combined)
        raise TypeError(
            f"{self.function!r} cannot be called with {len(combined)} arguments "
            f"and accepts at most {limit}"
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.function!r}, {self.args!r})"


def partial(f: Callable[..., Any]) -> PartialAdaptor:
    """Allow ``f`` to be applied to its arguments a few at a time."""
    return PartialAdaptor(f)