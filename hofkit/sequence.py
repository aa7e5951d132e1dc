"""Algorithms over tuples built from the function adaptors."""

from __future__ import annotations

from functools import reduce
from itertools import chain
from typing import Any, Callable, Iterable

from hofkit.unpack import unpack


def tuple_transform(sequence: Iterable[Any], f: Callable[[Any], Any]) -> tuple:
    """Return a tuple of ``f`` applied to each element."""
    return unpack(lambda *xs: tuple(f(x) for x in xs))(sequence)


def tuple_for_each(sequence: Iterable[Any], f: Callable[[Any], Any]) -> None:
    """Call ``f`` on each element in order."""
    for x in sequence:
        f(x)


def tuple_fold(sequence: Iterable[Any], f: Callable[[Any, Any], Any]) -> Any:
    """Fold the elements from the left with the binary function ``f``."""
    return unpack(lambda *xs: reduce(f, xs))(sequence)


def tuple_cat(*args: Iterable[Any]) -> tuple:
    """Concatenate the sequences into one tuple."""
    return tuple(chain.from_iterable(args))


def tuple_join(sequences: Iterable[Iterable[Any]]) -> tuple:
    """Flatten a sequence of sequences into one tuple."""
    return unpack(tuple_cat)(sequences)


def tuple_filter(sequence: Iterable[Any], predicate: Callable[[Any], Any]) -> tuple:
    """Keep the elements for which ``predicate`` is true."""
    return tuple_join(tuple_transform(sequence, lambda x: (x,) if predicate(x) else ()))


def tuple_zip_with(
    sequence1: Iterable[Any], sequence2: Iterable[Any], f: Callable[[Any, Any], Any]
) -> tuple:
    """Combine elements pairwise with ``f``; the sequences must be equally long."""
    return tuple(f(x, y) for x, y in zip(sequence1, sequence2, strict=True))


def tuple_dot(a: Iterable[Any], b: Iterable[Any]) -> Any:
    """Return the dot product of two sequences."""
    product = tuple_zip_with(a, b, lambda x, y: x * y)
    return tuple_fold(product, lambda x, y: x + y)