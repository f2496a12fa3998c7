"""Small helpers over sequences and values."""

from __future__ import annotations

from typing import Any, Callable, Iterable, MutableSequence, Sequence, TypeVar

T = TypeVar("T")
V = TypeVar("V")


def find_any(
    arr: Iterable[T], fn: Callable[[T], bool] | None, default: T | None = None
) -> T | None:
    """Return the first element satisfying ``fn``, else ``default``.

    Without ``fn`` the criteria cannot be checked and ``default`` is returned.
    """
    if fn is None:
        return default
    return next((elem for elem in arr if fn(elem)), default)


def count(arr: Sequence[Any]) -> int:
    return len(arr)


def is_empty(arr: Sequence[Any]) -> bool:
    return len(arr) == 0


def is_all(arr: Iterable[T], fn: Callable[[T], bool] | None) -> bool:
    """True if every element satisfies ``fn``; False without ``fn``."""
    if fn is None:
        return False
    return all(fn(elem) for elem in arr)


def is_any(arr: Iterable[T], fn: Callable[[T], bool] | None) -> bool:
    """True if at least one element satisfies ``fn``; False without ``fn``."""
    if fn is None:
        return False
    return any(fn(elem) for elem in arr)


def is_none(arr: Iterable[T], fn: Callable[[T], bool] | None) -> bool:
    """True if no element satisfies ``fn``; False without ``fn``."""
    if fn is None:
        return False
    return not any(fn(elem) for elem in arr)


def map_values(arr: Iterable[T], fn: Callable[[T], V]) -> list[V]:
    return [fn(elem) for elem in arr]


def reverse(arr: MutableSequence[T]) -> MutableSequence[T]:
    """Reverse ``arr`` in place and return it."""
    arr.reverse()
    return arr


def select(arr: Sequence[T], fn: Callable[[T], bool] | None) -> Sequence[T]:
    """Return elements satisfying ``fn``; without ``fn`` return ``arr`` itself."""
    if fn is None:
        return arr
    return [elem for elem in arr if fn(elem)]


def sum_by(initial_value: V, arr: Iterable[T], fn: Callable[[T], V] | None) -> V:
    """Sum ``fn`` over ``arr``.

    The sum starts from the zero value of ``initial_value``'s type; without
    ``fn`` that zero value is returned.
    """
    total = type(initial_value)()
    if fn is None:
        return total
    for elem in arr:
        total += fn(elem)
    return total


def if_then(cond: bool, true_value: T, false_value: T) -> T:
    return true_value if cond else false_value


def _format_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        text = repr(value)
        return text[:-2] if text.endswith(".0") else text
    return str(value)


def concat(arr: Iterable[Any], delimiter: str) -> str:
    """Join the elements' textual forms with ``delimiter``."""
    return delimiter.join(_format_value(elem) for elem in arr)