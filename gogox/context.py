"""Immutable request context carrying scoped values and an optional deadline."""

from __future__ import annotations

from datetime import datetime
from types import MappingProxyType
from typing import Any, Hashable, Mapping


class Context:
    """An immutable bag of request-scoped values with an optional deadline.

    Deriving a context never changes the original, so a context can be shared
    freely between callers.
    """

    __slots__ = ("_values", "_deadline")

    def __init__(
        self,
        values: Mapping[Hashable, Any] | None = None,
        deadline: datetime | None = None,
    ) -> None:
        self._values: Mapping[Hashable, Any] = MappingProxyType(dict(values or {}))
        self._deadline = deadline

    def __repr__(self) -> str:
        return f"Context(values={dict(self._values)!r}, deadline={self._deadline!r})"

    def with_value(self, key: Hashable, value: Any) -> Context:
        """Return a child context in which ``key`` maps to ``value``."""
        values = dict(self._values)
        values[key] = value
        return Context(values, self._deadline)

    def value(self, key: Hashable) -> Any:
        """Return the value stored under ``key``, or ``None``."""
        return self._values.get(key)

    def with_deadline(self, deadline: datetime) -> Context:
        """Return a child context with ``deadline``, unless an earlier one is set."""
        if self._deadline is not None and self._deadline <= deadline:
            return Context(self._values, self._deadline)
        return Context(self._values, deadline)

    def deadline(self) -> datetime | None:
        """Return the deadline, or ``None`` when there is none."""
        return self._deadline


_BACKGROUND = Context()


def background() -> Context:
    """Return the empty root context."""
    return _BACKGROUND