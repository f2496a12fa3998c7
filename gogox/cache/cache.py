"""The cache interface and a no-op cache."""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import timedelta
from typing import Any

from gogox import errorx


class Cache(ABC):
    """Key-value cache storing JSON-serialisable values."""

    @abstractmethod
    def get(self, key: str) -> Any:
        """Return the value stored under ``key``.

        Raises :class:`gogox.errorx.Error` with code ``common.not_found`` when
        the key is absent.
        """

    @abstractmethod
    def set(self, key: str, value: Any, expiration: timedelta) -> None:
        """Store ``value`` under ``key`` for ``expiration``."""

    @abstractmethod
    def delete(self, *keys: str) -> None:
        """Remove ``keys``."""


class NopCache(Cache):
    """Cache that stores nothing; every lookup misses."""

    def get(self, key: str) -> Any:
        raise errorx.err_not_found("no operation cache")

    def set(self, key: str, value: Any, expiration: timedelta) -> None:
        return None

    def delete(self, *keys: str) -> None:
        return None