"""Cache backed by a memcached client."""

from __future__ import annotations

import json
from datetime import timedelta
from typing import Any, Optional, Protocol

from gogox import errorx
from gogox.cache.cache import Cache


class _MemcacheClient(Protocol):
    def get(self, key: str) -> Optional[bytes]: ...

    def set(self, key: str, value: bytes, expire: int = 0) -> Any: ...

    def delete(self, key: str) -> Any: ...


class _CacheMiss(LookupError):
    """Raised internally when memcached has no item for a key."""


class MemcacheCache(Cache):
    """Cache storing JSON-encoded values in memcached.

    ``client`` must offer ``get(key)`` returning ``None`` on a miss,
    ``set(key, value, expire=seconds)`` and ``delete(key)``.
    """

    def __init__(self, client: _MemcacheClient) -> None:
        self._client = client

    def get(self, key: str) -> Any:
        """Return the decoded value under ``key``.

        Raises :class:`gogox.errorx.Error` with code ``common.not_found`` on a miss.
        """
        data = self._client.get(key)
        if data is None:
            raise errorx.wrap(
                _CacheMiss("memcache: cache miss"),
                errorx.CODE_NOT_FOUND,
                "memcache key not found",
            )
        return json.loads(data)

    def set(self, key: str, value: Any, expiration: timedelta) -> None:
        """Store the JSON encoding of ``value``, expiring after whole seconds of ``expiration``."""
        data = json.dumps(value, separators=(",", ":")).encode("utf-8")
        self._client.set(key, data, expire=int(expiration.total_seconds()))

    def delete(self, *keys: str) -> None:
        """Delete ``keys`` in order, stopping at the first failure."""
        for key in keys:
            self._client.delete(key)