"""Cache backed by a Redis client."""

from __future__ import annotations

import json
from datetime import timedelta
from typing import Any, Optional, Protocol

from gogox import errorx
from gogox.cache.cache import Cache

_ONE_SECOND = timedelta(seconds=1)


class _RedisClient(Protocol):
    def get(self, name: str) -> Optional[bytes]: ...

    def set(self, name: str, value: bytes, **kwargs: Any) -> Any: ...

    def delete(self, *names: str) -> Any: ...


class _RedisNil(LookupError):
    """Raised internally when Redis replies with a nil value."""


def _dumps(value: Any) -> bytes:
    return json.dumps(value, separators=(",", ":")).encode("utf-8")


class RedisCache(Cache):
    """Cache storing JSON-encoded values in Redis.

    ``client`` is any object with ``get``, ``set`` and ``delete`` methods in
    the style of the common Redis client: ``get`` returns ``None`` for a
    missing key, ``set`` accepts ``ex`` and ``px`` expirations.
    """

    def __init__(self, client: _RedisClient) -> None:
        self._client = client

    def get(self, key: str) -> Any:
        """Return the decoded value under ``key``.

        Raises :class:`gogox.errorx.Error` with code ``common.not_found`` when
        the key does not exist.
        """
        data = self._client.get(key)
        if data is None:
            raise errorx.wrap(
                _RedisNil("redis: nil"), errorx.CODE_NOT_FOUND, "redis key not found"
            )
        return json.loads(data)

    def set(self, key: str, value: Any, expiration: timedelta) -> None:
        """Store the JSON encoding of ``value``; a non-positive expiration never expires."""
        data = _dumps(value)
        if expiration <= timedelta(0):
            self._client.set(key, data)
        elif expiration % _ONE_SECOND:
            self._client.set(key, data, px=expiration)
        else:
            self._client.set(key, data, ex=expiration)

    def delete(self, *keys: str) -> None:
        self._client.delete(*keys)