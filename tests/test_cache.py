from datetime import timedelta

import pytest

from gogox import errorx
from gogox.cache.cache import Cache, NopCache


def test_get_always_raises_not_found():
    cache = NopCache()
    with pytest.raises(errorx.Error) as exc_info:
        cache.get("some-key")
    err = errorx.parse(exc_info.value)
    assert err is not None
    assert err.code == errorx.CODE_NOT_FOUND
    assert str(err) == "no operation cache"


def test_get_after_set_still_misses():
    cache = NopCache()
    assert cache.set("some-key", {"id": 1}, timedelta(0)) is None
    with pytest.raises(errorx.Error) as exc_info:
        cache.get("some-key")
    assert exc_info.value.code == errorx.CODE_NOT_FOUND


def test_delete_returns_nothing():
    assert NopCache().delete("some-key", "other-key") is None


def test_cache_is_abstract():
    with pytest.raises(TypeError):
        Cache()