"""Cache interface with no-op, Redis and memcache implementations."""