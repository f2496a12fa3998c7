"""Building blocks for services: errors, context, log metadata, tracing, caching and stats."""

__version__ = "0.1.0"