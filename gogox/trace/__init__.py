"""Trace ID generation and propagation through a context."""