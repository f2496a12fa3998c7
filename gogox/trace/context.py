"""Carrying a trace identifier in a request context."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from gogox.context import Context, background


@dataclass(frozen=True)
class _TraceContextKey:
    name: str


TRACE_CONTEXT_KEY = _TraceContextKey("trace.context.key")


def new_context(parent_ctx: Optional[Context], trace: str) -> Context:
    """Return a context derived from ``parent_ctx`` that carries ``trace``."""
    if parent_ctx is None:
        parent_ctx = background()
    return parent_ctx.with_value(TRACE_CONTEXT_KEY, trace)


def trace_from_context(ctx: Optional[Context]) -> str:
    """Return the trace carried by ``ctx``, or an empty string."""
    if ctx is None:
        return ""
    trace = ctx.value(TRACE_CONTEXT_KEY)
    if trace is None:
        return ""
    return trace