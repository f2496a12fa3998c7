"""Carrying log metadata in a request context."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from gogox.context import Context, background
from gogox.log.metadata import Metadata


@dataclass(frozen=True)
class _MetadataContextKey:
    name: str


METADATA_CONTEXT_KEY = _MetadataContextKey("metadata.context.key")


def new_context(
    parent_ctx: Optional[Context], md: Optional[Mapping[str, Any]]
) -> Context:
    """Return a context derived from ``parent_ctx`` that carries ``md``."""
    if parent_ctx is None:
        parent_ctx = background()
    return parent_ctx.with_value(METADATA_CONTEXT_KEY, dict(md or {}))


def metadata_from_context(ctx: Optional[Context]) -> Metadata:
    """Return a copy of the metadata carried by ``ctx``, or an empty mapping."""
    if ctx is None:
        return {}
    md = ctx.value(METADATA_CONTEXT_KEY)
    if md is None:
        return {}
    return dict(md)