"""Metadata attached to log records."""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

Metadata = Dict[str, Any]


def merge_metadata(
    md1: Optional[Mapping[str, Any]], md2: Optional[Mapping[str, Any]]
) -> Metadata:
    """Return a new mapping holding ``md1`` updated with ``md2``."""
    res: Metadata = {}
    res.update(md1 or {})
    res.update(md2 or {})
    return res