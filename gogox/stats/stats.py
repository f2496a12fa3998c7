"""The metrics interface, its options and a no-op implementation."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Dict, Mapping, Optional

Tags = Dict[str, str]


@dataclass
class Option:
    """Per-call metric settings: sampling rate and tags."""

    rate: float = 0.0
    tags: Tags = field(default_factory=dict)


def merge_tags(t1: Optional[Mapping[str, str]], t2: Optional[Mapping[str, str]]) -> Tags:
    """Return a new mapping holding ``t1`` updated with ``t2``."""
    res: Tags = {}
    res.update(t1 or {})
    res.update(t2 or {})
    return res


class Stats(ABC):
    """Commonly used metric operations."""

    @abstractmethod
    def increment(self, metric: str, opt: Option) -> None:
        """Increase ``metric`` by one."""

    @abstractmethod
    def histogram(self, metric: str, value: float, opt: Option) -> None:
        """Record an observation of ``value`` into ``metric``'s buckets."""

    @abstractmethod
    def gauge(self, metric: str, value: float, opt: Option) -> None:
        """Set ``metric`` to ``value``."""

    @abstractmethod
    def add(self, metric: str, value: float, opt: Option) -> None:
        """Increase ``metric`` by ``value``."""


class NopStats(Stats):
    """Stats implementation that drops every measurement, counting how many."""

    def __init__(self) -> None:
        self.dropped = 0

    def increment(self, metric: str, opt: Option) -> None:
        self.dropped += 1

    def histogram(self, metric: str, value: float, opt: Option) -> None:
        self.dropped += 1

    def gauge(self, metric: str, value: float, opt: Option) -> None:
        self.dropped += 1

    def add(self, metric: str, value: float, opt: Option) -> None:
        self.dropped += 1