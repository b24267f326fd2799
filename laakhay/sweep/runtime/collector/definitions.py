"""Range collector configuration and result structures.

This module defines the immutable configuration a range sweep runs with and
the result it produces, plus the callable contracts for page providers and
identity extractors.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Hashable, Mapping
from dataclasses import dataclass, field, replace
from typing import Any


# A page provider may answer with a PageResponse, a mapping, or any object
# exposing total/count/items attributes.
PageProvider = Callable[[float, float], Awaitable[Any]]
IdentityFn = Callable[[Any], Hashable]


def default_identity(item: Any) -> Hashable:
    """Return ``item["id"]`` for mappings and ``item.id`` for everything else."""
    if isinstance(item, Mapping):
        return item["id"]
    return item.id


@dataclass(frozen=True)
class CollectorConfig:
    """Configuration for a single range sweep.

    Attributes:
        page_provider: Async function returning one page for an inclusive interval
        low_bound: Inclusive lower bound of the interval
        high_bound: Inclusive upper bound of the interval
        step_value: Smallest increment between two distinct query bounds
        identity_of: Function mapping an item to a hashable identity key
        max_depth: Deepest recursion level allowed to split (None = unbounded)
        concurrent: Whether the two halves of a split are fetched concurrently
    """

    page_provider: PageProvider
    low_bound: float = 0
    high_bound: float = 100_000
    step_value: float = 1
    identity_of: IdentityFn = default_identity
    max_depth: int | None = None
    concurrent: bool = False

    def __post_init__(self) -> None:
        """Validate collector configuration."""
        if self.step_value <= 0:
            raise ValueError("CollectorConfig step_value must be positive")
        if self.max_depth is not None and self.max_depth < 0:
            raise ValueError("CollectorConfig max_depth cannot be negative")

    def with_bounds(self, low_bound: float, high_bound: float) -> CollectorConfig:
        """Derive a config for a sub-interval, sharing every other field."""
        return replace(self, low_bound=low_bound, high_bound=high_bound)


@dataclass
class CollectionResult:
    """Result of a range sweep.

    Attributes:
        items: Deduplicated items in first-seen order
        queries: Number of page provider calls made
        splits: Number of intervals that had to be split
        max_depth: Deepest recursion level reached (root = 0)
    """

    items: list[Any] = field(default_factory=list)
    queries: int = 0
    splits: int = 0
    max_depth: int = 0

    @property
    def total_items(self) -> int:
        return len(self.items)
