"""Recursive range collection over page-capped providers.

Architecture:
    The collector layer consists of:
    - definitions.py: Sweep configuration and result structures
    - collector.py: Recursive range splitting, merge and deduplication
    - telemetry.py: Structured logging
"""

from __future__ import annotations

from .collector import RangeCollector, collect
from .definitions import (
    CollectionResult,
    CollectorConfig,
    IdentityFn,
    PageProvider,
    default_identity,
)

__all__ = [
    "CollectorConfig",
    "CollectionResult",
    "RangeCollector",
    "collect",
    "default_identity",
    "IdentityFn",
    "PageProvider",
]
