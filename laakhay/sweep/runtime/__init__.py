"""Runtime layer."""

from .collector import CollectionResult, CollectorConfig, RangeCollector, collect

__all__ = ["CollectorConfig", "CollectionResult", "RangeCollector", "collect"]
