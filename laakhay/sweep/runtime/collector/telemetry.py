"""Structured logging for range sweeps.

This module provides telemetry hooks for the range collector, emitting
structured logs for observability.
"""

from __future__ import annotations

import logging

from .definitions import CollectionResult

logger = logging.getLogger(__name__)


def log_range_query(
    *,
    low_bound: float,
    high_bound: float,
    depth: int,
    total: int,
    count: int,
) -> None:
    """Log a classified page response.

    Args:
        low_bound: Inclusive lower bound queried
        high_bound: Inclusive upper bound queried
        depth: Recursion depth of the query (root = 0)
        total: Total reported by the provider
        count: Number of items returned in the page
    """
    logger.debug(
        "range_query",
        extra={
            "low_bound": low_bound,
            "high_bound": high_bound,
            "depth": depth,
            "total": total,
            "count": count,
        },
    )


def log_range_split(
    *,
    low_bound: float,
    high_bound: float,
    midpoint: float,
    depth: int,
) -> None:
    """Log an interval being split in two."""
    logger.debug(
        "range_split",
        extra={
            "low_bound": low_bound,
            "high_bound": high_bound,
            "midpoint": midpoint,
            "depth": depth,
        },
    )


def log_range_error(
    *,
    low_bound: float,
    high_bound: float,
    depth: int,
    error_type: str,
    error_message: str,
) -> None:
    """Log a failure at the recursion node where it happened.

    Args:
        low_bound: Inclusive lower bound of the failing node
        high_bound: Inclusive upper bound of the failing node
        depth: Recursion depth of the failing node
        error_type: Exception class name
        error_message: Exception message
    """
    logger.error(
        "range_error",
        extra={
            "low_bound": low_bound,
            "high_bound": high_bound,
            "depth": depth,
            "error_type": error_type,
            "error_message": error_message,
        },
    )


def log_collection_complete(
    *,
    low_bound: float,
    high_bound: float,
    result: CollectionResult,
    total_latency_ms: float | None = None,
) -> None:
    """Log completion of a top-level sweep."""
    logger.info(
        "collection_complete",
        extra={
            "low_bound": low_bound,
            "high_bound": high_bound,
            "total_items": result.total_items,
            "queries": result.queries,
            "splits": result.splits,
            "max_depth": result.max_depth,
            "total_latency_ms": total_latency_ms,
        },
    )
