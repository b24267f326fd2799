"""Recursive range collector.

This module provides the RangeCollector class that reconstructs a complete
item set from a page provider capped at a fixed page size, by splitting the
queried interval in half until every sub-query fits in one page.
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Iterable
from time import perf_counter
from typing import Any

from ...core.exceptions import InvalidRangeError, RangeExhaustedError, UpstreamInconsistencyError
from ...models import PageResponse
from .definitions import CollectionResult, CollectorConfig, IdentityFn
from .telemetry import log_collection_complete, log_range_error, log_range_query, log_range_split


class RangeCollector:
    """Collects every item in an interval from a page-capped provider.

    Each node of the recursion makes exactly one provider call. When the page
    reports more matches than it returned, the interval is split at
    ``low + floor((high - low) / 2)`` and both halves are collected with the
    same algorithm, the right half starting one ``step_value`` past the
    midpoint so the boundary is queried only once. Results are merged left
    then right and deduplicated by identity key.
    """

    def __init__(self, config: CollectorConfig) -> None:
        """Initialize range collector.

        Args:
            config: Sweep configuration, including the page provider
        """
        self._config = config

    @property
    def config(self) -> CollectorConfig:
        return self._config

    async def run(self) -> CollectionResult:
        """Sweep the configured interval.

        Returns:
            CollectionResult with deduplicated items and sweep statistics

        Raises:
            InvalidRangeError: If any interval has low_bound > high_bound
            UpstreamInconsistencyError: If a page reports total < count
            RangeExhaustedError: If max_depth is set and reached while split is still needed
        """
        start = perf_counter()
        result = await self._collect(self._config, depth=0)
        log_collection_complete(
            low_bound=self._config.low_bound,
            high_bound=self._config.high_bound,
            result=result,
            total_latency_ms=(perf_counter() - start) * 1000.0,
        )
        return result

    async def _collect(self, config: CollectorConfig, depth: int) -> CollectionResult:
        low, high = config.low_bound, config.high_bound

        if low > high:
            raise self._failure(
                InvalidRangeError(
                    f"low_bound ({low}) must be less than or equal to high_bound ({high})",
                    low_bound=low,
                    high_bound=high,
                ),
                config,
                depth,
            )

        try:
            page = PageResponse.coerce(await config.page_provider(low, high))
        except Exception as e:
            log_range_error(
                low_bound=low,
                high_bound=high,
                depth=depth,
                error_type=type(e).__name__,
                error_message=str(e),
            )
            raise

        log_range_query(
            low_bound=low,
            high_bound=high,
            depth=depth,
            total=page.total,
            count=page.count,
        )

        if page.is_complete:
            return CollectionResult(
                items=self._deduplicate(page.items or [], config.identity_of),
                queries=1,
                max_depth=depth,
            )

        if not page.is_truncated:
            raise self._failure(
                UpstreamInconsistencyError(
                    f"Page provider returned more items than it reported: "
                    f"count ({page.count}) should be less than or equal to total ({page.total})",
                    total=page.total,
                    count=page.count,
                ),
                config,
                depth,
            )

        if config.max_depth is not None and depth >= config.max_depth:
            raise self._failure(
                RangeExhaustedError(
                    f"Interval [{low}, {high}] still holds {page.total} items "
                    f"after reaching max_depth {config.max_depth}",
                    low_bound=low,
                    high_bound=high,
                    depth=depth,
                ),
                config,
                depth,
            )

        # The truncated page's own items are re-fetched by the halves.
        midpoint = low + (high - low) // 2
        log_range_split(low_bound=low, high_bound=high, midpoint=midpoint, depth=depth)

        left_config = config.with_bounds(low, midpoint)
        right_config = config.with_bounds(midpoint + config.step_value, high)

        if config.concurrent:
            left, right = await self._gather_halves(
                self._collect(left_config, depth + 1),
                self._collect(right_config, depth + 1),
            )
        else:
            left = await self._collect(left_config, depth + 1)
            right = await self._collect(right_config, depth + 1)

        return CollectionResult(
            items=self._deduplicate([*left.items, *right.items], config.identity_of),
            queries=1 + left.queries + right.queries,
            splits=1 + left.splits + right.splits,
            max_depth=max(left.max_depth, right.max_depth),
        )

    @staticmethod
    async def _gather_halves(
        left: Awaitable[CollectionResult], right: Awaitable[CollectionResult]
    ) -> list[CollectionResult]:
        """Await both halves concurrently, cancelling the other if one fails."""
        tasks = [asyncio.ensure_future(left), asyncio.ensure_future(right)]
        try:
            return await asyncio.gather(*tasks)
        except BaseException:
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
            raise

    @staticmethod
    def _deduplicate(items: Iterable[Any], identity_of: IdentityFn) -> list[Any]:
        """Keep the first item seen for each identity key."""
        seen: dict[Any, Any] = {}
        for item in items:
            key = identity_of(item)
            if key not in seen:
                seen[key] = item
        return list(seen.values())

    @staticmethod
    def _failure(error: Exception, config: CollectorConfig, depth: int) -> Exception:
        log_range_error(
            low_bound=config.low_bound,
            high_bound=config.high_bound,
            depth=depth,
            error_type=type(error).__name__,
            error_message=str(error),
        )
        return error


async def collect(config: CollectorConfig) -> list[Any]:
    """Collect every item in ``config``'s interval, deduplicated by identity.

    Example:
        >>> items = await collect(CollectorConfig(page_provider=fetch_by_price))
    """
    result = await RangeCollector(config).run()
    return result.items
