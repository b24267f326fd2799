#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
import logging
import random

from laakhay.sweep import CollectorConfig, RangeCollector

logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Sweep a page-capped in-memory catalog")
    p.add_argument("size", nargs="?", type=int, default=25_000, help="Catalog size")
    p.add_argument("page_size", nargs="?", type=int, default=1_000)
    p.add_argument("max_price", nargs="?", type=int, default=100_000)
    p.add_argument("--concurrent", action="store_true", help="Fetch split halves concurrently")
    p.add_argument("--seed", type=int, default=0)
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    rng = random.Random(args.seed)
    catalog = [
        {"id": i + 1, "name": f"Product {i + 1}", "price": rng.randint(1, args.max_price)}
        for i in range(args.size)
    ]

    async def fetch_by_price(low: float, high: float) -> dict:
        found = [p for p in catalog if low <= p["price"] <= high]
        page = found[: args.page_size]
        return {"total": len(found), "count": len(page), "items": page}

    config = CollectorConfig(
        page_provider=fetch_by_price,
        low_bound=1,
        high_bound=args.max_price,
        concurrent=args.concurrent,
    )
    result = await RangeCollector(config).run()

    print("=" * 50)
    print(f"Catalog size : {args.size}")
    print(f"Page size    : {args.page_size}")
    print(f"Collected    : {result.total_items}")
    print(f"Queries      : {result.queries}")
    print(f"Splits       : {result.splits}")
    print(f"Max depth    : {result.max_depth}")
    print("=" * 50)


if __name__ == "__main__":
    asyncio.run(main())
