#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
import json
import logging

from laakhay.sweep import CollectorConfig, HTTPClient, HTTPPageProvider, RangeCollector


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Collect a price-filtered HTTP listing")
    p.add_argument("base_url", help="e.g. https://api.example.com")
    p.add_argument("path", nargs="?", default="/products")
    p.add_argument("--min", dest="low_bound", type=float, default=0)
    p.add_argument("--max", dest="high_bound", type=float, default=100_000)
    p.add_argument("--step", dest="step_value", type=float, default=1)
    p.add_argument("--low-param", default="min_price")
    p.add_argument("--high-param", default="max_price")
    p.add_argument("--total-field", default="total")
    p.add_argument("--count-field", default="count", help="Use '' to count returned items")
    p.add_argument("--items-field", default="items")
    p.add_argument("--id-field", default="id")
    p.add_argument("--max-depth", type=int, default=None)
    p.add_argument("--concurrent", action="store_true")
    p.add_argument("--output", help="Write collected items as JSON to this file")
    p.add_argument("--verbose", action="store_true")
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    async with HTTPClient(base_url=args.base_url) as client:
        provider = HTTPPageProvider(
            client,
            args.path,
            low_param=args.low_param,
            high_param=args.high_param,
            total_field=args.total_field,
            count_field=args.count_field or None,
            items_field=args.items_field,
        )
        config = CollectorConfig(
            page_provider=provider,
            low_bound=args.low_bound,
            high_bound=args.high_bound,
            step_value=args.step_value,
            identity_of=lambda item: item[args.id_field],
            max_depth=args.max_depth,
            concurrent=args.concurrent,
        )
        result = await RangeCollector(config).run()

    print(f"Collected {result.total_items} items with {result.queries} queries")
    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            json.dump(result.items, f, ensure_ascii=False, indent=2)
        print(f"Wrote {args.output}")


if __name__ == "__main__":
    asyncio.run(main())
