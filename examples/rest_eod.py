#!/usr/bin/env python3
from __future__ import annotations

import argparse
import os

from marketstack import Eod, Marketstack, SortOrder, query
from marketstack.models import EodData


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Fetch end-of-day bars from Marketstack")
    p.add_argument("symbols", nargs="*", default=["AAPL"])
    p.add_argument("--limit", type=int, default=10)
    p.add_argument("--latest", action="store_true")
    p.add_argument("--http", action="store_true", help="use plain HTTP (free plan)")
    return p.parse_args()


def main() -> None:
    args = parse_args()
    token = os.environ["MARKETSTACK_API_KEY"]
    protocol = "http" if args.http else "https"

    endpoint = Eod(
        symbols=tuple(args.symbols),
        sort=SortOrder.DESCENDING,
        limit=args.limit,
        latest=args.latest,
    )
    with Marketstack(token=token, protocol=protocol) as client:
        data = query(endpoint, client, EodData)

    print("=" * 83)
    print(f"Endpoint   : {endpoint.endpoint()}")
    print(f"Bars count : {len(data.data)} of {data.pagination.total}")
    print("=" * 83)
    print(f"{'Date':12} | {'Symbol':8} | {'Open':>11} | {'High':>11} | {'Low':>11} | {'Close':>11}")
    print("-" * 83)
    for b in data.data:
        print(
            f"{b.date.date().isoformat():12} | {b.symbol:8} | {b.open:>11.2f} | {b.high:>11.2f} | {b.low:>11.2f} | {b.close:>11.2f}"
        )
    print("=" * 83)


if __name__ == "__main__":
    main()
