#!/usr/bin/env python3
from __future__ import annotations

import argparse
import os

from marketstack import Marketstack, Pagination, Tickers, paged
from marketstack.models import TickersDataItem


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Search Marketstack tickers")
    p.add_argument("search")
    p.add_argument("--exchange", default=None, help="MIC, e.g. XNAS")
    p.add_argument("--max", type=int, default=25)
    p.add_argument("--http", action="store_true", help="use plain HTTP (free plan)")
    return p.parse_args()


def main() -> None:
    args = parse_args()
    token = os.environ["MARKETSTACK_API_KEY"]
    protocol = "http" if args.http else "https"

    endpoint = Tickers(search=args.search, exchange=args.exchange)
    with Marketstack(token=token, protocol=protocol) as client:
        tickers = paged(endpoint, Pagination.limited(args.max)).query(client, TickersDataItem)

    for t in tickers[: args.max]:
        mic = t.stock_exchange.mic if t.stock_exchange else "-"
        print(f"{t.symbol:10} {mic:6} {t.name}")


if __name__ == "__main__":
    main()
