#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
import logging
import os

from marketstack import AsyncMarketstack, Eod, Pagination, paged
from marketstack.models import EodDataItem


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Stream end-of-day bars page by page")
    p.add_argument("symbol", nargs="?", default="AAPL")
    p.add_argument("--limit", type=int, default=250, help="stop after this many bars")
    p.add_argument("--page-size", type=int, default=100)
    p.add_argument("--http", action="store_true", help="use plain HTTP (free plan)")
    p.add_argument("-v", "--verbose", action="store_true", help="log page fetches")
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(asctime)s %(name)s %(message)s")

    token = os.environ["MARKETSTACK_API_KEY"]
    protocol = "http" if args.http else "https"
    pagination = Pagination(limit=args.limit, max_page_size=args.page_size)

    count = 0
    async with AsyncMarketstack(token=token, protocol=protocol) as client:
        async for bar in paged(Eod(symbols=(args.symbol,)), pagination).iter_async(client, EodDataItem):
            count += 1
            print(f"{bar.date.date().isoformat()} {bar.symbol:6} close={bar.close}")

    print(f"{count} bars")


if __name__ == "__main__":
    asyncio.run(main())
