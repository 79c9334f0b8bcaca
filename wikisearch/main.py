"""Command line entrypoint: run one wiki search and print the launcher rows."""

from __future__ import annotations

import argparse
import asyncio
import sys
from typing import Sequence

from wikisearch.config import get_settings
from wikisearch.logging import configure_logging, logger
from wikisearch.services.browser import execute_action
from wikisearch.services.wiki_search import WikiSearchSession


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wikisearch",
        description="Search the Terraria wiki.gg wiki page",
    )
    parser.add_argument("query", nargs="+", help="search terms")
    parser.add_argument(
        "--open",
        type=int,
        metavar="N",
        dest="open_index",
        help="open the N-th result (1-based) in the default browser",
    )
    return parser


async def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = get_settings()
    configure_logging(settings.log_level)
    query = " ".join(args.query)

    async with WikiSearchSession(settings) as session:
        results = await session.search(query)

    for result in results:
        sys.stdout.write(result.model_dump_json() + "\n")

    if args.open_index is None:
        return 0
    if not 1 <= args.open_index <= len(results):
        logger.warning("result_index_out_of_range", index=args.open_index, results=len(results))
        return 2
    return 0 if execute_action(results[args.open_index - 1].action) else 1


def run() -> None:
    raise SystemExit(asyncio.run(main()))


if __name__ == "__main__":
    run()
