"""
Quicksearch - Command-line host

Plays the part of a desktop search host: runs a search over the given
terms, prints the described results, and optionally opens one.

Usage:
  quicksearch y lo fi beats
  quicksearch --print-url duckduckgo d cats
  quicksearch --activate open-link example.com
  quicksearch --show-icons b rust
"""

import argparse
import asyncio
import sys
from pathlib import Path

from loguru import logger

from quicksearch.search import ActionNotFound, Cancelled, SearchProvider
from quicksearch.services.host import DesktopHost
from quicksearch.utils.helpers import load_settings


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="quicksearch",
        description="Classify search terms into web actions and open them.",
    )
    parser.add_argument("terms", nargs="+", help="search terms, as typed")
    parser.add_argument("--settings", type=Path, help="settings TOML file")
    parser.add_argument("--max-results", type=int, help="truncate the result list")
    parser.add_argument("--activate", metavar="ID", help="open the destination for this action")
    parser.add_argument("--print-url", metavar="ID", help="print the destination for this action")
    parser.add_argument("--show-icons", action="store_true", help="add the icon each result would use")
    parser.add_argument("-v", "--verbose", action="store_true", help="log debug output")
    return parser


def configure_logging(level: str) -> None:
    logger.remove()
    try:
        logger.add(sys.stderr, level=level)
    except (ValueError, TypeError):
        logger.add(sys.stderr, level="WARNING")
        logger.warning(f"Unknown log level {level!r}, using WARNING")


async def run_search(provider: SearchProvider, terms: list[str], max_results: int):
    """Run one search the way a host does: search, filter, describe."""
    cancellable = provider.host.create_cancel_token()
    ids = await provider.start_search(terms, cancellable)
    ids = provider.filter_results(ids, max_results)
    return await provider.describe_results(ids, cancellable)


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    settings = load_settings(args.settings)
    configure_logging("DEBUG" if args.verbose else settings["logging"]["level"])

    host = DesktopHost.from_settings(settings)
    provider = SearchProvider(host, provider_id=settings["provider"]["id"])
    max_results = args.max_results if args.max_results is not None else settings["search"]["max_results"]

    try:
        metas = asyncio.run(run_search(provider, args.terms, max_results))
        for meta in metas:
            line = f"{meta.id}\t{meta.name}\t{meta.description}"
            if args.show_icons:
                icon = meta.create_icon(settings["icons"]["size"])
                line += f"\t{icon.icon_name}\t{icon.width}x{icon.height}"
            print(line)

        if args.print_url:
            print(provider.resolve_uri(args.print_url, args.terms))
        if args.activate:
            provider.activate(args.activate, args.terms)
    except (ActionNotFound, Cancelled) as e:
        logger.error(str(e))
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
