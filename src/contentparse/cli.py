"""CLI entry point for contentparse."""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Iterator

from contentparse.errors import ContentParseError
from contentparse.ingesters import get_ingester, supported_sources
from contentparse.models import Item, Route, SourceItem
from contentparse.parsing import Parser

logger = logging.getLogger(__name__)


def _load_sources(source: str) -> Iterator[SourceItem]:
    """Yield the source items of a folder or zip file, exiting if unsupported."""
    source_path = Path(source)

    ingester = get_ingester(source_path)
    if ingester is None:
        logger.error(f"Cannot process: {source}")
        logger.error(f"Supported inputs: {', '.join(supported_sources())}")
        sys.exit(1)

    logger.debug(f"Ingester: {ingester.source_type}")
    return ingester.ingest(source_path)


def parse(source: str, as_json: bool = False) -> int:
    """Parse every item of a source and print a summary.

    Args:
        source: Path to folder or zip file
        as_json: Print the parsed items as a JSON list

    Returns:
        Exit status: 1 if any item failed to parse
    """
    parser = Parser(logger=logging.getLogger("contentparse.parser"))
    items: list[Item] = []
    failures = 0

    for source_item in _load_sources(source):
        try:
            items.append(parser.parse(source_item))
        except ContentParseError as err:
            failures += 1
            logger.error(str(err))

    if as_json:
        print(json.dumps([item.to_dict() for item in items], indent=2))
    else:
        for item in items:
            route = "/" + item.route.value
            print(f"{route:<40} {item.type.value:<13} {item.title}  ({len(item.files)} files)")

    logger.info(f"Parsed {len(items)} items, {failures} failed")
    return 1 if failures else 0


def show(source: str, route: str) -> int:
    """Print a single parsed item as JSON.

    Args:
        source: Path to folder or zip file
        route: Route of the item (e.g. "docs/guide")
    """
    try:
        wanted = Route.parse(route)
    except ContentParseError as err:
        logger.error(str(err))
        return 1

    for source_item in _load_sources(source):
        if Route.parse(source_item.route) != wanted:
            continue
        try:
            item = Parser().parse(source_item)
        except ContentParseError as err:
            logger.error(str(err))
            return 1
        print(json.dumps(item.to_dict(), indent=2))
        return 0

    logger.error(f"Item not found: {route}")
    return 1


def deck() -> None:
    """Launch the Parse Deck TUI for interactive parsing."""
    from contentparse.parse_deck import main as parse_deck_main

    parse_deck_main()


def main() -> None:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="contentparse",
        description="contentparse - classify and parse content items",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug messages",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    # parse command
    parse_parser = subparsers.add_parser(
        "parse",
        help="Parse every item of a folder or zip",
    )
    parse_parser.add_argument("source", help="Input folder or zip file path")
    parse_parser.add_argument(
        "--json",
        action="store_true",
        help="Print parsed items as JSON",
    )

    # show command
    show_parser = subparsers.add_parser(
        "show",
        help="Print one parsed item as JSON",
    )
    show_parser.add_argument("source", help="Input folder or zip file path")
    show_parser.add_argument("route", help="Route of the item (e.g. docs/guide)")

    # deck command
    subparsers.add_parser(
        "deck",
        help="Launch Parse Deck TUI for interactive parsing",
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(message)s",
    )

    if args.command == "parse":
        sys.exit(parse(args.source, as_json=args.json))
    elif args.command == "show":
        sys.exit(show(args.source, args.route))
    elif args.command == "deck":
        deck()


if __name__ == "__main__":
    main()
