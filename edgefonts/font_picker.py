#!/usr/bin/env python3
"""
edgefonts – font_picker.py
==========================

Command line front end for the web font catalog.

The catalog is loaded either from a local JSON dump (``--catalog``) or from
the remote ``families`` API, indexed, and then queried:

- ``--search NEEDLE``: ranked substring search by name
- ``--classification TAG``: all families with a design classification
- ``--slug SLUG``: a single family
- ``--list-classifications``: known classifications with their labels
- ``--include SEL``: print the include string for ``slug[:fvds[:subset]]``

Results are printed through a ``render`` callback, one family per line.
"""

import argparse
import asyncio
import logging
import sys
from collections.abc import Callable, Sequence
from pathlib import Path

from edgefonts.catalog_index import CatalogIndex, DataError, FontFamily
from edgefonts.fetch_catalog import FetchError, init_catalog, load_catalog_file
from edgefonts.include import create_include, create_script_tag, parse_selection
from edgefonts.strings import STRINGS, classification_label, localized_classifications

Render = Callable[[Sequence[FontFamily]], None]


def format_family(family: FontFamily) -> str:
    labels = ", ".join(classification_label(c) for c in family.classifications)
    return f"{family.name}  [{family.slug}]  {labels}".rstrip()


def print_families(families: Sequence[FontFamily]) -> None:
    """Default render callback: plain text, one family per line."""
    if not families:
        print(STRINGS["no_results"])
        return
    for family in families:
        print(f"  - {format_family(family)}")


def load_index(catalog: Path | None, api_url: str | None) -> CatalogIndex:
    index = CatalogIndex()
    if catalog is not None:
        index.build(load_catalog_file(catalog))
    else:
        asyncio.run(init_catalog(index, api_url))
    return index


def run(args: argparse.Namespace, render: Render = print_families) -> int:
    if args.include:
        selections = [parse_selection(s) for s in args.include]
        if args.script_tag:
            print(create_script_tag(selections))
        else:
            print(create_include(selections))
        return 0

    if args.list_classifications:
        for entry in localized_classifications():
            print(f"  {entry['class_name']:<12} {entry['localized_name'] or '-'}")
        return 0

    index = load_index(args.catalog, args.api_url)
    print(f"✓ Catalog loaded ({len(index)} families)")

    if args.search is not None:
        print(f"{STRINGS['search_results']} '{args.search}':")
        render(index.search_by_name(args.search))
    elif args.classification:
        print(f"{STRINGS['classification_results']} '{args.classification}':")
        render(index.lookup_by_classification(args.classification))
    elif args.slug:
        family = index.lookup_by_slug(args.slug)
        if family is None:
            print(f"❌ No family with slug '{args.slug}'", file=sys.stderr)
            return 1
        render([family])
    else:
        render(list(index.all_fonts))

    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Search and browse the web font catalog.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument(
        "--catalog",
        type=Path,
        default=None,
        help="Local JSON catalog ({'families': [...]}); if omitted, fetch from the API",
    )
    parser.add_argument(
        "--api-url",
        default=None,
        help="API URL prefix (defaults to $EDGEFONTS_API_URL or the public endpoint)",
    )

    action = parser.add_mutually_exclusive_group()
    action.add_argument("-s", "--search", metavar="NEEDLE", help="Search families by name")
    action.add_argument(
        "-c", "--classification", metavar="TAG", help="List families with a classification"
    )
    action.add_argument("--slug", help="Show the family with this slug")
    action.add_argument(
        "--list-classifications",
        action="store_true",
        help="List known classifications and exit",
    )
    action.add_argument(
        "--include",
        action="append",
        metavar="SLUG[:FVDS[:SUBSET]]",
        help="Print the include string for a font selection (repeatable)",
    )

    parser.add_argument(
        "--script-tag",
        action="store_true",
        help="With --include, wrap the include string in a <script> tag",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def main(argv: Sequence[str] | None = None) -> None:
    """CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.script_tag and not args.include:
        parser.error("--script-tag requires --include")

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s"
        )

    if args.catalog is not None and not args.catalog.exists():
        print(f"❌ Error: catalog file not found: {args.catalog}", file=sys.stderr)
        sys.exit(1)

    try:
        exit_code = run(args)
    except (FetchError, DataError, OSError, ValueError) as e:
        print(f"❌ Error: {e}", file=sys.stderr)
        sys.exit(1)

    sys.exit(exit_code)


if __name__ == "__main__":
    main()
