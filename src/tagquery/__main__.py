#!/usr/bin/env python3
"""Command-line interface for tagquery."""

from __future__ import annotations

import argparse
import logging
import sys
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
from typing import NoReturn

from . import TagQuery
from .errors import FetchError
from .fetch import is_url, load_from_url
from .registry import TagRegistry


def _get_version() -> str:
    try:
        return version("tagquery")
    except PackageNotFoundError:  # pragma: no cover
        return "dev"


def _parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="tagquery",
        description="Parse markup into an element tree and query it with descendant selectors.",
        epilog=(
            "Examples:\n"
            "  tagquery page.html --selector 'div#container .item'\n"
            "  curl -s https://example.com | tagquery - --selector 'ul li'\n"
            "  tagquery https://example.com --selector p --format text\n"
            "\n"
            "If you don't have the 'tagquery' command available, use:\n"
            "  python -m tagquery ...\n"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "path",
        nargs="?",
        help="Markup file to parse, an http(s) URL, or '-' to read from stdin",
    )
    parser.add_argument(
        "--selector",
        help="Descendant selector for choosing elements (defaults to the document root)",
    )
    parser.add_argument(
        "--format",
        choices=["summary", "text"],
        default="summary",
        help="Output format (default: summary)",
    )
    parser.add_argument(
        "--first",
        action="store_true",
        help="Only output the first matching element",
    )
    parser.add_argument(
        "--tags",
        help="JSON file listing known tag names",
    )
    parser.add_argument(
        "--void-tags",
        help="JSON file listing void (self-closing) tag names",
    )
    parser.add_argument(
        "--errors",
        action="store_true",
        help="Report recovered parse errors on stderr",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"tagquery {_get_version()}",
    )

    args = parser.parse_args(argv)

    if not args.path:
        parser.print_help(sys.stderr)
        raise SystemExit(1)

    return args


def _read_markup(path: str) -> str:
    if path == "-":
        return sys.stdin.read()

    if is_url(path):
        return load_from_url(path)

    return Path(path).read_text()


def _summarize(element: object, width: int = 50) -> str:
    text: str = getattr(element, "inner_text", "")
    if len(text) > width:
        text = text[:width] + "..."
    return f"{element}  inner_text={text!r}"


def main(argv: list[str] | None = None) -> NoReturn | None:
    args = _parse_args(sys.argv[1:] if argv is None else argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        markup = _read_markup(args.path)
    except FetchError as e:
        print(str(e), file=sys.stderr)
        raise SystemExit(2) from e

    registry = TagRegistry.from_json_files(args.tags, args.void_tags)
    doc = TagQuery(markup, registry=registry, collect_errors=args.errors)

    if args.errors:
        for error in doc.errors:
            print(str(error), file=sys.stderr)

    nodes = doc.query(args.selector) if args.selector else [doc.root]

    if not nodes:
        raise SystemExit(1)

    if args.first:
        nodes = [nodes[0]]

    if args.format == "text":
        outputs = [node.inner_text for node in nodes]
    else:
        outputs = [_summarize(node) for node in nodes]
    sys.stdout.write("\n".join(outputs))
    sys.stdout.write("\n")
    return None


if __name__ == "__main__":
    main()
