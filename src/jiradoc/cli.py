"""Convert between Jira ADF JSON and Markdown on the command line."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from jiradoc.config import JIRADOC_JSON_INDENT, JIRADOC_LOG_LEVEL
from jiradoc.exceptions import JiradocError
from jiradoc.markdown import to_markdown
from jiradoc.markdown_parser import from_markdown
from jiradoc.schemas import Document

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=JIRADOC_LOG_LEVEL, format="%(levelname)s %(name)s: %(message)s")

    try:
        source = read_input(args.file)
        if args.command == "to-markdown":
            output = to_markdown(Document.from_json(source))
        else:
            document = from_markdown(source, strict=args.strict)
            output = document.to_json(indent=args.indent) + "\n"
    except (JiradocError, ValidationError, OSError, UnicodeDecodeError) as exc:
        logger.debug("Conversion failed", exc_info=True)
        print(f"jiradoc: {exc}", file=sys.stderr)
        return 1

    sys.stdout.write(output)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="jiradoc",
        description="Convert Jira issue descriptions between ADF JSON and Markdown.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    to_md = subparsers.add_parser("to-markdown", help="Render an ADF JSON document as Markdown")
    to_md.add_argument("file", nargs="?", help="ADF JSON file (defaults to stdin)")

    from_md = subparsers.add_parser("from-markdown", help="Parse Markdown into an ADF JSON document")
    from_md.add_argument("file", nargs="?", help="Markdown file (defaults to stdin)")
    from_md.add_argument(
        "--strict",
        action="store_true",
        default=None,
        help="Fail on Markdown constructs ADF cannot represent instead of inserting a placeholder",
    )
    from_md.add_argument(
        "--indent",
        type=int,
        default=JIRADOC_JSON_INDENT,
        help="JSON indentation (default: %(default)s)",
    )
    return parser


def read_input(file_path: str | None) -> str:
    if not file_path or file_path == "-":
        return sys.stdin.read()

    path = Path(file_path)
    if not path.is_file():
        raise FileNotFoundError(f"Input file not found: {path}")
    return path.read_text(encoding="utf-8")
