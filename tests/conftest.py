"""Test setup for jiradoc."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from jiradoc.schemas import Document, Mark, Node  # noqa: E402


def _marked(text: str, *marks: Mark) -> Node:
    return Node(type="text", text=text, marks=list(marks))


def _paragraph(*content: Node) -> Node:
    return Node(type="paragraph", content=list(content))


def _table(*rows: list[str]) -> Node:
    return Node(
        type="table",
        content=[
            Node(
                type="tableRow",
                content=[Node(type="tableCell", content=[Node.plain(value)]) for value in row],
            )
            for row in rows
        ],
    )


@pytest.fixture
def stacked_marks_document() -> Document:
    """Paragraph equivalent to ``***Hello**, ~~world!~~*``."""
    strong, em, strike = Mark(type="strong"), Mark(type="em"), Mark(type="strike")
    return Document(
        content=[
            _paragraph(
                _marked("Hello", strong, em),
                _marked(", ", em),
                _marked("world!", strike, em),
            )
        ]
    )


@pytest.fixture
def abc_table() -> Node:
    return _table(["A", "B", "C"], ["1", "2", "3"], ["4", "5", "6"])
