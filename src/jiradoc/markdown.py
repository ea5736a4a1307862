"""Render Atlassian Document Format trees as Markdown."""

from __future__ import annotations

import logging
from typing import Final

from jiradoc.exceptions import InvalidDocumentError
from jiradoc.schemas import Document, Mark, Node
from jiradoc.schemas.document import HEADING_LEVELS, INLINE_LEAF_TYPES

logger = logging.getLogger(__name__)

# Nodes that do not end their own output with a newline.
_INLINE_TYPES: Final[frozenset[str]] = INLINE_LEAF_TYPES | {
    "listItem",
    "tableCell",
    "tableRow",
    "table",
}

_MARK_DELIMITERS: Final[dict[str, tuple[str, str]]] = {
    "strong": ("**", "**"),
    "em": ("*", "*"),
    "strike": ("~~", "~~"),
    "code": ("`", "`"),
}


def to_markdown(document: Document) -> str:
    """Render a document tree as Markdown.

    Each text leaf opens the delimiters of its marks in order and closes them
    in reverse, independently of its neighbours. Leaves with overlapping but
    different mark sets therefore produce delimiter runs such as
    ``***Hello****, *``, which Markdown parsers read back only approximately.

    Args:
        document: The document to render.

    Returns:
        The Markdown text; an empty document renders as an empty string.

    Raises:
        InvalidDocumentError: If a heading built without validation has no
            usable level.
    """
    markdown = "".join(_render_node(node) for node in document.content)
    logger.debug("Rendered %d blocks into %d characters of markdown", len(document.content), len(markdown))
    return markdown


def column_widths(row: Node) -> list[int]:
    """Return the rendered width of each cell in a table row."""
    return [len(_render_cell(cell)) for cell in row.content or []]


def _render_node(node: Node) -> str:
    if node.type == "codeBlock":
        return _render_code_block(node)

    if node.type == "blockquote":
        return _prefix_lines(_render_children(node), "> ")

    if node.type == "heading":
        return f"{'#' * _heading_level(node)} {_render_children(node)}\n"

    if node.type == "orderedList":
        return "".join(
            _render_list_item(item, f"{index}. ")
            for index, item in enumerate(node.content or [], start=1)
        )

    if node.type == "bulletList":
        return "".join(_render_list_item(item, "* ") for item in node.content or [])

    if node.type == "table":
        return _render_table(node)

    if node.type == "tableRow":
        return _render_table_row(node)

    if node.type == "rule":
        return "\n---\n\n"

    if node.type == "hardBreak":
        return "\n"

    return _render_standard(node)


def _render_children(node: Node) -> str:
    return "".join(_render_node(child) for child in node.content or [])


def _render_standard(node: Node) -> str:
    marks = node.marks or []
    parts = [_open_mark(mark) for mark in marks]
    if node.text is not None:
        parts.append(node.text)
    parts.append(_render_children(node))
    parts.extend(_close_mark(mark) for mark in reversed(marks))
    if node.type not in _INLINE_TYPES:
        parts.append("\n")
    return "".join(parts)


def _open_mark(mark: Mark) -> str:
    if mark.type == "link":
        return "["
    return _MARK_DELIMITERS.get(mark.type, ("", ""))[0]


def _close_mark(mark: Mark) -> str:
    if mark.type != "link":
        return _MARK_DELIMITERS.get(mark.type, ("", ""))[1]
    href = mark.attrs.href if mark.attrs and mark.attrs.href else ""
    title = f' "{_escape_title(mark.attrs.title)}"' if mark.attrs and mark.attrs.title else ""
    return f"]({href}{title})"


def _escape_title(title: str) -> str:
    return title.replace("\\", "\\\\").replace('"', '\\"')


def _render_code_block(node: Node) -> str:
    language = (node.attrs or {}).get("language", "")
    return f"```{language}\n{node.text or ''}\n```\n"


def _heading_level(node: Node) -> int:
    level = (node.attrs or {}).get("level")
    if level not in HEADING_LEVELS:
        raise InvalidDocumentError(f"Heading has no valid level attribute: {level!r}")
    return int(level)


def _prefix_lines(text: str, prefix: str) -> str:
    return "".join(prefix + line for line in text.splitlines(keepends=True))


def _render_list_item(item: Node, marker: str) -> str:
    body = _render_node(item)
    if not body.endswith("\n"):
        body += "\n"
    first, *rest = body.splitlines(keepends=True)
    # Continuation lines sit under the item text so nested blocks stay nested.
    indent = " " * len(marker)
    return marker + first + "".join(indent + line if line.strip() else line for line in rest)


def _render_table(table: Node) -> str:
    rows = table.content or []
    if not rows:
        return ""

    # The separator row depends on the rendered header, so measure it first.
    widths = column_widths(rows[0])
    lines = [
        _render_table_row(rows[0]),
        "|" + "".join("-" * (width + 2) + "|" for width in widths) + "\n",
    ]
    lines.extend(_render_table_row(row) for row in rows[1:])
    return "".join(lines)


def _render_table_row(row: Node) -> str:
    cells = [_render_cell(cell) for cell in row.content or []]
    return "| " + " | ".join(cells) + " |\n"


def _render_cell(cell: Node) -> str:
    text = _render_node(cell).rstrip("\n")
    return text.replace("|", "\\|").replace("\n", "<br>")
