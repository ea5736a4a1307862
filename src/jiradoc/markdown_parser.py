"""Parse GFM Markdown into an Atlassian Document Format tree."""

from __future__ import annotations

import logging
import re
from typing import Final

from markdown_it import MarkdownIt
from markdown_it.tree import SyntaxTreeNode

from jiradoc.config import (
    JIRADOC_MARKDOWN_PRESET,
    JIRADOC_STRICT_PARSE,
    UNSUPPORTED_NODE_PLACEHOLDER,
)
from jiradoc.exceptions import UnsupportedNodeError
from jiradoc.flatten import flatten
from jiradoc.schemas import Document, Mark, Node

logger = logging.getLogger(__name__)

_CONTAINER_TYPES: Final[dict[str, str]] = {
    "paragraph": "paragraph",
    "blockquote": "blockquote",
    "bullet_list": "bulletList",
    "ordered_list": "orderedList",
    "list_item": "listItem",
    "table": "table",
    "tr": "tableRow",
    "th": "tableCell",
    "td": "tableCell",
}
_STYLE_MARKS: Final[dict[str, str]] = {"strong": "strong", "em": "em", "s": "strike"}
# Structural nodes whose children belong directly to the enclosing node.
_TRANSPARENT_TYPES: Final[frozenset[str]] = frozenset({"inline", "thead", "tbody"})
_TEXT_TYPES: Final[frozenset[str]] = frozenset({"text", "softbreak"})
# Table cells write their line breaks as inline <br> tags.
_LINE_BREAK_TAG: Final[re.Pattern[str]] = re.compile(r"<br\s*/?>", re.IGNORECASE)


def from_markdown(markdown: str, *, strict: bool | None = None) -> Document:
    """Parse GFM Markdown into a document tree.

    Inline styles come back as flat text leaves whose marks list every style
    that applied to them, innermost first. ``***a** b*`` yields ``a`` marked
    ``[strong, em]`` and `` b`` marked ``[em]``.

    Args:
        markdown: Markdown source. Tables, strikethrough and autolinks are
            recognized.
        strict: If True, raise on Markdown constructs the tree cannot
            represent. If False, replace them with a visible placeholder
            leaf. Defaults to ``JIRADOC_STRICT_PARSE``.

    Returns:
        The parsed document. Empty input gives a document without content.

    Raises:
        UnsupportedNodeError: If ``strict`` is set and an unsupported
            construct (an image, raw HTML other than ``<br>``, ...) is found.
    """
    if strict is None:
        strict = JIRADOC_STRICT_PARSE

    md = MarkdownIt(JIRADOC_MARKDOWN_PRESET)
    root = SyntaxTreeNode(md.parse(markdown))

    content: list[Node] = []
    for block in _map_children(root, strict=strict):
        content.extend(flatten(block))

    logger.debug("Parsed %d characters of markdown into %d blocks", len(markdown), len(content))
    return Document(content=content)


def _map_children(node: SyntaxTreeNode, *, strict: bool) -> list[Node]:
    mapped: list[Node] = []
    previous_was_text = False
    for child in node.children:
        if child.type in _TRANSPARENT_TYPES:
            mapped.extend(_map_children(child, strict=strict))
            previous_was_text = False
            continue

        is_text = child.type in _TEXT_TYPES
        if is_text and previous_was_text:
            # A run of text interrupted only by soft line breaks is one leaf.
            mapped[-1] = Node.plain((mapped[-1].text or "") + _plain_text(child))
        else:
            mapped.append(_map_node(child, strict=strict))
        previous_was_text = is_text
    return mapped


def _map_node(node: SyntaxTreeNode, *, strict: bool) -> Node:
    if node.type in _CONTAINER_TYPES:
        return Node(
            type=_CONTAINER_TYPES[node.type],
            content=_map_children(node, strict=strict),
        )

    if node.type == "heading":
        return Node(
            type="heading",
            content=_map_children(node, strict=strict),
            attrs={"level": node.tag.lstrip("h")},
        )

    if node.type == "fence":
        language = node.info.strip().split(maxsplit=1)
        return Node(
            type="codeBlock",
            text=_strip_final_newline(node.content),
            attrs={"language": language[0]} if language else None,
        )

    if node.type == "code_block":
        return Node(type="codeBlock", text=_strip_final_newline(node.content))

    if node.type == "hr":
        return Node(type="rule")

    if node.type == "hardbreak" or (
        node.type == "html_inline" and _LINE_BREAK_TAG.fullmatch(node.content.strip())
    ):
        return Node(type="hardBreak")

    if node.type in _STYLE_MARKS:
        return _wrap(_map_children(node, strict=strict), Mark(type=_STYLE_MARKS[node.type]))

    if node.type == "link":
        title = node.attrs.get("title")
        mark = Mark.link(str(node.attrs.get("href", "")), str(title) if title else None)
        return _wrap(_map_children(node, strict=strict), mark)

    if node.type == "code_inline":
        return _wrap([Node.plain(node.content)], Mark(type="code"))

    if node.type in _TEXT_TYPES:
        return Node.plain(_plain_text(node))

    if strict:
        raise UnsupportedNodeError(node.type)
    logger.warning("Replacing unsupported markdown node %r with a placeholder", node.type)
    return Node.plain(UNSUPPORTED_NODE_PLACEHOLDER)


def _wrap(content: list[Node], mark: Mark) -> Node:
    return Node(type="text", content=content, marks=[mark])


def _plain_text(node: SyntaxTreeNode) -> str:
    return "\n" if node.type == "softbreak" else node.content


def _strip_final_newline(text: str) -> str:
    return text[:-1] if text.endswith("\n") else text
