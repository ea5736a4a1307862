"""Collapse nested inline wrapper nodes into flat, annotated text leaves."""

from __future__ import annotations

from jiradoc.schemas import Node
from jiradoc.schemas.document import INLINE_LEAF_TYPES, VOID_TYPES


def should_flatten(node: Node) -> bool:
    """Return True if ``node`` is an inline leaf currently used as a wrapper."""
    return node.type in INLINE_LEAF_TYPES and node.content is not None


def flatten(node: Node) -> list[Node]:
    """Flatten a node into the list of nodes that replaces it.

    Wrapper nodes disappear: their descendants are returned in order, each
    carrying its own marks followed by the marks of every wrapper that
    contained it (innermost first). Hard breaks pass through unmarked. Any
    other node is returned as the only element, with its content flattened
    recursively.

    Turns::

        paragraph
          text [em]
            text "This is "
            text [strong]
              text "emphasized bold"

    into::

        paragraph
          text "This is " [em]
          text "emphasized bold" [strong, em]

    The input tree is left untouched.
    """
    if should_flatten(node):
        flattened: list[Node] = []
        for child in node.content or []:
            for leaf in flatten(child):
                if node.marks is not None and leaf.type not in VOID_TYPES:
                    marks = [*leaf.marks, *node.marks] if leaf.marks is not None else list(node.marks)
                    leaf = leaf.model_copy(update={"marks": marks})
                flattened.append(leaf)
        return flattened

    if node.content is None:
        return [node]

    content: list[Node] = []
    for child in node.content:
        content.extend(flatten(child))
    return [node.model_copy(update={"content": content})]
