"""jiradoc: convert Jira's Atlassian Document Format to and from Markdown."""

from jiradoc.exceptions import (
    InvalidDocumentError,
    JiradocError,
    ParseError,
    UnsupportedNodeError,
)
from jiradoc.flatten import flatten
from jiradoc.markdown import to_markdown
from jiradoc.markdown_parser import from_markdown
from jiradoc.schemas import Document, Mark, MarkAttrs, Node

__all__ = [
    "Document",
    "InvalidDocumentError",
    "JiradocError",
    "Mark",
    "MarkAttrs",
    "Node",
    "ParseError",
    "UnsupportedNodeError",
    "flatten",
    "from_markdown",
    "to_markdown",
]
