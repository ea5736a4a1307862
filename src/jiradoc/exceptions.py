"""Custom exceptions for jiradoc."""


class JiradocError(Exception):
    """Base exception for jiradoc operations."""


class ParseError(JiradocError):
    """Error while turning Markdown into a document tree."""


class UnsupportedNodeError(ParseError):
    """Markdown construct has no counterpart in the document tree."""

    def __init__(self, kind: str) -> None:
        super().__init__(f"Unsupported markdown node: {kind}")
        self.kind = kind


class InvalidDocumentError(JiradocError):
    """Document tree is missing data required to render it."""
