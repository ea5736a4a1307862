"""Shared schemas for jiradoc."""

from jiradoc.schemas.document import Document, Mark, MarkAttrs, Node

__all__ = ["Document", "Mark", "MarkAttrs", "Node"]
