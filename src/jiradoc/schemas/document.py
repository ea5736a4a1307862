"""Atlassian Document Format tree models."""

from __future__ import annotations

from typing import Any, Final, Literal

from pydantic import BaseModel, Field, field_validator, model_validator

NodeType = Literal[
    "paragraph",
    "blockquote",
    "heading",
    "orderedList",
    "bulletList",
    "listItem",
    "table",
    "tableRow",
    "tableCell",
    "text",
    "code",
    "inlineCard",
    "mention",
    "emoji",
    "codeBlock",
    "rule",
    "hardBreak",
]
MarkType = Literal["strong", "em", "strike", "code", "link"]

CONTAINER_TYPES: Final[frozenset[str]] = frozenset(
    {
        "paragraph",
        "blockquote",
        "heading",
        "orderedList",
        "bulletList",
        "listItem",
        "table",
        "tableRow",
        "tableCell",
    }
)
VOID_TYPES: Final[frozenset[str]] = frozenset({"rule", "hardBreak"})
# Leaf tags that may transiently wrap other inline nodes while parsing.
INLINE_LEAF_TYPES: Final[frozenset[str]] = frozenset(
    {"text", "code", "inlineCard", "mention", "emoji"}
)
HEADING_LEVELS: Final[frozenset[str]] = frozenset(str(level) for level in range(1, 7))


class MarkAttrs(BaseModel):
    """Attributes of a ``link`` mark."""

    href: str | None = None
    title: str | None = None


class Mark(BaseModel):
    """An inline style annotation attached to a text leaf.

    The order of marks on a node is significant: it is the order in which
    Markdown delimiters are opened when the node is serialized.
    """

    type: MarkType
    attrs: MarkAttrs | None = None

    @classmethod
    def link(cls, href: str, title: str | None = None) -> Mark:
        """Create a link mark pointing at ``href``."""
        return cls(type="link", attrs=MarkAttrs(href=href, title=title))


class Node(BaseModel):
    """One element of the document tree.

    Which optional fields are meaningful depends on ``type``: containers
    hold ``content``, leaves hold ``text`` (and optionally ``marks``),
    ``codeBlock`` holds ``text`` plus ``attrs`` and void nodes hold nothing.
    A ``text`` node that holds ``content`` is a wrapper left over from
    parsing; :func:`jiradoc.flatten.flatten` removes those.
    """

    type: NodeType
    content: list[Node] | None = None
    text: str | None = None
    marks: list[Mark] | None = None
    attrs: dict[str, str] | None = None

    @field_validator("attrs", mode="before")
    @classmethod
    def stringify_attrs(cls, value: Any) -> Any:
        # Jira sends numeric attributes such as the heading level as integers.
        if not isinstance(value, dict):
            return value
        return {
            key: str(item) if isinstance(item, int) and not isinstance(item, bool) else item
            for key, item in value.items()
            if item is not None
        }

    @model_validator(mode="after")
    def check_shape(self) -> Node:
        if self.text is not None and self.content is not None:
            raise ValueError(f"'{self.type}' node cannot carry both text and content")
        if self.type in CONTAINER_TYPES and self.text is not None:
            raise ValueError(f"'{self.type}' node cannot carry text")
        if self.type == "codeBlock" and self.content is not None:
            raise ValueError("'codeBlock' node cannot carry content")
        if self.type in VOID_TYPES and any(
            field is not None for field in (self.text, self.content, self.marks)
        ):
            raise ValueError(f"'{self.type}' node cannot carry text, content or marks")
        if self.type == "heading" and (self.attrs or {}).get("level") not in HEADING_LEVELS:
            raise ValueError("'heading' node requires a level attribute between 1 and 6")
        return self

    @classmethod
    def plain(cls, text: str) -> Node:
        """Create an unannotated text leaf."""
        return cls(type="text", text=text)

    @classmethod
    def paragraph(cls, text: str) -> Node:
        """Create a paragraph holding a single unannotated text leaf."""
        return cls(type="paragraph", content=[cls.plain(text)])


class Document(BaseModel):
    """Root of an Atlassian Document Format tree."""

    version: Literal[1] = 1
    type: Literal["doc"] = "doc"
    content: list[Node] = Field(default_factory=list)

    @classmethod
    def from_text(cls, text: str) -> Document:
        """Create a single-paragraph document without any markup."""
        return cls(content=[Node.paragraph(text)])

    @classmethod
    def text(cls, text: str) -> Document:
        """Alias of :meth:`from_text`."""
        return cls.from_text(text)

    @classmethod
    def from_markdown(cls, markdown: str, *, strict: bool | None = None) -> Document:
        """Parse Markdown into a document. See :func:`jiradoc.markdown_parser.from_markdown`."""
        from jiradoc.markdown_parser import from_markdown

        return from_markdown(markdown, strict=strict)

    def to_markdown(self) -> str:
        """Render this document as Markdown. See :func:`jiradoc.markdown.to_markdown`."""
        from jiradoc.markdown import to_markdown

        return to_markdown(self)

    @classmethod
    def from_adf(cls, data: dict[str, Any]) -> Document:
        """Validate an ADF payload as received from the Jira REST API."""
        return cls.model_validate(data)

    def to_adf(self) -> dict[str, Any]:
        """Return the ADF payload, omitting absent optional fields."""
        return self.model_dump(mode="json", exclude_none=True)

    @classmethod
    def from_json(cls, data: str | bytes) -> Document:
        return cls.model_validate_json(data)

    def to_json(self, *, indent: int | None = None) -> str:
        return self.model_dump_json(exclude_none=True, indent=indent)
