"""
Markdown event stream models

The translator consumes a flat, ordered sequence of events: structural
start/end markers wrapping a Tag, and leaf events carrying text. The shape
follows a pulldown-style stream (one Start/End pair per construct, text
split into chunks) regardless of which tokenizer produced it.
"""

from enum import Enum
from dataclasses import dataclass
from typing import Optional, Union


class TagKind(Enum):
    """
    Kinds of structural constructs that open and close in the stream

    OTHER covers wrappers the translator does not render (blockquotes,
    strikethrough, footnote definitions); their inner events still flow.
    """
    HEADING = "heading"
    EMPHASIS = "emphasis"
    STRONG = "strong"
    LIST = "list"
    PARAGRAPH = "paragraph"
    LINK = "link"
    IMAGE = "image"
    TABLE = "table"
    TABLE_HEAD = "table_head"
    TABLE_ROW = "table_row"
    TABLE_CELL = "table_cell"
    ITEM = "item"
    CODE_BLOCK = "code_block"
    OTHER = "other"


@dataclass(frozen=True)
class Tag:
    """
    A structural construct

    Only the attributes relevant to the construct's kind are populated.

    Attributes:
        kind: Construct kind
        level: Heading level, 1-6 (HEADING)
        ordered: Whether the list is numbered (LIST)
        start: First number of an ordered list, ignored on output (LIST)
        url: Link target (LINK) or image path (IMAGE)
        title: Link or image title text
        language: Fenced info string, None for indented code (CODE_BLOCK)
        name: Source construct name for OTHER tags
    """
    kind: TagKind
    level: int = 0
    ordered: bool = False
    start: Optional[int] = None
    url: str = ""
    title: str = ""
    language: Optional[str] = None
    name: str = ""

    @classmethod
    def heading(cls, level: int) -> "Tag":
        if not 1 <= level <= 6:
            raise ValueError(f"Heading level must be 1-6, got {level}")
        return cls(TagKind.HEADING, level=level)

    @classmethod
    def list_(cls, ordered: bool, start: Optional[int] = None) -> "Tag":
        return cls(TagKind.LIST, ordered=ordered, start=start)

    @classmethod
    def link(cls, url: str, title: str = "") -> "Tag":
        return cls(TagKind.LINK, url=url, title=title)

    @classmethod
    def image(cls, path: str, title: str = "") -> "Tag":
        return cls(TagKind.IMAGE, url=path, title=title)

    @classmethod
    def code_block(cls, language: Optional[str] = None) -> "Tag":
        return cls(TagKind.CODE_BLOCK, language=language)

    @classmethod
    def other(cls, name: str) -> "Tag":
        return cls(TagKind.OTHER, name=name)


# Shorthands for tags without attributes
EMPHASIS = Tag(TagKind.EMPHASIS)
STRONG = Tag(TagKind.STRONG)
PARAGRAPH = Tag(TagKind.PARAGRAPH)
TABLE = Tag(TagKind.TABLE)
TABLE_HEAD = Tag(TagKind.TABLE_HEAD)
TABLE_ROW = Tag(TagKind.TABLE_ROW)
TABLE_CELL = Tag(TagKind.TABLE_CELL)
ITEM = Tag(TagKind.ITEM)


@dataclass(frozen=True)
class StartTag:
    tag: Tag


@dataclass(frozen=True)
class EndTag:
    tag: Tag


@dataclass(frozen=True)
class Text:
    text: str


@dataclass(frozen=True)
class InlineCode:
    text: str


@dataclass(frozen=True)
class RawHtml:
    html: str


@dataclass(frozen=True)
class SoftBreak:
    pass


@dataclass(frozen=True)
class HardBreak:
    pass


@dataclass(frozen=True)
class TaskListMarker:
    checked: bool


@dataclass(frozen=True)
class FootnoteReference:
    label: str


@dataclass(frozen=True)
class Rule:
    pass


Event = Union[
    StartTag,
    EndTag,
    Text,
    InlineCode,
    RawHtml,
    SoftBreak,
    HardBreak,
    TaskListMarker,
    FootnoteReference,
    Rule,
]
