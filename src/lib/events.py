"""
Markdown to event stream

Tokenizes markdown with markdown-it-py and flattens the token list (block
tokens plus inline children) into the translator's event model.

The stream is shaped the way the translator expects:
- one Start/End pair per construct, text as leaf events
- header cells sit directly inside TableHead (no row wrapper); body rows
  are TableRow
- paragraphs markdown-it marks hidden (tight lists) produce no events
- image alt text is emitted as Text between the Image start and end
- task-list checkboxes become TaskListMarker rather than raw HTML
"""

from typing import Dict, Iterable, Iterator, List, Optional

from markdown_it import MarkdownIt
from markdown_it.token import Token
from mdit_py_plugins.footnote import footnote_plugin
from mdit_py_plugins.tasklists import tasklists_plugin

from ..models.events import (
    Event,
    Tag,
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
    EMPHASIS,
    STRONG,
    PARAGRAPH,
    TABLE,
    TABLE_HEAD,
    TABLE_ROW,
    TABLE_CELL,
    ITEM,
)


TASKLIST_CHECKBOX = "task-list-item-checkbox"

# Token types mapped one-to-one onto attribute-less tags
SIMPLE_TAGS: Dict[str, Tag] = {
    "em": EMPHASIS,
    "strong": STRONG,
    "list_item": ITEM,
    "table": TABLE,
    "thead": TABLE_HEAD,
    "th": TABLE_CELL,
    "td": TABLE_CELL,
}

# Wrappers with no rendering of their own; only their contents matter
OTHER_TAGS = {"blockquote", "s", "footnote_block", "footnote", "tbody"}


def parser_make() -> MarkdownIt:
    """
    CommonMark tokenizer with strikethrough, footnotes, task lists and tables.
    """
    md = MarkdownIt("commonmark")
    # Link and image URLs stay as written, never percent-encoded
    md.normalizeLink = lambda url: url
    md.enable(["table", "strikethrough"])
    md.use(footnote_plugin)
    md.use(tasklists_plugin)
    return md


_PARSER: Optional[MarkdownIt] = None


def parser_get() -> MarkdownIt:
    global _PARSER
    if _PARSER is None:
        _PARSER = parser_make()
    return _PARSER


def markdown_toEvents(markdown: str) -> List[Event]:
    """
    Tokenize markdown into the translator's event stream.

    Args:
        markdown: Document text

    Returns:
        Ordered list of events

    Example:
        >>> [type(event).__name__ for event in markdown_toEvents("Hello")]
        ['StartTag', 'Text', 'EndTag']
    """
    tokens = parser_get().parse(markdown)
    return list(tokens_toEvents(tokens))


def tokens_toEvents(tokens: Iterable[Token]) -> Iterator[Event]:
    """Flatten markdown-it tokens (recursing into inline children)"""
    in_head = False

    for token in tokens:
        kind = token.type

        if kind == "inline":
            yield from taskText_trim(tokens_toEvents(token.children or []))
            continue

        if kind.endswith("_open") or kind.endswith("_close"):
            name, _, side = kind.rpartition("_")
            opening = side == "open"

            if name == "paragraph":
                if not token.hidden:
                    yield StartTag(PARAGRAPH) if opening else EndTag(PARAGRAPH)
                continue

            if name == "thead":
                in_head = opening
            if name == "tr":
                # Head cells belong directly to TableHead
                if not in_head:
                    yield StartTag(TABLE_ROW) if opening else EndTag(TABLE_ROW)
                continue

            tag = tag_fromToken(name, token)
            if tag is not None:
                yield StartTag(tag) if opening else EndTag(tag)
            continue

        yield from leaf_toEvents(token)


def taskText_trim(events: Iterable[Event]) -> Iterator[Event]:
    """Drop the space separating a task-list checkbox from its text"""
    previous: Optional[Event] = None
    for event in events:
        if isinstance(previous, TaskListMarker) and isinstance(event, Text):
            event = Text(event.text.lstrip())
            if not event.text:
                previous = event
                continue
        previous = event
        yield event


def tag_fromToken(name: str, token: Token) -> Optional[Tag]:
    """Tag for an _open/_close token, None for unknown constructs"""
    if name in SIMPLE_TAGS:
        return SIMPLE_TAGS[name]
    if name == "heading":
        return Tag.heading(int(token.tag[1:]))
    if name == "bullet_list":
        return Tag.list_(ordered=False)
    if name == "ordered_list":
        start = token.attrGet("start")
        return Tag.list_(ordered=True, start=int(start) if start is not None else 1)
    if name == "link":
        return Tag.link(str(token.attrGet("href") or ""), str(token.attrGet("title") or ""))
    if name in OTHER_TAGS:
        return Tag.other(name)
    return None


def leaf_toEvents(token: Token) -> Iterator[Event]:
    """Events for a token that does not open or close a construct"""
    kind = token.type

    if kind in ("text", "text_special"):
        if token.content:
            yield Text(token.content)
    elif kind == "code_inline":
        yield InlineCode(token.content)
    elif kind == "softbreak":
        yield SoftBreak()
    elif kind == "hardbreak":
        yield HardBreak()
    elif kind == "html_inline" and TASKLIST_CHECKBOX in token.content:
        yield TaskListMarker(checked='checked="checked"' in token.content)
    elif kind in ("html_inline", "html_block"):
        yield RawHtml(token.content)
    elif kind == "image":
        tag = Tag.image(str(token.attrGet("src") or ""), str(token.attrGet("title") or ""))
        yield StartTag(tag)
        yield from tokens_toEvents(token.children or [])
        yield EndTag(tag)
    elif kind == "fence":
        tag = Tag.code_block(language=token.info.strip())
        yield StartTag(tag)
        yield Text(token.content)
        yield EndTag(tag)
    elif kind == "code_block":
        tag = Tag.code_block(language=None)
        yield StartTag(tag)
        yield Text(token.content)
        yield EndTag(tag)
    elif kind == "footnote_ref":
        yield FootnoteReference(str((token.meta or {}).get("label", "")))
    elif kind == "hr":
        yield Rule()
    # footnote_anchor and anything else: nothing to translate
