"""
Translator for markdown event streams to LaTeX

Consumes an ordered event stream in a single forward pass and builds a
LaTeX fragment (no preamble) suitable for \\input into a larger document.

Key behaviors:
- Context-sensitive escaping: text is escaped inside paragraphs, headers,
  emphasis and tables, passed through verbatim in code and raw HTML
- Inline math passthrough: text following a \\( or \\[ delimiter is not
  escaped (detected on a rolling window so split delimiters are found)
- Headings carry two labels, the literal heading text and its slug
- Tables become longtables with equal-width columns synthesized at close
- Local links resolve to the title of the linked document
- SVG images are rasterized to PNG siblings
- Embedded raw HTML is converted to markdown and translated recursively

Example:
    >>> markdown_toTex("Hello World")
    '\\nHello World~\\\\\\\\\\n'
"""

import re
from pathlib import Path
from typing import Callable, Dict, Iterable, Optional, Union, TYPE_CHECKING

from markdownify import markdownify
from slugify import slugify

from ..models.context import ContextTracker, TranslationContext, ESCAPED_CONTEXTS
from ..models.events import (
    Event,
    Tag,
    TagKind,
    StartTag,
    EndTag,
    Text,
    InlineCode,
    RawHtml,
    SoftBreak,
    HardBreak,
)
from .errors import NestingDepthError
from .escaping import MathWindow, text_escape, inlineCode_normalize
from .events import markdown_toEvents
from .figures import figure_render
from .links import LinkResolver, url_isNetwork
from .output import OutputBuffer
from .tables import TableLayout
from .log import LOG

if TYPE_CHECKING:
    from ..config.settings import AppSettings


SECTIONING: Dict[int, str] = {
    1: "chapter",
    2: "section",
    3: "subsection",
    4: "subsubsection",
    5: "paragraph",
    6: "subparagraph",
}

# Fenced info strings like "rust,ignore" keep only the language
LANGUAGE_OPTIONS = re.compile(r",.*")


class Translator:
    """
    Event stream to LaTeX state machine

    One instance translates one document; nested raw HTML gets its own
    instance one level deeper.

    Attributes:
        settings: Configuration (placeholder token, prefixes, limits)
        depth: Raw HTML nesting depth of this instance (0 = top level)
        out: Output buffer
        context: Current translation context
        window: Rolling text window for math delimiter detection
        math_mode: True right after an opening math delimiter
        header_value: Most recent escaped-context text chunk, used for
                      heading labels
        table: Table layout synthesizer
        links: Local link resolver
    """

    def __init__(
        self,
        settings: Optional["AppSettings"] = None,
        link_root: Optional[Union[str, Path]] = None,
        depth: int = 0,
    ) -> None:
        if settings is None:
            from ..config import appsettings
            settings = appsettings
        self.settings = settings
        self.depth = depth
        self.link_root = Path(link_root if link_root is not None else settings.link_root)

        if depth > settings.max_nesting_depth:
            raise NestingDepthError(depth, settings.max_nesting_depth)

        self.out = OutputBuffer()
        self.context = ContextTracker(stacked=settings.context_stack)
        self.window = MathWindow(settings.math_window)
        self.math_mode = False
        self.header_value = ""
        self.table = TableLayout(settings)
        self.links = LinkResolver(self.link_root)

        self.start_handlers: Dict[TagKind, Callable[[Tag], None]] = {
            TagKind.HEADING: self.heading_start,
            TagKind.EMPHASIS: self.emphasis_start,
            TagKind.STRONG: self.strong_start,
            TagKind.LIST: self.list_start,
            TagKind.PARAGRAPH: self.paragraph_start,
            TagKind.LINK: self.link_start,
            TagKind.IMAGE: self.image_start,
            TagKind.TABLE: self.table_start,
            TagKind.TABLE_HEAD: self.tableHead_start,
            TagKind.TABLE_ROW: self.tableRow_start,
            TagKind.TABLE_CELL: self.tableCell_start,
            TagKind.ITEM: self.item_start,
            TagKind.CODE_BLOCK: self.codeBlock_start,
        }
        self.end_handlers: Dict[TagKind, Callable[[Tag], None]] = {
            TagKind.HEADING: self.heading_end,
            TagKind.EMPHASIS: self.emphasis_end,
            TagKind.STRONG: self.strong_end,
            TagKind.LIST: self.list_end,
            TagKind.PARAGRAPH: self.paragraph_end,
            TagKind.LINK: self.link_end,
            TagKind.TABLE: self.table_end,
            TagKind.TABLE_HEAD: self.tableHead_end,
            TagKind.TABLE_ROW: self.tableRow_end,
            TagKind.TABLE_CELL: self.tableCell_end,
            TagKind.ITEM: self.item_end,
            TagKind.CODE_BLOCK: self.codeBlock_end,
        }

    def translate(self, events: Iterable[Event]) -> str:
        """
        Translate an event stream to a LaTeX fragment.

        Args:
            events: Ordered events, consumed once

        Returns:
            LaTeX fragment

        Raises:
            OSError: Image or link target I/O failed
            RasterError: An SVG image could not be rasterized
            NestingDepthError: Raw HTML nested too deeply
        """
        for event in events:
            LOG(f"Event: {event!r}", level=3, force=self.settings.debug_mode)
            self.event_dispatch(event)
        return self.out.value()

    def event_dispatch(self, event: Event) -> None:
        """Route one event to its handler; unknown events are ignored"""
        if isinstance(event, StartTag):
            start = self.start_handlers.get(event.tag.kind)
            if start:
                start(event.tag)
        elif isinstance(event, EndTag):
            end = self.end_handlers.get(event.tag.kind)
            if end:
                end(event.tag)
        elif isinstance(event, Text):
            self.text_emit(event.text)
        elif isinstance(event, InlineCode):
            self.inlineCode_emit(event.text)
        elif isinstance(event, RawHtml):
            self.rawHtml_emit(event.html)
        elif isinstance(event, SoftBreak):
            self.out.append("\n")
        elif isinstance(event, HardBreak):
            self.out.append("\\\\")
            self.out.append("\n")

    # Headings -----------------------------------------------------------

    def heading_start(self, tag: Tag) -> None:
        self.context.enter(TranslationContext.HEADER)
        self.out.append("\n")
        self.out.append("\\")
        self.out.append(SECTIONING[tag.level] + "{")

    def heading_end(self, tag: Tag) -> None:
        self.out.append("}\n")
        self.out.append(f"\\label{{{self.header_value}}}\n")
        self.out.append(f"\\label{{{slugify(self.header_value, allow_unicode=True)}}}\n")
        self.context.leave()

    # Inline formatting --------------------------------------------------

    def emphasis_start(self, tag: Tag) -> None:
        self.context.enter(TranslationContext.EMPHASIS)
        self.out.append("\\emph{")

    def emphasis_end(self, tag: Tag) -> None:
        self.out.append("}")
        self.context.leave()

    def strong_start(self, tag: Tag) -> None:
        self.context.enter(TranslationContext.STRONG)
        self.out.append("\\textbf{")

    def strong_end(self, tag: Tag) -> None:
        self.out.append("}")
        self.context.leave()

    # Blocks -------------------------------------------------------------

    def list_start(self, tag: Tag) -> None:
        environment = "enumerate" if tag.ordered else "itemize"
        self.out.append(f"\\begin{{{environment}}}\n")

    def list_end(self, tag: Tag) -> None:
        environment = "enumerate" if tag.ordered else "itemize"
        self.out.append(f"\\end{{{environment}}}\n")

    def paragraph_start(self, tag: Tag) -> None:
        self.out.append("\n")

    def paragraph_end(self, tag: Tag) -> None:
        # "~" keeps empty lines from failing with "There's no line here to end"
        self.out.append(r"~\\")
        self.out.append("\n")

    def item_start(self, tag: Tag) -> None:
        self.out.append("\\item ")

    def item_end(self, tag: Tag) -> None:
        self.out.append("\n")

    def codeBlock_start(self, tag: Tag) -> None:
        self.context.enter(TranslationContext.CODE)
        if tag.language is not None:
            language = LANGUAGE_OPTIONS.sub("", tag.language, count=1)
            self.out.append(f"\\begin{{lstlisting}}[language={language}]\n")
        else:
            self.out.append("\\begin{lstlisting}\n")

    def codeBlock_end(self, tag: Tag) -> None:
        self.out.append("\n\\end{lstlisting}\n")
        self.context.leave(TranslationContext.TEXT)

    # Links and images ---------------------------------------------------

    def link_start(self, tag: Tag) -> None:
        if url_isNetwork(tag.url):
            self.out.append(f"\\href{{{tag.url}}}{{")
        else:
            self.out.append("\\hyperref[")
            self.out.append(self.links.target_resolve(tag.url))
            self.out.append("]{")

    def link_end(self, tag: Tag) -> None:
        self.out.append("}")

    def image_start(self, tag: Tag) -> None:
        self.out.append(figure_render(tag.url, tag.title, self.settings))

    # Tables -------------------------------------------------------------

    def table_start(self, tag: Tag) -> None:
        self.context.enter(TranslationContext.TABLE)
        self.table.preamble_emit(self.out)

    def tableHead_start(self, tag: Tag) -> None:
        self.context.enter(TranslationContext.TABLE_HEAD)

    def tableHead_end(self, tag: Tag) -> None:
        self.table.head_close(self.out)
        # A body presumably follows every head
        self.context.leave(TranslationContext.TABLE)

    def tableRow_start(self, tag: Tag) -> None:
        self.context.overwrite(TranslationContext.TABLE)

    def tableRow_end(self, tag: Tag) -> None:
        self.table.row_close(self.out)

    def tableCell_start(self, tag: Tag) -> None:
        if self.context.current is TranslationContext.TABLE_HEAD:
            self.table.headCell_open(self.out)

    def tableCell_end(self, tag: Tag) -> None:
        self.table.cell_close(
            self.out, in_head=self.context.current is TranslationContext.TABLE_HEAD
        )

    def table_end(self, tag: Tag) -> None:
        self.table.table_close(self.out)
        self.context.leave(TranslationContext.TEXT)

    # Leaves -------------------------------------------------------------

    def inlineCode_emit(self, text: str) -> None:
        in_header = self.context.current is TranslationContext.HEADER
        self.out.append("\\lstinline|")
        self.out.append(inlineCode_normalize(text, in_header=in_header))
        self.out.append("|")

    def rawHtml_emit(self, html: str) -> None:
        """Convert raw HTML to markdown and splice in its translation"""
        self.context.enter(TranslationContext.HTML)
        normalized = markdownify(html)
        LOG(f"Raw HTML at depth {self.depth} normalized to {normalized!r}", level=3,
            force=self.settings.debug_mode)
        nested = markdown_toTex(
            normalized,
            link_root=self.link_root,
            settings=self.settings,
            depth=self.depth + 1,
        )
        self.out.append(nested)
        self.context.leave(TranslationContext.TEXT)

    def text_emit(self, text: str) -> None:
        """
        Emit a text chunk, escaping it unless it belongs to inline math

        Branches, in order:
        1. window holds an opening delimiter: verbatim, math mode on
        2. window holds a closing delimiter, or math mode is on: verbatim,
           math mode off (a long span therefore reverts to escaping after
           one chunk once the window has been cleared)
        3. otherwise: escape
        A backslash just before verbatim text is retracted, since it was
        the escaped half of the delimiter.
        """
        self.window.push(text)

        if self.context.current not in ESCAPED_CONTEXTS:
            self.out.append(text)
            return

        LOG(f"context: {self.context.current}, math_mode: {self.math_mode}", level=3,
            force=self.settings.debug_mode)

        if self.window.opens():
            self.out.retractIf("\\")
            self.out.append(text)
            self.math_mode = True
        elif self.window.closes() or self.math_mode:
            self.out.retractIf("\\")
            self.out.append(text)
            self.math_mode = False
        else:
            self.out.append(text_escape(text))

        self.header_value = text


def events_toTex(
    events: Iterable[Event],
    *,
    link_root: Optional[Union[str, Path]] = None,
    settings: Optional["AppSettings"] = None,
    depth: int = 0,
) -> str:
    """
    Translate an event stream to a LaTeX fragment.

    Args:
        events: Ordered event stream
        link_root: Document tree for local links (defaults to settings.link_root)
        settings: Configuration (defaults to the appsettings singleton)
        depth: Raw HTML nesting depth (callers normally leave this at 0)

    Returns:
        LaTeX fragment
    """
    translator = Translator(settings=settings, link_root=link_root, depth=depth)
    return translator.translate(events)


def markdown_toTex(
    markdown: str,
    *,
    link_root: Optional[Union[str, Path]] = None,
    settings: Optional["AppSettings"] = None,
    depth: int = 0,
) -> str:
    """
    Translate a markdown document to a LaTeX fragment.

    Parses with CommonMark plus strikethrough, footnotes, task lists and
    tables, then runs the event stream through a Translator.
    """
    return events_toTex(
        markdown_toEvents(markdown),
        link_root=link_root,
        settings=settings,
        depth=depth,
    )
