"""
Models package for cmark2tex

Contains data structures and type definitions for the translation pipeline.
"""

from .state import ProgramState, pipeline
from .context import TranslationContext, ContextTracker, ESCAPED_CONTEXTS
from .events import (
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
    TaskListMarker,
    FootnoteReference,
    Rule,
)

__all__ = [
    "ProgramState",
    "pipeline",
    "TranslationContext",
    "ContextTracker",
    "ESCAPED_CONTEXTS",
    "Event",
    "Tag",
    "TagKind",
    "StartTag",
    "EndTag",
    "Text",
    "InlineCode",
    "RawHtml",
    "SoftBreak",
    "HardBreak",
    "TaskListMarker",
    "FootnoteReference",
    "Rule",
]
