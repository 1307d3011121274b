"""
Translation context model

Tracks which construct the translator is currently inside, so text can be
escaped (or not) and table cells bolded (or not) accordingly.
"""

from enum import Enum
from typing import List, Optional


class TranslationContext(Enum):
    """
    Construct types that change how subsequent events are rendered
    """
    TEXT = "text"
    CODE = "code"
    EMPHASIS = "emphasis"
    HEADER = "header"
    HTML = "html"
    STRONG = "strong"
    TABLE = "table"
    TABLE_HEAD = "table_head"


# Contexts in which Text chunks go through math detection and escaping
ESCAPED_CONTEXTS = frozenset({
    TranslationContext.STRONG,
    TranslationContext.EMPHASIS,
    TranslationContext.TEXT,
    TranslationContext.HEADER,
    TranslationContext.TABLE,
})


class ContextTracker:
    """
    Current translation context, single-slot or stacked

    In single-slot mode (the default) entering a construct overwrites the
    slot and leaving only assigns an explicit fallback: the enclosing
    context is forgotten. With stacked=True every enter pushes a frame and
    every leave pops back to the enclosing one.

    Attributes:
        stacked: Whether frames are pushed/popped
        frames: Context frames, innermost last (never empty)

    Example:
        >>> tracker = ContextTracker()
        >>> tracker.enter(TranslationContext.TABLE)
        >>> tracker.enter(TranslationContext.EMPHASIS)
        >>> tracker.leave()
        >>> tracker.current
        <TranslationContext.EMPHASIS: 'emphasis'>
    """

    def __init__(self, stacked: bool = False) -> None:
        self.stacked = stacked
        self.frames: List[TranslationContext] = [TranslationContext.TEXT]

    @property
    def current(self) -> TranslationContext:
        return self.frames[-1]

    def enter(self, context: TranslationContext) -> None:
        """Enter a construct"""
        if self.stacked:
            self.frames.append(context)
        else:
            self.frames[-1] = context

    def leave(self, fallback: Optional[TranslationContext] = None) -> None:
        """
        Leave the innermost construct

        Args:
            fallback: Context assigned in single-slot mode; None keeps the
                      slot as it is
        """
        if self.stacked:
            if len(self.frames) > 1:
                self.frames.pop()
        elif fallback is not None:
            self.frames[-1] = fallback

    def overwrite(self, context: TranslationContext) -> None:
        """Assign the slot without pushing (no-op when stacked)"""
        if not self.stacked:
            self.frames[-1] = context
