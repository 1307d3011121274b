"""
Text escaping and inline math detection

Plain text is escaped for LaTeX with an ordered list of literal
substitutions. Text that belongs to an inline math span (opened by \\( or
\\[) is passed through verbatim instead. Delimiters can arrive split across
several text chunks, so detection runs on a rolling window of recent text
rather than on the chunk alone.
"""

from typing import Sequence, Tuple


# Applied in order; later rules must not re-match what earlier rules produced
ESCAPE_RULES: Sequence[Tuple[str, str]] = (
    ("\\", "\\\\"),
    ("&", r"\&"),
    (r"\s", r"\textbackslash{}s"),
    (r"\w", r"\textbackslash{}w"),
    ("_", r"\_"),
    (r"\<", "<"),
    ("%", r"\%"),
    ("$", r"\$"),
    ("—", "---"),
    ("#", r"\#"),
)

MATH_OPEN: Sequence[str] = (r"\(", r"\[")
MATH_CLOSE: Sequence[str] = (r"\)", r"\]")

# Inline code normalization
CODE_RULES: Sequence[Tuple[str, str]] = (
    ("…", "..."),
    ("З", "3"),
)
CODE_RULES_HEADER: Sequence[Tuple[str, str]] = (("#", r"\#"),) + tuple(CODE_RULES)
CODE_RULES_BODY: Sequence[Tuple[str, str]] = tuple(CODE_RULES) + (("�", "\\�"),)


def rules_apply(text: str, rules: Sequence[Tuple[str, str]]) -> str:
    """Apply literal (pattern, replacement) pairs left to right"""
    for pattern, replacement in rules:
        text = text.replace(pattern, replacement)
    return text


def text_escape(text: str) -> str:
    r"""
    Escape a text chunk for LaTeX.

    Example:
        >>> text_escape("50% of $5 & co_op #1")
        '50\\% of \\$5 \\& co\\_op \\#1'
    """
    return rules_apply(text, ESCAPE_RULES)


def inlineCode_normalize(text: str, in_header: bool = False) -> str:
    """
    Normalize the body of an inline code span.

    Headers additionally escape '#'; outside headers the Unicode
    replacement character is escaped.
    """
    return rules_apply(text, CODE_RULES_HEADER if in_header else CODE_RULES_BODY)


class MathWindow:
    """
    Rolling window of recent text used to find math delimiters

    The window is cleared (not slid) once it grows past capacity, before
    the next chunk is appended.

    Attributes:
        capacity: Length past which the window is cleared
        text: Accumulated recent text
    """

    def __init__(self, capacity: int = 100) -> None:
        self.capacity = capacity
        self.text = ""

    def push(self, chunk: str) -> None:
        if len(self.text) > self.capacity:
            self.text = ""
        self.text += chunk

    def opens(self) -> bool:
        """Window holds a math-open delimiter"""
        return any(delim in self.text for delim in MATH_OPEN)

    def closes(self) -> bool:
        """Window holds a math-close delimiter"""
        return any(delim in self.text for delim in MATH_CLOSE)
