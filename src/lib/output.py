"""
Append-only output buffer with trailing retraction

The translator sometimes has to take back what it just wrote: the last
cell separator of a row, or a backslash that turned out to belong to a
math delimiter. Fragments are kept in a list so appends stay cheap.
"""

from typing import List


class OutputBuffer:
    """
    LaTeX fragment under construction

    Example:
        >>> out = OutputBuffer()
        >>> out.append("a & b & ")
        >>> out.retract(2)
        >>> out.value()
        'a & b '
    """

    def __init__(self) -> None:
        self.parts: List[str] = []
        self.length = 0

    def __len__(self) -> int:
        return self.length

    def append(self, text: str) -> None:
        if text:
            self.parts.append(text)
            self.length += len(text)

    def last(self) -> str:
        """Last character, or empty string when the buffer is empty"""
        for part in reversed(self.parts):
            if part:
                return part[-1]
        return ""

    def retract(self, count: int) -> None:
        """Remove up to `count` trailing characters"""
        while count > 0 and self.parts:
            tail = self.parts[-1]
            if len(tail) <= count:
                self.parts.pop()
                self.length -= len(tail)
                count -= len(tail)
            else:
                self.parts[-1] = tail[:-count]
                self.length -= count
                count = 0

    def retractIf(self, char: str) -> bool:
        """Remove the last character only if it equals `char`"""
        if self.last() == char:
            self.retract(1)
            return True
        return False

    def value(self) -> str:
        """Materialize the buffer (collapses fragments into one)"""
        text = ''.join(self.parts)
        self.parts = [text] if text else []
        return text

    def replaceFrom(self, start: int, token: str, replacement: str) -> bool:
        """
        Replace the first occurrence of `token` at or after offset `start`

        Returns:
            True if the token was found
        """
        text = self.value()
        index = text.find(token, start)
        if index < 0:
            return False
        text = text[:index] + replacement + text[index + len(token):]
        self.parts = [text] if text else []
        self.length = len(text)
        return True
