"""
Document title extraction

A document's title is its first line with leading heading markers and
surrounding whitespace removed; it becomes the target text of cross
references that point at the document.
"""

from pathlib import Path
from typing import TextIO, Union


def title_extract(stream: TextIO) -> str:
    """
    Read the title from the first line of a text stream.

    Only the first line is consumed.

    Args:
        stream: Open text stream positioned at the start of the document

    Returns:
        First line without leading '#' characters, whitespace-trimmed
        (empty string for an empty document)

    Example:
        >>> import io
        >>> title_extract(io.StringIO("## Getting started \\nbody"))
        'Getting started'
    """
    first_line = stream.readline()
    return first_line.lstrip('#').strip()


def title_fromPath(path: Union[str, Path]) -> str:
    """
    Open a document and return its title (OSError propagates)

    Links may point at non-text files; undecodable bytes become U+FFFD
    rather than failing the translation.
    """
    with open(path, 'r', encoding='utf-8', errors='replace') as f:
        return title_extract(f)
