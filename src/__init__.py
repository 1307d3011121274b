"""
cmark2tex - CommonMark to LaTeX fragment translator

Translates markdown chapters into LaTeX fragments (no preamble) for
inclusion in a larger document build.
"""

__version__ = "0.3.0"

from .lib import (
    Translator,
    markdown_toTex,
    events_toTex,
    markdown_toEvents,
    Cmark2TexError,
    RasterError,
    NestingDepthError,
    LOG,
    state_connectToLogger,
)

__all__ = [
    "Translator",
    "markdown_toTex",
    "events_toTex",
    "markdown_toEvents",
    "Cmark2TexError",
    "RasterError",
    "NestingDepthError",
    "LOG",
    "state_connectToLogger",
    "__version__",
]
