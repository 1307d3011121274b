"""
Error types raised by the translator

I/O failures (reading the source, reading or writing images, reading link
targets) propagate as the built-in OSError family and are not wrapped.
"""


class Cmark2TexError(Exception):
    """Base class for translation failures"""
    pass


class RasterError(Cmark2TexError):
    """Raised when vector image data cannot be parsed or rasterized"""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Unable to rasterize '{path}': {reason}")


class NestingDepthError(Cmark2TexError):
    """Raised when embedded raw HTML nests deeper than the configured limit"""

    def __init__(self, depth: int, limit: int):
        self.depth = depth
        self.limit = limit
        super().__init__(
            f"Raw HTML nesting depth {depth} exceeds limit of {limit}"
        )
