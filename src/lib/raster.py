"""
SVG rasterization

Thin adapter over cairosvg: vector bytes in, PNG bytes out, rendered at
the document's declared size.
"""

from .errors import RasterError
from .log import LOG


def svg_rasterize(data: bytes, source: str = "<svg>") -> bytes:
    """
    Rasterize SVG data to PNG.

    Args:
        data: Raw SVG document bytes
        source: Name used in log and error messages

    Returns:
        PNG-encoded image bytes

    Raises:
        RasterError: If the SVG cannot be parsed or rendered
    """
    # Imported lazily: cairosvg loads the native cairo library on import
    import cairosvg

    LOG(f"Rasterizing {source} ({len(data)} bytes)", level=2)
    try:
        png = cairosvg.svg2png(bytestring=data)
    except Exception as e:
        raise RasterError(source, str(e) or type(e).__name__) from e

    if not png:
        raise RasterError(source, "renderer produced no output")
    return png
