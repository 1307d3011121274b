"""
Figure rendering for image events

Every image becomes a centered, full-width figure. SVG images are
rasterized first and the figure references the PNG sibling instead.
"""

from pathlib import Path
from typing import TYPE_CHECKING

from .log import LOG
from .raster import svg_rasterize

if TYPE_CHECKING:
    from ..config.settings import AppSettings


def extension_get(path: str) -> str:
    """Extension without the dot ('' when there is none)"""
    return Path(path).suffix[1:]


def svg_toSibling(path: str, assets_dir: Path) -> str:
    """
    Rasterize an SVG image and write the PNG next to it.

    Args:
        path: Image path as written in the document
        assets_dir: Directory the path is relative to

    Returns:
        The document-relative path of the written PNG

    Raises:
        OSError: If the SVG cannot be read or the PNG written
        RasterError: If the SVG cannot be rasterized
    """
    png_path = str(Path(path).with_suffix(".png").as_posix())
    source = assets_dir / path
    target = assets_dir / png_path

    png = svg_rasterize(source.read_bytes(), source=str(source))

    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_bytes(png)
    LOG(f"Wrote {target} ({len(png)} bytes)", level=2)
    return png_path


def figure_render(path: str, title: str, settings: "AppSettings") -> str:
    """
    LaTeX figure block for an image.

    The caption is the image title, verbatim.
    """
    if extension_get(path) == "svg":
        path = svg_toSibling(path, Path(settings.assets_dir))

    return (
        "\\begin{figure}\n"
        "\\centering\n"
        "\\includegraphics[width=\\textwidth]{"
        f"{settings.image_prefix}{path}"
        "}\n"
        "\\caption{"
        f"{title}"
        "}\n\\end{figure}\n"
    )
