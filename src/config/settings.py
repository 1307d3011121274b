"""
Application settings and configuration

Uses pydantic-settings for type-safe configuration via environment variables.
All settings use CMARK2TEX_ prefix (e.g., CMARK2TEX_LINK_ROOT=docs/src).

Settings can also be loaded from a .env file in the project root.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """
    Application configuration via environment variables.

    Environment variables use CMARK2TEX_ prefix.

    Examples:
        CMARK2TEX_LINK_ROOT=../../src
        CMARK2TEX_IMAGE_PREFIX=figures/
        CMARK2TEX_MAX_NESTING_DEPTH=8
    """

    model_config = SettingsConfigDict(
        env_prefix="CMARK2TEX_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Cross-reference configuration
    link_root: str = Field(
        default="../../src",
        description="Document tree searched (recursively) when resolving local links",
    )

    # Image configuration
    image_prefix: str = Field(
        default="../../src/",
        description="Relative path segment prepended to every \\includegraphics reference",
    )

    assets_dir: str = Field(
        default=".",
        description="Directory image paths are read from and rasterized siblings written to",
    )

    # Translation configuration
    math_window: int = Field(
        default=100,
        description="Capacity of the rolling text window used to detect split math delimiters",
    )

    max_nesting_depth: int = Field(
        default=32,
        description="Maximum recursion depth for translating embedded raw HTML",
    )

    context_stack: bool = Field(
        default=False,
        description="Track formatting context as a stack instead of a single slot",
    )

    table_placeholder: str = Field(
        default="!!!",
        description="Token standing in for the longtable column specification until table close",
    )

    debug_mode: bool = Field(
        default=False,
        description="Log every translated event regardless of verbosity",
    )

    def columnSpec_make(self, cells: int) -> str:
        """
        Build the longtable column specification for a table.

        Each header cell gets an equal share of the text width.

        Args:
            cells: Number of header cells counted while the table was open

        Returns:
            Column specification string (empty when there are no cells)

        Example:
            >>> settings = AppSettings()
            >>> settings.columnSpec_make(2)
            'C{0.5\\\\textwidth} C{0.5\\\\textwidth} '
        """
        if cells <= 0:
            return ""
        width = width_format(1.0 / cells)
        return "".join(f"C{{{width}\\textwidth}} " for _ in range(cells))


def width_format(width: float) -> str:
    """Shortest round-trip decimal, integral values without a trailing '.0'"""
    text = repr(width)
    if text.endswith(".0"):
        text = text[:-2]
    return text


# Singleton instance - import this in your code
appsettings = AppSettings()
