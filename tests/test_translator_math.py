"""
Inline math passthrough tests

Text following a math-open delimiter is emitted verbatim. Delimiters are
detected on a rolling window of recent text, so they may be split across
chunks. Event streams are built by hand to control chunk boundaries.
"""

from cmark2tex.config.settings import AppSettings
from cmark2tex.lib.translator import Translator, events_toTex, markdown_toTex
from cmark2tex.models.events import StartTag, EndTag, Text, PARAGRAPH


PARAGRAPH_END = "~\\\\\n"


def paragraph(*chunks):
    """Event stream for one paragraph made of the given text chunks"""
    return [StartTag(PARAGRAPH), *[Text(chunk) for chunk in chunks], EndTag(PARAGRAPH)]


class TestSingleChunkMath:
    """Math spans contained in one text chunk"""

    def test_inline_math_not_escaped(self):
        r"""\(x_1\) in one chunk keeps its underscore"""
        tex = events_toTex(paragraph(r"\(x_1 + 5%\)"))
        assert tex == "\n\\(x_1 + 5%\\)" + PARAGRAPH_END

    def test_display_math_not_escaped(self):
        r"""\[ ... \] is detected as well"""
        tex = events_toTex(paragraph(r"\[a_b\]"))
        assert tex == "\n\\[a_b\\]" + PARAGRAPH_END

    def test_markdown_escaped_delimiters(self):
        r"""Markdown \\( becomes \( and opens math"""
        tex = markdown_toTex("\\\\(x_1\\\\)")
        assert tex == "\n\\(x_1\\)" + PARAGRAPH_END

    def test_close_delimiter_alone_passes_through(self):
        r"""A window holding only \) still passes the chunk through"""
        tex = events_toTex(paragraph(r"x\)y_z"))
        assert tex == "\nx\\)y_z" + PARAGRAPH_END


class TestSplitDelimiters:
    """Delimiters split across chunk boundaries"""

    def test_escaped_backslash_retracted(self):
        r"""The escaped backslash before a split \( is taken back"""
        tex = events_toTex(paragraph("a \\", "(x_1", "\\)"))
        assert tex == "\na \\(x_1\\)" + PARAGRAPH_END

    def test_non_backslash_not_retracted(self):
        """Retraction only removes a trailing backslash"""
        tex = events_toTex(paragraph("ab", r"\(y\)"))
        assert tex == "\nab\\(y\\)" + PARAGRAPH_END

    def test_window_keeps_math_open_until_cleared(self):
        """While the opening delimiter is still in the window, chunks pass through"""
        tex = events_toTex(paragraph(r"\(", "a_b", "c_d"))
        assert tex == "\n\\(a_bc_d" + PARAGRAPH_END


class TestMathReversion:
    """Math mode lasts for one chunk once the window has been cleared"""

    def test_reverts_after_one_passthrough_chunk(self):
        """Escaping resumes after the first chunk following a cleared window"""
        opening = r"\(" + "a" * 100
        tex = events_toTex(paragraph(opening, "b_c", "d_e"))
        assert tex == "\n" + opening + "b_c" + "d\\_e" + PARAGRAPH_END

    def test_math_mode_flag_cleared(self):
        """Branch 2 clears the math mode flag"""
        translator = Translator()
        translator.translate(paragraph(r"\(" + "a" * 100))
        assert translator.math_mode is True
        translator.translate([Text("b")])
        assert translator.math_mode is False

    def test_window_capacity_setting(self):
        """A smaller window clears sooner"""
        settings = AppSettings(math_window=4)
        tex = events_toTex(paragraph(r"\(abc", "x_y", "z_w"), settings=settings)
        assert tex == "\n\\(abcx_yz\\_w" + PARAGRAPH_END


class TestEscapedContexts:
    """Only text-like contexts are escaped"""

    def test_pending_header_text_recorded(self):
        """Every escaped chunk becomes the pending header text"""
        translator = Translator()
        translator.translate(paragraph("one", "two_2"))
        assert translator.header_value == "two_2"

    def test_rolling_window_bounded_by_clear(self):
        """The window is cleared once it grows past capacity"""
        translator = Translator()
        translator.translate(paragraph("x" * 101, "y"))
        assert translator.window.text == "y"
