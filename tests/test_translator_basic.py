"""
Basic translation tests - paragraphs, headings, lists, code, breaks

Tests the simplest markdown constructs end to end: markdown source →
event stream → LaTeX fragment.
"""

import pytest

from cmark2tex.lib.translator import markdown_toTex


PARAGRAPH_END = "~\\\\\n"


class TestParagraphs:
    """Test plain paragraphs and the escaping rule table"""

    def test_hello_world(self):
        """Reference fixture: a single plain paragraph"""
        assert markdown_toTex("Hello World") == "\nHello World~\\\\\n"

    def test_empty_document(self):
        """Empty source should produce an empty fragment"""
        assert markdown_toTex("") == ""

    def test_special_characters_escaped(self):
        """&, %, $, _ and # are escaped in running text"""
        tex = markdown_toTex("50% & $5 co_op #1")
        assert tex == "\n50\\% \\& \\$5 co\\_op \\#1" + PARAGRAPH_END

    def test_em_dash_becomes_triple_hyphen(self):
        """Em-dash is rewritten as ---"""
        tex = markdown_toTex("before — after")
        assert tex == "\nbefore --- after" + PARAGRAPH_END

    def test_two_paragraphs(self):
        """Each paragraph gets its own leading newline and terminator"""
        tex = markdown_toTex("First\n\nSecond")
        assert tex == "\nFirst" + PARAGRAPH_END + "\nSecond" + PARAGRAPH_END


class TestHeadings:
    """Test sectioning commands and dual labels"""

    @pytest.mark.parametrize("level,command", [
        (1, "chapter"),
        (2, "section"),
        (3, "subsection"),
        (4, "subsubsection"),
        (5, "paragraph"),
        (6, "subparagraph"),
    ])
    def test_level_to_command(self, level, command):
        """Heading level selects the sectioning command"""
        tex = markdown_toTex("#" * level + " Getting Started")
        assert tex == (
            f"\n\\{command}{{Getting Started}}\n"
            "\\label{Getting Started}\n"
            "\\label{getting-started}\n"
        )

    def test_exactly_two_labels(self):
        """A heading is followed by exactly two label commands"""
        tex = markdown_toTex("## Install Notes")
        assert tex.count("\\label{") == 2

    def test_heading_text_is_escaped(self):
        """Heading text goes through the escaping rule table"""
        tex = markdown_toTex("# 100% done")
        assert tex.startswith("\n\\chapter{100\\% done}\n")
        # The label keeps the literal text
        assert "\\label{100% done}\n" in tex

    def test_inline_code_in_heading_escapes_hash(self):
        """Inside a header, inline code escapes '#'"""
        tex = markdown_toTex("# Run `#x`")
        assert "\\lstinline|\\#x|" in tex
        # Label text is the last text chunk seen, not the whole heading
        assert "\\label{Run }\n" in tex
        assert "\\label{run}\n" in tex

    def test_non_ascii_slug_keeps_letters(self):
        """Slug labels keep non-ASCII letters instead of transliterating"""
        tex = markdown_toTex("# Größe Übersicht")
        assert "\\label{Größe Übersicht}\n" in tex
        assert "\\label{größe-übersicht}\n" in tex


class TestLists:
    """Test itemize and enumerate environments"""

    def test_unordered_list(self):
        """Bullet list becomes itemize"""
        tex = markdown_toTex("- alpha\n- beta")
        assert tex == "\\begin{itemize}\n\\item alpha\n\\item beta\n\\end{itemize}\n"

    def test_ordered_list_ignores_start_number(self):
        """Numbered list becomes enumerate regardless of its start"""
        tex = markdown_toTex("3. alpha\n4. beta")
        assert tex == "\\begin{enumerate}\n\\item alpha\n\\item beta\n\\end{enumerate}\n"

    def test_task_list_markers_dropped(self):
        """Task list checkboxes produce no output"""
        tex = markdown_toTex("- [ ] todo\n- [x] done")
        assert "\\item todo\n" in tex
        assert "\\item done\n" in tex
        assert "[x]" not in tex


class TestCode:
    """Test code blocks and inline code"""

    def test_fenced_block_with_language(self):
        """Fenced language is passed as the listings language"""
        tex = markdown_toTex("```python\nx_1 = 1\n```")
        assert tex == "\\begin{lstlisting}[language=python]\nx_1 = 1\n\n\\end{lstlisting}\n"

    def test_fenced_language_options_stripped(self):
        """Everything from the first comma of the info string is dropped"""
        tex = markdown_toTex("```rust,ignore,no_run\nfn main() {}\n```")
        assert tex.startswith("\\begin{lstlisting}[language=rust]\n")

    def test_indented_block_has_no_language(self):
        """Indented code blocks have no language option"""
        tex = markdown_toTex("    x = 1")
        assert tex == "\\begin{lstlisting}\nx = 1\n\n\\end{lstlisting}\n"

    def test_code_block_text_not_escaped(self):
        """Code content is emitted verbatim"""
        tex = markdown_toTex("```\n50% & $x #y\n```")
        assert "50% & $x #y" in tex

    def test_text_after_code_block_is_escaped(self):
        """Context returns to text after a code block"""
        tex = markdown_toTex("```\na_b\n```\n\nc_d")
        assert "\nc\\_d" + PARAGRAPH_END in tex

    def test_inline_code_normalization(self):
        """Ellipsis and Cyrillic Ze are normalized in inline code"""
        tex = markdown_toTex("Use `a…b З`")
        assert tex == "\nUse \\lstinline|a...b 3|" + PARAGRAPH_END

    def test_inline_code_replacement_character(self):
        """The replacement character is escaped outside headers"""
        tex = markdown_toTex("Bad `\ufffd` byte")
        assert "\\lstinline|\\\ufffd|" in tex


class TestBreaksAndFormatting:
    """Test soft/hard breaks and emphasis"""

    def test_soft_break(self):
        """Soft break becomes a newline"""
        assert markdown_toTex("a\nb") == "\na\nb" + PARAGRAPH_END

    def test_hard_break(self):
        """Hard break becomes a LaTeX line break"""
        assert markdown_toTex("a  \nb") == "\na\\\\\nb" + PARAGRAPH_END

    def test_emphasis_and_strong(self):
        """*x* and **y** map to \\emph and \\textbf"""
        tex = markdown_toTex("*x* and **y**")
        assert tex == "\n\\emph{x} and \\textbf{y}" + PARAGRAPH_END

    def test_network_link(self):
        """http(s) links become \\href"""
        tex = markdown_toTex("[NASA](https://nasa.gov)")
        assert tex == "\n\\href{https://nasa.gov}{NASA}" + PARAGRAPH_END

    def test_image_reference_fixture(self):
        """Reference fixture: image becomes a figure with empty caption"""
        tex = markdown_toTex("![](image.png)")
        assert tex == (
            "\n\\begin{figure}\n\\centering\n"
            "\\includegraphics[width=\\textwidth]{../../src/image.png}\n"
            "\\caption{}\n\\end{figure}\n~\\\\\n"
        )

    def test_image_caption_from_title(self):
        """The caption is the image title, not escaped"""
        tex = markdown_toTex('![](plot.png "Growth_rate 5%")')
        assert "\\caption{Growth_rate 5%}\n" in tex
