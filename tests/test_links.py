"""
Link resolution and title extraction tests

Local links resolve to the title of the first document in the link root
whose path ends with the link URL; unresolved links fall back to the URL.
"""

import io

import pytest

from cmark2tex.lib.links import LinkResolver, url_isNetwork, url_stripParents
from cmark2tex.lib.titles import title_extract, title_fromPath
from cmark2tex.lib.translator import markdown_toTex


@pytest.fixture
def doc_tree(tmp_path):
    """A small document tree with two chapters"""
    chapters = tmp_path / "chapters"
    chapters.mkdir()
    (chapters / "intro.md").write_text("# Introduction\n\nWelcome.\n", encoding="utf-8")
    (chapters / "setup.md").write_text("##   Setting things up  \nbody\n", encoding="utf-8")
    (tmp_path / "other").mkdir()
    (tmp_path / "other" / "intro.md").write_text("# Other intro\n", encoding="utf-8")
    return tmp_path


class TestTitleExtraction:
    """First-line title extraction"""

    def test_hashes_and_whitespace_stripped(self):
        """Leading hashes and surrounding whitespace are removed"""
        assert title_extract(io.StringIO("###   Deep Title  \nnext")) == "Deep Title"

    def test_line_without_marker(self):
        """Plain first lines are returned trimmed"""
        assert title_extract(io.StringIO("  Plain title\n")) == "Plain title"

    def test_only_first_line_read(self):
        """The stream is consumed one line only"""
        stream = io.StringIO("# One\n# Two\n")
        title_extract(stream)
        assert stream.readline() == "# Two\n"

    def test_empty_document(self):
        """Empty documents have an empty title"""
        assert title_extract(io.StringIO("")) == ""

    def test_from_path(self, doc_tree):
        """Titles can be read straight from a file"""
        assert title_fromPath(doc_tree / "chapters" / "setup.md") == "Setting things up"


class TestLinkResolver:
    """Document tree search"""

    def test_url_helpers(self):
        """Network detection and parent stripping"""
        assert url_isNetwork("https://example.com")
        assert url_isNetwork("http://example.com")
        assert not url_isNetwork("chapters/intro.md")
        assert url_stripParents("../../chapters/intro.md") == "chapters/intro.md"

    def test_resolves_title(self, doc_tree):
        """A matching file yields its title"""
        resolver = LinkResolver(doc_tree)
        assert resolver.target_resolve("../chapters/intro.md") == "Introduction"

    def test_first_match_in_sorted_order(self, doc_tree):
        """An ambiguous suffix resolves to the first file in walk order"""
        resolver = LinkResolver(doc_tree)
        assert resolver.target_resolve("intro.md") == "Introduction"

    def test_fallback_strips_hashes(self, doc_tree):
        """Unresolved links fall back to the URL without '#'"""
        resolver = LinkResolver(doc_tree)
        assert resolver.target_resolve("missing.md#part") == "missing.mdpart"

    def test_empty_target_not_searched(self, doc_tree):
        """A URL made only of parent segments is not matched against every file"""
        resolver = LinkResolver(doc_tree)
        assert resolver.path_find("../") is None

    def test_missing_root(self, tmp_path):
        """A root that does not exist resolves nothing"""
        resolver = LinkResolver(tmp_path / "nowhere")
        assert resolver.target_resolve("a.md") == "a.md"


class TestLinkTranslation:
    """Links in translated documents"""

    def test_local_link_uses_title(self, doc_tree):
        """Local link label text is the target document title"""
        tex = markdown_toTex("[see](../chapters/setup.md)", link_root=doc_tree)
        assert tex == "\n\\hyperref[Setting things up]{see}~\\\\\n"

    def test_unresolved_local_link(self, doc_tree):
        """Unresolved links use the literal URL without '#'"""
        tex = markdown_toTex("[x](#anchor)", link_root=doc_tree)
        assert tex == "\n\\hyperref[anchor]{x}~\\\\\n"

    def test_network_link_bypasses_resolution(self, doc_tree):
        """http links never touch the document tree"""
        tex = markdown_toTex("[x](https://example.com/intro.md)", link_root=doc_tree)
        assert tex == "\n\\href{https://example.com/intro.md}{x}~\\\\\n"

    def test_non_ascii_fallback_kept_literal(self, doc_tree):
        """Unresolved non-ASCII URLs are not percent-encoded"""
        tex = markdown_toTex("[see](kapitel#Über)", link_root=doc_tree)
        assert tex == "\n\\hyperref[kapitelÜber]{see}~\\\\\n"
        assert "%" not in tex

    def test_non_ascii_target_resolved(self, tmp_path):
        """Files with non-ASCII names are found by their literal name"""
        (tmp_path / "größe.md").write_text("# Größe\n", encoding="utf-8")
        tex = markdown_toTex("[x](größe.md)", link_root=tmp_path)
        assert tex == "\n\\hyperref[Größe]{x}~\\\\\n"

    def test_url_with_spaces(self, tmp_path):
        """Angle-bracket URLs keep their spaces when matched"""
        (tmp_path / "long name.md").write_text("# Long Name\n", encoding="utf-8")
        tex = markdown_toTex("[x](<long name.md>)", link_root=tmp_path)
        assert "\\hyperref[Long Name]{x}" in tex

    def test_binary_target_does_not_fail(self, tmp_path):
        """A link to a non-text file yields a best-effort title"""
        (tmp_path / "plot.png").write_bytes(b"\x89PNG\r\n\x1a\n\xff\xfe")
        tex = markdown_toTex("[plot](plot.png)", link_root=tmp_path)
        assert "\\hyperref[\ufffdPNG]{plot}" in tex
