"""
Unit tests for core.document module.
"""
from bs4 import BeautifulSoup

from epubtoc.core.document import render_ncx, render_nav, render_contents_page
from epubtoc.core.toc import Toc
from epubtoc.models.toc import TocElement


class TestRenderNcx:
    """Tests for toc.ncx document generation."""

    def test_document_structure(self, nested_toc):
        output = render_ncx(nested_toc, uid="urn:uuid:1234", title="My Book")

        assert output.startswith('<?xml version="1.0" encoding="UTF-8"?>\n')
        assert '<meta name="dtb:uid" content="urn:uuid:1234"/>' in output
        assert '<meta name="dtb:depth" content="2"/>' in output
        assert "<text>My Book</text>" in output
        assert nested_toc.render_epub() in output

    def test_parses_as_xml(self, nested_toc):
        output = render_ncx(nested_toc, uid="id", title="Book")
        soup = BeautifulSoup(output, "html.parser")

        nav_points = soup.find_all("navpoint")
        assert [p["id"] for p in nav_points] == [
            "navPoint-1",
            "navPoint-2",
            "navPoint-3",
            "navPoint-4",
        ]

    def test_empty_toc_has_depth_one(self):
        output = render_ncx(Toc(), uid="id", title="Book")

        assert '<meta name="dtb:depth" content="1"/>' in output

    def test_title_and_uid_escaped(self):
        output = render_ncx(Toc(), uid='a"b&c', title="Tom & Jerry")

        assert 'content="a&quot;b&amp;c"' in output
        assert "<text>Tom &amp; Jerry</text>" in output


class TestRenderNav:
    """Tests for EPUB 3 nav.xhtml generation."""

    def test_nav_contains_ordered_list(self, nested_toc):
        output = render_nav(nested_toc, title="Contents")

        assert '<nav epub:type="toc" id="toc">' in output
        assert "<h1>Contents</h1>" in output
        assert nested_toc.render(True) in output

    def test_always_ordered_list(self, nested_toc):
        output = render_nav(nested_toc, title="Contents")

        assert "<ul>" not in output
        assert output.count("<ol>") == 3


class TestRenderContentsPage:
    """Tests for the inline contents page."""

    def test_page(self, nested_toc):
        output = render_contents_page(nested_toc, title="Table <of> Contents")

        assert "<title>Table &lt;of&gt; Contents</title>" in output
        assert nested_toc.render(False) in output
        assert "epub:type" not in output

    def test_single_entry_still_rendered(self):
        toc = Toc().add(TocElement("#1", "Only"))

        output = render_contents_page(toc, title="Contents", numbered=True)

        assert '<ol>\n<li><a href="#1">Only</a></li>\n\n</ol>\n' in output
