"""
Unit tests for the command line interface.
"""
import pytest

import main


@pytest.fixture
def chapter_file(tmp_path, chapter_html):
    path = tmp_path / "ch1.xhtml"
    path.write_text(chapter_html, encoding="utf-8")
    return path


class TestCli:
    """Tests for main.py subcommands."""

    def run(self, monkeypatch, *argv):
        monkeypatch.setattr("sys.argv", ["main.py", *argv])
        return main.main()

    def test_no_command(self, monkeypatch, capsys):
        assert self.run(monkeypatch) == 1
        assert "usage" in capsys.readouterr().out

    def test_headings_html(self, monkeypatch, capsys, chapter_file):
        assert self.run(monkeypatch, "headings", str(chapter_file)) == 0

        out = capsys.readouterr().out
        assert '<li><a href="ch1.xhtml#ch1">Chapter One</a>' in out

    def test_headings_ncx_to_file(self, monkeypatch, tmp_path, chapter_file):
        output = tmp_path / "toc.ncx"

        code = self.run(
            monkeypatch,
            "headings",
            str(chapter_file),
            "--format",
            "ncx",
            "--uid",
            "book-1",
            "-o",
            str(output),
        )

        assert code == 0
        content = output.read_text(encoding="utf-8")
        assert '<meta name="dtb:uid" content="book-1"/>' in content
        assert 'id="navPoint-1"' in content

    def test_headings_numbered(self, monkeypatch, capsys, chapter_file):
        assert self.run(monkeypatch, "headings", str(chapter_file), "--numbered") == 0

        assert capsys.readouterr().out.startswith("<ol>")

    def test_headings_missing_file(self, monkeypatch, tmp_path):
        assert self.run(monkeypatch, "headings", str(tmp_path / "x.xhtml")) == 1

    def test_extract_missing_file(self, monkeypatch, tmp_path):
        assert self.run(monkeypatch, "extract", str(tmp_path / "x.epub")) == 1

    def test_extract_broken_file(self, monkeypatch, tmp_path):
        path = tmp_path / "broken.epub"
        path.write_bytes(b"garbage")

        assert self.run(monkeypatch, "extract", str(path)) == 1

    def test_headings_nav_uses_ordered_list(self, monkeypatch, capsys, chapter_file):
        assert self.run(monkeypatch, "headings", str(chapter_file), "--format", "nav") == 0

        out = capsys.readouterr().out
        assert '<nav epub:type="toc" id="toc">' in out
        assert "<ol>" in out
        assert "<ul>" not in out
