import asyncio

from dashboard.defaults import default_document
from dashboard.exporter import HTMLExporter, count_document, export_to_html


def test_sections_become_top_level_folders():
    html = HTMLExporter(default_document()).export()

    assert html.startswith("<!DOCTYPE NETSCAPE-Bookmark-file-1>")
    assert "\t<DT><H3>Favorites</H3>" in html
    assert "\t\t<DT><H3>Tech &amp; News</H3>" in html
    assert '<A HREF="https://github.com">GitHub</A>' in html


def test_action_items_are_not_exported():
    html = HTMLExporter(default_document()).export()

    assert "Add Page" not in html
    assert "Clear Data" not in html


def test_counts_links_and_folders():
    assert count_document(default_document()) == (10, 4)


def test_export_writes_file(store, tmp_path):
    output = tmp_path / "bookmarks.html"

    counts = asyncio.run(export_to_html(store, output))

    assert counts == (10, 4)
    assert "<H1>Bookmarks</H1>" in output.read_text(encoding="utf-8")
