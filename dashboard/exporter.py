#!/usr/bin/env python3
"""Export the start page to a Netscape bookmarks HTML file."""

import html
import logging
from datetime import datetime
from pathlib import Path
from typing import List, Optional, Tuple

from .models import Document, Item, Section
from .tree import count_items


class HTMLExporter:
    """Renders sections as top-level bookmark folders. Action items are skipped."""

    def __init__(self, document: Document):
        self.document = document

    def export(self) -> str:
        logging.info("Converting start page to HTML...")

        html_parts = [
            '<!DOCTYPE NETSCAPE-Bookmark-file-1>',
            '<META HTTP-EQUIV="Content-Type" CONTENT="text/html; charset=UTF-8">',
            '<TITLE>Bookmarks</TITLE>',
            '<H1>Bookmarks</H1>',
            '<DL><p>'
        ]

        for section in self.document.sections:
            html_parts.extend(self._section_to_html(section))

        html_parts.append('</DL><p>')
        return '\n'.join(html_parts)

    def _section_to_html(self, section: Section) -> List[str]:
        return self._folder_to_html(section.title, section.items, level=1)

    def _folder_to_html(self, title: str, items: List[Item], level: int) -> List[str]:
        indent = '\t' * level
        lines = [
            f'{indent}<DT><H3>{self._escape(title)}</H3>',
            f'{indent}<DL><p>'
        ]

        for item in items:
            if item.is_folder:
                lines.extend(self._folder_to_html(item.title, item.items or [], level + 1))
            elif item.url:
                lines.append(
                    f'{indent}\t<DT><A HREF="{self._escape(item.url)}">{self._escape(item.title)}</A>'
                )

        lines.append(f'{indent}</DL><p>')
        return lines

    @staticmethod
    def _escape(text: Optional[str]) -> str:
        return html.escape(text or "", quote=True)


def count_document(document: Document) -> Tuple[int, int]:
    """Count bookmarks and folders; every section counts as a folder."""
    links, folders = 0, len(document.sections)
    for section in document.sections:
        section_links, section_folders = count_items(section.items)
        links += section_links
        folders += section_folders
    return links, folders


async def export_to_html(store, output_path: Optional[Path] = None) -> Tuple[int, int]:
    """
    Export the stored start page to an HTML bookmarks file.

    Returns:
        Tuple of (total_bookmarks, total_folders)
    """
    document = await store.get_sections()
    html_content = HTMLExporter(document).export()

    if output_path is None:
        current_date = datetime.now().strftime("%Y_%m_%d")
        output_path = Path(f"startpage_bookmarks_{current_date}.html")

    with Path(output_path).open("w", encoding="utf-8") as f:
        f.write(html_content)

    logging.info(f"Export completed: {output_path}")
    return count_document(document)
