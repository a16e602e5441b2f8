#!/usr/bin/env python3
"""Content seeded on first run, before anything has been stored."""

from .models import Document

DEFAULT_DOCUMENT = {
    "sections": [
        {
            "id": "favorites",
            "title": "Favorites",
            "hidden": False,
            "items": [
                {"id": "google", "title": "Google", "url": "https://google.com", "type": "link"},
                {"id": "youtube", "title": "YouTube", "url": "https://youtube.com", "type": "link"},
                {
                    "id": "tech-folder",
                    "title": "Tech & News",
                    "type": "folder",
                    "items": [
                        {"id": "verge", "title": "The Verge", "url": "https://theverge.com", "type": "link"},
                        {"id": "techcrunch", "title": "TechCrunch", "url": "https://techcrunch.com", "type": "link"},
                        {"id": "wired", "title": "Wired", "url": "https://wired.com", "type": "link"},
                        {"id": "ycombinator", "title": "Y Combinator", "url": "https://news.ycombinator.com", "type": "link"},
                    ],
                },
                {"id": "github", "title": "GitHub", "url": "https://github.com", "type": "link"},
                {
                    "id": "add-btn",
                    "title": "Add Page",
                    "type": "action",
                    "action": "add-current",
                    "iconType": "lucide",
                    "iconValue": "plus",
                },
            ],
        },
        {
            "id": "social",
            "title": "Social",
            "hidden": False,
            "items": [
                {"id": "twitter", "title": "X / Twitter", "url": "https://twitter.com", "type": "link"},
                {"id": "reddit", "title": "Reddit", "url": "https://reddit.com", "type": "link"},
                {"id": "linkedin", "title": "LinkedIn", "url": "https://linkedin.com", "type": "link"},
            ],
        },
        {
            "id": "privacy",
            "title": "Privacy & Tools",
            "hidden": False,
            "items": [
                {
                    "id": "clear-data",
                    "title": "Clear Data (24h)",
                    "type": "action",
                    "action": "clear-data",
                    "iconType": "lucide",
                    "iconValue": "trash",
                },
            ],
        },
    ]
}


def default_document() -> Document:
    """Build a fresh copy of the seed document."""
    return Document.from_dict(DEFAULT_DOCUMENT)
