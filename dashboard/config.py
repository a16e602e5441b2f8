#!/usr/bin/env python3
"""Constants and paths for the start page."""

import os
import sys
from datetime import timedelta
from pathlib import Path

STORAGE_KEY = "safari_dashboard_data"

FAVORITES_ID = "favorites"
# Targets that mean "the Favorites section" for move operations
FAVORITES_ALIASES = ("favorites", "root")

NEW_FOLDER_TITLE = "New Folder"
NEW_PAGE_TITLE = "New Page"

# Gesture timing
REORDER_HOLD_SECONDS = 0.4
HEADER_HOLD_SECONDS = 0.5

TOAST_SECONDS = 3.0

CLEAR_DATA_LOOKBACK = timedelta(hours=24)
CLEAR_DATA_TYPES = {
    "appcache": True,
    "cache": True,
    "cacheStorage": True,
    "cookies": False,
    "downloads": True,
    "fileSystems": True,
    "formData": True,
    "history": True,
    "indexedDB": True,
    "localStorage": True,
    "passwords": True,
    "serviceWorkers": True,
    "webSQL": True,
}

DATA_FILENAME = "startpage.jsonlz4"
DATA_ENV_VAR = "STARTPAGE_DATA"


def default_data_path() -> Path:
    """Get the path to the start page data file for this platform."""
    override = os.environ.get(DATA_ENV_VAR, "").strip()
    if override:
        return Path(override).expanduser()

    if sys.platform == "darwin":
        root = Path.home() / "Library" / "Application Support" / "StartPage"
    elif sys.platform == "win32":
        root = Path(os.environ.get("APPDATA", "")) / "StartPage"
    else:
        root = Path.home() / ".startpage"
    return root / DATA_FILENAME
