"""Start page dashboard: item tree store and drag gesture handling."""

from .errors import DashboardError, DocumentError, StorageError
from .models import Item, Section, Document, favicon_url
from .tree import (
    Location,
    find_item,
    find_folder,
    find_container,
    cleanup_empty_folders,
)
from .storage import MemoryStorage, Mozlz4Storage
from .store import TreeStore
from .timers import AsyncioScheduler, ManualScheduler
from .gestures import DragState, GestureResolver
from .cleaner import ClearDataRequest, SimulatedCleaner
from .palette import CommandPalette, PageInfo, Toast
from .exporter import HTMLExporter, export_to_html
from .logs import Colors, setup_logging

__all__ = [
    # Errors
    "DashboardError",
    "DocumentError",
    "StorageError",
    # Models
    "Item",
    "Section",
    "Document",
    "favicon_url",
    # Tree
    "Location",
    "find_item",
    "find_folder",
    "find_container",
    "cleanup_empty_folders",
    # Storage
    "MemoryStorage",
    "Mozlz4Storage",
    "TreeStore",
    # Gestures
    "AsyncioScheduler",
    "ManualScheduler",
    "DragState",
    "GestureResolver",
    # Palette
    "ClearDataRequest",
    "SimulatedCleaner",
    "CommandPalette",
    "PageInfo",
    "Toast",
    # Export
    "HTMLExporter",
    "export_to_html",
    # Logging
    "Colors",
    "setup_logging",
]
