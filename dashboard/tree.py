#!/usr/bin/env python3
"""
Traversal, search and cleanup over the start page item tree.

Searches are depth-first and pre-order: sections in order, each item checked
before its folder contents, folder contents before the next sibling. Absence
is reported as None, never raised.
"""

from typing import Callable, Iterator, List, NamedTuple, Optional, Tuple

from .models import ADD_CURRENT, Document, Item


class Location(NamedTuple):
    """Where an item physically lives: its container list and index in it."""
    container: List[Item]
    index: int
    item: Item


# ============== Search ==============

def iter_items(items: List[Item]) -> Iterator[Item]:
    """Yield items and their folder contents in pre-order."""
    for item in items:
        yield item
        if item.is_folder and item.items:
            yield from iter_items(item.items)


def walk(document: Document) -> Iterator[Item]:
    """Yield every item of the document in pre-order."""
    for section in document.sections:
        yield from iter_items(section.items)


def _locate(items: List[Item], match: Callable[[Item], bool]) -> Optional[Location]:
    for index, item in enumerate(items):
        if match(item):
            return Location(items, index, item)
        if item.is_folder and item.items:
            found = _locate(item.items, match)
            if found:
                return found
    return None


def find_container(document: Document, item_id: str) -> Optional[Location]:
    """Find the container holding item_id and the item's index within it."""
    for section in document.sections:
        found = _locate(section.items, lambda item: item.id == item_id)
        if found:
            return found
    return None


def find_item(document: Document, item_id: str) -> Optional[Item]:
    location = find_container(document, item_id)
    return location.item if location else None


def find_folder(document: Document, folder_id: str) -> Optional[Item]:
    """Find a folder-type item by id; other item types never match."""
    for section in document.sections:
        found = _locate(section.items, lambda item: item.id == folder_id and item.is_folder)
        if found:
            return found.item
    return None


def contains(item: Item, item_id: str) -> bool:
    """Check whether item_id is item itself or anywhere inside it."""
    return any(node.id == item_id for node in iter_items([item]))


# ============== Structural Edits ==============

def remove_item(document: Document, item_id: str) -> Optional[Item]:
    """Detach an item from its container and return it."""
    location = find_container(document, item_id)
    if location is None:
        return None
    return location.container.pop(location.index)


def insert_before_action(items: List[Item], item: Item, action: str = ADD_CURRENT):
    """Insert item just before the given action item, or append if there is none."""
    for index, existing in enumerate(items):
        if existing.is_action and existing.action == action:
            items.insert(index, item)
            return
    items.append(item)


# ============== Cleanup ==============

def _clean_items(items: List[Item]) -> int:
    removed = 0
    # Children first so a folder emptied by its own cleanup is caught too
    for item in items:
        if item.is_folder and item.items:
            removed += _clean_items(item.items)

    for index in range(len(items) - 1, -1, -1):
        item = items[index]
        if item.is_folder and not item.items:
            del items[index]
            removed += 1
    return removed


def cleanup_empty_folders(document: Document) -> int:
    """Delete every folder left without items. Returns the number removed."""
    return sum(_clean_items(section.items) for section in document.sections)


# ============== Stats ==============

def collect_ids(document: Document) -> List[str]:
    return [item.id for item in walk(document)]


def count_items(items: List[Item]) -> Tuple[int, int]:
    """Count links and folders in a list of items, recursively."""
    links, folders = 0, 0
    for item in iter_items(items):
        if item.is_folder:
            folders += 1
        elif item.url:
            links += 1
    return links, folders
