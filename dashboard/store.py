#!/usr/bin/env python3
"""
Tree store for the start page.

Every operation is one whole-document read-modify-write: load the document,
apply a single change followed by empty-folder cleanup, persist, and return
the new document. Ids that cannot be found and action items are ignored
silently; the unchanged document is returned and nothing is written.
"""

import asyncio
import copy
import logging
from datetime import datetime
from typing import Callable, List, Optional, Protocol

from .config import FAVORITES_ALIASES, FAVORITES_ID, NEW_FOLDER_TITLE, STORAGE_KEY
from .defaults import default_document
from .models import Document, Item
from .tree import (
    cleanup_empty_folders,
    collect_ids,
    contains,
    find_container,
    find_folder,
    find_item,
    insert_before_action,
)


class KeyValueStore(Protocol):
    async def get(self, key: str) -> Optional[dict]: ...

    async def set(self, key: str, value: dict) -> None: ...


def time_id(prefix: str = "") -> str:
    """Generate an id from the current time in milliseconds."""
    return f"{prefix}{int(datetime.now().timestamp() * 1000)}"


def folder_id() -> str:
    return time_id("folder-")


class TreeStore:
    """Owns the start page document and the operations that change it."""

    def __init__(
        self,
        storage: KeyValueStore,
        key: str = STORAGE_KEY,
        id_factory: Callable[[], str] = folder_id,
    ):
        self.storage = storage
        self.key = key
        self.id_factory = id_factory
        self._lock = asyncio.Lock()

    # ============== Transactions ==============

    async def _load(self) -> Document:
        data = await self.storage.get(self.key)
        if data is None:
            logging.debug("No stored start page, using default content")
            return default_document()
        return Document.from_dict(data)

    async def get_sections(self) -> Document:
        async with self._lock:
            return await self._load()

    async def with_document(self, mutate: Callable[[Document], bool]) -> Document:
        """
        Load the document, apply mutate and persist if it reports a change.

        The load-mutate-store sequence holds the store lock, so concurrent
        callers on the same store are applied one after another.
        """
        async with self._lock:
            document = await self._load()
            if mutate(document):
                await self.storage.set(self.key, document.to_dict())
            return document

    # ============== Helpers ==============

    def _favorites(self, document: Document) -> Optional[List[Item]]:
        section = document.section(FAVORITES_ID)
        return section.items if section else None

    def _new_folder_id(self, document: Document) -> str:
        candidate = self.id_factory()
        taken = set(collect_ids(document))
        suffix = 1
        unique = candidate
        while unique in taken:
            unique = f"{candidate}-{suffix}"
            suffix += 1
        return unique

    # ============== Operations ==============

    async def toggle_section_visibility(self, section_id: str) -> Document:
        def mutate(document: Document) -> bool:
            section = document.section(section_id)
            if section is None:
                logging.debug(f"Toggle ignored, no section '{section_id}'")
                return False
            section.hidden = not section.hidden
            logging.info(f"Section '{section.title}' is now {'hidden' if section.hidden else 'visible'}")
            return True

        return await self.with_document(mutate)

    async def save_item_to_favorites(self, item: Item) -> Document:
        def mutate(document: Document) -> bool:
            favorites = self._favorites(document)
            if favorites is None:
                logging.debug("Save ignored, no Favorites section")
                return False
            if find_item(document, item.id) is not None:
                logging.warning(f"Save ignored, id '{item.id}' is already in use")
                return False
            insert_before_action(favorites, copy.deepcopy(item))
            cleanup_empty_folders(document)
            logging.info(f"Saved '{item.title}' to Favorites")
            return True

        return await self.with_document(mutate)

    async def delete_item(self, item_id: str) -> Document:
        def mutate(document: Document) -> bool:
            location = find_container(document, item_id)
            if location is None or location.item.is_action:
                logging.debug(f"Delete ignored for '{item_id}'")
                return False
            del location.container[location.index]
            cleanup_empty_folders(document)
            logging.info(f"Deleted '{location.item.title}'")
            return True

        return await self.with_document(mutate)

    async def rename_item(self, item_id: str, title: str) -> Document:
        def mutate(document: Document) -> bool:
            item = find_item(document, item_id)
            if item is None or item.is_action:
                logging.debug(f"Rename ignored for '{item_id}'")
                return False
            item.title = title
            logging.info(f"Renamed '{item_id}' to '{title}'")
            return True

        return await self.with_document(mutate)

    async def move_item(self, item_id: str, target_id: str) -> Document:
        """
        Move an item into a folder or into Favorites.

        target_id is a folder id or one of the Favorites aliases. An unknown
        target falls back to Favorites. Items land at the end of a folder, and
        in Favorites just before the add-current action.
        """
        def mutate(document: Document) -> bool:
            location = find_container(document, item_id)
            if location is None or location.item.is_action:
                logging.debug(f"Move ignored for '{item_id}'")
                return False
            item = location.container.pop(location.index)

            destination = None
            if target_id not in FAVORITES_ALIASES:
                folder = find_folder(document, target_id)
                if folder is not None:
                    folder.items.append(item)
                    destination = folder.title
                else:
                    logging.debug(f"No folder '{target_id}', falling back to Favorites")

            if destination is None:
                favorites = self._favorites(document)
                if favorites is None:
                    location.container.insert(location.index, item)
                    logging.debug("Move ignored, no Favorites section")
                    return False
                insert_before_action(favorites, item)
                destination = "Favorites"

            cleanup_empty_folders(document)
            logging.info(f"Moved '{item.title}' to {destination}")
            return True

        return await self.with_document(mutate)

    async def reorder_item(self, source_id: str, target_id: str) -> Document:
        """Move source into the slot target occupies, in target's container."""
        def mutate(document: Document) -> bool:
            if source_id == target_id:
                return False
            source = find_container(document, source_id)
            target = find_container(document, target_id)
            if source is None or target is None:
                logging.debug(f"Reorder ignored for '{source_id}' -> '{target_id}'")
                return False
            if source.item.is_action or target.item.is_action:
                return False
            if contains(source.item, target_id):
                logging.debug(f"Reorder ignored, '{target_id}' is inside '{source_id}'")
                return False

            del source.container[source.index]
            # A forward move within one container shifts the target down one,
            # so its old index is now the slot right after it
            target.container.insert(target.index, source.item)

            cleanup_empty_folders(document)
            logging.info(f"Reordered '{source.item.title}' to position {target.index}")
            return True

        return await self.with_document(mutate)

    async def create_folder_with_items(self, source_id: str, target_id: str) -> Document:
        """
        Merge source and target into a new folder in target's slot.

        The folder holds [target, source]. If the target cannot be found once
        the source has been removed (same id, or target inside source), the
        source goes to Favorites instead.
        """
        def mutate(document: Document) -> bool:
            source = find_container(document, source_id)
            if source is None or source.item.is_action:
                logging.debug(f"Merge ignored for '{source_id}'")
                return False
            target_item = find_item(document, target_id)
            if target_item is not None and target_item.is_action:
                return False

            del source.container[source.index]

            target = find_container(document, target_id)
            if target is not None:
                folder = Item.folder(
                    self._new_folder_id(document),
                    NEW_FOLDER_TITLE,
                    [target.item, source.item],
                )
                target.container[target.index] = folder
                logging.info(f"Created folder '{folder.id}' from '{target.item.title}' and '{source.item.title}'")
            else:
                favorites = self._favorites(document)
                if favorites is None:
                    source.container.insert(source.index, source.item)
                    return False
                insert_before_action(favorites, source.item)
                logging.debug(f"Merge target '{target_id}' gone, moved '{source_id}' to Favorites")

            cleanup_empty_folders(document)
            return True

        return await self.with_document(mutate)
