#!/usr/bin/env python3
"""Command palette state: open/close, item activation, toasts and item edits."""

import logging
from dataclasses import dataclass
from typing import Optional

from .cleaner import ClearDataRequest, DataCleaner, SimulatedCleaner
from .config import NEW_PAGE_TITLE, TOAST_SECONDS
from .gestures import GestureResolver
from .models import ADD_CURRENT, CLEAR_DATA, Document, Item
from .store import TreeStore, time_id
from .timers import Scheduler, TimerHandle
from .tree import find_item


@dataclass
class Toast:
    """Transient status line. Loading toasts stay until replaced."""
    message: str
    kind: str = "success"


@dataclass
class PageInfo:
    """The page the palette was opened on."""
    url: str
    title: str = ""


class CommandPalette:
    def __init__(
        self,
        store: TreeStore,
        scheduler: Scheduler,
        cleaner: Optional[DataCleaner] = None,
        toast_seconds: float = TOAST_SECONDS,
    ):
        self.store = store
        self.scheduler = scheduler
        self.cleaner = cleaner or SimulatedCleaner()
        self.toast_seconds = toast_seconds
        self.gestures = GestureResolver(store, scheduler, notify=self.show_toast)

        self.is_open = False
        self.loading = False
        self.toast: Optional[Toast] = None
        self._toast_timer: Optional[TimerHandle] = None

    @property
    def document(self) -> Optional[Document]:
        return self.gestures.document

    async def open(self) -> Document:
        self.is_open = True
        return self.gestures.apply(await self.store.get_sections())

    def close(self):
        self.is_open = False
        self.gestures.close()

    # ============== Toasts ==============

    def show_toast(self, message: str, kind: str = "success"):
        if self._toast_timer is not None:
            self._toast_timer.cancel()
            self._toast_timer = None
        self.toast = Toast(message, kind)
        if kind == "success":
            self._toast_timer = self.scheduler.call_later(self.toast_seconds, self._hide_toast)

    def _hide_toast(self):
        self._toast_timer = None
        self.toast = None

    # ============== Activation ==============

    async def activate(self, item: Item, page: Optional[PageInfo] = None) -> Optional[str]:
        """
        Handle a click on an item.

        Returns the URL to navigate to for links, None otherwise. Folders open
        a folder view; action items run their action.
        """
        if item.is_folder:
            self.gestures.open_folder(item)
        elif item.is_action and item.action == CLEAR_DATA:
            await self.clear_data()
        elif item.is_action and item.action == ADD_CURRENT:
            if page is not None:
                await self.add_current_page(page)
        elif item.url:
            return item.url
        return None

    async def clear_data(self) -> bool:
        self.loading = True
        self.show_toast("Cleaning browsing data...", "loading")
        try:
            ok = await self.cleaner.clear(ClearDataRequest.last_day())
        finally:
            self.loading = False
        if ok:
            self.show_toast("History & Cache Cleared (24h)")
        else:
            logging.warning("Browsing data cleaner did not acknowledge")
            self.show_toast("Could not clear browsing data")
        return ok

    async def add_current_page(self, page: PageInfo) -> Document:
        item = Item.link(time_id(), page.title or NEW_PAGE_TITLE, page.url)
        document = self.gestures.apply(await self.store.save_item_to_favorites(item))
        if find_item(document, item.id) != item:
            logging.warning(f"Page '{page.url}' was not added to Favorites")
            self.show_toast("Could not add to Favorites")
            return document
        self.show_toast("Added to Favorites")
        return document

    # ============== Edits ==============

    async def toggle_section(self, section_id: str) -> Document:
        return self.gestures.apply(await self.store.toggle_section_visibility(section_id))

    async def delete(self, item_id: str) -> Document:
        document = self.gestures.apply(await self.store.delete_item(item_id))
        self.show_toast("Item deleted")
        return document

    async def rename(self, item_id: str, title: str) -> Document:
        return self.gestures.apply(await self.store.rename_item(item_id, title))
