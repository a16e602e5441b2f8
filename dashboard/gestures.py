#!/usr/bin/env python3
"""
Drag and drop gesture resolution.

A drag over an item is ambiguous: holding still means "reorder here",
letting go means "merge with this item" (or "move into this folder"). The
resolver tells them apart with a hold timer. A second timer on the header
lets a dragged item climb out of a folder view.

    IDLE --begin_drag--> DRAGGING --enter_item--> REORDER_PENDING
    REORDER_PENDING --leave_item--> DRAGGING
    REORDER_PENDING --hold expires--> REORDERED --store done--> DRAGGING
    any drag state --drop/end_drag--> IDLE

Timers are cancelled whenever the drag ends, the palette closes or the view
changes, so a late callback never acts on a context that is gone.
"""

import logging
from enum import Enum
from typing import Callable, Optional

from .config import FAVORITES_ID, HEADER_HOLD_SECONDS, REORDER_HOLD_SECONDS
from .models import Document, Item
from .store import TreeStore
from .timers import Scheduler, TimerHandle
from .tree import find_folder


class DragState(Enum):
    IDLE = "idle"
    DRAGGING = "dragging"
    REORDER_PENDING = "reorder_pending"
    REORDERED = "reordered"


class GestureResolver:
    """Turns pointer events into tree store operations and tracks the folder view."""

    def __init__(
        self,
        store: TreeStore,
        scheduler: Scheduler,
        notify: Optional[Callable[[str], None]] = None,
        reorder_hold: float = REORDER_HOLD_SECONDS,
        header_hold: float = HEADER_HOLD_SECONDS,
    ):
        self.store = store
        self.scheduler = scheduler
        self.notify = notify or (lambda message: None)
        self.reorder_hold = reorder_hold
        self.header_hold = header_hold

        self.document: Optional[Document] = None
        self.active_folder_id: Optional[str] = None

        self.state = DragState.IDLE
        self.dragged_id: Optional[str] = None
        self.hover_id: Optional[str] = None
        self._reordered_id: Optional[str] = None
        self._reorder_timer: Optional[TimerHandle] = None
        self._header_timer: Optional[TimerHandle] = None

    # ============== Snapshot & View ==============

    @property
    def active_folder(self) -> Optional[Item]:
        if self.active_folder_id is None or self.document is None:
            return None
        return find_folder(self.document, self.active_folder_id)

    @property
    def in_folder(self) -> bool:
        return self.active_folder_id is not None

    def apply(self, document: Document) -> Document:
        """Take a new snapshot; leave a folder view whose folder no longer exists."""
        self.document = document
        if self.active_folder_id is not None and find_folder(document, self.active_folder_id) is None:
            logging.debug(f"Folder '{self.active_folder_id}' is gone, back to root view")
            self._set_view(None)
        return document

    def open_folder(self, folder: Item) -> bool:
        if not folder.is_folder:
            return False
        self._set_view(folder.id)
        return True

    def go_home(self):
        self._set_view(None)

    def _set_view(self, folder_id: Optional[str]):
        self._cancel_timers()
        if self.state is DragState.REORDER_PENDING:
            self.state = DragState.DRAGGING
        self.hover_id = None
        self.active_folder_id = folder_id

    # ============== Timers ==============

    def _cancel_reorder_timer(self):
        if self._reorder_timer is not None:
            self._reorder_timer.cancel()
            self._reorder_timer = None

    def _cancel_header_timer(self):
        if self._header_timer is not None:
            self._header_timer.cancel()
            self._header_timer = None

    def _cancel_timers(self):
        self._cancel_reorder_timer()
        self._cancel_header_timer()

    # ============== Drag Lifecycle ==============

    @property
    def dragging(self) -> bool:
        return self.dragged_id is not None

    def begin_drag(self, item: Item) -> bool:
        """Start dragging an item. Action items cannot be dragged."""
        if item.is_action:
            return False
        self._cancel_timers()
        self.dragged_id = item.id
        self.hover_id = None
        self._reordered_id = None
        self.state = DragState.DRAGGING
        return True

    def end_drag(self):
        self._cancel_timers()
        self.dragged_id = None
        self.hover_id = None
        self._reordered_id = None
        self.state = DragState.IDLE

    def close(self):
        """Palette closed: drop the drag and any folder view."""
        self.end_drag()
        self.active_folder_id = None

    # ============== Item Hover ==============

    def enter_item(self, item: Item):
        if not self.dragging or item.id == self.dragged_id or item.is_action:
            return
        self._cancel_reorder_timer()
        self.hover_id = item.id
        self._reordered_id = None
        self.state = DragState.REORDER_PENDING
        target_id = item.id
        self._reorder_timer = self.scheduler.call_later(
            self.reorder_hold, lambda: self._reorder_expired(target_id)
        )

    def leave_item(self):
        self._cancel_reorder_timer()
        self.hover_id = None
        if self.state is DragState.REORDER_PENDING:
            self.state = DragState.DRAGGING

    async def _reorder_expired(self, target_id: str):
        self._reorder_timer = None
        if not self.dragging or self.hover_id != target_id:
            return
        source_id = self.dragged_id
        self.state = DragState.REORDERED
        # Set before the store call so a drop landing mid-write still sees it
        self._reordered_id = target_id
        logging.debug(f"Hold on '{target_id}' expired, reordering '{source_id}'")
        document = await self.store.reorder_item(source_id, target_id)
        self.apply(document)
        if self.dragged_id == source_id and self.state is DragState.REORDERED:
            self.hover_id = None
            self.state = DragState.DRAGGING

    # ============== Drops ==============

    async def drop_on_item(self, item: Item) -> Optional[Document]:
        """Dropped before the hold expired: move into a folder or merge into a new one."""
        source_id = self.dragged_id
        reordered_id = self._reordered_id
        self.end_drag()

        if source_id is None or source_id == item.id or item.is_action:
            return None
        if reordered_id == item.id:
            logging.debug(f"Drop on '{item.id}' completes its reorder")
            return None

        if item.is_folder:
            document = await self.store.move_item(source_id, item.id)
            message = "Moved to folder"
        else:
            document = await self.store.create_folder_with_items(source_id, item.id)
            message = "Folder created"
        self.apply(document)
        self.notify(message)
        return document

    async def drop_on_background(self) -> Optional[Document]:
        source_id = self.dragged_id
        self.end_drag()
        # Inside a folder view the background is the folder itself
        if source_id is None or self.in_folder:
            return None
        return self.apply(await self.store.move_item(source_id, FAVORITES_ID))

    # ============== Header ==============

    def enter_header(self):
        if not self.dragging or not self.in_folder:
            return
        self._cancel_header_timer()
        self._header_timer = self.scheduler.call_later(self.header_hold, self._header_expired)

    def leave_header(self):
        self._cancel_header_timer()

    def _header_expired(self):
        self._header_timer = None
        logging.debug("Header hold expired, back to root view")
        self._set_view(None)

    async def drop_on_header(self) -> Optional[Document]:
        source_id = self.dragged_id
        self.end_drag()
        if source_id is None:
            return None
        document = self.apply(await self.store.move_item(source_id, FAVORITES_ID))
        self._set_view(None)
        self.notify("Moved to Favorites")
        return document
