#!/usr/bin/env python3
"""Data models for the start page document."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional
from urllib.parse import urlparse

from .errors import DocumentError

LINK = "link"
ACTION = "action"
FOLDER = "folder"
ITEM_TYPES = (LINK, ACTION, FOLDER)

CLEAR_DATA = "clear-data"
ADD_CURRENT = "add-current"
ACTIONS = (CLEAR_DATA, ADD_CURRENT)


@dataclass
class Item:
    """A link, action or folder on the start page."""
    id: str
    title: str
    type: str = LINK
    url: Optional[str] = None
    action: Optional[str] = None
    items: Optional[List["Item"]] = None
    icon_type: Optional[str] = None
    icon_value: Any = None

    @property
    def is_folder(self) -> bool:
        return self.type == FOLDER

    @property
    def is_action(self) -> bool:
        return self.type == ACTION

    @classmethod
    def link(cls, id: str, title: str, url: str) -> "Item":
        return cls(id=id, title=title, type=LINK, url=url)

    @classmethod
    def folder(cls, id: str, title: str, items: List["Item"]) -> "Item":
        return cls(id=id, title=title, type=FOLDER, items=list(items))

    @classmethod
    def from_dict(cls, data: Dict) -> "Item":
        if not isinstance(data, dict):
            raise DocumentError(f"Item must be an object, got {type(data).__name__}")
        try:
            item_id = str(data["id"])
        except KeyError:
            raise DocumentError(f"Item without id: {data!r}") from None

        item_type = data.get("type", LINK)
        if item_type not in ITEM_TYPES:
            raise DocumentError(f"Unknown item type '{item_type}' on item {item_id}")

        children = None
        if item_type == FOLDER:
            children = [cls.from_dict(child) for child in data.get("items") or []]

        return cls(
            id=item_id,
            title=data.get("title", ""),
            type=item_type,
            url=data.get("url"),
            action=data.get("action"),
            items=children,
            icon_type=data.get("iconType"),
            icon_value=data.get("iconValue"),
        )

    def to_dict(self) -> Dict:
        data: Dict[str, Any] = {"id": self.id, "title": self.title, "type": self.type}
        if self.url is not None:
            data["url"] = self.url
        if self.action is not None:
            data["action"] = self.action
        if self.items is not None:
            data["items"] = [child.to_dict() for child in self.items]
        if self.icon_type is not None:
            data["iconType"] = self.icon_type
        if self.icon_value is not None:
            data["iconValue"] = self.icon_value
        return data


@dataclass
class Section:
    """A named, hideable top-level group of items."""
    id: str
    title: str
    items: List[Item] = field(default_factory=list)
    hidden: bool = False

    @classmethod
    def from_dict(cls, data: Dict) -> "Section":
        if not isinstance(data, dict) or "id" not in data:
            raise DocumentError(f"Invalid section: {data!r}")
        return cls(
            id=str(data["id"]),
            title=data.get("title", ""),
            items=[Item.from_dict(item) for item in data.get("items") or []],
            hidden=bool(data.get("hidden", False)),
        )

    def to_dict(self) -> Dict:
        return {
            "id": self.id,
            "title": self.title,
            "hidden": self.hidden,
            "items": [item.to_dict() for item in self.items],
        }


@dataclass
class Document:
    """The whole persisted start page: an ordered list of sections."""
    sections: List[Section] = field(default_factory=list)

    def section(self, section_id: str) -> Optional[Section]:
        for section in self.sections:
            if section.id == section_id:
                return section
        return None

    @classmethod
    def from_dict(cls, data: Dict) -> "Document":
        if not isinstance(data, dict) or not isinstance(data.get("sections"), list):
            raise DocumentError("Document must be an object with a 'sections' list")
        return cls(sections=[Section.from_dict(s) for s in data["sections"]])

    def to_dict(self) -> Dict:
        return {"sections": [section.to_dict() for section in self.sections]}


def favicon_url(url: Optional[str]) -> Optional[str]:
    """Get a favicon URL for a link, or None if the URL has no hostname."""
    if not url:
        return None
    try:
        hostname = urlparse(url).hostname
    except ValueError:
        return None
    if not hostname:
        return None
    return f"https://www.google.com/s2/favicons?domain={hostname}&sz=128"
