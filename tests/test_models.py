import pytest

from dashboard.errors import DocumentError
from dashboard.defaults import DEFAULT_DOCUMENT
from dashboard.models import Document, Item, favicon_url


def test_document_round_trips_stored_shape():
    document = Document.from_dict(DEFAULT_DOCUMENT)

    assert document.to_dict() == DEFAULT_DOCUMENT


def test_icon_hints_use_stored_key_names():
    item = Item.from_dict({"id": "x", "title": "X", "type": "action", "action": "add-current",
                           "iconType": "lucide", "iconValue": "plus"})

    assert item.icon_type == "lucide"
    assert item.to_dict()["iconValue"] == "plus"


def test_missing_optional_fields_get_defaults():
    document = Document.from_dict({"sections": [
        {"id": "s", "title": "S", "items": [{"id": "f", "title": "F", "type": "folder"}]},
    ]})

    section = document.sections[0]
    assert section.hidden is False
    assert section.items[0].items == []


def test_unknown_item_type_is_rejected():
    with pytest.raises(DocumentError):
        Item.from_dict({"id": "x", "title": "X", "type": "widget"})


def test_document_without_sections_is_rejected():
    with pytest.raises(DocumentError):
        Document.from_dict({"items": []})


def test_favicon_url_uses_hostname():
    assert favicon_url("https://news.ycombinator.com/item?id=1") == (
        "https://www.google.com/s2/favicons?domain=news.ycombinator.com&sz=128"
    )


def test_favicon_url_without_host():
    assert favicon_url(None) is None
    assert favicon_url("not a url") is None
