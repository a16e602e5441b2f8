"""Shared fixtures: an in-memory store seeded with the default start page."""

import itertools

import pytest

from dashboard.defaults import default_document
from dashboard.gestures import GestureResolver
from dashboard.storage import MemoryStorage
from dashboard.store import TreeStore
from dashboard.timers import ManualScheduler


@pytest.fixture
def storage():
    return MemoryStorage()


@pytest.fixture
def store(storage):
    counter = itertools.count(1)
    return TreeStore(storage, id_factory=lambda: f"folder-{next(counter)}")


@pytest.fixture
def document():
    return default_document()


@pytest.fixture
def scheduler():
    return ManualScheduler()


@pytest.fixture
def messages():
    return []


@pytest.fixture
def resolver(store, scheduler, messages, document):
    resolver = GestureResolver(store, scheduler, notify=messages.append)
    resolver.apply(document)
    return resolver
