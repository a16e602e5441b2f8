#!/usr/bin/env python3
"""
Key-value backends holding the start page document.

Both backends expose the same async contract: get(key) returns the stored
JSON object or None, set(key, value) stores it.
"""

import copy
import json
import logging
from pathlib import Path
from typing import Dict, Optional

import lz4.block

from .errors import StorageError

MOZLZ4_MAGIC = b"mozLz40\0"


# ============== LZ4 File Operations ==============

def read_lz4_json(path: Path) -> dict:
    """Read mozlz4 compressed JSON file."""
    with open(path, "rb") as f:
        data = f.read()
    if data[:8] != MOZLZ4_MAGIC:
        raise StorageError(f"Invalid mozlz4 format: {path}")
    try:
        return json.loads(lz4.block.decompress(data[8:]))
    except (lz4.block.LZ4BlockError, ValueError) as e:
        raise StorageError(f"Corrupt mozlz4 payload in {path}: {e}") from e


def write_lz4_json(path: Path, data: dict):
    """Write mozlz4 compressed JSON file."""
    compressed = lz4.block.compress(json.dumps(data).encode("utf-8"))
    with open(path, "wb") as f:
        f.write(MOZLZ4_MAGIC)
        f.write(compressed)


# ============== Backends ==============

class MemoryStorage:
    """In-process store. Values are copied in and out so callers never share state."""

    def __init__(self, initial: Optional[Dict[str, dict]] = None):
        self._data: Dict[str, dict] = copy.deepcopy(initial) if initial else {}
        self.writes = 0

    async def get(self, key: str) -> Optional[dict]:
        value = self._data.get(key)
        return copy.deepcopy(value) if value is not None else None

    async def set(self, key: str, value: dict):
        self._data[key] = copy.deepcopy(value)
        self.writes += 1


class Mozlz4Storage:
    """Store keys in a single mozlz4 file as one JSON object."""

    def __init__(self, path: Path):
        self.path = Path(path)

    def _read_all(self) -> dict:
        if not self.path.exists():
            return {}
        data = read_lz4_json(self.path)
        if not isinstance(data, dict):
            raise StorageError(f"Expected a JSON object in {self.path}")
        return data

    async def get(self, key: str) -> Optional[dict]:
        value = self._read_all().get(key)
        logging.debug(f"Read '{key}' from {self.path}: {'found' if value is not None else 'absent'}")
        return value

    async def set(self, key: str, value: dict):
        data = self._read_all()
        data[key] = value
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            write_lz4_json(self.path, data)
        except OSError as e:
            raise StorageError(f"Failed to write {self.path}: {e}") from e
        logging.debug(f"Wrote '{key}' to {self.path}")
