#!/usr/bin/env python3
"""Browsing data clearing, triggered by the clear-data action item."""

import asyncio
import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, Optional, Protocol

from .config import CLEAR_DATA_LOOKBACK, CLEAR_DATA_TYPES


@dataclass
class ClearDataRequest:
    """What to clear: everything of the fixed data types since a point in time."""
    since: int
    data_types: Dict[str, bool] = field(default_factory=lambda: dict(CLEAR_DATA_TYPES))

    @classmethod
    def last_day(cls, now: Optional[datetime] = None) -> "ClearDataRequest":
        now = now or datetime.now()
        return cls(since=int((now - CLEAR_DATA_LOOKBACK).timestamp() * 1000))


class DataCleaner(Protocol):
    async def clear(self, request: ClearDataRequest) -> bool: ...


class SimulatedCleaner:
    """Stand-in used when no browser is attached: waits, then acknowledges."""

    def __init__(self, delay: float = 0.8):
        self.delay = delay
        self.last_request: Optional[ClearDataRequest] = None

    async def clear(self, request: ClearDataRequest) -> bool:
        self.last_request = request
        enabled = sorted(name for name, on in request.data_types.items() if on)
        logging.info(f"Clearing {', '.join(enabled)} since {datetime.fromtimestamp(request.since / 1000):%Y-%m-%d %H:%M}")
        await asyncio.sleep(self.delay)
        return True
