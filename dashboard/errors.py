#!/usr/bin/env python3
"""Exceptions raised at the storage boundary."""


class DashboardError(Exception):
    """Base exception for start page errors."""
    pass


class StorageError(DashboardError):
    """Persisted data could not be read or written."""
    pass


class DocumentError(DashboardError):
    """Stored document does not have the expected shape."""
    pass
