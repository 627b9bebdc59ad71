"""Ports package - defines interfaces for external dependencies.

Exports the store protocol used by the user record service.
"""

from .store import RecordStore

__all__ = [
    "RecordStore",
]
