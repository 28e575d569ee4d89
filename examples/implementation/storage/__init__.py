"""Storage implementations for profile-auth.

This package provides reference implementations of ILoginResponseStore.
"""

from .file import FileLoginResponseStore, StorageError
from .memory import InMemoryLoginResponseStore

__all__ = [
    "FileLoginResponseStore",
    "InMemoryLoginResponseStore",
    "StorageError",
]
