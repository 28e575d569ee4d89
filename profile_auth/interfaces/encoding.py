"""Timestamp interfaces for profile-auth."""

from __future__ import annotations

from datetime import datetime
from typing import Protocol


class ITimestamper(Protocol):
    """Interface for timestamp operations."""

    def format(self, when: datetime) -> str:
        """Format a datetime object as a string.

        Args:
            when: The datetime to format.

        Returns:
            The formatted timestamp string.
        """
        ...

    def now(self) -> datetime:
        """Get the current datetime.

        Returns:
            The current datetime.
        """
        ...
