"""In-memory login session storage.

This module provides an in-memory implementation of ILoginResponseStore for
testing and reference purposes.
"""

from __future__ import annotations

from typing import Optional

from profile_auth.interfaces.storage import ILoginResponseStore
from profile_auth.messages import LoginResponse


class InMemoryLoginResponseStore(ILoginResponseStore):
    """In-memory implementation of login session storage.

    Records are immutable, so replacing the reference is an atomic write.

    Attributes:
        _value: The stored session, if any.
    """

    def __init__(self, value: Optional[LoginResponse] = None) -> None:
        """Initialize the store, optionally with an existing session."""
        self._value = value

    async def get_login_response(self) -> Optional[LoginResponse]:
        """Get the stored session.

        Returns:
            The stored session, or None if nothing has been stored.
        """
        return self._value

    async def set_login_response(self, value: LoginResponse) -> None:
        """Replace the stored session.

        Args:
            value: The session to store.
        """
        self._value = value
