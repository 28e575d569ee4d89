"""Storage interfaces for profile-auth.

This module defines the protocol for persisting the cached login session.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Protocol

if TYPE_CHECKING:
    from profile_auth.messages.login import LoginResponse


class ILoginResponseStore(Protocol):
    """Interface for login session storage.

    Implementations own durability. Writes must be atomic: a reader observes
    either the previous complete record or the new one, never a mix.
    """

    async def get_login_response(self) -> Optional[LoginResponse]:
        """Get the stored login session.

        Returns:
            The stored LoginResponse, or None if nothing has been stored.
        """
        ...

    async def set_login_response(self, value: LoginResponse) -> None:
        """Replace the stored login session.

        Args:
            value: The complete login session to store.
        """
        ...
