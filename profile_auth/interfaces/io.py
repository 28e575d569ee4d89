"""Wallet provider interfaces for profile-auth.

This module defines protocols for a wallet provider's request capability
and for resolving such a provider.
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Protocol


class IProvider(Protocol):
    """Interface for a wallet provider."""

    async def request(self, args: Dict[str, Any]) -> Any:
        """Send a request to the provider.

        Args:
            args: A dictionary with "method" and "params" keys.

        Returns:
            The provider's result.
        """
        ...


class IProviderResolver(Protocol):
    """Interface for locating a wallet provider."""

    async def resolve(self) -> Optional[IProvider]:
        """Resolve the provider.

        Returns:
            The provider, or None when no provider is available.
        """
        ...
