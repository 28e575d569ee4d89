"""Signing interfaces for profile-auth.

This module defines protocols for signers that prove control of an
identity, and the shape of the wallet signing callback.
"""

from __future__ import annotations

from typing import Awaitable, Callable, Protocol, Union

SignMessageCallback = Callable[[str], Union[Awaitable[str], str]]


class IAuthSigner(Protocol):
    """Interface for an identity signer."""

    async def get_identifier(self) -> str:
        """Fetch the public identifier.

        Returns:
            The identifier (for example a public key) as a string.
        """
        ...

    async def sign_message(self, message: str) -> str:
        """Sign a message with the key the signer represents.

        The key could be held locally or by an external wallet.

        Args:
            message: The message to sign.

        Returns:
            The signature as a string.
        """
        ...
