"""Wallet snap signer, the default identity key signing mode.

Signing is delegated to the message-signing snap of a wallet provider. The
provider is located through an injected resolver; a missing provider is a
validation error.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

import structlog

from profile_auth.exceptions import SigningError, ValidationError
from profile_auth.interfaces.crypto import IAuthSigner
from profile_auth.interfaces.io import IProvider, IProviderResolver
from profile_auth.validation import validate_signature

logger = structlog.get_logger(__name__)

SNAP_ORIGIN = "npm:@metamask/message-signing-snap"


def snap_request(method: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Build a `wallet_invokeSnap` request for the message-signing snap."""
    request: Dict[str, Any] = {"method": method}
    if params is not None:
        request["params"] = params

    return {
        "method": "wallet_invokeSnap",
        "params": {"snapId": SNAP_ORIGIN, "request": request},
    }


class SnapSigner(IAuthSigner):
    """Signer backed by the wallet's message-signing snap.

    Attributes:
        _resolver: Locates the wallet provider, or None if none is configured.
        _public_key: Memoised identifier after the first successful fetch.
    """

    def __init__(self, resolver: Optional[IProviderResolver]) -> None:
        self._resolver = resolver
        self._public_key: Optional[str] = None

    async def _provider(self) -> IProvider:
        provider = None
        if self._resolver is not None:
            provider = await self._resolver.resolve()

        if provider is None:
            raise ValidationError("no wallet provider found")

        return provider

    async def _invoke(self, method: str, params: Optional[Dict[str, Any]] = None) -> Any:
        provider = await self._provider()
        try:
            return await provider.request(snap_request(method, params))
        except Exception as e:
            logger.warning("snap_request_failed", method=method, error=str(e))
            raise SigningError(f"snap request {method} failed: {e}") from e

    async def get_identifier(self) -> str:
        """Fetch the snap's public key.

        Raises:
            ValidationError: If no provider can be resolved.
            SigningError: If the snap request fails or returns nothing.
        """
        if self._public_key is None:
            public_key = await self._invoke("getPublicKey")
            if not isinstance(public_key, str) or not public_key:
                raise SigningError("snap returned a malformed public key")
            self._public_key = public_key

        return self._public_key

    async def sign_message(self, message: str) -> str:
        """Sign a message with the snap.

        Raises:
            ValidationError: If no provider can be resolved.
            SigningError: If the snap request fails or the signature is malformed.
        """
        signature = await self._invoke("signMessage", {"message": message})
        return validate_signature(signature)
