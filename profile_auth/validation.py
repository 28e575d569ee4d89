"""Structural validation for messages, addresses, signatures and signer config.

Every check here runs before any network call is attempted.
"""

from __future__ import annotations

import re
from typing import Any

from eth_utils import is_checksum_address

from profile_auth.exceptions import SigningError, ValidationError

LOGIN_MESSAGE_PREFIX = "metamask:"

_ADDRESS_PATTERN = re.compile(r"^0x[0-9a-fA-F]{40}$")


def validate_login_message(message: Any) -> str:
    """Ensure a message carries the signable `metamask:` prefix.

    Raises:
        ValidationError: If the message is not a string with the prefix.
    """
    if not isinstance(message, str) or not message.startswith(LOGIN_MESSAGE_PREFIX):
        raise ValidationError(f'message must start with "{LOGIN_MESSAGE_PREFIX}"')

    return message


def validate_address(address: Any) -> str:
    """Ensure an address is a 0x-prefixed, 20-byte hex string.

    Single-case addresses carry no checksum. Mixed-case addresses must match
    their EIP-55 checksum.

    Raises:
        ValidationError: If the address is absent, malformed or mis-checksummed.
    """
    if not isinstance(address, str) or not _ADDRESS_PATTERN.match(address):
        raise ValidationError(f"invalid wallet address: {address!r}")

    digits = address[2:]
    if digits not in (digits.lower(), digits.upper()) and not is_checksum_address(address):
        raise ValidationError(f"wallet address checksum mismatch: {address!r}")

    return address


def validate_siwe_config(config: Any) -> None:
    """Validate the parameters bound by a wallet strategy's prepare step.

    Args:
        config: An object with address, chain_id, sign_message and domain.

    Raises:
        ValidationError: If any parameter is missing or malformed.
    """
    if config is None:
        raise ValidationError("missing wallet signer configuration")

    validate_address(getattr(config, "address", None))

    chain_id = getattr(config, "chain_id", None)
    if isinstance(chain_id, bool) or not isinstance(chain_id, int) or chain_id <= 0:
        raise ValidationError(f"invalid chain id: {chain_id!r}")

    domain = getattr(config, "domain", None)
    if not isinstance(domain, str) or not domain:
        raise ValidationError("missing signing domain")

    if not callable(getattr(config, "sign_message", None)):
        raise ValidationError("missing wallet signer")


def validate_signature(signature: Any) -> str:
    """Ensure a signer produced a usable signature.

    Raises:
        SigningError: If the signature is not a non-empty string.
    """
    if not isinstance(signature, str) or not signature:
        raise SigningError("signer returned a malformed signature")

    return signature
