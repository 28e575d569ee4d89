"""Identity key login message formatting."""

from __future__ import annotations

from profile_auth.validation import LOGIN_MESSAGE_PREFIX


def create_srp_raw_message(nonce: str, public_key: str) -> str:
    """Build the login challenge signed by an identity key.

    Args:
        nonce: The server-issued challenge.
        public_key: The signer's identifier.

    Returns:
        The message in the form `metamask:<nonce>:<public_key>`.
    """
    return f"{LOGIN_MESSAGE_PREFIX}{nonce}:{public_key}"
