"""Deterministic identity key signer (secp256k1).

The signing key is derived from an identity secret with BLAKE3 in key
derivation mode, so the same secret always yields the same identifier.
Signatures are ECDSA over SHA-256, encoded as `0x` + hex(r || s).
"""

from __future__ import annotations

import blake3
from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import ec
from cryptography.hazmat.primitives.asymmetric.utils import (
    decode_dss_signature,
    encode_dss_signature,
)

from profile_auth.exceptions import ValidationError
from profile_auth.interfaces.crypto import IAuthSigner

KEY_DERIVATION_CONTEXT = "profile-auth 2024-06-01 identity signing key v1"

# secp256k1 group order
_CURVE_ORDER = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141


def _secret_bytes(secret: str | bytes) -> bytes:
    if isinstance(secret, bytes):
        material = secret
    elif isinstance(secret, str) and secret.startswith("0x"):
        try:
            material = bytes.fromhex(secret[2:])
        except ValueError as e:
            raise ValidationError("identity secret is not valid hex") from e
    elif isinstance(secret, str):
        material = secret.encode("utf-8")
    else:
        raise ValidationError("identity secret must be str or bytes")

    if not material:
        raise ValidationError("identity secret is empty")

    return material


def derive_private_key(secret: str | bytes) -> ec.EllipticCurvePrivateKey:
    """Derive the secp256k1 signing key for an identity secret.

    Args:
        secret: Raw bytes, a 0x-prefixed hex string, or a UTF-8 string.

    Returns:
        The derived private key.

    Raises:
        ValidationError: If the secret is empty or malformed.
    """
    digest = blake3.blake3(
        _secret_bytes(secret), derive_key_context=KEY_DERIVATION_CONTEXT
    ).digest()

    # map into [1, n - 1]
    scalar = int.from_bytes(digest, byteorder="big") % (_CURVE_ORDER - 1) + 1
    return ec.derive_private_key(scalar, ec.SECP256K1())


class IdentityKeySigner(IAuthSigner):
    """Signs locally with a key derived from an identity secret.

    The secret itself is not retained; only the derived key is kept.
    """

    def __init__(self, secret: str | bytes) -> None:
        self._private_key = derive_private_key(secret)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(identifier={self._identifier()!r})"

    def _identifier(self) -> str:
        compressed = self._private_key.public_key().public_bytes(
            encoding=serialization.Encoding.X962,
            format=serialization.PublicFormat.CompressedPoint,
        )
        return f"0x{compressed.hex()}"

    async def get_identifier(self) -> str:
        """Get the compressed public key as a 0x-prefixed hex string."""
        return self._identifier()

    async def sign_message(self, message: str) -> str:
        """Sign a message with the derived key.

        Args:
            message: The message to sign; UTF-8 encoded before signing.

        Returns:
            The raw 64-byte (r || s) signature as 0x-prefixed hex.
        """
        der_signature = self._private_key.sign(
            message.encode("utf-8"),
            ec.ECDSA(hashes.SHA256()),
        )

        r, s = decode_dss_signature(der_signature)
        signature_bytes = r.to_bytes(32, byteorder="big") + s.to_bytes(32, byteorder="big")

        return f"0x{signature_bytes.hex()}"

    async def verify(self, message: str, signature: str) -> None:
        """Verify a signature produced by this signer.

        Raises:
            ValueError: When verification fails or the signature is malformed.
        """
        try:
            raw_signature = bytes.fromhex(signature.removeprefix("0x"))
            if len(raw_signature) != 64:
                raise ValueError(
                    f"invalid signature length: expected 64 bytes, got {len(raw_signature)}"
                )

            r = int.from_bytes(raw_signature[:32], byteorder="big")
            s = int.from_bytes(raw_signature[32:], byteorder="big")

            self._private_key.public_key().verify(
                encode_dss_signature(r, s),
                message.encode("utf-8"),
                ec.ECDSA(hashes.SHA256()),
            )
        except (InvalidSignature, ValueError) as e:
            raise ValueError("invalid signature") from e
