"""Signer implementations for the identity key strategy."""

from .identity_key import IdentityKeySigner, derive_private_key
from .snap import SNAP_ORIGIN, SnapSigner, snap_request

__all__ = [
    "IdentityKeySigner",
    "SNAP_ORIGIN",
    "SnapSigner",
    "derive_private_key",
    "snap_request",
]
