"""Fake wallet collaborators for profile-auth tests."""

from .provider import (
    MOCK_ADDRESS,
    MOCK_SNAP_PUBLIC_KEY,
    MOCK_SNAP_SIGNATURE,
    FakeSnapProvider,
    FakeWallet,
    FixedTimestamper,
    StaticProviderResolver,
)

__all__ = [
    "MOCK_ADDRESS",
    "MOCK_SNAP_PUBLIC_KEY",
    "MOCK_SNAP_SIGNATURE",
    "FakeSnapProvider",
    "FakeWallet",
    "FixedTimestamper",
    "StaticProviderResolver",
]
