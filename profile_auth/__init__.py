"""Profile-auth Python implementation.

This package proves control of an identity (an identity key or a wallet
address) to the authentication service and exchanges that proof for a
bearer token usable against the profile APIs. The resulting session is
cached in storage you provide and refreshed transparently.

Main Components:
    - JwtBearerAuth: Public entry point
    - Strategies: SRP (identity key) and SIWE (wallet)
    - SessionCache: Freshness-checked session holder
    - Interfaces: Protocol definitions for storage, signing, providers
    - Messages: Session record and wire message types

Example:
    >>> from profile_auth import AuthConfig, AuthOptions, AuthType, Env, JwtBearerAuth, Platform
    >>> # Configure with your storage and signer, then await auth.get_access_token()
"""

from profile_auth.api import (
    AuthConfig,
    AuthOptions,
    AuthType,
    JwtBearerAuth,
    SiweConfig,
)
from profile_auth.env import Env, Platform
from profile_auth.exceptions import (
    NonceRetrievalError,
    ProfileAuthError,
    SignInError,
    SigningError,
    UnsupportedAuthTypeError,
    ValidationError,
)
from profile_auth.messages import AuthToken, LoginResponse, UserProfile
from profile_auth.signing import IdentityKeySigner, SnapSigner

__version__ = "0.1.0"

__all__ = [
    # API
    "JwtBearerAuth",
    "AuthConfig",
    "AuthOptions",
    "AuthType",
    "SiweConfig",
    "Env",
    "Platform",
    # Signers
    "IdentityKeySigner",
    "SnapSigner",
    # Session
    "AuthToken",
    "LoginResponse",
    "UserProfile",
    # Exceptions
    "ProfileAuthError",
    "UnsupportedAuthTypeError",
    "ValidationError",
    "NonceRetrievalError",
    "SignInError",
    "SigningError",
]
