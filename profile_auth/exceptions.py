"""Exception classes for profile-auth.

This module defines the error kinds raised by the authentication session
manager. Every operation fails with exactly one of these.
"""


class ProfileAuthError(Exception):
    """Base exception class for all profile-auth errors."""

    pass


class UnsupportedAuthTypeError(ProfileAuthError):
    """Exception raised for an unrecognized authentication strategy tag."""

    pass


class ValidationError(ProfileAuthError):
    """Exception raised when an input or configuration is malformed or missing."""

    pass


class NonceRetrievalError(ProfileAuthError):
    """Exception raised when a login nonce cannot be obtained."""

    pass


class SignInError(ProfileAuthError):
    """Exception raised when login or the access token exchange fails."""

    pass


class SigningError(ProfileAuthError):
    """Exception raised when a signer fails or returns a malformed signature."""

    pass
