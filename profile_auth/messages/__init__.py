"""Profile-auth messages package.

This package provides the cached session record, the authentication
service wire messages and the login challenge formats.
"""

from .api import LoginApiResponse, NonceResponse, OAuth2TokenResponse, error_detail
from .login import AuthToken, LoginResponse, UserProfile
from .siwe import SiweMessage
from .srp import create_srp_raw_message

__all__ = [
    # session
    "AuthToken",
    "LoginResponse",
    "UserProfile",
    # wire
    "LoginApiResponse",
    "NonceResponse",
    "OAuth2TokenResponse",
    "error_detail",
    # login challenges
    "SiweMessage",
    "create_srp_raw_message",
]
