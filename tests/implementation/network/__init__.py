"""Mock authentication service for profile-auth tests."""

from .mock_auth import (
    MOCK_ACCESS_JWT,
    MOCK_CLIENT_ID,
    MOCK_LOGIN_RESPONSE,
    MOCK_NONCE,
    MOCK_OIDC_RESPONSE,
    EndpointOverride,
    MockAuthApi,
)

__all__ = [
    "MOCK_ACCESS_JWT",
    "MOCK_CLIENT_ID",
    "MOCK_LOGIN_RESPONSE",
    "MOCK_NONCE",
    "MOCK_OIDC_RESPONSE",
    "EndpointOverride",
    "MockAuthApi",
]
