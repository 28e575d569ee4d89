"""Profile-auth API package.

This package provides the authentication client, the identity strategies,
the login protocol driver and the session cache.
"""

from profile_auth.api.client import AuthConfig, AuthOptions, JwtBearerAuth
from profile_auth.api.services import JWT_BEARER_GRANT_TYPE, LoginService, ServiceConfig
from profile_auth.api.session import SessionCache
from profile_auth.api.strategies import (
    AuthStrategy,
    AuthType,
    SiweConfig,
    SiweStrategy,
    SrpStrategy,
    create_strategy,
    parse_auth_type,
)

__all__ = [
    # Client
    "JwtBearerAuth",
    "AuthConfig",
    "AuthOptions",
    # Strategies
    "AuthStrategy",
    "AuthType",
    "SiweConfig",
    "SiweStrategy",
    "SrpStrategy",
    "create_strategy",
    "parse_auth_type",
    # Protocol
    "JWT_BEARER_GRANT_TYPE",
    "LoginService",
    "ServiceConfig",
    # Session
    "SessionCache",
]
