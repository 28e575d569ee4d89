"""Deployment environment configuration for profile-auth.

This module maps environment selectors to the authentication and OIDC
service base URLs, and builds the endpoint URLs used by the login protocol.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict
from urllib.parse import urlencode

from profile_auth.exceptions import ValidationError


class Env(str, Enum):
    """Target deployment environments."""

    PRD = "prd"
    UAT = "uat"
    DEV = "dev"


class Platform(str, Enum):
    """Client platform tag, sent as the user agent."""

    EXTENSION = "extension"
    MOBILE = "mobile"
    PORTFOLIO = "portfolio"
    INFURA = "infura"


@dataclass(frozen=True)
class EnvUrls:
    """Service base URLs for one environment.

    Attributes:
        auth_api: Base URL of the authentication API (nonce and login).
        oidc_api: Base URL of the OIDC token service.
    """

    auth_api: str
    oidc_api: str

    def nonce_url(self, identifier: str) -> str:
        return f"{self.auth_api}/api/v2/nonce?{urlencode({'identifier': identifier})}"

    def login_url(self, login_path: str) -> str:
        return f"{self.auth_api}{login_path}"

    def oidc_token_url(self) -> str:
        return f"{self.oidc_api}/oauth2/token"


SRP_LOGIN_PATH = "/api/v2/srp/login"
SIWE_LOGIN_PATH = "/api/v2/siwe/login"

_ENV_URLS: Dict[Env, EnvUrls] = {
    Env.PRD: EnvUrls(
        auth_api="https://authentication.api.cx.metamask.io",
        oidc_api="https://oidc.api.cx.metamask.io",
    ),
    Env.UAT: EnvUrls(
        auth_api="https://authentication.uat-api.cx.metamask.io",
        oidc_api="https://oidc.uat-api.cx.metamask.io",
    ),
    Env.DEV: EnvUrls(
        auth_api="https://authentication.dev-api.cx.metamask.io",
        oidc_api="https://oidc.dev-api.cx.metamask.io",
    ),
}


def get_env_urls(env: Env | str) -> EnvUrls:
    """Look up the service URLs for an environment.

    Args:
        env: The environment, as an Env member or its string value.

    Returns:
        The EnvUrls for the environment.

    Raises:
        ValidationError: If the environment is not recognized.
    """
    try:
        return _ENV_URLS[Env(env)]
    except ValueError as e:
        raise ValidationError(f"invalid environment configuration: {env!r}") from e


def parse_platform(platform: Platform | str) -> Platform:
    """Coerce a platform tag to a Platform.

    Raises:
        ValidationError: If the platform is not recognized.
    """
    try:
        return Platform(platform)
    except ValueError as e:
        raise ValidationError(f"invalid platform: {platform!r}") from e
