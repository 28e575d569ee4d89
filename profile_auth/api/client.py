"""JWT bearer authentication client.

This module provides JwtBearerAuth, the public entry point that wires an
identity strategy, an environment and caller-provided storage into the
login protocol and session cache.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

import httpx
import structlog

from profile_auth.api.services import LoginService, ServiceConfig
from profile_auth.api.session import SessionCache
from profile_auth.api.strategies import AuthStrategy, AuthType, SiweConfig, SiweStrategy, create_strategy
from profile_auth.env import Env, Platform, get_env_urls, parse_platform
from profile_auth.exceptions import UnsupportedAuthTypeError
from profile_auth.interfaces import IAuthSigner, ILoginResponseStore, IProviderResolver, ITimestamper
from profile_auth.messages import UserProfile

logger = structlog.get_logger(__name__)


@dataclass
class AuthConfig:
    """What to authenticate against and how.

    Attributes:
        env: Target deployment environment.
        platform: Client platform tag.
        type: Identity strategy tag, AuthType.SRP or AuthType.SIWE.
        client_id: OIDC client id registered for the platform.
    """

    env: Env
    platform: Platform
    type: Any
    client_id: str


@dataclass
class AuthOptions:
    """Collaborators injected into the client.

    Attributes:
        storage: Storage for the cached login session.
        signing: Identity key signer (SRP only). When None, the wallet's
            message-signing snap is used through provider_resolver.
        provider_resolver: Locates the wallet provider for the default SRP
            signing mode.
        http_client: HTTP client for all requests. When None, the client
            creates one and closes it in aclose().
        timestamper: Clock used for session freshness and SIWE timestamps.
    """

    storage: ILoginResponseStore
    signing: Optional[IAuthSigner] = None
    provider_resolver: Optional[IProviderResolver] = None
    http_client: Optional[httpx.AsyncClient] = None
    timestamper: Optional[ITimestamper] = None


class JwtBearerAuth:
    """Authentication session manager.

    Proves control of an identity to the authentication service and keeps a
    cached access token for downstream profile APIs, logging in again only
    when the cached token has expired.

    Example:
        ```python
        auth = JwtBearerAuth(
            AuthConfig(env=Env.PRD, platform=Platform.EXTENSION, type=AuthType.SIWE, client_id=client_id),
            AuthOptions(storage=my_store),
        )
        auth.prepare(SiweConfig(address=address, chain_id=1, sign_message=wallet.sign, domain="https://example.org"))

        token = await auth.get_access_token()
        profile = await auth.get_user_profile()
        ```

    Attributes:
        config: The client configuration.
        options: The injected collaborators.
    """

    def __init__(self, config: AuthConfig, options: AuthOptions) -> None:
        """Initialize the client.

        Args:
            config: Environment, platform, strategy tag and client id.
            options: Storage, signer, provider resolver, HTTP client and clock.

        Raises:
            UnsupportedAuthTypeError: If config.type is not a known strategy.
            ValidationError: If config.env is not a known environment.
        """
        self.config = config
        self.options = options

        self._strategy: AuthStrategy = create_strategy(
            config.type,
            signer=options.signing,
            provider_resolver=options.provider_resolver,
            timestamper=options.timestamper,
        )
        urls = get_env_urls(config.env)
        platform = parse_platform(config.platform)

        self._owns_http = options.http_client is None
        self._http = options.http_client if options.http_client is not None else httpx.AsyncClient()

        self._service = LoginService(
            ServiceConfig(
                urls=urls,
                client_id=config.client_id,
                platform=platform,
            ),
            self._http,
            options.timestamper,
        )
        self._session = SessionCache(
            options.storage,
            lambda: self._service.login(self._strategy),
            options.timestamper,
        )
        logger.debug(
            "auth_client_created",
            auth_type=self._strategy.auth_type.value,
            env=urls.auth_api,
            platform=platform.value,
        )

    @property
    def auth_type(self) -> AuthType:
        return self._strategy.auth_type

    def prepare(self, signer: SiweConfig) -> None:
        """Bind a wallet signer. Only available for the SIWE strategy.

        Raises:
            UnsupportedAuthTypeError: If the strategy is not SIWE.
            ValidationError: If the signer configuration is malformed.
        """
        if not isinstance(self._strategy, SiweStrategy):
            raise UnsupportedAuthTypeError("prepare() is only available via SIWE auth type")

        self._strategy.prepare(signer)

    async def get_access_token(self) -> str:
        """Get an access token, logging in if the cached one is missing or expired.

        Raises:
            NonceRetrievalError: If a login was needed and the nonce step failed.
            SignInError: If a login was needed and the login or token step failed.
            ValidationError: If a login was needed and the strategy is not usable.
        """
        return await self._session.get_access_token()

    async def get_user_profile(self) -> UserProfile:
        """Get the user profile, logging in if the cached session is missing or expired."""
        return await self._session.get_user_profile()

    async def is_signed_in(self) -> bool:
        """Whether a session has been stored."""
        return await self._session.is_signed_in()

    async def get_identifier(self) -> str:
        """Get the strategy's public identifier.

        Raises:
            ValidationError: If the strategy has no usable signer or provider.
        """
        return await self._strategy.get_identifier()

    async def sign_message(self, message: str) -> str:
        """Sign a message with the strategy's signer. Not cached.

        Raises:
            ValidationError: If the message is malformed or there is no usable signer.
            SigningError: If the signer fails.
        """
        return await self._strategy.sign_message(message)

    async def aclose(self) -> None:
        """Close the HTTP client if this instance created it."""
        if self._owns_http:
            await self._http.aclose()

    async def __aenter__(self) -> JwtBearerAuth:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()
