"""Login protocol driver.

A login is three sequential requests:

1. Fetch a nonce for the strategy's identifier.
2. Submit the signed login challenge, receiving a login token and profile.
3. Exchange the login token for an access token (OAuth2 JWT bearer grant).

Each step short-circuits: a failure at one step means no later request is
sent. Nothing is retried.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Optional, Type

import httpx
import structlog

from profile_auth.api.strategies import AuthStrategy
from profile_auth.encoding import Rfc3339Millis, epoch_millis
from profile_auth.env import EnvUrls, Platform
from profile_auth.exceptions import NonceRetrievalError, ProfileAuthError, SignInError
from profile_auth.interfaces import ITimestamper
from profile_auth.messages import (
    AuthToken,
    LoginApiResponse,
    LoginResponse,
    NonceResponse,
    OAuth2TokenResponse,
    error_detail,
)

logger = structlog.get_logger(__name__)

JWT_BEARER_GRANT_TYPE = "urn:ietf:params:oauth:grant-type:jwt-bearer"

_PARSE_ERRORS = (ValueError, KeyError, TypeError)


@dataclass
class ServiceConfig:
    """Configuration for the login protocol driver.

    Attributes:
        urls: Service URLs of the selected environment.
        client_id: OIDC client id used in the token exchange.
        platform: Platform tag, sent as the user agent.
    """

    urls: EnvUrls
    client_id: str
    platform: Platform


class LoginService:
    """Runs the nonce, login and token exchange requests.

    Attributes:
        config: Service configuration.
        http: HTTP client used for every request.
    """

    def __init__(
        self,
        config: ServiceConfig,
        http: httpx.AsyncClient,
        timestamper: Optional[ITimestamper] = None,
    ) -> None:
        self.config = config
        self.http = http
        self._timestamper: ITimestamper = timestamper or Rfc3339Millis()

    def _headers(self) -> Dict[str, str]:
        return {"User-Agent": f"profile-auth ({self.config.platform.value})"}

    async def _send(
        self,
        error: Type[ProfileAuthError],
        description: str,
        build: Callable[[], httpx.Request],
    ) -> str:
        """Send one request, translating any failure into `error`."""
        try:
            response = await self.http.send(build())
        except httpx.HTTPError as e:
            logger.warning("request_failed", step=description, error=str(e))
            raise error(f"{description}: {e}") from e

        if not response.is_success:
            detail = error_detail(response.text)
            logger.warning("request_rejected", step=description, status=response.status_code, detail=detail)
            raise error(f"{description}: HTTP {response.status_code} {detail}")

        return response.text

    async def get_nonce(self, identifier: str) -> NonceResponse:
        """Request a login nonce for an identifier.

        Raises:
            NonceRetrievalError: On transport failure, non-2xx status or a
                malformed body.
        """
        reply = await self._send(
            NonceRetrievalError,
            "failed to generate nonce",
            lambda: self.http.build_request(
                "GET", self.config.urls.nonce_url(identifier), headers=self._headers()
            ),
        )

        try:
            return NonceResponse.parse(reply)
        except _PARSE_ERRORS as e:
            raise NonceRetrievalError("failed to generate nonce: malformed response") from e

    async def authenticate(
        self, raw_message: str, signature: str, login_path: str
    ) -> LoginApiResponse:
        """Submit a signed login challenge.

        Args:
            raw_message: The exact message that was signed.
            signature: The signature over raw_message.
            login_path: Strategy-specific login endpoint path.

        Raises:
            SignInError: On transport failure, non-2xx status or a malformed body.
        """
        reply = await self._send(
            SignInError,
            "unable to login",
            lambda: self.http.build_request(
                "POST",
                self.config.urls.login_url(login_path),
                json={"signature": signature, "raw_message": raw_message},
                headers=self._headers(),
            ),
        )

        try:
            return LoginApiResponse.parse(reply)
        except _PARSE_ERRORS as e:
            raise SignInError("unable to login: malformed response") from e

    async def authorize_oidc(self, login_token: str) -> OAuth2TokenResponse:
        """Exchange a login token for an access token.

        Raises:
            SignInError: On transport failure, non-2xx status or a malformed body.
        """
        reply = await self._send(
            SignInError,
            "unable to get access token",
            lambda: self.http.build_request(
                "POST",
                self.config.urls.oidc_token_url(),
                data={
                    "grant_type": JWT_BEARER_GRANT_TYPE,
                    "client_id": self.config.client_id,
                    "assertion": login_token,
                },
                headers=self._headers(),
            ),
        )

        try:
            return OAuth2TokenResponse.parse(reply)
        except _PARSE_ERRORS as e:
            raise SignInError("unable to get access token: malformed response") from e

    async def login(self, strategy: AuthStrategy) -> LoginResponse:
        """Run the full login protocol for a strategy.

        Returns:
            A new LoginResponse, timestamped after the token exchange.

        Raises:
            NonceRetrievalError: If the nonce step fails.
            SignInError: If the login or token exchange step fails.
            ValidationError: If the strategy is not usable.
            SigningError: If signing the challenge fails.
        """
        identifier = await strategy.get_identifier()
        log = logger.bind(auth_type=strategy.auth_type.value, identifier=identifier)

        log.debug("nonce_requested")
        nonce = await self.get_nonce(identifier)

        raw_message = await strategy.create_login_raw_message(nonce.nonce)
        signature = await strategy.sign_message(raw_message)
        log.debug("challenge_signed")

        login = await self.authenticate(raw_message, signature, strategy.login_path)
        log.debug("logged_in", profile_id=login.profile.profile_id)

        token = await self.authorize_oidc(login.token)
        log.info("access_token_obtained", expires_in=token.expires_in)

        return LoginResponse(
            token=AuthToken(
                access_token=token.access_token,
                expires_in=token.expires_in,
                obtained_at=epoch_millis(self._timestamper.now()),
            ),
            profile=login.profile,
        )
