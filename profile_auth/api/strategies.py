"""Authentication strategies.

Exactly two identity strategies exist: SRP, which proves control of an
identity key, and SIWE, which proves control of a wallet address. Both
expose the same capability set to the login protocol, and the variant is
chosen once when the client is constructed.
"""

from __future__ import annotations

import inspect
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

import structlog

from profile_auth.encoding import Rfc3339Millis
from profile_auth.env import SIWE_LOGIN_PATH, SRP_LOGIN_PATH
from profile_auth.exceptions import SigningError, UnsupportedAuthTypeError, ValidationError
from profile_auth.interfaces import IAuthSigner, IProviderResolver, ITimestamper, SignMessageCallback
from profile_auth.messages import SiweMessage, create_srp_raw_message
from profile_auth.signing import SnapSigner
from profile_auth.validation import validate_login_message, validate_siwe_config, validate_signature

logger = structlog.get_logger(__name__)


class AuthType(str, Enum):
    """Identity strategy tags."""

    SRP = "SRP"
    SIWE = "SiWE"


def parse_auth_type(value: Any) -> AuthType:
    """Coerce a strategy tag to an AuthType.

    Raises:
        UnsupportedAuthTypeError: If the tag is not recognized.
    """
    try:
        return AuthType(value)
    except ValueError as e:
        raise UnsupportedAuthTypeError(f"unsupported auth type: {value!r}") from e


@dataclass
class SiweConfig:
    """Wallet binding supplied through prepare().

    Attributes:
        address: The wallet address that signs in.
        chain_id: Chain id the address is bound to.
        sign_message: Caller-owned callback returning a signature for a message.
        domain: Domain embedded in the sign-in message.
    """

    address: str
    chain_id: int
    sign_message: SignMessageCallback
    domain: str


class AuthStrategy(ABC):
    """Capabilities the login protocol needs from an identity strategy.

    Attributes:
        auth_type: The strategy tag.
        login_path: Login endpoint path for this strategy.
    """

    auth_type: AuthType
    login_path: str

    @abstractmethod
    async def get_identifier(self) -> str:
        """Return the public identifier the server issues nonces for."""
        ...

    @abstractmethod
    async def sign_message(self, message: str) -> str:
        """Sign a message, validating its shape first."""
        ...

    @abstractmethod
    async def create_login_raw_message(self, nonce: str) -> str:
        """Format the exact login challenge that is signed and submitted."""
        ...


class SrpStrategy(AuthStrategy):
    """Identity key strategy.

    Signs with the injected signer, or with the wallet's message-signing snap
    when no signer is given.
    """

    auth_type = AuthType.SRP
    login_path = SRP_LOGIN_PATH

    def __init__(
        self,
        signer: Optional[IAuthSigner] = None,
        provider_resolver: Optional[IProviderResolver] = None,
    ) -> None:
        self.signer: IAuthSigner = signer if signer is not None else SnapSigner(provider_resolver)

    async def get_identifier(self) -> str:
        return await self.signer.get_identifier()

    async def sign_message(self, message: str) -> str:
        validate_login_message(message)
        return validate_signature(await self.signer.sign_message(message))

    async def create_login_raw_message(self, nonce: str) -> str:
        return create_srp_raw_message(nonce, await self.get_identifier())


class SiweStrategy(AuthStrategy):
    """Wallet strategy.

    The signing key stays with the caller; this strategy only invokes the
    callback bound by prepare(). Every operation fails until prepare() has
    been called.
    """

    auth_type = AuthType.SIWE
    login_path = SIWE_LOGIN_PATH

    def __init__(self, timestamper: Optional[ITimestamper] = None) -> None:
        self._config: Optional[SiweConfig] = None
        self._timestamper: ITimestamper = timestamper or Rfc3339Millis()

    def prepare(self, config: SiweConfig) -> None:
        """Bind the wallet address, chain id, signer and domain.

        Raises:
            ValidationError: If the configuration is malformed. The previous
                binding, if any, is kept.
        """
        validate_siwe_config(config)
        self._config = config
        logger.debug("siwe_prepared", address=config.address, chain_id=config.chain_id)

    def _require_config(self) -> SiweConfig:
        if self._config is None:
            raise ValidationError("you must call 'prepare()' before using the SIWE flow")
        return self._config

    async def get_identifier(self) -> str:
        return self._require_config().address

    async def sign_message(self, message: str) -> str:
        config = self._require_config()
        if not isinstance(message, str) or not message:
            raise ValidationError("message must be a non-empty string")

        try:
            result = config.sign_message(message)
            if inspect.isawaitable(result):
                result = await result
        except Exception as e:
            logger.warning("wallet_signing_failed", address=config.address, error=str(e))
            raise SigningError(f"wallet failed to sign message: {e}") from e

        return validate_signature(result)

    async def create_login_raw_message(self, nonce: str) -> str:
        config = self._require_config()
        message = SiweMessage(
            domain=config.domain,
            address=config.address,
            uri=config.domain,
            chain_id=config.chain_id,
            nonce=nonce,
            issued_at=self._timestamper.format(self._timestamper.now()),
        )
        return message.prepare_message()


def create_strategy(
    auth_type: Any,
    signer: Optional[IAuthSigner] = None,
    provider_resolver: Optional[IProviderResolver] = None,
    timestamper: Optional[ITimestamper] = None,
) -> AuthStrategy:
    """Build the strategy for a tag.

    Raises:
        UnsupportedAuthTypeError: If the tag is not recognized.
    """
    kind = parse_auth_type(auth_type)
    if kind is AuthType.SRP:
        return SrpStrategy(signer, provider_resolver)

    return SiweStrategy(timestamper)
