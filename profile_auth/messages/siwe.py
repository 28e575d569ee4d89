"""Sign-In with Ethereum (EIP-4361) message formatting."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class SiweMessage:
    """An EIP-4361 sign-in message.

    Attributes:
        domain: The requesting domain.
        address: The checksummed wallet address.
        uri: The resource the session is for.
        version: Message format version, always "1".
        chain_id: EIP-155 chain id the address is bound to.
        nonce: The server-issued challenge.
        issued_at: RFC3339 timestamp of message creation.
        statement: Optional human readable statement.
    """

    domain: str
    address: str
    uri: str
    chain_id: int
    nonce: str
    issued_at: str
    version: str = "1"
    statement: Optional[str] = None

    def prepare_message(self) -> str:
        """Render the exact text the wallet signs."""
        header = f"{self.domain} wants you to sign in with your Ethereum account:"
        prefix = f"{header}\n{self.address}\n\n"
        if self.statement:
            prefix += f"{self.statement}\n"

        fields = [
            f"URI: {self.uri}",
            f"Version: {self.version}",
            f"Chain ID: {self.chain_id}",
            f"Nonce: {self.nonce}",
            f"Issued At: {self.issued_at}",
        ]

        return prefix + "\n" + "\n".join(fields)
