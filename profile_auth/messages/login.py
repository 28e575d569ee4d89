"""Cached session record classes for profile-auth.

A LoginResponse is produced only by a complete login and is never mutated;
a refresh replaces it wholesale.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class AuthToken:
    """Access token with its lifetime.

    Attributes:
        access_token: The bearer token for downstream profile APIs.
        expires_in: Token lifetime in seconds.
        obtained_at: When the token was obtained, in epoch milliseconds.
    """

    access_token: str
    expires_in: int
    obtained_at: int

    @property
    def expires_at(self) -> int:
        """Absolute expiry in epoch milliseconds."""
        return self.obtained_at + self.expires_in * 1000

    def is_fresh(self, now_ms: int) -> bool:
        """Whether the token may still be served at `now_ms`.

        A token exactly at its expiry is stale.
        """
        return now_ms < self.expires_at


@dataclass(frozen=True)
class UserProfile:
    """Identifiers assigned to the user by the identity service."""

    identifier_id: str
    profile_id: str
    metametrics_id: str

    def to_dict(self) -> Dict[str, str]:
        return {
            "identifierId": self.identifier_id,
            "profileId": self.profile_id,
            "metaMetricsId": self.metametrics_id,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> UserProfile:
        return cls(
            identifier_id=data["identifierId"],
            profile_id=data["profileId"],
            metametrics_id=data["metaMetricsId"],
        )


@dataclass(frozen=True)
class LoginResponse:
    """The cached session: access token plus user profile.

    The dictionary form is the storage shape:
    {
        "token": {"accessToken": ..., "expiresIn": ..., "obtainedAt": ...},
        "profile": {"identifierId": ..., "profileId": ..., "metaMetricsId": ...}
    }
    """

    token: AuthToken
    profile: UserProfile

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the storage dictionary shape."""
        return {
            "token": {
                "accessToken": self.token.access_token,
                "expiresIn": self.token.expires_in,
                "obtainedAt": self.token.obtained_at,
            },
            "profile": self.profile.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> LoginResponse:
        """Create an instance from the storage dictionary shape.

        Raises:
            KeyError: If required fields are missing.
        """
        token = data["token"]
        return cls(
            token=AuthToken(
                access_token=token["accessToken"],
                expires_in=int(token["expiresIn"]),
                obtained_at=int(token["obtainedAt"]),
            ),
            profile=UserProfile.from_dict(data["profile"]),
        )
