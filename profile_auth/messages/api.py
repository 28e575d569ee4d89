"""Authentication service wire messages.

This module parses the JSON bodies returned by the nonce, login and token
endpoints.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Dict

from profile_auth.messages.login import UserProfile


def _load_object(message: str) -> Dict[str, Any]:
    data = json.loads(message)
    if not isinstance(data, dict):
        raise ValueError("expected a JSON object")
    return data


def _required_str(data: Dict[str, Any], key: str) -> str:
    value = data[key]
    if not isinstance(value, str) or not value:
        raise ValueError(f"{key} must be a non-empty string")
    return value


def _required_int(data: Dict[str, Any], key: str) -> int:
    value = data[key]
    # bool is an int subclass
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{key} must be an integer")
    return value


@dataclass(frozen=True)
class NonceResponse:
    """Server-issued login challenge.

    Attributes:
        nonce: The single-use challenge string.
        identifier: The identifier the nonce was issued for.
        expires_in: Server-side validity window in seconds.
    """

    nonce: str
    identifier: str
    expires_in: int

    @staticmethod
    def parse(message: str) -> NonceResponse:
        """Parse a nonce response body.

        Raises:
            json.JSONDecodeError: If the message is not valid JSON.
            KeyError: If required fields are missing.
            ValueError: If a required field has the wrong type or is empty.
        """
        data = _load_object(message)
        return NonceResponse(
            nonce=_required_str(data, "nonce"),
            identifier=data.get("identifier", ""),
            expires_in=int(data.get("expires_in", 0)),
        )


@dataclass(frozen=True)
class LoginApiResponse:
    """Result of submitting a signed login message.

    Attributes:
        token: Login token, exchanged for an access token in the next step.
        expires_in: Login token lifetime in seconds.
        profile: The user profile identifiers.
    """

    token: str
    expires_in: int
    profile: UserProfile

    @staticmethod
    def parse(message: str) -> LoginApiResponse:
        """Parse a login response body.

        Raises:
            json.JSONDecodeError: If the message is not valid JSON.
            KeyError: If required fields are missing.
            ValueError: If a required field has the wrong type or is empty.
        """
        data = _load_object(message)
        profile = data["profile"]
        if not isinstance(profile, dict):
            raise ValueError("profile must be a JSON object")
        return LoginApiResponse(
            token=_required_str(data, "token"),
            expires_in=_required_int(data, "expires_in"),
            profile=UserProfile(
                identifier_id=_required_str(profile, "identifier_id"),
                profile_id=_required_str(profile, "profile_id"),
                metametrics_id=_required_str(profile, "metametrics_id"),
            ),
        )


@dataclass(frozen=True)
class OAuth2TokenResponse:
    """Result of the JWT bearer token exchange."""

    access_token: str
    expires_in: int

    @staticmethod
    def parse(message: str) -> OAuth2TokenResponse:
        """Parse a token endpoint response body.

        Raises:
            json.JSONDecodeError: If the message is not valid JSON.
            KeyError: If required fields are missing.
            ValueError: If a required field has the wrong type or is empty.
        """
        data = _load_object(message)
        return OAuth2TokenResponse(
            access_token=_required_str(data, "access_token"),
            expires_in=_required_int(data, "expires_in"),
        )


def error_detail(message: str) -> str:
    """Extract a human readable error from an error response body.

    Error bodies use either `{"message", "error"}` or the OAuth2
    `{"error", "error_description"}` shape. Non-JSON bodies are returned as is.
    """
    try:
        data = _load_object(message)
    except ValueError:
        return message.strip() or "empty response"

    for key in ("message", "error_description", "error"):
        value = data.get(key)
        if isinstance(value, str) and value:
            return value

    return message.strip()
