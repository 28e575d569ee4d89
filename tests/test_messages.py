"""Tests for session records, wire messages and reference storage."""

from __future__ import annotations

import json
import threading
from pathlib import Path

import pytest

from examples.implementation.storage import FileLoginResponseStore, StorageError
from profile_auth.env import Env, get_env_urls
from profile_auth.exceptions import ValidationError
from profile_auth.messages import (
    AuthToken,
    LoginApiResponse,
    LoginResponse,
    NonceResponse,
    OAuth2TokenResponse,
    SiweMessage,
    UserProfile,
    error_detail,
)

STORED = {
    "token": {"accessToken": "access", "expiresIn": 3600, "obtainedAt": 1_717_243_200_000},
    "profile": {"identifierId": "identifier", "profileId": "profile", "metaMetricsId": "metametrics"},
}


def test_login_response_storage_shape() -> None:
    record = LoginResponse.from_dict(STORED)

    assert record.token == AuthToken(access_token="access", expires_in=3600, obtained_at=1_717_243_200_000)
    assert record.profile == UserProfile(identifier_id="identifier", profile_id="profile", metametrics_id="metametrics")
    assert record.to_dict() == STORED


def test_login_response_is_immutable() -> None:
    record = LoginResponse.from_dict(STORED)

    with pytest.raises(AttributeError):
        record.token = None  # type: ignore[misc]


def test_parse_wire_messages() -> None:
    nonce = NonceResponse.parse('{"nonce":"abc","identifier":"0x01","expires_in":300}')
    assert nonce == NonceResponse(nonce="abc", identifier="0x01", expires_in=300)

    login = LoginApiResponse.parse(
        json.dumps(
            {
                "token": "login-token",
                "expires_in": 3600,
                "profile": {"identifier_id": "i", "profile_id": "p", "metametrics_id": "m"},
            }
        )
    )
    assert login.token == "login-token"
    assert login.profile == UserProfile(identifier_id="i", profile_id="p", metametrics_id="m")

    token = OAuth2TokenResponse.parse('{"access_token":"jwt","expires_in":900,"token_type":"Bearer"}')
    assert token == OAuth2TokenResponse(access_token="jwt", expires_in=900)


def test_parse_rejects_malformed_bodies() -> None:
    with pytest.raises(KeyError):
        NonceResponse.parse("{}")

    with pytest.raises(ValueError):
        OAuth2TokenResponse.parse("not json")

    with pytest.raises(ValueError):
        LoginApiResponse.parse("[]")

    with pytest.raises(ValueError, match="nonce"):
        NonceResponse.parse('{"nonce": null}')

    with pytest.raises(ValueError, match="access_token"):
        OAuth2TokenResponse.parse('{"access_token": null, "expires_in": 3600}')

    with pytest.raises(ValueError, match="expires_in"):
        OAuth2TokenResponse.parse('{"access_token": "jwt", "expires_in": "3600"}')

    with pytest.raises(ValueError, match="profile"):
        LoginApiResponse.parse('{"token": "jwt", "expires_in": 3600, "profile": "id"}')


def test_error_detail() -> None:
    assert error_detail('{"message":"invalid identifier","error":"validation-error"}') == "invalid identifier"
    assert error_detail('{"error":"invalid_request","error_description":"invalid JWT token"}') == "invalid JWT token"
    assert error_detail('{"error":"invalid_request"}') == "invalid_request"
    assert error_detail("Bad Gateway") == "Bad Gateway"
    assert error_detail("") == "empty response"


def test_siwe_message_with_statement() -> None:
    message = SiweMessage(
        domain="example.org",
        address="0x68757d15a4d8d1421c17003512AFce15D3f3FaDa",
        uri="https://example.org",
        chain_id=1,
        nonce="abc",
        issued_at="2025-01-01T00:00:00.000Z",
        statement="Sign in to sync your profile.",
    )

    lines = message.prepare_message().split("\n")

    assert lines[:5] == [
        "example.org wants you to sign in with your Ethereum account:",
        "0x68757d15a4d8d1421c17003512AFce15D3f3FaDa",
        "",
        "Sign in to sync your profile.",
        "",
    ]
    assert lines[5] == "URI: https://example.org"


def test_env_urls() -> None:
    urls = get_env_urls(Env.DEV)

    assert urls.nonce_url("0x01") == "https://authentication.dev-api.cx.metamask.io/api/v2/nonce?identifier=0x01"
    assert urls.oidc_token_url() == "https://oidc.dev-api.cx.metamask.io/oauth2/token"
    assert get_env_urls("prd") == get_env_urls(Env.PRD)

    with pytest.raises(ValidationError):
        get_env_urls("qa")


@pytest.mark.asyncio
async def test_file_store_round_trip(tmp_path: Path) -> None:
    store = FileLoginResponseStore(tmp_path / "session" / "login.json")

    assert await store.get_login_response() is None

    record = LoginResponse.from_dict(STORED)
    await store.set_login_response(record)

    assert await FileLoginResponseStore(store.path).get_login_response() == record
    assert [path.name for path in store.path.parent.iterdir()] == ["login.json"]


@pytest.mark.asyncio
async def test_file_store_rejects_corrupt_file(tmp_path: Path) -> None:
    path = tmp_path / "login.json"
    path.write_text('{"token": {}}', encoding="utf-8")

    with pytest.raises(StorageError):
        await FileLoginResponseStore(path).get_login_response()


@pytest.mark.asyncio
async def test_file_store_runs_io_off_the_event_loop(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    store = FileLoginResponseStore(tmp_path / "login.json")
    loop_thread = threading.get_ident()
    io_threads = []

    read, write = store._read, store._write

    def tracked_read() -> object:
        io_threads.append(threading.get_ident())
        return read()

    def tracked_write(record: dict) -> None:
        io_threads.append(threading.get_ident())
        write(record)

    monkeypatch.setattr(store, "_read", tracked_read)
    monkeypatch.setattr(store, "_write", tracked_write)

    await store.set_login_response(LoginResponse.from_dict(STORED))
    assert await store.get_login_response() == LoginResponse.from_dict(STORED)

    assert len(io_threads) == 2
    assert loop_thread not in io_threads
