"""In-process mock of the authentication and OIDC services.

Requests are routed through httpx.MockTransport. Each endpoint records
whether it was called and the requests it received, so tests can assert
which protocol steps ran.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional
from urllib.parse import parse_qs

import httpx

from profile_auth.env import SIWE_LOGIN_PATH, SRP_LOGIN_PATH, Env, get_env_urls

MOCK_CLIENT_ID = "f1a963d7-50dc-4cb5-8d81-f1f3654f0df3"
MOCK_NONCE = "4cbfqzoQpcNxVImGv"
MOCK_LOGIN_TOKEN = "eyJhbGciOiJFUzI1NiJ9.login.token"
MOCK_ACCESS_JWT = "eyJhbGciOiJSUzI1NiJ9.access.token"

MOCK_LOGIN_RESPONSE: Dict[str, Any] = {
    "token": MOCK_LOGIN_TOKEN,
    "expires_in": 3600,
    "profile": {
        "identifier_id": "da9a9fc7b09edde9cc23cec9b7e11a71fb0ab4d2ddd8af8af905306f3e1456fb",
        "profile_id": "f88227bd-b615-41a3-b0be-467dd781a4ad",
        "metametrics_id": "561ec651-a844-4b36-a451-04d6eac35740",
    },
}

MOCK_OIDC_RESPONSE: Dict[str, Any] = {
    "access_token": MOCK_ACCESS_JWT,
    "expires_in": 3600,
}


@dataclass
class EndpointOverride:
    """Replacement response for one endpoint.

    With `unreachable` set, the endpoint raises a connection error instead
    of responding.
    """

    status: int = 200
    body: Any = None
    unreachable: bool = False


@dataclass
class Endpoint:
    """A mocked endpoint with its call record."""

    status: int
    body: Any
    unreachable: bool = False
    requests: List[httpx.Request] = field(default_factory=list)

    @property
    def is_done(self) -> bool:
        return len(self.requests) > 0

    def respond(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.unreachable:
            raise httpx.ConnectError("connection refused", request=request)
        return httpx.Response(self.status, json=self.body)


class MockAuthApi:
    """Mock of the nonce, SRP login, SIWE login and OIDC token endpoints.

    Attributes:
        nonce: Nonce endpoint.
        srp_login: SRP login endpoint.
        siwe_login: SIWE login endpoint.
        oauth2_token: OIDC token endpoint.
    """

    def __init__(
        self,
        env: Env = Env.PRD,
        nonce: Optional[EndpointOverride] = None,
        srp_login: Optional[EndpointOverride] = None,
        siwe_login: Optional[EndpointOverride] = None,
        oauth2_token: Optional[EndpointOverride] = None,
    ) -> None:
        self.urls = get_env_urls(env)
        self.nonce = self._endpoint(nonce, {"nonce": MOCK_NONCE, "identifier": "", "expires_in": 300})
        self.srp_login = self._endpoint(srp_login, MOCK_LOGIN_RESPONSE)
        self.siwe_login = self._endpoint(siwe_login, MOCK_LOGIN_RESPONSE)
        self.oauth2_token = self._endpoint(oauth2_token, MOCK_OIDC_RESPONSE)

    @staticmethod
    def _endpoint(override: Optional[EndpointOverride], body: Dict[str, Any]) -> Endpoint:
        if override is not None:
            return Endpoint(override.status, override.body, override.unreachable)
        return Endpoint(200, body)

    def _route(self, request: httpx.Request) -> httpx.Response:
        origin = f"{request.url.scheme}://{request.url.host}"
        path = request.url.path

        if origin == self.urls.auth_api and path == "/api/v2/nonce" and request.method == "GET":
            return self.nonce.respond(request)

        if origin == self.urls.auth_api and path == SRP_LOGIN_PATH and request.method == "POST":
            return self.srp_login.respond(request)

        if origin == self.urls.auth_api and path == SIWE_LOGIN_PATH and request.method == "POST":
            return self.siwe_login.respond(request)

        if origin == self.urls.oidc_api and path == "/oauth2/token" and request.method == "POST":
            return self.oauth2_token.respond(request)

        return httpx.Response(404, json={"error": "not-found", "message": f"unexpected path: {path}"})

    def client(self) -> httpx.AsyncClient:
        """Create an HTTP client routed to this mock."""
        return httpx.AsyncClient(transport=httpx.MockTransport(self._route))

    @staticmethod
    def json_body(request: httpx.Request) -> Dict[str, Any]:
        return json.loads(request.content)

    @staticmethod
    def form_body(request: httpx.Request) -> Dict[str, str]:
        return {key: values[0] for key, values in parse_qs(request.content.decode("utf-8")).items()}
