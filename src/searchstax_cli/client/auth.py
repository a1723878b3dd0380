"""Authentication for the SearchStax API."""

from __future__ import annotations

import logging
from collections.abc import Generator

import httpx

from searchstax_cli.client.errors import (
    AuthenticationError,
    DecodeError,
    RemoteError,
    SearchStaxError,
    TransportError,
)
from searchstax_cli.config.constants import SIGN_IN_PATH
from searchstax_cli.config.models import AccountProfile

logger = logging.getLogger(__name__)


class TokenAuth(httpx.Auth):
    """Attach ``Authorization: Token <token>`` to every request."""

    def __init__(self, token: str) -> None:
        self.token = token

    def auth_flow(
        self, request: httpx.Request,
    ) -> Generator[httpx.Request, httpx.Response, None]:
        request.headers["Authorization"] = f"Token {self.token}"
        yield request


def sign_in(profile: AccountProfile) -> str:
    """Exchange the profile's username/password for an API token."""
    logger.info("Signing in to %s as %s", profile.host, profile.username)
    try:
        response = httpx.post(
            f"{profile.host}{SIGN_IN_PATH}",
            json={"username": profile.username, "password": profile.password},
            timeout=profile.timeout,
        )
    except httpx.HTTPError as exc:
        raise TransportError(
            f"Cannot reach {profile.host}: {exc}", context="sign-in",
        ) from exc
    if response.status_code in (401, 403):
        raise AuthenticationError(response.status_code, response.text, context="sign-in")
    if not response.is_success:
        raise RemoteError(response.status_code, response.text, context="sign-in")
    try:
        token = response.json()["token"]
    except (ValueError, KeyError, TypeError) as exc:
        raise DecodeError(f"No token in sign-in response: {exc}", context="sign-in") from exc
    if not isinstance(token, str) or not token:
        raise SearchStaxError("Sign-in returned an empty token", context="sign-in")
    return token


def resolve_auth(profile: AccountProfile) -> httpx.Auth | None:
    """Resolve authentication from a profile, signing in when needed."""
    if profile.token:
        return TokenAuth(profile.token)
    if profile.username and profile.password:
        return TokenAuth(sign_in(profile))
    return None
