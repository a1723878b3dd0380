"""HTTP transport: one authenticated request/response exchange per call."""

from __future__ import annotations

import json
import logging
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from searchstax_cli.client.auth import resolve_auth
from searchstax_cli.client.errors import (
    AuthenticationError,
    DecodeError,
    NotFoundError,
    RemoteError,
    RemoteRejection,
    TransportError,
)
from searchstax_cli.config.models import AccountProfile
from searchstax_cli.models.common import ApiEnvelope

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


class Transport:
    """Synchronous HTTP client for the SearchStax REST API.

    The bearer token is resolved once at construction and never changes.
    """

    def __init__(self, profile: AccountProfile, auth: httpx.Auth | None = None) -> None:
        self.profile = profile
        self.base_url = profile.host
        self._client = httpx.Client(
            base_url=self.base_url,
            auth=auth if auth is not None else resolve_auth(profile),
            timeout=profile.timeout,
            headers={"Content-Type": "application/json", "Accept": "application/json"},
        )

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> Transport:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def _handle_response(self, response: httpx.Response) -> bytes:
        body = response.content
        if response.is_success:
            return body
        status = response.status_code
        text = body.decode("utf-8", errors="replace")
        if status in (401, 403):
            raise AuthenticationError(status, text)
        if status == 404:
            raise NotFoundError(status, text)
        raise RemoteError(status, text)

    def request(
        self, method: str, path: str, *, json_body: Any = None,
    ) -> bytes:
        """Perform one request and return the raw body of a 2xx response."""
        logger.debug("%s %s", method, path)
        content = json.dumps(json_body).encode() if json_body is not None else None
        try:
            response = self._client.request(method, path, content=content)
        except (httpx.InvalidURL, httpx.UnsupportedProtocol) as exc:
            raise TransportError(
                f"Invalid URL for {self.base_url}{path}: {exc}", context="request",
            ) from exc
        except httpx.TimeoutException as exc:
            raise TransportError(
                f"Request to {self.base_url} timed out: {exc}", context="transport",
            ) from exc
        except httpx.TransportError as exc:
            raise TransportError(
                f"Cannot connect to {self.base_url}: {exc}", context="transport",
            ) from exc
        return self._handle_response(response)

    def get(self, path: str) -> bytes:
        return self.request("GET", path)

    def post(self, path: str, json_body: Any = None) -> bytes:
        return self.request("POST", path, json_body=json_body)

    def delete(self, path: str) -> bytes:
        return self.request("DELETE", path)

    def get_json(self, path: str) -> Any:
        return decode_json(self.get(path))


def decode_json(body: bytes) -> Any:
    """Parse a response body, raising DecodeError on malformed JSON."""
    try:
        return json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise DecodeError(f"Malformed JSON in response: {exc}") from exc


def decode_model(model: type[M], body: bytes) -> M:
    """Parse a response body into ``model``, raising DecodeError on mismatch."""
    data = decode_json(body)
    try:
        return model.model_validate(data)
    except ValidationError as exc:
        raise DecodeError(
            f"Unexpected {model.__name__} payload: {exc.error_count()} invalid field(s)",
        ) from exc


def expect_success(body: bytes) -> ApiEnvelope:
    """Decode a ``{success, message}`` envelope and require ``success == "true"``."""
    envelope = decode_model(ApiEnvelope, body)
    if not envelope.succeeded:
        raise RemoteRejection(envelope.message or f"success={envelope.success!r}")
    return envelope
