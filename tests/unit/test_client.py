"""Tests for authentication and the HTTP transport."""

from __future__ import annotations

import json

import httpx
import pytest
import respx

from searchstax_cli.client.auth import TokenAuth, resolve_auth, sign_in
from searchstax_cli.client.errors import (
    AuthenticationError,
    DecodeError,
    NotFoundError,
    RemoteError,
    RemoteRejection,
    TransportError,
)
from searchstax_cli.client.transport import Transport, decode_model, expect_success
from searchstax_cli.config.models import AccountProfile
from searchstax_cli.models.deployment import Deployment

HOST = "https://api.test/api/rest/v2"


class TestAuth:
    def test_token_auth_header(self):
        auth = TokenAuth("abc123")
        request = httpx.Request("GET", "https://example.com")
        modified = next(auth.auth_flow(request))
        assert modified.headers["Authorization"] == "Token abc123"

    def test_resolve_auth_token(self):
        profile = AccountProfile(name="t", host=HOST, token="abc")
        auth = resolve_auth(profile)
        assert isinstance(auth, TokenAuth)
        assert auth.token == "abc"

    def test_resolve_auth_none(self):
        assert resolve_auth(AccountProfile(name="t", host=HOST)) is None

    @respx.mock
    def test_resolve_auth_signs_in(self):
        route = respx.post(f"{HOST}/obtain-auth-token/").mock(
            return_value=httpx.Response(200, json={"token": "fresh"})
        )
        profile = AccountProfile(name="t", host=HOST, username="me", password="pw")
        auth = resolve_auth(profile)
        assert isinstance(auth, TokenAuth)
        assert auth.token == "fresh"
        assert json.loads(route.calls.last.request.content) == {
            "username": "me", "password": "pw",
        }

    @respx.mock
    def test_sign_in_rejected(self):
        respx.post(f"{HOST}/obtain-auth-token/").mock(
            return_value=httpx.Response(400, json={"non_field_errors": ["bad"]})
        )
        profile = AccountProfile(name="t", host=HOST, username="me", password="bad")
        with pytest.raises(RemoteError, match="sign-in: status: 400"):
            sign_in(profile)

    @respx.mock
    def test_sign_in_bad_credentials(self):
        respx.post(f"{HOST}/obtain-auth-token/").mock(
            return_value=httpx.Response(401, json={"detail": "Invalid credentials."})
        )
        profile = AccountProfile(name="t", host=HOST, username="me", password="bad")
        with pytest.raises(AuthenticationError, match="sign-in: status: 401") as exc_info:
            sign_in(profile)
        assert exc_info.value.exit_code == 3

    @respx.mock
    def test_sign_in_without_token(self):
        respx.post(f"{HOST}/obtain-auth-token/").mock(
            return_value=httpx.Response(200, json={})
        )
        profile = AccountProfile(name="t", host=HOST, username="me", password="pw")
        with pytest.raises(DecodeError):
            sign_in(profile)


class TestTransport:
    @pytest.fixture
    def transport(self):
        with Transport(AccountProfile(name="t", host=HOST, token="tok")) as t:
            yield t

    @respx.mock
    def test_headers(self, transport: Transport):
        route = respx.get(f"{HOST}/ping/").mock(
            return_value=httpx.Response(200, content=b"pong")
        )
        assert transport.get("/ping/") == b"pong"
        request = route.calls.last.request
        assert request.headers["Authorization"] == "Token tok"
        assert request.headers["Content-Type"] == "application/json"

    @respx.mock
    def test_post_encodes_json(self, transport: Transport):
        route = respx.post(f"{HOST}/items/").mock(
            return_value=httpx.Response(201, json={"ok": True})
        )
        transport.post("/items/", json_body={"name": "x"})
        assert json.loads(route.calls.last.request.content) == {"name": "x"}

    @respx.mock
    def test_no_token_no_header(self):
        route = respx.get(f"{HOST}/ping/").mock(return_value=httpx.Response(200))
        with Transport(AccountProfile(name="t", host=HOST)) as t:
            t.get("/ping/")
        assert "Authorization" not in route.calls.last.request.headers

    @respx.mock
    def test_server_error(self, transport: Transport):
        respx.get(f"{HOST}/broken/").mock(
            return_value=httpx.Response(500, text="Internal Server Error")
        )
        with pytest.raises(RemoteError) as exc_info:
            transport.get("/broken/")
        assert exc_info.value.status_code == 500
        assert exc_info.value.body == "Internal Server Error"

    @respx.mock
    def test_not_found(self, transport: Transport):
        respx.get(f"{HOST}/nope/").mock(
            return_value=httpx.Response(404, json={"detail": "Not found."})
        )
        with pytest.raises(NotFoundError):
            transport.get("/nope/")

    @respx.mock
    def test_auth_error(self, transport: Transport):
        respx.get(f"{HOST}/secret/").mock(return_value=httpx.Response(401))
        with pytest.raises(AuthenticationError):
            transport.get("/secret/")

    @respx.mock
    def test_connection_error(self, transport: Transport):
        respx.get(f"{HOST}/down/").mock(side_effect=httpx.ConnectError("refused"))
        with pytest.raises(TransportError, match="transport: Cannot connect"):
            transport.get("/down/")

    @respx.mock
    def test_timeout(self, transport: Transport):
        respx.get(f"{HOST}/slow/").mock(side_effect=httpx.ReadTimeout("slow"))
        with pytest.raises(TransportError, match="timed out"):
            transport.get("/slow/")


class TestDecoding:
    def test_malformed_json(self):
        with pytest.raises(DecodeError, match="Malformed JSON"):
            decode_model(Deployment, b"<html>")

    def test_wrong_shape(self):
        with pytest.raises(DecodeError, match="Unexpected Deployment payload"):
            decode_model(Deployment, b'{"termination_lock": "maybe"}')

    def test_envelope_string_true(self):
        envelope = expect_success(b'{"success": "true", "message": "deleted"}')
        assert envelope.message == "deleted"

    def test_envelope_string_false(self):
        with pytest.raises(RemoteRejection, match="Deployment is locked"):
            expect_success(b'{"success": "false", "message": "Deployment is locked"}')

    def test_envelope_boolean_true_is_failure(self):
        with pytest.raises(RemoteRejection):
            expect_success(b'{"success": true, "message": "ok"}')

    def test_envelope_missing_message(self):
        with pytest.raises(RemoteRejection, match="success=None"):
            expect_success(b"{}")

    def test_envelope_null_message(self):
        with pytest.raises(RemoteRejection, match="success='false'"):
            expect_success(b'{"success": "false", "message": null}')
