"""Tests for config models."""

import pytest
from pydantic import ValidationError

from searchstax_cli.config.constants import DEFAULT_HOST
from searchstax_cli.config.models import AccountProfile, CLIConfig


class TestAccountProfile:
    def test_defaults(self):
        p = AccountProfile(name="test")
        assert p.host == DEFAULT_HOST
        assert p.timeout == 30.0
        assert p.poll_interval == 60.0
        assert p.update_delay == 60.0
        assert p.user_update_delay == 5.0
        assert p.max_wait is None
        assert p.accept_converged_on_delete is False

    def test_auth_configured(self):
        assert AccountProfile(name="t", token="tok").auth_configured is True
        assert AccountProfile(name="t", username="u", password="p").auth_configured is True
        assert AccountProfile(name="t", username="u").auth_configured is False
        assert AccountProfile(name="t", token="").auth_configured is False

    def test_host_trailing_slash_stripped(self):
        p = AccountProfile(name="t", host="https://api.test/api/rest/v2/")
        assert p.host == "https://api.test/api/rest/v2"

    def test_invalid_host(self):
        with pytest.raises(ValidationError, match="http"):
            AccountProfile(name="t", host="api.test")

    def test_timeout_bounds(self):
        with pytest.raises(ValidationError):
            AccountProfile(name="t", timeout=0)
        with pytest.raises(ValidationError):
            AccountProfile(name="t", timeout=601)

    def test_frozen(self):
        p = AccountProfile(name="t", token="tok")
        with pytest.raises(ValidationError):
            p.token = "other"


class TestCLIConfig:
    def test_defaults(self):
        c = CLIConfig()
        assert c.default_profile is None
        assert c.default_format == "table"
        assert c.profiles == {}
