"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from searchstax_cli.client.searchstax import SearchStaxClient
from searchstax_cli.config.manager import ConfigManager
from searchstax_cli.config.models import AccountProfile

HOST = "https://api.test/api/rest/v2"
ACCOUNT = "acct1"
DEPLOYMENTS = f"{HOST}/account/{ACCOUNT}/deployment/"


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Keep tests away from the real config file and SEARCHSTAX_* env vars."""
    for var in (
        "SEARCHSTAX_HOST",
        "SEARCHSTAX_USERNAME",
        "SEARCHSTAX_PASSWORD",
        "SEARCHSTAX_TOKEN",
        "SEARCHSTAX_ACCOUNT",
        "SEARCHSTAX_PROFILE",
    ):
        monkeypatch.delenv(var, raising=False)
    config_path = tmp_path / "isolated" / "config.toml"
    monkeypatch.setattr("searchstax_cli.config.manager.CONFIG_FILE", config_path)
    return config_path


@pytest.fixture
def tmp_config(tmp_path: Path) -> Path:
    """Return a temporary config file path."""
    return tmp_path / "config.toml"


@pytest.fixture
def config_manager(tmp_config: Path) -> ConfigManager:
    """Return a ConfigManager pointed at a temp config file."""
    return ConfigManager(config_path=tmp_config)


@pytest.fixture
def sample_profile() -> AccountProfile:
    return AccountProfile(name="test", host=HOST, token="tok", account=ACCOUNT)


@pytest.fixture
def client(sample_profile: AccountProfile):
    with SearchStaxClient(sample_profile) as c:
        yield c


@pytest.fixture
def deployment_payload() -> dict:
    """A converged deployment as returned by GET /deployment/{uid}/."""
    return {
        "uid": "ss123456",
        "name": "ListByAPI",
        "application": "Solr",
        "application_version": "8.11.2",
        "tier": "Gold",
        "http_endpoint": "https://ss123456-abcd-us-east-1-aws.searchstax.com/solr/",
        "status": "Running",
        "provision_state": "Done",
        "termination_lock": False,
        "plan": "DN1",
        "plan_type": "DedicatedDeployment",
        "is_master_slave": False,
        "vpc_type": "Public",
        "vpc_name": "",
        "region_id": "us-east-1",
        "cloud_provider": "Amazon Web Services",
        "cloud_provider_id": "aws",
        "deployment_type": "Dedicated Node",
        "num_additional_app_nodes": 0,
        "num_nodes_default": 1,
        "date_created": "2023-06-01T12:00:00Z",
    }
