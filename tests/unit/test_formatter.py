"""Tests for output formatting."""

from __future__ import annotations

from io import StringIO
from unittest.mock import patch

import pytest
from rich.console import Console

from searchstax_cli.models.deployment import Deployment
from searchstax_cli.models.user import DeploymentUser
from searchstax_cli.output.formatter import output, record_rows, to_data


@pytest.fixture
def captured():
    buf = StringIO()
    console = Console(file=buf, force_terminal=False, width=200)
    with patch("searchstax_cli.output.formatter.console", console):
        yield buf


class TestToData:
    def test_model(self):
        assert to_data(Deployment(uid="ss1"))["uid"] == "ss1"

    def test_list_of_models(self):
        data = to_data([Deployment(uid="a"), Deployment(uid="b")])
        assert [d["uid"] for d in data] == ["a", "b"]

    def test_plain(self):
        assert to_data({"a": 1}) == {"a": 1}


class TestRecordRows:
    def test_selects_fields(self):
        rows = record_rows([Deployment(uid="ss1", name="a")], ["uid", "name", "status"])
        assert rows == [["ss1", "a", None]]

    def test_masks_password(self):
        rows = record_rows([DeploymentUser(username="u", password="pw")], ["username", "password"])
        assert rows == [["u", "****"]]


class TestOutput:
    def test_json(self, captured):
        output(Deployment(uid="ss1", name="search"), "json")
        assert '"uid": "ss1"' in captured.getvalue()

    def test_yaml(self, captured):
        output([Deployment(uid="ss1")], "yaml")
        assert "- uid: ss1" in captured.getvalue()

    def test_csv_list(self, captured):
        output([Deployment(uid="ss1", name="a")], "csv", fields=["uid", "name"])
        out = captured.getvalue()
        assert "uid,name" in out
        assert "ss1,a" in out

    def test_csv_single_record(self, captured):
        output({"uid": "ss1", "name": "a"}, "csv")
        assert "ss1,a" in captured.getvalue()

    def test_table_list(self, captured):
        output([Deployment(uid="ss1", status="Running")], "table", fields=["uid", "status"], title="Deployments")
        out = captured.getvalue()
        assert "Deployments" in out
        assert "ss1" in out
        assert "Running" in out

    def test_table_record_masks_secrets(self, captured):
        output(DeploymentUser(username="u", password="hunter2"), "table")
        out = captured.getvalue()
        assert "hunter2" not in out
        assert "username" in out

    def test_json_masks_secrets(self, captured):
        output([DeploymentUser(username="u", password="hunter2")], "json")
        assert "hunter2" not in captured.getvalue()
        assert '"password": "****"' in captured.getvalue()

    def test_yaml_masks_secrets(self, captured):
        output({"name": "prod", "token": "secret-token"}, "yaml")
        assert "secret-token" not in captured.getvalue()
        assert "token: '****'" in captured.getvalue()
