"""Tests for API data models."""

from __future__ import annotations

import pytest

from searchstax_cli.models import (
    ApiEnvelope,
    Deployment,
    DeploymentList,
    DeploymentState,
    DeploymentUser,
    DeploymentUserList,
    PrivateVpcList,
)
from searchstax_cli.models.deployment import parse_import_id


class TestDeploymentState:
    @pytest.mark.parametrize(
        ("status", "provision_state", "expected"),
        [
            ("Running", "Done", DeploymentState.CONVERGED),
            ("Running", "Provisioning", DeploymentState.PROVISIONING),
            ("Provisioning", "Done", DeploymentState.PROVISIONING),
            ("Failed", "Done", DeploymentState.FAILED),
            ("Failed", None, DeploymentState.FAILED),
            (None, None, DeploymentState.PROVISIONING),
        ],
    )
    def test_state(self, status, provision_state, expected):
        d = Deployment(status=status, provision_state=provision_state)
        assert d.state is expected

    def test_uid_empty_until_assigned(self):
        assert Deployment(name="x").uid is None


class TestDeployment:
    def test_parse(self, deployment_payload):
        d = Deployment.model_validate(deployment_payload)
        assert d.uid == "ss123456"
        assert d.tier == "Gold"
        assert d.num_nodes_default == 1

    def test_ignores_unknown_fields(self, deployment_payload):
        d = Deployment.model_validate({**deployment_payload, "servers": ["a", "b"]})
        assert d.name == "ListByAPI"

    def test_create_payload_only_settable_fields(self, deployment_payload):
        d = Deployment.model_validate({**deployment_payload, "private_vpc": 7})
        payload = d.create_payload()
        assert payload == {
            "name": "ListByAPI",
            "application": "Solr",
            "application_version": "8.11.2",
            "termination_lock": False,
            "plan_type": "DedicatedDeployment",
            "plan": "DN1",
            "region_id": "us-east-1",
            "cloud_provider_id": "aws",
            "num_additional_app_nodes": 0,
            "private_vpc": 7,
        }

    def test_create_payload_drops_unset(self):
        payload = Deployment(name="a", application="Solr").create_payload()
        assert payload == {"name": "a", "application": "Solr", "termination_lock": False}

    def test_list_page(self, deployment_payload):
        page = DeploymentList.model_validate({
            "count": 1, "next": None, "previous": None, "results": [deployment_payload],
        })
        assert page.count == 1
        assert page.results[0].uid == "ss123456"


class TestEnvelope:
    def test_string_true(self):
        assert ApiEnvelope.model_validate({"success": "true"}).succeeded is True

    @pytest.mark.parametrize("value", ["false", "True", True, 1, None])
    def test_anything_else_fails(self, value):
        assert ApiEnvelope.model_validate({"success": value}).succeeded is False


class TestDeploymentUser:
    def test_wire_aliases(self):
        user = DeploymentUser.model_validate(
            {"UID": "ss1", "Username": "reader", "Password": "pw", "Roles": "Read"},
        )
        assert user.username == "reader"
        assert user.role == "Read"
        assert user.wire() == {
            "UID": "ss1", "Username": "reader", "Password": "pw", "Roles": "Read",
        }

    def test_populate_by_name(self):
        user = DeploymentUser(username="admin", password="pw", role="Admin")
        assert user.uid is None
        assert "UID" not in user.wire()

    def test_user_list(self):
        listing = DeploymentUserList.model_validate(
            {"success": "true", "users": [{"Username": "a"}, {"Username": "b"}]},
        )
        assert [u.username for u in listing.users] == ["a", "b"]


class TestPrivateVpc:
    def test_list(self):
        page = PrivateVpcList.model_validate({
            "count": 1,
            "results": [{
                "id": 12, "account": "acct1", "name": "vpc-a", "status": "Active",
                "region": "us-east-1", "address_space": "10.0.0.0/16",
            }],
        })
        assert page.results[0].id == 12
        assert page.results[0].address_space == "10.0.0.0/16"


class TestImportId:
    def test_valid(self):
        assert parse_import_id("acct1/ss123456") == ("acct1", "ss123456")

    @pytest.mark.parametrize("value", ["acct1", "acct1/", "/ss1", "a/b/c", ""])
    def test_invalid(self, value):
        with pytest.raises(ValueError, match="account_name/uid"):
            parse_import_id(value)
