"""Deployment data models."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel

from searchstax_cli.models.common import Page

STATUS_RUNNING = "Running"
STATUS_FAILED = "Failed"
PROVISION_DONE = "Done"

# Fields a caller may set when creating a deployment; the rest are assigned
# by the backend.
CREATE_FIELDS = frozenset({
    "name",
    "application",
    "application_version",
    "termination_lock",
    "plan_type",
    "plan",
    "region_id",
    "cloud_provider_id",
    "num_additional_app_nodes",
    "private_vpc",
})


class DeploymentState(str, Enum):
    """Lifecycle state derived from ``status`` and ``provision_state``."""

    PROVISIONING = "provisioning"
    CONVERGED = "converged"
    FAILED = "failed"


class Deployment(BaseModel):
    """A provisioned SearchStax search cluster."""

    uid: str | None = None
    name: str | None = None
    application: str | None = None
    application_version: str | None = None
    tier: str | None = None
    http_endpoint: str | None = None
    status: str | None = None
    provision_state: str | None = None
    termination_lock: bool = False
    plan: str | None = None
    plan_type: str | None = None
    is_master_slave: bool | None = None
    vpc_type: str | None = None
    vpc_name: str | None = None
    region_id: str | None = None
    cloud_provider: str | None = None
    cloud_provider_id: str | None = None
    deployment_type: str | None = None
    num_additional_app_nodes: int | None = None
    num_nodes_default: int | None = None
    private_vpc: int | None = None
    date_created: str | None = None

    @property
    def state(self) -> DeploymentState:
        if self.status == STATUS_RUNNING and self.provision_state == PROVISION_DONE:
            return DeploymentState.CONVERGED
        if self.status == STATUS_FAILED:
            return DeploymentState.FAILED
        return DeploymentState.PROVISIONING

    def create_payload(self) -> dict:
        """JSON body for ``POST /account/{account}/deployment/``."""
        return self.model_dump(include=set(CREATE_FIELDS), exclude_none=True)


class DeploymentList(Page[Deployment]):
    """A page of deployments."""


def parse_import_id(value: str) -> tuple[str, str]:
    """Split an ``account_name/uid`` import identifier."""
    parts = value.split("/")
    if len(parts) != 2 or not parts[0] or not parts[1]:
        raise ValueError(
            f"Expected import identifier with format: account_name/uid. Got: {value!r}"
        )
    return parts[0], parts[1]
