"""Pydantic data models for the SearchStax REST API."""

from searchstax_cli.models.common import ApiEnvelope, Page
from searchstax_cli.models.deployment import Deployment, DeploymentList, DeploymentState
from searchstax_cli.models.user import DeploymentUser, DeploymentUserList
from searchstax_cli.models.vpc import PrivateVpc, PrivateVpcList

__all__ = [
    "ApiEnvelope",
    "Deployment",
    "DeploymentList",
    "DeploymentState",
    "DeploymentUser",
    "DeploymentUserList",
    "Page",
    "PrivateVpc",
    "PrivateVpcList",
]
