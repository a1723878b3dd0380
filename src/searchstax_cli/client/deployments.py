"""Deployment accessors: typed list/get/create/delete against the REST API.

These perform single calls only. Waiting for the backend to converge lives
in :mod:`searchstax_cli.lifecycle`.
"""

from __future__ import annotations

import logging

from searchstax_cli.client.transport import Transport, decode_model, expect_success
from searchstax_cli.models.common import ApiEnvelope
from searchstax_cli.models.deployment import Deployment, DeploymentList

logger = logging.getLogger(__name__)


def deployments_path(account: str, uid: str | None = None) -> str:
    if uid:
        return f"/account/{account}/deployment/{uid}/"
    return f"/account/{account}/deployment/"


class DeploymentsAPI:
    def __init__(self, transport: Transport) -> None:
        self.transport = transport

    def list(self, account: str) -> DeploymentList:
        """Return the first page of an account's deployments."""
        return decode_model(DeploymentList, self.transport.get(deployments_path(account)))

    def list_all(self, account: str) -> list[Deployment]:
        """Return every deployment, following ``next`` links across pages."""
        page = self.list(account)
        deployments = list(page.results)
        while page.next:
            page = decode_model(DeploymentList, self.transport.get(page.next))
            deployments.extend(page.results)
        return deployments

    def get(self, account: str, uid: str) -> Deployment:
        return decode_model(Deployment, self.transport.get(deployments_path(account, uid)))

    def create(self, deployment: Deployment, account: str) -> Deployment:
        """Submit a new deployment; the returned record carries the assigned UID."""
        body = self.transport.post(
            deployments_path(account), json_body=deployment.create_payload(),
        )
        created = decode_model(Deployment, body)
        logger.info("Deployment %r submitted as %s", deployment.name, created.uid)
        return created

    def delete(self, account: str, uid: str) -> ApiEnvelope:
        """Request deletion; raises RemoteRejection unless the API confirms."""
        return expect_success(self.transport.delete(deployments_path(account, uid)))
