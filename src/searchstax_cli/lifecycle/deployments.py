"""Deployment lifecycle: create, delete and replace clusters and wait for them.

The backend provisions asynchronously, so every mutation is followed by
polling ``GET /deployment/{uid}/`` until a terminal state is observed:

    absent --create--> provisioning --Running/Done--> converged
                            |--Failed--> failed (raised, never retried)
    converged --delete--> deleting --404--> absent
    converged --update--> delete phase --delay--> create phase --> converged

The API has no in-place update: an update is a destructive replace, and a
failure in either phase is raised as :class:`UpdateFailed` naming the phase.
"""

from __future__ import annotations

import logging

from searchstax_cli.client.deployments import DeploymentsAPI
from searchstax_cli.client.errors import (
    DecodeError,
    NotFoundError,
    ProvisioningFailed,
    SearchStaxError,
    UpdateFailed,
)
from searchstax_cli.config.constants import DEFAULT_UPDATE_DELAY
from searchstax_cli.lifecycle.polling import Poller
from searchstax_cli.models.deployment import Deployment, DeploymentState

logger = logging.getLogger(__name__)


class DeploymentReconciler:
    def __init__(
        self,
        deployments: DeploymentsAPI,
        poller: Poller,
        *,
        update_delay: float = DEFAULT_UPDATE_DELAY,
        accept_converged_on_delete: bool = False,
    ) -> None:
        self.deployments = deployments
        self.poller = poller
        self.update_delay = update_delay
        # Some mock backends never remove a deleted deployment; with this set,
        # seeing it Running/Done again counts as deleted.
        self.accept_converged_on_delete = accept_converged_on_delete

    def wait_until_converged(self, account: str, uid: str) -> Deployment:
        """Poll until the deployment is Running/Done; raise if it fails."""

        def check() -> Deployment | None:
            current = self.deployments.get(account, uid)
            state = current.state
            if state is DeploymentState.CONVERGED:
                return current
            if state is DeploymentState.FAILED:
                raise ProvisioningFailed(current.status or "Failed")
            logger.debug(
                "Deployment %s: status=%s provision_state=%s",
                uid, current.status, current.provision_state,
            )
            return None

        return self.poller.poll(check, f"Deployment {uid}")

    def wait_until_absent(self, account: str, uid: str) -> None:
        def check() -> bool | None:
            try:
                current = self.deployments.get(account, uid)
            except NotFoundError:
                return True
            if self.accept_converged_on_delete and current.state is DeploymentState.CONVERGED:
                logger.warning("Deployment %s still reports Running/Done; treating as deleted", uid)
                return True
            return None

        self.poller.poll(check, f"Deletion of deployment {uid}")

    def create(self, deployment: Deployment, account: str) -> Deployment:
        """Create a deployment and block until it is running.

        Returns the submitted record with ``status``, ``provision_state`` and
        ``http_endpoint`` taken from the converged backend state.
        """
        created = self.deployments.create(deployment, account)
        if not created.uid:
            raise DecodeError("Create response did not include a deployment uid")
        converged = self.wait_until_converged(account, created.uid)
        logger.info("Deployment %s is running at %s", created.uid, converged.http_endpoint)
        return created.model_copy(update={
            "status": converged.status,
            "provision_state": converged.provision_state,
            "http_endpoint": converged.http_endpoint,
        })

    def delete(self, account: str, uid: str) -> None:
        """Delete a deployment and block until the backend no longer has it."""
        self.deployments.delete(account, uid)
        logger.info("Deletion of deployment %s accepted", uid)
        self.wait_until_absent(account, uid)

    def update(self, account: str, uid: str, deployment: Deployment) -> Deployment:
        """Replace a deployment: delete it, pause, then create ``deployment``.

        The replacement gets a new uid and endpoint.
        """
        try:
            self.deployments.delete(account, uid)
        except SearchStaxError as exc:
            raise UpdateFailed("delete", exc) from exc
        logger.info("Deletion of deployment %s accepted", uid)
        try:
            self.wait_until_absent(account, uid)
        except SearchStaxError as exc:
            raise UpdateFailed("delete", exc, delete_accepted=True) from exc
        self.poller.pause(self.update_delay)
        try:
            return self.create(deployment, account)
        except SearchStaxError as exc:
            raise UpdateFailed("create", exc) from exc
