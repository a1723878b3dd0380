"""Deployment user lifecycle.

Users have no provisioning state of their own. Deletion is confirmed by
polling the owning deployment: it is done once the deployment is back to
Running/Done (or gone).
"""

from __future__ import annotations

import logging

from searchstax_cli.client.deployments import DeploymentsAPI
from searchstax_cli.client.errors import NotFoundError, SearchStaxError, UpdateFailed
from searchstax_cli.client.users import DeploymentUsersAPI
from searchstax_cli.config.constants import DEFAULT_USER_UPDATE_DELAY
from searchstax_cli.lifecycle.polling import Poller
from searchstax_cli.models.deployment import DeploymentState
from searchstax_cli.models.user import DeploymentUser

logger = logging.getLogger(__name__)


class DeploymentUserReconciler:
    def __init__(
        self,
        users: DeploymentUsersAPI,
        deployments: DeploymentsAPI,
        poller: Poller,
        *,
        update_delay: float = DEFAULT_USER_UPDATE_DELAY,
    ) -> None:
        self.users = users
        self.deployments = deployments
        self.poller = poller
        self.update_delay = update_delay

    def create(self, user: DeploymentUser, account: str, uid: str) -> DeploymentUser:
        return self.users.create(user, account, uid)

    def delete(self, account: str, uid: str, username: str) -> None:
        self.users.delete(account, uid, username)
        self.wait_until_removed(account, uid, username)

    def wait_until_removed(self, account: str, uid: str, username: str) -> None:
        """Poll the owning deployment until it is converged again or gone."""

        def check() -> bool | None:
            try:
                deployment = self.deployments.get(account, uid)
            except NotFoundError:
                return True
            if deployment.state is DeploymentState.CONVERGED:
                return True
            return None

        self.poller.poll(check, f"Removal of user {username!r} from {uid}")
        logger.info("User %r removed from deployment %s", username, uid)

    def update(self, account: str, uid: str, user: DeploymentUser) -> DeploymentUser:
        """Replace a user: delete by username, pause, then add again."""
        try:
            self.users.delete(account, uid, user.username)
        except SearchStaxError as exc:
            raise UpdateFailed("delete", exc) from exc
        try:
            self.wait_until_removed(account, uid, user.username)
        except SearchStaxError as exc:
            raise UpdateFailed("delete", exc, delete_accepted=True) from exc
        self.poller.pause(self.update_delay)
        try:
            return self.create(user, account, uid)
        except SearchStaxError as exc:
            raise UpdateFailed("create", exc) from exc
