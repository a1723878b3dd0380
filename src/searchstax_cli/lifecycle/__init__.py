"""Lifecycle reconcilers that drive resources to a terminal backend state."""

from __future__ import annotations

from searchstax_cli.client.searchstax import SearchStaxClient
from searchstax_cli.lifecycle.deployments import DeploymentReconciler
from searchstax_cli.lifecycle.polling import Poller
from searchstax_cli.lifecycle.users import DeploymentUserReconciler

__all__ = [
    "DeploymentReconciler",
    "DeploymentUserReconciler",
    "Poller",
    "build_reconcilers",
]


def build_reconcilers(
    client: SearchStaxClient, poller: Poller | None = None,
) -> tuple[DeploymentReconciler, DeploymentUserReconciler]:
    """Wire both reconcilers to a client using its profile's timings."""
    profile = client.profile
    poller = poller or Poller(profile.poll_interval, max_wait=profile.max_wait)
    deployments = DeploymentReconciler(
        client.deployments,
        poller,
        update_delay=profile.update_delay,
        accept_converged_on_delete=profile.accept_converged_on_delete,
    )
    users = DeploymentUserReconciler(
        client.users, client.deployments, poller, update_delay=profile.user_update_delay,
    )
    return deployments, users
