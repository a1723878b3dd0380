"""SearchStax client facade: one transport shared by every accessor."""

from __future__ import annotations

from typing import Any

import httpx

from searchstax_cli.client.deployments import DeploymentsAPI
from searchstax_cli.client.transport import Transport
from searchstax_cli.client.users import DeploymentUsersAPI
from searchstax_cli.client.vpcs import PrivateVpcAPI
from searchstax_cli.config.models import AccountProfile


class SearchStaxClient:
    """Entry point for talking to one SearchStax API host."""

    def __init__(self, profile: AccountProfile, auth: httpx.Auth | None = None) -> None:
        self.profile = profile
        self.transport = Transport(profile, auth=auth)
        self.deployments = DeploymentsAPI(self.transport)
        self.users = DeploymentUsersAPI(self.transport)
        self.vpcs = PrivateVpcAPI(self.transport)

    def close(self) -> None:
        self.transport.close()

    def __enter__(self) -> SearchStaxClient:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()
