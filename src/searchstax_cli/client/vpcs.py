"""Private VPC accessor (read-only)."""

from __future__ import annotations

from searchstax_cli.client.transport import Transport, decode_model
from searchstax_cli.models.vpc import PrivateVpc, PrivateVpcList


class PrivateVpcAPI:
    def __init__(self, transport: Transport) -> None:
        self.transport = transport

    def list(self, account: str) -> list[PrivateVpc]:
        page = decode_model(PrivateVpcList, self.transport.get(f"/account/{account}/privatevpc/"))
        vpcs = list(page.results)
        while page.next:
            page = decode_model(PrivateVpcList, self.transport.get(page.next))
            vpcs.extend(page.results)
        return vpcs
