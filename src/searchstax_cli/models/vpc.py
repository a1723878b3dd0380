"""Private VPC data models."""

from __future__ import annotations

from pydantic import BaseModel

from searchstax_cli.models.common import Page


class PrivateVpc(BaseModel):
    """A private VPC available to an account."""

    id: int
    account: str | None = None
    name: str | None = None
    status: str | None = None
    region: str | None = None
    address_space: str | None = None


class PrivateVpcList(Page[PrivateVpc]):
    """A page of private VPCs."""
