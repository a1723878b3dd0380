"""Deployment user (Solr basic auth) data models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class DeploymentUser(BaseModel):
    """A Solr auth credential scoped to one deployment.

    The API uses capitalised keys (``UID``, ``Username``, ``Password``,
    ``Roles``); the model accepts either those or the attribute names.
    """

    model_config = ConfigDict(populate_by_name=True)

    uid: str | None = Field(default=None, alias="UID")
    username: str = Field(alias="Username")
    password: str | None = Field(default=None, alias="Password")
    role: str | None = Field(default=None, alias="Roles")

    def wire(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


class DeploymentUserList(BaseModel):
    """Response of ``solr/auth/get-users/``."""

    success: Any = None
    users: list[DeploymentUser] = Field(default_factory=list)
