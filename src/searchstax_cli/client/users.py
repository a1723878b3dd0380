"""Deployment user accessors (Solr basic auth users)."""

from __future__ import annotations

import logging

from searchstax_cli.client.errors import NotFoundError
from searchstax_cli.client.transport import Transport, decode_model, expect_success
from searchstax_cli.models.common import ApiEnvelope
from searchstax_cli.models.user import DeploymentUser, DeploymentUserList

logger = logging.getLogger(__name__)


def _auth_path(account: str, uid: str, action: str) -> str:
    return f"/account/{account}/deployment/{uid}/solr/auth/{action}"


class DeploymentUsersAPI:
    def __init__(self, transport: Transport) -> None:
        self.transport = transport

    def list(self, account: str, uid: str) -> list[DeploymentUser]:
        body = self.transport.get(_auth_path(account, uid, "get-users/"))
        return decode_model(DeploymentUserList, body).users

    def get(self, account: str, uid: str, username: str) -> DeploymentUser:
        for user in self.list(account, uid):
            if user.username == username:
                return user
        raise NotFoundError(404, f"user {username!r} not found on deployment {uid}")

    def create(self, user: DeploymentUser, account: str, uid: str) -> DeploymentUser:
        """Add ``user`` to a deployment and return it bound to that deployment."""
        bound = user.model_copy(update={"uid": uid})
        expect_success(
            self.transport.post(_auth_path(account, uid, "add-user"), json_body=bound.wire()),
        )
        logger.info("Added user %r to deployment %s", user.username, uid)
        return bound

    def delete(self, account: str, uid: str, username: str) -> ApiEnvelope:
        return expect_success(
            self.transport.post(
                _auth_path(account, uid, "delete-user/"), json_body={"username": username},
            ),
        )
