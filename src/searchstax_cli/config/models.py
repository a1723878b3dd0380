"""Pydantic models for CLI configuration."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from searchstax_cli.config.constants import (
    DEFAULT_HOST,
    DEFAULT_POLL_INTERVAL,
    DEFAULT_TIMEOUT,
    DEFAULT_UPDATE_DELAY,
    DEFAULT_USER_UPDATE_DELAY,
)


class AccountProfile(BaseModel):
    """A named SearchStax connection profile.

    Frozen: a resolved profile is shared by the transport, accessors and
    reconcilers for the lifetime of a client and never changes underneath them.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    host: str = Field(default=DEFAULT_HOST, description="REST API base URL")
    username: str | None = Field(default=None, description="Account username")
    password: str | None = Field(default=None, description="Account password")
    token: str | None = Field(default=None, description="Pre-issued API token")
    account: str | None = Field(default=None, description="Default account name")
    timeout: float = Field(
        default=DEFAULT_TIMEOUT, gt=0, le=600, description="Request timeout in seconds",
    )
    poll_interval: float = Field(
        default=DEFAULT_POLL_INTERVAL, ge=0, description="Seconds between status polls",
    )
    update_delay: float = Field(
        default=DEFAULT_UPDATE_DELAY, ge=0,
        description="Pause between delete and create when updating a deployment",
    )
    user_update_delay: float = Field(
        default=DEFAULT_USER_UPDATE_DELAY, ge=0,
        description="Pause between delete and create when updating a user",
    )
    max_wait: float | None = Field(
        default=None, gt=0,
        description="Give up waiting for convergence after this many seconds",
    )
    accept_converged_on_delete: bool = Field(
        default=False,
        description="Treat a deployment still Running/Done after delete as deleted",
    )

    @field_validator("host")
    @classmethod
    def validate_host(cls, v: str) -> str:
        if not v.startswith(("http://", "https://")):
            raise ValueError("Host must start with http:// or https://")
        return v.rstrip("/")

    @property
    def auth_configured(self) -> bool:
        """True when the profile carries a token or a username and password."""
        return bool(self.token) or bool(self.username and self.password)


class CLIConfig(BaseModel):
    """Root configuration model."""

    default_profile: str | None = None
    default_format: str = "table"
    profiles: dict[str, AccountProfile] = Field(default_factory=dict)
