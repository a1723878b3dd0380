"""Shared helpers for CLI commands: client factory, options, account resolution."""

from __future__ import annotations

from typing import Annotated

import typer

from searchstax_cli.client.errors import ConfigurationError
from searchstax_cli.client.searchstax import SearchStaxClient
from searchstax_cli.config.manager import ConfigManager
from searchstax_cli.config.models import AccountProfile

# Shared Typer option type aliases
ProfileOpt = Annotated[
    str | None,
    typer.Option("--profile", "-p", help="Account profile"),
]
HostOpt = Annotated[
    str | None,
    typer.Option("--host", help="API base URL override"),
]
TokenOpt = Annotated[
    str | None,
    typer.Option("--token", help="API token override"),
]
UsernameOpt = Annotated[
    str | None,
    typer.Option("--username", help="Account username override"),
]
PasswordOpt = Annotated[
    str | None,
    typer.Option("--password", help="Account password override"),
]
AccountOpt = Annotated[
    str | None,
    typer.Option("--account", "-a", help="Account name"),
]
FormatOpt = Annotated[
    str,
    typer.Option("--format", "-f", help="Output format: table, json, yaml, csv"),
]
PollIntervalOpt = Annotated[
    float | None,
    typer.Option("--poll-interval", min=0, help="Seconds between status checks"),
]
MaxWaitOpt = Annotated[
    float | None,
    typer.Option("--max-wait", min=1, help="Give up after this many seconds"),
]
UpdateDelayOpt = Annotated[
    float | None,
    typer.Option("--update-delay", min=0, help="Seconds to pause between delete and re-create"),
]
YesOpt = Annotated[
    bool,
    typer.Option("--yes", "-y", help="Do not ask for confirmation"),
]


def resolve_profile(
    profile: str | None,
    host: str | None,
    token: str | None,
    username: str | None,
    password: str | None,
    account: str | None,
    **overrides: float | None,
) -> AccountProfile:
    """Resolve a profile from CLI options, env vars, or the config file."""
    return ConfigManager().resolve_profile(
        profile,
        host=host,
        token=token,
        username=username,
        password=password,
        account=account,
        **overrides,
    )


def make_client(resolved: AccountProfile) -> SearchStaxClient:
    return SearchStaxClient(resolved)


def require_account(resolved: AccountProfile) -> str:
    if not resolved.account:
        raise ConfigurationError(
            "No account name given. Pass --account or set SEARCHSTAX_ACCOUNT."
        )
    return resolved.account


def confirm_or_abort(message: str, yes: bool) -> None:
    if not yes and not typer.confirm(message):
        raise typer.Abort()
