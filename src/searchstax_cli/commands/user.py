"""Deployment user commands: list, show, add, update, delete."""

from __future__ import annotations

from typing import Annotated

import typer
from rich.console import Console

from searchstax_cli.client.errors import error_handler
from searchstax_cli.commands._common import (
    AccountOpt,
    FormatOpt,
    HostOpt,
    MaxWaitOpt,
    PasswordOpt,
    PollIntervalOpt,
    ProfileOpt,
    TokenOpt,
    UpdateDelayOpt,
    UsernameOpt,
    YesOpt,
    confirm_or_abort,
    make_client,
    require_account,
    resolve_profile,
)
from searchstax_cli.lifecycle import build_reconcilers
from searchstax_cli.models.user import DeploymentUser
from searchstax_cli.output.formatter import output

app = typer.Typer(name="user", help="Manage Solr auth users of a deployment.")
console = Console()

UidArg = Annotated[str, typer.Argument(help="Deployment uid")]
UserArg = Annotated[str, typer.Argument(help="Solr username")]
UserPasswordOpt = Annotated[
    str, typer.Option("--user-password", prompt=True, hide_input=True, help="Solr password"),
]
RoleOpt = Annotated[str, typer.Option("--role", help="Solr role, e.g. Admin, Read")]


@app.command("list")
@error_handler
def list_users(
    uid: UidArg,
    profile: ProfileOpt = None,
    host: HostOpt = None,
    token: TokenOpt = None,
    username: UsernameOpt = None,
    password: PasswordOpt = None,
    account: AccountOpt = None,
    fmt: FormatOpt = "table",
) -> None:
    """List the Solr users of a deployment."""
    resolved = resolve_profile(profile, host, token, username, password, account)
    account_name = require_account(resolved)
    with make_client(resolved) as client:
        users = client.users.list(account_name, uid)
    output(users, fmt, fields=["username", "role"], title=f"Users: {uid}")


@app.command()
@error_handler
def show(
    uid: UidArg,
    solr_user: UserArg,
    profile: ProfileOpt = None,
    host: HostOpt = None,
    token: TokenOpt = None,
    username: UsernameOpt = None,
    password: PasswordOpt = None,
    account: AccountOpt = None,
    fmt: FormatOpt = "table",
) -> None:
    """Show one Solr user."""
    resolved = resolve_profile(profile, host, token, username, password, account)
    account_name = require_account(resolved)
    with make_client(resolved) as client:
        user = client.users.get(account_name, uid, solr_user)
    output(user, fmt, title=f"User: {solr_user}")


@app.command()
@error_handler
def add(
    uid: UidArg,
    solr_user: UserArg,
    role: RoleOpt,
    user_password: UserPasswordOpt,
    profile: ProfileOpt = None,
    host: HostOpt = None,
    token: TokenOpt = None,
    username: UsernameOpt = None,
    password: PasswordOpt = None,
    account: AccountOpt = None,
) -> None:
    """Add a Solr user to a deployment."""
    resolved = resolve_profile(profile, host, token, username, password, account)
    account_name = require_account(resolved)
    desired = DeploymentUser(username=solr_user, password=user_password, role=role)
    with make_client(resolved) as client:
        _, reconciler = build_reconcilers(client)
        reconciler.create(desired, account_name, uid)
    console.print(f"[green]User '{solr_user}' added to {uid}.[/]")


@app.command()
@error_handler
def update(
    uid: UidArg,
    solr_user: UserArg,
    role: RoleOpt,
    user_password: UserPasswordOpt,
    poll_interval: PollIntervalOpt = None,
    max_wait: MaxWaitOpt = None,
    update_delay: UpdateDelayOpt = None,
    yes: YesOpt = False,
    profile: ProfileOpt = None,
    host: HostOpt = None,
    token: TokenOpt = None,
    username: UsernameOpt = None,
    password: PasswordOpt = None,
    account: AccountOpt = None,
) -> None:
    """Replace a Solr user: delete it, then add it with new settings."""
    resolved = resolve_profile(
        profile, host, token, username, password, account,
        poll_interval=poll_interval, max_wait=max_wait,
        user_update_delay=update_delay,
    )
    account_name = require_account(resolved)
    confirm_or_abort(
        f"Updating removes user '{solr_user}' from {uid} before adding it again. Continue?", yes,
    )
    desired = DeploymentUser(username=solr_user, password=user_password, role=role)
    with make_client(resolved) as client:
        _, reconciler = build_reconcilers(client)
        reconciler.update(account_name, uid, desired)
    console.print(f"[green]User '{solr_user}' updated on {uid}.[/]")


@app.command()
@error_handler
def delete(
    uid: UidArg,
    solr_user: UserArg,
    poll_interval: PollIntervalOpt = None,
    max_wait: MaxWaitOpt = None,
    yes: YesOpt = False,
    profile: ProfileOpt = None,
    host: HostOpt = None,
    token: TokenOpt = None,
    username: UsernameOpt = None,
    password: PasswordOpt = None,
    account: AccountOpt = None,
) -> None:
    """Remove a Solr user from a deployment."""
    resolved = resolve_profile(
        profile, host, token, username, password, account,
        poll_interval=poll_interval, max_wait=max_wait,
    )
    account_name = require_account(resolved)
    confirm_or_abort(f"Remove user '{solr_user}' from {uid}?", yes)
    with make_client(resolved) as client:
        _, reconciler = build_reconcilers(client)
        reconciler.delete(account_name, uid, solr_user)
    console.print(f"[green]User '{solr_user}' removed from {uid}.[/]")
