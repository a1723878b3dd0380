"""Private VPC commands."""

from __future__ import annotations

import typer

from searchstax_cli.client.errors import error_handler
from searchstax_cli.commands._common import (
    AccountOpt,
    FormatOpt,
    HostOpt,
    PasswordOpt,
    ProfileOpt,
    TokenOpt,
    UsernameOpt,
    make_client,
    require_account,
    resolve_profile,
)
from searchstax_cli.output.formatter import output

app = typer.Typer(name="vpc", help="Inspect private VPCs.")


@app.command("list")
@error_handler
def list_vpcs(
    profile: ProfileOpt = None,
    host: HostOpt = None,
    token: TokenOpt = None,
    username: UsernameOpt = None,
    password: PasswordOpt = None,
    account: AccountOpt = None,
    fmt: FormatOpt = "table",
) -> None:
    """List the private VPCs of an account."""
    resolved = resolve_profile(profile, host, token, username, password, account)
    account_name = require_account(resolved)
    with make_client(resolved) as client:
        vpcs = client.vpcs.list(account_name)
    output(
        vpcs, fmt,
        fields=["id", "name", "status", "region", "address_space"],
        title=f"Private VPCs: {account_name}",
    )
