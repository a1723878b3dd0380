"""Config commands: manage account profiles."""

from __future__ import annotations

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.prompt import Confirm

from searchstax_cli.client.errors import error_handler
from searchstax_cli.client.searchstax import SearchStaxClient
from searchstax_cli.config.constants import DEFAULT_HOST
from searchstax_cli.config.manager import ConfigManager
from searchstax_cli.config.models import AccountProfile
from searchstax_cli.output.formatter import output

app = typer.Typer(name="config", help="Manage account profiles and CLI configuration.")
console = Console()


def _get_manager() -> ConfigManager:
    return ConfigManager()


@app.command()
@error_handler
def add(
    name: Annotated[str, typer.Argument(help="Profile name")],
    host: Annotated[str, typer.Option("--host", help="API base URL")] = DEFAULT_HOST,
    account: Annotated[Optional[str], typer.Option("--account", "-a", help="Default account name")] = None,
    username: Annotated[Optional[str], typer.Option("--username", help="Account username")] = None,
    password: Annotated[Optional[str], typer.Option("--password", help="Account password")] = None,
    token: Annotated[Optional[str], typer.Option("--token", "-t", help="API token")] = None,
    poll_interval: Annotated[float, typer.Option("--poll-interval", min=0, help="Seconds between status checks")] = 60.0,
    max_wait: Annotated[Optional[float], typer.Option("--max-wait", min=1, help="Give up waiting after this many seconds")] = None,
    accept_converged_on_delete: Annotated[
        bool,
        typer.Option("--accept-converged-on-delete", help="Count a still-running deployment as deleted"),
    ] = False,
    set_default: Annotated[bool, typer.Option("--default", help="Set as default profile")] = False,
) -> None:
    """Add an account profile."""
    mgr = _get_manager()
    profile = AccountProfile(
        name=name,
        host=host,
        account=account,
        username=username,
        password=password,
        token=token,
        poll_interval=poll_interval,
        max_wait=max_wait,
        accept_converged_on_delete=accept_converged_on_delete,
    )
    mgr.add_profile(profile)
    if set_default:
        mgr.set_default(name)
    console.print(f"[green]Profile '{name}' added.[/]")


@app.command("list")
@error_handler
def list_profiles(
    fmt: Annotated[str, typer.Option("--format", "-f", help="Output format")] = "table",
) -> None:
    """List all configured profiles."""
    mgr = _get_manager()
    profiles = mgr.config.profiles
    if not profiles:
        console.print("[yellow]No profiles configured. Run 'searchstax config add' to get started.[/]")
        return

    default = mgr.config.default_profile
    records = [
        {
            "name": name,
            "host": p.host,
            "account": p.account or "",
            "auth": "token" if p.token else "password" if p.username else "none",
            "default": "*" if name == default else "",
        }
        for name, p in profiles.items()
    ]
    output(records, fmt, fields=["name", "host", "account", "auth", "default"], title="Profiles")


@app.command()
@error_handler
def show(
    name: Annotated[str, typer.Argument(help="Profile name")],
    fmt: Annotated[str, typer.Option("--format", "-f", help="Output format")] = "table",
) -> None:
    """Show profile details."""
    mgr = _get_manager()
    profile = mgr.get_profile(name)
    if not profile:
        console.print(f"[red]Profile '{name}' not found.[/]")
        raise typer.Exit(1)

    data = profile.model_dump(exclude_none=True)
    if "token" in data:
        data["token"] = data["token"][:4] + "..." if len(data["token"]) > 8 else "***"
    if "password" in data:
        data["password"] = "***"
    output(data, fmt, title=f"Profile: {name}")


@app.command("set-default")
@error_handler
def set_default(
    name: Annotated[str, typer.Argument(help="Profile name to set as default")],
) -> None:
    """Set the default profile."""
    mgr = _get_manager()
    if mgr.set_default(name):
        console.print(f"[green]Default profile set to '{name}'.[/]")
    else:
        console.print(f"[red]Profile '{name}' not found.[/]")
        raise typer.Exit(1)


@app.command()
@error_handler
def test(
    name: Annotated[Optional[str], typer.Argument(help="Profile name (uses default if omitted)")] = None,
) -> None:
    """Sign in and list deployments to check a profile works."""
    profile = _get_manager().resolve_profile(name)
    console.print(f"Testing connection to [bold]{profile.host}[/]...")
    with SearchStaxClient(profile) as client:
        if profile.account:
            page = client.deployments.list(profile.account)
            console.print(
                f"[green]Connected![/] Account '{profile.account}' has {page.count} deployment(s)."
            )
        else:
            console.print("[green]Signed in.[/] No account configured, skipping deployment listing.")


@app.command()
@error_handler
def remove(
    name: Annotated[str, typer.Argument(help="Profile name to remove")],
    force: Annotated[bool, typer.Option("--force", help="Skip confirmation")] = False,
) -> None:
    """Remove an account profile."""
    mgr = _get_manager()
    if not mgr.get_profile(name):
        console.print(f"[red]Profile '{name}' not found.[/]")
        raise typer.Exit(1)

    if not force and not Confirm.ask(f"Remove profile '{name}'?"):
        console.print("Cancelled.")
        return

    mgr.remove_profile(name)
    console.print(f"[green]Profile '{name}' removed.[/]")
