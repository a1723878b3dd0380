"""Root Typer app: global options and command group registration."""

from __future__ import annotations

from typing import Optional

import typer

from searchstax_cli import __version__
from searchstax_cli.commands import config_cmd, deployment, user, vpc
from searchstax_cli.log import setup_logging

app = typer.Typer(
    name="searchstax",
    help="Provision and manage SearchStax Solr deployments.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


def version_callback(value: bool) -> None:
    if value:
        print(f"searchstax-cli {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: Optional[bool] = typer.Option(
        None, "--version", "-V", callback=version_callback, is_eager=True, help="Show version and exit."
    ),
    verbose: int = typer.Option(
        0, "--verbose", "-v", count=True, help="Log progress (-v) or HTTP detail (-vv) to stderr."
    ),
) -> None:
    """SearchStax CLI: create, replace and delete managed Solr deployments."""
    setup_logging(verbose)


app.add_typer(config_cmd.app, name="config")
app.add_typer(deployment.app, name="deployment")
app.add_typer(user.app, name="user")
app.add_typer(vpc.app, name="vpc")


def main() -> None:
    app()
