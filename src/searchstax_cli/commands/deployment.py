"""Deployment commands: list, show, import, create, update, delete.

create, update and delete block until the backend reports a terminal state.
"""

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
from searchstax_cli.models.deployment import Deployment, parse_import_id
from searchstax_cli.output.formatter import output

app = typer.Typer(name="deployment", help="Manage SearchStax deployments.")
console = Console()

LIST_FIELDS = [
    "uid", "name", "application", "application_version",
    "plan", "region_id", "status", "provision_state",
]

NameOpt = Annotated[str, typer.Option("--name", help="Deployment name")]
ApplicationOpt = Annotated[str, typer.Option("--application", help="Application")]
VersionOpt = Annotated[
    str, typer.Option("--application-version", help="Application version, e.g. 8.11.2"),
]
PlanTypeOpt = Annotated[
    str, typer.Option("--plan-type", help="Plan type, e.g. DedicatedDeployment"),
]
PlanOpt = Annotated[str, typer.Option("--plan", help="Plan, e.g. DN1")]
RegionOpt = Annotated[str, typer.Option("--region-id", help="Cloud region id")]
CloudOpt = Annotated[str, typer.Option("--cloud-provider-id", help="Cloud provider id")]
LockOpt = Annotated[
    bool,
    typer.Option("--termination-lock/--no-termination-lock", help="Protect from deletion"),
]
NodesOpt = Annotated[
    int | None,
    typer.Option("--num-additional-app-nodes", min=0, help="Extra application nodes"),
]
VpcOpt = Annotated[int | None, typer.Option("--private-vpc", help="Private VPC id")]


def _desired(
    name: str,
    application: str,
    application_version: str,
    plan_type: str,
    plan: str,
    region_id: str,
    cloud_provider_id: str,
    termination_lock: bool,
    num_additional_app_nodes: int | None,
    private_vpc: int | None,
) -> Deployment:
    return Deployment(
        name=name,
        application=application,
        application_version=application_version,
        plan_type=plan_type,
        plan=plan,
        region_id=region_id,
        cloud_provider_id=cloud_provider_id,
        termination_lock=termination_lock,
        num_additional_app_nodes=num_additional_app_nodes,
        private_vpc=private_vpc,
    )


@app.command("list")
@error_handler
def list_deployments(
    profile: ProfileOpt = None,
    host: HostOpt = None,
    token: TokenOpt = None,
    username: UsernameOpt = None,
    password: PasswordOpt = None,
    account: AccountOpt = None,
    fmt: FormatOpt = "table",
) -> None:
    """List deployments in an account."""
    resolved = resolve_profile(profile, host, token, username, password, account)
    account_name = require_account(resolved)
    with make_client(resolved) as client:
        deployments = client.deployments.list_all(account_name)
    output(deployments, fmt, fields=LIST_FIELDS, title=f"Deployments: {account_name}")


@app.command()
@error_handler
def show(
    uid: Annotated[str, typer.Argument(help="Deployment uid")],
    profile: ProfileOpt = None,
    host: HostOpt = None,
    token: TokenOpt = None,
    username: UsernameOpt = None,
    password: PasswordOpt = None,
    account: AccountOpt = None,
    fmt: FormatOpt = "table",
) -> None:
    """Show a deployment."""
    resolved = resolve_profile(profile, host, token, username, password, account)
    account_name = require_account(resolved)
    with make_client(resolved) as client:
        deployment = client.deployments.get(account_name, uid)
    output(deployment, fmt, title=f"Deployment: {uid}")


@app.command("import")
@error_handler
def import_deployment(
    import_id: Annotated[str, typer.Argument(help="account_name/uid")],
    profile: ProfileOpt = None,
    host: HostOpt = None,
    token: TokenOpt = None,
    username: UsernameOpt = None,
    password: PasswordOpt = None,
    fmt: FormatOpt = "json",
) -> None:
    """Read an existing deployment by its account_name/uid identifier."""
    account_name, uid = parse_import_id(import_id)
    resolved = resolve_profile(profile, host, token, username, password, account_name)
    with make_client(resolved) as client:
        deployment = client.deployments.get(account_name, uid)
    output(deployment, fmt, title=f"Deployment: {uid}")


@app.command()
@error_handler
def create(
    name: NameOpt,
    application_version: VersionOpt,
    plan_type: PlanTypeOpt,
    plan: PlanOpt,
    region_id: RegionOpt,
    cloud_provider_id: CloudOpt,
    application: ApplicationOpt = "Solr",
    termination_lock: LockOpt = False,
    num_additional_app_nodes: NodesOpt = None,
    private_vpc: VpcOpt = None,
    poll_interval: PollIntervalOpt = None,
    max_wait: MaxWaitOpt = None,
    profile: ProfileOpt = None,
    host: HostOpt = None,
    token: TokenOpt = None,
    username: UsernameOpt = None,
    password: PasswordOpt = None,
    account: AccountOpt = None,
    fmt: FormatOpt = "table",
) -> None:
    """Create a deployment and wait until it is running."""
    resolved = resolve_profile(
        profile, host, token, username, password, account,
        poll_interval=poll_interval, max_wait=max_wait,
    )
    account_name = require_account(resolved)
    desired = _desired(
        name, application, application_version, plan_type, plan, region_id,
        cloud_provider_id, termination_lock, num_additional_app_nodes, private_vpc,
    )
    with make_client(resolved) as client:
        reconciler, _ = build_reconcilers(client)
        with console.status(f"Provisioning '{name}'..."):
            deployment = reconciler.create(desired, account_name)
    console.print(f"[green]Deployment '{name}' is running ({deployment.uid}).[/]")
    output(deployment, fmt, title=f"Deployment: {deployment.uid}")


@app.command()
@error_handler
def update(
    uid: Annotated[str, typer.Argument(help="Deployment uid to replace")],
    name: NameOpt,
    application_version: VersionOpt,
    plan_type: PlanTypeOpt,
    plan: PlanOpt,
    region_id: RegionOpt,
    cloud_provider_id: CloudOpt,
    application: ApplicationOpt = "Solr",
    termination_lock: LockOpt = False,
    num_additional_app_nodes: NodesOpt = None,
    private_vpc: VpcOpt = None,
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
    fmt: FormatOpt = "table",
) -> None:
    """Replace a deployment: delete it, then create it again with new settings.

    The cluster is torn down completely; the replacement has a new uid and
    endpoint.
    """
    resolved = resolve_profile(
        profile, host, token, username, password, account,
        poll_interval=poll_interval, max_wait=max_wait, update_delay=update_delay,
    )
    account_name = require_account(resolved)
    confirm_or_abort(
        f"Updating deletes deployment {uid} and all of its data. Continue?", yes,
    )
    desired = _desired(
        name, application, application_version, plan_type, plan, region_id,
        cloud_provider_id, termination_lock, num_additional_app_nodes, private_vpc,
    )
    with make_client(resolved) as client:
        reconciler, _ = build_reconcilers(client)
        with console.status(f"Replacing {uid}..."):
            deployment = reconciler.update(account_name, uid, desired)
    console.print(f"[green]Deployment {uid} replaced by {deployment.uid}.[/]")
    output(deployment, fmt, title=f"Deployment: {deployment.uid}")


@app.command()
@error_handler
def delete(
    uid: Annotated[str, typer.Argument(help="Deployment uid")],
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
    """Delete a deployment and wait until it is gone."""
    resolved = resolve_profile(
        profile, host, token, username, password, account,
        poll_interval=poll_interval, max_wait=max_wait,
    )
    account_name = require_account(resolved)
    confirm_or_abort(f"Delete deployment {uid}?", yes)
    with make_client(resolved) as client:
        reconciler, _ = build_reconcilers(client)
        with console.status(f"Deleting {uid}..."):
            reconciler.delete(account_name, uid)
    console.print(f"[green]Deployment {uid} deleted.[/]")
