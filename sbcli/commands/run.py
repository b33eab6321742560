"""Run bundle action commands."""

from typing import Optional

import click
from rich.syntax import Syntax

from .. import ui
from ..bundle.catalog import load_catalog
from ..config import ConfigManager
from ..core import ConsolePrompt, Reporter, RunContext, RunOptions, run_pipeline
from ..core.actions import default_actions
from ..launcher import KubectlLauncher, dump_manifest
from ..utils import handle_errors

ACTIONS = ["provision", "deprovision", "bind", "unbind", "update", "test"]


def run_bundle(action: str, bundle_name: str, namespace: Optional[str], dry_run: bool, catalog_path: Optional[str]) -> RunContext:
    """Resolve the bundle, collect parameters and launch the pod."""
    config = ConfigManager()
    catalog = load_catalog(catalog_path or config.catalog_path)

    opts = RunOptions(
        bundle_name=bundle_name,
        action=action,
        namespace=namespace or config.namespace,
        dry_run=dry_run,
    )
    ctx = RunContext(
        catalog=catalog,
        opts=opts,
        prompt=ConsolePrompt(),
        launcher=KubectlLauncher(config.kubectl, config.context),
        reporter=Reporter(),
    )

    completed = run_pipeline(ctx, default_actions())

    if completed and dry_run:
        request = ctx.request
        ctx.reporter.summary_block(
            f"Dry run: {request.action} [{ctx.template.fq_name}]",
            [
                ("Pod", request.bundle_name),
                ("Plan", request.plan),
                ("Namespace", request.location),
                ("Image", request.image),
            ],
        )
        ui.print(Syntax(dump_manifest(request), "yaml"))
    return ctx


def _catalog_option(ctx: click.Context) -> Optional[str]:
    return (ctx.obj or {}).get("catalog")


@click.command("run")
@click.argument("action", type=click.Choice(ACTIONS))
@click.argument("bundle_name")
@click.option("--namespace", "-n", help="Target namespace (defaults to cluster.namespace).")
@click.option("--dry-run", is_flag=True, help="Print the pod manifest instead of creating it.")
@click.pass_context
@handle_errors
def run_command(ctx: click.Context, action: str, bundle_name: str, namespace: Optional[str], dry_run: bool):
    """Run ACTION for BUNDLE_NAME in a namespace.

    \b
    Examples:
      sbcli run provision dh-postgresql-apb -n demo
      sbcli run deprovision dh-postgresql-apb -n demo
      sbcli run provision dh-etherpad-apb --dry-run
    """
    run_bundle(action, bundle_name, namespace, dry_run, _catalog_option(ctx))


@click.command("provision")
@click.argument("bundle_name")
@click.option("--namespace", "-n", help="Target namespace (defaults to cluster.namespace).")
@click.option("--dry-run", is_flag=True, help="Print the pod manifest instead of creating it.")
@click.pass_context
@handle_errors
def provision_command(ctx: click.Context, bundle_name: str, namespace: Optional[str], dry_run: bool):
    """Provision BUNDLE_NAME. Same as 'sbcli run provision'."""
    run_bundle("provision", bundle_name, namespace, dry_run, _catalog_option(ctx))


@click.command("deprovision")
@click.argument("bundle_name")
@click.option("--namespace", "-n", help="Target namespace (defaults to cluster.namespace).")
@click.option("--dry-run", is_flag=True, help="Print the pod manifest instead of creating it.")
@click.pass_context
@handle_errors
def deprovision_command(ctx: click.Context, bundle_name: str, namespace: Optional[str], dry_run: bool):
    """Deprovision BUNDLE_NAME. Same as 'sbcli run deprovision'."""
    run_bundle("deprovision", bundle_name, namespace, dry_run, _catalog_option(ctx))
