"""sbcli entry point."""

from typing import Optional

import click

from . import __version__, ui
from .commands.bundles import bundles_command, plans_command
from .commands.config import config_command
from .commands.run import deprovision_command, provision_command, run_command


@click.group()
@click.version_option(__version__, prog_name="sbcli")
@click.option("--catalog", type=click.Path(dir_okay=False), help="Bundle catalog file (overrides catalog.path).")
@click.option("--debug", is_flag=True, help="Show debug output.")
@click.pass_context
def cli(ctx: click.Context, catalog: Optional[str], debug: bool):
    """Run service bundle actions against a Kubernetes namespace."""
    ctx.ensure_object(dict)
    ctx.obj["catalog"] = catalog
    ui.set_debug(debug)


cli.add_command(run_command)
cli.add_command(provision_command)
cli.add_command(deprovision_command)
cli.add_command(bundles_command)
cli.add_command(plans_command)
cli.add_command(config_command)


def main():
    cli()


if __name__ == "__main__":
    main()
