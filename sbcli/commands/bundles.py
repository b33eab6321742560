"""List bundles and plans from the catalog."""
from __future__ import annotations

from typing import List, Optional

import click
from rich.markup import escape
from rich.table import Table

from .. import ui
from ..bundle.catalog import load_catalog
from ..bundle.models import BundleTemplate, Plan
from ..config import ConfigManager
from ..utils import format_default, handle_errors


def _mid_ellipsize(s: str, width: int = 40) -> str:
    """Middle-ellipsize strings that are too long."""
    if not s:
        return "—"
    if len(s) <= width:
        return s
    keep = width - 1
    left = keep // 2
    right = keep - left
    return f"{s[:left]}…{s[-right:]}"


def _load(ctx: click.Context):
    path = (ctx.obj or {}).get("catalog") or ConfigManager().catalog_path
    return load_catalog(path)


def show_bundles(bundles: List[BundleTemplate]) -> None:
    """Display bundles in a tight table."""
    if not bundles:
        ui.warning("No bundles available.")
        return

    ui.print(f"[bold]Bundles[/bold]  [dim]({len(bundles)} shown)[/dim]")

    table = Table(
        show_header=True,
        header_style="dim",
        box=None,
        pad_edge=False,
        expand=True,
        padding=(0, 1),
    )
    table.add_column("Name", justify="left", ratio=3, min_width=20, overflow="fold")
    table.add_column("Image", justify="left", ratio=4, min_width=25, overflow="fold")
    table.add_column("Plans", justify="left", ratio=2, min_width=10, overflow="fold")
    table.add_column("Description", justify="left", ratio=4, overflow="fold")

    for b in bundles:
        table.add_row(
            f"[cyan]{escape(b.fq_name)}[/]",
            f"[blue]{escape(_mid_ellipsize(b.image))}[/]",
            escape(", ".join(b.plan_names()) or "—"),
            f"[dim]{escape(b.description or '—')}[/]",
        )

    ui.print(table)


def show_plans(bundle: BundleTemplate) -> None:
    """Display each plan with its parameters."""
    if not bundle.plans:
        ui.warning(f"Bundle {bundle.fq_name} declares no plans.")
        return

    for plan in bundle.plans:
        ui.print(f"[bold]{escape(plan.name)}[/bold]  [dim]{escape(plan.description)}[/dim]")
        ui.print(_parameters_table(plan))
        ui.print("")


def _parameters_table(plan: Plan) -> Table:
    table = Table(show_header=True, header_style="dim", box=None, pad_edge=False, padding=(0, 1))
    table.add_column("Parameter", no_wrap=True)
    table.add_column("Type", no_wrap=True)
    table.add_column("Required", justify="center")
    table.add_column("Default")
    table.add_column("Options", overflow="fold")

    if not plan.parameters:
        table.add_row("[dim]no parameters[/]", "", "", "", "")
    for p in plan.parameters:
        table.add_row(
            f"[cyan]{escape(p.name)}[/]",
            escape(p.type),
            "[green]✓[/]" if p.required else "",
            escape(format_default(p.default)),
            escape(", ".join(p.enum)),
        )
    return table


@click.command("bundles")
@click.argument("search", required=False)
@click.pass_context
@handle_errors
def bundles_command(ctx: click.Context, search: Optional[str]):
    """List bundles in the catalog.

    SEARCH: Optional text to filter by name or image

    \b
    Examples:
      sbcli bundles               # Show all bundles
      sbcli bundles postgresql    # Filter by 'postgresql' in name/image
    """
    catalog = _load(ctx)
    show_bundles(catalog.search(search))


@click.command("plans")
@click.argument("bundle_name")
@click.pass_context
@handle_errors
def plans_command(ctx: click.Context, bundle_name: str):
    """Show the plans and parameters of BUNDLE_NAME."""
    catalog = _load(ctx)
    show_plans(catalog.get(bundle_name))
