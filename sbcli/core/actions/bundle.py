"""Bundle and plan resolution actions."""

from typing import Optional

from ...bundle.exceptions import ResolutionError
from ..context import RunContext
from ..plans import select_plan
from .base import BaseAction


class ResolveBundle(BaseAction):
    """Look up the requested bundle in the catalog."""

    def execute(self, ctx: RunContext) -> Optional[bool]:
        try:
            ctx.template = ctx.catalog.get(ctx.opts.bundle_name)
        except ResolutionError as e:
            ctx.reporter.error(str(e))
            return False
        return True


class SelectPlan(BaseAction):
    """Pick the plan to deploy. An unresolved plan stops the pipeline."""

    def execute(self, ctx: RunContext) -> Optional[bool]:
        try:
            plan = select_plan(ctx.template, ctx.prompt, ctx.reporter)
        except EOFError:
            ctx.reporter.error("Input ended before a plan was selected")
            return False

        if plan.name == "":
            ctx.reporter.error("Did not find a selected plan")
            return False

        ctx.plan = plan
        ctx.reporter.print(f"Plan: {plan.name}")
        return True
