"""Extra vars assembly and pod launch actions."""

from typing import Optional

from ...bundle.exceptions import AssemblyError
from ..context import RunContext
from ..extra_vars import assemble_extra_vars
from ..launch import build_launch_request
from .base import BaseAction


class AssembleExtraVars(BaseAction):
    """Serialize parameters plus reserved keys."""

    def execute(self, ctx: RunContext) -> Optional[bool]:
        try:
            ctx.extra_vars = assemble_extra_vars(ctx.opts.namespace, ctx.params, ctx.plan)
        except AssemblyError as e:
            ctx.reporter.error(str(e))
            return False
        return True


class BuildLaunchRequest(BaseAction):
    """Build the execution context handed to the launcher."""

    def execute(self, ctx: RunContext) -> Optional[bool]:
        ctx.request = build_launch_request(
            ctx.template,
            ctx.plan,
            ctx.opts.action,
            ctx.opts.namespace,
            ctx.extra_vars,
        )
        ctx.reporter.debug(f"Extra vars: {ctx.extra_vars}")
        return True


class LaunchPod(BaseAction):
    """Hand the request to the launcher."""

    def should_run(self, ctx: RunContext) -> bool:
        return not ctx.opts.dry_run

    def execute(self, ctx: RunContext) -> Optional[bool]:
        request = ctx.request
        with ctx.reporter.step(f"Creating pod {request.bundle_name}"):
            result = ctx.launcher.launch(request)

        if not result.ok:
            ctx.reporter.error(f"Failed to create pod: {result.error}")
            return False

        ctx.launched = True
        ctx.reporter.success(
            f"Successfully created pod [{request.bundle_name}] to {request.action} "
            f"[{ctx.template.fq_name}] in namespace [{request.location}]"
        )
        return True
