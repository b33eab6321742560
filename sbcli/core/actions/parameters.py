"""Parameter collection action."""

from typing import Optional

from ...bundle.exceptions import SchemaValidationError
from ..context import RunContext
from ..parameters import collect_parameters
from .base import BaseAction


class CollectParameters(BaseAction):
    """Prompt for every plan parameter and validate them against the schema."""

    def execute(self, ctx: RunContext) -> Optional[bool]:
        try:
            ctx.params = collect_parameters(ctx.plan, ctx.prompt, ctx.reporter)
        except SchemaValidationError as e:
            ctx.reporter.error("Error validating selected parameters:")
            for line in e.errors:
                ctx.reporter.error(f"  {line}")
            return False
        except EOFError:
            ctx.reporter.error("Input ended before all parameters were entered")
            return False
        return True
