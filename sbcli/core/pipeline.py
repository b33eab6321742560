"""Pipeline orchestrator for executing actions in sequence."""

from typing import List

from .actions.base import BaseAction
from .context import RunContext


def run_pipeline(ctx: RunContext, actions: List[BaseAction]) -> bool:
    """Execute a sequence of actions with the given context.

    Args:
        ctx: The context object containing state and dependencies
        actions: List of actions to execute in order

    Returns:
        True if every action ran to completion, False if one stopped the
        pipeline.
    """
    for action in actions:
        if not action.should_run(ctx):
            continue

        try:
            result = action.execute(ctx)
            if result is False:
                # Action signaled to stop the pipeline
                return False
        except Exception as e:
            ctx.reporter.error(f"Action {action.__class__.__name__} failed: {e}")
            raise

    return True
