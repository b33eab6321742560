"""Base action class for the pipeline."""

from abc import ABC, abstractmethod
from typing import Optional

from ..context import RunContext


class BaseAction(ABC):
    """Base class for all pipeline actions.

    Each action:
    1. Checks if it should run (should_run)
    2. Executes its logic (execute)
    3. Updates the context with results
    """

    def should_run(self, ctx: RunContext) -> bool:
        """Determine if this action should execute.

        Override this to conditionally skip actions based on context state.
        """
        return True

    @abstractmethod
    def execute(self, ctx: RunContext) -> Optional[bool]:
        """Execute the action's main logic.

        Returns:
            - None or True: Continue pipeline
            - False: Stop pipeline execution
        """
        pass
