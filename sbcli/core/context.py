"""Context object for managing state through the pipeline."""

from typing import Dict, Optional, Union

from ..bundle.catalog import Catalog
from ..bundle.models import BundleTemplate, Plan
from .launch import LaunchRequest
from .options import RunOptions
from .reporter import NullReporter, Reporter


class RunContext:
    """Per-invocation context for the bundle run pipeline.

    Holds the collaborators (catalog, prompt, launcher, reporter) and
    accumulates state as the pipeline progresses. Nothing here is shared
    between invocations.
    """

    def __init__(
        self,
        catalog: Catalog,
        opts: RunOptions,
        prompt,
        launcher,
        reporter: Union[Reporter, NullReporter],
    ):
        self.catalog = catalog
        self.opts = opts
        self.prompt = prompt
        self.launcher = launcher
        self.reporter = reporter

        # State accumulated during pipeline execution
        self.template: Optional[BundleTemplate] = None
        self.plan: Optional[Plan] = None
        self.params: Optional[Dict[str, object]] = None
        self.extra_vars: Optional[str] = None
        self.request: Optional[LaunchRequest] = None
        self.launched: bool = False
