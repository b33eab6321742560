"""Core infrastructure for bundle resolution and launch."""

from .context import RunContext
from .extra_vars import RESERVED_KEYS, assemble_extra_vars
from .launch import LaunchRequest, build_launch_request
from .options import RunOptions
from .parameters import coerce_input, collect_parameters
from .pipeline import run_pipeline
from .plans import select_plan
from .prompts import ConsolePrompt, ScriptedPrompt
from .reporter import NullReporter, Reporter

__all__ = [
    "RunContext",
    "RunOptions",
    "run_pipeline",
    "select_plan",
    "collect_parameters",
    "coerce_input",
    "assemble_extra_vars",
    "RESERVED_KEYS",
    "build_launch_request",
    "LaunchRequest",
    "ConsolePrompt",
    "ScriptedPrompt",
    "Reporter",
    "NullReporter",
]
