"""Actions for the bundle run pipeline."""

from .base import BaseAction
from .bundle import ResolveBundle, SelectPlan
from .launch import AssembleExtraVars, BuildLaunchRequest, LaunchPod
from .parameters import CollectParameters

__all__ = [
    "BaseAction",
    "ResolveBundle",
    "SelectPlan",
    "CollectParameters",
    "AssembleExtraVars",
    "BuildLaunchRequest",
    "LaunchPod",
    "default_actions",
]


def default_actions():
    """The run pipeline, in order."""
    return [
        ResolveBundle(),
        SelectPlan(),
        CollectParameters(),
        AssembleExtraVars(),
        BuildLaunchRequest(),
        LaunchPod(),
    ]
