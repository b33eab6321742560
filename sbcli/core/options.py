"""Options dataclasses for command configuration."""

from dataclasses import dataclass


@dataclass
class RunOptions:
    """Configuration options for running a bundle action."""

    bundle_name: str
    action: str = "provision"
    namespace: str = "default"

    # Print the pod manifest instead of creating it
    dry_run: bool = False
