"""Launch request (execution context) for a bundle pod."""

import uuid
from dataclasses import dataclass, field
from typing import Dict, List, Tuple

from ..bundle.models import BundleTemplate, Plan

BUNDLE_ACCOUNT = "apb"

LABEL_FQNAME = "bundle-fqname"
LABEL_ACTION = "bundle-action"
LABEL_POD_NAME = "bundle-pod-name"


@dataclass(frozen=True)
class EnvBinding:
    """Environment variable filled in from pod metadata."""
    name: str
    field_path: str

    def to_manifest(self) -> dict:
        return {
            "name": self.name,
            "valueFrom": {"fieldRef": {"fieldPath": self.field_path}},
        }


POD_ENV: Tuple[EnvBinding, ...] = (
    EnvBinding("POD_NAME", "metadata.name"),
    EnvBinding("POD_NAMESPACE", "metadata.namespace"),
)


@dataclass(frozen=True)
class LaunchRequest:
    """Everything the launcher needs to create the bundle pod."""
    bundle_name: str
    targets: List[str]
    metadata: Dict[str, str]
    action: str
    image: str
    account: str
    location: str
    extra_vars: str
    plan: str = ""
    env: Tuple[EnvBinding, ...] = field(default=POD_ENV)

    @property
    def args(self) -> List[str]:
        return [self.action, "--extra-vars", self.extra_vars]


def new_pod_name() -> str:
    return f"bundle-{uuid.uuid4()}"


def build_launch_request(
    template: BundleTemplate,
    plan: Plan,
    action: str,
    location: str,
    extra_vars: str,
) -> LaunchRequest:
    """Build the execution context for one bundle action."""
    pod_name = new_pod_name()
    labels = {
        LABEL_FQNAME: template.fq_name,
        LABEL_ACTION: action,
        LABEL_POD_NAME: pod_name,
    }
    return LaunchRequest(
        bundle_name=pod_name,
        targets=[location],
        metadata=labels,
        action=action,
        image=template.image,
        account=BUNDLE_ACCOUNT,
        location=location,
        extra_vars=extra_vars,
        plan=plan.name,
    )
