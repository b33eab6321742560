"""Create bundle pods through kubectl."""

import subprocess
from dataclasses import dataclass
from typing import List, Optional

import yaml

from .core.launch import LaunchRequest


@dataclass
class LaunchResult:
    """Outcome of a launch attempt."""
    ok: bool
    error: str = ""


def render_pod_manifest(request: LaunchRequest) -> dict:
    """Pod manifest for a launch request."""
    return {
        "apiVersion": "v1",
        "kind": "Pod",
        "metadata": {
            "name": request.bundle_name,
            "namespace": request.location,
            "labels": dict(request.metadata),
        },
        "spec": {
            "containers": [
                {
                    "name": request.bundle_name,
                    "image": request.image,
                    "args": request.args,
                    "env": [e.to_manifest() for e in request.env],
                    "imagePullPolicy": "IfNotPresent",
                }
            ],
            "restartPolicy": "Never",
            "serviceAccountName": request.account,
        },
    }


def dump_manifest(request: LaunchRequest) -> str:
    return yaml.safe_dump(render_pod_manifest(request), sort_keys=False)


class KubectlLauncher:
    """Submits pod manifests with ``kubectl create``."""

    def __init__(self, kubectl: str = "kubectl", context: Optional[str] = None):
        self.kubectl = kubectl
        self.context = context

    def command(self, namespace: str) -> List[str]:
        cmd = [self.kubectl]
        if self.context:
            cmd += ["--context", self.context]
        return cmd + ["create", "-n", namespace, "-f", "-"]

    def launch(self, request: LaunchRequest) -> LaunchResult:
        manifest = dump_manifest(request)
        try:
            proc = subprocess.run(
                self.command(request.location),
                input=manifest,
                capture_output=True,
                text=True,
                check=False,
            )
        except FileNotFoundError:
            return LaunchResult(ok=False, error=f"'{self.kubectl}' not found in PATH")

        if proc.returncode != 0:
            detail = (proc.stderr or proc.stdout or "").strip()
            return LaunchResult(ok=False, error=detail or f"kubectl exited with {proc.returncode}")
        return LaunchResult(ok=True)
