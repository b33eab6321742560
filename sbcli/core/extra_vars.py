"""Extra vars payload passed to the bundle container."""

import json
from typing import Any, Dict, Optional

from ..bundle.exceptions import AssemblyError
from ..bundle.models import Plan

CLUSTER = "openshift"
SERVICE_INSTANCE_ID = "1234"
SERVICE_CLASS_ID = "1234"

RESERVED_KEYS = (
    "namespace",
    "cluster",
    "_apb_plan_id",
    "_apb_service_instance_id",
    "_apb_service_class_id",
    "in_cluster",
)


def assemble_extra_vars(location: str, values: Optional[Dict[str, Any]], plan: Plan) -> str:
    """Merge parameters with the reserved keys and serialize them to JSON.

    Reserved keys are written last and always replace operator values.
    """
    params = dict(values) if values else {}

    if location:
        params["namespace"] = location
    else:
        params.pop("namespace", None)

    params["cluster"] = CLUSTER
    params["_apb_plan_id"] = plan.name
    params["_apb_service_instance_id"] = SERVICE_INSTANCE_ID
    params["_apb_service_class_id"] = SERVICE_CLASS_ID
    params["in_cluster"] = False

    try:
        return json.dumps(params)
    except (TypeError, ValueError) as e:
        raise AssemblyError(f"Error creating extravars: {e}") from e
