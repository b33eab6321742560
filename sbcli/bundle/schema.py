"""JSON Schema conversion and validation for plan parameters."""

from typing import Any, Dict, List

from jsonschema import Draft7Validator

from .coercion import typed_enum
from .exceptions import SchemaValidationError
from .models import Plan

_JSON_TYPES = {
    "string": "string",
    "enum": "string",
    "int": "integer",
    "bool": "boolean",
}


def plan_to_schema(plan: Plan) -> Dict[str, Any]:
    """Translate a plan's parameter descriptors into a JSON Schema object.

    Parameters with an unrecognized type get no ``type`` constraint, so the
    raw string collected for them always passes.
    """
    properties: Dict[str, Any] = {}
    required: List[str] = []

    for param in plan.parameters:
        prop: Dict[str, Any] = {}
        json_type = _JSON_TYPES.get(param.type)
        if json_type:
            prop["type"] = json_type
        if param.enum:
            prop["enum"] = typed_enum(param)
        if param.default is not None:
            prop["default"] = param.default
        if param.title:
            prop["title"] = param.title
        if param.description:
            prop["description"] = param.description
        if param.max_length is not None:
            prop["maxLength"] = param.max_length
        if param.pattern:
            prop["pattern"] = param.pattern

        properties[param.name] = prop
        if param.required:
            required.append(param.name)

    schema: Dict[str, Any] = {
        "$schema": "http://json-schema.org/draft-07/schema#",
        "type": "object",
        "properties": properties,
    }
    if required:
        schema["required"] = required
    return schema


def schema_errors(plan: Plan, values: Dict[str, Any]) -> List[str]:
    """Return every schema violation as a ``path: message`` line."""
    validator = Draft7Validator(plan_to_schema(plan))
    errors = []
    for error in sorted(validator.iter_errors(values), key=lambda e: list(e.path)):
        path = ".".join(str(p) for p in error.path) if error.path else "root"
        errors.append(f"{path}: {error.message}")
    return errors


def validate_parameters(plan: Plan, values: Dict[str, Any]) -> None:
    """Validate collected values as a whole; raises SchemaValidationError."""
    errors = schema_errors(plan, values)
    if errors:
        raise SchemaValidationError(errors)
