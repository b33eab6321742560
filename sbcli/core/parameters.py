"""Interactive parameter collection."""

from typing import Any, Dict

from ..bundle.coercion import ParameterValue, coerce_input, is_allowed
from ..bundle.exceptions import InputValidationError
from ..bundle.models import ParameterDescriptor, Plan
from ..bundle.schema import validate_parameters
from ..utils import format_default


def _prompt_text(param: ParameterDescriptor) -> str:
    return f"Enter value for parameter [{param.name}], default: [{format_default(param.default)}]: "


def read_parameter(param: ParameterDescriptor, prompt, reporter) -> Any:
    """Prompt until the operator gives an acceptable value.

    Returns the coerced value, or None when an optional parameter is left
    empty and has no default.
    """
    while True:
        text = prompt.ask(_prompt_text(param))
        if text == "":
            text = format_default(param.default)

        if text == "":
            if param.required:
                reporter.warning(f"Parameter [{param.name}] is required. Please try again.")
                continue
            return None

        if param.enum and not is_allowed(text, param):
            reporter.warning(
                f"[{text}] is not a valid option. Available options: [{' '.join(param.enum)}]"
            )
            continue

        try:
            return coerce_input(text, param)
        except InputValidationError as e:
            reporter.warning(f"Error accepting input: {e}")
            reporter.warning("Please try again")


def collect_parameters(plan: Plan, prompt, reporter) -> Dict[str, ParameterValue]:
    """Collect every parameter of the plan, then validate them together.

    Raises:
        SchemaValidationError: if the collected values fail the plan schema.
        EOFError: if input ends before all parameters are satisfied.
    """
    params: Dict[str, ParameterValue] = {}
    for param in plan.parameters:
        value = read_parameter(param, prompt, reporter)
        if value is not None:
            params[param.name] = value

    validate_parameters(plan, params)
    reporter.debug(f"Params: {params}")
    return params
