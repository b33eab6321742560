"""Type coercion for raw parameter input."""

import re
from typing import Callable, Dict, List, Union

from .exceptions import InputValidationError
from .models import ParameterDescriptor

ParameterValue = Union[str, bool, int]

_TRUE = {"1", "t", "true", "y", "yes", "on"}
_FALSE = {"0", "f", "false", "n", "no", "off"}
_LEGACY_OCTAL = re.compile(r"^[+-]?0[0-7]+$")


def _to_string(text: str) -> str:
    return text


def _to_bool(text: str) -> bool:
    lowered = text.lower()
    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False
    raise InputValidationError("Input must be a boolean")


def _to_int(text: str) -> int:
    try:
        if _LEGACY_OCTAL.match(text):
            return int(text, 8)
        return int(text, 0)
    except ValueError:
        raise InputValidationError("Input must be an integer") from None


COERCERS: Dict[str, Callable[[str], ParameterValue]] = {
    "string": _to_string,
    "enum": _to_string,
    "bool": _to_bool,
    "int": _to_int,
}


def coerce_input(text: str, param: ParameterDescriptor) -> ParameterValue:
    """Convert raw input to the parameter's declared type.

    Unrecognized types keep the raw string.
    """
    coercer = COERCERS.get(param.type, _to_string)
    return coercer(text)


def typed_enum(param: ParameterDescriptor) -> List[ParameterValue]:
    """Allowed values converted to the declared type.

    Entries that do not convert can never be entered, so they are left out.
    """
    values: List[ParameterValue] = []
    for text in param.enum:
        try:
            value = coerce_input(text, param)
        except InputValidationError:
            continue
        if value not in values:
            values.append(value)
    return values


def is_allowed(text: str, param: ParameterDescriptor) -> bool:
    """Whether raw input matches one of the allowed values.

    For bool and int parameters ``yes`` matches ``true`` and ``0x2`` matches
    ``2``; other types compare the text exactly.
    """
    if text in param.enum:
        return True
    if param.type not in ("bool", "int"):
        return False
    try:
        return coerce_input(text, param) in typed_enum(param)
    except InputValidationError:
        return False
