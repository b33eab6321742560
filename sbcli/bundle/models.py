"""Data models for bundle templates."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from .exceptions import CatalogError

PARAM_TYPES = ("string", "enum", "bool", "int")


def _enum_text(value: Any) -> str:
    # YAML reads unquoted yes/no/true/false as booleans
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


@dataclass(frozen=True)
class ParameterDescriptor:
    """Declared shape of one plan parameter."""
    name: str
    type: str = "string"
    default: Any = None
    required: bool = False
    enum: Tuple[str, ...] = ()
    title: Optional[str] = None
    description: Optional[str] = None
    max_length: Optional[int] = None
    pattern: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ParameterDescriptor":
        if not isinstance(data, dict) or not data.get("name"):
            raise CatalogError(f"Parameter entry must have a name: {data!r}")

        param_type = str(data.get("type") or "string").lower()
        raw_enum = data.get("enum") or []
        if param_type != "bool" and any(isinstance(v, bool) for v in raw_enum):
            raise CatalogError(
                f"Parameter '{data['name']}' has yes/no/true/false options read as booleans; quote them"
            )
        enum = tuple(_enum_text(v) for v in raw_enum)
        if param_type == "enum" and not enum:
            raise CatalogError(f"Enum parameter '{data['name']}' declares no allowed values")

        max_length = data.get("maxlength", data.get("max_length"))
        return cls(
            name=str(data["name"]),
            type=param_type,
            default=data.get("default"),
            required=bool(data.get("required", False)),
            enum=enum,
            title=data.get("title"),
            description=data.get("description"),
            max_length=int(max_length) if max_length is not None else None,
            pattern=data.get("pattern"),
        )


@dataclass(frozen=True)
class Plan:
    """Named variant of a bundle with its own parameters."""
    name: str
    parameters: Tuple[ParameterDescriptor, ...] = ()
    description: str = ""
    free: bool = False

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Plan":
        if not isinstance(data, dict) or not data.get("name"):
            raise CatalogError(f"Plan entry must have a name: {data!r}")

        parameters = tuple(
            ParameterDescriptor.from_dict(p) for p in (data.get("parameters") or [])
        )
        names = [p.name for p in parameters]
        if len(names) != len(set(names)):
            raise CatalogError(f"Plan '{data['name']}' declares duplicate parameter names")

        return cls(
            name=str(data["name"]),
            parameters=parameters,
            description=data.get("description") or "",
            free=bool(data.get("free", False)),
        )


# Returned when no plan could be selected; callers must not proceed with it.
EMPTY_PLAN = Plan(name="")


@dataclass(frozen=True)
class BundleTemplate:
    """A deployable bundle: one image and one or more plans."""
    fq_name: str
    image: str
    plans: Tuple[Plan, ...] = ()
    name: str = ""
    description: str = ""
    version: str = ""
    tags: Tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BundleTemplate":
        if not isinstance(data, dict):
            raise CatalogError(f"Bundle entry must be a mapping: {data!r}")

        fq_name = data.get("fqname") or data.get("fq_name")
        if not fq_name:
            raise CatalogError(f"Bundle entry must have an fqname: {data!r}")
        if not data.get("image"):
            raise CatalogError(f"Bundle '{fq_name}' has no image")

        plans = tuple(Plan.from_dict(p) for p in (data.get("plans") or []))
        names = [p.name for p in plans]
        if len(names) != len(set(names)):
            raise CatalogError(f"Bundle '{fq_name}' declares duplicate plan names")

        return cls(
            fq_name=str(fq_name),
            image=str(data["image"]),
            plans=plans,
            name=data.get("name") or "",
            description=data.get("description") or "",
            version=str(data.get("version") or ""),
            tags=tuple(data.get("tags") or ()),
        )

    def plan_names(self) -> List[str]:
        return [p.name for p in self.plans]
