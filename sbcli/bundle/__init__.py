"""Bundle templates, catalog and parameter schema."""

from .catalog import Catalog, load_catalog
from .exceptions import (
    AssemblyError,
    BundleError,
    CatalogError,
    InputValidationError,
    LaunchError,
    ResolutionError,
    SchemaValidationError,
)
from .models import EMPTY_PLAN, BundleTemplate, ParameterDescriptor, Plan
from .schema import plan_to_schema, validate_parameters

__all__ = [
    "Catalog",
    "load_catalog",
    "BundleTemplate",
    "Plan",
    "ParameterDescriptor",
    "EMPTY_PLAN",
    "plan_to_schema",
    "validate_parameters",
    "BundleError",
    "CatalogError",
    "ResolutionError",
    "InputValidationError",
    "SchemaValidationError",
    "AssemblyError",
    "LaunchError",
]
