"""Bundle resolution and launch errors."""


class BundleError(Exception):
    """Base exception for bundle errors."""


class CatalogError(BundleError):
    """Catalog file could not be read or is malformed."""


class ResolutionError(BundleError):
    """Bundle or plan could not be resolved."""


class InputValidationError(BundleError):
    """A single parameter value was rejected. The operator may retry."""


class SchemaValidationError(BundleError):
    """Collected parameters failed schema validation."""

    def __init__(self, errors):
        self.errors = list(errors)
        super().__init__("; ".join(self.errors))


class AssemblyError(BundleError):
    """Extra vars could not be serialized."""


class LaunchError(BundleError):
    """Launcher rejected the request."""
