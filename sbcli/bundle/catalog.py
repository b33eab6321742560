"""Catalog of bundle templates loaded from a YAML file."""

from pathlib import Path
from typing import Dict, Iterable, List, Optional, Union

import yaml

from .exceptions import CatalogError, ResolutionError
from .models import BundleTemplate


class Catalog:
    """Bundle templates keyed by fully-qualified name."""

    def __init__(self, bundles: Iterable[BundleTemplate] = ()):
        self._bundles: Dict[str, BundleTemplate] = {}
        for bundle in bundles:
            if bundle.fq_name in self._bundles:
                raise CatalogError(f"Duplicate bundle in catalog: {bundle.fq_name}")
            self._bundles[bundle.fq_name] = bundle

    def __len__(self) -> int:
        return len(self._bundles)

    def get(self, fq_name: str) -> BundleTemplate:
        """Look up a bundle by exact fully-qualified name."""
        try:
            return self._bundles[fq_name]
        except KeyError:
            raise ResolutionError(f"Didn't find supplied APB: {fq_name}") from None

    def search(self, text: Optional[str] = None) -> List[BundleTemplate]:
        """Bundles whose name or image contains text (case-insensitive)."""
        bundles = sorted(self._bundles.values(), key=lambda b: b.fq_name)
        if not text:
            return bundles
        needle = text.lower()
        return [b for b in bundles if needle in b.fq_name.lower() or needle in b.image.lower()]

    @classmethod
    def from_dict(cls, data: Optional[dict]) -> "Catalog":
        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise CatalogError("Catalog must be a mapping with a 'specs' list")

        # Keys are matched case-insensitively ("Specs" and "specs" both work)
        specs = next((v for k, v in data.items() if str(k).lower() == "specs"), None)
        if specs is None:
            return cls()
        if not isinstance(specs, list):
            raise CatalogError("Catalog 'specs' must be a list")

        return cls(BundleTemplate.from_dict(s) for s in specs)


def load_catalog(path: Union[str, Path]) -> Catalog:
    """Load a catalog file. A missing file is an error."""
    path = Path(path).expanduser()
    if not path.exists():
        raise CatalogError(f"Catalog file not found: {path}")

    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise CatalogError(f"Invalid catalog file {path}: {e}") from e

    return Catalog.from_dict(data)
