"""Configuration management for sbcli."""

import configparser
import os
from pathlib import Path
from typing import Dict, Optional

from dotenv import load_dotenv

load_dotenv()

DEFAULT_NAMESPACE = "default"
DEFAULT_KUBECTL = "kubectl"

# Environment variables take precedence over config.ini
ENV_OVERRIDES = {
    "catalog.path": "SBCLI_CATALOG",
    "cluster.namespace": "SBCLI_NAMESPACE",
    "cluster.kubectl": "SBCLI_KUBECTL",
    "cluster.context": "SBCLI_CONTEXT",
}


class ConfigManager:
    """Dotted-key settings stored in ~/.sbcli/config.ini."""

    def __init__(self):
        self.config_dir = Path.home() / ".sbcli"
        self.config_dir.mkdir(parents=True, exist_ok=True)
        self.config_file = self.config_dir / "config.ini"
        self._config = configparser.ConfigParser()
        if self.config_file.exists():
            self._config.read(self.config_file)

    @staticmethod
    def _split(key: str):
        if "." not in key:
            raise ValueError(f"Config key must be 'section.key', got '{key}'")
        section, option = key.split(".", 1)
        return section, option

    def get(self, key: str, fallback: Optional[str] = None) -> Optional[str]:
        """Get a value, checking environment overrides first."""
        env_name = ENV_OVERRIDES.get(key)
        if env_name and os.environ.get(env_name):
            return os.environ[env_name]

        section, option = self._split(key)
        return self._config.get(section, option, fallback=fallback)

    def set(self, key: str, value: str) -> None:
        section, option = self._split(key)
        if not self._config.has_section(section):
            self._config.add_section(section)
        self._config.set(section, option, str(value))
        self._save()

    def unset(self, key: str) -> bool:
        """Remove a key. Returns False if it was not set."""
        section, option = self._split(key)
        if not self._config.has_section(section):
            return False
        removed = self._config.remove_option(section, option)
        if not self._config.options(section):
            self._config.remove_section(section)
        self._save()
        return removed

    def as_dict(self) -> Dict[str, Dict[str, str]]:
        return {s: dict(self._config.items(s)) for s in self._config.sections()}

    def get_config_path(self) -> Path:
        return self.config_file

    def _save(self) -> None:
        with open(self.config_file, "w") as f:
            self._config.write(f)

    @property
    def catalog_path(self) -> Path:
        return Path(self.get("catalog.path") or self.config_dir / "bundles.yaml").expanduser()

    @property
    def namespace(self) -> str:
        return self.get("cluster.namespace") or DEFAULT_NAMESPACE

    @property
    def kubectl(self) -> str:
        return self.get("cluster.kubectl") or DEFAULT_KUBECTL

    @property
    def context(self) -> Optional[str]:
        return self.get("cluster.context")
