"""Pytest configuration and shared fixtures."""
import os
import tempfile
from unittest.mock import MagicMock

import pytest
import yaml
from click.testing import CliRunner

from sbcli.bundle.models import BundleTemplate, ParameterDescriptor, Plan
from sbcli.core.reporter import RecordingReporter
from sbcli.launcher import LaunchResult


@pytest.fixture
def cli_runner() -> CliRunner:
    """Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def temp_config(monkeypatch):
    """Create temporary config directory for tests."""
    with tempfile.TemporaryDirectory() as temp_dir:
        config_dir = os.path.join(temp_dir, ".sbcli")
        os.makedirs(config_dir, exist_ok=True)
        monkeypatch.setenv("HOME", temp_dir)
        for name in ("SBCLI_CATALOG", "SBCLI_NAMESPACE", "SBCLI_KUBECTL", "SBCLI_CONTEXT"):
            monkeypatch.delenv(name, raising=False)
        yield config_dir


@pytest.fixture
def reporter() -> RecordingReporter:
    return RecordingReporter()


@pytest.fixture
def single_plan_template() -> BundleTemplate:
    """Bundle T with one plan P and a required string parameter."""
    return BundleTemplate(
        fq_name="T",
        image="docker.io/example/t-apb:latest",
        plans=(Plan(name="P", parameters=(ParameterDescriptor(name="name", type="string", required=True),)),),
    )


@pytest.fixture
def multi_plan_template() -> BundleTemplate:
    return BundleTemplate(
        fq_name="dh-postgresql-apb",
        image="docker.io/ansibleplaybookbundle/postgresql-apb:latest",
        plans=(
            Plan(name="dev", parameters=(
                ParameterDescriptor(name="postgresql_database", type="string", default="admin", required=True),
            )),
            Plan(name="prod", parameters=(
                ParameterDescriptor(name="postgresql_version", type="enum", enum=("9.5", "9.6"), default="9.6", required=True),
                ParameterDescriptor(name="replicas", type="int", default=2),
            )),
        ),
    )


@pytest.fixture
def catalog_data() -> dict:
    """Catalog content in the on-disk format."""
    return {
        "Specs": [
            {
                "fqname": "T",
                "image": "docker.io/example/t-apb:latest",
                "plans": [
                    {"name": "P", "parameters": [{"name": "name", "type": "string", "required": True}]},
                ],
            },
            {
                "fqname": "dh-postgresql-apb",
                "image": "docker.io/ansibleplaybookbundle/postgresql-apb:latest",
                "description": "SCL PostgreSQL apb implementation",
                "plans": [
                    {
                        "name": "dev",
                        "parameters": [
                            {"name": "postgresql_database", "type": "string", "default": "admin", "required": True},
                        ],
                    },
                    {
                        "name": "prod",
                        "parameters": [
                            {"name": "postgresql_version", "type": "enum", "enum": ["9.5", "9.6"], "default": "9.6", "required": True},
                            {"name": "replicas", "type": "int", "default": 2},
                        ],
                    },
                ],
            },
        ]
    }


@pytest.fixture
def catalog_file(tmp_path, catalog_data):
    path = tmp_path / "bundles.yaml"
    path.write_text(yaml.safe_dump(catalog_data))
    return path


@pytest.fixture
def mock_launcher():
    """Launcher that accepts every request."""
    launcher = MagicMock()
    launcher.launch.return_value = LaunchResult(ok=True)
    return launcher
