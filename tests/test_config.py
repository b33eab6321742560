"""Tests for configuration management."""
from sbcli.config import ConfigManager


def test_config_dir_creation(temp_config):
    """
    Test that config directory is created.
    Expected: ~/.sbcli directory exists after ConfigManager creation.
    """
    # Act - create ConfigManager
    config = ConfigManager()

    # Assert - directory is created
    assert config.config_dir.exists()
    assert config.config_dir.name == ".sbcli"


def test_config_set_and_get(temp_config):
    """
    Test basic set/get config operations.
    Expected: value is saved and read correctly.
    """
    # Arrange - create config
    config = ConfigManager()

    # Act - set and get value
    config.set("test.key", "test_value")
    result = config.get("test.key")

    # Assert - value is preserved
    assert result == "test_value"


def test_config_persistence(temp_config):
    """
    Test that config persists between sessions.
    Expected: value remains after recreating ConfigManager.
    """
    # Arrange - create first config and save value
    config1 = ConfigManager()
    config1.set("persist.test", "persistent_value")

    # Act - create new ConfigManager
    config2 = ConfigManager()
    result = config2.get("persist.test")

    # Assert - value persisted
    assert result == "persistent_value"


def test_config_unset(temp_config):
    config = ConfigManager()
    config.set("cluster.namespace", "demo")

    assert config.unset("cluster.namespace") is True
    assert config.get("cluster.namespace") is None
    assert config.unset("cluster.namespace") is False


def test_config_defaults(temp_config):
    """
    Test defaults when nothing is configured.
    Expected: default namespace, kubectl binary and catalog under ~/.sbcli.
    """
    config = ConfigManager()

    assert config.namespace == "default"
    assert config.kubectl == "kubectl"
    assert config.context is None
    assert config.catalog_path == config.config_dir / "bundles.yaml"


def test_environment_overrides_file(temp_config, monkeypatch):
    """
    Test that SBCLI_* environment variables win over config.ini.
    Expected: env namespace returned although the file says otherwise.
    """
    config = ConfigManager()
    config.set("cluster.namespace", "from-file")
    monkeypatch.setenv("SBCLI_NAMESPACE", "from-env")

    assert config.namespace == "from-env"
