"""Unit tests for configuration system."""

import tempfile
from pathlib import Path

import pytest

from devprep.config import (
    ConfigError,
    DevprepConfig,
    find_config_file,
    load_config,
)
from devprep.runtime import Version


class TestConfigParsing:
    """Test TOML configuration parsing."""

    def test_find_config_file_exists(self):
        """Test finding .devprep.toml when it exists."""
        with tempfile.TemporaryDirectory() as tmp_dir:
            project_path = Path(tmp_dir)
            config_file = project_path / ".devprep.toml"
            config_file.write_text("[runtime]\n")

            found = find_config_file(project_path)
            assert found == config_file

    def test_find_config_file_missing(self):
        """Test finding .devprep.toml when it doesn't exist."""
        with tempfile.TemporaryDirectory() as tmp_dir:
            assert find_config_file(Path(tmp_dir)) is None

    def test_load_config_defaults(self):
        """Test loading config uses defaults when no file exists."""
        with tempfile.TemporaryDirectory() as tmp_dir:
            project_path = Path(tmp_dir)
            config = load_config(project_path)

            assert config.runtime.compat_range.minimum == Version.parse("3.8")
            assert config.runtime.compat_range.maximum_exclusive == Version.parse("3.13")
            assert config.runtime.fallback == Version.parse("3.11.9")
            assert config.runtime.backends == ["brew", "pyenv"]
            assert config.runtime.install_timeout is None
            assert config.environment.venv_dir == "venv"
            assert config.environment.clear_proxy is True
            assert config.plugins.disable == ["debrief"]
            assert config.project_root == project_path

    def test_load_config_basic(self):
        """Test loading a full configuration."""
        with tempfile.TemporaryDirectory() as tmp_dir:
            project_path = Path(tmp_dir)
            (project_path / ".devprep.toml").write_text("""
[runtime]
minimum_version = "3.9"
maximum_version = "3.12"
fallback_version = "3.10.14"
backends = ["pyenv"]
interpreters = ["python3.12", "python3"]
install_timeout = 900

[environment]
venv_dir = ".venv"
requirements = ["requirements.txt", "requirements-extra.txt"]
dev_requirements = []
build_tools = ["pip"]
clear_proxy = false
verify_imports = ["aiohttp"]
start_command = "python server.py"

[plugins]
config_file = "conf/local.yml"
disable = ["debrief", "training"]
reason = "not needed locally"
""")

            config = load_config(project_path)

            assert str(config.runtime.compat_range) == "[3.9, 3.12)"
            assert str(config.runtime.fallback) == "3.10.14"
            assert config.runtime.backends == ["pyenv"]
            assert config.runtime.interpreters == ["python3.12", "python3"]
            assert config.runtime.install_timeout == 900
            assert config.venv_path == project_path / ".venv"
            assert config.environment.requirements == [
                "requirements.txt",
                "requirements-extra.txt",
            ]
            assert config.environment.dev_requirements == []
            assert config.environment.clear_proxy is False
            assert config.environment.start_command == "python server.py"
            assert config.plugins.config_file == "conf/local.yml"
            assert config.plugins.disable == ["debrief", "training"]

    def test_explicit_config_file(self, tmp_path):
        """An explicit file overrides the project lookup."""
        custom = tmp_path / "custom.toml"
        custom.write_text('[environment]\nvenv_dir = "env"\n')

        config = load_config(tmp_path, custom)
        assert config.environment.venv_dir == "env"


class TestConfigValidation:
    """Test rejection of invalid configuration."""

    @pytest.fixture
    def write_config(self, tmp_path):
        def _write(content: str) -> Path:
            (tmp_path / ".devprep.toml").write_text(content)
            return tmp_path

        return _write

    def test_invalid_toml(self, write_config):
        with pytest.raises(ConfigError, match="Could not read"):
            load_config(write_config("[runtime\n"))

    def test_unknown_backend(self, write_config):
        with pytest.raises(ConfigError, match="Unknown backend"):
            load_config(write_config('[runtime]\nbackends = ["brew", "apt"]\n'))

    def test_malformed_version(self, write_config):
        with pytest.raises(ConfigError, match="Invalid version"):
            load_config(write_config('[runtime]\nminimum_version = "three"\n'))

    def test_empty_range(self, write_config):
        with pytest.raises(ConfigError, match="range"):
            load_config(write_config('[runtime]\nminimum_version = "3.13"\nmaximum_version = "3.8"\n'))

    def test_fallback_outside_range(self, write_config):
        with pytest.raises(ConfigError, match="outside the supported range"):
            load_config(write_config('[runtime]\nfallback_version = "3.13.1"\n'))

    def test_list_type_checked(self, write_config):
        with pytest.raises(ConfigError, match="list of strings"):
            load_config(write_config('[environment]\nrequirements = "requirements.txt"\n'))

    def test_non_positive_timeout(self, write_config):
        with pytest.raises(ConfigError, match="install_timeout"):
            load_config(write_config("[runtime]\ninstall_timeout = 0\n"))

    def test_float_version_rejected(self, write_config):
        """An unquoted 3.10 would read as 3.1, so versions must be strings."""
        with pytest.raises(ConfigError, match="'maximum_version' must be a string"):
            load_config(write_config("[runtime]\nmaximum_version = 3.10\n"))

    def test_timeout_must_be_number(self, write_config):
        with pytest.raises(ConfigError, match="'install_timeout' must be a number"):
            load_config(write_config('[runtime]\ninstall_timeout = "600"\n'))

    def test_timeout_bool_rejected(self, write_config):
        with pytest.raises(ConfigError, match="'install_timeout' must be a number"):
            load_config(write_config("[runtime]\ninstall_timeout = true\n"))

    def test_timeout_accepts_float(self, write_config):
        config = load_config(write_config("[runtime]\ninstall_timeout = 90.5\n"))

        assert config.runtime.install_timeout == 90.5

    def test_venv_dir_must_be_string(self, write_config):
        with pytest.raises(ConfigError, match="'venv_dir' must be a string"):
            load_config(write_config("[environment]\nvenv_dir = 5\n"))

    def test_clear_proxy_must_be_bool(self, write_config):
        with pytest.raises(ConfigError, match="'clear_proxy' must be true or false"):
            load_config(write_config('[environment]\nclear_proxy = "yes"\n'))

    def test_plugin_strings_checked(self, write_config):
        with pytest.raises(ConfigError, match="'reason' must be a string"):
            load_config(write_config("[plugins]\nreason = 1\n"))


class TestResolvePath:
    """Test path resolution against the project root."""

    def test_relative_and_absolute(self, tmp_path):
        config = DevprepConfig(project_root=tmp_path)

        assert config.resolve_path("conf/default.yml") == tmp_path / "conf" / "default.yml"
        assert config.resolve_path("/etc/app.yml") == Path("/etc/app.yml")
