"""Configuration file parser for devprep."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

try:
    import tomllib  # Python 3.11+
except ImportError:
    import tomli as tomllib  # Fallback for Python 3.10

from ..runtime.backends import BACKENDS
from ..runtime.errors import VersionParseError
from ..runtime.types import CompatibilityRange, Version

CONFIG_FILENAME = ".devprep.toml"


class ConfigError(Exception):
    """Raised when the configuration file is unreadable or invalid."""

    exit_code = 1


@dataclass
class RuntimeConfig:
    """Interpreter compatibility and provisioning settings."""

    minimum_version: str = "3.8"
    maximum_version: str = "3.13"  # Exclusive
    fallback_version: str = "3.11.9"
    backends: List[str] = field(default_factory=lambda: ["brew", "pyenv"])
    interpreters: List[str] = field(default_factory=lambda: ["python3"])
    install_timeout: Optional[float] = None

    @property
    def compat_range(self) -> CompatibilityRange:
        return CompatibilityRange(
            minimum=Version.parse(self.minimum_version),
            maximum_exclusive=Version.parse(self.maximum_version),
        )

    @property
    def fallback(self) -> Version:
        return Version.parse(self.fallback_version)


@dataclass
class EnvironmentConfig:
    """Virtual environment and dependency installation settings."""

    venv_dir: str = "venv"
    required_paths: List[str] = field(
        default_factory=lambda: ["requirements.txt", "app", "README.md"]
    )
    requirements: List[str] = field(default_factory=lambda: ["requirements.txt"])
    dev_requirements: List[str] = field(default_factory=lambda: ["requirements-dev.txt"])
    build_tools: List[str] = field(default_factory=lambda: ["pip", "wheel", "setuptools"])
    clear_proxy: bool = True
    verify_imports: List[str] = field(
        default_factory=lambda: ["aiohttp", "jinja2", "yaml", "cryptography"]
    )
    # Shown in the final summary
    start_command: str = "python -m app --insecure"


@dataclass
class PluginsConfig:
    """Plugins to switch off in the consumer's configuration file."""

    config_file: str = "conf/default.yml"
    disable: List[str] = field(default_factory=lambda: ["debrief"])
    reason: str = "disabled due to lxml compilation issues"


@dataclass
class DevprepConfig:
    """Complete devprep configuration."""

    runtime: RuntimeConfig = field(default_factory=RuntimeConfig)
    environment: EnvironmentConfig = field(default_factory=EnvironmentConfig)
    plugins: PluginsConfig = field(default_factory=PluginsConfig)

    # Project root for resolving relative paths
    project_root: Path = field(default_factory=Path.cwd)

    def resolve_path(self, path: str) -> Path:
        """Resolve a configured path against the project root."""
        result = Path(path).expanduser()
        if result.is_absolute():
            return result
        return self.project_root / result

    @property
    def venv_path(self) -> Path:
        return self.resolve_path(self.environment.venv_dir)


def find_config_file(project_path: Path) -> Optional[Path]:
    """Find .devprep.toml in project root.

    Args:
        project_path: Root path of the project

    Returns:
        Path to .devprep.toml if found, None otherwise
    """
    config_file = project_path / CONFIG_FILENAME
    if config_file.exists():
        return config_file
    return None


def _string_list(section: Dict[str, Any], key: str, default: List[str]) -> List[str]:
    value = section.get(key, default)
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise ConfigError(f"'{key}' must be a list of strings")
    return list(value)


def _string(section: Dict[str, Any], key: str, default: str) -> str:
    value = section.get(key, default)
    if not isinstance(value, str):
        raise ConfigError(f"'{key}' must be a string (quote versions, e.g. \"3.10\")")
    return value


def _bool(section: Dict[str, Any], key: str, default: bool) -> bool:
    value = section.get(key, default)
    if not isinstance(value, bool):
        raise ConfigError(f"'{key}' must be true or false")
    return value


def _number(section: Dict[str, Any], key: str, default: Optional[float]) -> Optional[float]:
    value = section.get(key, default)
    if value is None:
        return None
    # bool is an int subclass
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ConfigError(f"'{key}' must be a number")
    return value


def _validate(config: DevprepConfig) -> None:
    runtime = config.runtime

    try:
        compat_range = runtime.compat_range
        fallback = runtime.fallback
    except VersionParseError as e:
        raise ConfigError(f"Invalid version in [runtime]: {e.reason}")
    except ValueError as e:
        raise ConfigError(f"Invalid [runtime] range: {e}")

    if fallback not in compat_range:
        raise ConfigError(
            f"fallback_version {fallback} is outside the supported range {compat_range}"
        )

    unknown = [name for name in runtime.backends if name not in BACKENDS]
    if unknown:
        supported = ", ".join(BACKENDS.keys())
        raise ConfigError(
            f"Unknown backend(s) {', '.join(unknown)}. Supported backends: {supported}"
        )

    if runtime.install_timeout is not None and runtime.install_timeout <= 0:
        raise ConfigError("'install_timeout' must be positive")


def load_config(project_path: Path, config_file: Optional[Path] = None) -> DevprepConfig:
    """Load configuration from .devprep.toml or use defaults.

    Args:
        project_path: Root path of the project
        config_file: Explicit configuration file, overrides the lookup

    Returns:
        DevprepConfig with loaded or default configuration

    Raises:
        ConfigError: If the file cannot be parsed or holds invalid values
    """
    config = DevprepConfig(project_root=project_path)

    if config_file is None:
        config_file = find_config_file(project_path)
    if not config_file:
        # No config file, use defaults
        return config

    try:
        with open(config_file, "rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigError(f"Could not read {config_file}: {e}")

    # Parse runtime config
    if "runtime" in data:
        runtime_data = data["runtime"]
        defaults = RuntimeConfig()
        config.runtime.minimum_version = _string(
            runtime_data, "minimum_version", defaults.minimum_version
        )
        config.runtime.maximum_version = _string(
            runtime_data, "maximum_version", defaults.maximum_version
        )
        config.runtime.fallback_version = _string(
            runtime_data, "fallback_version", defaults.fallback_version
        )
        config.runtime.backends = _string_list(runtime_data, "backends", defaults.backends)
        config.runtime.interpreters = _string_list(
            runtime_data, "interpreters", defaults.interpreters
        )
        config.runtime.install_timeout = _number(
            runtime_data, "install_timeout", defaults.install_timeout
        )

    # Parse environment config
    if "environment" in data:
        env_data = data["environment"]
        defaults = EnvironmentConfig()
        config.environment.venv_dir = _string(env_data, "venv_dir", defaults.venv_dir)
        config.environment.required_paths = _string_list(
            env_data, "required_paths", defaults.required_paths
        )
        config.environment.requirements = _string_list(
            env_data, "requirements", defaults.requirements
        )
        config.environment.dev_requirements = _string_list(
            env_data, "dev_requirements", defaults.dev_requirements
        )
        config.environment.build_tools = _string_list(
            env_data, "build_tools", defaults.build_tools
        )
        config.environment.clear_proxy = _bool(env_data, "clear_proxy", defaults.clear_proxy)
        config.environment.verify_imports = _string_list(
            env_data, "verify_imports", defaults.verify_imports
        )
        config.environment.start_command = _string(
            env_data, "start_command", defaults.start_command
        )

    # Parse plugins config
    if "plugins" in data:
        plugins_data = data["plugins"]
        defaults = PluginsConfig()
        config.plugins.config_file = _string(plugins_data, "config_file", defaults.config_file)
        config.plugins.disable = _string_list(plugins_data, "disable", defaults.disable)
        config.plugins.reason = _string(plugins_data, "reason", defaults.reason)

    _validate(config)
    return config
