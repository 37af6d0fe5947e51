"""End-to-end environment setup.

Runs the steps in order, printing status as it goes:

1. Detect the interpreter and resolve it against the supported range
2. Check the project layout
3. Create (or reuse) the virtual environment
4. Clear proxy settings
5. Disable plugins that cannot build
6. Upgrade build tools and install requirements
7. Verify core imports and print a summary
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, List, Mapping, Optional

from ..config import DevprepConfig
from ..runtime import (
    BelowMinimumError,
    ResolutionOutcome,
    RuntimeResolver,
    Version,
    build_backends,
    detect_system_runtime,
    query_version,
)
from ..utils.commands import CommandRunner
from ..utils.console import Console
from .environment import (
    check_project_layout,
    clear_proxy_settings,
    create_virtualenv,
    venv_python,
)
from .errors import VerificationError
from .packages import (
    find_missing_imports,
    install_requirements,
    pip_version,
    upgrade_build_tools,
)
from .plugins import disable_plugins

logger = logging.getLogger(__name__)


@dataclass
class BootstrapResult:
    """What a completed setup run produced."""

    outcome: ResolutionOutcome
    venv_path: Path
    python: Path
    created_venv: bool
    disabled_plugins: List[str] = field(default_factory=list)
    python_version: Optional[str] = None
    pip_version: Optional[str] = None


def resolve_runtime(
    config: DevprepConfig,
    runner: CommandRunner,
    console: Console,
) -> ResolutionOutcome:
    """Detect the interpreter and resolve it against the configured range.

    Returns:
        UseCurrent or UseProvisioned

    Raises:
        RuntimeResolutionError: If no usable interpreter can be selected
    """
    runtime_config = config.runtime
    compat_range = runtime_config.compat_range
    fallback = runtime_config.fallback

    console.status("Checking Python version...")
    detected = detect_system_runtime(runner, runtime_config.interpreters)
    logger.debug("Detected %r", detected)

    version = Version.parse(detected.version_text)
    if version >= compat_range.maximum_exclusive:
        console.warning(
            f"Python {version} detected - versions from {compat_range.maximum_exclusive} "
            "on are not yet supported by the project's dependencies"
        )
        console.warning("Native dependencies (such as lxml) may not build for it")
        console.status(f"Provisioning Python {fallback} for compatibility...")

    resolver = RuntimeResolver(
        compat_range,
        fallback,
        build_backends(runtime_config.backends, runner, timeout=runtime_config.install_timeout),
    )
    outcome = resolver.resolve(detected.version_text, detected.path)

    if outcome.kind == "rejected":
        raise BelowMinimumError(str(compat_range.minimum), str(outcome.version))

    if outcome.kind == "use_current":
        console.status(f"Python {outcome.version} detected")
    else:
        console.status(f"Using Python {outcome.version} via {outcome.backend}: {outcome.path}")
        # Reported for display only; the provisioned version is trusted
        reported = query_version(runner, outcome.path)
        if reported:
            console.status(f"Now using {reported}")

    return outcome


def _environment_for_pip(clear_proxy: bool, console: Console) -> Optional[Mapping[str, str]]:
    if not clear_proxy:
        return None

    console.status("Clearing proxy settings...")
    env = dict(os.environ)
    clear_proxy_settings(env)
    return env


def _activate_command(venv_path: Path, project_root: Path) -> str:
    try:
        location = venv_path.relative_to(project_root)
    except ValueError:
        # Outside the project; show it in full
        location = venv_path

    if os.name == "nt":
        return str(location / "Scripts" / "activate")
    return f"source {location.as_posix()}/bin/activate"


def print_summary(
    console: Console,
    result: BootstrapResult,
    project_root: Path,
    start_command: str,
) -> None:
    """Print where the environment lives and how to use it.

    The activate hint is relative to ``project_root``, where the user runs
    devprep from.
    """
    console.status("Environment setup complete!")
    console.line()
    console.info(f"Virtual environment location: {result.venv_path}")
    console.info(f"Python version: {result.python_version or 'unknown'}")
    console.info(f"Pip version: {result.pip_version or 'unknown'}")
    console.line()

    activate = _activate_command(result.venv_path, project_root)

    console.line("To use the environment:")
    console.line(f"   Activate:   {activate}")
    console.line("   Deactivate: deactivate")
    console.line()
    console.line("To start the application:")
    console.line(f"   {start_command}")


def run_bootstrap(
    config: DevprepConfig,
    runner: CommandRunner,
    console: Console,
    confirm_recreate: Callable[[], bool],
) -> BootstrapResult:
    """Prepare the project's development environment.

    Args:
        config: Loaded configuration (project root included)
        runner: Command runner for every external tool
        console: Status output
        confirm_recreate: Asked whether to rebuild an existing environment

    Returns:
        BootstrapResult describing the finished environment

    Raises:
        RuntimeResolutionError: If no usable interpreter can be selected
        BootstrapError: If a setup step failed
    """
    env_config = config.environment
    project_root = config.project_root

    console.info("Setting up project virtual environment...")
    outcome = resolve_runtime(config, runner, console)

    console.info(f"Working in project root: {project_root}")
    check_project_layout(project_root, env_config.required_paths)

    venv_path = config.venv_path
    console.status("Creating virtual environment...")
    if venv_path.exists():
        console.warning("Virtual environment already exists")

    created = create_virtualenv(runner, outcome.path, venv_path, confirm_recreate)
    if not created:
        console.info("Using existing virtual environment")

    pip_env = _environment_for_pip(env_config.clear_proxy, console)

    disabled: List[str] = []
    if config.plugins.disable:
        console.status("Disabling plugins that cannot be built...")
        plugin_file = config.resolve_path(config.plugins.config_file)
        disabled = disable_plugins(plugin_file, config.plugins.disable, config.plugins.reason)
        for plugin in disabled:
            console.warning(
                f"Disabled {plugin} plugin in {config.plugins.config_file} "
                f"({config.plugins.reason})"
            )

    python = venv_python(venv_path)

    console.status("Upgrading pip and installing build tools...")
    upgrade_build_tools(runner, python, env_config.build_tools, env=pip_env)

    console.status("Installing main requirements...")
    for name in env_config.requirements:
        install_requirements(runner, python, config.resolve_path(name), env=pip_env)

    for name in env_config.dev_requirements:
        path = config.resolve_path(name)
        if not path.is_file():
            console.warning(f"{name} not found - skipping development dependencies")
            continue
        console.status("Installing development requirements...")
        install_requirements(runner, python, path, env=pip_env)

    if env_config.verify_imports:
        console.status("Verifying core dependencies...")
        missing = find_missing_imports(runner, python, env_config.verify_imports)
        if missing:
            raise VerificationError(missing)
        console.status("Core dependencies verified")

    result = BootstrapResult(
        outcome=outcome,
        venv_path=venv_path,
        python=python,
        created_venv=created,
        disabled_plugins=disabled,
        python_version=query_version(runner, str(python)),
        pip_version=pip_version(runner, python),
    )
    print_summary(console, result, project_root, env_config.start_command)
    return result
