"""Bootstrap steps for setting up the project's development environment."""

from .environment import (
    PROXY_VARIABLES,
    check_project_layout,
    clear_proxy_settings,
    create_virtualenv,
    venv_python,
)
from .errors import (
    BootstrapError,
    InstallError,
    PluginConfigError,
    ProjectLayoutError,
    VerificationError,
)
from .packages import (
    check_python_package,
    find_missing_imports,
    install_requirements,
    pip_version,
    upgrade_build_tools,
)
from .plugins import disable_plugins
from .workflow import BootstrapResult, print_summary, resolve_runtime, run_bootstrap

__all__ = [
    # Environment
    "PROXY_VARIABLES",
    "check_project_layout",
    "clear_proxy_settings",
    "create_virtualenv",
    "venv_python",
    # Errors
    "BootstrapError",
    "InstallError",
    "PluginConfigError",
    "ProjectLayoutError",
    "VerificationError",
    # Packages
    "check_python_package",
    "find_missing_imports",
    "install_requirements",
    "pip_version",
    "upgrade_build_tools",
    # Plugins
    "disable_plugins",
    # Workflow
    "BootstrapResult",
    "print_summary",
    "resolve_runtime",
    "run_bootstrap",
]
