"""Bootstrap a project's Python development environment.

Detects a usable interpreter (provisioning a pinned one when the host's is
too new), creates a virtual environment and installs the project's
dependencies.
"""

__version__ = "0.1.0"
