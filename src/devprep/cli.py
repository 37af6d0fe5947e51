"""Command-line entry point for devprep."""

import argparse
import logging
import sys
from pathlib import Path
from typing import Callable, List, Optional

from .bootstrap import BootstrapError, resolve_runtime, run_bootstrap
from .config import ConfigError, load_config
from .runtime import RuntimeResolutionError
from .utils.commands import CommandRunner
from .utils.console import Console


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="devprep",
        description="Prepare a Python virtual environment for the project.",
    )
    parser.add_argument(
        "project",
        nargs="?",
        default=".",
        help="Project root (default: current directory)",
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="Configuration file (default: <project>/.devprep.toml)",
    )
    recreate = parser.add_mutually_exclusive_group()
    recreate.add_argument(
        "--recreate",
        dest="recreate",
        action="store_const",
        const=True,
        help="Rebuild an existing virtual environment without asking",
    )
    recreate.add_argument(
        "--keep-venv",
        dest="recreate",
        action="store_const",
        const=False,
        help="Reuse an existing virtual environment without asking",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Only resolve the Python runtime and report the result",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Show debug logging")
    return parser


def ask_recreate() -> bool:
    """Ask on the terminal whether to rebuild the virtual environment."""
    try:
        reply = input("Do you want to recreate it? (y/N) ")
    except EOFError:
        return False
    return reply.strip().lower().startswith("y")


def _fixed_answer(answer: bool) -> Callable[[], bool]:
    def confirm() -> bool:
        return answer

    return confirm


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def main(
    argv: Optional[List[str]] = None,
    runner: Optional[CommandRunner] = None,
    console: Optional[Console] = None,
) -> int:
    """Run devprep and return the process exit status."""
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    runner = runner or CommandRunner()
    console = console or Console()

    confirm = ask_recreate if args.recreate is None else _fixed_answer(args.recreate)

    try:
        config = load_config(Path(args.project).resolve(), args.config)
        if args.check:
            outcome = resolve_runtime(config, runner, console)
            console.info(f"Selected interpreter: {outcome.path}")
        else:
            run_bootstrap(config, runner, console, confirm)
    except (RuntimeResolutionError, BootstrapError, ConfigError) as e:
        for line in str(e).splitlines():
            console.error(line)
        return e.exit_code
    except KeyboardInterrupt:
        console.error("Interrupted")
        return 130

    return 0


def run() -> None:
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run()
