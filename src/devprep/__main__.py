"""Run devprep with ``python -m devprep``."""

from .cli import run

if __name__ == "__main__":
    run()
