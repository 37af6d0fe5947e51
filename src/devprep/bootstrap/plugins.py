"""Disable plugins in the consumer's YAML configuration.

The file is edited line by line so comments and layout survive.
"""

import logging
import re
from pathlib import Path
from typing import List, Sequence

from .errors import PluginConfigError

logger = logging.getLogger(__name__)


def _plugin_pattern(plugin: str) -> "re.Pattern[str]":
    # A top-level list entry, e.g. "- debrief", not "- debriefing"
    return re.compile(rf"^- {re.escape(plugin)}(?=\s|$)", re.MULTILINE)


def disable_plugins(config_file: Path, plugins: Sequence[str], reason: str) -> List[str]:
    """Comment out plugin entries in a plugin list.

    ``- debrief`` becomes ``#- debrief  # <reason>``. Lines that are
    already commented out are left alone, so running this twice is harmless.

    Args:
        config_file: YAML file holding a ``plugins:`` list
        plugins: Plugin names to disable
        reason: Note appended to each disabled line

    Returns:
        Plugins that were disabled by this call

    Raises:
        PluginConfigError: If the file is not valid UTF-8
    """
    if not config_file.is_file():
        logger.debug("Plugin config %s not found, skipping", config_file)
        return []

    try:
        content = config_file.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise PluginConfigError(f"Could not read {config_file}: {e}")

    disabled = []

    for plugin in plugins:
        pattern = _plugin_pattern(plugin)
        if not pattern.search(content):
            continue
        content = pattern.sub(lambda m: f"#{m.group(0)}  # {reason}", content)
        disabled.append(plugin)

    if disabled:
        config_file.write_text(content, encoding="utf-8")
        logger.info("Disabled %s in %s", ", ".join(disabled), config_file)

    return disabled
