"""Capability gate: decides whether a tool is exposed for a mode.

A tool is allowed when all of these hold:
1. It is always available, or it belongs to a group the mode grants
2. Any experiment flag gating it is present and exactly True
3. The mode does not explicitly deny it (a deny beats any group grant)

Always-available tools short-circuit to allowed and are never gated.
"""

import logging
import re
from collections.abc import Mapping
from typing import Any

from ..errors import FileRestrictionError
from ..models.enums import ToolGroupName, ToolName
from ..models.modes import ModeConfig
from .catalog import (
    ALWAYS_AVAILABLE_TOOLS,
    expand_group,
    get_mode_restrictions,
    get_tool_experiment,
)
from .modes import resolve_mode

logger = logging.getLogger(__name__)

# Parameters that mean an edit tool is about to write content
CONTENT_PARAMS = ("content", "diff", "operations")


def does_file_match_regex(path: str, pattern: str) -> bool:
    try:
        return re.search(pattern, path) is not None
    except re.error as exc:
        logger.error(f"Invalid file restriction pattern {pattern!r}: {exc}")
        return False


def is_experiment_enabled(tool: ToolName | str, experiments: Mapping[str, bool] | None) -> bool:
    """Check whether a tool's experiment flag (if any) is switched on."""
    experiment = get_tool_experiment(tool)
    if experiment is None:
        return True
    return (experiments or {}).get(experiment) is True


def _check_file_restriction(
    mode: ModeConfig,
    group: ToolGroupName,
    file_regex: str | None,
    description: str | None,
    tool_params: Mapping[str, Any] | None,
) -> None:
    if group != ToolGroupName.EDIT or not file_regex or not tool_params:
        return
    path = tool_params.get("path")
    if not path or not any(key in tool_params for key in CONTENT_PARAMS):
        return
    if not does_file_match_regex(path, file_regex):
        raise FileRestrictionError(mode.name, file_regex, description, path)


def is_tool_allowed(
    tool: ToolName | str,
    mode: str,
    custom_modes: list[ModeConfig] | None = None,
    experiments: Mapping[str, bool] | None = None,
    tool_params: Mapping[str, Any] | None = None,
) -> bool:
    """Decide whether a tool may be used in a mode.

    Args:
        tool: Tool identifier; unknown identifiers are never allowed
        mode: Mode slug
        custom_modes: User-authored modes
        experiments: Experiment flags for the session
        tool_params: Parameters of a concrete invocation, used to enforce
            file restrictions on edit tools (omit when only describing tools)

    Returns:
        True if the tool is exposed

    Raises:
        ModeNotFoundError: If the mode cannot be resolved
        FileRestrictionError: If tool_params target a file outside the
            mode's allowed pattern for the edit group
    """
    if tool in ALWAYS_AVAILABLE_TOOLS:
        return True

    config = resolve_mode(mode, custom_modes)

    if not is_experiment_enabled(tool, experiments):
        logger.debug(f"Tool {tool} denied in mode {mode}: experiment disabled")
        return False

    if tool in get_mode_restrictions(mode):
        logger.debug(f"Tool {tool} denied in mode {mode}: restricted")
        return False

    for entry in config.groups:
        group = entry.group
        if group is None or tool not in expand_group(group):
            continue
        options = entry.options
        if options is not None:
            _check_file_restriction(
                config, group, options.file_regex, options.description, tool_params
            )
        return True

    return False
