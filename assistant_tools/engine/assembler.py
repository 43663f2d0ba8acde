"""Tool section assembly for the system prompt.

assemble() is a pure function of its inputs: it never performs I/O and
propagates renderer failures. build_tool_section() is the orchestration-level
entry point used when building a turn's prompt: it falls back to the default
mode, omits tools whose renderer fails, and checks the token budget.
"""

import logging
from collections.abc import Mapping
from typing import Any

from ..config import Settings, get_settings
from ..descriptions import DiffStrategy, FilesSearchSettings, ToolArgs
from ..errors import ModeNotFoundError
from ..models.enums import ToolName
from ..models.modes import ModeConfig
from .catalog import ALWAYS_AVAILABLE_TOOLS, expand_group
from .gate import is_tool_allowed
from .modes import resolve_mode
from .registry import describe
from .tokens import count_tokens

logger = logging.getLogger(__name__)

TOOLS_HEADING = "# Tools"


def get_tools_for_mode(
    mode: str,
    custom_modes: list[ModeConfig] | None = None,
    experiments: Mapping[str, bool] | None = None,
) -> list[ToolName]:
    """Compute the ordered, deduplicated tools exposed in a mode.

    Tools appear in the order of their first granting group, followed by the
    always-available tools.

    Raises:
        ModeNotFoundError: If the mode cannot be resolved
    """
    config = resolve_mode(mode, custom_modes)

    # dict keys keep first-insertion order
    tools: dict[ToolName, None] = {}
    for entry in config.groups:
        if entry.group is None:
            logger.debug(f"Skipping unknown group {entry.name!r} in mode {config.slug}")
            continue
        for tool in expand_group(entry.group):
            if is_tool_allowed(tool, mode, custom_modes, experiments):
                tools.setdefault(tool, None)

    for tool in ALWAYS_AVAILABLE_TOOLS:
        tools.setdefault(tool, None)

    return list(tools)


def _render(tool: ToolName, args: ToolArgs, strict: bool) -> str | None:
    if strict:
        return describe(tool, args)
    try:
        return describe(tool, args)
    except Exception as e:
        logger.warning(f"Omitting tool {tool}: description renderer failed: {e}", exc_info=True)
        return None


def assemble(
    mode: str,
    args: ToolArgs,
    custom_modes: list[ModeConfig] | None = None,
    experiments: Mapping[str, bool] | None = None,
    *,
    strict: bool = True,
) -> str:
    """Build the tools section of the system prompt.

    Args:
        mode: Mode slug
        args: Invocation parameters passed to every renderer
        custom_modes: User-authored modes (shadow built-ins)
        experiments: Experiment flags for the session
        strict: Propagate renderer exceptions; when False, log and omit

    Returns:
        "# Tools" followed by each applicable tool description, separated by
        blank lines. With no applicable tools, only the heading is returned.

    Raises:
        ModeNotFoundError: If the mode cannot be resolved
    """
    tools = get_tools_for_mode(mode, custom_modes, experiments)

    descriptions = []
    for tool in tools:
        description = _render(tool, args, strict)
        if description:
            descriptions.append(description)

    return f"{TOOLS_HEADING}\n\n" + "\n\n".join(descriptions)


def get_tool_descriptions_for_mode(
    mode: str,
    cwd: str,
    search_settings: FilesSearchSettings,
    search_tool: str,
    supports_browser: bool,
    diff_strategy: DiffStrategy | None = None,
    browser_viewport_size: str | None = None,
    mcp_hub: Any = None,
    custom_modes: list[ModeConfig] | None = None,
    experiments: Mapping[str, bool] | None = None,
) -> str:
    """Positional form of assemble() that builds the ToolArgs itself."""
    args = ToolArgs(
        cwd=cwd,
        search_settings=search_settings,
        search_tool=search_tool,
        supports_browser=supports_browser,
        diff_strategy=diff_strategy,
        browser_viewport_size=browser_viewport_size,
        mcp_hub=mcp_hub,
    )
    return assemble(mode, args, custom_modes, experiments)


def build_tool_section(
    mode: str,
    args: ToolArgs,
    custom_modes: list[ModeConfig] | None = None,
    experiments: Mapping[str, bool] | None = None,
    *,
    config: Settings | None = None,
) -> str:
    """Build the tools section for a turn, tolerating configuration errors.

    Configured experiment defaults are overridden by explicit flags. An
    unknown mode falls back to the configured default mode; a failing
    renderer drops only its own tool.

    Raises:
        ModeNotFoundError: If the default mode cannot be resolved either
    """
    config = config or get_settings()
    flags = {**config.experiments, **(experiments or {})}

    try:
        section = assemble(mode, args, custom_modes, flags, strict=False)
    except ModeNotFoundError as e:
        if mode == config.default_mode:
            raise
        logger.warning(f"{e}; falling back to default mode {config.default_mode!r}")
        section = assemble(config.default_mode, args, custom_modes, flags, strict=False)

    budget = config.tool_section_token_budget
    if budget is not None:
        tokens = count_tokens(section, config.token_encoding)
        if tokens > budget:
            logger.warning(f"Tool section is {tokens} tokens, over the budget of {budget}")

    return section
