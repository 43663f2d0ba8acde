"""Static tool catalogues.

This module holds the configuration data the capability gate reads:
- TOOL_GROUPS: group -> ordered tools
- ALWAYS_AVAILABLE_TOOLS: tools exposed in every mode, never gated
- TOOL_EXPERIMENTS: tools hidden unless an experiment flag is exactly True
- MODE_TOOL_RESTRICTIONS: explicit per-mode denies that beat group grants
"""

from ..models.enums import BuiltinMode, ExperimentId, ToolGroupName, ToolName

# Declaration order within a group is output order.
TOOL_GROUPS: dict[ToolGroupName, tuple[ToolName, ...]] = {
    ToolGroupName.READ: (
        ToolName.READ_FILE,
        ToolName.SEARCH_FILES,
        ToolName.LIST_FILES,
    ),
    ToolGroupName.EDIT: (
        ToolName.APPLY_DIFF,
        ToolName.WRITE_TO_FILE,
        ToolName.INSERT_CONTENT,
        ToolName.SEARCH_AND_REPLACE,
    ),
    ToolGroupName.RESEARCH: (
        ToolName.SEARCH_WEB,
        ToolName.FETCH_URLS_CONTENT,
    ),
    ToolGroupName.BROWSER: (ToolName.BROWSER_ACTION,),
    ToolGroupName.MCP: (
        ToolName.USE_MCP_TOOL,
        ToolName.ACCESS_MCP_RESOURCE,
    ),
    ToolGroupName.MODES: (ToolName.SWITCH_MODE,),
}

ALWAYS_AVAILABLE_TOOLS: tuple[ToolName, ...] = (
    ToolName.ASK_FOLLOWUP_QUESTION,
    ToolName.ATTEMPT_COMPLETION,
)

TOOL_EXPERIMENTS: dict[ToolName, ExperimentId] = {
    ToolName.INSERT_CONTENT: ExperimentId.INSERT_CONTENT,
    ToolName.SEARCH_AND_REPLACE: ExperimentId.SEARCH_AND_REPLACE,
    ToolName.SEARCH_WEB: ExperimentId.SEARCH_WEB,
}

# Keyed by slug, so a custom mode that shadows a built-in inherits its denies.
MODE_TOOL_RESTRICTIONS: dict[str, frozenset[ToolName]] = {
    # Audit is read-only: MCP tools may mutate external state.
    BuiltinMode.AUDIT: frozenset({ToolName.USE_MCP_TOOL}),
}


def expand_group(group: ToolGroupName | str) -> tuple[ToolName, ...]:
    """Get the tools in a group (empty for unknown groups)."""
    try:
        return TOOL_GROUPS[ToolGroupName(group)]
    except ValueError:
        return ()


def always_available() -> tuple[ToolName, ...]:
    return ALWAYS_AVAILABLE_TOOLS


def get_tool_experiment(tool: ToolName | str) -> ExperimentId | None:
    """Get the experiment flag gating a tool, if any."""
    return TOOL_EXPERIMENTS.get(tool)


def get_mode_restrictions(mode: str) -> frozenset[ToolName]:
    """Get the tools explicitly denied to a mode."""
    return MODE_TOOL_RESTRICTIONS.get(mode, frozenset())
