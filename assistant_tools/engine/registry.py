"""Tool registry: maps every ToolName to its description renderer."""

import logging

from ..descriptions import (
    ToolArgs,
    ToolDescriber,
    get_access_mcp_resource_description,
    get_apply_diff_description,
    get_ask_followup_question_description,
    get_attempt_completion_description,
    get_browser_action_description,
    get_fetch_urls_content_description,
    get_insert_content_description,
    get_list_files_description,
    get_read_file_description,
    get_search_and_replace_description,
    get_search_files_description,
    get_search_web_description,
    get_switch_mode_description,
    get_use_mcp_tool_description,
    get_write_to_file_description,
)
from ..models.enums import ToolName

logger = logging.getLogger(__name__)

TOOL_DESCRIPTIONS: dict[ToolName, ToolDescriber] = {
    ToolName.READ_FILE: get_read_file_description,
    ToolName.WRITE_TO_FILE: get_write_to_file_description,
    ToolName.SEARCH_FILES: get_search_files_description,
    ToolName.LIST_FILES: get_list_files_description,
    ToolName.ASK_FOLLOWUP_QUESTION: get_ask_followup_question_description,
    ToolName.ATTEMPT_COMPLETION: get_attempt_completion_description,
    ToolName.SWITCH_MODE: get_switch_mode_description,
    ToolName.INSERT_CONTENT: get_insert_content_description,
    ToolName.USE_MCP_TOOL: get_use_mcp_tool_description,
    ToolName.ACCESS_MCP_RESOURCE: get_access_mcp_resource_description,
    ToolName.SEARCH_AND_REPLACE: get_search_and_replace_description,
    ToolName.APPLY_DIFF: get_apply_diff_description,
    ToolName.SEARCH_WEB: get_search_web_description,
    ToolName.FETCH_URLS_CONTENT: get_fetch_urls_content_description,
    ToolName.BROWSER_ACTION: get_browser_action_description,
}


def get_tool_description(tool: ToolName | str) -> ToolDescriber | None:
    """Get the renderer for a tool (None if the tool is unknown)."""
    return TOOL_DESCRIPTIONS.get(tool)


def describe(tool: ToolName | str, args: ToolArgs) -> str | None:
    """Render a tool's description.

    Renderer exceptions propagate; an inconsistent description set is a bug.

    Args:
        tool: Tool identifier
        args: Invocation parameters for this assembly call

    Returns:
        The description, or None for unknown or inapplicable tools
    """
    renderer = get_tool_description(tool)
    if renderer is None:
        logger.debug(f"No description renderer for tool: {tool}")
        return None
    return renderer(args) or None
