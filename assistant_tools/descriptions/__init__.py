"""Tool description renderers.

This package contains the per-tool renderers organized by domain:
- files: read, write, list, search and edit tools
- interaction: follow-up questions, completion, mode switching
- web: web search, URL fetching, browser control
- mcp: MCP tool calls and resource access

Each renderer is a plain function that takes:
- args: ToolArgs - Invocation parameters for the current assembly call

And returns:
- The tool's markdown description, or None when the tool does not apply
"""

from .base import DiffStrategy, FilesSearchSettings, ToolArgs, ToolDescriber
from .files import (
    get_apply_diff_description,
    get_insert_content_description,
    get_list_files_description,
    get_read_file_description,
    get_search_and_replace_description,
    get_search_files_description,
    get_write_to_file_description,
)
from .interaction import (
    get_ask_followup_question_description,
    get_attempt_completion_description,
    get_switch_mode_description,
)
from .mcp import get_access_mcp_resource_description, get_use_mcp_tool_description
from .web import (
    DEFAULT_BROWSER_VIEWPORT_SIZE,
    get_browser_action_description,
    get_fetch_urls_content_description,
    get_search_web_description,
)

__all__ = [
    # Base
    "DiffStrategy",
    "FilesSearchSettings",
    "ToolArgs",
    "ToolDescriber",
    # File tools
    "get_read_file_description",
    "get_write_to_file_description",
    "get_list_files_description",
    "get_search_files_description",
    "get_insert_content_description",
    "get_search_and_replace_description",
    "get_apply_diff_description",
    # Interaction tools
    "get_ask_followup_question_description",
    "get_attempt_completion_description",
    "get_switch_mode_description",
    # MCP tools
    "get_use_mcp_tool_description",
    "get_access_mcp_resource_description",
    # Web tools
    "DEFAULT_BROWSER_VIEWPORT_SIZE",
    "get_search_web_description",
    "get_fetch_urls_content_description",
    "get_browser_action_description",
]
