"""Enumeration types for tool-capability resolution."""

from enum import StrEnum


class ToolName(StrEnum):
    """Every tool the assistant can be offered."""

    # Files
    READ_FILE = "read_file"
    WRITE_TO_FILE = "write_to_file"
    SEARCH_FILES = "search_files"
    LIST_FILES = "list_files"
    INSERT_CONTENT = "insert_content"
    SEARCH_AND_REPLACE = "search_and_replace"
    APPLY_DIFF = "apply_diff"
    # Conversation control
    ASK_FOLLOWUP_QUESTION = "ask_followup_question"
    ATTEMPT_COMPLETION = "attempt_completion"
    SWITCH_MODE = "switch_mode"
    # MCP
    USE_MCP_TOOL = "use_mcp_tool"
    ACCESS_MCP_RESOURCE = "access_mcp_resource"
    # Web
    SEARCH_WEB = "search_web"
    FETCH_URLS_CONTENT = "fetch_urls_content"
    BROWSER_ACTION = "browser_action"


class ToolGroupName(StrEnum):
    """Named bundles of tools granted as a unit by a mode."""

    READ = "read"
    EDIT = "edit"
    RESEARCH = "research"
    BROWSER = "browser"
    MCP = "mcp"
    MODES = "modes"


class ExperimentId(StrEnum):
    """Feature flags that gate otherwise-granted tools."""

    INSERT_CONTENT = "insert_content"
    SEARCH_AND_REPLACE = "search_and_replace"
    SEARCH_WEB = "searchWeb"


class BuiltinMode(StrEnum):
    """Slugs of the compiled-in modes."""

    ASK = "ask"
    WRITE = "write"
    RESEARCH = "research"
    AUDIT = "audit"


class SearchBackend(StrEnum):
    """Backends the search_files tool can be described for."""

    MATCH = "match"  # Plain-text / fuzzy match
    REGEX = "regex"  # Regular expression search
    SEMANTIC = "semantic"  # Embedding similarity search


class RegexBackend(StrEnum):
    """Engine that executes regex searches (changes the documented syntax)."""

    RIPGREP = "ripgrep"  # Rust regex syntax
    COREPLUGIN = "coreplugin"  # JavaScript regex syntax
