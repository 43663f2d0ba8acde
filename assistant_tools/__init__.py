"""Mode-gated tool capabilities and tool prompt assembly for the writing assistant."""

__version__ = "0.1.0"

from .descriptions import DiffStrategy, FilesSearchSettings, ToolArgs
from .engine import (
    assemble,
    build_tool_section,
    get_all_modes,
    get_tool_descriptions_for_mode,
    get_tools_for_mode,
    is_tool_allowed,
    resolve_mode,
)
from .errors import AssistantToolsError, FileRestrictionError, ModeNotFoundError
from .models import ModeConfig, ToolGroupName, ToolName, load_custom_modes

__all__ = [
    "__version__",
    "AssistantToolsError",
    "DiffStrategy",
    "FileRestrictionError",
    "FilesSearchSettings",
    "ModeConfig",
    "ModeNotFoundError",
    "ToolArgs",
    "ToolGroupName",
    "ToolName",
    "assemble",
    "build_tool_section",
    "get_all_modes",
    "get_tool_descriptions_for_mode",
    "get_tools_for_mode",
    "is_tool_allowed",
    "load_custom_modes",
    "resolve_mode",
]
