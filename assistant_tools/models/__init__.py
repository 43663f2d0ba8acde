"""Pydantic models and enumerations for tool-capability resolution.

    from assistant_tools.models.enums import ToolName, ToolGroupName
    from assistant_tools.models.modes import ModeConfig
"""

from .enums import (
    BuiltinMode,
    ExperimentId,
    RegexBackend,
    SearchBackend,
    ToolGroupName,
    ToolName,
)
from .modes import GroupEntry, GroupOptions, ModeConfig, load_custom_modes

__all__ = [
    # Enums
    "BuiltinMode",
    "ExperimentId",
    "RegexBackend",
    "SearchBackend",
    "ToolGroupName",
    "ToolName",
    # Mode models
    "GroupEntry",
    "GroupOptions",
    "ModeConfig",
    "load_custom_modes",
]
