"""Tool-capability resolution and prompt assembly.

This package contains:
- catalog: Tool groups, always-available tools, experiment and mode denies
- registry: Tool -> description renderer
- modes: Built-in modes and resolution (custom modes win)
- gate: Per-tool allow/deny decision
- assembler: The "# Tools" prompt section
- tokens: Token counting for budget warnings
"""

from .assembler import (
    TOOLS_HEADING,
    assemble,
    build_tool_section,
    get_tool_descriptions_for_mode,
    get_tools_for_mode,
)
from .catalog import (
    ALWAYS_AVAILABLE_TOOLS,
    MODE_TOOL_RESTRICTIONS,
    TOOL_EXPERIMENTS,
    TOOL_GROUPS,
    always_available,
    expand_group,
    get_mode_restrictions,
    get_tool_experiment,
)
from .gate import does_file_match_regex, is_experiment_enabled, is_tool_allowed
from .modes import (
    BUILTIN_MODES,
    get_all_modes,
    get_builtin_mode,
    get_mode_by_slug,
    resolve_mode,
)
from .registry import TOOL_DESCRIPTIONS, describe, get_tool_description
from .tokens import count_tokens, get_encoder

__all__ = [
    # Assembly
    "TOOLS_HEADING",
    "assemble",
    "build_tool_section",
    "get_tool_descriptions_for_mode",
    "get_tools_for_mode",
    # Catalogues
    "ALWAYS_AVAILABLE_TOOLS",
    "MODE_TOOL_RESTRICTIONS",
    "TOOL_EXPERIMENTS",
    "TOOL_GROUPS",
    "always_available",
    "expand_group",
    "get_mode_restrictions",
    "get_tool_experiment",
    # Gate
    "does_file_match_regex",
    "is_experiment_enabled",
    "is_tool_allowed",
    # Modes
    "BUILTIN_MODES",
    "get_all_modes",
    "get_builtin_mode",
    "get_mode_by_slug",
    "resolve_mode",
    # Registry
    "TOOL_DESCRIPTIONS",
    "describe",
    "get_tool_description",
    # Tokens
    "count_tokens",
    "get_encoder",
]
