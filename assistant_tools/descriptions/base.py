"""Shared types for tool description renderers.

Each renderer is a pure function of a ToolArgs snapshot and returns the
markdown block documenting one tool, or None when the tool does not apply
to the current environment.
"""

from dataclasses import dataclass
from typing import Any, Callable, Protocol

from pydantic import BaseModel, ConfigDict, Field

from ..models.enums import RegexBackend


class DiffStrategy(Protocol):
    """Externally supplied policy that documents patch-style edits."""

    def render_description(self, cwd: str, options: dict[str, Any] | None = None) -> str:
        """Return the apply_diff tool description for the working directory."""
        ...


class FilesSearchSettings(BaseModel):
    """File search configuration from plugin settings."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    regex_backend: RegexBackend = Field(default=RegexBackend.RIPGREP, alias="regexBackend")
    max_results: int = Field(default=300, ge=1, alias="maxResults")


@dataclass(frozen=True)
class ToolArgs:
    """Invocation parameters passed unchanged to every renderer."""

    cwd: str
    search_settings: FilesSearchSettings
    search_tool: str
    supports_browser: bool = False
    diff_strategy: DiffStrategy | None = None
    browser_viewport_size: str | None = None
    mcp_hub: Any = None  # McpHub | None; only presence matters here
    tool_options: dict[str, Any] | None = None


# Type alias for renderer functions
ToolDescriber = Callable[[ToolArgs], "str | None"]
