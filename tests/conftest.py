"""
Pytest fixtures shared across the assistant_tools test suite.
"""

import re

import pytest

from assistant_tools.config import Settings
from assistant_tools.descriptions import FilesSearchSettings, ToolArgs


class FakeDiffStrategy:
    """Records calls and returns a fixed apply_diff description."""

    def __init__(self):
        self.calls = []

    def render_description(self, cwd, options=None):
        self.calls.append((cwd, options))
        return f"## apply_diff\nDescription: Apply a unified diff to a file under {cwd}."


@pytest.fixture
def search_settings():
    return FilesSearchSettings()


@pytest.fixture
def tool_args(search_settings):
    """Minimal environment: no diff strategy, no MCP hub, no browser."""
    return ToolArgs(cwd="/vault", search_settings=search_settings, search_tool="regex")


@pytest.fixture
def diff_strategy():
    return FakeDiffStrategy()


@pytest.fixture
def full_args(search_settings, diff_strategy):
    """Environment where every tool has something to render."""
    return ToolArgs(
        cwd="/vault",
        search_settings=search_settings,
        search_tool="regex",
        supports_browser=True,
        diff_strategy=diff_strategy,
        browser_viewport_size="1280x800",
        mcp_hub=object(),
    )


@pytest.fixture
def isolated_settings():
    """Settings isolated from the process environment and .env files."""
    return Settings(_env_file=None, default_mode="ask", experiments={})


@pytest.fixture
def headings():
    """Extract the tool names from a rendered section, in order."""

    def _headings(section):
        return re.findall(r"^## (\w+)$", section, flags=re.MULTILINE)

    return _headings
