"""
Tests for assistant_tools/engine/gate.py - the per-tool allow/deny decision.
"""

import pytest

from assistant_tools.engine import gate
from assistant_tools.engine.gate import (
    does_file_match_regex,
    is_experiment_enabled,
    is_tool_allowed,
)
from assistant_tools.errors import FileRestrictionError, ModeNotFoundError
from assistant_tools.models import ModeConfig, ToolName


@pytest.fixture
def markdown_only():
    return [
        ModeConfig(
            slug="docs",
            name="Docs",
            groups=["read", ["edit", {"fileRegex": r"\.md$", "description": "Markdown files"}]],
        )
    ]


class TestGroupMembership:

    def test_granted_group(self):
        assert is_tool_allowed(ToolName.READ_FILE, "ask")

    def test_ungranted_group(self):
        assert not is_tool_allowed(ToolName.WRITE_TO_FILE, "ask")

    def test_string_identifiers(self):
        assert is_tool_allowed("list_files", "ask")

    def test_unknown_tool(self):
        assert not is_tool_allowed("teleport", "write")

    def test_unknown_group_in_custom_mode_is_ignored(self):
        modes = [ModeConfig(slug="odd", name="Odd", groups=["telepathy", "read"])]
        assert is_tool_allowed(ToolName.READ_FILE, "odd", modes)
        assert not is_tool_allowed(ToolName.SWITCH_MODE, "odd", modes)


class TestAlwaysAvailable:

    @pytest.mark.parametrize("tool", [ToolName.ASK_FOLLOWUP_QUESTION, ToolName.ATTEMPT_COMPLETION])
    def test_allowed_in_empty_mode(self, tool):
        modes = [ModeConfig(slug="empty", name="Empty", groups=[])]
        assert is_tool_allowed(tool, "empty", modes)

    def test_allowed_without_resolving_mode(self):
        assert is_tool_allowed(ToolName.ATTEMPT_COMPLETION, "no-such-mode")


class TestExperiments:

    def test_missing_flag_denies(self):
        assert not is_tool_allowed(ToolName.SEARCH_WEB, "write")

    def test_false_flag_denies(self):
        assert not is_tool_allowed(ToolName.SEARCH_WEB, "write", experiments={"searchWeb": False})

    def test_true_flag_allows(self):
        assert is_tool_allowed(ToolName.SEARCH_WEB, "write", experiments={"searchWeb": True})

    def test_only_exact_true_enables(self):
        assert not is_experiment_enabled(ToolName.INSERT_CONTENT, {"insert_content": 1})

    def test_flag_does_not_grant_group(self):
        assert not is_tool_allowed(ToolName.SEARCH_WEB, "ask", experiments={"searchWeb": True})

    def test_ungated_tool_ignores_flags(self):
        assert is_experiment_enabled(ToolName.READ_FILE, None)
        assert is_tool_allowed(ToolName.FETCH_URLS_CONTENT, "write", experiments={})

    def test_unrelated_flags_ignored(self):
        assert is_tool_allowed(ToolName.READ_FILE, "ask", experiments={"somethingElse": True})


class TestModeRestrictions:

    def test_deny_overrides_group_grant(self):
        assert not is_tool_allowed(ToolName.USE_MCP_TOOL, "audit")

    def test_rest_of_group_still_granted(self):
        assert is_tool_allowed(ToolName.ACCESS_MCP_RESOURCE, "audit")

    def test_same_tool_allowed_elsewhere(self):
        assert is_tool_allowed(ToolName.USE_MCP_TOOL, "write")

    def test_custom_shadow_inherits_deny(self):
        modes = [ModeConfig(slug="audit", name="My Audit", groups=["mcp"])]
        assert not is_tool_allowed(ToolName.USE_MCP_TOOL, "audit", modes)

    def test_restriction_and_experiment_both_apply(self, monkeypatch):
        monkeypatch.setattr(
            gate, "get_mode_restrictions", lambda mode: frozenset({ToolName.SEARCH_WEB})
        )
        flags = {"searchWeb": True}
        assert not is_tool_allowed(ToolName.SEARCH_WEB, "write", experiments=flags)


class TestUnknownMode:

    def test_raises(self):
        with pytest.raises(ModeNotFoundError):
            is_tool_allowed(ToolName.READ_FILE, "architect")


class TestFileRestrictions:

    def test_matching_path(self, markdown_only):
        params = {"path": "notes/today.md", "content": "# Today"}
        assert is_tool_allowed(ToolName.WRITE_TO_FILE, "docs", markdown_only, tool_params=params)

    def test_non_matching_path_raises(self, markdown_only):
        params = {"path": "scripts/build.py", "content": "print()"}
        with pytest.raises(FileRestrictionError) as exc_info:
            is_tool_allowed(ToolName.WRITE_TO_FILE, "docs", markdown_only, tool_params=params)
        error = exc_info.value
        assert error.mode_name == "Docs"
        assert error.path == "scripts/build.py"
        assert "Markdown files" in str(error)

    def test_diff_param_counts_as_content(self, markdown_only):
        params = {"path": "a.py", "diff": "@@ -1 +1 @@"}
        with pytest.raises(FileRestrictionError):
            is_tool_allowed(ToolName.APPLY_DIFF, "docs", markdown_only, tool_params=params)

    def test_no_content_params(self, markdown_only):
        params = {"path": "scripts/build.py"}
        assert is_tool_allowed(ToolName.WRITE_TO_FILE, "docs", markdown_only, tool_params=params)

    def test_empty_content_still_restricted(self, markdown_only):
        params = {"path": "scripts/build.py", "content": ""}
        with pytest.raises(FileRestrictionError):
            is_tool_allowed(ToolName.WRITE_TO_FILE, "docs", markdown_only, tool_params=params)

    def test_empty_operations_still_restricted(self, markdown_only):
        params = {"path": "scripts/build.py", "operations": []}
        with pytest.raises(FileRestrictionError):
            is_tool_allowed(ToolName.INSERT_CONTENT, "docs", markdown_only, {"insert_content": True}, params)

    def test_describing_ignores_restriction(self, markdown_only):
        assert is_tool_allowed(ToolName.WRITE_TO_FILE, "docs", markdown_only)

    def test_read_group_unaffected(self, markdown_only):
        params = {"path": "scripts/build.py", "content": "x"}
        assert is_tool_allowed(ToolName.READ_FILE, "docs", markdown_only, tool_params=params)


class TestFileRegex:

    def test_search_semantics(self):
        assert does_file_match_regex("docs/readme.md", r"\.md$")
        assert not does_file_match_regex("docs/readme.md.bak", r"\.md$")

    def test_invalid_pattern(self):
        assert not does_file_match_regex("a.md", "(unclosed")
