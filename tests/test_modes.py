"""
Tests for assistant_tools/engine/modes.py - built-in modes and resolution.
"""

import pytest

from assistant_tools.engine.modes import (
    BUILTIN_MODES,
    get_all_modes,
    get_builtin_mode,
    get_mode_by_slug,
    resolve_mode,
)
from assistant_tools.errors import ModeNotFoundError
from assistant_tools.models import ModeConfig, load_custom_modes


@pytest.fixture
def custom_modes():
    return load_custom_modes([
        {"slug": "audit", "name": "Custom Audit", "groups": ["read", "edit"]},
        {"slug": "translator", "name": "Translator", "groups": ["read"]},
    ])


class TestBuiltinModes:

    def test_slugs(self):
        assert [mode.slug for mode in BUILTIN_MODES] == ["ask", "write", "research", "audit"]

    def test_ask_grants_only_read(self):
        assert [entry.name for entry in get_builtin_mode("ask").groups] == ["read"]

    def test_all_builtin_groups_known(self):
        for mode in BUILTIN_MODES:
            assert all(entry.group is not None for entry in mode.groups), mode.slug

    def test_unknown_builtin(self):
        assert get_builtin_mode("translator") is None


class TestResolveMode:

    def test_builtin(self):
        assert resolve_mode("write").name == "Write"

    def test_builtin_without_custom_table(self):
        assert resolve_mode("ask", None) is get_builtin_mode("ask")

    def test_custom_shadows_builtin(self, custom_modes):
        mode = resolve_mode("audit", custom_modes)
        assert mode.name == "Custom Audit"
        assert [entry.name for entry in mode.groups] == ["read", "edit"]

    def test_custom_only_mode(self, custom_modes):
        assert resolve_mode("translator", custom_modes).name == "Translator"

    def test_unrelated_builtin_unaffected(self, custom_modes):
        assert resolve_mode("research", custom_modes) is get_builtin_mode("research")

    def test_first_custom_definition_wins(self):
        modes = [
            ModeConfig(slug="dup", name="First"),
            ModeConfig(slug="dup", name="Second"),
        ]
        assert resolve_mode("dup", modes).name == "First"

    def test_unknown_mode_raises(self, custom_modes):
        with pytest.raises(ModeNotFoundError) as exc_info:
            resolve_mode("architect", custom_modes)
        assert exc_info.value.mode == "architect"
        assert "translator" in exc_info.value.available
        assert "architect" in str(exc_info.value)

    def test_custom_mode_not_visible_without_table(self, custom_modes):
        with pytest.raises(ModeNotFoundError):
            resolve_mode("translator")


class TestModeLookup:

    def test_get_mode_by_slug_prefers_custom(self, custom_modes):
        assert get_mode_by_slug("audit", custom_modes).name == "Custom Audit"

    def test_get_mode_by_slug_missing(self):
        assert get_mode_by_slug("architect") is None

    def test_get_all_modes_order(self, custom_modes):
        modes = get_all_modes(custom_modes)
        assert [mode.slug for mode in modes] == ["ask", "write", "research", "audit", "translator"]
        assert modes[3].name == "Custom Audit"

    def test_get_all_modes_builtin_only(self):
        assert get_all_modes() == list(BUILTIN_MODES)
