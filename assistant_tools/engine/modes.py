"""Built-in modes and mode resolution.

Custom modes always take precedence over built-in modes with the same slug.
"""

import logging

from ..errors import ModeNotFoundError
from ..models.enums import BuiltinMode, ToolGroupName
from ..models.modes import ModeConfig

logger = logging.getLogger(__name__)

BUILTIN_MODES: tuple[ModeConfig, ...] = (
    ModeConfig(
        slug=BuiltinMode.ASK,
        name="Ask",
        role_definition=(
            "You are a knowledgeable assistant focused on answering questions about the "
            "user's notes, explaining concepts and finding information, without changing "
            "any files."
        ),
        when_to_use="For questions, explanations and lookups across the vault.",
        groups=[ToolGroupName.READ],
    ),
    ModeConfig(
        slug=BuiltinMode.WRITE,
        name="Write",
        role_definition=(
            "You are a skilled writer and editor who drafts, restructures and improves "
            "the user's notes while preserving their voice and formatting."
        ),
        when_to_use="For creating new notes or editing existing ones.",
        groups=[
            ToolGroupName.READ,
            ToolGroupName.EDIT,
            ToolGroupName.RESEARCH,
            ToolGroupName.MCP,
            ToolGroupName.MODES,
        ],
    ),
    ModeConfig(
        slug=BuiltinMode.RESEARCH,
        name="Research",
        role_definition=(
            "You are a meticulous researcher who gathers information from the vault and "
            "the web, cross-checks sources and reports findings with citations."
        ),
        when_to_use="For investigating a topic across notes and online sources.",
        custom_instructions=(
            "Cite every external source with its URL. Do not edit files; suggest "
            "switching to Write mode when the user wants findings saved."
        ),
        groups=[
            ToolGroupName.READ,
            ToolGroupName.RESEARCH,
            ToolGroupName.BROWSER,
            ToolGroupName.MCP,
            ToolGroupName.MODES,
        ],
    ),
    ModeConfig(
        slug=BuiltinMode.AUDIT,
        name="Audit",
        role_definition=(
            "You are a careful reviewer who checks the user's notes for broken links, "
            "contradictions and outdated facts, and reports what needs attention."
        ),
        when_to_use="For reviewing notes without changing them.",
        custom_instructions="Report issues as a checklist. Never modify files or external systems.",
        groups=[ToolGroupName.READ, ToolGroupName.MCP],
    ),
)


def get_builtin_mode(slug: str) -> ModeConfig | None:
    for mode in BUILTIN_MODES:
        if mode.slug == slug:
            return mode
    return None


def get_mode_by_slug(slug: str, custom_modes: list[ModeConfig] | None = None) -> ModeConfig | None:
    """Find a mode by slug, preferring custom definitions."""
    for mode in custom_modes or ():
        if mode.slug == slug:
            return mode
    return get_builtin_mode(slug)


def get_all_modes(custom_modes: list[ModeConfig] | None = None) -> list[ModeConfig]:
    """List every selectable mode.

    Built-in modes keep their position even when overridden by a custom
    definition; custom modes with new slugs are appended in their own order.
    """
    custom_by_slug: dict[str, ModeConfig] = {}
    for mode in custom_modes or ():
        custom_by_slug.setdefault(mode.slug, mode)

    modes = [custom_by_slug.pop(mode.slug, mode) for mode in BUILTIN_MODES]
    modes.extend(custom_by_slug.values())
    return modes


def resolve_mode(slug: str, custom_modes: list[ModeConfig] | None = None) -> ModeConfig:
    """Resolve a mode slug to its configuration.

    Args:
        slug: Mode identifier
        custom_modes: User-authored modes (shadow built-ins with the same slug)

    Returns:
        The custom mode if one matches, else the built-in mode

    Raises:
        ModeNotFoundError: If neither a custom nor a built-in mode matches
    """
    for mode in custom_modes or ():
        if mode.slug == slug:
            if get_builtin_mode(slug) is not None:
                logger.debug(f"Custom mode overrides built-in mode: {slug}")
            return mode

    builtin = get_builtin_mode(slug)
    if builtin is not None:
        return builtin

    raise ModeNotFoundError(slug, [mode.slug for mode in get_all_modes(custom_modes)])
