"""Mode configuration models.

Modes are persisted in the camelCase shape used by the settings file, e.g.::

    {
        "slug": "docs",
        "name": "Docs",
        "roleDefinition": "You maintain the vault documentation.",
        "groups": ["read", ["edit", {"fileRegex": "\\\\.md$", "description": "Markdown only"}]]
    }

Both the camelCase aliases and the snake_case field names are accepted.
"""

import logging
import re
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator

from .enums import ToolGroupName

logger = logging.getLogger(__name__)


class GroupOptions(BaseModel):
    """Qualifiers attached to a granted group."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    file_regex: str | None = Field(
        default=None,
        alias="fileRegex",
        description="Pattern a file path must match for edit tools to write it",
    )
    description: str | None = Field(
        default=None, description="Human-readable summary of the restriction"
    )

    @field_validator("file_regex")
    @classmethod
    def _check_file_regex(cls, value: str | None) -> str | None:
        if value is not None:
            try:
                re.compile(value)
            except re.error as exc:
                raise ValueError(f"invalid fileRegex {value!r}: {exc}") from exc
        return value


class GroupEntry(BaseModel):
    """A group reference inside a mode, optionally qualified."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Group name; unknown names are skipped on expansion")
    options: GroupOptions | None = Field(default=None, description="Optional qualifiers")

    @property
    def group(self) -> ToolGroupName | None:
        """The catalogue group this entry names, or None if unknown."""
        try:
            return ToolGroupName(self.name)
        except ValueError:
            return None


def _coerce_group_entry(item: Any) -> Any:
    if isinstance(item, str):
        return {"name": item}
    if isinstance(item, (list, tuple)) and len(item) == 2:
        name, options = item
        return {"name": name, "options": options}
    return item


class ModeConfig(BaseModel):
    """A built-in or user-authored operating mode."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    slug: str = Field(..., min_length=1, description="Mode identifier")
    name: str = Field(..., description="Human-readable label")
    role_definition: str = Field(default="", alias="roleDefinition")
    when_to_use: str | None = Field(default=None, alias="whenToUse")
    custom_instructions: str | None = Field(default=None, alias="customInstructions")
    groups: list[GroupEntry] = Field(
        default_factory=list, description="Granted groups, in declaration order"
    )

    @field_validator("groups", mode="before")
    @classmethod
    def _normalize_groups(cls, value: Any) -> Any:
        if isinstance(value, (list, tuple)):
            return [_coerce_group_entry(item) for item in value]
        return value


_CUSTOM_MODES_ADAPTER = TypeAdapter(list[ModeConfig])


def load_custom_modes(raw: list[dict[str, Any]] | None) -> list[ModeConfig]:
    """Validate user-authored mode definitions.

    Args:
        raw: Mode dicts as stored in plugin settings (None means no custom modes)

    Returns:
        Validated modes; when slugs repeat, only the first definition is kept

    Raises:
        pydantic.ValidationError: If any definition is malformed
    """
    if not raw:
        return []

    modes = _CUSTOM_MODES_ADAPTER.validate_python(raw)
    seen: set[str] = set()
    unique: list[ModeConfig] = []
    for mode in modes:
        if mode.slug in seen:
            logger.warning(f"Ignoring duplicate custom mode definition: {mode.slug}")
            continue
        seen.add(mode.slug)
        unique.append(mode)
    return unique
