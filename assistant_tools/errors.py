"""Exception types for tool-capability resolution.

Unknown group and tool references are not errors: they are skipped during
expansion and rendering. Only conditions that would otherwise grant an
unintended capability set are raised.
"""


class AssistantToolsError(Exception):
    """Base class for all assistant_tools errors."""


class ModeNotFoundError(AssistantToolsError):
    """Raised when a mode slug matches neither a custom nor a built-in mode."""

    def __init__(self, mode: str, available: list[str] | None = None):
        self.mode = mode
        self.available = available or []
        message = f"Mode not found: {mode}"
        if self.available:
            message += f". Available: {', '.join(self.available)}"
        super().__init__(message)


class FileRestrictionError(AssistantToolsError):
    """Raised when an edit targets a file outside the mode's allowed pattern."""

    def __init__(
        self,
        mode_name: str,
        pattern: str,
        description: str | None,
        path: str,
    ):
        self.mode_name = mode_name
        self.pattern = pattern
        self.description = description
        self.path = path
        allowed = f"{pattern} ({description})" if description else pattern
        super().__init__(
            f"This mode ({mode_name}) can only edit files matching pattern: {allowed}. Got: {path}"
        )
