"""Runtime settings for tool-capability resolution.

Values come from environment variables prefixed with ASSISTANT_TOOLS_ (or a
.env file), e.g.::

    ASSISTANT_TOOLS_DEFAULT_MODE=write
    ASSISTANT_TOOLS_EXPERIMENTS='{"searchWeb": true}'
    ASSISTANT_TOOLS_TOOL_SECTION_TOKEN_BUDGET=6000
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings read on first call to get_settings(), never at import."""

    model_config = SettingsConfigDict(
        env_prefix="ASSISTANT_TOOLS_",
        env_file=".env",
        extra="ignore",
    )

    # Mode used when the requested mode cannot be resolved
    default_mode: str = "ask"

    # Experiment defaults; explicit flags passed per call take precedence
    experiments: dict[str, bool] = Field(default_factory=dict)

    # Warn when the rendered tool section exceeds this many tokens
    tool_section_token_budget: int | None = Field(default=None, ge=1)
    token_encoding: str = "cl100k_base"


@lru_cache
def get_settings() -> Settings:
    return Settings()
