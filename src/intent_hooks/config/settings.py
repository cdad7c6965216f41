"""Runtime settings for intent-hooks.

This module uses Pydantic Settings for values that can be overridden via
environment variables (INTENT_HOOKS_ prefix). Environment values win over
the workspace config file (.orchestration/config.yaml).
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class GovernanceSettings(BaseSettings):
    """Environment overrides for governance behavior.

    Unset values (None) defer to the workspace config file.
    """

    model_config = SettingsConfigDict(env_prefix="INTENT_HOOKS_")

    reasoning_loop_enabled: bool | None = Field(
        default=None,
        description="Force the reasoning loop (governance mode) on or off",
    )
    log_level: str | None = Field(
        default=None,
        description="Override the configured log level",
    )
    debug: bool = Field(
        default=False,
        description="Shortcut for DEBUG logging",
    )


class GitSettings(BaseSettings):
    """Git operation settings.

    Can be overridden via environment variables with INTENT_HOOKS_GIT_ prefix.
    """

    model_config = SettingsConfigDict(env_prefix="INTENT_HOOKS_GIT_")

    command_timeout_seconds: float = Field(
        default=5.0,
        description="Git command timeout in seconds",
    )


def get_governance_settings() -> GovernanceSettings:
    """Read governance settings from the current environment.

    Not cached: environment changes take effect on the next tool call.
    """
    return GovernanceSettings()


git_settings = GitSettings()
