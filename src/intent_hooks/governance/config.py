"""Configuration management for governance.

Configuration follows a priority hierarchy:
1. Environment variables (INTENT_HOOKS_*)
2. Workspace config (.orchestration/config.yaml, ``governance`` key)
3. Hardcoded defaults in this module
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from intent_hooks.config.paths import get_config_path
from intent_hooks.config.settings import get_governance_settings
from intent_hooks.constants import (
    DEFAULT_LOG_BACKUP_COUNT,
    DEFAULT_LOG_MAX_SIZE_MB,
    DEFAULT_LOG_ROTATION_ENABLED,
    DEFAULT_REASONING_LOOP_ENABLED,
    DEFAULT_RECENT_HISTORY_LIMIT,
    DEFAULT_RECORD_VCS_REVISION,
    EMPTY_SCOPE_POLICY_ALLOW,
    EMPTY_SCOPE_POLICY_DENY,
    GOVERNANCE_CONFIG_KEY,
    LOG_LEVEL_DEBUG,
    LOG_LEVEL_INFO,
    MAX_LOG_BACKUP_COUNT,
    MAX_LOG_MAX_SIZE_MB,
    MAX_RECENT_HISTORY_LIMIT,
    MIN_LOG_MAX_SIZE_MB,
    MIN_RECENT_HISTORY_LIMIT,
    VALID_EMPTY_SCOPE_POLICIES,
    VALID_LOG_LEVELS,
)
from intent_hooks.exceptions import ValidationError

logger = logging.getLogger(__name__)


@dataclass
class LogRotationConfig:
    """Configuration for log file rotation.

    Attributes:
        enabled: Whether to enable log rotation.
        max_size_mb: Maximum log file size in megabytes before rotation.
        backup_count: Number of backup files to keep (e.g., hooks.log.1, .2, .3).
    """

    enabled: bool = DEFAULT_LOG_ROTATION_ENABLED
    max_size_mb: int = DEFAULT_LOG_MAX_SIZE_MB
    backup_count: int = DEFAULT_LOG_BACKUP_COUNT

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Validate configuration values.

        Raises:
            ValidationError: If any configuration value is invalid.
        """
        if not isinstance(self.enabled, bool):
            raise ValidationError(
                "log_rotation.enabled must be a boolean",
                field="enabled",
                value=self.enabled,
                expected="true or false",
            )
        for name in ("max_size_mb", "backup_count"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValidationError(
                    f"{name} must be an integer",
                    field=name,
                    value=value,
                    expected="integer",
                )
        if not MIN_LOG_MAX_SIZE_MB <= self.max_size_mb <= MAX_LOG_MAX_SIZE_MB:
            raise ValidationError(
                f"max_size_mb must be between {MIN_LOG_MAX_SIZE_MB} and {MAX_LOG_MAX_SIZE_MB}",
                field="max_size_mb",
                value=self.max_size_mb,
                expected=f"{MIN_LOG_MAX_SIZE_MB}..{MAX_LOG_MAX_SIZE_MB}",
            )
        if self.backup_count < 0:
            raise ValidationError(
                "backup_count cannot be negative",
                field="backup_count",
                value=self.backup_count,
                expected=">= 0",
            )
        if self.backup_count > MAX_LOG_BACKUP_COUNT:
            raise ValidationError(
                f"backup_count must be at most {MAX_LOG_BACKUP_COUNT}",
                field="backup_count",
                value=self.backup_count,
                expected=f"<= {MAX_LOG_BACKUP_COUNT}",
            )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "LogRotationConfig":
        return cls(
            enabled=data.get("enabled", DEFAULT_LOG_ROTATION_ENABLED),
            max_size_mb=data.get("max_size_mb", DEFAULT_LOG_MAX_SIZE_MB),
            backup_count=data.get("backup_count", DEFAULT_LOG_BACKUP_COUNT),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "enabled": self.enabled,
            "max_size_mb": self.max_size_mb,
            "backup_count": self.backup_count,
        }

    def get_max_bytes(self) -> int:
        """Get maximum log file size in bytes."""
        return self.max_size_mb * 1024 * 1024


@dataclass
class GovernanceConfig:
    """Governance configuration for a workspace.

    Attributes:
        reasoning_loop_enabled: Governance mode. When off, pre-checks are
            skipped and only the trace ledger is written.
        recent_history_limit: Ledger entries summarized in intent context.
        empty_scope_policy: ``allow`` exempts intents without owned_scope
            from the scope check; ``deny`` vetoes their scoped writes.
        record_vcs_revision: Record ``git rev-parse HEAD`` in trace entries.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        log_rotation: Log file rotation configuration.
    """

    reasoning_loop_enabled: bool = DEFAULT_REASONING_LOOP_ENABLED
    recent_history_limit: int = DEFAULT_RECENT_HISTORY_LIMIT
    empty_scope_policy: str = EMPTY_SCOPE_POLICY_ALLOW
    record_vcs_revision: bool = DEFAULT_RECORD_VCS_REVISION
    log_level: str = LOG_LEVEL_INFO
    log_rotation: LogRotationConfig = field(default_factory=LogRotationConfig)

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Validate configuration values.

        Raises:
            ValidationError: If any configuration value is invalid.
        """
        if not isinstance(self.reasoning_loop_enabled, bool):
            raise ValidationError(
                "reasoning_loop_enabled must be a boolean",
                field="reasoning_loop_enabled",
                value=self.reasoning_loop_enabled,
                expected="true or false",
            )
        if not isinstance(self.record_vcs_revision, bool):
            raise ValidationError(
                "record_vcs_revision must be a boolean",
                field="record_vcs_revision",
                value=self.record_vcs_revision,
                expected="true or false",
            )
        if (
            isinstance(self.recent_history_limit, bool)
            or not isinstance(self.recent_history_limit, int)
            or not MIN_RECENT_HISTORY_LIMIT <= self.recent_history_limit <= MAX_RECENT_HISTORY_LIMIT
        ):
            raise ValidationError(
                f"recent_history_limit must be between {MIN_RECENT_HISTORY_LIMIT} "
                f"and {MAX_RECENT_HISTORY_LIMIT}",
                field="recent_history_limit",
                value=self.recent_history_limit,
                expected=f"{MIN_RECENT_HISTORY_LIMIT}..{MAX_RECENT_HISTORY_LIMIT}",
            )
        if self.empty_scope_policy not in VALID_EMPTY_SCOPE_POLICIES:
            raise ValidationError(
                f"Invalid empty_scope_policy: {self.empty_scope_policy}",
                field="empty_scope_policy",
                value=self.empty_scope_policy,
                expected=f"one of {VALID_EMPTY_SCOPE_POLICIES}",
            )
        if not isinstance(self.log_level, str) or self.log_level.upper() not in VALID_LOG_LEVELS:
            raise ValidationError(
                f"Invalid log level: {self.log_level}",
                field="log_level",
                value=self.log_level,
                expected=f"one of {VALID_LOG_LEVELS}",
            )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "GovernanceConfig":
        """Create config from dictionary.

        Raises:
            ValidationError: If configuration values are invalid.
        """
        rotation = data.get("log_rotation")
        if rotation is None:
            rotation = {}
        elif not isinstance(rotation, dict):
            raise ValidationError(
                "log_rotation must be a mapping",
                field="log_rotation",
                value=rotation,
                expected="mapping with enabled, max_size_mb, backup_count",
            )
        return cls(
            reasoning_loop_enabled=data.get(
                "reasoning_loop_enabled", DEFAULT_REASONING_LOOP_ENABLED
            ),
            recent_history_limit=data.get("recent_history_limit", DEFAULT_RECENT_HISTORY_LIMIT),
            empty_scope_policy=data.get("empty_scope_policy", EMPTY_SCOPE_POLICY_ALLOW),
            record_vcs_revision=data.get("record_vcs_revision", DEFAULT_RECORD_VCS_REVISION),
            log_level=data.get("log_level", LOG_LEVEL_INFO),
            log_rotation=LogRotationConfig.from_dict(rotation),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "reasoning_loop_enabled": self.reasoning_loop_enabled,
            "recent_history_limit": self.recent_history_limit,
            "empty_scope_policy": self.empty_scope_policy,
            "record_vcs_revision": self.record_vcs_revision,
            "log_level": self.log_level,
            "log_rotation": self.log_rotation.to_dict(),
        }

    @property
    def denies_empty_scope(self) -> bool:
        return self.empty_scope_policy == EMPTY_SCOPE_POLICY_DENY

    def is_reasoning_loop_enabled(self) -> bool:
        """Get the effective governance mode, considering environment overrides.

        Priority (highest to lowest):
        1. INTENT_HOOKS_REASONING_LOOP_ENABLED
        2. Config file reasoning_loop_enabled
        """
        override = get_governance_settings().reasoning_loop_enabled
        if override is not None:
            return override
        return self.reasoning_loop_enabled

    def get_effective_log_level(self) -> str:
        """Get effective log level, considering environment variable overrides.

        Priority (highest to lowest):
        1. INTENT_HOOKS_DEBUG=1 → DEBUG
        2. INTENT_HOOKS_LOG_LEVEL environment variable
        3. Config file log_level setting
        4. Default: INFO
        """
        settings = get_governance_settings()
        if settings.debug:
            return LOG_LEVEL_DEBUG

        env_level = (settings.log_level or "").upper()
        if env_level in VALID_LOG_LEVELS:
            return env_level

        if self.log_level.upper() in VALID_LOG_LEVELS:
            return self.log_level.upper()

        return LOG_LEVEL_INFO


def _write_yaml_config(path: Path, data: dict[str, Any]) -> None:
    """Write a config dict as YAML, keeping short lists inline."""

    class InlineListDumper(yaml.SafeDumper):
        pass

    def represent_list(dumper: yaml.SafeDumper, items: list[Any]) -> yaml.nodes.Node:
        if len(items) <= 3:
            return dumper.represent_sequence("tag:yaml.org,2002:seq", items, flow_style=True)
        return dumper.represent_sequence("tag:yaml.org,2002:seq", items, flow_style=False)

    InlineListDumper.add_representer(list, represent_list)

    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        yaml.dump(
            data,
            f,
            Dumper=InlineListDumper,
            default_flow_style=False,
            sort_keys=False,
        )


def load_governance_config(workspace_root: Path) -> GovernanceConfig:
    """Load governance configuration for a workspace.

    Reads .orchestration/config.yaml under the ``governance`` key.

    Note:
        Returns defaults on error rather than raising, so a broken config
        file never blocks an agent's tool calls.
    """
    config_file = get_config_path(workspace_root)

    if not config_file.exists():
        logger.debug(f"No config file at {config_file}, using defaults")
        return GovernanceConfig()

    try:
        with open(config_file, encoding="utf-8") as f:
            config_data = yaml.safe_load(f) or {}

        if not isinstance(config_data, dict):
            logger.warning(f"Config file {config_file} is not a mapping, using defaults")
            return GovernanceConfig()

        governance_data = config_data.get(GOVERNANCE_CONFIG_KEY) or {}
        if not isinstance(governance_data, dict):
            logger.warning(
                f"'{GOVERNANCE_CONFIG_KEY}' in {config_file} is not a mapping, using defaults"
            )
            return GovernanceConfig()

        config = GovernanceConfig.from_dict(governance_data)
        logger.debug(
            f"Loaded governance config: reasoning_loop={config.reasoning_loop_enabled}, "
            f"empty_scope_policy={config.empty_scope_policy}"
        )
        return config

    except ValidationError as e:
        logger.warning(f"Invalid governance config in {config_file}: {e}")
        logger.info("Using default configuration")
        return GovernanceConfig()

    except yaml.YAMLError as e:
        logger.warning(f"Failed to parse config YAML from {config_file}: {e}")
        return GovernanceConfig()

    except OSError as e:
        logger.warning(f"Failed to read config from {config_file}: {e}")
        return GovernanceConfig()


def save_governance_config(workspace_root: Path, config: GovernanceConfig) -> Path:
    """Save governance configuration, preserving other top-level keys.

    Returns:
        Path of the written config file.
    """
    config_file = get_config_path(workspace_root)

    existing_config: dict[str, Any] = {}
    if config_file.exists():
        try:
            with open(config_file, encoding="utf-8") as f:
                loaded = yaml.safe_load(f) or {}
            if isinstance(loaded, dict):
                existing_config = loaded
        except (yaml.YAMLError, OSError) as e:
            logger.warning(f"Failed to read existing config: {e}")

    existing_config[GOVERNANCE_CONFIG_KEY] = config.to_dict()
    _write_yaml_config(config_file, existing_config)
    logger.info(f"Saved governance config to {config_file}")
    return config_file
