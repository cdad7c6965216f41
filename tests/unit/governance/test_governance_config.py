"""Tests for governance configuration loading and saving."""

from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest
import yaml

from intent_hooks.config.paths import get_config_path
from intent_hooks.exceptions import ValidationError
from intent_hooks.governance.config import (
    GovernanceConfig,
    LogRotationConfig,
    load_governance_config,
    save_governance_config,
)

# =============================================================================
# Defaults and validation
# =============================================================================


class TestGovernanceConfigDefaults:
    def test_defaults(self):
        config = GovernanceConfig()
        assert config.reasoning_loop_enabled is False
        assert config.recent_history_limit == 20
        assert config.empty_scope_policy == "allow"
        assert not config.denies_empty_scope
        assert config.record_vcs_revision is True
        assert config.log_level == "INFO"
        assert config.log_rotation == LogRotationConfig()

    def test_round_trip_through_dict(self):
        config = GovernanceConfig(
            reasoning_loop_enabled=True,
            recent_history_limit=5,
            empty_scope_policy="deny",
            log_rotation=LogRotationConfig(enabled=False, max_size_mb=2, backup_count=1),
        )
        assert GovernanceConfig.from_dict(config.to_dict()) == config


class TestGovernanceConfigValidation:
    @pytest.mark.parametrize(
        ("kwargs", "field"),
        [
            ({"reasoning_loop_enabled": "yes"}, "reasoning_loop_enabled"),
            ({"recent_history_limit": 0}, "recent_history_limit"),
            ({"recent_history_limit": 201}, "recent_history_limit"),
            ({"recent_history_limit": True}, "recent_history_limit"),
            ({"empty_scope_policy": "maybe"}, "empty_scope_policy"),
            ({"record_vcs_revision": "no"}, "record_vcs_revision"),
            ({"log_level": "TRACE"}, "log_level"),
        ],
        ids=[
            "loop-not-bool",
            "history-zero",
            "history-too-big",
            "history-bool",
            "policy",
            "vcs-not-bool",
            "level",
        ],
    )
    def test_invalid_values(self, kwargs: dict[str, Any], field: str):
        with pytest.raises(ValidationError) as exc_info:
            GovernanceConfig(**kwargs)
        assert exc_info.value.field == field

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"max_size_mb": 0},
            {"max_size_mb": 101},
            {"max_size_mb": "10"},
            {"max_size_mb": True},
            {"backup_count": -1},
            {"backup_count": 11},
            {"backup_count": 2.5},
            {"enabled": "yes"},
        ],
    )
    def test_invalid_rotation(self, kwargs: dict[str, Any]):
        with pytest.raises(ValidationError):
            LogRotationConfig(**kwargs)

    @pytest.mark.parametrize("rotation", [True, "daily", [1, 2]], ids=["bool", "str", "list"])
    def test_rotation_section_must_be_mapping(self, rotation: Any):
        with pytest.raises(ValidationError) as exc_info:
            GovernanceConfig.from_dict({"log_rotation": rotation})
        assert exc_info.value.field == "log_rotation"

    def test_null_rotation_section_gives_defaults(self):
        config = GovernanceConfig.from_dict({"log_rotation": None})
        assert config.log_rotation == LogRotationConfig()

    def test_max_bytes(self):
        assert LogRotationConfig(max_size_mb=2).get_max_bytes() == 2 * 1024 * 1024


# =============================================================================
# Environment overrides
# =============================================================================


class TestEnvironmentOverrides:
    def test_loop_override(self, monkeypatch: pytest.MonkeyPatch):
        config = GovernanceConfig(reasoning_loop_enabled=False)
        assert not config.is_reasoning_loop_enabled()
        monkeypatch.setenv("INTENT_HOOKS_REASONING_LOOP_ENABLED", "1")
        assert config.is_reasoning_loop_enabled()
        monkeypatch.setenv("INTENT_HOOKS_REASONING_LOOP_ENABLED", "false")
        assert not GovernanceConfig(reasoning_loop_enabled=True).is_reasoning_loop_enabled()

    def test_log_level_priority(self, monkeypatch: pytest.MonkeyPatch):
        config = GovernanceConfig(log_level="warning")
        assert config.get_effective_log_level() == "WARNING"
        monkeypatch.setenv("INTENT_HOOKS_LOG_LEVEL", "error")
        assert config.get_effective_log_level() == "ERROR"
        monkeypatch.setenv("INTENT_HOOKS_DEBUG", "true")
        assert config.get_effective_log_level() == "DEBUG"

    def test_unknown_env_level_ignored(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("INTENT_HOOKS_LOG_LEVEL", "verbose")
        assert GovernanceConfig().get_effective_log_level() == "INFO"


# =============================================================================
# Load / save
# =============================================================================


class TestLoadGovernanceConfig:
    def test_missing_file_gives_defaults(self, temp_workspace: Path):
        assert load_governance_config(temp_workspace) == GovernanceConfig()

    def test_loads_governance_section(
        self, temp_workspace: Path, write_config: Callable[[Path, dict[str, Any]], Path]
    ):
        write_config(
            temp_workspace,
            {"reasoning_loop_enabled": True, "empty_scope_policy": "deny", "recent_history_limit": 3},
        )
        config = load_governance_config(temp_workspace)
        assert config.reasoning_loop_enabled
        assert config.denies_empty_scope
        assert config.recent_history_limit == 3

    @pytest.mark.parametrize(
        "text",
        [
            "governance: [unclosed\n",
            "- just\n- a list\n",
            "governance: on\n",
            "governance:\n  empty_scope_policy: sometimes\n",
            "governance:\n  log_rotation:\n    max_size_mb: \"10\"\n",
            "governance:\n  log_rotation: true\n",
        ],
        ids=[
            "bad-yaml",
            "not-mapping",
            "section-not-mapping",
            "invalid-value",
            "rotation-size-string",
            "rotation-not-mapping",
        ],
    )
    def test_broken_config_falls_back_to_defaults(self, temp_workspace: Path, text: str):
        get_config_path(temp_workspace).write_text(text, encoding="utf-8")
        assert load_governance_config(temp_workspace) == GovernanceConfig()

    def test_empty_file(self, temp_workspace: Path):
        get_config_path(temp_workspace).write_text("", encoding="utf-8")
        assert load_governance_config(temp_workspace) == GovernanceConfig()


class TestSaveGovernanceConfig:
    def test_save_preserves_other_keys(self, temp_workspace: Path):
        path = get_config_path(temp_workspace)
        path.write_text(yaml.safe_dump({"team": {"owner": "platform"}}), encoding="utf-8")

        written = save_governance_config(temp_workspace, GovernanceConfig(reasoning_loop_enabled=True))

        assert written == path
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
        assert data["team"] == {"owner": "platform"}
        assert data["governance"]["reasoning_loop_enabled"] is True
        assert load_governance_config(temp_workspace).reasoning_loop_enabled

    def test_save_creates_sidecar_directory(self, tmp_path: Path):
        save_governance_config(tmp_path, GovernanceConfig())
        assert get_config_path(tmp_path).exists()
