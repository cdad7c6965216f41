"""Path constants for intent-hooks.

All governance state lives in a sidecar directory at the workspace root.
Files in it are either human-edited (intents, ignore list, config) or
machine-managed (trace ledger, intent map, lock file).
"""

from pathlib import Path

# =============================================================================
# Sidecar Directory
# =============================================================================

ORCHESTRATION_DIR = ".orchestration"
GIT_DIR = ".git"

# =============================================================================
# Human-Edited Files
# =============================================================================

ACTIVE_INTENTS_FILENAME = "active_intents.yaml"
INTENTIGNORE_FILENAME = ".intentignore"
CONFIG_FILENAME = "config.yaml"

# =============================================================================
# Machine-Managed Files
# =============================================================================

AGENT_TRACE_FILENAME = "agent_trace.jsonl"
INTENT_MAP_FILENAME = "intent_map.md"
LOCK_FILENAME = ".lock"
LOG_FILENAME = "intent-hooks.log"


def get_orchestration_dir(workspace_root: Path) -> Path:
    """Return the sidecar directory for a workspace."""
    return workspace_root / ORCHESTRATION_DIR


def get_active_intents_path(workspace_root: Path) -> Path:
    """Return the path of the intent registry inside the sidecar directory."""
    return get_orchestration_dir(workspace_root) / ACTIVE_INTENTS_FILENAME


def get_legacy_active_intents_path(workspace_root: Path) -> Path:
    """Return the pre-sidecar location of the intent registry (workspace root)."""
    return workspace_root / ACTIVE_INTENTS_FILENAME


def get_intentignore_path(workspace_root: Path) -> Path:
    return get_orchestration_dir(workspace_root) / INTENTIGNORE_FILENAME


def get_agent_trace_path(workspace_root: Path) -> Path:
    return get_orchestration_dir(workspace_root) / AGENT_TRACE_FILENAME


def get_intent_map_path(workspace_root: Path) -> Path:
    return get_orchestration_dir(workspace_root) / INTENT_MAP_FILENAME


def get_config_path(workspace_root: Path) -> Path:
    return get_orchestration_dir(workspace_root) / CONFIG_FILENAME


def get_lock_path(workspace_root: Path) -> Path:
    return get_orchestration_dir(workspace_root) / LOCK_FILENAME


def get_log_path(workspace_root: Path) -> Path:
    return get_orchestration_dir(workspace_root) / LOG_FILENAME
