"""Pytest configuration and fixtures for intent-hooks tests."""

import logging
import os
import shutil
import tempfile
from collections.abc import Callable, Iterator
from pathlib import Path
from typing import Any

import pytest
import yaml

from intent_hooks.config.paths import (
    get_active_intents_path,
    get_config_path,
    get_intentignore_path,
)
from intent_hooks.constants import GOVERNANCE_CONFIG_KEY

_SAMPLE_INTENTS: list[dict[str, Any]] = [
    {
        "id": "INT-1",
        "name": "Auth rework",
        "status": "IN_PROGRESS",
        "owned_scope": ["src/auth/**"],
        "constraints": ["No new dependencies"],
        "acceptance_criteria": ["Login works with SSO"],
    },
    {
        "id": "INT-2",
        "name": "Docs refresh",
        "status": "IN_PROGRESS",
        "owned_scope": [],
    },
]


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Clear INTENT_HOOKS_* overrides and restore package loggers after each test."""
    for key in list(os.environ):
        if key.startswith("INTENT_HOOKS_"):
            monkeypatch.delenv(key, raising=False)
    yield
    for name in ("intent_hooks", "intent_hooks.hooks"):
        logger = logging.getLogger(name)
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()
        logger.propagate = True
        logger.setLevel(logging.NOTSET)


@pytest.fixture
def temp_workspace() -> Iterator[Path]:
    """Create a temporary workspace and chdir into it.

    Yields:
        Path to the workspace root (contains an empty .orchestration/).
    """
    temp_dir = Path(tempfile.mkdtemp(prefix="intent-hooks-test-")).resolve()
    (temp_dir / ".orchestration").mkdir()
    original_cwd = Path.cwd()
    try:
        os.chdir(temp_dir)
        yield temp_dir
    finally:
        os.chdir(original_cwd)
        shutil.rmtree(temp_dir, ignore_errors=True)


@pytest.fixture
def write_intents() -> Callable[..., Path]:
    """Write an active_intents.yaml registry.

    Returns:
        Function (workspace_root, intents, key="active_intents", path=None) -> path.
    """

    def _write(
        workspace_root: Path,
        intents: list[Any],
        key: str = "active_intents",
        path: Path | None = None,
    ) -> Path:
        target = path or get_active_intents_path(workspace_root)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(yaml.safe_dump({key: intents}, sort_keys=False), encoding="utf-8")
        return target

    return _write


@pytest.fixture
def governed_workspace(temp_workspace: Path, write_intents: Callable[..., Path]) -> Path:
    """Workspace with the sample intents and the reasoning loop enabled."""
    write_intents(temp_workspace, _SAMPLE_INTENTS)
    _write_config(temp_workspace, {"reasoning_loop_enabled": True, "record_vcs_revision": False})
    return temp_workspace


def _write_config(workspace_root: Path, governance: dict[str, Any]) -> Path:
    """Write .orchestration/config.yaml with a governance section."""
    path = get_config_path(workspace_root)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(yaml.safe_dump({GOVERNANCE_CONFIG_KEY: governance}), encoding="utf-8")
    return path


@pytest.fixture
def sample_intents() -> list[dict[str, Any]]:
    """INT-1 owns src/auth/**; INT-2 has no owned_scope."""
    return [dict(intent) for intent in _SAMPLE_INTENTS]


@pytest.fixture
def write_config() -> Callable[[Path, dict[str, Any]], Path]:
    return _write_config


@pytest.fixture
def write_intentignore() -> Callable[[Path, str], Path]:
    def _write(workspace_root: Path, text: str) -> Path:
        path = get_intentignore_path(workspace_root)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        return path

    return _write
