"""Workspace root discovery."""

from pathlib import Path

from intent_hooks.config.paths import GIT_DIR, ORCHESTRATION_DIR


def get_workspace_root(start: Path | None = None) -> Path:
    """Find the governed workspace containing ``start`` (default: cwd).

    Walks up until a directory holding ``.orchestration/`` is found, then
    falls back to the nearest git root, then to ``start`` itself.
    """
    current = (start or Path.cwd()).resolve()
    candidates = [current, *current.parents]
    for candidate in candidates:
        if (candidate / ORCHESTRATION_DIR).is_dir():
            return candidate
    for candidate in candidates:
        if (candidate / GIT_DIR).exists():
            return candidate
    return current
