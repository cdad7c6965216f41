"""Spatial index: .orchestration/intent_map.md.

A human-readable view of which files each intent has touched::

    ## INT-1: Auth rework
    - src/auth/login.ts
    - src/auth/session.ts

Sections are identified by intent id alone, so renaming an intent keeps its
section. Updates re-render a whole section in place, which makes re-adding
a path a no-op and keeps one section per intent.
"""

import logging
import re
from collections.abc import Iterable
from pathlib import Path

from intent_hooks.config.paths import get_intent_map_path
from intent_hooks.constants import INTENT_MAP_BULLET_PREFIX, INTENT_MAP_HEADING_PREFIX
from intent_hooks.utils.platform import workspace_lock

logger = logging.getLogger(__name__)


def _heading_pattern(intent_id: str) -> re.Pattern[str]:
    return re.compile(
        rf"^{re.escape(INTENT_MAP_HEADING_PREFIX)}{re.escape(intent_id)}(?:: .*)?$"
    )


def render_heading(intent_id: str, intent_name: str | None) -> str:
    name = (intent_name or "").strip()
    if name:
        return f"{INTENT_MAP_HEADING_PREFIX}{intent_id}: {name}"
    return f"{INTENT_MAP_HEADING_PREFIX}{intent_id}"


def render_section(heading: str, paths: Iterable[str]) -> str:
    """Heading, one bullet per path, then a blank line."""
    bullets = "".join(f"{INTENT_MAP_BULLET_PREFIX}{path}\n" for path in paths)
    return f"{heading}\n{bullets}\n"


def _find_section(lines: list[str], intent_id: str) -> tuple[int, int] | None:
    """Return the [start, end) line span of an intent's section.

    The span runs from the heading up to the next ``## `` heading or the
    end of the document.
    """
    heading = _heading_pattern(intent_id)
    for start, line in enumerate(lines):
        if heading.match(line.rstrip("\r\n")):
            end = start + 1
            while end < len(lines) and not lines[end].startswith(INTENT_MAP_HEADING_PREFIX):
                end += 1
            return start, end
    return None


def _bullet_paths(lines: list[str]) -> list[str]:
    paths: list[str] = []
    for line in lines:
        stripped = line.strip()
        if not stripped.startswith("-"):
            continue
        path = stripped[1:].strip()
        if path and path not in paths:
            paths.append(path)
    return paths


def get_intent_map_paths(content: str, intent_id: str) -> list[str]:
    """Paths listed under an intent's section, in document order."""
    lines = content.splitlines(keepends=True)
    span = _find_section(lines, intent_id)
    if span is None:
        return []
    start, end = span
    return _bullet_paths(lines[start + 1 : end])


def replace_intent_map_section(
    content: str,
    intent_id: str,
    intent_name: str | None,
    paths: Iterable[str],
) -> str:
    """Return ``content`` with the intent's section replaced (or appended).

    When ``intent_name`` is empty an existing heading is kept as is.
    """
    unique_paths = list(dict.fromkeys(paths))
    lines = content.splitlines(keepends=True)
    span = _find_section(lines, intent_id)

    if span is None:
        section = render_section(render_heading(intent_id, intent_name), unique_paths)
        if content.strip():
            return content.rstrip("\n") + "\n\n" + section
        return section

    start, end = span
    if intent_name and intent_name.strip():
        heading = render_heading(intent_id, intent_name)
    else:
        heading = lines[start].rstrip("\r\n")
    section = render_section(heading, unique_paths)
    return "".join(lines[:start]) + section + "".join(lines[end:])


def read_intent_map(workspace_root: Path) -> str:
    """Current map document; empty string when missing or unreadable."""
    map_path = get_intent_map_path(workspace_root)
    try:
        return map_path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return ""
    except (OSError, UnicodeDecodeError) as e:
        logger.debug(f"Could not read {map_path}: {e}")
        return ""


def _write_intent_map(workspace_root: Path, content: str) -> None:
    map_path = get_intent_map_path(workspace_root)
    map_path.parent.mkdir(parents=True, exist_ok=True)
    map_path.write_text(content, encoding="utf-8")


def write_intent_map_section(
    workspace_root: Path,
    intent_id: str,
    intent_name: str | None,
    paths: Iterable[str],
) -> bool:
    """Replace an intent's whole section with an explicit path list.

    Returns:
        True if the document was written. Failures are logged, never raised.
    """
    paths = list(paths)
    try:
        with workspace_lock(workspace_root):
            existing = read_intent_map(workspace_root)
            _write_intent_map(
                workspace_root,
                replace_intent_map_section(existing, intent_id, intent_name, paths),
            )
    except OSError as e:
        logger.warning(f"Failed to update intent_map.md for {intent_id}: {e}")
        return False
    return True


def add_path_to_intent_map(
    workspace_root: Path,
    intent_id: str,
    intent_name: str | None,
    path: str,
) -> bool:
    """Add one path to an intent's section, creating the section if needed.

    Returns:
        True if the document changed. Re-adding a listed path is a no-op.
    """
    try:
        with workspace_lock(workspace_root):
            existing = read_intent_map(workspace_root)
            current_paths = get_intent_map_paths(existing, intent_id)
            if path in current_paths:
                return False
            _write_intent_map(
                workspace_root,
                replace_intent_map_section(
                    existing, intent_id, intent_name, [*current_paths, path]
                ),
            )
    except OSError as e:
        logger.warning(f"Failed to update intent_map.md for {intent_id}: {e}")
        return False
    logger.debug(f"Added {path} to intent map section {intent_id}")
    return True
