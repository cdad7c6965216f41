"""Git helpers."""

import logging
import subprocess
from pathlib import Path

from intent_hooks.config.paths import GIT_DIR
from intent_hooks.config.settings import git_settings

logger = logging.getLogger(__name__)


def get_head_revision(workspace_root: Path) -> str | None:
    """Get the commit id of HEAD for a workspace.

    Returns:
        Full commit sha, or None if the workspace is not a git repository,
        has no commits yet, or git is unavailable.
    """
    if not (workspace_root / GIT_DIR).exists():
        return None
    try:
        result = subprocess.run(
            ["git", "rev-parse", "HEAD"],
            cwd=workspace_root,
            capture_output=True,
            text=True,
            check=True,
            timeout=git_settings.command_timeout_seconds,
        )
    except subprocess.CalledProcessError:
        # Not a repo, or no commits yet
        return None
    except subprocess.TimeoutExpired:
        logger.debug(f"git rev-parse timed out in {workspace_root}")
        return None
    except OSError:
        # Git missing or not executable
        return None
    revision = result.stdout.strip()
    return revision or None
