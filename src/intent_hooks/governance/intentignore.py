"""Reader for .orchestration/.intentignore.

One intent id per line; ``#`` starts a comment. The file is re-read on every
check so edits take effect on the next tool call.
"""

import logging
from pathlib import Path

from intent_hooks.config.paths import get_intentignore_path

logger = logging.getLogger(__name__)


def parse_intentignore(text: str) -> set[str]:
    ignored: set[str] = set()
    for line in text.splitlines():
        entry = line.split("#", 1)[0].strip()
        if entry:
            ignored.add(entry)
    return ignored


def load_intentignore(workspace_root: Path) -> set[str]:
    """Load the set of intent ids frozen from further mutation.

    Returns:
        Ignored intent ids; empty if the file is missing or unreadable.
    """
    path = get_intentignore_path(workspace_root)
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return set()
    except (OSError, UnicodeDecodeError) as e:
        logger.debug(f"Could not read {path}: {e}")
        return set()
    return parse_intentignore(text)
