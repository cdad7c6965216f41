"""Owned-scope glob matching.

Patterns come from an intent's ``owned_scope`` list. Matching is purely on
relative file paths; nothing here touches the filesystem.
"""

import re
from collections.abc import Iterable
from functools import lru_cache

_GLOBSTAR_SUFFIX = "/**"


def normalize_path(path: str) -> str:
    """Use forward slashes and strip leading slashes."""
    return path.replace("\\", "/").lstrip("/")


@lru_cache(maxsize=256)
def _compile_pattern(pattern: str) -> re.Pattern[str]:
    """Compile a glob to an anchored regex.

    ``**`` matches across directories, ``*`` stays within one segment.
    """
    parts = []
    for i, chunk in enumerate(pattern.split("**")):
        if i:
            parts.append(".*")
        parts.append("[^/]*".join(re.escape(piece) for piece in chunk.split("*")))
    return re.compile("^" + "".join(parts) + "$")


def pattern_matches(relative_path: str, pattern: str) -> bool:
    """Check a single normalized path against a single pattern."""
    pattern = normalize_path(pattern)
    if not pattern:
        return False
    if relative_path == pattern:
        return True
    if pattern.endswith(_GLOBSTAR_SUFFIX):
        prefix = pattern[: -len(_GLOBSTAR_SUFFIX)]
        if relative_path == prefix or relative_path.startswith(prefix + "/"):
            return True
    if "*" not in pattern and relative_path.startswith(pattern.rstrip("/") + "/"):
        # Bare directory pattern owns everything beneath it
        return True
    return _compile_pattern(pattern).match(relative_path) is not None


def path_matches_owned_scope(relative_path: str, owned_scope: Iterable[str]) -> bool:
    """Return True if ``relative_path`` falls under any owned-scope pattern.

    An empty pattern list matches nothing. Callers decide separately whether
    an intent without owned_scope is exempt from scope enforcement.

    Examples:
        >>> path_matches_owned_scope("src/auth/login.ts", ["src/auth/**"])
        True
        >>> path_matches_owned_scope("src/authz/x.ts", ["src/auth/**"])
        False
    """
    path = normalize_path(relative_path)
    return any(pattern_matches(path, pattern) for pattern in owned_scope)
