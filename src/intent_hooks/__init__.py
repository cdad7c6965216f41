"""intent-hooks: intent-scoped governance and audit trail for coding agents."""

import tomllib
from pathlib import Path

try:
    # Prefer pyproject.toml in development mode so the version stays current
    pyproject_path = Path(__file__).parent.parent.parent / "pyproject.toml"
    with open(pyproject_path, "rb") as f:
        data = tomllib.load(f)
    __version__ = data["project"]["version"]
except Exception:
    # Installed (non-editable) package: read distribution metadata
    try:
        from importlib.metadata import version

        __version__ = version("intent-hooks")
    except Exception:
        __version__ = "0.0.0-dev"
