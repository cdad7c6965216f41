"""Utility modules for intent-hooks."""

from .console import (
    console,
    print_error,
    print_info,
    print_panel,
    print_success,
    print_warning,
)
from .workspace import get_workspace_root

__all__ = [
    "console",
    "print_error",
    "print_info",
    "print_panel",
    "print_success",
    "print_warning",
    "get_workspace_root",
]
