"""Enum types for intent-hooks.

Using enums instead of bare strings gives exhaustive matching and a single
place to list the allowed values.
"""

from enum import Enum


class MutationClass(str, Enum):
    """Semantic classification of a mutation recorded in the trace ledger."""

    AST_REFACTOR = "AST_REFACTOR"  # Syntax change, same intent
    INTENT_EVOLUTION = "INTENT_EVOLUTION"  # New feature

    @classmethod
    def values(cls) -> list[str]:
        """Return list of all mutation class values."""
        return [m.value for m in cls]

    @classmethod
    def parse(cls, value: object) -> "MutationClass | None":
        """Return the matching member for a raw argument, or None."""
        if not isinstance(value, str):
            return None
        try:
            return cls(value.strip())
        except ValueError:
            return None


class ToolKind(str, Enum):
    """Governance classification of a tool."""

    SAFE = "safe"
    DESTRUCTIVE = "destructive"
    UNKNOWN = "unknown"


class ToolErrorCode(str, Enum):
    """Codes carried by structured tool errors returned to the agent."""

    SCOPE_VIOLATION = "SCOPE_VIOLATION"
    INTENT_REQUIRED = "INTENT_REQUIRED"
    INTENT_INVALID = "INTENT_INVALID"
    INTENT_IGNORED = "INTENT_IGNORED"
    USER_REJECTED = "USER_REJECTED"
    MUTATION_CLASS_REQUIRED = "MUTATION_CLASS_REQUIRED"

    @classmethod
    def values(cls) -> list[str]:
        """Return list of all error codes."""
        return [c.value for c in cls]
