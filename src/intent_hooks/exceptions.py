"""Custom exceptions for intent-hooks.

Governance vetoes are never raised: they are reported back to the agent as
structured tool errors (see ``governance.errors``). The exceptions below
cover programming and configuration errors only.

Exception hierarchy:
    IntentHooksError (base)
    ├── ConfigurationError
    │   └── ValidationError
    └── ToolCallError
"""

from pathlib import Path
from typing import Any


class IntentHooksError(Exception):
    """Base exception for all intent-hooks errors.

    Attributes:
        message: Human-readable error description.
        details: Optional dictionary with additional context.
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        """Return string representation."""
        if self.details:
            detail_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.message} ({detail_str})"
        return self.message


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(IntentHooksError):
    """Raised when configuration is invalid or cannot be loaded.

    Examples:
        - Invalid YAML syntax in .orchestration/config.yaml
        - Unknown keys with wrong types
    """

    def __init__(
        self,
        message: str,
        config_file: Path | None = None,
        key: str | None = None,
    ):
        """Initialize configuration error.

        Args:
            message: Error description.
            config_file: Path to the problematic config file.
            key: The configuration key that caused the error.
        """
        details = {}
        if config_file:
            details["config_file"] = str(config_file)
        if key:
            details["key"] = key
        super().__init__(message, details)
        self.config_file = config_file
        self.key = key


class ValidationError(ConfigurationError):
    """Raised when configuration values fail validation.

    Examples:
        - Unknown log level
        - Out-of-range history limit
        - Unknown empty-scope policy
    """

    def __init__(
        self,
        message: str,
        field: str,
        value: Any = None,
        expected: str | None = None,
    ):
        """Initialize validation error.

        Args:
            message: Error description.
            field: The field that failed validation.
            value: The invalid value (truncated if too long).
            expected: Description of expected value format.
        """
        super().__init__(message)
        self.details["field"] = field
        if value is not None:
            value_str = str(value)
            self.details["value"] = value_str[:100] + "..." if len(value_str) > 100 else value_str
        if expected:
            self.details["expected"] = expected
        self.field = field
        self.value = value
        self.expected = expected


# =============================================================================
# Tool Call Errors
# =============================================================================


class ToolCallError(IntentHooksError):
    """Raised when a hook payload cannot be turned into a tool call.

    Examples:
        - Missing tool_name in a hook payload
        - tool_input that is neither an object nor a JSON object string
    """

    def __init__(self, message: str, tool_name: str | None = None):
        details = {}
        if tool_name:
            details["tool_name"] = tool_name
        super().__init__(message, details)
        self.tool_name = tool_name
