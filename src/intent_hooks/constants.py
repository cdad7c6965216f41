"""Constants for intent-hooks.

This module centralizes the magic strings and numbers used by the
governance engine and its sidecar storage.

Constants are organized by domain:
- Tool names and classification
- Approval choices
- Trace ledger and intent map
- Logging and hook CLI defaults

Enumerations (mutation classes, error codes) live in models.enums.
"""

from typing import Final

from intent_hooks import __version__

VERSION: Final[str] = __version__

# =============================================================================
# Tool Names
# =============================================================================

TOOL_READ_FILE: Final[str] = "read_file"
TOOL_LIST_FILES: Final[str] = "list_files"
TOOL_SEARCH_FILES: Final[str] = "search_files"
TOOL_CODEBASE_SEARCH: Final[str] = "codebase_search"
TOOL_READ_COMMAND_OUTPUT: Final[str] = "read_command_output"
TOOL_ASK_FOLLOWUP_QUESTION: Final[str] = "ask_followup_question"
TOOL_SELECT_ACTIVE_INTENT: Final[str] = "select_active_intent"
TOOL_ATTEMPT_COMPLETION: Final[str] = "attempt_completion"
TOOL_SWITCH_MODE: Final[str] = "switch_mode"
TOOL_ACCESS_MCP_RESOURCE: Final[str] = "access_mcp_resource"
TOOL_USE_MCP_TOOL: Final[str] = "use_mcp_tool"

TOOL_WRITE_TO_FILE: Final[str] = "write_to_file"
TOOL_EDIT_FILE: Final[str] = "edit_file"
TOOL_SEARCH_REPLACE: Final[str] = "search_replace"
TOOL_EDIT: Final[str] = "edit"
TOOL_APPLY_PATCH: Final[str] = "apply_patch"
TOOL_APPLY_DIFF: Final[str] = "apply_diff"
TOOL_EXECUTE_COMMAND: Final[str] = "execute_command"
TOOL_NEW_TASK: Final[str] = "new_task"
TOOL_RUN_SLASH_COMMAND: Final[str] = "run_slash_command"

# Read-only tools: no file writes, no shell execution
SAFE_TOOLS: Final[frozenset[str]] = frozenset(
    {
        TOOL_READ_FILE,
        TOOL_LIST_FILES,
        TOOL_SEARCH_FILES,
        TOOL_CODEBASE_SEARCH,
        TOOL_READ_COMMAND_OUTPUT,
        TOOL_ASK_FOLLOWUP_QUESTION,
        TOOL_SELECT_ACTIVE_INTENT,
        TOOL_ATTEMPT_COMPLETION,
        TOOL_SWITCH_MODE,
        TOOL_ACCESS_MCP_RESOURCE,
        TOOL_USE_MCP_TOOL,
    }
)

# Write, delete, or execute
DESTRUCTIVE_TOOLS: Final[frozenset[str]] = frozenset(
    {
        TOOL_WRITE_TO_FILE,
        TOOL_EDIT_FILE,
        TOOL_SEARCH_REPLACE,
        TOOL_EDIT,
        TOOL_APPLY_PATCH,
        TOOL_APPLY_DIFF,
        TOOL_EXECUTE_COMMAND,
        TOOL_NEW_TASK,
        TOOL_RUN_SLASH_COMMAND,
    }
)

# Content-producing writes; these are recorded in the trace ledger
MUTATING_TOOLS: Final[frozenset[str]] = frozenset(
    {
        TOOL_WRITE_TO_FILE,
        TOOL_EDIT_FILE,
        TOOL_SEARCH_REPLACE,
        TOOL_EDIT,
        TOOL_APPLY_PATCH,
        TOOL_APPLY_DIFF,
    }
)

# Destructive tools without a single target path (scope check does not apply)
UNSCOPED_DESTRUCTIVE_TOOLS: Final[frozenset[str]] = frozenset(
    {
        TOOL_EXECUTE_COMMAND,
        TOOL_NEW_TASK,
        TOOL_RUN_SLASH_COMMAND,
    }
)

# Label used as the relative path for multi-file patches
APPLY_PATCH_PATH_LABEL: Final[str] = "patch"

# =============================================================================
# Approval Choices
# =============================================================================

APPROVAL_CHOICE_APPROVE: Final[str] = "approve"
APPROVAL_CHOICE_REJECT: Final[str] = "reject"
VALID_APPROVAL_CHOICES: Final[tuple[str, ...]] = (
    APPROVAL_CHOICE_APPROVE,
    APPROVAL_CHOICE_REJECT,
)

# =============================================================================
# Trace Ledger
# =============================================================================

CONTENT_HASH_PREFIX: Final[str] = "sha256:"
TRACE_RELATED_TYPE_INTENT: Final[str] = "intent"
CONTRIBUTOR_ENTITY_AI: Final[str] = "AI"
DEFAULT_RECENT_HISTORY_LIMIT: Final[int] = 20
MIN_RECENT_HISTORY_LIMIT: Final[int] = 1
MAX_RECENT_HISTORY_LIMIT: Final[int] = 200

# =============================================================================
# Intent Map
# =============================================================================

INTENT_MAP_HEADING_PREFIX: Final[str] = "## "
INTENT_MAP_BULLET_PREFIX: Final[str] = "- "

# =============================================================================
# Empty owned_scope Policy
# =============================================================================

EMPTY_SCOPE_POLICY_ALLOW: Final[str] = "allow"
EMPTY_SCOPE_POLICY_DENY: Final[str] = "deny"
VALID_EMPTY_SCOPE_POLICIES: Final[tuple[str, ...]] = (
    EMPTY_SCOPE_POLICY_ALLOW,
    EMPTY_SCOPE_POLICY_DENY,
)

# =============================================================================
# Logging
# =============================================================================

LOG_LEVEL_DEBUG: Final[str] = "DEBUG"
LOG_LEVEL_INFO: Final[str] = "INFO"
LOG_LEVEL_WARNING: Final[str] = "WARNING"
LOG_LEVEL_ERROR: Final[str] = "ERROR"
VALID_LOG_LEVELS: Final[tuple[str, ...]] = (
    LOG_LEVEL_DEBUG,
    LOG_LEVEL_INFO,
    LOG_LEVEL_WARNING,
    LOG_LEVEL_ERROR,
)

HOOKS_LOGGER_NAME: Final[str] = "intent_hooks.hooks"
HOOKS_LOG_FILE: Final[str] = "hooks.log"

DEFAULT_LOG_ROTATION_ENABLED: Final[bool] = True
DEFAULT_LOG_MAX_SIZE_MB: Final[int] = 10
DEFAULT_LOG_BACKUP_COUNT: Final[int] = 3
MIN_LOG_MAX_SIZE_MB: Final[int] = 1
MAX_LOG_MAX_SIZE_MB: Final[int] = 100
MAX_LOG_BACKUP_COUNT: Final[int] = 10

# =============================================================================
# Hook CLI
# =============================================================================

HOOK_EVENT_PRE_TOOL_USE: Final[str] = "pre-tool-use"
HOOK_EVENT_POST_TOOL_USE: Final[str] = "post-tool-use"
# Exit code that tells the calling agent the tool call was blocked
HOOK_EXIT_CODE_BLOCKED: Final[int] = 2

# =============================================================================
# Configuration File
# =============================================================================

# Top-level key in .orchestration/config.yaml holding governance settings
GOVERNANCE_CONFIG_KEY: Final[str] = "governance"
DEFAULT_REASONING_LOOP_ENABLED: Final[bool] = False
DEFAULT_RECORD_VCS_REVISION: Final[bool] = True
