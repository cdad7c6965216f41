"""UI messages and strings for intent-hooks.

This module consolidates user-facing messages:
- Project metadata and help text
- CLI success/error/info messages
- Tool error messages and suggestions returned to agents
- Approval prompts
"""

# =============================================================================
# Project Metadata
# =============================================================================

PROJECT_TAGLINE = "Intent-scoped governance and audit trail for coding agents"

HELP_TEXT = f"""
[bold cyan]intent-hooks[/bold cyan] - {PROJECT_TAGLINE}

[bold]Commands:[/bold]
  [cyan]intents[/cyan]     List intents, show intent context, show ignored intents
  [cyan]trace[/cyan]       Show recent trace ledger entries for an intent
  [cyan]map[/cyan]         Show the intent map (intent -> files)
  [cyan]scope[/cyan]       Check a path against an intent's owned scope
  [cyan]hook[/cyan]        Govern a tool call read from stdin (pre/post tool use)
  [cyan]config[/cyan]      Show or change governance configuration
  [cyan]version[/cyan]     Show version information

[bold]Examples:[/bold]
  [dim]$ intent-hooks intents list[/dim]
  [dim]$ intent-hooks scope src/auth/login.ts --intent INT-1[/dim]
  [dim]$ echo '{{"tool_name": "write_to_file", ...}}' | intent-hooks hook pre-tool-use[/dim]
"""

# =============================================================================
# Success Messages
# =============================================================================

SUCCESS_MESSAGES = {
    "in_scope": "{path} is inside the owned scope of {intent_id}",
    "unrestricted_scope": "{intent_id} declares no owned_scope; scope checks are skipped",
    "config_saved": "Saved configuration to {path}",
    "loop_enabled": "Reasoning loop enabled",
    "loop_disabled": "Reasoning loop disabled",
}

# =============================================================================
# Error Messages
# =============================================================================

ERROR_MESSAGES = {
    "generic_error": "An error occurred: {error}",
    "intent_not_found": "Intent not found: {intent_id}",
    "no_intents": "No intents found in .orchestration/active_intents.yaml",
    "out_of_scope": "{path} is outside the owned scope of {intent_id}",
    "invalid_hook_payload": "Invalid hook payload: {error}",
    "invalid_loop_value": "Invalid value: {value}. Use 'on' or 'off'",
    "no_intent_map": "No intent map yet (.orchestration/intent_map.md)",
}

# =============================================================================
# Info Messages
# =============================================================================

INFO_MESSAGES = {
    "no_trace_entries": "No trace entries for intent {intent_id}",
    "no_ignored_intents": "No intents are listed in .intentignore",
    "loop_overridden": (
        "Reasoning loop overridden by INTENT_HOOKS_REASONING_LOOP_ENABLED: {state}"
    ),
}

# =============================================================================
# Tool Error Messages (returned to the agent)
# =============================================================================

TOOL_ERROR_MESSAGES = {
    "scope_violation": (
        "Scope Violation: {intent_id} is not authorized to edit {path}. "
        "Request scope expansion."
    ),
    "intent_invalid": "You must cite a valid active Intent ID.",
    "intent_required": (
        "You must cite a valid active Intent ID. Call select_active_intent(intent_id) "
        "first to load context before using other tools."
    ),
    "intent_ignored": (
        "Intent {intent_id} is listed in .intentignore. Changes to this intent are excluded."
    ),
    "user_rejected": "The user rejected this operation.",
    "user_rejected_explicit": "User rejected the operation.",
    "mutation_class_required": (
        "write_to_file requires mutation_class: use AST_REFACTOR (syntax change, same intent) "
        "or INTENT_EVOLUTION (new feature)."
    ),
}

TOOL_ERROR_SUGGESTIONS = {
    "scope_violation": (
        "Either choose a file within the intent's owned_scope or ask the user to expand "
        "the intent scope in .orchestration/active_intents.yaml"
    ),
    "intent_invalid": (
        "Call select_active_intent(intent_id) with an intent_id from "
        ".orchestration/active_intents.yaml"
    ),
    "intent_required": (
        "Call select_active_intent with an intent_id from .orchestration/active_intents.yaml"
    ),
    "intent_ignored": (
        "Choose a different intent or ask the user to remove this intent from .intentignore"
    ),
    "user_rejected": "Adjust your approach and retry, or ask the user for guidance",
    "mutation_class_required": (
        "Call write_to_file with mutation_class set to AST_REFACTOR or INTENT_EVOLUTION"
    ),
}

# =============================================================================
# Intent Selection Messages (returned to the agent)
# =============================================================================

SELECT_INTENT_MESSAGES = {
    "invalid": "You must cite a valid active Intent ID.",
    "valid_ids_hint": " Valid IDs: {ids}",
    "empty_registry_hint": " No intents in .orchestration/active_intents.yaml.",
}

# =============================================================================
# Approval Prompts
# =============================================================================

APPROVAL_PROMPT = "Allow this change? {detail}{intent_label}"
APPROVAL_DETAIL_WITH_PATH = "{tool_name} -> {path}"
APPROVAL_INTENT_LABEL = " (Intent: {intent_id})"
APPROVAL_FEEDBACK_PROMPT = "Feedback for the agent (optional)"
