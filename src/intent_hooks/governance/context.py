"""Intent context: the document an agent receives when it selects an intent.

Combines the intent's declared boundaries from the registry with a summary
of its recent ledger activity, rendered as an ``<intent_context>`` block.
"""

from dataclasses import dataclass, field
from pathlib import Path
from xml.sax.saxutils import escape

from intent_hooks.constants import DEFAULT_RECENT_HISTORY_LIMIT
from intent_hooks.governance.intents import find_intent
from intent_hooks.governance.trace import get_recent_trace_entries_for_intent
from intent_hooks.models.intent import IntentSpec
from intent_hooks.models.trace import TraceEntry

_XML_QUOTE_ENTITIES = {'"': "&quot;", "'": "&apos;"}
_INDENT = "  "
_ITEM_INDENT = "    - "


def escape_xml(text: str) -> str:
    return escape(text, _XML_QUOTE_ENTITIES)


@dataclass
class IntentContext:
    """Everything an agent needs to know about one intent."""

    intent: IntentSpec
    scope: str = ""
    owned_scope: list[str] = field(default_factory=list)
    constraints: list[str] = field(default_factory=list)
    acceptance_criteria: list[str] = field(default_factory=list)
    related_files: list[str] = field(default_factory=list)
    recent_history: list[TraceEntry] = field(default_factory=list)

    @property
    def history_summary(self) -> str:
        """``<timestamp> <file>, <file>`` per entry, joined with ``; ``."""
        return "; ".join(
            f"{entry.timestamp} {', '.join(entry.relative_paths)}"
            for entry in self.recent_history
        )


def get_intent_context(
    workspace_root: Path,
    intent_id: str,
    history_limit: int = DEFAULT_RECENT_HISTORY_LIMIT,
) -> IntentContext | None:
    """Look up an intent and its recent ledger activity.

    Returns:
        The context, or None when no intent has this id.
    """
    intent_id = intent_id.strip()
    intent = find_intent(workspace_root, intent_id)
    if intent is None:
        return None
    return IntentContext(
        intent=intent,
        scope=intent.scope or "",
        owned_scope=list(intent.owned_scope),
        constraints=list(intent.constraints),
        acceptance_criteria=list(intent.acceptance_criteria),
        related_files=list(intent.owned_scope),
        recent_history=get_recent_trace_entries_for_intent(
            workspace_root, intent_id, history_limit
        ),
    )


def _text_block(tag: str, value: str | None) -> str:
    if not value:
        return ""
    return f"{_INDENT}<{tag}>{escape_xml(value)}</{tag}>\n"


def _list_block(tag: str, items: list[str]) -> str:
    if not items:
        return ""
    body = "\n".join(f"{_ITEM_INDENT}{escape_xml(item)}" for item in items)
    return f"{_INDENT}<{tag}>\n{body}\n{_INDENT}</{tag}>\n"


def render_intent_context(context: IntentContext) -> str:
    """Render the ``<intent_context>`` document. Empty fields are omitted."""
    return (
        "<intent_context>\n"
        + _text_block("name", context.intent.name)
        + _text_block("status", context.intent.status)
        + _list_block("owned_scope", context.owned_scope)
        + _text_block("scope", context.scope)
        + _list_block("constraints", context.constraints)
        + _list_block("acceptance_criteria", context.acceptance_criteria)
        + _list_block("related_files", context.related_files)
        + _text_block("recent_history", context.history_summary)
        + "</intent_context>"
    )


def get_consolidated_intent_context(
    workspace_root: Path,
    intent_id: str,
    history_limit: int = DEFAULT_RECENT_HISTORY_LIMIT,
) -> str:
    """Rendered context for ``intent_id``; empty string for unknown ids."""
    context = get_intent_context(workspace_root, intent_id, history_limit)
    if context is None:
        return ""
    return render_intent_context(context)
