"""The select_active_intent tool.

The agent's way to check out an intent before doing anything else. On
success the session's current intent is set and the agent receives the
intent's context document; on failure it gets the list of valid ids.
"""

import logging

from intent_hooks.config.messages import SELECT_INTENT_MESSAGES
from intent_hooks.constants import DEFAULT_RECENT_HISTORY_LIMIT
from intent_hooks.governance.context import get_consolidated_intent_context
from intent_hooks.governance.engine import GovernedSession
from intent_hooks.governance.intents import get_valid_intent_ids

logger = logging.getLogger(__name__)


def select_active_intent(
    session: GovernedSession,
    intent_id: str | None,
    history_limit: int = DEFAULT_RECENT_HISTORY_LIMIT,
) -> bool:
    """Select ``intent_id`` as the session's current intent.

    Returns:
        True if the intent was selected.
    """
    if not isinstance(intent_id, str) or not intent_id.strip():
        session.record_mistake()
        session.report(SELECT_INTENT_MESSAGES["invalid"])
        return False

    intent_id = intent_id.strip()
    root = session.workspace_root
    valid_ids = get_valid_intent_ids(root) if root else []
    if root is None or intent_id not in valid_ids:
        session.record_mistake()
        if valid_ids:
            hint = SELECT_INTENT_MESSAGES["valid_ids_hint"].format(ids=", ".join(valid_ids))
        else:
            hint = SELECT_INTENT_MESSAGES["empty_registry_hint"]
        session.report(SELECT_INTENT_MESSAGES["invalid"] + hint)
        logger.debug(f"Rejected selection of unknown intent {intent_id!r}")
        return False

    session.consecutive_mistake_count = 0
    session.current_intent_id = intent_id
    session.report(get_consolidated_intent_context(root, intent_id, history_limit))
    return True
