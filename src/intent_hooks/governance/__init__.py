"""Intent-scoped governance: checks, trace ledger, intent map, intent context."""

from intent_hooks.governance.approval import (
    ApprovalChannel,
    ApprovalResponse,
    ConsoleApprovalChannel,
    StaticApprovalChannel,
)
from intent_hooks.governance.engine import GovernedSession, HookDecision, HookEngine
from intent_hooks.governance.select_intent import select_active_intent

__all__ = [
    "ApprovalChannel",
    "ApprovalResponse",
    "ConsoleApprovalChannel",
    "StaticApprovalChannel",
    "GovernedSession",
    "HookDecision",
    "HookEngine",
    "select_active_intent",
]
