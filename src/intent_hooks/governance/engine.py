"""Governance engine: intent-scoped checks around agent tool calls.

Every tool call passes through ``HookEngine.govern_invocation``:

1. Pre-tool-use checks (only when the reasoning loop is on), in order, each
   a veto that stops the pipeline: gatekeeper, .intentignore, owned scope,
   mutation class, human approval.
2. The tool itself (``execute``); its exceptions propagate unchanged.
3. Post-tool-use (always): mutating tools are recorded in the trace ledger,
   and with the reasoning loop on, in the intent map.

A veto is reported to the agent as a structured tool error and counts as a
mistake on the session; it is never raised.
"""

import json
import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Protocol

from intent_hooks.config.messages import (
    APPROVAL_DETAIL_WITH_PATH,
    APPROVAL_INTENT_LABEL,
    APPROVAL_PROMPT,
)
from intent_hooks.constants import HOOKS_LOGGER_NAME
from intent_hooks.governance.approval import ApprovalChannel
from intent_hooks.governance.config import GovernanceConfig, load_governance_config
from intent_hooks.governance.errors import (
    ToolErrorPayload,
    gatekeeper_invalid_intent_error,
    intent_ignored_error,
    mutation_class_required_error,
    scope_violation_error,
    user_rejected_error,
)
from intent_hooks.governance.intent_map import add_path_to_intent_map
from intent_hooks.governance.intentignore import load_intentignore
from intent_hooks.governance.intents import find_intent, get_valid_intent_ids
from intent_hooks.governance.scope import path_matches_owned_scope
from intent_hooks.governance.trace import append_trace_entry, build_trace_entry
from intent_hooks.models.enums import MutationClass
from intent_hooks.models.tools import (
    BaseToolCall,
    SelectActiveIntentCall,
    WriteToFileCall,
    parse_tool_call,
)
from intent_hooks.models.trace import TraceEntry
from intent_hooks.utils.git import get_head_revision

logger = logging.getLogger(__name__)
hooks_logger = logging.getLogger(HOOKS_LOGGER_NAME)

# Names of the pre-tool-use checks, reported with every veto
CHECK_GATEKEEPER = "gatekeeper"
CHECK_INTENTIGNORE = "intentignore"
CHECK_SCOPE = "scope"
CHECK_MUTATION_CLASS = "mutation_class"
CHECK_APPROVAL = "approval"


class ResultReporter(Protocol):
    """Pushes a tool result (or tool error) back to the agent."""

    def __call__(self, content: str, *, is_error: bool = False) -> None: ...


@dataclass(frozen=True)
class ReportedResult:
    content: str
    is_error: bool = False


@dataclass
class GovernedSession:
    """Per-task state the engine reads and updates.

    Passed explicitly into every call, so concurrent sessions against the
    same workspace never share a selected intent.

    Attributes:
        workspace_root: Workspace the agent works in; None disables ledgering.
        current_intent_id: Intent selected via select_active_intent.
        consecutive_mistake_count: Incremented on every veto; reset by a
            successful intent selection.
        session_id: Task or conversation id, recorded in the ledger.
        model_id: Model identifier, recorded in the ledger.
        reporter: Callback receiving results; optional.
        results: Every reported result, in order.
    """

    workspace_root: Path | None
    current_intent_id: str | None = None
    consecutive_mistake_count: int = 0
    session_id: str | None = None
    model_id: str | None = None
    reporter: ResultReporter | None = None
    results: list[ReportedResult] = field(default_factory=list)

    def report(self, content: str, *, is_error: bool = False) -> None:
        self.results.append(ReportedResult(content=content, is_error=is_error))
        if self.reporter is not None:
            self.reporter(content, is_error=is_error)

    def record_mistake(self) -> None:
        self.consecutive_mistake_count += 1


@dataclass(frozen=True)
class HookDecision:
    """Outcome of the pre-tool-use checks for one call.

    Attributes:
        allowed: False when a check vetoed the call.
        check: Name of the vetoing check, empty when allowed.
        error: Structured error reported to the agent on veto.
        governed: False when the reasoning loop was off and no check ran.
    """

    allowed: bool = True
    check: str = ""
    error: ToolErrorPayload | None = None
    governed: bool = True

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"allowed": self.allowed, "governed": self.governed}
        if self.check:
            data["check"] = self.check
        if self.error is not None:
            data["error"] = self.error.model_dump(exclude_none=True)
        return data

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), indent=2)


def _veto(check: str, error: ToolErrorPayload) -> HookDecision:
    return HookDecision(allowed=False, check=check, error=error)


class HookEngine:
    """Runs the governance pipeline around tool calls.

    Holds no per-session state. Configuration is re-read from the workspace
    on every call unless one is injected.
    """

    def __init__(
        self,
        approval_channel: ApprovalChannel,
        config: GovernanceConfig | None = None,
    ) -> None:
        self._approval_channel = approval_channel
        self._config = config

    def config_for(self, session: GovernedSession) -> GovernanceConfig:
        if self._config is not None:
            return self._config
        if session.workspace_root is None:
            return GovernanceConfig()
        return load_governance_config(session.workspace_root)

    # =========================================================================
    # Full invocation
    # =========================================================================

    def govern_invocation(
        self,
        tool_name: str,
        args: Mapping[str, Any] | None,
        session: GovernedSession,
        execute: Callable[[], None],
    ) -> None:
        """Govern one tool call end to end.

        Args:
            tool_name: Tool name as sent by the agent.
            args: Raw argument map.
            session: Session state; updated in place.
            execute: Runs the tool. Not called when a check vetoes.
        """
        call = parse_tool_call(tool_name, args)
        config = self.config_for(session)
        decision = self.pre_tool_use(call, session, config)
        if not decision.allowed:
            return
        execute()
        self.post_tool_use(call, session, config)

    # =========================================================================
    # Pre-tool-use
    # =========================================================================

    def pre_tool_use(
        self,
        call: BaseToolCall,
        session: GovernedSession,
        config: GovernanceConfig | None = None,
    ) -> HookDecision:
        """Run the pre-tool-use checks and report a veto to the session."""
        config = config or self.config_for(session)
        if not config.is_reasoning_loop_enabled():
            return HookDecision(governed=False)

        hooks_logger.info(
            f"[PRE-TOOL-USE] {call.tool} | intent={session.current_intent_id or '-'} "
            f"| session={session.session_id or '-'}"
        )
        decision = self.evaluate(call, session, config)
        if not decision.allowed and decision.error is not None:
            session.record_mistake()
            session.report(decision.error.to_json(), is_error=True)
            hooks_logger.info(
                f"[VETO] {call.tool} | check={decision.check} | code={decision.error.code} "
                f"| mistakes={session.consecutive_mistake_count}"
            )
        return decision

    def evaluate(
        self,
        call: BaseToolCall,
        session: GovernedSession,
        config: GovernanceConfig,
    ) -> HookDecision:
        """Evaluate the checks in order; the first veto wins.

        Does not touch the session. Asks the approval channel last.
        """
        for check in (
            self._check_gatekeeper,
            self._check_intentignore,
            self._check_scope,
            self._check_mutation_class,
            self._check_approval,
        ):
            decision = check(call, session, config)
            if decision is not None:
                return decision
        return HookDecision()

    def _check_gatekeeper(
        self, call: BaseToolCall, session: GovernedSession, config: GovernanceConfig
    ) -> HookDecision | None:
        if isinstance(call, SelectActiveIntentCall):
            return None
        intent_id = session.current_intent_id
        if not intent_id:
            return _veto(CHECK_GATEKEEPER, gatekeeper_invalid_intent_error())
        valid_ids = get_valid_intent_ids(session.workspace_root) if session.workspace_root else []
        if intent_id not in valid_ids:
            return _veto(CHECK_GATEKEEPER, gatekeeper_invalid_intent_error(intent_id))
        return None

    def _check_intentignore(
        self, call: BaseToolCall, session: GovernedSession, config: GovernanceConfig
    ) -> HookDecision | None:
        intent_id = session.current_intent_id
        if not call.is_destructive or not intent_id or session.workspace_root is None:
            return None
        if intent_id in load_intentignore(session.workspace_root):
            return _veto(CHECK_INTENTIGNORE, intent_ignored_error(intent_id))
        return None

    def _check_scope(
        self, call: BaseToolCall, session: GovernedSession, config: GovernanceConfig
    ) -> HookDecision | None:
        intent_id = session.current_intent_id
        if not call.requires_scope_check or not intent_id or session.workspace_root is None:
            return None
        paths = call.scope_paths()
        if not paths:
            return None

        intent = find_intent(session.workspace_root, intent_id)
        owned_scope = intent.owned_scope if intent else []
        if not owned_scope:
            if config.denies_empty_scope:
                return _veto(CHECK_SCOPE, scope_violation_error(intent_id, paths[0]))
            return None

        for path in paths:
            if not path_matches_owned_scope(path, owned_scope):
                return _veto(CHECK_SCOPE, scope_violation_error(intent_id, path))
        return None

    def _check_mutation_class(
        self, call: BaseToolCall, session: GovernedSession, config: GovernanceConfig
    ) -> HookDecision | None:
        if isinstance(call, WriteToFileCall) and call.declared_mutation_class() is None:
            return _veto(CHECK_MUTATION_CLASS, mutation_class_required_error())
        return None

    def _check_approval(
        self, call: BaseToolCall, session: GovernedSession, config: GovernanceConfig
    ) -> HookDecision | None:
        if not call.is_destructive:
            return None
        response = self._approval_channel.request_approval(
            build_approval_prompt(call, session.current_intent_id)
        )
        if response.approved:
            return None
        return _veto(
            CHECK_APPROVAL,
            user_rejected_error(
                response.feedback,
                explicit=response.explicitly_rejected,
                intent_id=session.current_intent_id,
                path=call.target_path(),
            ),
        )

    # =========================================================================
    # Post-tool-use
    # =========================================================================

    def post_tool_use(
        self,
        call: BaseToolCall,
        session: GovernedSession,
        config: GovernanceConfig | None = None,
    ) -> TraceEntry | None:
        """Record a completed mutating call in the ledger and intent map.

        Returns:
            The ledger entry built for the call, or None when nothing was
            recorded (non-mutating tool, no workspace, no path or content).
        """
        root = session.workspace_root
        if not call.is_mutating or root is None:
            return None
        config = config or self.config_for(session)

        intent_id = call.intent_id or session.current_intent_id
        relative_path = call.target_path()
        content = call.content_for_hash()
        mutation_class = call.declared_mutation_class() or MutationClass.INTENT_EVOLUTION

        entry = None
        if relative_path and content is not None:
            entry = build_trace_entry(
                intent_id=intent_id,
                relative_path=relative_path,
                content=content,
                mutation_class=mutation_class,
                session_id=session.session_id,
                model_id=session.model_id,
                revision_id=get_head_revision(root) if config.record_vcs_revision else None,
            )
            append_trace_entry(root, entry)
            hooks_logger.info(
                f"[POST-TOOL-USE] {call.tool} | intent={intent_id or '-'} | path={relative_path} "
                f"| class={mutation_class.value}"
            )

        if config.is_reasoning_loop_enabled() and intent_id and relative_path:
            intent = find_intent(root, intent_id)
            add_path_to_intent_map(root, intent_id, intent.name if intent else None, relative_path)

        return entry


def build_approval_prompt(call: BaseToolCall, intent_id: str | None) -> str:
    """``Allow this change? <tool> -> <path> (Intent: <id>)``."""
    path = call.target_path()
    detail = APPROVAL_DETAIL_WITH_PATH.format(tool_name=call.tool, path=path) if path else call.tool
    intent_label = APPROVAL_INTENT_LABEL.format(intent_id=intent_id) if intent_id else ""
    return APPROVAL_PROMPT.format(detail=detail, intent_label=intent_label)
