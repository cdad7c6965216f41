"""Hook commands invoked by agent hosts around each tool call.

The host pipes one JSON object per call::

    {"tool_name": "write_to_file",
     "tool_input": {"path": "src/a.py", "content": "...", "mutation_class": "AST_REFACTOR"},
     "session_id": "task-1", "model": "some-model", "intent_id": "INT-1"}

``pre-tool-use`` prints the decision as JSON and exits with code 2 when the
call is vetoed. ``post-tool-use`` records a completed mutation.
"""

import json
import logging
import sys
from pathlib import Path

import typer
from pydantic import ValidationError

from intent_hooks.config.messages import ERROR_MESSAGES
from intent_hooks.config.paths import get_log_path, get_orchestration_dir
from intent_hooks.constants import (
    HOOK_EVENT_POST_TOOL_USE,
    HOOK_EVENT_PRE_TOOL_USE,
    HOOK_EXIT_CODE_BLOCKED,
)
from intent_hooks.exceptions import ToolCallError
from intent_hooks.governance.approval import (
    ApprovalChannel,
    ConsoleApprovalChannel,
    StaticApprovalChannel,
)
from intent_hooks.governance.config import GovernanceConfig, load_governance_config
from intent_hooks.governance.engine import GovernedSession, HookEngine
from intent_hooks.models.hook import HookPayload
from intent_hooks.models.tools import parse_tool_call
from intent_hooks.utils import get_workspace_root, print_error
from intent_hooks.utils.logging_setup import configure_logging

logger = logging.getLogger(__name__)

hook_app = typer.Typer(
    name="hook",
    help="Govern a tool call read from stdin (pre/post tool use)",
    no_args_is_help=True,
)

INPUT_OPTION = typer.Option(
    None,
    "--input",
    help="Read the hook payload from a file instead of stdin",
    exists=True,
    dir_okay=False,
)
INTENT_OPTION = typer.Option(
    None,
    "--intent",
    "-i",
    help="Selected intent ID (overrides intent_id in the payload)",
)


def read_hook_payload(input_file: Path | None) -> HookPayload:
    """Parse the hook payload from a file or stdin.

    Raises:
        ToolCallError: If the payload is not a valid tool call object.
    """
    raw = input_file.read_text(encoding="utf-8") if input_file else sys.stdin.read()
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ToolCallError(f"Hook payload is not valid JSON: {e}") from e
    if not isinstance(data, dict):
        raise ToolCallError("Hook payload must be a JSON object")
    try:
        return HookPayload.model_validate(data)
    except ValidationError as e:
        raise ToolCallError(
            f"Hook payload is not a valid tool call: {e.errors()[0]['msg']}",
            tool_name=data.get("tool_name") if isinstance(data.get("tool_name"), str) else None,
        ) from e


def _prepare(
    input_file: Path | None, intent_id: str | None
) -> tuple[HookPayload, GovernedSession, GovernanceConfig]:
    try:
        payload = read_hook_payload(input_file)
    except ToolCallError as e:
        print_error(ERROR_MESSAGES["invalid_hook_payload"].format(error=e))
        raise typer.Exit(code=1) from e

    workspace_root = get_workspace_root()
    config = load_governance_config(workspace_root)
    # Log to the sidecar directory once the workspace has one; stderr otherwise
    log_file = (
        get_log_path(workspace_root) if get_orchestration_dir(workspace_root).is_dir() else None
    )
    configure_logging(config.get_effective_log_level(), log_file, config.log_rotation)

    session = GovernedSession(
        workspace_root=workspace_root,
        current_intent_id=intent_id or payload.intent_id,
        session_id=payload.session_id,
        model_id=payload.model,
    )
    return payload, session, config


@hook_app.command(HOOK_EVENT_PRE_TOOL_USE)
def pre_tool_use(
    input_file: Path | None = INPUT_OPTION,
    intent_id: str | None = INTENT_OPTION,
    auto_approve: bool = typer.Option(
        False,
        "--auto-approve",
        help="Approve destructive calls without prompting",
    ),
) -> None:
    """Run the pre-tool-use checks for a tool call.

    Prints the decision as JSON; exits with code 2 when the call is blocked.

    Example:
        echo '{"tool_name": "read_file", "intent_id": "INT-1"}' | intent-hooks hook pre-tool-use
    """
    payload, session, config = _prepare(input_file, intent_id)
    approval: ApprovalChannel = (
        StaticApprovalChannel.approving() if auto_approve else ConsoleApprovalChannel()
    )
    engine = HookEngine(approval, config=config)
    decision = engine.pre_tool_use(parse_tool_call(payload.tool_name, payload.tool_input), session)
    typer.echo(decision.to_json())
    if not decision.allowed:
        raise typer.Exit(code=HOOK_EXIT_CODE_BLOCKED)


@hook_app.command(HOOK_EVENT_POST_TOOL_USE)
def post_tool_use(
    input_file: Path | None = INPUT_OPTION,
    intent_id: str | None = INTENT_OPTION,
) -> None:
    """Record a completed tool call in the trace ledger and intent map.

    Prints the ledger entry as JSON, or ``{}`` when nothing was recorded.
    """
    payload, session, config = _prepare(input_file, intent_id)
    # Approval is never requested after the call has run
    engine = HookEngine(StaticApprovalChannel.approving(), config=config)
    entry = engine.post_tool_use(parse_tool_call(payload.tool_name, payload.tool_input), session)
    typer.echo(entry.to_json_line() if entry else "{}")
