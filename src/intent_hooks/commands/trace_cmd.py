"""Ledger and scope inspection commands: trace, map, scope."""

import typer
from rich.table import Table

from intent_hooks.config.messages import ERROR_MESSAGES, INFO_MESSAGES, SUCCESS_MESSAGES
from intent_hooks.constants import MAX_RECENT_HISTORY_LIMIT, MIN_RECENT_HISTORY_LIMIT
from intent_hooks.governance.config import load_governance_config
from intent_hooks.governance.intent_map import read_intent_map
from intent_hooks.governance.intents import find_intent
from intent_hooks.governance.scope import path_matches_owned_scope
from intent_hooks.governance.trace import get_recent_trace_entries_for_intent
from intent_hooks.utils import (
    console,
    get_workspace_root,
    print_error,
    print_info,
    print_success,
)


def trace_command(
    intent_id: str = typer.Argument(..., help="Intent ID"),
    limit: int | None = typer.Option(
        None,
        "--limit",
        "-n",
        min=MIN_RECENT_HISTORY_LIMIT,
        max=MAX_RECENT_HISTORY_LIMIT,
        help="Maximum entries to show (default: recent_history_limit from config)",
    ),
    json_output: bool = typer.Option(False, "--json", help="Output JSON lines"),
) -> None:
    """Show recent trace ledger entries for an intent, newest first."""
    workspace_root = get_workspace_root()
    if limit is None:
        limit = load_governance_config(workspace_root).recent_history_limit
    entries = get_recent_trace_entries_for_intent(workspace_root, intent_id, limit)

    if json_output:
        for entry in entries:
            typer.echo(entry.to_json_line())
        return

    if not entries:
        print_info(INFO_MESSAGES["no_trace_entries"].format(intent_id=intent_id))
        return

    table = Table(title=f"Trace: {intent_id}")
    table.add_column("Timestamp", no_wrap=True)
    table.add_column("Class")
    table.add_column("Files")
    table.add_column("Hash", style="dim")
    for entry in entries:
        hashes = [
            trace_range.content_hash
            for trace_file in entry.files
            for conversation in trace_file.conversations
            for trace_range in conversation.ranges
        ]
        table.add_row(
            entry.timestamp,
            entry.mutation_class or "",
            "\n".join(entry.relative_paths),
            # sha256: prefix plus 12 hex chars
            "\n".join(h[:19] for h in hashes),
        )
    console.print(table)


def map_command() -> None:
    """Show the intent map (.orchestration/intent_map.md)."""
    content = read_intent_map(get_workspace_root())
    if not content.strip():
        print_info(ERROR_MESSAGES["no_intent_map"])
        return
    typer.echo(content.rstrip("\n"))


def scope_command(
    path: str = typer.Argument(..., help="Workspace-relative file path"),
    intent_id: str = typer.Option(..., "--intent", "-i", help="Intent ID"),
) -> None:
    """Check whether a path is inside an intent's owned scope.

    Exits with code 1 when the path is outside the scope.

    Example:
        intent-hooks scope src/auth/login.ts --intent INT-1
    """
    workspace_root = get_workspace_root()
    intent = find_intent(workspace_root, intent_id)
    if intent is None:
        print_error(ERROR_MESSAGES["intent_not_found"].format(intent_id=intent_id))
        raise typer.Exit(code=1)

    if not intent.owned_scope:
        config = load_governance_config(workspace_root)
        if config.denies_empty_scope:
            print_error(ERROR_MESSAGES["out_of_scope"].format(path=path, intent_id=intent_id))
            raise typer.Exit(code=1)
        print_info(SUCCESS_MESSAGES["unrestricted_scope"].format(intent_id=intent_id))
        return

    if path_matches_owned_scope(path, intent.owned_scope):
        print_success(SUCCESS_MESSAGES["in_scope"].format(path=path, intent_id=intent_id))
        return

    print_error(ERROR_MESSAGES["out_of_scope"].format(path=path, intent_id=intent_id))
    raise typer.Exit(code=1)
