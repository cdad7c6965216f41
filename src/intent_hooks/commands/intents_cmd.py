"""Intent registry commands.

Commands:
- list: Table of declared intents
- show: Context document an agent receives on selection
- ignored: Intents frozen by .intentignore
"""

import typer
from rich.table import Table

from intent_hooks.config.messages import ERROR_MESSAGES, INFO_MESSAGES
from intent_hooks.governance.config import load_governance_config
from intent_hooks.governance.context import get_consolidated_intent_context
from intent_hooks.governance.intentignore import load_intentignore
from intent_hooks.governance.intents import load_active_intents
from intent_hooks.utils import console, get_workspace_root, print_error, print_info

intents_app = typer.Typer(
    name="intents",
    help="Inspect the intent registry",
    no_args_is_help=True,
)


@intents_app.command("list")
def list_intents() -> None:
    """List intents from .orchestration/active_intents.yaml."""
    workspace_root = get_workspace_root()
    intents = load_active_intents(workspace_root)
    if not intents:
        print_info(ERROR_MESSAGES["no_intents"])
        return

    ignored = load_intentignore(workspace_root)
    table = Table(title="Active Intents")
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Name")
    table.add_column("Status")
    table.add_column("Owned Scope")
    table.add_column("Ignored", justify="center")

    for intent in intents:
        table.add_row(
            intent.id,
            intent.name or "",
            intent.status or "",
            "\n".join(intent.owned_scope) or "[dim](unrestricted)[/dim]",
            "[yellow]yes[/yellow]" if intent.id in ignored else "",
        )
    console.print(table)


@intents_app.command("show")
def show_intent(
    intent_id: str = typer.Argument(..., help="Intent ID"),
) -> None:
    """Show the context document for an intent.

    Example:
        intent-hooks intents show INT-1
    """
    workspace_root = get_workspace_root()
    config = load_governance_config(workspace_root)
    document = get_consolidated_intent_context(
        workspace_root, intent_id, config.recent_history_limit
    )
    if not document:
        print_error(ERROR_MESSAGES["intent_not_found"].format(intent_id=intent_id))
        raise typer.Exit(code=1)
    typer.echo(document)


@intents_app.command("ignored")
def list_ignored() -> None:
    """List intent IDs in .orchestration/.intentignore."""
    ignored = load_intentignore(get_workspace_root())
    if not ignored:
        print_info(INFO_MESSAGES["no_ignored_intents"])
        return
    for intent_id in sorted(ignored):
        typer.echo(intent_id)
