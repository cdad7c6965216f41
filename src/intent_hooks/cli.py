"""Main CLI entry point for intent-hooks."""

import sys
from pathlib import Path

import typer
from dotenv import load_dotenv

from intent_hooks.commands import (
    config_app,
    hook_app,
    intents_app,
    map_command,
    scope_command,
    trace_command,
)
from intent_hooks.config.messages import HELP_TEXT, PROJECT_TAGLINE
from intent_hooks.constants import VERSION
from intent_hooks.utils import console, print_error, print_panel

# Load .env file from current directory if it exists
load_dotenv(Path.cwd() / ".env", verbose=False)

app = typer.Typer(
    name="intent-hooks",
    help=PROJECT_TAGLINE,
    no_args_is_help=True,
    add_completion=False,
    rich_markup_mode="rich",
)

app.add_typer(intents_app, name="intents")
app.add_typer(hook_app, name="hook")
app.add_typer(config_app, name="config")
app.command("trace")(trace_command)
app.command("map")(map_command)
app.command("scope")(scope_command)


@app.command("version")
def version() -> None:
    """Show version information."""
    print_panel(
        f"[bold cyan]intent-hooks[/bold cyan] version [green]{VERSION}[/green]\n\n"
        f"{PROJECT_TAGLINE}",
        title="Version",
        style="cyan",
    )


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version_flag: bool | None = typer.Option(
        None,
        "--version",
        "-v",
        help="Show version information",
        is_eager=True,
    ),
) -> None:
    """intent-hooks - intent-scoped governance for coding agents.

    Get started:
        intent-hooks intents list
        intent-hooks config set-loop on
    """
    if version_flag:
        version()
        raise typer.Exit()

    if ctx.invoked_subcommand is None:
        console.print(HELP_TEXT)
        raise typer.Exit()


def cli_main() -> None:
    """Main entry point for the CLI.

    Handles exceptions and provides user-friendly error messages.
    """
    try:
        app()
    except KeyboardInterrupt:
        console.print("\n[yellow]Cancelled by user[/yellow]")
        sys.exit(130)
    except Exception as e:
        if isinstance(e, typer.Exit):
            sys.exit(e.exit_code)

        from intent_hooks.config.messages import ERROR_MESSAGES

        print_error(ERROR_MESSAGES["generic_error"].format(error=str(e)))

        if "--debug" in sys.argv:
            import traceback

            console.print("\n[dim]Traceback:[/dim]")
            traceback.print_exc()

        sys.exit(1)


if __name__ == "__main__":
    cli_main()
