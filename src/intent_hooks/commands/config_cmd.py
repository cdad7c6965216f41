"""Governance configuration commands."""

import typer
import yaml

from intent_hooks.config.messages import ERROR_MESSAGES, INFO_MESSAGES, SUCCESS_MESSAGES
from intent_hooks.governance.config import load_governance_config, save_governance_config
from intent_hooks.utils import (
    console,
    get_workspace_root,
    print_error,
    print_success,
    print_warning,
)

config_app = typer.Typer(
    name="config",
    help="Show or change governance configuration",
    no_args_is_help=True,
)

_LOOP_VALUES = {"on": True, "off": False}


@config_app.command("show")
def show_config() -> None:
    """Show the effective governance configuration."""
    workspace_root = get_workspace_root()
    config = load_governance_config(workspace_root)
    data = config.to_dict()
    console.print(yaml.safe_dump(data, sort_keys=False).rstrip(), markup=False)
    effective_loop = config.is_reasoning_loop_enabled()
    if effective_loop != config.reasoning_loop_enabled:
        print_warning(
            INFO_MESSAGES["loop_overridden"].format(state="on" if effective_loop else "off")
        )


@config_app.command("set-loop")
def set_loop(
    value: str = typer.Argument(..., help="on or off"),
) -> None:
    """Turn the reasoning loop (governance mode) on or off."""
    enabled = _LOOP_VALUES.get(value.strip().lower())
    if enabled is None:
        print_error(ERROR_MESSAGES["invalid_loop_value"].format(value=value))
        raise typer.Exit(code=1)

    workspace_root = get_workspace_root()
    config = load_governance_config(workspace_root)
    config.reasoning_loop_enabled = enabled
    path = save_governance_config(workspace_root, config)
    print_success(SUCCESS_MESSAGES["loop_enabled" if enabled else "loop_disabled"])
    print_success(SUCCESS_MESSAGES["config_saved"].format(path=path))
