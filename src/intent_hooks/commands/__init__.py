"""CLI commands for intent-hooks."""

from intent_hooks.commands.config_cmd import config_app
from intent_hooks.commands.hook_cmd import hook_app
from intent_hooks.commands.intents_cmd import intents_app
from intent_hooks.commands.trace_cmd import map_command, scope_command, trace_command

__all__ = [
    "config_app",
    "hook_app",
    "intents_app",
    "map_command",
    "scope_command",
    "trace_command",
]
