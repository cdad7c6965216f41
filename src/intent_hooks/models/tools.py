"""Typed tool calls.

Agents send a tool name plus an untyped argument map. ``parse_tool_call``
turns that pair into one tagged variant per tool family, once, at the
boundary. Classification (safe / destructive / mutating) and the per-tool
path and content extraction live on the variants, so the governance engine
never looks tool names up in tables.
"""

import re
from collections.abc import Mapping
from typing import Annotated, Any, ClassVar, Literal

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, model_validator

from intent_hooks.constants import APPLY_PATCH_PATH_LABEL, DESTRUCTIVE_TOOLS, SAFE_TOOLS
from intent_hooks.models.enums import MutationClass, ToolKind

# "*** Update File: src/a.py" (agent patch format) and "+++ b/src/a.py" (unified diff)
_PATCH_FILE_HEADER = re.compile(
    r"^\*\*\* (?:Add|Update|Delete) File: (?P<path>.+)$|^\*\*\* Move to: (?P<moved>.+)$",
    re.MULTILINE,
)
_UNIFIED_DIFF_HEADER = re.compile(r"^\+\+\+ (?P<path>\S.*)$", re.MULTILINE)
_DEV_NULL = "/dev/null"


class BaseToolCall(BaseModel):
    """Fields and behavior shared by every tool call.

    Argument maps come from a language model, so any non-string value in a
    string field is treated as absent rather than rejected.
    """

    model_config = ConfigDict(extra="allow", frozen=True)

    kind: ClassVar[ToolKind] = ToolKind.UNKNOWN
    mutating: ClassVar[bool] = False
    # False for destructive tools with no single target path (shell, subtasks)
    single_target: ClassVar[bool] = True

    tool: str
    intent_id: str | None = None
    mutation_class: str | None = None

    @model_validator(mode="before")
    @classmethod
    def _strings_only(cls, data: Any) -> Any:
        # The tool discriminator is left untouched; extra keys pass through as sent
        if not isinstance(data, dict):
            return data
        return {
            key: (
                value
                if key == "tool" or key not in cls.model_fields or isinstance(value, str)
                else None
            )
            for key, value in data.items()
        }

    @property
    def is_safe(self) -> bool:
        return self.kind is ToolKind.SAFE

    @property
    def is_destructive(self) -> bool:
        return self.kind is ToolKind.DESTRUCTIVE

    @property
    def is_mutating(self) -> bool:
        return self.mutating

    @property
    def requires_scope_check(self) -> bool:
        return self.is_destructive and self.single_target

    def target_path(self) -> str | None:
        """Relative path the call writes to, used for the ledger and approval prompt."""
        return None

    def content_for_hash(self) -> str | None:
        """Content attributed to the mutation, hashed into the trace ledger."""
        return None

    def scope_paths(self) -> list[str]:
        """Paths checked against the intent's owned scope."""
        path = self.target_path()
        return [path] if path else []

    def declared_mutation_class(self) -> MutationClass | None:
        return MutationClass.parse(self.mutation_class)


# =============================================================================
# Safe (read-only) tools
# =============================================================================


class SelectActiveIntentCall(BaseToolCall):
    """Intent selection: the only tool the gatekeeper lets through without an intent."""

    kind: ClassVar[ToolKind] = ToolKind.SAFE

    tool: Literal["select_active_intent"]


class ReadOnlyToolCall(BaseToolCall):
    kind: ClassVar[ToolKind] = ToolKind.SAFE

    tool: Literal[
        "read_file",
        "list_files",
        "search_files",
        "codebase_search",
        "read_command_output",
        "ask_followup_question",
        "attempt_completion",
        "switch_mode",
        "access_mcp_resource",
        "use_mcp_tool",
    ]


# =============================================================================
# Destructive, mutating tools
# =============================================================================


class WriteToFileCall(BaseToolCall):
    """Whole-file write. The only tool that must declare a mutation class."""

    kind: ClassVar[ToolKind] = ToolKind.DESTRUCTIVE
    mutating: ClassVar[bool] = True

    tool: Literal["write_to_file"]
    path: str | None = None
    content: str | None = None

    def target_path(self) -> str | None:
        return self.path

    def content_for_hash(self) -> str | None:
        return self.content if self.content is not None else ""


class EditFileCall(BaseToolCall):
    """Targeted edit / search-and-replace variants."""

    kind: ClassVar[ToolKind] = ToolKind.DESTRUCTIVE
    mutating: ClassVar[bool] = True

    tool: Literal["edit_file", "search_replace", "edit"]
    file_path: str | None = None
    old_string: str | None = None
    new_string: str | None = None

    def target_path(self) -> str | None:
        return self.file_path

    def content_for_hash(self) -> str | None:
        return self.new_string


class ApplyDiffCall(BaseToolCall):
    kind: ClassVar[ToolKind] = ToolKind.DESTRUCTIVE
    mutating: ClassVar[bool] = True

    tool: Literal["apply_diff"]
    path: str | None = None
    diff: str | None = None

    def target_path(self) -> str | None:
        return self.path

    def content_for_hash(self) -> str | None:
        return self.diff


class ApplyPatchCall(BaseToolCall):
    """Structured multi-file patch.

    The ledger records it under the literal label ``patch``; the scope check
    looks at every file named in the patch headers instead.
    """

    kind: ClassVar[ToolKind] = ToolKind.DESTRUCTIVE
    mutating: ClassVar[bool] = True

    tool: Literal["apply_patch"]
    patch: str | None = None

    def target_path(self) -> str | None:
        return APPLY_PATCH_PATH_LABEL

    def content_for_hash(self) -> str | None:
        return self.patch

    def scope_paths(self) -> list[str]:
        paths = patched_file_paths(self.patch or "")
        return paths or [APPLY_PATCH_PATH_LABEL]


# =============================================================================
# Destructive tools without a single target path
# =============================================================================


class ExecuteCommandCall(BaseToolCall):
    kind: ClassVar[ToolKind] = ToolKind.DESTRUCTIVE
    single_target: ClassVar[bool] = False

    tool: Literal["execute_command"]
    command: str | None = None
    cwd: str | None = None


class NewTaskCall(BaseToolCall):
    kind: ClassVar[ToolKind] = ToolKind.DESTRUCTIVE
    single_target: ClassVar[bool] = False

    tool: Literal["new_task"]
    mode: str | None = None
    message: str | None = None


class RunSlashCommandCall(BaseToolCall):
    kind: ClassVar[ToolKind] = ToolKind.DESTRUCTIVE
    single_target: ClassVar[bool] = False

    tool: Literal["run_slash_command"]
    command: str | None = None
    args: str | None = None


class UnknownToolCall(BaseToolCall):
    """A tool outside the governed set. Only the gatekeeper applies to it."""


ToolCall = Annotated[
    SelectActiveIntentCall
    | ReadOnlyToolCall
    | WriteToFileCall
    | EditFileCall
    | ApplyDiffCall
    | ApplyPatchCall
    | ExecuteCommandCall
    | NewTaskCall
    | RunSlashCommandCall,
    Field(discriminator="tool"),
]

_TOOL_CALL_ADAPTER: TypeAdapter[BaseToolCall] = TypeAdapter(ToolCall)

KNOWN_TOOLS: frozenset[str] = SAFE_TOOLS | DESTRUCTIVE_TOOLS


def parse_tool_call(tool_name: str, args: Mapping[str, Any] | None = None) -> BaseToolCall:
    """Build the typed call for a tool name and its raw argument map.

    Args:
        tool_name: Tool name as sent by the agent (e.g. "write_to_file").
        args: Raw argument map; may be None.

    Returns:
        The matching tool call variant, or UnknownToolCall for ungoverned tools.
    """
    payload = dict(args or {})
    payload["tool"] = tool_name
    if tool_name not in KNOWN_TOOLS:
        return UnknownToolCall.model_validate(payload)
    return _TOOL_CALL_ADAPTER.validate_python(payload)


def patched_file_paths(patch: str) -> list[str]:
    """Return the file paths named in a patch, in order of appearance.

    Understands the agent patch envelope (``*** Update File: path``) and
    unified diff headers (``+++ b/path``). Deleted targets (/dev/null) are
    skipped.
    """
    paths: list[str] = []
    for match in _PATCH_FILE_HEADER.finditer(patch):
        path = (match.group("path") or match.group("moved") or "").strip()
        if path and path not in paths:
            paths.append(path)
    for match in _UNIFIED_DIFF_HEADER.finditer(patch):
        raw = match.group("path").split("\t")[0].strip()
        if raw == _DEV_NULL:
            continue
        path = raw[2:] if raw.startswith("b/") else raw
        if path and path not in paths:
            paths.append(path)
    return paths


__all__ = [
    "ApplyDiffCall",
    "ApplyPatchCall",
    "BaseToolCall",
    "EditFileCall",
    "ExecuteCommandCall",
    "KNOWN_TOOLS",
    "NewTaskCall",
    "ReadOnlyToolCall",
    "RunSlashCommandCall",
    "SelectActiveIntentCall",
    "ToolCall",
    "UnknownToolCall",
    "WriteToFileCall",
    "parse_tool_call",
    "patched_file_paths",
]
