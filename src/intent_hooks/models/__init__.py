"""Data models for intent-hooks"""

from .enums import MutationClass, ToolErrorCode, ToolKind
from .intent import ActiveIntentsFile, IntentSpec
from .tools import BaseToolCall, UnknownToolCall, parse_tool_call
from .trace import (
    TraceContributor,
    TraceConversation,
    TraceEntry,
    TraceFile,
    TraceRange,
    TraceRelated,
    TraceVcs,
)

__all__ = [
    "ActiveIntentsFile",
    "IntentSpec",
    "MutationClass",
    "ToolErrorCode",
    "ToolKind",
    "BaseToolCall",
    "UnknownToolCall",
    "parse_tool_call",
    "TraceContributor",
    "TraceConversation",
    "TraceEntry",
    "TraceFile",
    "TraceRange",
    "TraceRelated",
    "TraceVcs",
]
