"""Structured tool errors returned to the agent.

A veto is never raised. It is reported to the agent as a JSON payload with
an error code and a suggestion the agent can act on in the same turn.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from intent_hooks.config.messages import TOOL_ERROR_MESSAGES, TOOL_ERROR_SUGGESTIONS
from intent_hooks.models.enums import ToolErrorCode


class ToolErrorPayload(BaseModel):
    """JSON payload reported with ``is_error=True``."""

    model_config = ConfigDict(frozen=True, use_enum_values=True)

    error: str
    code: ToolErrorCode
    message: str
    intent_id: str | None = None
    path: str | None = None
    suggestion: str = Field(..., min_length=1)

    @model_validator(mode="before")
    @classmethod
    def _error_from_code(cls, data: Any) -> Any:
        # error is the code in lower case unless given explicitly
        if isinstance(data, dict) and "error" not in data and data.get("code") is not None:
            code = data["code"]
            data = {**data, "error": str(getattr(code, "value", code)).lower()}
        return data

    def to_json(self) -> str:
        """Serialize for the agent, omitting unset optional fields."""
        return self.model_dump_json(exclude_none=True)


def scope_violation_error(intent_id: str, path: str) -> ToolErrorPayload:
    return ToolErrorPayload(
        code=ToolErrorCode.SCOPE_VIOLATION,
        message=TOOL_ERROR_MESSAGES["scope_violation"].format(intent_id=intent_id, path=path),
        intent_id=intent_id,
        path=path,
        suggestion=TOOL_ERROR_SUGGESTIONS["scope_violation"],
    )


def gatekeeper_invalid_intent_error(intent_id: str | None = None) -> ToolErrorPayload:
    """Veto for a tool call made without a valid selected intent."""
    return ToolErrorPayload(
        code=ToolErrorCode.INTENT_INVALID,
        message=TOOL_ERROR_MESSAGES["intent_invalid"],
        intent_id=intent_id or None,
        suggestion=TOOL_ERROR_SUGGESTIONS["intent_invalid"],
    )


def intent_required_error() -> ToolErrorPayload:
    return ToolErrorPayload(
        code=ToolErrorCode.INTENT_REQUIRED,
        message=TOOL_ERROR_MESSAGES["intent_required"],
        suggestion=TOOL_ERROR_SUGGESTIONS["intent_required"],
    )


def intent_ignored_error(intent_id: str) -> ToolErrorPayload:
    return ToolErrorPayload(
        code=ToolErrorCode.INTENT_IGNORED,
        message=TOOL_ERROR_MESSAGES["intent_ignored"].format(intent_id=intent_id),
        intent_id=intent_id,
        suggestion=TOOL_ERROR_SUGGESTIONS["intent_ignored"],
    )


def user_rejected_error(
    feedback: str | None = None,
    *,
    explicit: bool = False,
    intent_id: str | None = None,
    path: str | None = None,
) -> ToolErrorPayload:
    """Veto for a destructive call the human did not approve.

    Args:
        feedback: Free text from the human; becomes the message when given.
        explicit: True when the human actively chose "reject" (as opposed to
            dismissing the prompt).
    """
    if feedback and feedback.strip():
        message = feedback.strip()
    elif explicit:
        message = TOOL_ERROR_MESSAGES["user_rejected_explicit"]
    else:
        message = TOOL_ERROR_MESSAGES["user_rejected"]
    return ToolErrorPayload(
        code=ToolErrorCode.USER_REJECTED,
        message=message,
        intent_id=intent_id,
        path=path,
        suggestion=TOOL_ERROR_SUGGESTIONS["user_rejected"],
    )


def mutation_class_required_error() -> ToolErrorPayload:
    return ToolErrorPayload(
        code=ToolErrorCode.MUTATION_CLASS_REQUIRED,
        message=TOOL_ERROR_MESSAGES["mutation_class_required"],
        suggestion=TOOL_ERROR_SUGGESTIONS["mutation_class_required"],
    )
