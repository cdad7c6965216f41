"""Hook payload received on stdin by ``intent-hooks hook``."""

import json
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class HookPayload(BaseModel):
    """One tool call as sent by an agent host.

    ``tool_input`` may arrive as an object or as a JSON-encoded string.
    """

    model_config = ConfigDict(extra="ignore")

    tool_name: str = Field(..., min_length=1)
    tool_input: dict[str, Any] = Field(default_factory=dict)
    session_id: str | None = None
    model: str | None = None
    intent_id: str | None = None

    @field_validator("tool_input", mode="before")
    @classmethod
    def _decode_tool_input(cls, value: Any) -> Any:
        if value is None:
            return {}
        if isinstance(value, str):
            if not value.strip():
                return {}
            return json.loads(value)
        return value
