"""Tests for structured tool errors."""

import json

import pytest

from intent_hooks.governance.errors import (
    ToolErrorPayload,
    gatekeeper_invalid_intent_error,
    intent_ignored_error,
    intent_required_error,
    mutation_class_required_error,
    scope_violation_error,
    user_rejected_error,
)
from intent_hooks.models.enums import ToolErrorCode


class TestToolErrorPayloads:
    @pytest.mark.parametrize(
        ("payload", "code"),
        [
            (scope_violation_error("INT-1", "src/db.ts"), ToolErrorCode.SCOPE_VIOLATION),
            (gatekeeper_invalid_intent_error(), ToolErrorCode.INTENT_INVALID),
            (intent_required_error(), ToolErrorCode.INTENT_REQUIRED),
            (intent_ignored_error("INT-1"), ToolErrorCode.INTENT_IGNORED),
            (user_rejected_error(), ToolErrorCode.USER_REJECTED),
            (mutation_class_required_error(), ToolErrorCode.MUTATION_CLASS_REQUIRED),
        ],
        ids=["scope", "invalid", "required", "ignored", "rejected", "mutation-class"],
    )
    def test_every_payload_has_code_message_and_suggestion(
        self, payload: ToolErrorPayload, code: ToolErrorCode
    ):
        data = json.loads(payload.to_json())
        assert data["error"] == code.value.lower()
        assert data["code"] == code.value
        assert data["message"]
        assert data["suggestion"]

    def test_scope_violation_names_intent_and_path(self):
        data = json.loads(scope_violation_error("INT-1", "src/db/models.ts").to_json())
        assert data["intent_id"] == "INT-1"
        assert data["path"] == "src/db/models.ts"
        assert "INT-1" in data["message"]
        assert "src/db/models.ts" in data["message"]

    def test_optional_fields_are_omitted(self):
        data = json.loads(mutation_class_required_error().to_json())
        assert "intent_id" not in data
        assert "path" not in data

    def test_payload_is_single_line_json(self):
        serialized = scope_violation_error("INT-1", "src/db.ts").to_json()
        assert "\n" not in serialized
        assert json.loads(serialized)["error"] == "scope_violation"

    def test_explicit_error_label_is_kept(self):
        payload = ToolErrorPayload(
            error="custom", code=ToolErrorCode.INTENT_INVALID, message="m", suggestion="s"
        )
        assert payload.error == "custom"
        assert payload.code == "INTENT_INVALID"

    def test_suggestion_cannot_be_empty(self):
        with pytest.raises(ValueError):
            ToolErrorPayload(code=ToolErrorCode.INTENT_INVALID, message="m", suggestion="")


class TestUserRejectedError:
    def test_feedback_becomes_message(self):
        assert user_rejected_error("  use the v2 API  ", explicit=True).message == "use the v2 API"

    def test_explicit_rejection(self):
        assert user_rejected_error(explicit=True).message == "User rejected the operation."

    def test_dismissed_prompt(self):
        assert user_rejected_error().message == "The user rejected this operation."
