"""Tests for the select_active_intent tool."""

from pathlib import Path

import pytest

from intent_hooks.governance.engine import GovernedSession
from intent_hooks.governance.select_intent import select_active_intent
from intent_hooks.governance.trace import append_trace_entry, build_trace_entry


class TestSelectActiveIntent:
    def test_success_sets_intent_and_returns_context(self, governed_workspace: Path):
        session = GovernedSession(workspace_root=governed_workspace, consecutive_mistake_count=2)

        assert select_active_intent(session, "INT-1")

        assert session.current_intent_id == "INT-1"
        assert session.consecutive_mistake_count == 0
        result = session.results[-1]
        assert not result.is_error
        assert result.content.startswith("<intent_context>\n")
        assert "<name>Auth rework</name>" in result.content
        assert "    - src/auth/**" in result.content

    def test_id_is_trimmed(self, governed_workspace: Path):
        session = GovernedSession(workspace_root=governed_workspace)
        assert select_active_intent(session, "  INT-2 ")
        assert session.current_intent_id == "INT-2"

    @pytest.mark.parametrize("intent_id", [None, "", "   "], ids=["none", "empty", "blank"])
    def test_blank_id(self, governed_workspace: Path, intent_id):
        session = GovernedSession(workspace_root=governed_workspace)

        assert not select_active_intent(session, intent_id)

        assert session.current_intent_id is None
        assert session.consecutive_mistake_count == 1
        assert session.results[-1].content == "You must cite a valid active Intent ID."

    def test_unknown_id_lists_valid_ids(self, governed_workspace: Path):
        session = GovernedSession(workspace_root=governed_workspace, current_intent_id="INT-2")

        assert not select_active_intent(session, "INT-9")

        # A failed selection keeps the previous intent
        assert session.current_intent_id == "INT-2"
        assert session.results[-1].content == (
            "You must cite a valid active Intent ID. Valid IDs: INT-1, INT-2"
        )

    def test_unknown_id_with_empty_registry(self, temp_workspace: Path):
        session = GovernedSession(workspace_root=temp_workspace)

        assert not select_active_intent(session, "INT-1")

        assert session.results[-1].content == (
            "You must cite a valid active Intent ID. "
            "No intents in .orchestration/active_intents.yaml."
        )

    def test_no_workspace(self):
        session = GovernedSession(workspace_root=None)
        assert not select_active_intent(session, "INT-1")
        assert session.consecutive_mistake_count == 1

    def test_context_includes_recent_history(self, governed_workspace: Path):
        for path in ("src/auth/a.ts", "src/auth/b.ts"):
            append_trace_entry(
                governed_workspace,
                build_trace_entry(intent_id="INT-1", relative_path=path, content="x"),
            )
        session = GovernedSession(workspace_root=governed_workspace)

        select_active_intent(session, "INT-1", history_limit=1)

        content = session.results[-1].content
        assert "<recent_history>" in content
        assert "src/auth/b.ts" in content
        assert "src/auth/a.ts" not in content
