"""Tests for the trace ledger."""

import hashlib
import json
from pathlib import Path

import pytest

from intent_hooks.config.paths import get_agent_trace_path
from intent_hooks.governance.trace import (
    append_trace_entry,
    build_trace_entry,
    compute_content_hash,
    get_recent_trace_entries_for_intent,
    read_trace_entries,
)
from intent_hooks.models.enums import MutationClass


def _entry(intent_id: str | None, path: str = "src/a.py", content: str = "x"):
    return build_trace_entry(intent_id=intent_id, relative_path=path, content=content)


class TestComputeContentHash:
    def test_sha256_with_prefix(self):
        expected = hashlib.sha256("hello".encode("utf-8")).hexdigest()
        assert compute_content_hash("hello") == f"sha256:{expected}"

    def test_utf8_encoding(self):
        expected = hashlib.sha256("héllo ✓".encode()).hexdigest()
        assert compute_content_hash("héllo ✓") == f"sha256:{expected}"

    def test_empty_content(self):
        assert compute_content_hash("") == "sha256:" + hashlib.sha256(b"").hexdigest()


class TestBuildTraceEntry:
    """Test build_trace_entry."""

    def test_hash_is_independent_of_line_range(self):
        first = build_trace_entry(
            intent_id="INT-1", relative_path="a.py", content="body", start_line=1, end_line=3
        )
        second = build_trace_entry(
            intent_id="INT-1", relative_path="a.py", content="body", start_line=40, end_line=90
        )
        first_hash = first.files[0].conversations[0].ranges[0].content_hash
        second_hash = second.files[0].conversations[0].ranges[0].content_hash
        assert first_hash == second_hash

    def test_default_line_range(self):
        trace_range = _entry("INT-1").files[0].conversations[0].ranges[0]
        assert (trace_range.start_line, trace_range.end_line) == (1, 1)

    def test_intent_tag_in_related(self):
        entry = _entry("INT-1")
        assert entry.intent_id == "INT-1"
        assert [(r.type, r.value) for r in entry.related or []] == [("intent", "INT-1")]
        assert [(r.type, r.value) for r in entry.files[0].related or []] == [("intent", "INT-1")]

    def test_no_intent_omits_related(self):
        data = json.loads(_entry(None).to_json_line())
        assert "intent_id" not in data
        assert "related" not in data
        assert "related" not in data["files"][0]

    def test_contributor_and_session(self):
        entry = build_trace_entry(
            intent_id="INT-1",
            relative_path="a.py",
            content="x",
            session_id="task-7",
            model_id="model-x",
        )
        conversation = entry.files[0].conversations[0]
        assert conversation.url == "task-7"
        assert conversation.contributor.entity_type == "AI"
        assert conversation.contributor.model_identifier == "model-x"

    def test_mutation_class_enum_is_stored_as_value(self):
        entry = build_trace_entry(
            intent_id=None,
            relative_path="a.py",
            content="x",
            mutation_class=MutationClass.AST_REFACTOR,
        )
        assert entry.mutation_class == "AST_REFACTOR"

    def test_vcs_only_when_revision_known(self):
        assert _entry("INT-1").vcs is None
        entry = build_trace_entry(
            intent_id="INT-1", relative_path="a.py", content="x", revision_id="abc123"
        )
        assert entry.vcs is not None
        assert entry.vcs.revision_id == "abc123"

    def test_ids_are_unique(self):
        assert _entry("INT-1").id != _entry("INT-1").id

    def test_timestamp_is_iso_utc(self):
        assert _entry("INT-1").timestamp.endswith("+00:00")


class TestAppendTraceEntry:
    """Test append_trace_entry."""

    def test_appends_one_json_line_per_entry(self, temp_workspace: Path):
        assert append_trace_entry(temp_workspace, _entry("INT-1", "a.py"))
        assert append_trace_entry(temp_workspace, _entry("INT-2", "b.py"))
        lines = get_agent_trace_path(temp_workspace).read_text("utf-8").splitlines()
        assert len(lines) == 2
        assert json.loads(lines[0])["files"][0]["relative_path"] == "a.py"
        assert json.loads(lines[1])["intent_id"] == "INT-2"

    def test_creates_sidecar_directory(self, tmp_path: Path):
        assert append_trace_entry(tmp_path, _entry("INT-1"))
        assert get_agent_trace_path(tmp_path).exists()

    def test_write_failure_is_logged_and_swallowed(
        self, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ):
        # A file where the sidecar directory should be makes every write fail
        (tmp_path / ".orchestration").write_text("not a directory", "utf-8")
        with caplog.at_level("WARNING", logger="intent_hooks"):
            assert append_trace_entry(tmp_path, _entry("INT-1")) is False
        assert any("Failed to append agent trace" in r.message for r in caplog.records)


class TestRecentTraceEntries:
    """Test get_recent_trace_entries_for_intent."""

    def test_newest_first_and_filtered(self, temp_workspace: Path):
        for path, intent in [("1.py", "A"), ("2.py", "B"), ("3.py", "A"), ("4.py", "A")]:
            append_trace_entry(temp_workspace, _entry(intent, path))
        entries = get_recent_trace_entries_for_intent(temp_workspace, "A")
        assert [e.relative_paths[0] for e in entries] == ["4.py", "3.py", "1.py"]

    def test_limit(self, temp_workspace: Path):
        for i in range(5):
            append_trace_entry(temp_workspace, _entry("A", f"{i}.py"))
        entries = get_recent_trace_entries_for_intent(temp_workspace, "A", limit=2)
        assert [e.relative_paths[0] for e in entries] == ["4.py", "3.py"]

    def test_missing_ledger_returns_empty(self, temp_workspace: Path):
        assert get_recent_trace_entries_for_intent(temp_workspace, "A") == []

    def test_malformed_lines_are_skipped(self, temp_workspace: Path):
        append_trace_entry(temp_workspace, _entry("A", "good.py"))
        with open(get_agent_trace_path(temp_workspace), "a", encoding="utf-8") as f:
            f.write("{not json\n\n[1, 2]\n")
        append_trace_entry(temp_workspace, _entry("A", "later.py"))
        entries = get_recent_trace_entries_for_intent(temp_workspace, "A")
        assert [e.relative_paths[0] for e in entries] == ["later.py", "good.py"]
        assert len(read_trace_entries(temp_workspace)) == 2

    @pytest.mark.parametrize(
        "odd_path",
        ["docs/line\u2028sep.md", "docs/para\u2029sep.md", "docs/nel\x85.md", "docs/ff\x0c.md"],
        ids=["line-separator", "paragraph-separator", "next-line", "form-feed"],
    )
    def test_unicode_line_breaks_inside_values_keep_entry_whole(
        self, temp_workspace: Path, odd_path: str
    ):
        append_trace_entry(temp_workspace, _entry("A", "src/a.py"))
        append_trace_entry(temp_workspace, _entry("A", odd_path))
        entries = get_recent_trace_entries_for_intent(temp_workspace, "A")
        assert [e.relative_paths[0] for e in entries] == [odd_path, "src/a.py"]
