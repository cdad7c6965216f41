"""Trace ledger: .orchestration/agent_trace.jsonl.

Append-only, one JSON entry per line. Every range carries a SHA-256 hash of
the content it attributes, so an entry identifies code by content rather
than by line position.

Writes take the per-workspace lock. A failed write is logged and dropped:
the ledger must never abort the tool call it records.
"""

import hashlib
import logging
import uuid
from datetime import UTC, datetime
from pathlib import Path

from pydantic import ValidationError

from intent_hooks.config.paths import get_agent_trace_path
from intent_hooks.constants import (
    CONTENT_HASH_PREFIX,
    CONTRIBUTOR_ENTITY_AI,
    DEFAULT_RECENT_HISTORY_LIMIT,
    TRACE_RELATED_TYPE_INTENT,
)
from intent_hooks.models.enums import MutationClass
from intent_hooks.models.trace import (
    TraceContributor,
    TraceConversation,
    TraceEntry,
    TraceFile,
    TraceRange,
    TraceRelated,
    TraceVcs,
)
from intent_hooks.utils.platform import workspace_lock

logger = logging.getLogger(__name__)


def compute_content_hash(content: str) -> str:
    """Return ``sha256:<hex>`` for the UTF-8 encoding of ``content``."""
    digest = hashlib.sha256(content.encode("utf-8")).hexdigest()
    return f"{CONTENT_HASH_PREFIX}{digest}"


def build_trace_entry(
    *,
    intent_id: str | None,
    relative_path: str,
    content: str,
    mutation_class: MutationClass | str | None = None,
    start_line: int | None = None,
    end_line: int | None = None,
    session_id: str | None = None,
    model_id: str | None = None,
    revision_id: str | None = None,
) -> TraceEntry:
    """Build a ledger entry for one file mutation.

    Pure apart from the generated id and timestamp. The intent tag is
    added to ``related`` (top level and per file) only when ``intent_id``
    is set.

    Args:
        intent_id: Intent the mutation belongs to, if any.
        relative_path: Workspace-relative path (or "patch" for multi-file patches).
        content: Content attributed to the mutation; hashed, never stored.
        mutation_class: AST_REFACTOR or INTENT_EVOLUTION.
        start_line: First line of the range (defaults to 1).
        end_line: Last line of the range (defaults to 1).
        session_id: Conversation or task id, recorded as the conversation url.
        model_id: Model that produced the content.
        revision_id: VCS revision the workspace was at.
    """
    related = [TraceRelated(type=TRACE_RELATED_TYPE_INTENT, value=intent_id)] if intent_id else None
    if isinstance(mutation_class, MutationClass):
        mutation_class = mutation_class.value

    trace_range = TraceRange(
        start_line=start_line if start_line is not None else 1,
        end_line=end_line if end_line is not None else 1,
        content_hash=compute_content_hash(content),
    )
    trace_file = TraceFile(
        relative_path=relative_path,
        conversations=[
            TraceConversation(
                url=session_id,
                contributor=TraceContributor(
                    entity_type=CONTRIBUTOR_ENTITY_AI,
                    model_identifier=model_id,
                ),
                ranges=[trace_range],
            )
        ],
        related=list(related) if related else None,
    )
    return TraceEntry(
        id=str(uuid.uuid4()),
        timestamp=datetime.now(UTC).isoformat(),
        intent_id=intent_id or None,
        related=related,
        mutation_class=mutation_class,
        vcs=TraceVcs(revision_id=revision_id) if revision_id else None,
        files=[trace_file],
    )


def append_trace_entry(workspace_root: Path, entry: TraceEntry) -> bool:
    """Append one entry to the ledger.

    Returns:
        True if the entry was written. Failures are logged, never raised.
    """
    trace_path = get_agent_trace_path(workspace_root)
    line = entry.to_json_line() + "\n"
    try:
        with workspace_lock(workspace_root):
            with open(trace_path, "a", encoding="utf-8") as f:
                f.write(line)
    except OSError as e:
        logger.warning(f"Failed to append agent trace to {trace_path}: {e}")
        return False
    logger.debug(f"Appended trace entry {entry.id} for {entry.relative_paths}")
    return True


def read_trace_entries(workspace_root: Path) -> list[TraceEntry]:
    """Read every valid ledger entry, oldest first. Malformed lines are skipped."""
    trace_path = get_agent_trace_path(workspace_root)
    try:
        text = trace_path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return []
    except (OSError, UnicodeDecodeError) as e:
        logger.debug(f"Could not read {trace_path}: {e}")
        return []

    entries: list[TraceEntry] = []
    # Only "\n" ends a record; JSON strings may carry U+2028 or \x85 unescaped
    for line_number, line in enumerate(text.split("\n"), start=1):
        if not line.strip():
            continue
        try:
            entries.append(TraceEntry.model_validate_json(line))
        except ValidationError:
            logger.debug(f"Skipping malformed ledger line {line_number} in {trace_path}")
    return entries


def get_recent_trace_entries_for_intent(
    workspace_root: Path,
    intent_id: str,
    limit: int = DEFAULT_RECENT_HISTORY_LIMIT,
) -> list[TraceEntry]:
    """Return up to ``limit`` entries for ``intent_id``, newest first."""
    if limit <= 0:
        return []
    matches: list[TraceEntry] = []
    for entry in reversed(read_trace_entries(workspace_root)):
        if entry.intent_id == intent_id:
            matches.append(entry)
            if len(matches) >= limit:
                break
    return matches
