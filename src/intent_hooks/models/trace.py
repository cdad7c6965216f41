"""Trace ledger models.

One ``TraceEntry`` is appended to .orchestration/agent_trace.jsonl per
mutation. Ranges carry a content hash rather than relying on line numbers,
so an entry stays valid by content if the code later moves.
"""

from pydantic import BaseModel, ConfigDict, Field

from intent_hooks.constants import CONTRIBUTOR_ENTITY_AI


class TraceRange(BaseModel):
    """A line range in a file with the hash of its content."""

    start_line: int
    end_line: int
    content_hash: str


class TraceContributor(BaseModel):
    """Who produced the change (AI or human) and with which model."""

    entity_type: str = CONTRIBUTOR_ENTITY_AI
    model_identifier: str | None = None


class TraceConversation(BaseModel):
    """One session contributing ranges to a file."""

    url: str | None = Field(default=None, description="Session or conversation id")
    contributor: TraceContributor = Field(default_factory=TraceContributor)
    ranges: list[TraceRange] = Field(default_factory=list)


class TraceRelated(BaseModel):
    """Related artifact tag, e.g. ``{"type": "intent", "value": "INT-1"}``."""

    type: str
    value: str


class TraceFile(BaseModel):
    relative_path: str
    conversations: list[TraceConversation] = Field(default_factory=list)
    related: list[TraceRelated] | None = None


class TraceVcs(BaseModel):
    revision_id: str | None = None


class TraceEntry(BaseModel):
    """Single append-only record in the trace ledger."""

    # Entries written by newer tooling may carry extra keys
    model_config = ConfigDict(extra="allow")

    id: str
    timestamp: str
    intent_id: str | None = None
    related: list[TraceRelated] | None = None
    mutation_class: str | None = None
    vcs: TraceVcs | None = None
    files: list[TraceFile] = Field(default_factory=list)

    def to_json_line(self) -> str:
        """Serialize as one JSON line (no trailing newline)."""
        return self.model_dump_json(exclude_none=True)

    @property
    def relative_paths(self) -> list[str]:
        return [f.relative_path for f in self.files]
