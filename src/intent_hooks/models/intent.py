"""Intent specification models.

An intent is one declared unit of work, edited by humans in
.orchestration/active_intents.yaml. These models are read-only to the
governance engine.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _as_string_list(value: Any) -> list[str]:
    """Coerce a YAML value into a list of strings.

    Legacy registries sometimes carry a single string where a list is
    expected (e.g. ``constraints: "no new deps"``).
    """
    if value is None:
        return []
    if isinstance(value, list):
        return [str(item) for item in value if item is not None]
    return [str(value)]


class IntentSpec(BaseModel):
    """One intent from the registry.

    Unknown keys are kept so tooling that writes richer registries does not
    lose data on a round trip.
    """

    model_config = ConfigDict(extra="allow")

    id: str = Field(..., description="Unique, stable intent identifier")
    name: str | None = Field(default=None, description="Display label")
    status: str | None = Field(default=None, description="Free-text lifecycle status")
    owned_scope: list[str] = Field(
        default_factory=list,
        description="Glob patterns of files this intent may modify (empty = unrestricted)",
    )
    constraints: list[str] = Field(default_factory=list, description="Free-text rules")
    acceptance_criteria: list[str] = Field(
        default_factory=list,
        description="Definition of done",
    )
    scope: str | None = Field(
        default=None,
        description="Legacy single scope description (display only)",
    )

    @field_validator("owned_scope", "constraints", "acceptance_criteria", mode="before")
    @classmethod
    def _coerce_lists(cls, value: Any) -> list[str]:
        return _as_string_list(value)

    @field_validator("name", "status", "scope", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> str | None:
        if value is None:
            return None
        return str(value).strip()

    @property
    def display_name(self) -> str:
        """Name if set, otherwise the id."""
        return self.name or self.id


class ActiveIntentsFile(BaseModel):
    """Top-level shape of active_intents.yaml.

    Both the current ``active_intents`` key and the legacy ``intents`` key are
    accepted; ``active_intents`` wins when both are present.
    """

    model_config = ConfigDict(extra="allow")

    active_intents: list[Any] | None = None
    intents: list[Any] | None = None

    def entries(self) -> list[Any]:
        """Return the raw intent entries from whichever key is populated."""
        if self.active_intents is not None:
            return self.active_intents
        return self.intents or []
