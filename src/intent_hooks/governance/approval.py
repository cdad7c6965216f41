"""Human approval seam.

The engine asks an ``ApprovalChannel`` before every destructive tool call
when the reasoning loop is on. Anything other than an explicit approve is a
rejection, including a dismissed prompt or a timeout.
"""

from dataclasses import dataclass
from typing import Protocol

from rich.console import Console
from rich.prompt import Prompt

from intent_hooks.config.messages import APPROVAL_FEEDBACK_PROMPT
from intent_hooks.constants import (
    APPROVAL_CHOICE_APPROVE,
    APPROVAL_CHOICE_REJECT,
    VALID_APPROVAL_CHOICES,
)


@dataclass(frozen=True)
class ApprovalResponse:
    """The human's answer.

    Attributes:
        choice: "approve", "reject", or None when the prompt was dismissed.
        feedback: Optional free text passed back to the agent on rejection.
    """

    choice: str | None = None
    feedback: str | None = None

    @property
    def approved(self) -> bool:
        return self.choice == APPROVAL_CHOICE_APPROVE

    @property
    def explicitly_rejected(self) -> bool:
        return self.choice == APPROVAL_CHOICE_REJECT


class ApprovalChannel(Protocol):
    """Anything that can ask a human to approve a change."""

    def request_approval(self, prompt: str) -> ApprovalResponse: ...


class StaticApprovalChannel:
    """Returns the same answer every time (non-interactive hosts, tests).

    Records every prompt it was asked.
    """

    def __init__(self, response: ApprovalResponse) -> None:
        self.response = response
        self.prompts: list[str] = []

    @classmethod
    def approving(cls) -> "StaticApprovalChannel":
        return cls(ApprovalResponse(choice=APPROVAL_CHOICE_APPROVE))

    @classmethod
    def rejecting(cls, feedback: str | None = None) -> "StaticApprovalChannel":
        return cls(ApprovalResponse(choice=APPROVAL_CHOICE_REJECT, feedback=feedback))

    def request_approval(self, prompt: str) -> ApprovalResponse:
        self.prompts.append(prompt)
        return self.response


class ConsoleApprovalChannel:
    """Asks on the terminal with a rich prompt."""

    def __init__(self, console: Console | None = None) -> None:
        # stderr keeps stdout free for hook JSON output
        self.console = console or Console(stderr=True)

    def request_approval(self, prompt: str) -> ApprovalResponse:
        try:
            choice = Prompt.ask(
                prompt,
                console=self.console,
                choices=list(VALID_APPROVAL_CHOICES),
                default=APPROVAL_CHOICE_REJECT,
            )
        except (EOFError, KeyboardInterrupt):
            return ApprovalResponse()
        feedback = None
        if choice != APPROVAL_CHOICE_APPROVE:
            try:
                feedback = Prompt.ask(APPROVAL_FEEDBACK_PROMPT, console=self.console, default="")
            except (EOFError, KeyboardInterrupt):
                feedback = None
        return ApprovalResponse(choice=choice, feedback=feedback or None)
