"""Result models returned by store mutations, intents and commands."""

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, Field

from proposal_engine.models.enums import IntentType
from proposal_engine.models.feedback import Nudge, OpenQuestion
from proposal_engine.models.proposal import Proposal


class MutationResult(BaseModel):
    """
    Outcome of a store mutation.

    Unknown targets never raise: the store leaves its state untouched and
    reports why through ``reason``. The result is truthy only when the
    change was applied.
    """
    applied: bool = Field(True, description="Whether the state changed")
    target_id: Optional[str] = Field(None, description="Id of the affected entity")
    reason: Optional[str] = Field(None, description="Why nothing was applied")
    value: Any = Field(None, description="Operation-specific payload (e.g. a new id)")

    def __bool__(self) -> bool:
        return self.applied

    @classmethod
    def ok(cls, target_id: Optional[str] = None, value: Any = None) -> "MutationResult":
        return cls(applied=True, target_id=target_id, value=value)

    @classmethod
    def not_applied(cls, reason: str, target_id: Optional[str] = None) -> "MutationResult":
        return cls(applied=False, target_id=target_id, reason=reason)


class NotFoundReason:
    """Reason codes carried by a MutationResult that was not applied."""
    PROPOSAL = "proposal_not_found"
    SECTION = "section_not_found"
    QUESTION = "question_not_found"
    NUDGE = "nudge_not_found"
    REQUEST = "request_not_found"
    EMPTY_MESSAGE = "empty_message"
    INVALID_TRANSITION = "invalid_transition"


class ParsedIntent(BaseModel):
    """Structured command extracted from free-text input."""
    type: IntentType
    params: Dict[str, Union[str, int]] = Field(default_factory=dict)
    confidence: float = Field(..., ge=0.0, le=1.0)


class HighPriorityItems(BaseModel):
    """Active high-priority questions and nudges of one proposal."""
    questions: List[OpenQuestion] = Field(default_factory=list)
    nudges: List[Nudge] = Field(default_factory=list)


class CommandOutcome(BaseModel):
    """What a chat command did to the store."""
    intent: ParsedIntent
    proposal_id: Optional[str] = Field(None, description="Proposal created or opened")
    proposals: List[Proposal] = Field(default_factory=list, description="Proposals listed")
    message: str = Field("", description="Assistant reply text")
