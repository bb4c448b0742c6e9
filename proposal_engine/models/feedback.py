"""Open question and nudge models - the unresolved-issue side channel."""

from typing import Optional, List

from pydantic import Field

from proposal_engine.models.base import EngineModel, UtcDatetime
from proposal_engine.models.enums import NudgeActionType, NudgeType, Priority
from proposal_engine.models.source import Source


class QuestionBase(EngineModel):
    """Fields shared by question payloads and stored questions."""
    question: str
    rationale: str = Field(..., description="Why this question matters")
    priority: Priority
    related_section_ids: List[str] = Field(
        default_factory=list,
        description="Ids of the sections this question relates to"
    )
    suggested_sources: Optional[List[Source]] = None
    category: Optional[str] = Field(None, description="e.g. Pricing, Technical, Timeline")


class QuestionDraft(QuestionBase):
    """Payload for adding an open question."""


class OpenQuestion(QuestionBase):
    """Unresolved issue blocking full confidence or completion."""
    id: str
    created_at: UtcDatetime
    dismissed: bool = False


class NudgeBase(EngineModel):
    """Fields shared by nudge payloads and stored nudges."""
    type: NudgeType
    message: str
    action_label: Optional[str] = Field(None, description="Label for the action button")
    action_type: Optional[NudgeActionType] = None
    action_target: Optional[str] = Field(None, description="Where a navigate action points")
    priority: Priority
    related_section_id: Optional[str] = None
    expires_at: Optional[UtcDatetime] = None


class NudgeDraft(NudgeBase):
    """Payload for adding a nudge."""


class Nudge(NudgeBase):
    """Proactive, dismissible suggestion or warning."""
    id: str
    created_at: UtcDatetime
    dismissed: bool = False
