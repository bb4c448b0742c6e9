"""Models package - All Pydantic models organized by domain."""

from proposal_engine.models.enums import (
    ProposalStatus,
    ApprovalState,
    SourceType,
    Priority,
    NudgeType,
    NudgeActionType,
    ReviewStatus,
    IntentType,
)
from proposal_engine.models.source import Source
from proposal_engine.models.review import Person, ReviewComment, ReviewRequest
from proposal_engine.models.feedback import OpenQuestion, QuestionDraft, Nudge, NudgeDraft
from proposal_engine.models.proposal import (
    Owner,
    Stakeholder,
    ProposalSection,
    SectionDraft,
    Proposal,
    ProposalDraft,
)
from proposal_engine.models.state import StoreState
from proposal_engine.models.results import (
    MutationResult,
    NotFoundReason,
    ParsedIntent,
    HighPriorityItems,
    CommandOutcome,
)

__all__ = [
    # Enums
    "ProposalStatus",
    "ApprovalState",
    "SourceType",
    "Priority",
    "NudgeType",
    "NudgeActionType",
    "ReviewStatus",
    "IntentType",
    # Entities
    "Source",
    "Person",
    "Owner",
    "Stakeholder",
    "ProposalSection",
    "SectionDraft",
    "OpenQuestion",
    "QuestionDraft",
    "Nudge",
    "NudgeDraft",
    "ReviewComment",
    "ReviewRequest",
    "Proposal",
    "ProposalDraft",
    "StoreState",
    # Results
    "MutationResult",
    "NotFoundReason",
    "ParsedIntent",
    "HighPriorityItems",
    "CommandOutcome",
]
