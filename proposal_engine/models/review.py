"""Review request models - human escalation with a threaded comment log."""

from typing import Optional, List

from pydantic import Field

from proposal_engine.models.base import EngineModel, UtcDatetime
from proposal_engine.models.enums import ReviewStatus


class Person(EngineModel):
    """Identity snapshot of a user (owner, assignee or comment author)."""
    id: str
    name: str
    email: str


class ReviewComment(EngineModel):
    """Single entry in a review request's comment thread."""
    id: str
    author: Person
    message: str
    created_at: UtcDatetime


class ReviewRequest(EngineModel):
    """Escalation routing a proposal to a human reviewer."""
    id: str
    created_at: UtcDatetime
    created_by: Person
    assignee: Person
    reason: str = Field(..., description="Why escalation happened")
    related_section_ids: Optional[List[str]] = None
    related_question_ids: Optional[List[str]] = None
    status: ReviewStatus = ReviewStatus.ASSIGNED
    comments: List[ReviewComment] = Field(default_factory=list)
