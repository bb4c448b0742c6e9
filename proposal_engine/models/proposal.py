"""Proposal aggregate models - proposal, sections and their sources."""

from typing import Optional, List

from pydantic import Field

from proposal_engine.models.base import EngineModel, UtcDatetime
from proposal_engine.models.enums import ApprovalState, ProposalStatus
from proposal_engine.models.feedback import Nudge, OpenQuestion
from proposal_engine.models.review import Person, ReviewRequest
from proposal_engine.models.source import Source


class Owner(Person):
    """Sales rep or account owner of a proposal."""
    avatar_url: Optional[str] = Field(None, description="Profile picture URL")

    def snapshot(self) -> Person:
        """Owner identity without presentation fields."""
        return Person(id=self.id, name=self.name, email=self.email)


class Stakeholder(EngineModel):
    """Key contact on the customer side."""
    name: str
    title: str
    email: str


# ===========================================
# Sections
# ===========================================

class SectionBase(EngineModel):
    """Fields shared by section payloads and stored sections."""
    title: str = Field(..., description="Section title, e.g. 'Executive Summary'")
    content: str = Field("", description="Section body text")
    confidence: float = Field(..., ge=0.0, le=1.0, description="Confidence in the content (0-1)")
    sources: List[Source] = Field(default_factory=list)
    order: int = Field(..., description="1-based position in the document")
    reviewer_notes: Optional[str] = None
    word_count: int = Field(..., ge=0, description="Whitespace-token count of content")


class SectionDraft(SectionBase):
    """Payload for adding a section; the store assigns identity and stamps."""
    approval_state: Optional[ApprovalState] = None


class ProposalSection(SectionBase):
    """Independently approvable content block of a proposal."""
    id: str
    approval_state: ApprovalState = ApprovalState.DRAFT
    last_modified: UtcDatetime
    modified_by: str


# ===========================================
# Proposal
# ===========================================

class ProposalBase(EngineModel):
    """Fields shared by creation payloads and stored proposals."""
    title: str
    client_name: str
    client_id: str = Field(..., description="CRM opportunity or account id")
    opportunity_value: float = Field(..., description="Deal value in USD")
    status: ProposalStatus = ProposalStatus.DRAFT
    sections: List[ProposalSection] = Field(default_factory=list)
    open_questions: List[OpenQuestion] = Field(default_factory=list)
    nudges: List[Nudge] = Field(default_factory=list)
    review_requests: Optional[List[ReviewRequest]] = None
    due_date: UtcDatetime
    owner: Owner
    industry: Optional[str] = None
    stakeholders: Optional[List[Stakeholder]] = None


class ProposalDraft(ProposalBase):
    """
    Payload for creating a proposal.

    Identity and timestamps are optional; derived metrics supplied here are
    ignored because the store recomputes them from the sections.
    """
    id: Optional[str] = None
    created_at: Optional[UtcDatetime] = None
    last_modified: Optional[UtcDatetime] = None
    overall_confidence: Optional[float] = None
    total_word_count: Optional[int] = None


class Proposal(ProposalBase):
    """Root aggregate: a deal document negotiated through approval."""
    id: str
    created_at: UtcDatetime
    last_modified: UtcDatetime
    overall_confidence: float = Field(0.0, description="Mean section confidence, 2 decimals")
    total_word_count: int = Field(0, description="Sum of section word counts")

    def find_section(self, section_id: str) -> Optional[ProposalSection]:
        """Return the section with ``section_id`` or None."""
        return next((s for s in self.sections if s.id == section_id), None)
