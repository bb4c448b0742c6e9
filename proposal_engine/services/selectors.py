"""Selectors - read-only queries over the proposal store."""

from typing import List, Optional

from proposal_engine.models import (
    ApprovalState,
    HighPriorityItems,
    Nudge,
    OpenQuestion,
    Priority,
    Proposal,
    ProposalSection,
    ProposalStatus,
)
from proposal_engine.services.metrics import (
    active_nudges,
    active_questions,
    completion_percentage,
    low_confidence_section_ids,
)
from proposal_engine.services.proposal_store import ProposalStore


class ProposalSelectors:
    """
    Derived queries over a store's current state.

    Nothing is cached: every call reads the store as it is at call time.
    Unknown proposal ids yield empty results.
    """

    def __init__(self, store: ProposalStore):
        self.store = store

    def get_proposals_by_status(self, status: ProposalStatus) -> List[Proposal]:
        return [p for p in self.store.get_all_proposals() if p.status == status]

    def get_sections_by_approval_state(
        self,
        proposal_id: str,
        state: ApprovalState
    ) -> List[ProposalSection]:
        proposal = self.store.get_proposal(proposal_id)
        if proposal is None:
            return []
        return [s for s in proposal.sections if s.approval_state == state]

    def get_active_questions(
        self,
        proposal_id: str,
        priority: Optional[Priority] = None
    ) -> List[OpenQuestion]:
        """Non-dismissed questions, optionally limited to one priority."""
        proposal = self.store.get_proposal(proposal_id)
        if proposal is None:
            return []
        questions = active_questions(proposal)
        if priority:
            questions = [q for q in questions if q.priority == priority]
        return questions

    def get_active_nudges(
        self,
        proposal_id: str,
        priority: Optional[Priority] = None
    ) -> List[Nudge]:
        """Non-dismissed nudges, optionally limited to one priority."""
        proposal = self.store.get_proposal(proposal_id)
        if proposal is None:
            return []
        nudges = active_nudges(proposal)
        if priority:
            nudges = [n for n in nudges if n.priority == priority]
        return nudges

    def get_completion_percentage(self, proposal_id: str) -> int:
        proposal = self.store.get_proposal(proposal_id)
        if proposal is None:
            return 0
        return completion_percentage(proposal)

    def get_high_priority_items(self, proposal_id: str) -> HighPriorityItems:
        """Active high-priority questions and nudges together."""
        return HighPriorityItems(
            questions=self.get_active_questions(proposal_id, Priority.HIGH),
            nudges=self.get_active_nudges(proposal_id, Priority.HIGH),
        )

    def get_low_confidence_sections(self, proposal_id: str) -> List[ProposalSection]:
        """Sections below the configured LOW_CONFIDENCE_THRESHOLD."""
        proposal = self.store.get_proposal(proposal_id)
        if proposal is None:
            return []
        flagged = set(low_confidence_section_ids(
            proposal, self.store.settings.LOW_CONFIDENCE_THRESHOLD
        ))
        return [s for s in proposal.sections if s.id in flagged]
