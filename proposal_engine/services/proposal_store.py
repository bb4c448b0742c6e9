"""Proposal Store - single source of truth for proposals and their workflow."""

import logging
import secrets
from datetime import datetime
from typing import Any, Dict, List, Mapping, Optional, Type, Union

from pydantic import BaseModel

from proposal_engine.core.config import Settings, get_settings
from proposal_engine.core.dates import ensure_utc, utcnow
from proposal_engine.models import (
    ApprovalState,
    MutationResult,
    NotFoundReason,
    Nudge,
    NudgeDraft,
    OpenQuestion,
    Person,
    Proposal,
    ProposalDraft,
    ProposalSection,
    ProposalStatus,
    QuestionDraft,
    ReviewComment,
    ReviewRequest,
    ReviewStatus,
    SectionDraft,
    StoreState,
)
from proposal_engine.services.metrics import estimate_word_count, recalculate_metrics
from proposal_engine.services.snapshot import StateBackend, build_backend
from proposal_engine.services.templates import STANDARD_SECTIONS

logger = logging.getLogger(__name__)

Payload = Union[Mapping[str, Any], BaseModel]

# Section approval state machine, consulted only when transitions are enforced
ALLOWED_TRANSITIONS: Dict[ApprovalState, frozenset] = {
    ApprovalState.DRAFT: frozenset({ApprovalState.PENDING}),
    ApprovalState.PENDING: frozenset({
        ApprovalState.APPROVED,
        ApprovalState.REJECTED,
        ApprovalState.NEEDS_REVISION,
    }),
    ApprovalState.REJECTED: frozenset({ApprovalState.PENDING}),
    ApprovalState.NEEDS_REVISION: frozenset({ApprovalState.PENDING}),
    ApprovalState.APPROVED: frozenset(),
}


def generate_id(prefix: str) -> str:
    """Generate an entity id: prefix followed by 12 hex characters."""
    return f"{prefix}-{secrets.token_hex(6)}"


def _as_dict(payload: Payload, partial: bool = False) -> Dict[str, Any]:
    """Normalize a model or mapping payload into a plain dict of fields."""
    if isinstance(payload, BaseModel):
        return payload.model_dump(exclude_unset=partial)
    return dict(payload)


def _field_names(model_cls: Type[BaseModel], updates: Dict[str, Any]) -> Dict[str, Any]:
    """Rewrite camelCase keys of a partial update to model field names."""
    names = {field.alias or name: name for name, field in model_cls.model_fields.items()}
    return {names.get(key, key): value for key, value in updates.items()}


def _merge(model: BaseModel, updates: Dict[str, Any]) -> BaseModel:
    """
    Merge ``updates`` into ``model`` and re-validate the result.

    Identity is never merged: an ``id`` in the update is ignored.
    """
    changes = _field_names(type(model), updates)
    changes.pop("id", None)
    return type(model).model_validate({**dict(model), **changes})


class ProposalStore:
    """
    Stateful proposal workflow engine.

    Owns every proposal keyed by id plus an active-proposal pointer. Each
    mutation reads the current snapshot, builds a new one and commits it
    through the state backend, so earlier snapshots are never modified.

    Unknown ids never raise. The state is left unchanged and the returned
    MutationResult explains why nothing was applied.
    """

    def __init__(
        self,
        backend: Optional[StateBackend] = None,
        settings: Optional[Settings] = None
    ):
        self.settings = settings or get_settings()
        self._backend = backend or build_backend(self.settings)
        logger.debug(f"Proposal store initialized with {type(self._backend).__name__}")

    # ===========================================
    # State Access
    # ===========================================

    @property
    def state(self) -> StoreState:
        """Current state snapshot."""
        return self._backend.load()

    @property
    def active_proposal_id(self) -> Optional[str]:
        return self.state.active_proposal_id

    def get_proposal(self, proposal_id: str) -> Optional[Proposal]:
        """Fetch proposal by id."""
        return self.state.proposals.get(proposal_id)

    def get_active_proposal(self) -> Optional[Proposal]:
        """Fetch the proposal the active pointer refers to, if any."""
        active_id = self.active_proposal_id
        if not active_id:
            return None
        return self.get_proposal(active_id)

    def get_all_proposals(self) -> List[Proposal]:
        """All proposals in insertion order."""
        return list(self.state.proposals.values())

    def _commit(self, state: StoreState) -> None:
        self._backend.save(state)

    def _lookup(self, proposal_id: str) -> Optional[Proposal]:
        proposal = self.get_proposal(proposal_id)
        if proposal is None:
            logger.warning(f"Proposal not found: {proposal_id}")
        return proposal

    def _save_proposal(self, proposal: Proposal, now: Optional[datetime] = None) -> None:
        """Stamp, recompute derived metrics and commit a changed proposal."""
        proposal = proposal.model_copy(update={"last_modified": now or utcnow()})
        proposal = recalculate_metrics(proposal)

        state = self.state
        proposals = dict(state.proposals)
        proposals[proposal.id] = proposal
        self._commit(state.model_copy(update={"proposals": proposals}))

    # ===========================================
    # Proposal Operations
    # ===========================================

    def create_proposal(self, data: Payload, proposal_id: Optional[str] = None) -> str:
        """
        Create a proposal and make it the active one.

        Args:
            data: Proposal fields (ProposalDraft, Proposal or a dict of either)
            proposal_id: Explicit id; falls back to ``data.id`` then a generated id

        Returns:
            Id of the new proposal
        """
        draft = ProposalDraft.model_validate(_as_dict(data))
        now = utcnow()
        new_id = proposal_id or draft.id or generate_id("prop")

        fields = {
            k: v for k, v in dict(draft).items()
            if k not in ("id", "created_at", "last_modified", "overall_confidence", "total_word_count")
        }
        proposal = Proposal.model_validate({
            **fields,
            "id": new_id,
            "created_at": draft.created_at or now,
            "last_modified": now,
        })
        proposal = recalculate_metrics(proposal)

        state = self.state
        proposals = dict(state.proposals)
        proposals[new_id] = proposal
        self._commit(StoreState(proposals=proposals, active_proposal_id=new_id))

        logger.info(f"Created proposal {new_id} for {proposal.client_name}")
        return new_id

    def update_proposal(self, proposal_id: str, updates: Payload) -> MutationResult:
        """Merge partial fields into a proposal."""
        proposal = self._lookup(proposal_id)
        if proposal is None:
            return MutationResult.not_applied(NotFoundReason.PROPOSAL, proposal_id)

        changes = _as_dict(updates, partial=True)
        self._save_proposal(_merge(proposal, changes))

        logger.info(f"Updated proposal {proposal_id}: {list(changes.keys())}")
        return MutationResult.ok(proposal_id)

    def delete_proposal(self, proposal_id: str) -> MutationResult:
        """Remove a proposal with everything it owns."""
        state = self.state
        if proposal_id not in state.proposals:
            logger.warning(f"Proposal not found: {proposal_id}")
            return MutationResult.not_applied(NotFoundReason.PROPOSAL, proposal_id)

        proposals = {k: v for k, v in state.proposals.items() if k != proposal_id}
        active_id = None if state.active_proposal_id == proposal_id else state.active_proposal_id
        self._commit(StoreState(proposals=proposals, active_proposal_id=active_id))

        logger.info(f"Deleted proposal {proposal_id}")
        return MutationResult.ok(proposal_id)

    def set_active_proposal(self, proposal_id: Optional[str]) -> None:
        """Point the active proposal at ``proposal_id`` (not validated)."""
        self._commit(self.state.model_copy(update={"active_proposal_id": proposal_id}))
        logger.debug(f"Active proposal set to {proposal_id}")

    def duplicate_proposal(self, proposal_id: str) -> Optional[str]:
        """
        Copy a proposal as a fresh draft.

        Sections, questions and nudges get new ids; approval states go back
        to draft, reviewer notes and dismissed flags are cleared. Sources
        stay shared. Review requests are not copied.

        Returns:
            Id of the copy, or None if the source proposal is unknown
        """
        proposal = self._lookup(proposal_id)
        if proposal is None:
            return None

        new_id = generate_id("prop")
        now = utcnow()

        sections = [
            section.model_copy(deep=True, update={
                "id": generate_id("sec"),
                "approval_state": ApprovalState.DRAFT,
                "reviewer_notes": None,
            })
            for section in proposal.sections
        ]
        questions = [
            question.model_copy(deep=True, update={"id": generate_id("q"), "dismissed": False})
            for question in proposal.open_questions
        ]
        nudges = [
            nudge.model_copy(deep=True, update={"id": generate_id("n"), "dismissed": False})
            for nudge in proposal.nudges
        ]

        duplicate = proposal.model_copy(deep=True, update={
            "id": new_id,
            "title": f"{proposal.title} (Copy)",
            "status": ProposalStatus.DRAFT,
            "created_at": now,
            "sections": sections,
            "open_questions": questions,
            "nudges": nudges,
            "review_requests": None,
        })
        self._save_proposal(duplicate, now=now)

        logger.info(f"Duplicated proposal {proposal_id} as {new_id}")
        return new_id

    # ===========================================
    # Section Operations
    # ===========================================

    def add_section(self, proposal_id: str, section: Payload) -> MutationResult:
        """
        Append a section to a proposal.

        The store assigns the id, stamps ``last_modified`` and sets
        ``modified_by`` to the proposal owner. Approval state defaults to draft.

        Returns:
            MutationResult whose ``value`` is the new section id
        """
        proposal = self._lookup(proposal_id)
        if proposal is None:
            return MutationResult.not_applied(NotFoundReason.PROPOSAL, proposal_id)

        draft = SectionDraft.model_validate(_as_dict(section))
        fields = dict(draft)
        fields["approval_state"] = draft.approval_state or ApprovalState.DRAFT
        if self.settings.DERIVE_WORD_COUNT:
            fields["word_count"] = estimate_word_count(draft.content)

        new_section = ProposalSection.model_validate({
            **fields,
            "id": generate_id("sec"),
            "last_modified": utcnow(),
            "modified_by": proposal.owner.name,
        })
        self._save_proposal(proposal.model_copy(update={
            "sections": [*proposal.sections, new_section],
        }))

        logger.info(f"Added section {new_section.id} '{new_section.title}' to {proposal_id}")
        return MutationResult.ok(proposal_id, value=new_section.id)

    def update_section(
        self,
        proposal_id: str,
        section_id: str,
        updates: Payload
    ) -> MutationResult:
        """Merge partial fields into one section and re-stamp it."""
        proposal = self._lookup(proposal_id)
        if proposal is None:
            return MutationResult.not_applied(NotFoundReason.PROPOSAL, proposal_id)
        if proposal.find_section(section_id) is None:
            logger.warning(f"Section {section_id} not found in {proposal_id}")
            return MutationResult.not_applied(NotFoundReason.SECTION, section_id)

        changes = _field_names(ProposalSection, _as_dict(updates, partial=True))
        # Blank editor falls back to the current one
        if not changes.get("modified_by"):
            changes.pop("modified_by", None)
        if self.settings.DERIVE_WORD_COUNT and "content" in changes:
            changes["word_count"] = estimate_word_count(changes["content"] or "")

        now = utcnow()
        sections = [
            _merge(section, {**changes, "last_modified": now})
            if section.id == section_id else section
            for section in proposal.sections
        ]
        self._save_proposal(proposal.model_copy(update={"sections": sections}), now=now)

        logger.debug(f"Updated section {section_id} in {proposal_id}: {list(changes.keys())}")
        return MutationResult.ok(section_id)

    def delete_section(self, proposal_id: str, section_id: str) -> MutationResult:
        """Remove a section from a proposal."""
        proposal = self._lookup(proposal_id)
        if proposal is None:
            return MutationResult.not_applied(NotFoundReason.PROPOSAL, proposal_id)
        if proposal.find_section(section_id) is None:
            logger.warning(f"Section {section_id} not found in {proposal_id}")
            return MutationResult.not_applied(NotFoundReason.SECTION, section_id)

        sections = [s for s in proposal.sections if s.id != section_id]
        self._save_proposal(proposal.model_copy(update={"sections": sections}))

        logger.info(f"Deleted section {section_id} from {proposal_id}")
        return MutationResult.ok(section_id)

    def reorder_sections(self, proposal_id: str, section_ids: List[str]) -> MutationResult:
        """
        Re-sequence sections to follow ``section_ids``, numbered 1..N.

        Ids that match no section are ignored and sections missing from the
        list are dropped, so an incomplete list shrinks the proposal.
        """
        proposal = self._lookup(proposal_id)
        if proposal is None:
            return MutationResult.not_applied(NotFoundReason.PROPOSAL, proposal_id)

        by_id = {s.id: s for s in proposal.sections}
        sections: List[ProposalSection] = []
        for section_id in section_ids:
            section = by_id.pop(section_id, None)
            if section is not None:
                sections.append(section.model_copy(update={"order": len(sections) + 1}))

        if by_id:
            logger.info(f"Reorder dropped {len(by_id)} sections from {proposal_id}")
        self._save_proposal(proposal.model_copy(update={"sections": sections}))
        return MutationResult.ok(proposal_id)

    # ===========================================
    # Approval Transitions
    # ===========================================

    def _set_approval_state(
        self,
        proposal_id: str,
        section_id: str,
        target: ApprovalState,
        updates: Dict[str, Any]
    ) -> MutationResult:
        if self.settings.ENFORCE_APPROVAL_TRANSITIONS:
            proposal = self.get_proposal(proposal_id)
            section = proposal.find_section(section_id) if proposal else None
            if section is not None and target not in ALLOWED_TRANSITIONS[section.approval_state]:
                logger.warning(
                    f"Refused transition {section.approval_state.value} -> {target.value} "
                    f"for section {section_id}"
                )
                return MutationResult.not_applied(NotFoundReason.INVALID_TRANSITION, section_id)

        return self.update_section(proposal_id, section_id, {"approval_state": target, **updates})

    def submit_section(self, proposal_id: str, section_id: str) -> MutationResult:
        """Send a section for review (approval state pending)."""
        return self._set_approval_state(proposal_id, section_id, ApprovalState.PENDING, {})

    def approve_section(
        self,
        proposal_id: str,
        section_id: str,
        reviewer_notes: Optional[str] = None
    ) -> MutationResult:
        return self._set_approval_state(
            proposal_id, section_id, ApprovalState.APPROVED, {"reviewer_notes": reviewer_notes}
        )

    def reject_section(self, proposal_id: str, section_id: str, reviewer_notes: str) -> MutationResult:
        return self._set_approval_state(
            proposal_id, section_id, ApprovalState.REJECTED, {"reviewer_notes": reviewer_notes}
        )

    def request_revision_section(
        self,
        proposal_id: str,
        section_id: str,
        reviewer_notes: str
    ) -> MutationResult:
        return self._set_approval_state(
            proposal_id, section_id, ApprovalState.NEEDS_REVISION, {"reviewer_notes": reviewer_notes}
        )

    # ===========================================
    # Question Operations
    # ===========================================

    def add_question(self, proposal_id: str, question: Payload) -> MutationResult:
        """Record a new open question; ``value`` is its id."""
        proposal = self._lookup(proposal_id)
        if proposal is None:
            return MutationResult.not_applied(NotFoundReason.PROPOSAL, proposal_id)

        draft = QuestionDraft.model_validate(_as_dict(question))
        new_question = OpenQuestion.model_validate({
            **dict(draft),
            "id": generate_id("q"),
            "created_at": utcnow(),
            "dismissed": False,
        })
        self._save_proposal(proposal.model_copy(update={
            "open_questions": [*proposal.open_questions, new_question],
        }))

        logger.info(f"Added question {new_question.id} to {proposal_id}")
        return MutationResult.ok(proposal_id, value=new_question.id)

    def update_question(
        self,
        proposal_id: str,
        question_id: str,
        updates: Payload
    ) -> MutationResult:
        proposal = self._lookup(proposal_id)
        if proposal is None:
            return MutationResult.not_applied(NotFoundReason.PROPOSAL, proposal_id)
        if not any(q.id == question_id for q in proposal.open_questions):
            logger.warning(f"Question {question_id} not found in {proposal_id}")
            return MutationResult.not_applied(NotFoundReason.QUESTION, question_id)

        changes = _as_dict(updates, partial=True)
        questions = [
            _merge(q, changes) if q.id == question_id else q
            for q in proposal.open_questions
        ]
        self._save_proposal(proposal.model_copy(update={"open_questions": questions}))
        return MutationResult.ok(question_id)

    def dismiss_question(self, proposal_id: str, question_id: str) -> MutationResult:
        """Soft-dismiss a question; it stays in ``open_questions``."""
        return self.update_question(proposal_id, question_id, {"dismissed": True})

    def resolve_question(self, proposal_id: str, question_id: str) -> MutationResult:
        """Mark a question answered by removing it."""
        return self.delete_question(proposal_id, question_id)

    def delete_question(self, proposal_id: str, question_id: str) -> MutationResult:
        proposal = self._lookup(proposal_id)
        if proposal is None:
            return MutationResult.not_applied(NotFoundReason.PROPOSAL, proposal_id)
        if not any(q.id == question_id for q in proposal.open_questions):
            logger.warning(f"Question {question_id} not found in {proposal_id}")
            return MutationResult.not_applied(NotFoundReason.QUESTION, question_id)

        questions = [q for q in proposal.open_questions if q.id != question_id]
        self._save_proposal(proposal.model_copy(update={"open_questions": questions}))

        logger.info(f"Removed question {question_id} from {proposal_id}")
        return MutationResult.ok(question_id)

    # ===========================================
    # Nudge Operations
    # ===========================================

    def add_nudge(self, proposal_id: str, nudge: Payload) -> MutationResult:
        """Record a new nudge; ``value`` is its id."""
        proposal = self._lookup(proposal_id)
        if proposal is None:
            return MutationResult.not_applied(NotFoundReason.PROPOSAL, proposal_id)

        draft = NudgeDraft.model_validate(_as_dict(nudge))
        new_nudge = Nudge.model_validate({
            **dict(draft),
            "id": generate_id("n"),
            "created_at": utcnow(),
            "dismissed": False,
        })
        self._save_proposal(proposal.model_copy(update={
            "nudges": [*proposal.nudges, new_nudge],
        }))

        logger.info(f"Added {new_nudge.type.value} nudge {new_nudge.id} to {proposal_id}")
        return MutationResult.ok(proposal_id, value=new_nudge.id)

    def update_nudge(self, proposal_id: str, nudge_id: str, updates: Payload) -> MutationResult:
        proposal = self._lookup(proposal_id)
        if proposal is None:
            return MutationResult.not_applied(NotFoundReason.PROPOSAL, proposal_id)
        if not any(n.id == nudge_id for n in proposal.nudges):
            logger.warning(f"Nudge {nudge_id} not found in {proposal_id}")
            return MutationResult.not_applied(NotFoundReason.NUDGE, nudge_id)

        changes = _as_dict(updates, partial=True)
        nudges = [_merge(n, changes) if n.id == nudge_id else n for n in proposal.nudges]
        self._save_proposal(proposal.model_copy(update={"nudges": nudges}))
        return MutationResult.ok(nudge_id)

    def dismiss_nudge(self, proposal_id: str, nudge_id: str) -> MutationResult:
        """Soft-dismiss a nudge; it stays in ``nudges``."""
        return self.update_nudge(proposal_id, nudge_id, {"dismissed": True})

    def delete_nudge(self, proposal_id: str, nudge_id: str) -> MutationResult:
        proposal = self._lookup(proposal_id)
        if proposal is None:
            return MutationResult.not_applied(NotFoundReason.PROPOSAL, proposal_id)
        if not any(n.id == nudge_id for n in proposal.nudges):
            logger.warning(f"Nudge {nudge_id} not found in {proposal_id}")
            return MutationResult.not_applied(NotFoundReason.NUDGE, nudge_id)

        nudges = [n for n in proposal.nudges if n.id != nudge_id]
        self._save_proposal(proposal.model_copy(update={"nudges": nudges}))

        logger.info(f"Deleted nudge {nudge_id} from {proposal_id}")
        return MutationResult.ok(nudge_id)

    def clear_expired_nudges(
        self,
        proposal_id: str,
        now: Optional[datetime] = None
    ) -> MutationResult:
        """
        Purge nudges whose ``expires_at`` lies strictly before ``now``.

        Nudges without an expiry are kept. Nothing calls this automatically.

        Returns:
            MutationResult whose ``value`` is the number of nudges removed
        """
        proposal = self._lookup(proposal_id)
        if proposal is None:
            return MutationResult.not_applied(NotFoundReason.PROPOSAL, proposal_id)

        cutoff = ensure_utc(now) if now else utcnow()
        nudges = [n for n in proposal.nudges if n.expires_at is None or n.expires_at >= cutoff]
        removed = len(proposal.nudges) - len(nudges)
        self._save_proposal(proposal.model_copy(update={"nudges": nudges}))

        if removed:
            logger.info(f"Cleared {removed} expired nudges from {proposal_id}")
        return MutationResult.ok(proposal_id, value=removed)

    # ===========================================
    # Templates and Escalation
    # ===========================================

    def apply_standard_template(self, proposal_id: str) -> MutationResult:
        """
        Fill in any missing canonical sections.

        Titles already present (case-insensitive) are skipped; the rest are
        appended as draft sections with starter text for the client, then all
        sections are renumbered 1..N in their existing order.

        Returns:
            MutationResult whose ``value`` lists the ids of added sections
        """
        proposal = self._lookup(proposal_id)
        if proposal is None:
            return MutationResult.not_applied(NotFoundReason.PROPOSAL, proposal_id)

        now = utcnow()
        existing = {s.title.lower() for s in proposal.sections}
        sections = list(proposal.sections)
        added: List[str] = []

        for template in STANDARD_SECTIONS:
            if template.title.lower() in existing:
                continue
            content = template.render(proposal.client_name)
            section = ProposalSection(
                id=generate_id("sec"),
                title=template.title,
                content=content,
                confidence=self.settings.TEMPLATE_SECTION_CONFIDENCE,
                sources=[],
                approval_state=ApprovalState.DRAFT,
                order=len(sections) + 1,
                last_modified=now,
                modified_by=proposal.owner.name,
                word_count=estimate_word_count(content),
            )
            sections.append(section)
            added.append(section.id)

        ordered = [
            s.model_copy(update={"order": index})
            for index, s in enumerate(sorted(sections, key=lambda s: s.order), start=1)
        ]
        self._save_proposal(proposal.model_copy(update={"sections": ordered}), now=now)

        logger.info(f"Applied standard template to {proposal_id}: {len(added)} sections added")
        return MutationResult.ok(proposal_id, value=added)

    def create_review_request(
        self,
        proposal_id: str,
        reason: str,
        assignee: Union[Person, Mapping[str, Any]],
        related_section_ids: Optional[List[str]] = None,
        related_question_ids: Optional[List[str]] = None
    ) -> Optional[str]:
        """
        Escalate a proposal to a human reviewer.

        The request starts ``assigned`` with one comment from the owner
        echoing the reason.

        Returns:
            Id of the review request, or None if the proposal is unknown
        """
        proposal = self._lookup(proposal_id)
        if proposal is None:
            return None

        now = utcnow()
        created_by = proposal.owner.snapshot()
        request = ReviewRequest(
            id=generate_id("rev"),
            created_at=now,
            created_by=created_by,
            assignee=Person.model_validate(_as_dict(assignee)),
            reason=reason,
            related_section_ids=related_section_ids,
            related_question_ids=related_question_ids,
            status=ReviewStatus.ASSIGNED,
            comments=[
                ReviewComment(
                    id=generate_id("c"),
                    author=created_by,
                    message=f"Escalated for review: {reason}",
                    created_at=now,
                )
            ],
        )
        self._save_proposal(proposal.model_copy(update={
            "review_requests": [*(proposal.review_requests or []), request],
        }), now=now)

        logger.info(f"Escalated {proposal_id} to {request.assignee.name} ({request.id})")
        return request.id

    def add_review_comment(self, proposal_id: str, request_id: str, message: str) -> MutationResult:
        """Append an owner comment to a review request; blank messages are ignored."""
        text = (message or "").strip()
        if not text:
            return MutationResult.not_applied(NotFoundReason.EMPTY_MESSAGE, request_id)

        proposal = self._lookup(proposal_id)
        if proposal is None:
            return MutationResult.not_applied(NotFoundReason.PROPOSAL, proposal_id)

        requests = proposal.review_requests or []
        if not any(r.id == request_id for r in requests):
            logger.warning(f"Review request {request_id} not found in {proposal_id}")
            return MutationResult.not_applied(NotFoundReason.REQUEST, request_id)

        comment = ReviewComment(
            id=generate_id("c"),
            author=proposal.owner.snapshot(),
            message=text,
            created_at=utcnow(),
        )
        updated = [
            r.model_copy(update={"comments": [*r.comments, comment]}) if r.id == request_id else r
            for r in requests
        ]
        self._save_proposal(proposal.model_copy(update={"review_requests": updated}))
        return MutationResult.ok(request_id, value=comment.id)

    def update_review_request_status(
        self,
        proposal_id: str,
        request_id: str,
        status: ReviewStatus
    ) -> MutationResult:
        """Move a review request to ``status`` (in_progress or resolved)."""
        proposal = self._lookup(proposal_id)
        if proposal is None:
            return MutationResult.not_applied(NotFoundReason.PROPOSAL, proposal_id)

        requests = proposal.review_requests or []
        if not any(r.id == request_id for r in requests):
            logger.warning(f"Review request {request_id} not found in {proposal_id}")
            return MutationResult.not_applied(NotFoundReason.REQUEST, request_id)

        status = ReviewStatus(status)
        updated = [
            r.model_copy(update={"status": status}) if r.id == request_id else r
            for r in requests
        ]
        self._save_proposal(proposal.model_copy(update={"review_requests": updated}))

        logger.info(f"Review request {request_id} is now {status.value}")
        return MutationResult.ok(request_id)

    # ===========================================
    # Bulk Operations
    # ===========================================

    def clear_all_data(self) -> None:
        """Remove every proposal and clear the active pointer."""
        self._commit(StoreState())
        logger.info("Cleared all proposal data")

    def import_proposal(self, proposal: Union[Proposal, Mapping[str, Any]]) -> str:
        """
        Insert or overwrite a fully formed proposal under its own id.

        Bypasses creation: nothing is stamped or recomputed and the active
        pointer is left alone.
        """
        if not isinstance(proposal, Proposal):
            proposal = Proposal.model_validate(proposal)

        state = self.state
        proposals = dict(state.proposals)
        proposals[proposal.id] = proposal
        self._commit(state.model_copy(update={"proposals": proposals}))

        logger.info(f"Imported proposal {proposal.id}")
        return proposal.id
