"""Metric calculators - derived figures over a proposal's sections."""

from decimal import Decimal, ROUND_HALF_UP
from typing import Dict, Iterable, List, Sequence

from proposal_engine.models import (
    ApprovalState,
    Nudge,
    OpenQuestion,
    Priority,
    Proposal,
    ProposalSection,
    Source,
)


def _round_half_up(value: float, places: int = 0) -> Decimal:
    exponent = Decimal(1).scaleb(-places)
    return Decimal(repr(value)).quantize(exponent, rounding=ROUND_HALF_UP)


# ===========================================
# Section Metrics
# ===========================================

def calculate_overall_confidence(sections: Sequence[ProposalSection]) -> float:
    """Mean section confidence rounded to 2 decimals; 0 for no sections."""
    if not sections:
        return 0.0
    mean = sum(section.confidence for section in sections) / len(sections)
    return float(_round_half_up(mean, 2))


def calculate_total_word_count(sections: Iterable[ProposalSection]) -> int:
    """
    Sum of the stored section word counts.

    Content is not re-counted here; a section's ``word_count`` is whatever
    the caller last stored.
    """
    return sum(section.word_count for section in sections)


def estimate_word_count(text: str) -> int:
    """Number of whitespace-delimited tokens in ``text``."""
    stripped = (text or "").strip()
    if not stripped:
        return 0
    return len(stripped.split())


def completion_percentage(proposal: Proposal) -> int:
    """Share of approved sections as a whole percentage; 0 for no sections."""
    if not proposal.sections:
        return 0
    approved = sum(
        1 for s in proposal.sections if s.approval_state == ApprovalState.APPROVED
    )
    return int(_round_half_up(100 * approved / len(proposal.sections)))


def recalculate_metrics(proposal: Proposal) -> Proposal:
    """Return ``proposal`` with its derived fields recomputed from its sections."""
    return proposal.model_copy(update={
        "overall_confidence": calculate_overall_confidence(proposal.sections),
        "total_word_count": calculate_total_word_count(proposal.sections),
    })


# ===========================================
# Workspace Helpers
# ===========================================

def count_by_priority(items: Iterable) -> Dict[Priority, int]:
    """Count questions or nudges per priority; every priority is present."""
    counts = {Priority.HIGH: 0, Priority.MEDIUM: 0, Priority.LOW: 0}
    for item in items:
        counts[Priority(item.priority)] += 1
    return counts


def active_questions(proposal: Proposal) -> List[OpenQuestion]:
    """Questions that have not been dismissed."""
    return [q for q in proposal.open_questions if not q.dismissed]


def active_nudges(proposal: Proposal) -> List[Nudge]:
    """Nudges that have not been dismissed."""
    return [n for n in proposal.nudges if not n.dismissed]


def unique_sources(proposal: Proposal) -> List[Source]:
    """Sources cited anywhere in the proposal, once each, most relevant first."""
    seen: Dict[str, Source] = {}
    for section in proposal.sections:
        for source in section.sources:
            seen.setdefault(source.id, source)
    return sorted(seen.values(), key=lambda s: s.relevance_score, reverse=True)


def low_confidence_section_ids(proposal: Proposal, threshold: float = 0.6) -> List[str]:
    """Ids of sections whose confidence is below ``threshold``."""
    return [s.id for s in proposal.sections if s.confidence < threshold]
