"""Tests for the metric calculators and workspace helpers."""

from datetime import datetime, timezone

import pytest

from proposal_engine.models import ApprovalState, Priority, ProposalSection
from proposal_engine.services.metrics import (
    active_nudges,
    active_questions,
    calculate_overall_confidence,
    calculate_total_word_count,
    completion_percentage,
    count_by_priority,
    estimate_word_count,
    low_confidence_section_ids,
    recalculate_metrics,
    unique_sources,
)


def make_section(section_id: str, confidence: float, word_count: int = 0, state: str = "draft"):
    return ProposalSection(
        id=section_id,
        title=f"Section {section_id}",
        content="",
        confidence=confidence,
        order=1,
        last_modified=datetime(2025, 1, 1, tzinfo=timezone.utc),
        modified_by="tester",
        word_count=word_count,
        approval_state=state,
    )


class TestOverallConfidence:
    """Tests for calculate_overall_confidence."""

    def test_empty_sections_is_zero(self):
        assert calculate_overall_confidence([]) == 0

    def test_mean_rounded_to_two_places(self):
        sections = [make_section("a", 0.88), make_section("b", 0.75), make_section("c", 0.45)]
        assert calculate_overall_confidence(sections) == 0.69

    def test_rounds_half_up(self):
        sections = [make_section("a", 0.845)]
        assert calculate_overall_confidence(sections) == 0.85

    def test_single_section(self):
        assert calculate_overall_confidence([make_section("a", 1.0)]) == 1.0


class TestWordCounts:
    """Tests for word count calculations."""

    def test_total_uses_stored_counts(self):
        sections = [make_section("a", 0.5, 120), make_section("b", 0.5, 30)]
        assert calculate_total_word_count(sections) == 150

    def test_total_of_nothing_is_zero(self):
        assert calculate_total_word_count([]) == 0

    @pytest.mark.parametrize("text,expected", [
        ("", 0),
        ("   ", 0),
        ("one", 1),
        ("  two   words ", 2),
        ("tabs\tand\nnewlines count too", 5),
    ])
    def test_estimate_word_count(self, text, expected):
        assert estimate_word_count(text) == expected


class TestCompletion:
    """Tests for completion_percentage."""

    def test_sample_proposal(self, store, proposal_id):
        proposal = store.get_proposal(proposal_id)
        assert completion_percentage(proposal) == 33

    def test_no_sections_is_zero(self, store, empty_proposal_data):
        proposal = store.get_proposal(store.create_proposal(empty_proposal_data))
        assert completion_percentage(proposal) == 0

    def test_half_rounds_up(self, store, proposal_id):
        proposal = store.get_proposal(proposal_id)
        sections = [make_section(str(i), 0.5, state="approved") for i in range(1)]
        sections += [make_section(str(i), 0.5) for i in range(1, 8)]
        assert completion_percentage(proposal.model_copy(update={"sections": sections})) == 13


class TestRecalculate:
    """Tests for recalculate_metrics."""

    def test_recomputes_stale_fields(self, store, proposal_id):
        proposal = store.get_proposal(proposal_id)
        stale = proposal.model_copy(update={"overall_confidence": 0.1, "total_word_count": 9999})

        fresh = recalculate_metrics(stale)

        assert fresh.overall_confidence == 0.69
        assert fresh.total_word_count == 26
        assert stale.total_word_count == 9999


class TestWorkspaceHelpers:
    """Tests for the proposal projection helpers."""

    def test_count_by_priority_has_every_key(self, store, proposal_id):
        proposal = store.get_proposal(proposal_id)
        counts = count_by_priority(proposal.nudges)
        assert counts == {Priority.HIGH: 1, Priority.MEDIUM: 0, Priority.LOW: 1}

    def test_active_items_skip_dismissed(self, store, proposal_id):
        proposal = store.get_proposal(proposal_id)
        assert [q.id for q in active_questions(proposal)] == ["q-001"]
        assert len(active_nudges(proposal)) == 2

    def test_unique_sources_sorted_by_relevance(self, store, proposal_id):
        proposal = store.get_proposal(proposal_id)
        sources = unique_sources(proposal)
        assert [s.id for s in sources] == ["src-001", "src-002", "src-007"]

    def test_low_confidence_section_ids(self, store, proposal_id):
        proposal = store.get_proposal(proposal_id)
        assert low_confidence_section_ids(proposal) == ["sec-003"]
        assert low_confidence_section_ids(proposal, threshold=0.8) == ["sec-002", "sec-003"]

    def test_sections_accept_enum_states(self):
        section = make_section("a", 0.5, state=ApprovalState.APPROVED)
        assert section.approval_state == ApprovalState.APPROVED
        assert section.approval_state == "approved"
