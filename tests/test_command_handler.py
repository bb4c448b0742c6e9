"""Tests for applying chat commands to the store."""

import pytest

from proposal_engine.models import ApprovalState, IntentType, ProposalStatus
from proposal_engine.services import CommandHandler
from proposal_engine.services.command_handler import (
    HELP_MESSAGE,
    display_client_name,
    format_thousands,
)


@pytest.fixture
def handler(store) -> CommandHandler:
    return CommandHandler(store)


class TestCreateCommand:
    """Tests for 'create proposal for ...'."""

    def test_creates_draft_proposal(self, store, handler):
        outcome = handler.handle("Create proposal for TechCo worth $500K")

        proposal = store.get_proposal(outcome.proposal_id)
        assert outcome.intent.type == IntentType.CREATE_PROPOSAL
        assert proposal.client_name == "Techco"
        assert proposal.title == "Techco - Proposal"
        assert proposal.client_id == "CRM-techco"
        assert proposal.opportunity_value == 500000
        assert proposal.status == ProposalStatus.DRAFT
        assert proposal.owner.name == "Current User"
        assert store.active_proposal_id == proposal.id
        assert "$500K" in outcome.message

    def test_starter_executive_summary(self, store, handler):
        outcome = handler.handle("create a proposal for contoso manufacturing")

        proposal = store.get_proposal(outcome.proposal_id)
        assert len(proposal.sections) == 1
        section = proposal.sections[0]
        assert section.title == "Executive Summary"
        assert section.content.startswith(
            "This proposal outlines our recommended approach for Contoso Manufacturing."
        )
        assert section.confidence == 0.6
        assert section.approval_state == ApprovalState.DRAFT
        assert section.modified_by == "AI Copilot"
        assert section.order == 1
        assert proposal.overall_confidence == 0.6
        assert proposal.total_word_count == section.word_count > 0

    def test_due_date_is_in_the_future(self, store, handler):
        outcome = handler.handle("create proposal for acme")
        proposal = store.get_proposal(outcome.proposal_id)

        assert (proposal.due_date - proposal.created_at).days in (29, 30)
        assert proposal.opportunity_value == 1000000


class TestViewAndListCommands:

    def test_view_activates_matching_proposal(self, store, handler, proposal_id, empty_proposal_data):
        store.create_proposal(empty_proposal_data)

        outcome = handler.handle("show proposal for contoso")

        assert outcome.proposal_id == proposal_id
        assert store.active_proposal_id == proposal_id
        assert "Contoso Manufacturing" in outcome.message

    def test_view_without_match(self, store, handler, proposal_id):
        store.set_active_proposal(None)

        outcome = handler.handle("view proposal for nobody")

        assert outcome.proposal_id is None
        assert store.active_proposal_id is None
        assert "couldn't find" in outcome.message

    def test_list_proposals(self, store, handler, proposal_id):
        outcome = handler.handle("list all proposals")

        assert [p.id for p in outcome.proposals] == [proposal_id]
        assert "Contoso Manufacturing" in outcome.message
        assert "$2400K" in outcome.message

    def test_list_when_empty(self, handler):
        outcome = handler.handle("list proposals")

        assert outcome.proposals == []
        assert "don't have any proposals" in outcome.message


class TestUnknownCommand:

    def test_unknown_returns_help_without_changes(self, store, handler, proposal_id):
        before = store.state

        outcome = handler.handle("Tell me a joke")

        assert outcome.intent.type == IntentType.UNKNOWN
        assert outcome.message == HELP_MESSAGE
        assert store.state == before


class TestFormatting:

    @pytest.mark.parametrize("name,expected", [
        ("acme corp", "Acme Corp"),
        ("techco", "Techco"),
        ("o'reilly & associates", "O'reilly & Associates"),
    ])
    def test_display_client_name(self, name, expected):
        assert display_client_name(name) == expected

    def test_format_thousands(self):
        assert format_thousands(500000) == "$500K"
        assert format_thousands(2500000) == "$2500K"
