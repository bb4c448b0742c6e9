"""Command handler - applies parsed chat intents to the proposal store."""

import logging
from typing import Optional

from proposal_engine.core.config import Settings
from proposal_engine.core.dates import utcnow
from proposal_engine.models import (
    ApprovalState,
    CommandOutcome,
    IntentType,
    Owner,
    ParsedIntent,
    ProposalDraft,
    ProposalSection,
    ProposalStatus,
)
from proposal_engine.services.intent_parser import (
    generate_client_id,
    get_default_due_date,
    parse_intent,
)
from proposal_engine.services.metrics import estimate_word_count
from proposal_engine.services.proposal_store import ProposalStore, generate_id
from proposal_engine.services.templates import CHAT_EXECUTIVE_SUMMARY

logger = logging.getLogger(__name__)

HELP_MESSAGE = (
    "I didn't quite understand that. Try:\n\n"
    '• "Create proposal for Acme Corp"\n'
    '• "Create proposal for TechCo worth $500K"\n'
    '• "List all proposals"\n'
    '• "View proposal for Acme"'
)


def display_client_name(client_name: str) -> str:
    """Capitalize each space-separated word of a lower-cased client name."""
    return " ".join(word[:1].upper() + word[1:] for word in client_name.split(" "))


def format_thousands(value: float) -> str:
    """Render a deal value as whole thousands, e.g. ``$500K``."""
    return f"${value / 1000:.0f}K"


class CommandHandler:
    """
    Routes free-text chat commands to store operations.

    Handles:
    - create_proposal: new draft proposal with a starter executive summary
    - view_proposal: activates the first proposal whose client matches
    - list_proposals: returns every proposal
    - unknown: help text, no state change
    """

    def __init__(self, store: ProposalStore, settings: Optional[Settings] = None):
        self.store = store
        self.settings = settings or store.settings

    def handle(self, text: str) -> CommandOutcome:
        """Parse ``text`` and apply the resulting intent."""
        intent = parse_intent(text)
        logger.info(f"Handling {intent.type.value} command (confidence {intent.confidence})")

        if intent.type == IntentType.CREATE_PROPOSAL:
            return self._create_proposal(intent)
        if intent.type == IntentType.VIEW_PROPOSAL:
            return self._view_proposal(intent)
        if intent.type == IntentType.LIST_PROPOSALS:
            return self._list_proposals(intent)
        return CommandOutcome(intent=intent, message=HELP_MESSAGE)

    def _owner(self) -> Owner:
        return Owner(
            id=self.settings.DEFAULT_OWNER_ID,
            name=self.settings.DEFAULT_OWNER_NAME,
            email=self.settings.DEFAULT_OWNER_EMAIL,
        )

    def _create_proposal(self, intent: ParsedIntent) -> CommandOutcome:
        client_name = display_client_name(str(intent.params["clientName"]))
        opportunity_value = int(intent.params["opportunityValue"])
        now = utcnow()

        summary = CHAT_EXECUTIVE_SUMMARY.render(client_name=client_name)
        draft = ProposalDraft(
            title=f"{client_name} - Proposal",
            client_name=client_name,
            client_id=generate_client_id(client_name),
            opportunity_value=opportunity_value,
            status=ProposalStatus.DRAFT,
            sections=[
                ProposalSection(
                    id=generate_id("sec"),
                    title="Executive Summary",
                    content=summary,
                    confidence=0.6,
                    sources=[],
                    approval_state=ApprovalState.DRAFT,
                    order=1,
                    last_modified=now,
                    modified_by="AI Copilot",
                    word_count=estimate_word_count(summary),
                )
            ],
            due_date=get_default_due_date(self.settings.DEFAULT_DUE_DAYS),
            owner=self._owner(),
        )
        proposal_id = self.store.create_proposal(draft)

        return CommandOutcome(
            intent=intent,
            proposal_id=proposal_id,
            message=(
                f"I've created a new proposal for **{client_name}** worth "
                f"{format_thousands(opportunity_value)}. Here's the outline:"
            ),
        )

    def _view_proposal(self, intent: ParsedIntent) -> CommandOutcome:
        query = str(intent.params["query"]).lower()
        found = next(
            (p for p in self.store.get_all_proposals() if query in p.client_name.lower()),
            None,
        )

        if found is None:
            logger.info(f"No proposal matches {query!r}")
            return CommandOutcome(
                intent=intent,
                message=(
                    f'I couldn\'t find a proposal matching "{query}". '
                    'Try "List all proposals" to see what\'s available.'
                ),
            )

        self.store.set_active_proposal(found.id)
        return CommandOutcome(
            intent=intent,
            proposal_id=found.id,
            message=f"Here's the proposal for **{found.client_name}**:",
        )

    def _list_proposals(self, intent: ParsedIntent) -> CommandOutcome:
        proposals = self.store.get_all_proposals()

        if not proposals:
            return CommandOutcome(
                intent=intent,
                message=(
                    "You don't have any proposals yet. Try creating one with "
                    '"Create proposal for [Client Name]"'
                ),
            )

        lines = [
            f"{index}. **{p.client_name}** - {p.title} "
            f"({format_thousands(p.opportunity_value)}, {p.status.value})"
            for index, p in enumerate(proposals, start=1)
        ]
        return CommandOutcome(
            intent=intent,
            proposals=proposals,
            message="Here are your proposals:\n\n" + "\n".join(lines),
        )
