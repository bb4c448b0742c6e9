"""
Proposal workflow engine.

State and workflow core for a Copilot-style sales-proposal tool: proposals
made of approvable sections, open questions and nudges, review escalation,
derived confidence and completion metrics, and a small chat intent parser.
"""

from proposal_engine.services import (
    ProposalStore,
    ProposalSelectors,
    CommandHandler,
    parse_intent,
)

__version__ = "0.1.0"

__all__ = [
    "ProposalStore",
    "ProposalSelectors",
    "CommandHandler",
    "parse_intent",
]
