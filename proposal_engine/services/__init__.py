"""Services - the proposal store and everything computed over it."""

from proposal_engine.services.proposal_store import ProposalStore
from proposal_engine.services.selectors import ProposalSelectors
from proposal_engine.services.intent_parser import parse_intent, generate_client_id, get_default_due_date
from proposal_engine.services.command_handler import CommandHandler
from proposal_engine.services.snapshot import (
    StateBackend,
    InMemoryBackend,
    JsonFileBackend,
    build_backend,
    dump_state,
    load_state,
)

__all__ = [
    "ProposalStore",
    "ProposalSelectors",
    "parse_intent",
    "generate_client_id",
    "get_default_due_date",
    "CommandHandler",
    "StateBackend",
    "InMemoryBackend",
    "JsonFileBackend",
    "build_backend",
    "dump_state",
    "load_state",
]
