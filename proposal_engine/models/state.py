"""Store state model - the snapshot persisted between sessions."""

from typing import Dict, Optional

from pydantic import Field

from proposal_engine.models.base import EngineModel
from proposal_engine.models.proposal import Proposal


class StoreState(EngineModel):
    """All proposals keyed by id plus the active-proposal pointer."""
    proposals: Dict[str, Proposal] = Field(default_factory=dict)
    active_proposal_id: Optional[str] = None
