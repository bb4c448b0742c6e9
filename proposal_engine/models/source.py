"""Source model - provenance records referenced by sections and questions."""

from typing import Optional

from pydantic import ConfigDict, Field

from proposal_engine.models.base import EngineModel, UtcDatetime
from proposal_engine.models.enums import SourceType


class Source(EngineModel):
    """Provenance record backing section content. Immutable once attached."""

    model_config = ConfigDict(frozen=True)

    id: str
    type: SourceType
    title: str
    reference: str = Field(..., description="URL, file path or CRM record id")
    excerpt: Optional[str] = Field(None, description="Short excerpt of relevant content")
    last_updated: UtcDatetime
    relevance_score: float = Field(..., ge=0.0, le=1.0, description="Relevance (0-1)")
    author: Optional[str] = Field(None, description="Author or owner of the source")
