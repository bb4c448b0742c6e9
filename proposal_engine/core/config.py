"""Configuration management for the proposal workflow engine."""

from functools import lru_cache
from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    """Engine settings loaded from environment variables."""

    # ===========================================
    # Runtime Configuration
    # ===========================================
    DEBUG: bool = Field(default=False, description="Debug mode")
    SNAPSHOT_PATH: str = Field(
        default="",
        description="JSON file holding the store snapshot (empty keeps state in memory)"
    )

    # ===========================================
    # Proposal Defaults
    # ===========================================
    DEFAULT_OPPORTUNITY_VALUE: int = Field(
        default=1_000_000,
        description="Deal value used when a create command names no amount"
    )
    DEFAULT_DUE_DAYS: int = Field(
        default=30,
        description="Calendar days from now for a new proposal's due date"
    )
    DEFAULT_OWNER_ID: str = Field(default="user-1", description="Owner id for chat-created proposals")
    DEFAULT_OWNER_NAME: str = Field(default="Current User", description="Owner name for chat-created proposals")
    DEFAULT_OWNER_EMAIL: str = Field(
        default="user@company.com",
        description="Owner email for chat-created proposals"
    )

    # ===========================================
    # Section Scoring
    # ===========================================
    TEMPLATE_SECTION_CONFIDENCE: float = Field(
        default=0.5,
        ge=0.0,
        le=1.0,
        description="Confidence assigned to sections added by the standard template"
    )
    LOW_CONFIDENCE_THRESHOLD: float = Field(
        default=0.6,
        ge=0.0,
        le=1.0,
        description="Sections below this confidence are flagged"
    )

    # ===========================================
    # Workflow Behaviour
    # ===========================================
    DERIVE_WORD_COUNT: bool = Field(
        default=False,
        description="Re-derive a section's word count whenever its content changes"
    )
    ENFORCE_APPROVAL_TRANSITIONS: bool = Field(
        default=False,
        description="Refuse approval-state changes outside the section state machine"
    )

    class Config:
        env_prefix = "PROPOSAL_ENGINE_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


@lru_cache()
def get_settings() -> Settings:
    """Get cached engine settings."""
    return Settings()
