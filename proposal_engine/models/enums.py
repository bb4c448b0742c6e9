"""Enumeration types for the proposal workflow."""

from enum import Enum


class ProposalStatus(str, Enum):
    """Status progression for a proposal through the deal workflow."""
    DRAFT = "draft"
    IN_REVIEW = "in_review"
    PENDING_APPROVAL = "pending_approval"
    APPROVED = "approved"
    REJECTED = "rejected"
    SENT = "sent"
    ACCEPTED = "accepted"
    DECLINED = "declined"


class ApprovalState(str, Enum):
    """Approval state of an individual proposal section."""
    DRAFT = "draft"
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"
    NEEDS_REVISION = "needs_revision"


class SourceType(str, Enum):
    """Kinds of provenance records that back section content."""
    CRM = "crm"
    DOCUMENT = "document"
    EMAIL = "email"
    MEETING_NOTES = "meeting_notes"
    PREVIOUS_PROPOSAL = "previous_proposal"
    CUSTOMER_WEBSITE = "customer_website"
    INTERNAL_WIKI = "internal_wiki"
    SALES_PLAYBOOK = "sales_playbook"


class Priority(str, Enum):
    """Priority levels for open questions and nudges."""
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class NudgeType(str, Enum):
    """Kinds of proactive nudges."""
    SUGGESTION = "suggestion"
    REMINDER = "reminder"
    WARNING = "warning"
    INFO = "info"
    BEST_PRACTICE = "best_practice"
    COMPLIANCE = "compliance"


class NudgeActionType(str, Enum):
    """What acting on a nudge does."""
    NAVIGATE = "navigate"
    EDIT = "edit"
    REVIEW = "review"
    DISMISS = "dismiss"


class ReviewStatus(str, Enum):
    """Lifecycle of an escalated review request."""
    ASSIGNED = "assigned"
    IN_PROGRESS = "in_progress"
    RESOLVED = "resolved"


class IntentType(str, Enum):
    """Commands the intent parser can recognise."""
    CREATE_PROPOSAL = "create_proposal"
    VIEW_PROPOSAL = "view_proposal"
    LIST_PROPOSALS = "list_proposals"
    UNKNOWN = "unknown"
