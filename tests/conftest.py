"""Pytest fixtures and configuration for proposal engine tests."""

import pytest
from datetime import datetime, timedelta, timezone
from typing import Dict, Any

from proposal_engine.core.config import Settings
from proposal_engine.services import InMemoryBackend, ProposalSelectors, ProposalStore


# ===========================================
# Sample Data Fixtures
# ===========================================

@pytest.fixture
def sample_sources() -> list:
    """Provenance records shared between sections."""
    return [
        {
            "id": "src-001",
            "type": "crm",
            "title": "Contoso Manufacturing - Opportunity Record",
            "reference": "crm://opportunities/OPP-2024-1847",
            "excerpt": "Enterprise cloud migration, 5-year deal, $2.4M ARR.",
            "lastUpdated": "2024-12-15T10:30:00Z",
            "relevanceScore": 0.95,
            "author": "John Miller",
        },
        {
            "id": "src-002",
            "type": "meeting_notes",
            "title": "Discovery Call with Contoso CTO",
            "reference": "meetings://notes/MTG-20241212-001",
            "excerpt": "99.9% uptime SLA, HIPAA compliance, multi-region deployment.",
            "lastUpdated": "2024-12-12T15:45:00Z",
            "relevanceScore": 0.92,
            "author": "Jennifer Park",
        },
        {
            "id": "src-007",
            "type": "email",
            "title": "RE: Security Requirements from CISO",
            "reference": "email://threads/THREAD-20241210-445",
            "lastUpdated": "2024-12-10T16:55:00Z",
            "relevanceScore": 0.89,
        },
    ]


@pytest.fixture
def sample_owner() -> Dict[str, Any]:
    """Account owner of the sample proposal."""
    return {
        "id": "user-001",
        "name": "Alex Morgan",
        "email": "alex.morgan@example.com",
    }


@pytest.fixture
def sample_proposal_data(sample_sources, sample_owner) -> Dict[str, Any]:
    """Proposal payload in wire (camelCase) form, as a UI would send it."""
    return {
        "title": "Contoso Manufacturing - Cloud Migration Proposal",
        "clientName": "Contoso Manufacturing",
        "clientId": "CRM-contoso-manufacturing",
        "opportunityValue": 2400000,
        "status": "in_review",
        "sections": [
            {
                "id": "sec-001",
                "title": "Executive Summary",
                "content": "Contoso is at a pivotal moment in its transformation journey.",
                "confidence": 0.88,
                "sources": [sample_sources[0], sample_sources[1]],
                "approvalState": "pending",
                "order": 1,
                "lastModified": "2024-12-20T11:30:00Z",
                "modifiedBy": "AI Copilot",
                "wordCount": 10,
            },
            {
                "id": "sec-002",
                "title": "Understanding Your Business",
                "content": "Contoso has led medical device manufacturing for fifty years.",
                "confidence": 0.75,
                "sources": [sample_sources[1]],
                "approvalState": "approved",
                "order": 2,
                "lastModified": "2024-12-20T11:35:00Z",
                "modifiedBy": "AI Copilot",
                "reviewerNotes": "Accurate.",
                "wordCount": 9,
            },
            {
                "id": "sec-003",
                "title": "Security & Compliance",
                "content": "SOC 2 Type II, HIPAA and GDPR controls.",
                "confidence": 0.45,
                "sources": [sample_sources[2]],
                "approvalState": "needs_revision",
                "order": 3,
                "lastModified": "2024-12-20T11:40:00Z",
                "modifiedBy": "AI Copilot",
                "wordCount": 7,
            },
        ],
        "openQuestions": [
            {
                "id": "q-001",
                "question": "What is the budget approval process?",
                "rationale": "Pricing section depends on procurement rules.",
                "priority": "high",
                "relatedSectionIds": ["sec-001"],
                "createdAt": "2024-12-20T09:00:00Z",
                "dismissed": False,
                "category": "Pricing",
            },
            {
                "id": "q-002",
                "question": "Which regions need data residency?",
                "rationale": "Drives the deployment topology.",
                "priority": "medium",
                "relatedSectionIds": ["sec-003"],
                "createdAt": "2024-12-20T09:05:00Z",
                "dismissed": True,
            },
        ],
        "nudges": [
            {
                "id": "n-001",
                "type": "warning",
                "message": "Security section confidence is low.",
                "actionLabel": "Review Section",
                "actionType": "navigate",
                "actionTarget": "sec-003",
                "priority": "high",
                "relatedSectionId": "sec-003",
                "createdAt": "2024-12-20T10:00:00Z",
                "dismissed": False,
            },
            {
                "id": "n-002",
                "type": "best_practice",
                "message": "Add a customer case study.",
                "priority": "low",
                "createdAt": "2024-12-20T10:05:00Z",
                "dismissed": False,
            },
        ],
        "createdAt": "2024-12-18T08:00:00Z",
        "lastModified": "2024-12-20T11:40:00Z",
        "dueDate": "2025-01-15T00:00:00Z",
        "owner": sample_owner,
        "industry": "Manufacturing",
        "stakeholders": [
            {"name": "Sarah Chen", "title": "CTO", "email": "sarah.chen@example.com"},
        ],
        "overallConfidence": 0,
        "totalWordCount": 0,
    }


@pytest.fixture
def empty_proposal_data(sample_owner) -> Dict[str, Any]:
    """Minimal proposal payload without any sections, questions or nudges."""
    return {
        "title": "Test Proposal",
        "client_name": "Test Client",
        "client_id": "test-client-1",
        "opportunity_value": 100000,
        "status": "draft",
        "due_date": datetime(2025, 12, 31, tzinfo=timezone.utc),
        "owner": sample_owner,
    }


@pytest.fixture
def section_payload() -> Dict[str, Any]:
    """Section payload for add_section."""
    return {
        "title": "New Section",
        "content": "Test content",
        "confidence": 0.85,
        "sources": [],
        "approval_state": "draft",
        "order": 4,
        "word_count": 100,
    }


@pytest.fixture
def assignee() -> Dict[str, Any]:
    """Reviewer a proposal can be escalated to."""
    return {"id": "user-042", "name": "Dana Reviewer", "email": "dana.reviewer@example.com"}


# ===========================================
# Store Fixtures
# ===========================================

@pytest.fixture
def settings() -> Settings:
    """Default settings, isolated from any local .env file."""
    return Settings(_env_file=None)


@pytest.fixture
def store(settings) -> ProposalStore:
    """Fresh in-memory store per test."""
    return ProposalStore(backend=InMemoryBackend(), settings=settings)


@pytest.fixture
def selectors(store) -> ProposalSelectors:
    return ProposalSelectors(store)


@pytest.fixture
def proposal_id(store, sample_proposal_data) -> str:
    """Id of the sample proposal created in the fresh store."""
    return store.create_proposal(sample_proposal_data)


@pytest.fixture
def yesterday() -> datetime:
    return datetime.now(timezone.utc) - timedelta(days=1)


@pytest.fixture
def tomorrow() -> datetime:
    return datetime.now(timezone.utc) + timedelta(days=1)

