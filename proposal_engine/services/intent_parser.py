"""Intent parser - maps a line of chat input to a structured command."""

import logging
import re
from datetime import datetime
from typing import Callable, Dict, List, NamedTuple, Optional, Union

from proposal_engine.core.config import get_settings
from proposal_engine.core.dates import days_from_now
from proposal_engine.models import IntentType, ParsedIntent

logger = logging.getLogger(__name__)

Params = Dict[str, Union[str, int]]


class IntentRule(NamedTuple):
    """One entry of the ordered rule table."""
    type: IntentType
    pattern: "re.Pattern[str]"
    extract: Callable[["re.Match[str]"], Params]
    confidence: float


def _extract_create(match: "re.Match[str]") -> Params:
    client_name = match.group(1).strip()
    digits = (match.group(2) or "").replace(",", "")

    # Amounts are always read as thousands, with or without the k suffix
    if digits:
        opportunity_value = int(digits) * 1000
    else:
        opportunity_value = get_settings().DEFAULT_OPPORTUNITY_VALUE

    return {"clientName": client_name, "opportunityValue": opportunity_value}


def _extract_view(match: "re.Match[str]") -> Params:
    return {"query": match.group(1).strip()}


def _extract_nothing(match: "re.Match[str]") -> Params:
    return {}


# Order matters: the first matching rule wins
INTENT_RULES: List[IntentRule] = [
    IntentRule(
        IntentType.CREATE_PROPOSAL,
        re.compile(r"create\s+(?:a\s+)?proposal\s+for\s+(.+?)(?:\s+worth\s+\$?([\d,]+)k?)?$", re.IGNORECASE),
        _extract_create,
        0.9,
    ),
    IntentRule(
        IntentType.VIEW_PROPOSAL,
        re.compile(r"(?:show|view|open|display)\s+(?:the\s+)?proposal\s+(?:for\s+)?(.+)", re.IGNORECASE),
        _extract_view,
        0.85,
    ),
    IntentRule(
        IntentType.LIST_PROPOSALS,
        re.compile(r"(?:list|show|display)\s+(?:all\s+)?(?:my\s+)?proposals?", re.IGNORECASE),
        _extract_nothing,
        0.9,
    ),
]


def parse_intent(text: str) -> ParsedIntent:
    """
    Parse user input into an intent with parameters and a confidence.

    Input is lower-cased and trimmed, then matched against the rules in
    order (create, view, list). Nothing matching yields ``unknown`` with
    confidence 0.

    Args:
        text: Raw chat input

    Returns:
        ParsedIntent with type, params and confidence
    """
    normalized = (text or "").lower().strip()

    for rule in INTENT_RULES:
        match = rule.pattern.search(normalized)
        if match:
            intent = ParsedIntent(
                type=rule.type,
                params=rule.extract(match),
                confidence=rule.confidence,
            )
            logger.debug(f"Parsed intent {intent.type.value} from {normalized!r}")
            return intent

    logger.debug(f"No intent matched {normalized!r}")
    return ParsedIntent(type=IntentType.UNKNOWN, params={}, confidence=0.0)


def generate_client_id(client_name: str) -> str:
    """
    Derive a CRM client id from a client name.

    Lower-cases, collapses every run of non-alphanumeric characters into a
    single hyphen and strips hyphens from both ends.

    Example:
        >>> generate_client_id("Smith & Sons, LLC")
        'CRM-smith-sons-llc'
    """
    slug = re.sub(r"[^a-z0-9]+", "-", client_name.lower()).strip("-")
    return f"CRM-{slug}"


def get_default_due_date(days: Optional[int] = None) -> datetime:
    """Due date ``DEFAULT_DUE_DAYS`` calendar days from now."""
    if days is None:
        days = get_settings().DEFAULT_DUE_DAYS
    return days_from_now(days)
