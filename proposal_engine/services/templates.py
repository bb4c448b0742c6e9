"""Standard proposal outline and starter text templates."""

from typing import List, NamedTuple

from jinja2 import Template


class TemplateSection(NamedTuple):
    """Canonical section title with its one-line starter paragraph."""
    title: str
    starter: Template

    def render(self, client_name: str) -> str:
        """Render the starter paragraph for ``client_name``."""
        return self.starter.render(client_name=client_name)


STANDARD_SECTIONS: List[TemplateSection] = [
    TemplateSection(
        "Executive Summary",
        Template("This proposal outlines our recommended approach for {{ client_name }}."),
    ),
    TemplateSection(
        "Business Context",
        Template("Background on {{ client_name }}'s goals, constraints, and success criteria."),
    ),
    TemplateSection(
        "Requirements",
        Template("Key functional and non-functional requirements captured from discovery."),
    ),
    TemplateSection(
        "Solution Overview",
        Template("High-level solution approach and architecture overview."),
    ),
    TemplateSection(
        "Security & Compliance",
        Template("Security controls, data protection, and compliance alignment."),
    ),
    TemplateSection(
        "Implementation Plan",
        Template("Phases, milestones, timeline, and dependencies."),
    ),
    TemplateSection(
        "Pricing & Commercials",
        Template("Commercial model, pricing assumptions, and options."),
    ),
    TemplateSection(
        "Risks & Mitigations",
        Template("Key risks and mitigations (technical, schedule, compliance)."),
    ),
    TemplateSection(
        "Next Steps",
        Template("Decision points, stakeholder actions, and proposed schedule."),
    ),
]

# Starter used for the first section of a proposal created from chat
CHAT_EXECUTIVE_SUMMARY = Template(
    "This proposal outlines our recommended approach for {{ client_name }}. "
    "We understand your requirements and have designed a solution that "
    "addresses your key business objectives."
)
