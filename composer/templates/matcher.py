"""Keyword scoring over the template catalog."""

import logging

from .catalog import EmailTemplate, TemplateCatalog

logger = logging.getLogger(__name__)


def score_template(prompt: str, template: EmailTemplate) -> int:
    """Number of the template's keywords found as substrings of the lower-cased prompt."""
    lower_prompt = prompt.lower()
    return sum(1 for keyword in template.keywords if keyword in lower_prompt)


def find_matching_template(prompt: str, catalog: TemplateCatalog) -> EmailTemplate:
    """
    Select the best template for a prompt.

    The strictly highest score wins, so ties go to the first-listed
    template. If nothing scores above zero the catalog fallback is
    returned. Never fails.
    """
    best_match = catalog.fallback
    highest_score = 0

    for template in catalog.scored:
        score = score_template(prompt, template)
        if score > highest_score:
            highest_score = score
            best_match = template

    logger.debug(
        f"Template match: {best_match.id} (score={highest_score})",
        extra={"template_id": best_match.id, "score": highest_score},
    )
    return best_match
