"""
Email composer: tiered content generation for admin emails.

Generation backends are tried in priority order; when all of them fail
(or none is configured) a keyword-matched template is used instead.

Example usage:
    from composer import CascadeOrchestrator, EmailGenerator, GenerationRequest
    from composer.templates import VariableDefaults
    from inference import StubModelBackend

    generator = EmailGenerator(
        orchestrator=CascadeOrchestrator([StubModelBackend()]),
        defaults=VariableDefaults(app_name="CommitHabit", cta_link="https://commithabit.app"),
    )
    message = await generator.generate(GenerationRequest(prompt="announce new feature"))
"""

from .cascade import CascadeOrchestrator, CascadeResult, NOT_CONFIGURED
from .generator import EmailGenerator, PromptValidationError, summarize_attempt_errors
from .schemas import (
    GenerationRequest,
    GenerationStatus,
    RenderedMessage,
    TemplateSummary,
    TemplateVariables,
)

__all__ = [
    "CascadeOrchestrator",
    "CascadeResult",
    "NOT_CONFIGURED",
    "EmailGenerator",
    "PromptValidationError",
    "summarize_attempt_errors",
    "GenerationRequest",
    "GenerationStatus",
    "RenderedMessage",
    "TemplateSummary",
    "TemplateVariables",
]
