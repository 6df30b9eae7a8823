"""
Email Generator (entry point)

Combines the backend cascade, the template matcher and placeholder
substitution into one call:

    generate(request)
      → validate prompt            (PromptValidationError, before any backend call)
      → CascadeOrchestrator.run    (generated content, or None)
      → find_matching_template     (only when the cascade produced nothing)
      → replace_variables          (subject and body, independently)
      → RenderedMessage

The caller always gets a non-empty subject/body pair unless the prompt
itself was rejected.
"""

import logging
import uuid
from typing import Any, List, Optional

from .cascade import CascadeOrchestrator, CascadeResult
from .prompting import build_prompt
from .schemas import GenerationRequest, GenerationStatus, RenderedMessage, TemplateSummary
from .templates import (
    DEFAULT_CATALOG,
    TemplateCatalog,
    VariableDefaults,
    find_matching_template,
    replace_variables,
)

logger = logging.getLogger(__name__)

DEFAULT_MIN_PROMPT_LENGTH = 5


class PromptValidationError(ValueError):
    """Prompt is missing, blank or too short to act on."""
    pass


def summarize_attempt_errors(attempt_errors: List[str]) -> Optional[str]:
    """Warning shown next to a templated result; None when nothing was attempted."""
    if not attempt_errors:
        return None
    return f"AI generation failed ({len(attempt_errors)} attempts). Using template instead."


class EmailGenerator:
    """
    Tiered email generation: backends first, templates last.

    Stateless between calls; the orchestrator, catalog and defaults are
    read-only, so concurrent generate() calls are independent.
    """

    def __init__(
        self,
        orchestrator: CascadeOrchestrator,
        defaults: VariableDefaults,
        catalog: TemplateCatalog = DEFAULT_CATALOG,
        min_prompt_length: int = DEFAULT_MIN_PROMPT_LENGTH,
    ):
        self.orchestrator = orchestrator
        self.defaults = defaults
        self.catalog = catalog
        self.min_prompt_length = min_prompt_length

    def validate_prompt(self, prompt: Any) -> str:
        if not isinstance(prompt, str) or len(prompt.strip()) < max(1, self.min_prompt_length):
            raise PromptValidationError(
                f"Please provide a more detailed description "
                f"(at least {self.min_prompt_length} characters)."
            )
        return prompt.strip()

    async def generate(self, request: GenerationRequest) -> RenderedMessage:
        """
        Produce a subject/body for the request.

        Args:
            request: Prompt plus optional placeholder values

        Returns:
            RenderedMessage with source "generated" or "template"

        Raises:
            PromptValidationError: Blank or too-short prompt (no backend is called)
        """
        prompt = self.validate_prompt(request.prompt)
        trace_id = str(uuid.uuid4())
        variables = request.variables.as_placeholders()

        logger.info(
            f"Starting generation for prompt: {prompt[:100]}",
            extra={"trace_id": trace_id},
        )

        cascade = await self.orchestrator.run(
            build_prompt(prompt, app_name=self.defaults.app_name, trace_id=trace_id)
        )

        if cascade.content is not None:
            return RenderedMessage(
                subject=replace_variables(cascade.content.subject, variables, self.defaults),
                body=replace_variables(cascade.content.body, variables, self.defaults),
                source="generated",
                backend_used=cascade.source_backend,
            )

        return self._render_template(prompt, variables, cascade, trace_id)

    def _render_template(
        self,
        prompt: str,
        variables: dict,
        cascade: CascadeResult,
        trace_id: str,
    ) -> RenderedMessage:
        template = find_matching_template(prompt, self.catalog)
        logger.info(
            f'Using template fallback: "{template.name}"',
            extra={
                "template_id": template.id,
                "attempts": len(cascade.attempt_errors),
                "trace_id": trace_id,
            },
        )

        return RenderedMessage(
            subject=replace_variables(template.subject, variables, self.defaults),
            body=replace_variables(template.body, variables, self.defaults),
            source="template",
            template_name=template.name,
            warning=summarize_attempt_errors(cascade.attempt_errors),
        )

    def status(self) -> GenerationStatus:
        return GenerationStatus(
            ai_configured=self.orchestrator.is_configured,
            backends=self.orchestrator.backend_names,
            templates=[
                TemplateSummary(id=t.id, name=t.name, keywords=list(t.keywords))
                for t in self.catalog
            ],
        )
