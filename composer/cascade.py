"""
Backend Cascade
===============

Drives an ordered list of generation backends, one attempt at a time.

Policy:
- First success wins; later backends are never called
- recoverable_error → record, wait the inter-attempt delay, try the next backend
- fatal_error → record and abort; every remaining backend shares the credential
- No backend configured → skip straight to the template fallback, nothing recorded

Invariants:
- Backends are attempted strictly in configured order, never concurrently
- The delay only separates consecutive attempts (never before the first, never after the last)
- len(attempt_errors) == len(attempted_backends) unless the cascade succeeded,
  in which case attempted_backends also holds the winning backend
"""

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Awaitable, Callable, List, Optional, Sequence

from inference import AttemptOutcome, GeneratedContent, GenerationPrompt, ModelBackend

logger = logging.getLogger(__name__)

NOT_CONFIGURED = "not configured"


@dataclass
class CascadeResult:
    content: Optional[GeneratedContent] = None
    source_backend: Optional[str] = None
    attempt_errors: List[str] = field(default_factory=list)
    attempted_backends: List[str] = field(default_factory=list)
    skip_reason: Optional[str] = None     # set when no backend was ever attempted

    @property
    def exhausted(self) -> bool:
        return self.content is None


class CascadeOrchestrator:
    """
    Sequential backend cascade.

    Holds only read-only configuration, so one instance can serve
    concurrent requests.
    """

    def __init__(
        self,
        backends: Sequence[ModelBackend],
        retry_delay_s: float = 0.2,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        """
        Args:
            backends:      Priority-ordered backends (first = most preferred)
            retry_delay_s: Pause between a recoverable failure and the next attempt
            sleep:         Awaitable used for that pause (injectable for tests)
        """
        self.backends = tuple(backends)
        self.retry_delay_s = retry_delay_s
        self._sleep = sleep

    @property
    def is_configured(self) -> bool:
        return any(backend.is_configured for backend in self.backends)

    @property
    def backend_names(self) -> List[str]:
        return [backend.name for backend in self.backends]

    async def run(self, prompt: GenerationPrompt) -> CascadeResult:
        """
        Try each backend in order until one succeeds or the chain is aborted.

        Args:
            prompt: Immutable system instruction + user prompt

        Returns:
            CascadeResult; content is None when every attempt failed
        """
        if not self.is_configured:
            logger.warning(
                "No generation backend configured, skipping to template fallback",
                extra={"trace_id": prompt.trace_id},
            )
            return CascadeResult(skip_reason=NOT_CONFIGURED)

        result = CascadeResult()
        last_index = len(self.backends) - 1

        for index, backend in enumerate(self.backends):
            result.attempted_backends.append(backend.name)
            outcome = await backend.generate(prompt)

            if outcome.is_success:
                result.content = outcome.content
                result.source_backend = backend.name
                logger.info(
                    f"Generated with {backend.name} after {index + 1} attempt(s)",
                    extra={"backend": backend.name, "trace_id": prompt.trace_id},
                )
                return result

            result.attempt_errors.append(format_attempt_error(backend.name, outcome))

            if outcome.is_fatal:
                logger.error(
                    f"{backend.name}: {outcome.reason} - skipping remaining backends",
                    extra={
                        "backend": backend.name,
                        "status_code": outcome.status_code,
                        "skipped": self.backend_names[index + 1:],
                        "trace_id": prompt.trace_id,
                    },
                )
                break

            if index < last_index:
                await self._sleep(self.retry_delay_s)

        logger.warning(
            f"All generation backends failed ({len(result.attempt_errors)} attempts), "
            "falling back to templates",
            extra={"errors": list(result.attempt_errors), "trace_id": prompt.trace_id},
        )
        return result


def format_attempt_error(backend_name: str, outcome: AttemptOutcome) -> str:
    return f"{backend_name}: {outcome.reason or 'unknown error'}"
