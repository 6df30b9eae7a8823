from collections import deque
from typing import Iterable, List, Optional

from .base import ModelBackend
from .types import GenerationPrompt, AttemptOutcome


class StubModelBackend(ModelBackend):
    """
    Deterministic fake backend for testing and CI.

    Replays a scripted sequence of outcomes, one per call. Once the script
    is exhausted (or when none was given) it returns a fixed success, so a
    stub-only deployment still produces generated content.
    """

    def __init__(
        self,
        name: str = "stub",
        outcomes: Optional[Iterable[AttemptOutcome]] = None,
        configured: bool = True,
    ):
        self.name = name
        self._outcomes = deque(outcomes or [])
        self._configured = configured
        self.calls: List[GenerationPrompt] = []

    @property
    def is_configured(self) -> bool:
        return self._configured

    async def generate(self, prompt: GenerationPrompt) -> AttemptOutcome:
        """
        Return the next scripted outcome.

        Args:
            prompt: GenerationPrompt (recorded for assertions)

        Returns:
            AttemptOutcome from the script, or the default stub success
        """
        self.calls.append(prompt)

        if self._outcomes:
            return self._outcomes.popleft()

        return AttemptOutcome.success(
            subject="A quick update from {appName}",
            body="<p>Hey {user}, this is a stubbed email.</p>"
                 "<p><a href=\"{ctaLink}\">Open {appName}</a></p>",
            backend="stub",
            trace_id=prompt.trace_id,
        )
