from abc import ABC, abstractmethod
from .types import GenerationPrompt, AttemptOutcome


class ModelBackend(ABC):
    """
    Abstract generation backend boundary.
    The cascade depends ONLY on this interface.

    Implementations must never raise for expected failures: every
    rate limit, auth error, safety block or transport error is returned
    as an AttemptOutcome.
    """

    #: Backend identifier; position in the configured list is its priority.
    name: str

    @property
    def is_configured(self) -> bool:
        """Whether a credential is available for this backend."""
        return True

    @abstractmethod
    async def generate(self, prompt: GenerationPrompt) -> AttemptOutcome:
        """Perform exactly one generation attempt."""
        raise NotImplementedError
