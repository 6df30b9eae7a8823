"""
Model boundary layer for email generation.

This package provides a clean abstraction for generation backends,
allowing the cascade to remain agnostic of the underlying provider.

Supported backends:
- StubModelBackend: Deterministic scripted backend (default for CI/tests)
- GeminiModelBackend: Google Gemini via the Generative Language REST API

Example usage:
    from inference import StubModelBackend, GenerationPrompt

    backend = StubModelBackend()
    prompt = GenerationPrompt(system_instruction="...", user_prompt="announce new feature")
    outcome = await backend.generate(prompt)
"""

from .types import GenerationPrompt, GeneratedContent, AttemptOutcome, ModelStatus
from .base import ModelBackend
from .stub import StubModelBackend
from .gemini import GeminiModelBackend, GEMINI_BASE_URL, extract_subject_body

__all__ = [
    "GenerationPrompt",
    "GeneratedContent",
    "AttemptOutcome",
    "ModelStatus",
    "ModelBackend",
    "StubModelBackend",
    "GeminiModelBackend",
    "GEMINI_BASE_URL",
    "extract_subject_body",
]
