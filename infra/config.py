"""
Infrastructure configuration system.

Environment-based backend selection with sensible defaults.
An empty GEMINI_API_KEY is a valid state: the cascade is skipped and
every request is answered from the template catalog.
"""

import os
from typing import List, Literal, Optional, Tuple
from dataclasses import dataclass

from composer import CascadeOrchestrator, EmailGenerator
from composer.generator import DEFAULT_MIN_PROMPT_LENGTH
from composer.templates import DEFAULT_CATALOG, TemplateCatalog, VariableDefaults
from inference import GEMINI_BASE_URL, GeminiModelBackend, ModelBackend, StubModelBackend


LLMBackendType = Literal["stub", "gemini"]

# Free tier models in order of preference
DEFAULT_GEMINI_MODELS: Tuple[str, ...] = (
    "gemini-2.0-flash",
    "gemini-1.5-flash",
    "gemini-1.5-flash-8b",
    "gemini-1.5-pro",
)


def _split_list(raw: Optional[str]) -> List[str]:
    if not raw:
        return []
    return [item.strip() for item in raw.split(",") if item.strip()]


@dataclass
class InfraConfig:
    """Infrastructure configuration from environment."""

    # Backends
    llm_backend: LLMBackendType
    gemini_api_key: Optional[str]
    gemini_base_url: str
    gemini_models: Tuple[str, ...]
    gemini_timeout_s: float
    gemini_temperature: float
    gemini_max_output_tokens: int

    # Cascade
    retry_delay_s: float
    min_prompt_length: int

    # Template defaults
    app_name: str
    app_url: str

    @classmethod
    def from_env(cls) -> "InfraConfig":
        """
        Load configuration from environment variables.

        Defaults mirror the free Gemini tier:
        - LLM: gemini, four models from fastest to strictest limits
        - 200 ms pause between rate-limited attempts
        """
        return cls(
            # Backend Configuration
            llm_backend=os.getenv("LLM_BACKEND", "gemini").lower(),  # type: ignore
            gemini_api_key=os.getenv("GEMINI_API_KEY") or None,
            gemini_base_url=os.getenv("GEMINI_BASE_URL", GEMINI_BASE_URL),
            gemini_models=tuple(_split_list(os.getenv("GEMINI_MODELS"))) or DEFAULT_GEMINI_MODELS,
            gemini_timeout_s=float(os.getenv("GEMINI_TIMEOUT_S", "30")),
            gemini_temperature=float(os.getenv("GEMINI_TEMPERATURE", "0.7")),
            gemini_max_output_tokens=int(os.getenv("GEMINI_MAX_OUTPUT_TOKENS", "2048")),

            # Cascade Configuration
            retry_delay_s=float(os.getenv("CASCADE_RETRY_DELAY_S", "0.2")),
            min_prompt_length=int(os.getenv("MIN_PROMPT_LENGTH", str(DEFAULT_MIN_PROMPT_LENGTH))),

            # Template defaults
            app_name=os.getenv("APP_NAME", "CommitHabit"),
            app_url=os.getenv("APP_URL", "https://commithabit.app"),
        )

    def create_backends(self) -> List[ModelBackend]:
        """Create the priority-ordered backend list based on configuration."""
        if self.llm_backend == "stub":
            return [StubModelBackend()]

        # Default to gemini
        return [
            GeminiModelBackend(
                model_name=model,
                api_key=self.gemini_api_key,
                base_url=self.gemini_base_url,
                timeout_s=self.gemini_timeout_s,
                temperature=self.gemini_temperature,
                max_output_tokens=self.gemini_max_output_tokens,
            )
            for model in self.gemini_models
        ]

    def create_orchestrator(self) -> CascadeOrchestrator:
        return CascadeOrchestrator(self.create_backends(), retry_delay_s=self.retry_delay_s)

    def create_variable_defaults(self) -> VariableDefaults:
        return VariableDefaults(app_name=self.app_name, cta_link=self.app_url)

    def create_generator(self, catalog: TemplateCatalog = DEFAULT_CATALOG) -> EmailGenerator:
        """Wire orchestrator, catalog and defaults into the entry point."""
        return EmailGenerator(
            orchestrator=self.create_orchestrator(),
            defaults=self.create_variable_defaults(),
            catalog=catalog,
            min_prompt_length=self.min_prompt_length,
        )


def get_config() -> InfraConfig:
    """Get global infrastructure configuration."""
    return InfraConfig.from_env()
