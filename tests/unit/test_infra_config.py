"""
tests/unit/test_infra_config.py

Unit tests for environment-driven configuration and bootstrap.

Verifies:
✔ Defaults: gemini, four models in priority order, 0.2 s delay
✔ GEMINI_MODELS overrides order
✔ Empty GEMINI_API_KEY → orchestrator not configured
✔ LLM_BACKEND=stub → single stub backend
✔ Bootstrap is a singleton and can be reset
"""

import pytest

from inference import GeminiModelBackend, StubModelBackend
from infra import DEFAULT_GEMINI_MODELS, InfraBootstrap, InfraConfig


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in (
        "LLM_BACKEND", "GEMINI_API_KEY", "GEMINI_MODELS", "CASCADE_RETRY_DELAY_S",
        "MIN_PROMPT_LENGTH", "APP_NAME", "APP_URL",
    ):
        monkeypatch.delenv(key, raising=False)
    InfraBootstrap.reset()
    yield
    InfraBootstrap.reset()


class TestInfraConfig:
    def test_defaults(self):
        config = InfraConfig.from_env()

        assert config.llm_backend == "gemini"
        assert config.gemini_models == DEFAULT_GEMINI_MODELS
        assert config.retry_delay_s == 0.2
        assert config.min_prompt_length == 5
        assert config.app_name == "CommitHabit"

    def test_backends_follow_model_order(self, monkeypatch):
        monkeypatch.setenv("GEMINI_API_KEY", "k")
        monkeypatch.setenv("GEMINI_MODELS", "gemini-b, gemini-a ,")
        backends = InfraConfig.from_env().create_backends()

        assert [b.name for b in backends] == ["gemini-b", "gemini-a"]
        assert all(isinstance(b, GeminiModelBackend) and b.is_configured for b in backends)

    def test_missing_key_not_configured(self):
        orchestrator = InfraConfig.from_env().create_orchestrator()
        assert orchestrator.is_configured is False
        assert orchestrator.backend_names == list(DEFAULT_GEMINI_MODELS)

    def test_stub_backend(self, monkeypatch):
        monkeypatch.setenv("LLM_BACKEND", "stub")
        backends = InfraConfig.from_env().create_backends()
        assert len(backends) == 1
        assert isinstance(backends[0], StubModelBackend)

    def test_generator_wiring(self, monkeypatch):
        monkeypatch.setenv("APP_URL", "https://example.test")
        monkeypatch.setenv("CASCADE_RETRY_DELAY_S", "0")
        generator = InfraConfig.from_env().create_generator()

        assert generator.defaults.cta_link == "https://example.test"
        assert generator.orchestrator.retry_delay_s == 0.0


class TestBootstrap:
    def test_singleton(self):
        first = InfraBootstrap.get_instance()
        assert InfraBootstrap.get_instance() is first
        InfraBootstrap.reset()
        assert InfraBootstrap.get_instance() is not first
