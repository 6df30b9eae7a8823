"""
Infrastructure module exports.

Configuration and bootstrap for the generation engine.
"""

from .config import InfraConfig, get_config, LLMBackendType, DEFAULT_GEMINI_MODELS
from .bootstrap import InfraBootstrap, bootstrap_infrastructure, get_generator

__all__ = [
    "InfraConfig",
    "get_config",
    "LLMBackendType",
    "DEFAULT_GEMINI_MODELS",
    "InfraBootstrap",
    "bootstrap_infrastructure",
    "get_generator",
]
