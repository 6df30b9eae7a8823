"""
Infrastructure initialization and bootstrap.

Singleton holding the process-wide EmailGenerator built from configuration.
"""

from typing import Optional

from composer import EmailGenerator

from .config import InfraConfig, get_config


class InfraBootstrap:
    """
    Bootstrap infrastructure based on configuration.

    Singleton pattern - single instance per process. Everything it holds
    is read-only after construction.
    """

    _instance: Optional["InfraBootstrap"] = None

    def __init__(self, config: Optional[InfraConfig] = None):
        """Initialize bootstrap with configuration."""
        self.config = config or get_config()
        self.generator = self.config.create_generator()

    @classmethod
    def get_instance(cls, config: Optional[InfraConfig] = None) -> "InfraBootstrap":
        """
        Get singleton instance.

        Args:
            config: Optional custom configuration (only used first time)

        Returns:
            Singleton InfraBootstrap instance
        """
        if cls._instance is None:
            cls._instance = cls(config)
        return cls._instance

    @classmethod
    def reset(cls):
        """Reset singleton (for testing)."""
        cls._instance = None

    def get_generator(self) -> EmailGenerator:
        """Get the email generator."""
        return self.generator

    def __repr__(self) -> str:
        """String representation showing configured backends."""
        return (
            f"InfraBootstrap(llm={self.config.llm_backend}, "
            f"backends={self.generator.orchestrator.backend_names}, "
            f"configured={self.generator.orchestrator.is_configured})"
        )


def bootstrap_infrastructure(config: Optional[InfraConfig] = None) -> InfraBootstrap:
    """
    Bootstrap the generation engine.

    Args:
        config: Optional custom configuration

    Returns:
        InfraBootstrap instance with the generator initialized
    """
    return InfraBootstrap.get_instance(config)


def get_generator() -> EmailGenerator:
    """FastAPI dependency: the process-wide generator."""
    return bootstrap_infrastructure().get_generator()
