"""Base chat client and chat client factory interfaces"""

from abc import ABC, abstractmethod

from modelhub.domain.models.model_config import ModelConfig
from modelhub.domain.models.provider_id import ProviderId


class ChatClient(ABC):
    """Abstract base class for chat clients"""

    def __init__(self, config: ModelConfig):
        """Initialize client with a resolved model configuration

        Args:
            config: Model configuration

        Raises:
            ValueError: If configuration is invalid for this client
        """
        self.config = config
        self._validate_config(config)

    def _validate_config(self, config: ModelConfig) -> None:
        """Validate model configuration

        Args:
            config: Model configuration

        Raises:
            ValueError: If configuration is invalid
        """
        # Override in subclasses for specific validation
        pass

    @abstractmethod
    def generate(self, prompt: str, **kwargs) -> str:
        """Generate response from the model

        Args:
            prompt: Input prompt
            **kwargs: Per-call overrides (temperature, max_tokens, etc.)

        Returns:
            Generated text response

        Raises:
            RuntimeError: If generation fails
        """
        pass


class ChatClientFactory(ABC):
    """Builds a ready-to-use chat client for one provider"""

    provider: ProviderId

    @abstractmethod
    def build(self, config: ModelConfig) -> ChatClient:
        """Build a chat client

        Args:
            config: Resolved model configuration

        Returns:
            ChatClient instance, owned by the caller
        """
        pass
