"""Provider endpoint configuration models."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from modelhub.domain.models.provider_id import ProviderId


class EndpointConfig(BaseModel):
    """Connection details for one provider.

    Attributes:
        base_url: API base URL (None = provider default)
        api_key: API key (None = from the provider's environment variable)
    """

    base_url: Optional[str] = None
    api_key: Optional[str] = None

    model_config = ConfigDict(extra="forbid")


class ProvidersConfig(BaseModel):
    """Endpoint configuration for every supported provider."""

    ollama: EndpointConfig = Field(default_factory=EndpointConfig)
    lmstudio: EndpointConfig = Field(default_factory=EndpointConfig)
    gpt4all: EndpointConfig = Field(default_factory=EndpointConfig)
    openai: EndpointConfig = Field(default_factory=EndpointConfig)
    mistral: EndpointConfig = Field(default_factory=EndpointConfig)
    anthropic: EndpointConfig = Field(default_factory=EndpointConfig)
    groq: EndpointConfig = Field(default_factory=EndpointConfig)

    model_config = ConfigDict(extra="forbid")

    def for_provider(self, provider: ProviderId) -> EndpointConfig:
        """Get endpoint configuration for a provider

        Args:
            provider: Provider identifier

        Returns:
            Endpoint configuration model
        """
        return getattr(self, provider.value.lower())
