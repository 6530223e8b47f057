"""Errors raised while resolving a chat model"""

from typing import Optional

from modelhub.domain.models.provider_id import ProviderId


class ModelHubError(Exception):
    """Base exception for all modelhub errors"""

    pass


class UnknownProvider(ModelHubError, LookupError):
    """No chat client factory is registered for a provider.

    Signals that the registry and ProviderId have drifted apart; never retried.
    """

    def __init__(self, provider_id: ProviderId):
        self.provider_id = provider_id
        super().__init__(f"No chat client factory registered for provider: {provider_id.value}")


class InvalidProviderName(ModelHubError, ValueError):
    """Persisted provider name does not match any ProviderId"""

    def __init__(self, raw: Optional[str]):
        self.raw = raw
        available = ", ".join(ProviderId.names())
        if raw is None:
            message = f"No LLM provider configured. Available providers: {available}"
        else:
            message = f"Unknown LLM provider: {raw}. Available providers: {available}"
        super().__init__(message)


class ConfigurationError(ModelHubError):
    """Configuration validation error."""

    pass
