"""Registry of chat client factories keyed by provider"""

import logging
from types import MappingProxyType
from typing import List, Mapping, Optional

from modelhub.domain.config.providers import ProvidersConfig
from modelhub.domain.errors import UnknownProvider
from modelhub.domain.models.provider_id import ProviderId
from modelhub.infrastructure.llm.anthropic import AnthropicChatClientFactory
from modelhub.infrastructure.llm.base import ChatClientFactory
from modelhub.infrastructure.llm.gpt4all import GPT4AllChatClientFactory
from modelhub.infrastructure.llm.groq import GroqChatClientFactory
from modelhub.infrastructure.llm.lmstudio import LMStudioChatClientFactory
from modelhub.infrastructure.llm.mistral import MistralChatClientFactory
from modelhub.infrastructure.llm.ollama import OllamaChatClientFactory
from modelhub.infrastructure.llm.openai import OpenAIChatClientFactory

logger = logging.getLogger(__name__)

FACTORIES = {
    ProviderId.OLLAMA: OllamaChatClientFactory,
    ProviderId.LMSTUDIO: LMStudioChatClientFactory,
    ProviderId.GPT4ALL: GPT4AllChatClientFactory,
    ProviderId.OPENAI: OpenAIChatClientFactory,
    ProviderId.MISTRAL: MistralChatClientFactory,
    ProviderId.ANTHROPIC: AnthropicChatClientFactory,
    ProviderId.GROQ: GroqChatClientFactory,
}


class ProviderRegistry:
    """Maps every ProviderId to the factory that builds its chat client.

    Populated once, then frozen. Reads need no locking after freeze().
    """

    def __init__(self):
        self._factories: Mapping[ProviderId, ChatClientFactory] = {}
        self._frozen = False

    def register(self, provider: ProviderId, factory: ChatClientFactory) -> None:
        """Register a factory while the registry is being populated

        Raises:
            RuntimeError: If the registry is already frozen
        """
        if self._frozen:
            raise RuntimeError(f"Registry is frozen, cannot register {provider.value}")
        self._factories[provider] = factory

    def freeze(self) -> None:
        self._factories = MappingProxyType(dict(self._factories))
        self._frozen = True

    def lookup(self, provider: ProviderId) -> ChatClientFactory:
        """Get the factory for a provider

        Raises:
            UnknownProvider: If no factory is registered for the provider
        """
        try:
            return self._factories[provider]
        except KeyError:
            raise UnknownProvider(provider) from None

    def missing(self) -> List[ProviderId]:
        """Providers without a registered factory"""
        return [provider for provider in ProviderId if provider not in self._factories]

    def provider_ids(self) -> List[ProviderId]:
        return [provider for provider in ProviderId if provider in self._factories]


def build_registry(providers_config: Optional[ProvidersConfig] = None) -> ProviderRegistry:
    """Create the frozen registry of all supported providers

    Args:
        providers_config: Endpoint configuration per provider (defaults if None)

    Returns:
        Frozen ProviderRegistry covering every ProviderId

    Raises:
        UnknownProvider: If a ProviderId has no factory in FACTORIES
    """
    if providers_config is None:
        providers_config = ProvidersConfig()

    registry = ProviderRegistry()
    for provider, factory_class in FACTORIES.items():
        registry.register(provider, factory_class(providers_config.for_provider(provider)))
    registry.freeze()

    missing = registry.missing()
    if missing:
        raise UnknownProvider(missing[0])

    logger.debug(f"Registered {len(registry.provider_ids())} chat client factories")
    return registry
