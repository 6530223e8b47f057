"""Resolve the chat provider and model configuration for a request"""

import logging
from typing import Callable, Optional, Tuple

from modelhub.domain.config.settings import SettingsSnapshot
from modelhub.domain.errors import InvalidProviderName
from modelhub.domain.models.model_config import MAX_OUTPUT_TOKENS, ModelConfig
from modelhub.domain.models.provider_id import ProviderId
from modelhub.domain.models.request_context import RequestContext
from modelhub.infrastructure.llm.base import ChatClient
from modelhub.infrastructure.llm.registry import ProviderRegistry

logger = logging.getLogger(__name__)


def resolve_provider(
    override: Optional[ProviderId],
    settings: SettingsSnapshot,
    default: Optional[ProviderId] = None,
) -> ProviderId:
    """Pick the provider for a request

    Args:
        override: Provider explicitly requested by the caller
        settings: Current settings snapshot
        default: Caller-supplied fallback when no provider is persisted

    Returns:
        Effective provider

    Raises:
        InvalidProviderName: If the persisted name is not a known provider,
            or nothing is persisted and no default was supplied
    """
    if override is not None:
        return override

    raw = settings.default_provider
    if not raw:
        if default is None:
            raise InvalidProviderName(None)
        return default

    try:
        return ProviderId(raw)
    except ValueError:
        raise InvalidProviderName(raw) from None


def build_config(request_context: RequestContext, settings: SettingsSnapshot) -> ModelConfig:
    """Merge persisted settings and the request into a model config

    Args:
        request_context: Current request
        settings: Current settings snapshot

    Returns:
        ModelConfig with max_tokens always set
    """
    if settings.max_output_tokens == 0:
        max_tokens = MAX_OUTPUT_TOKENS
    else:
        max_tokens = settings.max_output_tokens

    return ModelConfig(
        temperature=settings.temperature,
        max_retries=settings.max_retries,
        top_p=settings.top_p,
        timeout=settings.timeout,
        max_tokens=max_tokens,
        model_name=request_context.model_name,
    )


class ModelConfigResolver:
    """Builds the chat client for a request.

    Settings are read from settings_source on every call; nothing is cached.
    """

    def __init__(
        self,
        registry: ProviderRegistry,
        settings_source: Callable[[], SettingsSnapshot],
        default_provider: Optional[ProviderId] = None,
    ):
        """Initialize resolver

        Args:
            registry: Frozen provider registry
            settings_source: Callable returning the current settings snapshot
            default_provider: Fallback provider when none is persisted
        """
        self.registry = registry
        self.settings_source = settings_source
        self.default_provider = default_provider

    def resolve(self, request_context: RequestContext) -> Tuple[ProviderId, ModelConfig]:
        """Resolve provider and model config without building a client

        Raises:
            InvalidProviderName: If the persisted provider name is invalid
        """
        settings = self.settings_source()
        provider = resolve_provider(request_context.provider, settings, self.default_provider)
        config = build_config(request_context, settings)
        return provider, config

    def get_client(self, request_context: RequestContext) -> ChatClient:
        """Get the chat client for a request

        Args:
            request_context: Current request

        Returns:
            Chat client built by the resolved provider's factory

        Raises:
            InvalidProviderName: If the persisted provider name is invalid
            UnknownProvider: If the registry has no factory for the provider
        """
        settings = self.settings_source()
        provider = resolve_provider(request_context.provider, settings, self.default_provider)
        factory = self.registry.lookup(provider)
        config = build_config(request_context, settings)

        logger.info(f"Using LLM provider: {provider.value} (model: {config.model_name})")
        logger.debug(f"Model config: {config}")
        return factory.build(config)
