"""Mistral chat client factory (OpenAI-compatible chat completions)."""

from __future__ import annotations

from modelhub.domain.models.provider_id import ProviderId
from modelhub.infrastructure.llm.openai_compatible import OpenAICompatibleChatClientFactory


class MistralChatClientFactory(OpenAICompatibleChatClientFactory):
    """Mistral API factory."""

    provider = ProviderId.MISTRAL
    DEFAULT_BASE_URL = "https://api.mistral.ai/v1"
    API_KEY_ENV = "MISTRAL_API_KEY"
