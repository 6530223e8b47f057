"""OpenAI chat client factory (OpenAI-compatible chat completions)."""

from __future__ import annotations

from modelhub.domain.models.provider_id import ProviderId
from modelhub.infrastructure.llm.openai_compatible import OpenAICompatibleChatClientFactory


class OpenAIChatClientFactory(OpenAICompatibleChatClientFactory):
    """OpenAI API factory."""

    provider = ProviderId.OPENAI
    DEFAULT_BASE_URL = "https://api.openai.com/v1"
    API_KEY_ENV = "OPENAI_API_KEY"
