"""Groq chat client factory (OpenAI-compatible chat completions)."""

from __future__ import annotations

from modelhub.domain.models.provider_id import ProviderId
from modelhub.infrastructure.llm.openai_compatible import OpenAICompatibleChatClientFactory


class GroqChatClientFactory(OpenAICompatibleChatClientFactory):
    """Groq API factory."""

    provider = ProviderId.GROQ
    DEFAULT_BASE_URL = "https://api.groq.com/openai/v1"
    API_KEY_ENV = "GROQ_API_KEY"
