"""LM Studio chat client factory (OpenAI-compatible server on localhost)."""

from __future__ import annotations

from modelhub.domain.models.provider_id import ProviderId
from modelhub.infrastructure.llm.openai_compatible import OpenAICompatibleChatClientFactory


class LMStudioChatClientFactory(OpenAICompatibleChatClientFactory):
    """LM Studio factory.

    Assumes the LM Studio local server is running; no API key needed.
    """

    provider = ProviderId.LMSTUDIO
    DEFAULT_BASE_URL = "http://localhost:1234/v1"
    REQUIRE_API_KEY = False
