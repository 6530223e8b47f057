"""GPT4All chat client factory (OpenAI-compatible server on localhost)."""

from __future__ import annotations

from modelhub.domain.models.provider_id import ProviderId
from modelhub.infrastructure.llm.openai_compatible import OpenAICompatibleChatClientFactory


class GPT4AllChatClientFactory(OpenAICompatibleChatClientFactory):
    """GPT4All factory."""

    provider = ProviderId.GPT4ALL
    DEFAULT_BASE_URL = "http://localhost:4891/v1"
    REQUIRE_API_KEY = False
