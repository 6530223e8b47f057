"""Ollama chat client and factory (native /api/chat endpoint)."""

from __future__ import annotations

import logging
from typing import Optional

from modelhub.domain.config.providers import EndpointConfig
from modelhub.domain.models.model_config import ModelConfig
from modelhub.domain.models.provider_id import ProviderId
from modelhub.infrastructure.llm.base import ChatClient, ChatClientFactory
from modelhub.infrastructure.llm.http_client import post_json_with_retries
from modelhub.infrastructure.llm.retry import retry_config_from_model_config

logger = logging.getLogger(__name__)


class OllamaChatClient(ChatClient):
    """Ollama client using the non-streaming chat endpoint"""

    def __init__(self, config: ModelConfig, *, base_url: str):
        super().__init__(config)
        self.api_url = base_url.rstrip("/") + "/api/chat"
        self.retry = retry_config_from_model_config(config)

    def generate(self, prompt: str, **kwargs) -> str:
        """Generate response from a local Ollama server

        Args:
            prompt: Input prompt
            **kwargs: Per-call overrides (model, temperature, top_p, max_tokens)

        Returns:
            Generated text response

        Raises:
            RuntimeError: If the request or response parsing fails
        """
        payload = {
            "model": kwargs.get("model", self.config.model_name),
            "messages": [{"role": "user", "content": prompt}],
            "stream": False,
            "options": {
                "temperature": kwargs.get("temperature", self.config.temperature),
                "top_p": kwargs.get("top_p", self.config.top_p),
                # Ollama's name for max output tokens
                "num_predict": kwargs.get("max_tokens", self.config.max_tokens),
            },
        }

        try:
            response = post_json_with_retries(
                self.api_url,
                payload=payload,
                headers={"Content-Type": "application/json"},
                timeout=self.config.timeout,
                retry=self.retry,
            )
        except Exception as e:
            raise RuntimeError(f"Ollama request failed: {e}") from e

        try:
            return response.json()["message"]["content"]
        except Exception as e:
            raise RuntimeError(f"Failed to parse Ollama response JSON: {e}") from e


class OllamaChatClientFactory(ChatClientFactory):
    """Ollama factory"""

    provider = ProviderId.OLLAMA
    DEFAULT_BASE_URL = "http://localhost:11434"

    def __init__(self, endpoint: Optional[EndpointConfig] = None):
        if endpoint is None:
            endpoint = EndpointConfig()
        self.base_url = endpoint.base_url or self.DEFAULT_BASE_URL

    def build(self, config: ModelConfig) -> OllamaChatClient:
        logger.debug(f"Building Ollama client for {self.base_url}")
        return OllamaChatClient(config, base_url=self.base_url)
