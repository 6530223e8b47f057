"""Anthropic chat client and factory (Messages API)."""

from __future__ import annotations

import logging
import os
from typing import Optional

from modelhub.domain.config.providers import EndpointConfig
from modelhub.domain.models.model_config import ModelConfig
from modelhub.domain.models.provider_id import ProviderId
from modelhub.infrastructure.llm.base import ChatClient, ChatClientFactory
from modelhub.infrastructure.llm.http_client import post_json_with_retries
from modelhub.infrastructure.llm.retry import retry_config_from_model_config

logger = logging.getLogger(__name__)

ANTHROPIC_VERSION = "2023-06-01"


class AnthropicChatClient(ChatClient):
    """Anthropic Messages API client"""

    def __init__(self, config: ModelConfig, *, base_url: str, api_key: Optional[str] = None):
        self.api_url = base_url.rstrip("/") + "/messages"
        self.api_key = api_key or os.getenv(AnthropicChatClientFactory.API_KEY_ENV)
        super().__init__(config)
        self.retry = retry_config_from_model_config(config)

    def _validate_config(self, config: ModelConfig) -> None:
        """Validate Anthropic configuration"""
        if not self.api_key:
            raise ValueError(
                "Anthropic API key is required. "
                f"Set {AnthropicChatClientFactory.API_KEY_ENV} environment variable or provide api_key in config."
            )

    def generate(self, prompt: str, **kwargs) -> str:
        payload = {
            "model": kwargs.get("model", self.config.model_name),
            "max_tokens": kwargs.get("max_tokens", self.config.max_tokens),
            "temperature": kwargs.get("temperature", self.config.temperature),
            "top_p": kwargs.get("top_p", self.config.top_p),
            "messages": [{"role": "user", "content": prompt}],
        }
        headers = {
            "Content-Type": "application/json",
            "x-api-key": self.api_key,
            "anthropic-version": ANTHROPIC_VERSION,
        }

        try:
            response = post_json_with_retries(
                self.api_url,
                payload=payload,
                headers=headers,
                timeout=self.config.timeout,
                retry=self.retry,
            )
        except Exception as e:
            raise RuntimeError(f"Anthropic API request failed: {e}") from e

        try:
            data = response.json()
            # Responses are a list of content blocks; keep only the text ones
            return "".join(block["text"] for block in data["content"] if block.get("type") == "text")
        except Exception as e:
            raise RuntimeError(f"Failed to parse Anthropic response JSON: {e}") from e


class AnthropicChatClientFactory(ChatClientFactory):
    """Anthropic factory"""

    provider = ProviderId.ANTHROPIC
    DEFAULT_BASE_URL = "https://api.anthropic.com/v1"
    API_KEY_ENV = "ANTHROPIC_API_KEY"

    def __init__(self, endpoint: Optional[EndpointConfig] = None):
        if endpoint is None:
            endpoint = EndpointConfig()
        self.base_url = endpoint.base_url or self.DEFAULT_BASE_URL
        self.api_key = endpoint.api_key

    def build(self, config: ModelConfig) -> AnthropicChatClient:
        logger.debug(f"Building Anthropic client for {self.base_url}")
        return AnthropicChatClient(config, base_url=self.base_url, api_key=self.api_key)
