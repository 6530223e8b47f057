"""OpenAI-compatible chat-completions client and factory base.

This module is used to implement multiple providers (OpenAI, Mistral, Groq,
LM Studio, GPT4All) that expose an OpenAI-compatible /chat/completions API.
"""

from __future__ import annotations

import logging
import os
from typing import Optional

from modelhub.domain.config.providers import EndpointConfig
from modelhub.domain.models.model_config import ModelConfig
from modelhub.infrastructure.llm.base import ChatClient, ChatClientFactory
from modelhub.infrastructure.llm.http_client import post_json_with_retries
from modelhub.infrastructure.llm.retry import retry_config_from_model_config

logger = logging.getLogger(__name__)


class OpenAICompatibleChatClient(ChatClient):
    """OpenAI-compatible client using the chat completions endpoint."""

    def __init__(
        self,
        config: ModelConfig,
        *,
        base_url: str,
        api_key: Optional[str] = None,
        api_key_env: Optional[str] = None,
        require_api_key: bool = True,
    ):
        self.api_url = base_url.rstrip("/") + "/chat/completions"
        self.api_key = api_key or (os.getenv(api_key_env) if api_key_env else None)
        self._api_key_env = api_key_env
        self._require_api_key = require_api_key
        super().__init__(config)
        self.retry = retry_config_from_model_config(config)

    def _validate_config(self, config: ModelConfig) -> None:
        if self._require_api_key and not self.api_key:
            env_name = self._api_key_env or "<unset>"
            raise ValueError(
                "API key is required. "
                f"Set {env_name} environment variable or provide api_key in config."
            )

    def generate(self, prompt: str, **kwargs) -> str:
        payload = {
            "model": kwargs.get("model", self.config.model_name),
            "messages": [{"role": "user", "content": prompt}],
            "temperature": kwargs.get("temperature", self.config.temperature),
            "max_tokens": kwargs.get("max_tokens", self.config.max_tokens),
            "top_p": kwargs.get("top_p", self.config.top_p),
        }

        headers = {"Content-Type": "application/json"}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"

        try:
            response = post_json_with_retries(
                self.api_url,
                payload=payload,
                headers=headers,
                timeout=self.config.timeout,
                retry=self.retry,
            )
        except Exception as e:
            raise RuntimeError(f"LLM API request failed: {e}") from e

        try:
            data = response.json()
            return data["choices"][0]["message"]["content"]
        except Exception as e:
            raise RuntimeError(f"Failed to parse LLM response JSON: {e}") from e


class OpenAICompatibleChatClientFactory(ChatClientFactory):
    """Factory base for providers speaking the OpenAI chat completions API.

    Subclasses set provider, DEFAULT_BASE_URL, API_KEY_ENV and REQUIRE_API_KEY.
    """

    DEFAULT_BASE_URL: str
    API_KEY_ENV: Optional[str] = None
    REQUIRE_API_KEY = True

    def __init__(self, endpoint: Optional[EndpointConfig] = None):
        if endpoint is None:
            endpoint = EndpointConfig()
        self.base_url = endpoint.base_url or self.DEFAULT_BASE_URL
        self.api_key = endpoint.api_key

    def build(self, config: ModelConfig) -> OpenAICompatibleChatClient:
        logger.debug(f"Building {self.provider.value} client for {self.base_url}")
        return OpenAICompatibleChatClient(
            config,
            base_url=self.base_url,
            api_key=self.api_key,
            api_key_env=self.API_KEY_ENV,
            require_api_key=self.REQUIRE_API_KEY,
        )
