"""Chat client factories"""

from modelhub.infrastructure.llm.base import ChatClient, ChatClientFactory
from modelhub.infrastructure.llm.registry import ProviderRegistry, build_registry

__all__ = ["ChatClient", "ChatClientFactory", "ProviderRegistry", "build_registry"]
