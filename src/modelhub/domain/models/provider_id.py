"""Provider identifiers - the closed set of supported chat backends"""

from enum import Enum


class ProviderId(str, Enum):
    """Supported language-model backends.

    The value is the name persisted in settings files.
    """

    OLLAMA = "Ollama"
    LMSTUDIO = "LMStudio"
    GPT4ALL = "GPT4All"
    OPENAI = "OpenAI"
    MISTRAL = "Mistral"
    ANTHROPIC = "Anthropic"
    GROQ = "Groq"

    @classmethod
    def names(cls) -> list[str]:
        """Persisted names of every provider, in declaration order"""
        return [provider.value for provider in cls]
