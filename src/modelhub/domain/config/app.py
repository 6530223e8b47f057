"""Main application configuration model."""

from pydantic import BaseModel, ConfigDict, Field

from modelhub.domain.config.providers import ProvidersConfig
from modelhub.domain.config.settings import SettingsSnapshot


class AppConfig(BaseModel):
    """Main application configuration.

    This is the root configuration model that aggregates all configuration sections.
    Validation is performed at load time to fail fast on configuration errors.

    Attributes:
        settings: Persisted chat settings (provider default, sampling, limits)
        providers: Per-provider endpoint configuration
    """

    settings: SettingsSnapshot = Field(default_factory=SettingsSnapshot)
    providers: ProvidersConfig = Field(default_factory=ProvidersConfig)

    model_config = ConfigDict(
        extra="forbid",  # Reject unknown fields
        json_schema_extra={
            "example": {
                "settings": {
                    "default_provider": "Ollama",
                    "temperature": 0.7,
                    "max_retries": 3,
                    "top_p": 0.9,
                    "timeout": 60,
                    "max_output_tokens": 0,
                },
                "providers": {
                    "ollama": {"base_url": "http://localhost:11434"},
                    "openai": {"api_key": None},
                },
            }
        },
    )
