"""Configuration models with Pydantic validation."""

from modelhub.domain.config.app import AppConfig
from modelhub.domain.config.providers import EndpointConfig, ProvidersConfig
from modelhub.domain.config.settings import SettingsSnapshot

__all__ = [
    "AppConfig",
    "EndpointConfig",
    "ProvidersConfig",
    "SettingsSnapshot",
]
