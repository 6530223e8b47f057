"""Configuration manager for loading and validating .modelhub.yml"""

import copy
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import ValidationError

from modelhub.domain.config import AppConfig, ProvidersConfig, SettingsSnapshot
from modelhub.domain.errors import ConfigurationError

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = ".modelhub.yml"


class ConfigManager:
    """Manages configuration from .modelhub.yml and environment variables

    Loads configuration with validation using Pydantic models. Configuration priority:
    1. Default values (defined in Pydantic models)
    2. .modelhub.yml file (searched from current directory)
    3. Environment variables (MODELHUB_*)
    4. CLI arguments (handled by CLI layer)

    The settings section is re-read on every snapshot() call so that edits made
    by other tools are picked up by the next request.
    """

    DEFAULT_CONFIG = {
        "settings": {
            "default_provider": None,
            "temperature": 0.7,
            "max_retries": 3,
            "top_p": 0.9,
            "timeout": 60,
            "max_output_tokens": 0,
        },
        "providers": {},
    }

    def __init__(self, config_path: Optional[Path] = None):
        """Initialize config manager

        Args:
            config_path: Path to .modelhub.yml (searches from current dir if None)

        Raises:
            ConfigurationError: If configuration validation fails
        """
        if isinstance(config_path, str):
            config_path = Path(config_path)
        self.config_path = config_path or self._find_config_file()
        self.config: AppConfig = self._validated_load()

    def _find_config_file(self) -> Optional[Path]:
        """Find .modelhub.yml file starting from current directory

        Returns:
            Path to config file or None if not found
        """
        current = Path.cwd()
        for parent in [current] + list(current.parents):
            config_file = parent / CONFIG_FILE_NAME
            if config_file.exists():
                logger.info(f"Found config file: {config_file}")
                return config_file
        logger.debug(f"No {CONFIG_FILE_NAME} found, using defaults")
        return None

    def _validated_load(self) -> AppConfig:
        try:
            return self._load_config()
        except ValidationError as e:
            errors = []
            for error in e.errors():
                field = ".".join(str(x) for x in error["loc"])
                msg = error["msg"]
                errors.append(f"  - {field}: {msg}")
            raise ConfigurationError(
                "Configuration validation failed:\n" + "\n".join(errors)
            ) from e

    def _load_config(self) -> AppConfig:
        """Load configuration from file and validate with Pydantic

        Returns:
            Validated AppConfig instance

        Raises:
            ValidationError: If configuration is invalid
        """
        config_dict = copy.deepcopy(self.DEFAULT_CONFIG)

        if self.config_path and self.config_path.exists():
            try:
                with open(self.config_path, "r", encoding="utf-8") as f:
                    file_config = yaml.safe_load(f) or {}
            except (OSError, yaml.YAMLError) as e:
                logger.warning(f"Failed to load config from {self.config_path}: {e}")
                logger.info("Using default configuration")
            else:
                if not isinstance(file_config, dict):
                    raise ConfigurationError(
                        f"Configuration file {self.config_path} must contain a mapping, "
                        f"got {type(file_config).__name__}"
                    )
                config_dict = self._merge_config(config_dict, file_config)
                logger.debug(f"Loaded configuration from {self.config_path}")

        config_dict = self._apply_env_overrides(config_dict)

        return AppConfig(**config_dict)

    def _merge_config(self, base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
        """Recursively merge configuration dictionaries

        Args:
            base: Base configuration
            override: Override configuration

        Returns:
            Merged configuration
        """
        result = base.copy()
        for key, value in override.items():
            # An empty YAML section ("settings:") keeps the defaults
            if value is None and isinstance(result.get(key), dict):
                continue
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._merge_config(result[key], value)
            else:
                result[key] = value
        return result

    def _apply_env_overrides(self, config: Dict[str, Any]) -> Dict[str, Any]:
        """Apply environment variable overrides

        Args:
            config: Configuration dictionary

        Returns:
            Configuration with env overrides applied
        """
        settings = config["settings"]
        # Non-mapping sections are left for pydantic to report
        if not isinstance(settings, dict):
            return config

        if os.getenv("MODELHUB_PROVIDER"):
            settings["default_provider"] = os.getenv("MODELHUB_PROVIDER")

        if os.getenv("MODELHUB_MAX_OUTPUT_TOKENS"):
            settings["max_output_tokens"] = os.getenv("MODELHUB_MAX_OUTPUT_TOKENS")

        # API keys are handled by the chat clients themselves
        return config

    def snapshot(self) -> SettingsSnapshot:
        """Read the current persisted settings

        Returns:
            Freshly loaded settings snapshot

        Raises:
            ConfigurationError: If the configuration became invalid since startup
        """
        self.config = self._validated_load()
        return self.config.settings

    def get_providers_config(self) -> ProvidersConfig:
        """Get provider endpoint configuration

        Returns:
            Providers configuration model
        """
        return self.config.providers
