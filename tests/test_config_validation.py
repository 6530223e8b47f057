"""Tests for configuration validation with Pydantic."""

import pytest
import yaml
from pydantic import ValidationError

from modelhub.domain.config import AppConfig, EndpointConfig, ProvidersConfig, SettingsSnapshot
from modelhub.domain.errors import ConfigurationError
from modelhub.domain.models.provider_id import ProviderId
from modelhub.infrastructure.config.config_manager import ConfigManager


def _write_config(tmp_path, data) -> str:
    config_file = tmp_path / ".modelhub.yml"
    config_file.write_text(yaml.dump(data), encoding="utf-8")
    return str(config_file)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    monkeypatch.delenv("MODELHUB_PROVIDER", raising=False)
    monkeypatch.delenv("MODELHUB_MAX_OUTPUT_TOKENS", raising=False)


class TestSettingsSnapshotValidation:
    """Tests for SettingsSnapshot validation."""

    def test_defaults(self):
        """Test default settings"""
        settings = SettingsSnapshot()
        assert settings.default_provider is None
        assert settings.temperature == 0.7
        assert settings.max_retries == 3
        assert settings.max_output_tokens == 0

    def test_unknown_provider_name_accepted(self):
        """Test provider names are only checked at resolution time"""
        settings = SettingsSnapshot(default_provider="BogusProvider")
        assert settings.default_provider == "BogusProvider"

    def test_temperature_too_high(self):
        """Test temperature above maximum"""
        with pytest.raises(ValidationError, match="temperature"):
            SettingsSnapshot(temperature=3.0)

    def test_top_p_above_one(self):
        """Test top_p above 1.0"""
        with pytest.raises(ValidationError, match="top_p"):
            SettingsSnapshot(top_p=1.5)

    def test_negative_max_output_tokens(self):
        """Test max_output_tokens cannot be negative"""
        with pytest.raises(ValidationError, match="max_output_tokens"):
            SettingsSnapshot(max_output_tokens=-1)

    def test_timeout_zero(self):
        """Test timeout must be positive"""
        with pytest.raises(ValidationError, match="timeout"):
            SettingsSnapshot(timeout=0)

    def test_snapshot_is_frozen(self):
        """Test snapshot cannot be mutated"""
        settings = SettingsSnapshot()
        with pytest.raises(ValidationError):
            settings.temperature = 0.1


class TestProvidersConfig:
    """Tests for ProvidersConfig."""

    @pytest.mark.parametrize("provider", list(ProviderId))
    def test_every_provider_has_endpoint(self, provider):
        """Test each provider maps to an endpoint section"""
        assert isinstance(ProvidersConfig().for_provider(provider), EndpointConfig)

    def test_for_provider(self):
        """Test lookup returns the matching section"""
        config = ProvidersConfig(lmstudio=EndpointConfig(base_url="http://studio:1234/v1"))
        assert config.for_provider(ProviderId.LMSTUDIO).base_url == "http://studio:1234/v1"


class TestAppConfigValidation:
    """Tests for AppConfig validation."""

    def test_unknown_field_rejected(self):
        """Test unknown fields are rejected"""
        with pytest.raises(ValidationError, match="extra"):
            AppConfig(unknown_field="value")

    def test_nested_validation(self):
        """Test nested validation works"""
        with pytest.raises(ValidationError, match="temperature"):
            AppConfig(settings={"temperature": 5.0})


class TestConfigManager:
    """Tests for ConfigManager."""

    def test_load_valid_config_from_file(self, tmp_path):
        """Test loading valid configuration from file"""
        config_path = _write_config(
            tmp_path,
            {
                "settings": {"default_provider": "Mistral", "max_output_tokens": 2048},
                "providers": {"mistral": {"api_key": "mk"}},
            },
        )

        manager = ConfigManager(config_path=config_path)
        settings = manager.snapshot()

        assert settings.default_provider == "Mistral"
        assert settings.max_output_tokens == 2048
        assert settings.temperature == 0.7
        assert manager.get_providers_config().mistral.api_key == "mk"

    def test_load_invalid_config_raises_error(self, tmp_path):
        """Test loading invalid configuration raises error"""
        config_path = _write_config(tmp_path, {"settings": {"temperature": 5.0}})

        with pytest.raises(ConfigurationError, match="temperature"):
            ConfigManager(config_path=config_path)

    def test_default_config_is_valid(self, tmp_path, monkeypatch):
        """Test default configuration is valid"""
        monkeypatch.chdir(tmp_path)
        manager = ConfigManager()
        assert isinstance(manager.config, AppConfig)
        assert manager.snapshot() == SettingsSnapshot()

    def test_finds_config_in_parent_directory(self, tmp_path, monkeypatch):
        """Test config file is found by walking up from the current directory"""
        _write_config(tmp_path, {"settings": {"default_provider": "Groq"}})
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        monkeypatch.chdir(nested)

        assert ConfigManager().snapshot().default_provider == "Groq"

    def test_snapshot_rereads_file(self, tmp_path):
        """Test snapshot picks up edits made after startup"""
        config_path = _write_config(tmp_path, {"settings": {"default_provider": "OpenAI"}})
        manager = ConfigManager(config_path=config_path)
        assert manager.snapshot().default_provider == "OpenAI"

        _write_config(tmp_path, {"settings": {"default_provider": "Anthropic"}})
        assert manager.snapshot().default_provider == "Anthropic"

    def test_env_overrides_work(self, tmp_path, monkeypatch):
        """Test environment variable overrides"""
        config_path = _write_config(tmp_path, {"settings": {"default_provider": "OpenAI"}})
        monkeypatch.setenv("MODELHUB_PROVIDER", "Ollama")
        monkeypatch.setenv("MODELHUB_MAX_OUTPUT_TOKENS", "4096")

        settings = ConfigManager(config_path=config_path).snapshot()
        assert settings.default_provider == "Ollama"
        assert settings.max_output_tokens == 4096

    def test_unreadable_yaml_uses_defaults(self, tmp_path):
        """Test broken YAML falls back to defaults"""
        config_file = tmp_path / ".modelhub.yml"
        config_file.write_text("settings: [unclosed", encoding="utf-8")

        manager = ConfigManager(config_path=config_file)
        assert manager.snapshot() == SettingsSnapshot()

    def test_empty_settings_section_uses_defaults(self, tmp_path):
        """Test an empty settings section keeps the default settings"""
        config_file = tmp_path / ".modelhub.yml"
        config_file.write_text("settings:\nproviders:\n", encoding="utf-8")

        manager = ConfigManager(config_path=config_file)
        assert manager.snapshot() == SettingsSnapshot()

    def test_empty_settings_section_with_env_override(self, tmp_path, monkeypatch):
        """Test env overrides apply on top of an empty settings section"""
        config_file = tmp_path / ".modelhub.yml"
        config_file.write_text("settings:\n", encoding="utf-8")
        monkeypatch.setenv("MODELHUB_PROVIDER", "Ollama")
        monkeypatch.setenv("MODELHUB_MAX_OUTPUT_TOKENS", "1024")

        settings = ConfigManager(config_path=config_file).snapshot()
        assert settings.default_provider == "Ollama"
        assert settings.max_output_tokens == 1024
        assert settings.temperature == 0.7

    def test_non_mapping_settings_section_with_env_override(self, tmp_path, monkeypatch):
        """Test a scalar settings section is a configuration error"""
        config_file = tmp_path / ".modelhub.yml"
        config_file.write_text("settings: 5\n", encoding="utf-8")
        monkeypatch.setenv("MODELHUB_PROVIDER", "Ollama")

        with pytest.raises(ConfigurationError, match="settings"):
            ConfigManager(config_path=config_file)

    def test_non_mapping_document_rejected(self, tmp_path):
        """Test a config file that is not a mapping is rejected"""
        config_file = tmp_path / ".modelhub.yml"
        config_file.write_text("- OpenAI\n- Groq\n", encoding="utf-8")

        with pytest.raises(ConfigurationError, match="must contain a mapping"):
            ConfigManager(config_path=config_file)

    def test_unknown_provider_section_rejected(self, tmp_path):
        """Test mistyped provider keys are reported instead of dropped"""
        config_path = _write_config(tmp_path, {"providers": {"openAI": {"api_key": "sk-test"}}})

        with pytest.raises(ConfigurationError, match="openAI"):
            ConfigManager(config_path=config_path)

    def test_unknown_endpoint_field_rejected(self, tmp_path):
        """Test mistyped endpoint fields are reported instead of dropped"""
        config_path = _write_config(tmp_path, {"providers": {"openai": {"apikey": "sk-test"}}})

        with pytest.raises(ConfigurationError, match="apikey"):
            ConfigManager(config_path=config_path)
