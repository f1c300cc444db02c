"""Tests for aicc.config and aicc.user_config."""

import json

import pytest
import yaml

from aicc.config import (
    AppConfig,
    ConfigError,
    LLMProvider,
    PrivacyLevel,
    StyleMode,
    load_config,
    load_config_detailed,
    normalize_config_keys,
    read_env_layer,
)
from aicc.user_config import find_project_config, load_project_config


def _write_global(global_dir, data):
    global_dir.mkdir(parents=True, exist_ok=True)
    (global_dir / "config.yaml").write_text(yaml.dump(data))


class TestAppConfig:
    """Tests for AppConfig defaults and derived values."""

    def test_defaults(self):
        config = AppConfig()

        assert config.provider == LLMProvider.OPENCODE
        assert config.privacy == PrivacyLevel.LOW
        assert config.style == StyleMode.STANDARD
        assert config.style_samples == 120
        assert config.max_tokens == 512
        assert config.temperature == 0.4
        assert config.model_timeout_ms == 120000
        assert config.cache_dir == ".git/.aicc-cache"
        assert config.plugins == []

    def test_effective_model_defaults_per_provider(self):
        assert AppConfig().effective_model == "github-copilot/gpt-4.1"
        assert AppConfig(provider="mock").effective_model == "mock"
        assert AppConfig(provider="openai", model="gpt-x").effective_model == "gpt-x"

    def test_allow_gitmoji(self):
        assert AppConfig().allow_gitmoji is False
        assert AppConfig(style="gitmoji").allow_gitmoji is True
        assert AppConfig(style="gitmoji-pure").allow_gitmoji is True

    def test_timeout_seconds(self):
        assert AppConfig(model_timeout_ms=1500).timeout_seconds == 1.5


class TestNormalizeKeys:
    def test_accepts_all_spellings(self):
        raw = {"styleSamples": 5, "max-tokens": 100, "model_timeout_ms": 10, "bogus": 1}

        assert normalize_config_keys(raw, "test") == {
            "style_samples": 5,
            "max_tokens": 100,
            "model_timeout_ms": 10,
        }


class TestEnvLayer:
    def test_reads_aicc_vars(self):
        env = {"AICC_MODEL": "m", "AICC_PRIVACY": "high", "AICC_MAX_TOKENS": "", "OTHER": "x"}

        assert read_env_layer(env) == {"model": "m", "privacy": "high"}

    def test_debug_provider_selects_mock(self):
        env = {"AICC_PROVIDER": "openai", "AICC_DEBUG_PROVIDER": "MOCK"}

        assert read_env_layer(env)["provider"] == "mock"


class TestProjectConfig:
    """Tests for project config discovery."""

    def test_no_config(self, tmp_path):
        assert find_project_config(tmp_path) is None
        assert load_project_config(tmp_path) == {}

    def test_json_aiccrc_found_from_subdirectory(self, tmp_path):
        (tmp_path / ".aiccrc").write_text(json.dumps({"privacy": "medium"}))
        nested = tmp_path / "src" / "pkg"
        nested.mkdir(parents=True)

        assert find_project_config(nested) == (tmp_path / ".aiccrc").resolve()
        assert load_project_config(nested) == {"privacy": "medium"}

    def test_first_name_wins_in_directory(self, tmp_path):
        (tmp_path / ".aiccrc.yaml").write_text("privacy: high\n")
        (tmp_path / ".aicc.yaml").write_text("privacy: low\n")

        assert load_project_config(tmp_path) == {"privacy": "high"}

    def test_nearest_directory_wins(self, tmp_path):
        (tmp_path / ".aiccrc").write_text("privacy: high\n")
        nested = tmp_path / "sub"
        nested.mkdir()
        (nested / ".aiccrc.yml").write_text("privacy: medium\n")

        assert load_project_config(nested) == {"privacy": "medium"}

    def test_non_mapping_rejected(self, tmp_path):
        (tmp_path / ".aiccrc").write_text("- a\n- b\n")

        with pytest.raises(ConfigError, match="mapping"):
            load_project_config(tmp_path)

    def test_unparseable_rejected(self, tmp_path):
        (tmp_path / ".aiccrc").write_text("{unclosed: [")

        with pytest.raises(ConfigError):
            load_project_config(tmp_path)


class TestLoadConfig:
    """Tests for precedence and source tracking."""

    def test_defaults_only(self, tmp_path):
        resolved = load_config_detailed(cwd=tmp_path, env={})

        assert resolved.config == AppConfig()
        assert set(resolved.sources.values()) == {"default"}

    def test_precedence_chain(self, tmp_path, isolated_config):
        _write_global(isolated_config, {"privacy": "high", "model": "global-model", "maxTokens": 100})
        (tmp_path / ".aiccrc").write_text(json.dumps({"model": "project-model", "styleSamples": 10}))
        env = {"AICC_STYLE_SAMPLES": "20", "AICC_TEMPERATURE": "0.9"}

        resolved = load_config_detailed(
            cwd=tmp_path,
            overrides={"temperature": 0.1, "provider": None},
            env=env,
        )

        config = resolved.config
        assert config.privacy == PrivacyLevel.HIGH
        assert config.max_tokens == 100
        assert config.model == "project-model"
        assert config.style_samples == 20
        assert config.temperature == 0.1
        assert config.provider == LLMProvider.OPENCODE
        assert resolved.sources["privacy"] == "global"
        assert resolved.sources["model"] == "project"
        assert resolved.sources["style_samples"] == "env"
        assert resolved.sources["temperature"] == "override"
        assert resolved.sources["provider"] == "default"

    def test_load_config_reads_process_env(self, tmp_path, monkeypatch):
        monkeypatch.setenv("AICC_STYLE", "gitmoji")

        assert load_config(cwd=tmp_path).style == StyleMode.GITMOJI

    def test_invalid_value_raises(self, tmp_path):
        (tmp_path / ".aiccrc").write_text("privacy: extreme\n")

        with pytest.raises(ConfigError, match="Invalid configuration"):
            load_config_detailed(cwd=tmp_path, env={})

    def test_out_of_range_value_raises(self, tmp_path):
        with pytest.raises(ConfigError):
            load_config_detailed(cwd=tmp_path, overrides={"temperature": 5}, env={})

    def test_plugins_from_project(self, tmp_path):
        (tmp_path / ".aiccrc").write_text("plugins:\n  - wip-guard\n  - ./my_plugin.py\n")

        config = load_config_detailed(cwd=tmp_path, env={}).config

        assert config.plugins == ["wip-guard", "./my_plugin.py"]
