"""Configuration for aicc.

Settings resolve through a fixed precedence chain, lowest first:

1. Built-in defaults (the ``AppConfig`` field defaults below)
2. Global config file (``$XDG_CONFIG_HOME/aicc/config.yaml``)
3. Project config file (``.aiccrc`` and friends, found walking up from cwd)
4. ``AICC_*`` environment variables
5. Explicit overrides (CLI flags)

``load_config_detailed`` also reports which layer supplied each field.
"""

import os
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic.alias_generators import to_camel

from aicc.log import get_logger

logger = get_logger(__name__)


class ConfigError(Exception):
    """Raised when configuration values are invalid or unreadable."""

    pass


class LLMProvider(str, Enum):
    """Supported model providers."""

    OPENCODE = "opencode"
    ANTHROPIC = "anthropic"
    OPENAI = "openai"
    GOOGLE = "google"
    OPENROUTER = "openrouter"
    MOCK = "mock"


class PrivacyLevel(str, Enum):
    """How much of the diff is shared with the model.

    LOW shares raw hunk lines, MEDIUM only hunk metadata, HIGH only
    per-file totals.
    """

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class StyleMode(str, Enum):
    """Commit title rendering modes."""

    STANDARD = "standard"
    GITMOJI = "gitmoji"
    GITMOJI_PURE = "gitmoji-pure"


# Default model per provider, used when no model is configured
DEFAULT_MODELS = {
    LLMProvider.OPENCODE: "github-copilot/gpt-4.1",
    LLMProvider.ANTHROPIC: "claude-sonnet-4-20250514",
    LLMProvider.OPENAI: "gpt-4.1",
    LLMProvider.GOOGLE: "gemini-2.5-flash",
    LLMProvider.OPENROUTER: "anthropic/claude-sonnet-4",
    LLMProvider.MOCK: "mock",
}

# Environment variable names for API keys
API_KEY_ENV_VARS = {
    LLMProvider.ANTHROPIC: "ANTHROPIC_API_KEY",
    LLMProvider.OPENAI: "OPENAI_API_KEY",
    LLMProvider.GOOGLE: "GOOGLE_API_KEY",
    LLMProvider.OPENROUTER: "OPENROUTER_API_KEY",
}

DEFAULT_STYLE_SAMPLES = 120
DEFAULT_MAX_TOKENS = 512
DEFAULT_TEMPERATURE = 0.4
DEFAULT_MODEL_TIMEOUT_MS = 120_000
DEFAULT_CACHE_DIR = ".git/.aicc-cache"

# Environment variable -> config field
ENV_VARS = {
    "AICC_PROVIDER": "provider",
    "AICC_MODEL": "model",
    "AICC_PRIVACY": "privacy",
    "AICC_STYLE": "style",
    "AICC_STYLE_SAMPLES": "style_samples",
    "AICC_MAX_TOKENS": "max_tokens",
    "AICC_TEMPERATURE": "temperature",
    "AICC_MODEL_TIMEOUT_MS": "model_timeout_ms",
    "AICC_VERBOSE": "verbose",
}

DEBUG_PROVIDER_ENV_VAR = "AICC_DEBUG_PROVIDER"


class AppConfig(BaseModel):
    """Fully resolved application configuration."""

    model_config = ConfigDict(extra="ignore", protected_namespaces=())

    provider: LLMProvider = LLMProvider.OPENCODE
    model: Optional[str] = None
    privacy: PrivacyLevel = PrivacyLevel.LOW
    style: StyleMode = StyleMode.STANDARD
    style_samples: int = Field(default=DEFAULT_STYLE_SAMPLES, ge=0)
    max_tokens: int = Field(default=DEFAULT_MAX_TOKENS, gt=0)
    temperature: float = Field(default=DEFAULT_TEMPERATURE, ge=0.0, le=2.0)
    model_timeout_ms: int = Field(default=DEFAULT_MODEL_TIMEOUT_MS, gt=0)
    cache_dir: str = DEFAULT_CACHE_DIR
    plugins: list[str] = Field(default_factory=list)
    verbose: bool = False

    @property
    def effective_model(self) -> str:
        """The configured model, or the provider's default."""
        return self.model or DEFAULT_MODELS[self.provider]

    @property
    def allow_gitmoji(self) -> bool:
        """Whether titles may carry a leading gitmoji."""
        return self.style != StyleMode.STANDARD

    @property
    def timeout_seconds(self) -> float:
        return self.model_timeout_ms / 1000


@dataclass
class ResolvedConfig:
    """A resolved config with the layer each field came from."""

    config: AppConfig
    sources: dict[str, str]
    layers: dict[str, dict[str, Any]] = field(default_factory=dict)


def _key_map() -> dict[str, str]:
    """Map accepted spellings (snake, camel, kebab) to field names."""
    mapping = {}
    for name in AppConfig.model_fields:
        mapping[name] = name
        mapping[to_camel(name)] = name
        mapping[name.replace("_", "-")] = name
    return mapping


def normalize_config_keys(raw: Mapping[str, Any], source: str) -> dict[str, Any]:
    """Rename keys of a raw config layer to AppConfig field names.

    Unknown keys are dropped.

    Args:
        raw: The raw layer as read from a file, env or CLI.
        source: Layer name, used in log messages.

    Returns:
        The layer keyed by field name.
    """
    mapping = _key_map()
    normalized = {}
    for key, value in raw.items():
        name = mapping.get(str(key))
        if name is None:
            logger.debug("Ignoring unknown %s config key %r", source, key)
            continue
        normalized[name] = value
    return normalized


def read_env_layer(env: Optional[Mapping[str, str]] = None) -> dict[str, Any]:
    """Collect config values from AICC_* environment variables.

    Args:
        env: Environment mapping. Defaults to ``os.environ``.

    Returns:
        The env layer keyed by field name.
    """
    env = os.environ if env is None else env
    layer: dict[str, Any] = {}
    for var, name in ENV_VARS.items():
        value = env.get(var)
        if value is not None and value != "":
            layer[name] = value

    if env.get(DEBUG_PROVIDER_ENV_VAR, "").lower() == LLMProvider.MOCK.value:
        layer["provider"] = LLMProvider.MOCK.value

    return layer


def load_config_detailed(
    cwd: Optional[Path] = None,
    overrides: Optional[Mapping[str, Any]] = None,
    env: Optional[Mapping[str, str]] = None,
) -> ResolvedConfig:
    """Resolve the configuration and record each field's source.

    Args:
        cwd: Directory to start the project config search from.
        overrides: Highest precedence values, usually CLI flags. ``None``
            values are ignored.
        env: Environment mapping. Defaults to ``os.environ``.

    Returns:
        A ResolvedConfig.

    Raises:
        ConfigError: If a file cannot be read or a value is invalid.
    """
    from aicc.global_config import load_global_config
    from aicc.user_config import load_project_config

    cwd = cwd or Path.cwd()

    layers = {
        "global": normalize_config_keys(load_global_config(), "global"),
        "project": normalize_config_keys(load_project_config(cwd), "project"),
        "env": read_env_layer(env),
        "override": normalize_config_keys(
            {k: v for k, v in (overrides or {}).items() if v is not None},
            "override",
        ),
    }

    merged: dict[str, Any] = {}
    sources = {name: "default" for name in AppConfig.model_fields}
    for source, layer in layers.items():
        for name, value in layer.items():
            merged[name] = value
            sources[name] = source

    try:
        config = AppConfig.model_validate(merged)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration:\n{e}")

    logger.debug("Resolved config sources: %s", sources)
    return ResolvedConfig(config=config, sources=sources, layers=layers)


def load_config(
    cwd: Optional[Path] = None,
    overrides: Optional[Mapping[str, Any]] = None,
) -> AppConfig:
    """Resolve the configuration.

    Args:
        cwd: Directory to start the project config search from.
        overrides: Highest precedence values, usually CLI flags.

    Returns:
        The resolved AppConfig.

    Raises:
        ConfigError: If a file cannot be read or a value is invalid.
    """
    return load_config_detailed(cwd=cwd, overrides=overrides).config
