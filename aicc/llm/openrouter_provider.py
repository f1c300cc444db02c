"""OpenRouter provider implementation.

OpenRouter exposes many models behind an OpenAI-compatible API, so this
reuses the OpenAI client with a different base URL and key.
"""

from aicc.config import API_KEY_ENV_VARS, LLMProvider
from aicc.llm.openai_provider import OpenAIProvider

# OpenRouter API base URL
OPENROUTER_BASE_URL = "https://openrouter.ai/api/v1"


class OpenRouterProvider(OpenAIProvider):
    """OpenRouter provider (model ids look like ``vendor/model``)."""

    name = "openrouter"
    provider_label = "OpenRouter"
    base_url = OPENROUTER_BASE_URL

    def get_api_key(self) -> str:
        return self._get_api_key_with_fallback(API_KEY_ENV_VARS[LLMProvider.OPENROUTER], self.provider_label)
