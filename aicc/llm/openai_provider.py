"""OpenAI provider implementation."""

import openai
from openai import OpenAI

from aicc.config import API_KEY_ENV_VARS, LLMProvider
from aicc.llm.base import BaseLLMProvider, ChatMessage
from aicc.llm.exceptions import ProviderInvocationError, ProviderTimeoutError


class OpenAIProvider(BaseLLMProvider):
    """OpenAI chat completions provider."""

    name = "openai"
    provider_label = "OpenAI"
    base_url = None

    def get_api_key(self) -> str:
        return self._get_api_key_with_fallback(API_KEY_ENV_VARS[LLMProvider.OPENAI], self.provider_label)

    def _client(self) -> OpenAI:
        return OpenAI(api_key=self.get_api_key(), base_url=self.base_url, timeout=self.timeout)

    def chat(self, messages: list[ChatMessage], max_tokens: int) -> str:
        """Send the prompt through the chat completions API.

        Raises:
            MissingAPIKeyError: If the API key is not set.
            ProviderTimeoutError: If the request times out.
            ProviderInvocationError: For other API failures.
        """
        client = self._client()

        try:
            response = client.chat.completions.create(
                model=self.model,
                messages=[m.to_dict() for m in messages],
                max_tokens=max_tokens,
                temperature=self.temperature,
            )
        except openai.APITimeoutError:
            raise ProviderTimeoutError(f"Model call timed out after {int(self.timeout * 1000)}ms")
        except openai.APIError as e:
            raise ProviderInvocationError(f"{self.provider_label} API call failed: {e}")

        if not response.choices:
            raise ProviderInvocationError(f"{self.provider_label} returned no choices")
        return response.choices[0].message.content or ""
