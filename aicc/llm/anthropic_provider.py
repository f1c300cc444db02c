"""Anthropic Claude provider implementation."""

import anthropic
from anthropic import Anthropic

from aicc.config import API_KEY_ENV_VARS, LLMProvider
from aicc.llm.base import BaseLLMProvider, ChatMessage, split_system_messages
from aicc.llm.exceptions import ProviderInvocationError, ProviderTimeoutError


class AnthropicProvider(BaseLLMProvider):
    """Anthropic Claude provider."""

    name = "anthropic"

    def get_api_key(self) -> str:
        return self._get_api_key_with_fallback(API_KEY_ENV_VARS[LLMProvider.ANTHROPIC], "Anthropic")

    def chat(self, messages: list[ChatMessage], max_tokens: int) -> str:
        """Send the prompt through the Anthropic Messages API.

        Raises:
            MissingAPIKeyError: If the API key is not set.
            ProviderTimeoutError: If the request times out.
            ProviderInvocationError: For other API failures.
        """
        client = Anthropic(api_key=self.get_api_key(), timeout=self.timeout)
        system, conversation = split_system_messages(messages)

        try:
            message = client.messages.create(
                model=self.model,
                max_tokens=max_tokens,
                temperature=self.temperature,
                system=system,
                messages=[m.to_dict() for m in conversation],
            )
        except anthropic.APITimeoutError:
            raise ProviderTimeoutError(f"Model call timed out after {int(self.timeout * 1000)}ms")
        except anthropic.APIError as e:
            raise ProviderInvocationError(f"Anthropic API call failed: {e}")

        return "".join(block.text for block in message.content if getattr(block, "type", "") == "text")
