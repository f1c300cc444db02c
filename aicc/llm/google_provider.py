"""Google Gemini provider implementation."""

from google import genai
from google.genai import errors, types

from aicc.config import API_KEY_ENV_VARS, LLMProvider
from aicc.llm.base import BaseLLMProvider, ChatMessage, flatten_messages, split_system_messages
from aicc.llm.exceptions import ProviderInvocationError, ProviderTimeoutError


class GoogleProvider(BaseLLMProvider):
    """Google Gemini provider."""

    name = "google"

    def get_api_key(self) -> str:
        return self._get_api_key_with_fallback(API_KEY_ENV_VARS[LLMProvider.GOOGLE], "Google")

    def chat(self, messages: list[ChatMessage], max_tokens: int) -> str:
        """Send the prompt through the Gemini API.

        Raises:
            MissingAPIKeyError: If the API key is not set.
            ProviderTimeoutError: If the request times out.
            ProviderInvocationError: For other API failures.
        """
        client = genai.Client(
            api_key=self.get_api_key(),
            # HttpOptions.timeout is in milliseconds
            http_options=types.HttpOptions(timeout=int(self.timeout * 1000)),
        )
        system, conversation = split_system_messages(messages)

        try:
            response = client.models.generate_content(
                model=self.model,
                contents=flatten_messages(conversation),
                config=types.GenerateContentConfig(
                    system_instruction=system or None,
                    max_output_tokens=max_tokens,
                    temperature=self.temperature,
                ),
            )
        except errors.APIError as e:
            raise ProviderInvocationError(f"Google API call failed: {e}")
        except Exception as e:
            # Transport timeouts surface as the HTTP client's own exception types
            if "timeout" in type(e).__name__.lower():
                raise ProviderTimeoutError(f"Model call timed out after {int(self.timeout * 1000)}ms")
            raise ProviderInvocationError(f"Google API call failed: {e}")

        return response.text or ""
