"""Model provider module for aicc.

This module provides a unified chat interface over several providers and
the helpers that turn their output into commit plans:
- base: BaseLLMProvider, ChatMessage
- exceptions: LLMError and subclasses
- parsing: extract_commit_plan
- prompts: generation and refine prompt builders
"""

from dotenv import load_dotenv

from aicc.config import AppConfig, LLMProvider
from aicc.llm.base import BaseLLMProvider, ChatMessage, flatten_messages
from aicc.llm.exceptions import (
    InvalidJSONError,
    LLMError,
    MissingAPIKeyError,
    NoJSONFoundError,
    ParseError,
    ProviderInvocationError,
    ProviderTimeoutError,
    SchemaValidationError,
)
from aicc.llm.parsing import extract_commit_plan, extract_json_text

# Load environment variables from .env file
load_dotenv()


def get_provider(config: AppConfig) -> BaseLLMProvider:
    """Get a provider instance for the resolved configuration.

    Args:
        config: Resolved configuration (provider, model, timeout).

    Returns:
        An instance of the configured provider.

    Raises:
        ValueError: If the provider is not supported.
    """
    provider = LLMProvider(config.provider)
    kwargs = {
        "model": config.effective_model,
        "timeout": config.timeout_seconds,
        "temperature": config.temperature,
    }

    if provider == LLMProvider.OPENCODE:
        from aicc.llm.opencode_provider import OpenCodeProvider

        return OpenCodeProvider(**kwargs)

    elif provider == LLMProvider.ANTHROPIC:
        from aicc.llm.anthropic_provider import AnthropicProvider

        return AnthropicProvider(**kwargs)

    elif provider == LLMProvider.OPENAI:
        from aicc.llm.openai_provider import OpenAIProvider

        return OpenAIProvider(**kwargs)

    elif provider == LLMProvider.GOOGLE:
        from aicc.llm.google_provider import GoogleProvider

        return GoogleProvider(**kwargs)

    elif provider == LLMProvider.OPENROUTER:
        from aicc.llm.openrouter_provider import OpenRouterProvider

        return OpenRouterProvider(**kwargs)

    elif provider == LLMProvider.MOCK:
        from aicc.llm.mock_provider import MockProvider

        return MockProvider(**kwargs)

    else:
        raise ValueError(f"Unsupported provider: {provider}")


__all__ = [
    "BaseLLMProvider",
    "ChatMessage",
    "flatten_messages",
    "get_provider",
    # Exceptions
    "LLMError",
    "MissingAPIKeyError",
    "ProviderTimeoutError",
    "ProviderInvocationError",
    "ParseError",
    "NoJSONFoundError",
    "InvalidJSONError",
    "SchemaValidationError",
    # Parsing
    "extract_commit_plan",
    "extract_json_text",
]
