"""Base classes and shared utilities for model providers."""

import os
from abc import ABC, abstractmethod
from dataclasses import asdict, dataclass

from aicc.llm.exceptions import MissingAPIKeyError


@dataclass(frozen=True)
class ChatMessage:
    """One message of a chat-style prompt."""

    role: str
    content: str

    def to_dict(self) -> dict[str, str]:
        return asdict(self)


def split_system_messages(messages: list[ChatMessage]) -> tuple[str, list[ChatMessage]]:
    """Separate system messages from the conversation.

    Returns:
        (joined system text, remaining messages)
    """
    system = "\n\n".join(m.content for m in messages if m.role == "system")
    rest = [m for m in messages if m.role != "system"]
    return system, rest


def flatten_messages(messages: list[ChatMessage]) -> str:
    """Render messages as one ``ROLE: content`` prompt string."""
    return "\n\n".join(f"{m.role.upper()}: {m.content}" for m in messages)


class BaseLLMProvider(ABC):
    """Abstract base class for model providers."""

    name = "base"

    def __init__(self, model: str, timeout: float, temperature: float = 0.4):
        """Initialize the provider.

        Args:
            model: Model identifier understood by the provider.
            timeout: Call timeout in seconds.
            temperature: Sampling temperature, where supported.
        """
        self.model = model
        self.timeout = timeout
        self.temperature = temperature

    @abstractmethod
    def chat(self, messages: list[ChatMessage], max_tokens: int) -> str:
        """Send a chat prompt and return the raw text reply.

        Args:
            messages: Ordered prompt messages.
            max_tokens: Output token budget.

        Returns:
            The model's raw text output.

        Raises:
            MissingAPIKeyError: If the API key is not set.
            ProviderTimeoutError: If the call times out.
            ProviderInvocationError: If the call fails otherwise.
        """
        pass

    def _get_api_key_with_fallback(self, env_var_name: str, provider_name: str) -> str:
        """Get an API key from the environment, then the credentials file.

        Args:
            env_var_name: Environment variable name to check.
            provider_name: Human-readable provider name for error messages.

        Returns:
            The API key string.

        Raises:
            MissingAPIKeyError: If the API key is not found.
        """
        api_key = os.getenv(env_var_name)
        if api_key:
            return api_key

        from aicc.global_config import get_credential

        api_key = get_credential(env_var_name)
        if api_key:
            return api_key

        raise MissingAPIKeyError(
            f"{provider_name} API key not found. Set it using:\n"
            f"  1. Environment variable: export {env_var_name}=your_key_here\n"
            f"  2. Run: aicc config set-key {provider_name.lower()}"
        )
