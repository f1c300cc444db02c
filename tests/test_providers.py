"""Tests for the model providers and the provider factory."""

import json
import subprocess
from types import SimpleNamespace

import anthropic
import httpx
import openai
import pytest

from aicc.config import AppConfig, LLMProvider
from aicc.llm import (
    ChatMessage,
    MissingAPIKeyError,
    ProviderInvocationError,
    ProviderTimeoutError,
    extract_commit_plan,
    flatten_messages,
    get_provider,
)
from aicc.llm.anthropic_provider import AnthropicProvider
from aicc.llm.base import split_system_messages
from aicc.llm.google_provider import GoogleProvider
from aicc.llm.mock_provider import MockProvider
from aicc.llm.openai_provider import OpenAIProvider
from aicc.llm.opencode_provider import OpenCodeProvider
from aicc.llm.openrouter_provider import OPENROUTER_BASE_URL, OpenRouterProvider

MESSAGES = [
    ChatMessage(role="system", content="Be terse."),
    ChatMessage(role="user", content="Diff here"),
]


def _completed(returncode=0, stdout="", stderr=""):
    return subprocess.CompletedProcess(args=["opencode"], returncode=returncode, stdout=stdout, stderr=stderr)


class TestGetProvider:
    """Tests for get_provider factory function."""

    @pytest.mark.parametrize(
        "provider, expected",
        [
            ("opencode", OpenCodeProvider),
            ("anthropic", AnthropicProvider),
            ("openai", OpenAIProvider),
            ("google", GoogleProvider),
            ("openrouter", OpenRouterProvider),
            ("mock", MockProvider),
        ],
    )
    def test_returns_provider(self, provider, expected):
        assert isinstance(get_provider(AppConfig(provider=provider)), expected)

    def test_passes_model_and_timeout(self):
        config = AppConfig(provider=LLMProvider.OPENAI, model="gpt-4o", model_timeout_ms=2500, temperature=0.2)

        provider = get_provider(config)

        assert provider.model == "gpt-4o"
        assert provider.timeout == 2.5
        assert provider.temperature == 0.2

    def test_default_model_used(self):
        assert get_provider(AppConfig()).model == "github-copilot/gpt-4.1"


class TestMessageHelpers:
    def test_flatten(self):
        assert flatten_messages(MESSAGES) == "SYSTEM: Be terse.\n\nUSER: Diff here"

    def test_split_system(self):
        system, rest = split_system_messages(MESSAGES)

        assert system == "Be terse."
        assert rest == [MESSAGES[1]]


class TestOpenCodeProvider:
    """Tests for the opencode subprocess provider."""

    def _provider(self):
        return OpenCodeProvider(model="github-copilot/gpt-4.1", timeout=1.5)

    def test_success(self, mocker):
        run = mocker.patch("aicc.llm.opencode_provider.subprocess.run", return_value=_completed(stdout='{"x": 1}'))

        assert self._provider().chat(MESSAGES, 100) == '{"x": 1}'

        command = run.call_args.args[0]
        assert command[:2] == ["opencode", "run"]
        assert command[2] == flatten_messages(MESSAGES)
        assert command[3:] == ["--model", "github-copilot/gpt-4.1"]
        assert run.call_args.kwargs["timeout"] == 1.5
        assert run.call_args.kwargs["stdin"] == subprocess.DEVNULL

    def test_timeout(self, mocker):
        mocker.patch(
            "aicc.llm.opencode_provider.subprocess.run",
            side_effect=subprocess.TimeoutExpired(cmd="opencode", timeout=1.5),
        )

        with pytest.raises(ProviderTimeoutError, match="timed out after 1500ms"):
            self._provider().chat(MESSAGES, 100)

    def test_nonzero_exit(self, mocker):
        mocker.patch(
            "aicc.llm.opencode_provider.subprocess.run",
            return_value=_completed(returncode=2, stderr="model not found"),
        )

        with pytest.raises(ProviderInvocationError, match="model not found"):
            self._provider().chat(MESSAGES, 100)

    def test_binary_missing(self, mocker):
        mocker.patch("aicc.llm.opencode_provider.subprocess.run", side_effect=FileNotFoundError)

        with pytest.raises(ProviderInvocationError, match="not found in PATH"):
            self._provider().chat(MESSAGES, 100)


class TestApiKeys:
    """Tests for API key lookup."""

    def test_env_key(self, monkeypatch):
        monkeypatch.setenv("ANTHROPIC_API_KEY", "env-key")

        assert AnthropicProvider(model="m", timeout=1).get_api_key() == "env-key"

    def test_credentials_fallback(self, monkeypatch):
        from aicc.global_config import save_credential

        monkeypatch.delenv("OPENAI_API_KEY", raising=False)
        save_credential("OPENAI_API_KEY", "file-key")

        assert OpenAIProvider(model="m", timeout=1).get_api_key() == "file-key"

    def test_missing_key(self, monkeypatch):
        monkeypatch.delenv("GOOGLE_API_KEY", raising=False)

        with pytest.raises(MissingAPIKeyError, match="GOOGLE_API_KEY"):
            GoogleProvider(model="m", timeout=1).get_api_key()


class TestAnthropicProvider:
    """Tests for AnthropicProvider."""

    @pytest.fixture(autouse=True)
    def api_key(self, monkeypatch):
        monkeypatch.setenv("ANTHROPIC_API_KEY", "test-key")

    def test_chat(self, mocker):
        client_cls = mocker.patch("aicc.llm.anthropic_provider.Anthropic")
        client_cls.return_value.messages.create.return_value = SimpleNamespace(
            content=[SimpleNamespace(type="text", text='{"commits": []}')]
        )

        result = AnthropicProvider(model="claude-x", timeout=3).chat(MESSAGES, 256)

        assert result == '{"commits": []}'
        client_cls.assert_called_once_with(api_key="test-key", timeout=3)
        kwargs = client_cls.return_value.messages.create.call_args.kwargs
        assert kwargs["system"] == "Be terse."
        assert kwargs["messages"] == [{"role": "user", "content": "Diff here"}]
        assert kwargs["max_tokens"] == 256

    def test_timeout(self, mocker):
        client_cls = mocker.patch("aicc.llm.anthropic_provider.Anthropic")
        request = httpx.Request("POST", "https://api.anthropic.com/v1/messages")
        client_cls.return_value.messages.create.side_effect = anthropic.APITimeoutError(request=request)

        with pytest.raises(ProviderTimeoutError):
            AnthropicProvider(model="claude-x", timeout=3).chat(MESSAGES, 256)


class TestOpenAIProviders:
    """Tests for OpenAIProvider and OpenRouterProvider."""

    def _response(self, content):
        return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=content))])

    def test_chat(self, mocker, monkeypatch):
        monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
        client_cls = mocker.patch("aicc.llm.openai_provider.OpenAI")
        client_cls.return_value.chat.completions.create.return_value = self._response("hello")

        assert OpenAIProvider(model="gpt-x", timeout=2).chat(MESSAGES, 64) == "hello"

        client_cls.assert_called_once_with(api_key="sk-test", base_url=None, timeout=2)
        kwargs = client_cls.return_value.chat.completions.create.call_args.kwargs
        assert kwargs["messages"][0] == {"role": "system", "content": "Be terse."}

    def test_openrouter_uses_own_url_and_key(self, mocker, monkeypatch):
        monkeypatch.setenv("OPENROUTER_API_KEY", "or-key")
        client_cls = mocker.patch("aicc.llm.openai_provider.OpenAI")
        client_cls.return_value.chat.completions.create.return_value = self._response(None)

        assert OpenRouterProvider(model="a/b", timeout=2).chat(MESSAGES, 64) == ""
        client_cls.assert_called_once_with(api_key="or-key", base_url=OPENROUTER_BASE_URL, timeout=2)

    def test_timeout(self, mocker, monkeypatch):
        monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
        client_cls = mocker.patch("aicc.llm.openai_provider.OpenAI")
        request = httpx.Request("POST", "https://api.openai.com/v1/chat/completions")
        client_cls.return_value.chat.completions.create.side_effect = openai.APITimeoutError(request=request)

        with pytest.raises(ProviderTimeoutError, match="2000ms"):
            OpenAIProvider(model="gpt-x", timeout=2).chat(MESSAGES, 64)


class TestGoogleProvider:
    """Tests for GoogleProvider."""

    @pytest.fixture(autouse=True)
    def api_key(self, monkeypatch):
        monkeypatch.setenv("GOOGLE_API_KEY", "g-key")

    def test_chat(self, mocker):
        client_cls = mocker.patch("aicc.llm.google_provider.genai.Client")
        client_cls.return_value.models.generate_content.return_value = SimpleNamespace(text="reply")

        assert GoogleProvider(model="gemini-x", timeout=4).chat(MESSAGES, 64) == "reply"

        kwargs = client_cls.return_value.models.generate_content.call_args.kwargs
        assert kwargs["contents"] == "USER: Diff here"
        assert kwargs["config"].system_instruction == "Be terse."

    def test_transport_timeout(self, mocker):
        client_cls = mocker.patch("aicc.llm.google_provider.genai.Client")
        client_cls.return_value.models.generate_content.side_effect = httpx.ReadTimeout("slow")

        with pytest.raises(ProviderTimeoutError):
            GoogleProvider(model="gemini-x", timeout=4).chat(MESSAGES, 64)


class TestMockProvider:
    def test_returns_valid_plan(self):
        raw = MockProvider(model="mock", timeout=1).chat(MESSAGES, 10)

        plan = extract_commit_plan(raw)
        assert plan.commits[0].title == "chore: mock commit from provider"
        assert json.loads(raw)["meta"] == {"splitRecommended": False}
