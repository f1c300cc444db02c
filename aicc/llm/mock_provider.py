"""Deterministic offline provider for debugging and tests."""

import json

from aicc.llm.base import BaseLLMProvider, ChatMessage

MOCK_PLAN = {
    "commits": [
        {
            "title": "chore: mock commit from provider",
            "body": "",
            "score": 80,
            "reasons": ["mock mode"],
        }
    ],
    "meta": {"splitRecommended": False},
}


class MockProvider(BaseLLMProvider):
    """Returns a fixed single-commit plan without calling any model."""

    name = "mock"

    def chat(self, messages: list[ChatMessage], max_tokens: int) -> str:
        return json.dumps(MOCK_PLAN)
