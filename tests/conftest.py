# tests/conftest.py
import json
from dataclasses import replace

import pytest
from fastapi.testclient import TestClient

from app.main import app
from app.lib import llm_client, rate_limit

# -------- Test client --------
@pytest.fixture
def client():
    return TestClient(app)

# -------- Canned model output --------
def story_payload(n_questions: int = 10, glossary_size: int = 22, **overrides) -> dict:
    data = {
        "title": "Un viaje a la luna",
        "content": (
            "Sofía construyó un cohete en el patio. El cohete brillaba bajo las estrellas "
            "y su perro Lunar ladraba sin parar. Juntos viajaron a la luna y encontraron "
            "un cráter lleno de piedras azules."
        ),
        "level": "intermedio",
        "estimatedReadingMinutes": 6,
        "category": "aventura",
        "questions": [
            {
                "id": f"q{i + 1}",
                "question": f"¿Pregunta {i + 1}?",
                "options": ["uno", "dos", "tres", "cuatro"],
                "correctAnswer": i % 4,
                "explanation": "Porque sí.",
            }
            for i in range(n_questions)
        ],
        "glossary": {f"palabra{chr(97 + i // 26)}{chr(97 + i % 26)}": f"Definición número {i}" for i in range(glossary_size)},
    }
    data.update(overrides)
    return data

@pytest.fixture
def make_story():
    return story_payload

# -------- Mocks for the chat client --------
class _MockMessage:
    def __init__(self, content: str):
        self.content = content

class _MockChoice:
    def __init__(self, content: str):
        self.message = _MockMessage(content)

class _MockUsage:
    def __init__(self, total_tokens: int):
        self.total_tokens = total_tokens

class _MockChatResponse:
    def __init__(self, content: str, total_tokens: int = 1234):
        self.choices = [_MockChoice(content)]
        self.usage = _MockUsage(total_tokens)
        self.model = "deepseek-chat"

class FakeCompletions:
    def __init__(self):
        self.reply = json.dumps(story_payload())
        self.error = None
        self.calls = []

    async def create(self, **kwargs):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        return _MockChatResponse(self.reply)

class FakeChat:
    def __init__(self):
        self.completions = FakeCompletions()

class FakeLLMClient:
    def __init__(self):
        self.chat = FakeChat()

    # shortcuts for tests
    def reply_with(self, content):
        self.chat.completions.reply = content if isinstance(content, str) else json.dumps(content)

    def fail_with(self, error: Exception):
        self.chat.completions.error = error

    @property
    def calls(self):
        return self.chat.completions.calls

@pytest.fixture(autouse=True)
def fake_llm(monkeypatch):
    """
    Replace the DeepSeek client everywhere so tests don't hit the network.
    """
    fake = FakeLLMClient()
    monkeypatch.setattr(llm_client, "config", replace(llm_client.config, deepseek_api_key="sk-test"))
    monkeypatch.setattr(llm_client, "_client", fake)
    yield fake

@pytest.fixture(autouse=True)
def fresh_rate_limiter():
    limiter = rate_limit.FixedWindowRateLimiter(max_requests=1000, window_seconds=3600)
    app.dependency_overrides[rate_limit.get_rate_limiter] = lambda: limiter
    yield limiter
    app.dependency_overrides.pop(rate_limit.get_rate_limiter, None)
