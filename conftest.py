"""Root conftest.py for pytest configuration.

This file configures pytest for the entire project, ensuring:
- Proper Python path setup for imports
- Local-only Logfire configuration
- Shared fixtures across all tests (fake Gemini model, requests)
"""

import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Union

import logfire
import pytest
from pydantic_ai.messages import ModelMessage, ModelResponse, TextPart, UserPromptPart
from pydantic_ai.models.function import AgentInfo, FunctionModel


# ============================================================================
# Python Path Configuration
# ============================================================================

def pytest_configure(config):
    """Configure pytest with custom settings and ensure project root is in sys.path."""

    project_root = Path(__file__).parent.resolve()
    if str(project_root) not in sys.path:
        sys.path.insert(0, str(project_root))

    # Register custom markers
    config.addinivalue_line(
        "markers",
        "integration: marks tests that exercise the HTTP API end to end"
    )
    config.addinivalue_line(
        "markers",
        "unit: marks tests as unit tests (fast, no external dependencies)"
    )

    # Tests never talk to Gemini or to the Logfire backend
    logfire.configure(
        service_name="campaign_mailer_tests",
        environment="test",
        send_to_logfire=False,
        console=False,
    )
    logfire.instrument_pydantic_ai()


# ============================================================================
# Fake Gemini
# ============================================================================

@dataclass
class FakeGemini:
    """
    Stand-in for the Gemini API built on pydantic-ai's FunctionModel.

    Each request is recorded so tests can check how many calls were made and
    what was sent.
    """

    reply: Union[str, Callable[[], str], BaseException]
    prompts: List[str] = field(default_factory=list)
    requests: List[AgentInfo] = field(default_factory=list)

    @property
    def request_count(self) -> int:
        return len(self.requests)

    @property
    def model(self) -> FunctionModel:
        return FunctionModel(self._respond, model_name="fake-gemini")

    async def _respond(self, messages: List[ModelMessage], info: AgentInfo) -> ModelResponse:
        self.requests.append(info)
        self.prompts.extend(
            part.content
            for message in messages
            for part in getattr(message, "parts", [])
            if isinstance(part, UserPromptPart)
        )
        if isinstance(self.reply, BaseException):
            raise self.reply
        text = self.reply() if callable(self.reply) else self.reply
        return ModelResponse(parts=[TextPart(text)])


@pytest.fixture
def fake_gemini() -> Callable[..., FakeGemini]:
    """Factory for FakeGemini instances.

    Usage:
        def test_something(fake_gemini):
            gemini = fake_gemini('{"subject": "Hi", "body": "World"}')
            generator = EmailGenerator(model=gemini.model)
    """
    def _make(reply: Union[str, Callable[[], str], BaseException] = '{"subject": "Hi", "body": "World"}') -> FakeGemini:
        return FakeGemini(reply=reply)

    return _make


# ============================================================================
# Shared Fixtures
# ============================================================================

@pytest.fixture(scope="session")
def project_root():
    """Return the absolute path to the project root directory."""
    return Path(__file__).parent.resolve()


@pytest.fixture
def test_settings():
    """Settings with a dummy Gemini key, independent of the local .env"""
    from config.settings import Settings

    return Settings(_env_file=None, gemini_api_key="test-key")


@pytest.fixture
def make_request() -> Callable[..., Any]:
    """Factory for GenerationRequest objects with realistic defaults."""
    from generation.models import GenerationRequest, Language

    def _make(**overrides: Any):
        values: Dict[str, Optional[Any]] = {
            "product_description": "Digital file - battery storage box design - CNC & Glowforge ready",
            "product_url": "https://www.etsy.com/listing/123456789/battery-box",
            "language": Language.AR,
        }
        values.update(overrides)
        return GenerationRequest(**values)

    return _make


@pytest.fixture
def mock_env_vars(monkeypatch):
    """Fixture to mock environment variables for testing.

    Usage:
        def test_something(mock_env_vars):
            mock_env_vars({"GEMINI_API_KEY": "test-key", "DEBUG": "true"})
    """
    def _set_env_vars(env_dict: dict):
        for key, value in env_dict.items():
            monkeypatch.setenv(key, value)

    return _set_env_vars
