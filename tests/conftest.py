from __future__ import annotations

import json
from typing import Any
from unittest.mock import AsyncMock, patch

import pytest

from image_relay.config import Settings
from image_relay.services.dispatcher import RequestDispatcher


class FakeResponse:
    def __init__(self, status_code: int = 200, payload: Any = None, text: str | None = None) -> None:
        self.status_code = status_code
        self._payload = payload
        self.text = text if text is not None else json.dumps(payload)

    def json(self) -> Any:
        return json.loads(self.text)


class FakeSession:
    """Replays queued responses (or raises queued exceptions) and records each post."""

    def __init__(self, *outcomes: FakeResponse | Exception) -> None:
        self.outcomes = list(outcomes)
        self.calls: list[dict[str, Any]] = []

    async def post(self, url: str, **kwargs: Any) -> FakeResponse:
        self.calls.append({"url": url, **kwargs})
        outcome = self.outcomes.pop(0) if len(self.outcomes) > 1 else self.outcomes[0]
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    @property
    def models_called(self) -> list[str]:
        return [call["url"].rsplit("/", 1)[-1].split(":")[0] for call in self.calls]


def image_payload(data: str = "aW1hZ2U=", mime_type: str = "image/png") -> dict[str, Any]:
    return {
        "candidates": [
            {
                "content": {"parts": [{"inlineData": {"mimeType": mime_type, "data": data}}]},
                "finishReason": "STOP",
            }
        ]
    }


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None, google_api_key="test-key")


@pytest.fixture
def make_dispatcher(settings: Settings):
    def _make(*outcomes: FakeResponse | Exception, **overrides: Any) -> RequestDispatcher:
        config = settings.model_copy(update=overrides) if overrides else settings
        return RequestDispatcher(FakeSession(*outcomes), config)

    return _make


@pytest.fixture
def sleep_mock():
    with patch("image_relay.services.dispatcher.asyncio.sleep", new_callable=AsyncMock) as mock:
        yield mock
