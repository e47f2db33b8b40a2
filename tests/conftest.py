"""
Pytest configuration and shared fixtures.

Adds the project root to the Python path so tests can import 'factorbot'
without installing it, and replaces the Telegram client with a recorder.
"""
import os
import sys
from pathlib import Path

import pytest

# Add project root to Python path
project_dir = Path(__file__).parent.parent
sys.path.insert(0, str(project_dir))

# Tests never talk to the real Bot API
for var in ("TELEGRAM_BOT_TOKEN", "TELEGRAM_BOT_TOKEN_FILE", "WEBHOOK_URL", "WEBHOOK_SECRET"):
    os.environ.pop(var, None)

from fastapi.testclient import TestClient  # noqa: E402

from factorbot.dependencies import get_telegram_client  # noqa: E402
from factorbot.main import app  # noqa: E402


class FakeTelegramClient:
    """Records replies instead of sending them."""

    def __init__(self, delivered: bool = True, error: Exception = None):
        self.sent = []
        self.delivered = delivered
        self.error = error

    def send_message(self, chat_id, text):
        if self.error is not None:
            raise self.error
        self.sent.append((chat_id, text))
        return self.delivered


def product_of_terms(terms):
    """Multiply out (prime, exponent) terms; the empty product is 1."""
    result = 1
    for prime, exponent in terms:
        result *= prime ** exponent
    return result


def make_update(text=None, chat_id=42, update_id=1):
    """Build a Telegram update payload with an optional text message."""
    message = {
        "message_id": 7,
        "date": 1700000000,
        "chat": {"id": chat_id, "type": "private"},
        "from": {"id": chat_id, "is_bot": False, "first_name": "Test"},
    }
    if text is not None:
        message["text"] = text
    return {"update_id": update_id, "message": message}


@pytest.fixture
def telegram():
    return FakeTelegramClient()


@pytest.fixture
def client(telegram):
    app.dependency_overrides[get_telegram_client] = lambda: telegram
    yield TestClient(app)
    app.dependency_overrides.clear()
