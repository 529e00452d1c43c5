"""Pytest configuration and fixtures for Hue Scene Manager tests."""

import json
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from core.client import HueBridgeClient
from core.config import ConfigStore, KeyValueConfigBackend, BRIDGE_IP_KEY, USERNAME_KEY


@pytest.fixture
def project_root():
    """Return the project root directory."""
    return Path(__file__).parent.parent


def make_response(body) -> MagicMock:
    """Build a fake requests.Response whose text is body encoded as JSON."""
    response = MagicMock()
    response.text = body if isinstance(body, str) else json.dumps(body)
    return response


@pytest.fixture
def store():
    """Config store with a bridge IP and username already saved."""
    store = ConfigStore(KeyValueConfigBackend())
    store.save(BRIDGE_IP_KEY, '10.0.0.2')
    store.save(USERNAME_KEY, 'abc123')
    return store


@pytest.fixture
def session():
    """Mocked requests session.

    session.respond(body) makes every request answer with body as JSON.
    """
    session = MagicMock()

    def respond(body):
        session.request.return_value = make_response(body)

    session.respond = respond
    return session


@pytest.fixture
def client(store, session):
    """HueBridgeClient using the mocked session."""
    return HueBridgeClient(store, session=session)
