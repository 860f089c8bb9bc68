"""
Root conftest.py for shared test fixtures and configuration.
This file provides common fixtures used across the test suite.
"""

import json
import shutil
import sys
import tempfile
from pathlib import Path

import httpx
import pytest
from hypothesis import HealthCheck, settings

# Add project root to Python path for consistent imports
PROJECT_ROOT = Path(__file__).parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from emoji_picker import config as picker_config_module  # noqa: E402


# The autouse isolation fixture below is function-scoped; property tests do not
# depend on it being reset between examples.
settings.register_profile(
    "emoji_picker",
    deadline=None,
    max_examples=100,
    suppress_health_check=[HealthCheck.function_scoped_fixture],
)
settings.load_profile("emoji_picker")


SAMPLE_DATASET = {
    "😀": ["grinning_face", "face", "smile", "happy", "joy"],
    "🚀": ["rocket", "space", "launch", "ship"],
    "🐱": ["cat_face", "pet", "Kitten"],
    "🍕": ["pizza", "food", "slice"],
    "❤️": ["red_heart", "love", "like"],
    "🔥": ["fire", "hot", "flame", "LIT"],
    "🎉": ["party_popper", "celebrate", "tada"],
    "🐶": ["dog_face", "pet", "puppy"],
    "☕": ["hot_beverage", "coffee", "caffeine"],
    "🌙": ["crescent_moon", "night", "sleep"],
}


# ========== Path and File System Fixtures ==========

@pytest.fixture
def isolated_temp_dir():
    """Create an isolated temporary directory that's always cleaned up."""
    temp_dir = tempfile.mkdtemp(prefix="emoji_picker_test_")
    temp_path = Path(temp_dir)
    yield temp_path
    if temp_path.exists():
        shutil.rmtree(temp_dir, ignore_errors=True)


# ========== Dataset Fixtures ==========

@pytest.fixture
def sample_dataset():
    """A small dataset in a fixed order."""
    return {emoji: list(words) for emoji, words in SAMPLE_DATASET.items()}


@pytest.fixture
def sample_dataset_bytes(sample_dataset):
    return json.dumps(sample_dataset, ensure_ascii=False).encode("utf-8")


@pytest.fixture
def fake_emoji_server(sample_dataset_bytes):
    """
    An httpx client backed by a MockTransport.

    ``server.status`` and ``server.body`` can be changed per test;
    ``server.requests`` records every request made.
    """
    class FakeServer:
        def __init__(self):
            self.status = 200
            self.body = sample_dataset_bytes
            self.requests = []

        def handler(self, request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return httpx.Response(self.status, content=self.body)

        def client(self) -> httpx.Client:
            return httpx.Client(transport=httpx.MockTransport(self.handler))

    return FakeServer()


# ========== Test Markers ==========

def pytest_configure(config):
    """Register custom test markers."""
    config.addinivalue_line("markers", "unit: Unit tests that don't require external resources")
    config.addinivalue_line("markers", "integration: Integration tests that may use files/network")
    config.addinivalue_line("markers", "asyncio: Async tests using asyncio")


# ========== Test Environment Isolation ==========

@pytest.fixture(autouse=True)
def isolate_test_environment(monkeypatch, tmp_path):
    """Automatically isolate test environment to prevent touching the real cache or config.

    This fixture:
    - Redirects XDG data/config directories and HOME to a temporary location
    - Clears the log level override
    - Drops any cached config between tests
    """
    test_data_dir = tmp_path / "test_data"
    test_data_dir.mkdir(exist_ok=True)

    monkeypatch.setenv("XDG_DATA_HOME", str(test_data_dir / "data"))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(test_data_dir / "config"))
    monkeypatch.setenv("HOME", str(test_data_dir / "home"))
    monkeypatch.delenv("EMOJI_PICKER_LOG_LEVEL", raising=False)

    monkeypatch.setattr(picker_config_module, "_CONFIG_CACHE", None)

    yield test_data_dir
