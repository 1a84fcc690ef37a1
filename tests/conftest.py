"""Shared test fixtures."""

import logging
import sys
from datetime import datetime, timedelta
from pathlib import Path

import pytest
import respx

# Add src/ to path so tests can import goatherd
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from goatherd.core.config import settings  # noqa: E402
from goatherd.data.goats import Goat, GoatSex, HealthStatus, MedicalRecord, MedicalType, MilkRecord  # noqa: E402
from goatherd.data.pastures import GrassType, Pasture, PastureCondition  # noqa: E402
from goatherd.data.store import FarmStore, MemoryBackend  # noqa: E402


@pytest.fixture
def mock_openai():
    """Mock chat-completion API responses."""
    with respx.mock(base_url="https://api.openai.com", assert_all_called=False) as mock:
        yield mock


@pytest.fixture
def mock_bootstrap():
    """Mock the bootstrap page host."""
    with respx.mock(base_url="https://bootstrap.example.com", assert_all_called=False) as mock:
        yield mock


@pytest.fixture
def api_key(monkeypatch):
    """Configure a test API key for the duration of a test."""
    monkeypatch.setattr(settings, "openai_api_key", "sk-test-1234")
    return "sk-test-1234"


@pytest.fixture
def no_api_key(monkeypatch):
    monkeypatch.setattr(settings, "openai_api_key", None)


@pytest.fixture
def data_dir(tmp_path, monkeypatch):
    """Point record storage at a temporary directory."""
    monkeypatch.setattr(settings, "goatherd_data_dir", tmp_path)
    return tmp_path


@pytest.fixture
def sample_completion():
    """Sample chat-completion response."""
    return {
        "id": "chatcmpl-test",
        "object": "chat.completion",
        "choices": [
            {
                "index": 0,
                "message": {"role": "assistant", "content": "  Bella is a gentle Nubian doe.  "},
                "finish_reason": "stop",
            }
        ],
    }


@pytest.fixture
def doe():
    return Goat(
        name="Bella",
        breed="Nubian",
        age=3,
        sex=GoatSex.FEMALE,
        health_status=HealthStatus.HEALTHY,
        temperament_notes="Gentle and friendly",
        date_added=datetime(2024, 1, 10, 9, 0),
    )


@pytest.fixture
def buck():
    return Goat(name="Max", breed="Boer", age=2, sex=GoatSex.MALE, date_added=datetime(2024, 1, 10, 9, 0))


@pytest.fixture
def vaccinated_doe(doe):
    doe.add_medical_record(
        MedicalRecord(date=datetime(2024, 3, 15), type=MedicalType.VACCINATION, description="CD&T booster")
    )
    return doe


@pytest.fixture
def milking_doe(doe):
    start = datetime(2024, 5, 1, 7, 0)
    for day in range(14):
        doe.add_milk_record(MilkRecord(date=start + timedelta(days=day), quantity=2.0))
    return doe


@pytest.fixture
def pasture():
    return Pasture(
        name="North Field",
        size=2.5,
        grass_type=GrassType.MIXED,
        condition=PastureCondition.GOOD,
        rest_period=30,
        capacity=6,
    )


@pytest.fixture
def empty_store():
    """Store with in-memory storage and no seeded records."""
    return FarmStore.open(MemoryBackend(), seed=False)


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop handlers that setup_logging bound to a captured stdout."""
    yield
    logger = logging.getLogger("goatherd")
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
