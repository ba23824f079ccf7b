"""
Shared fixtures for the WebFitness API test suite.

Every test gets its own store and its own application instance; nothing is
shared between tests.
"""

import pytest
from fastapi.testclient import TestClient

from backend.main import create_app
from backend.settings import Settings
from infrastructure.memory import InMemoryFitnessStore
from tests.fakes import FakeClock, make_exercise, make_user


@pytest.fixture
def clock():
    """Controllable clock starting at FIXED_NOW."""
    return FakeClock()


@pytest.fixture
def store(clock):
    """Empty store driven by the fake clock."""
    return InMemoryFitnessStore(clock=clock)


@pytest.fixture
def seeded_store(store):
    """
    Store with user 1 and two exercises:
    1 "Squats" (Lower Body, All Ages) and 2 "Plank" (Core, Age 30-45).
    """
    store.create_exercise(make_exercise())
    store.create_exercise(make_exercise(name="Plank", category="Core", age_range="Age 30-45"))
    store.create_user(make_user())
    return store


@pytest.fixture
def test_settings():
    """Settings isolated from the environment and .env files."""
    return Settings(environment="test", seed_exercises=False, _env_file=None)


@pytest.fixture
def client(test_settings, seeded_store):
    """TestClient for an app serving the seeded store as user 1."""
    app = create_app(settings=test_settings, store=seeded_store)
    return TestClient(app)
