"""
Shared fixtures for the phishlens tests.

Each test gets its own seeded in-memory storage and a deterministic random
source, wired into the app through dependency overrides.
"""

import io
import random

import pytest
from fastapi.testclient import TestClient
from PIL import Image

from ..app_factory import create_app
from ..routes import get_rng
from ..storage import MemStorage, get_storage, initialize_websites


def make_image_bytes(color=(255, 255, 255), size=(100, 100), fmt="PNG") -> bytes:
    """Encode a solid colour image."""
    img = Image.new("RGB", size, color=color)
    buffer = io.BytesIO()
    img.save(buffer, format=fmt)
    return buffer.getvalue()


@pytest.fixture
def storage():
    """Create a storage seeded with the known websites."""
    test_storage = MemStorage()
    initialize_websites(test_storage)
    return test_storage


@pytest.fixture
def app(storage):
    """Create an app bound to the test storage."""
    test_app = create_app(storage=storage)
    test_app.dependency_overrides[get_storage] = lambda: storage
    test_app.dependency_overrides[get_rng] = lambda: random.Random(0)
    yield test_app
    test_app.dependency_overrides = {}


@pytest.fixture
def client(app):
    """Create test client."""
    return TestClient(app)


@pytest.fixture
def test_image_png():
    return make_image_bytes()
