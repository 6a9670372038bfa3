"""Test fixtures for scoring and API tests."""

import random
import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient


def ensure_src_on_path() -> None:
    root = Path(__file__).resolve().parent.parent
    src_path = root / "src"
    if str(src_path) not in sys.path:
        sys.path.append(str(src_path))


ensure_src_on_path()

from api import app
from api.routers.pronunciation import get_rng
from services.pronunciation import load_catalog


SMALL_CATALOG = [
    {"id": "toyota", "name": "Toyota", "phonemes": "t-o-y-o-t-a",
     "pronunciation": "toy-OH-tah", "country": "Japan"},
    {"id": "honda", "name": "Honda", "phonemes": "h-o-n-d-a",
     "pronunciation": "HON-dah", "country": "Japan"},
    {"id": "kia", "name": "Kia", "phonemes": "k-i-a",
     "pronunciation": "KEE-ah", "country": "South Korea"},
    {"id": "tesla", "name": "Tesla", "phonemes": "t-e-s-l-a",
     "pronunciation": "TES-lah", "country": "USA"},
    {"id": "lexus", "name": "Lexus", "phonemes": "l-e-x-u-s",
     "pronunciation": "LEK-sus", "country": "Japan"},
]


@pytest.fixture
def rng():
    return random.Random(42)


@pytest.fixture
def small_catalog():
    return load_catalog(SMALL_CATALOG)


@pytest.fixture(scope="function")
def client():
    app.dependency_overrides[get_rng] = lambda: random.Random(0)
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
