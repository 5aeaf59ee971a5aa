"""
tests/conftest.py
=================
Shared pytest fixtures. Rate limiting is switched off before the app loads.
"""
import sys, os
sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))
os.environ.setdefault("RATE_LIMIT_ENABLED", "false")

import random

import pytest


@pytest.fixture
def rng():
    """Seeded random source so generator tests are reproducible"""
    return random.Random(1234)


@pytest.fixture
def client():
    from fastapi.testclient import TestClient
    from app import app

    with TestClient(app) as test_client:
        yield test_client
