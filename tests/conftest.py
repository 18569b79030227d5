"""Shared pytest fixtures for inn_validator tests."""

from __future__ import annotations

import random

import pytest
from fastapi.testclient import TestClient

from inn_validator.config import ValidatorSettings, get_settings
from inn_validator.main import create_app


@pytest.fixture
def rng() -> random.Random:
    """Seeded random source for reproducible generated INNs."""
    return random.Random(20260101)

@pytest.fixture
def settings() -> ValidatorSettings:
    """Settings isolated from the environment and .env files."""
    return ValidatorSettings(_env_file=None)

@pytest.fixture
def client(settings: ValidatorSettings) -> TestClient:
    """HTTP client against a fresh app with overridden settings."""
    app = create_app()
    app.dependency_overrides[get_settings] = lambda: settings
    with TestClient(app) as test_client:
        yield test_client
