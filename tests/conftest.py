"""Pytest fixtures for the checkout gateway tests."""

import copy

import pytest
from fastapi.testclient import TestClient

from src.api.dependencies import get_checkout_service
from src.api.main import app
from tests.stubs import VALID_PREFERENCE_BODY


@pytest.fixture
def preference_body():
    return copy.deepcopy(VALID_PREFERENCE_BODY)


@pytest.fixture
def api_client():
    """Factory building a TestClient whose checkout service is the given object."""

    def _build(service):
        app.dependency_overrides[get_checkout_service] = lambda: service
        return TestClient(app)

    yield _build
    app.dependency_overrides.clear()
