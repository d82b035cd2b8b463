"""
Shared pytest fixtures for the FormValidator test suite.
"""

import pytest
from fastapi.testclient import TestClient

from formvalidator.api.app import create_app
from formvalidator.tests.helpers import ErrorRecorder


@pytest.fixture
def recorder() -> ErrorRecorder:
    """A fresh on_error recorder."""
    return ErrorRecorder()


@pytest.fixture
def client(monkeypatch) -> TestClient:
    """A test client for an app built with known banner settings."""
    monkeypatch.setenv("BANNER_TITLE", "Validation Error")
    monkeypatch.setenv("BANNER_VISIBLE_MS", "3000")
    return TestClient(create_app())
