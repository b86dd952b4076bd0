"""Shared fixtures."""

import json
from pathlib import Path

import pytest

REPO_ROOT = Path(__file__).resolve().parent.parent


@pytest.fixture
def request_path() -> Path:
    """Path of the bundled request.json."""
    return REPO_ROOT / "request.json"


@pytest.fixture
def request_payload(request_path):
    """Bundled request.json as plain data, safe to mutate."""
    with open(request_path, encoding="utf-8") as f:
        return json.load(f)
