"""Root pytest configuration for all tests.

This conftest applies to all test types (unit, integration).
"""

import pytest


@pytest.fixture(autouse=True)
def isolate_environment(monkeypatch, tmp_path):
    """Keep tests independent of the developer's shell and working directory.

    Removes dev.to variables from the environment and runs each test from
    an empty temporary directory, so no real .env or .devto-sync.yaml is
    picked up.
    """
    monkeypatch.delenv("DEVTO_API_KEY", raising=False)
    monkeypatch.delenv("DEVTO_API_URL", raising=False)
    monkeypatch.chdir(tmp_path)
