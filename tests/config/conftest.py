"""
Config test fixtures: clean environment via monkeypatch.
"""

import pytest


@pytest.fixture
def clean_env(monkeypatch):
    """Remove all env vars that config modules might read, for isolation."""
    env_vars_to_clear = [
        "FILE_DESTINATION",
        "AZURE_STORAGE_CONNECTION_STRING", "AZURE_STORAGE_ACCOUNT_NAME",
        "AZURE_STORAGE_CONTAINER", "AZURE_STORAGE_BLOBS_PREFIX",
        "API_FORMATS", "LOG_LEVEL", "DEBUG_LOGGING",
    ]
    for var in env_vars_to_clear:
        monkeypatch.delenv(var, raising=False)
    return monkeypatch
