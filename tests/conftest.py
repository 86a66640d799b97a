"""
Shared pytest fixtures for cloz tests.

This file is automatically loaded by pytest. Fixtures defined here are
available to all test files without explicit imports.
"""

import os as _os
import typing as _typing
import unittest.mock as _mock

import pytest as _pytest

import cloz.config as config

# Environment keys that should be cleared for isolated tests
ENV_KEYS_TO_CLEAR = [
    "CLOZ_MARKER_NAME",
    "CLOZ_INIT_HOOK_NAME",
    "CLOZ_ENV_FILE",
]


@_pytest.fixture
def clean_env() -> dict[str, str]:
    """
    Return environment dict with test-related keys removed.

    Use with mock.patch.dict to isolate tests from the actual environment.
    """
    return {k: v for k, v in _os.environ.items() if k not in ENV_KEYS_TO_CLEAR}


@_pytest.fixture(autouse=True)
def isolated_settings(clean_env: dict[str, str]) -> _typing.Iterator[None]:
    """
    Run every test with default hook names and a fresh settings cache.

    Tests that need other names pass settings explicitly or patch the
    environment themselves.
    """
    config.reset_settings()
    with _mock.patch.dict(_os.environ, clean_env, clear=True):
        yield
    config.reset_settings()


@_pytest.fixture
def clean_settings() -> config.ClozSettings:
    """
    Settings instance isolated from environment and .env file.

    This fixture ensures tests get predictable default settings.
    """
    return config.ClozSettings.construct_without_dotenv()
