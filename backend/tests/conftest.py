"""Pytest configuration and fixtures."""

import pytest

from formstate.config import Settings, get_settings
from formstate.store.form_store import FormStore


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Keep environment-driven settings from leaking between tests."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings() -> Settings:
    return Settings()


@pytest.fixture
def store(settings) -> FormStore:
    return FormStore(settings=settings)
