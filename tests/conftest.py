"""Shared pytest fixtures."""

from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

os.environ.pop("GOOGLE_API_KEY", None)
os.environ.setdefault("ENVIRONMENT", "test")

from app.config import Settings, get_settings  # noqa: E402
from app.main import create_app  # noqa: E402


@pytest.fixture(autouse=True)
def configure_env(monkeypatch: pytest.MonkeyPatch):
    """Run every test without a provider credential unless it asks for one."""

    monkeypatch.delenv("GOOGLE_API_KEY", raising=False)
    monkeypatch.setenv("ENVIRONMENT", "test")
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def offline_settings() -> Settings:
    return Settings(_env_file=None)


@pytest.fixture
def provider_settings() -> Settings:
    return Settings(_env_file=None, GOOGLE_API_KEY="test-key")


@pytest.fixture
def app(offline_settings: Settings):
    application = create_app()
    application.dependency_overrides[get_settings] = lambda: offline_settings
    return application
