"""
Tests for loading config.yml.
"""

import pytest

from core.categories import ALL_CATEGORIES
from services.config import Config, enabled_categories, load_config


@pytest.fixture(autouse=True)
def no_backend_env(monkeypatch):
    monkeypatch.setattr("services.config.load_dotenv", lambda: False)
    monkeypatch.delenv("SUPABASE_URL", raising=False)
    monkeypatch.delenv("SUPABASE_ANON_KEY", raising=False)


def write_config(tmp_path, text: str) -> str:
    path = tmp_path / "config.yml"
    path.write_text(text, encoding="utf-8")
    return str(path)


def test_defaults_from_empty_file(tmp_path):
    config = load_config(write_config(tmp_path, ""))

    assert config.DATABASE_PATH == "data/affirm.db"
    assert config.DAILY_PICKS_PER_DAY == 5
    assert config.POOL_CACHE_KEY == "pool-cache"
    assert config.DAILY_SELECTION_KEY == "daily-selection-cache"
    assert config.SUPABASE_URL is None
    assert enabled_categories(config) == set(ALL_CATEGORIES)


def test_values_from_yaml(tmp_path):
    config = load_config(write_config(tmp_path, """
DATABASE_PATH: /tmp/x.db
DAILY_PICKS_PER_DAY: 3
SUPABASE_TIMEOUT: 5
categories:
  - name: Calm
    enabled: "yes"
  - name: Gratitude
    enabled: "off"
  - Motivation
"""))

    assert config.DATABASE_PATH == "/tmp/x.db"
    assert config.DAILY_PICKS_PER_DAY == 3
    assert config.SUPABASE_TIMEOUT == 5.0
    assert enabled_categories(config) == {"Calm", "Motivation"}


def test_categories_as_mapping(tmp_path):
    config = load_config(write_config(tmp_path, """
categories:
  Calm: true
  Confidence: false
"""))

    assert enabled_categories(config) == {"Calm"}


def test_backend_credentials_from_environment(tmp_path, monkeypatch):
    monkeypatch.setenv("SUPABASE_URL", "https://p.supabase.co")
    monkeypatch.setenv("SUPABASE_ANON_KEY", "secret")

    config = load_config(write_config(tmp_path, "SUPABASE_URL: https://ignored.example.com\n"))

    assert config.SUPABASE_URL == "https://p.supabase.co"
    assert config.SUPABASE_ANON_KEY == "secret"


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(str(tmp_path / "absent.yml"))


def test_enabled_categories_ignores_disabled():
    config = Config(categories=[{"name": "Calm", "enabled": False}, {"name": "Gratitude"}])

    assert enabled_categories(config) == {"Gratitude"}
