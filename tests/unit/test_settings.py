"""Tests for settings."""

import pytest
from pydantic import ValidationError

from neo_resources.config.settings import ResourceAclSettings


def make_settings(**overrides):
    return ResourceAclSettings(_env_file=None, **overrides)


def test_defaults(monkeypatch):
    monkeypatch.delenv("NEO_RESOURCES_MAX_PAGE_SIZE", raising=False)
    settings = make_settings()
    assert settings.db_schema == "public"
    assert settings.default_page_size == 20
    assert settings.max_page_size == 1000
    assert settings.is_cache_enabled is False


def test_reads_prefixed_environment(monkeypatch):
    monkeypatch.setenv("NEO_RESOURCES_MAX_PAGE_SIZE", "50")
    monkeypatch.setenv("NEO_RESOURCES_OWNERSHIP_CACHE_ENABLED", "true")
    settings = make_settings()
    assert settings.max_page_size == 50
    assert settings.is_cache_enabled is True


def test_strips_asyncpg_driver_suffix():
    settings = make_settings(database_url="postgresql+asyncpg://u:p@db:5432/acl")
    assert settings.database_url == "postgresql://u:p@db:5432/acl"


@pytest.mark.parametrize("schema", ["Public", "acl; DROP TABLE users", "1acl", ""])
def test_rejects_unsafe_schema_names(schema):
    with pytest.raises(ValidationError):
        make_settings(db_schema=schema)


def test_rejects_inconsistent_sizes():
    with pytest.raises(ValidationError):
        make_settings(db_pool_min_size=5, db_pool_max_size=2)
    with pytest.raises(ValidationError):
        make_settings(default_page_size=50, max_page_size=10)
