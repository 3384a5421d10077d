"""
Unit tests for settings parsing and environment loading
"""
import pytest

from moodlift.config.loader import ConfigLoader
from moodlift.config.settings import Environment, SecuritySettings, Settings


def test_comma_separated_lists(monkeypatch):
    monkeypatch.setenv("SECURITY_ADMIN_API_KEYS", "key-one, key-two,,")
    monkeypatch.setenv("SECURITY_CORS_ORIGINS", "https://a.example.com,https://b.example.com")

    security = SecuritySettings()

    assert security.admin_api_keys == ["key-one", "key-two"]
    assert security.cors_origins == ["https://a.example.com", "https://b.example.com"]


def test_nested_prefixes(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "postgresql+asyncpg://u:p@localhost/moodlift")
    monkeypatch.setenv("SUPABASE_URL", "https://xyz.supabase.co/")
    monkeypatch.setenv("SITE_URL", "https://moodlift.example.com/")

    settings = Settings()

    assert settings.database.url == "postgresql+asyncpg://u:p@localhost/moodlift"
    assert settings.supabase.public_base_url == "https://xyz.supabase.co"
    assert settings.site.origin == "https://moodlift.example.com"


def test_environment_is_normalized():
    settings = Settings(environment="PRODUCTION")
    assert settings.environment == Environment.PRODUCTION
    assert settings.is_production()
    assert not settings.is_development()


def test_invalid_log_format():
    with pytest.raises(ValueError):
        Settings(log_format="xml")


def test_cors_config():
    config = Settings().get_cors_config()
    assert set(config) == {"allow_origins", "allow_credentials", "allow_methods", "allow_headers"}


def test_load_environment_without_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    settings = ConfigLoader.load_environment_config("staging")

    assert settings.environment == Environment.STAGING


def test_load_environment_from_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / ".env.development").write_text("APP_NAME=MoodLift Dev\nPORT=9001\n")

    settings = ConfigLoader.load_environment_config("development")

    assert settings.app_name == "MoodLift Dev"
    assert settings.port == 9001
    assert ConfigLoader.get_available_environments() == ["development"]


def test_production_requires_backend_settings(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    for name in ("DATABASE_URL", "SUPABASE_URL", "SUPABASE_ANON_KEY", "SUPABASE_SERVICE_ROLE_KEY"):
        monkeypatch.delenv(name, raising=False)
    (tmp_path / ".env.production").write_text("APP_NAME=MoodLift\n")

    assert ConfigLoader.validate_environment_config("production") is False
    assert ConfigLoader.validate_environment_config("nowhere") is False


def test_create_sample_env_file(tmp_path):
    output = tmp_path / "sample.env"

    path = ConfigLoader.create_sample_env_file("testing", str(output))

    assert path == str(output)
    content = output.read_text()
    assert "DATABASE_URL" in content
    assert "SUPABASE_SERVICE_ROLE_KEY" in content
