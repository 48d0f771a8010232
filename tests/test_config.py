"""Tests for environment-driven settings."""
import pytest

from contact_manager.config import (
    DEFAULT_API_URL,
    ConfigError,
    load_settings,
)

_VARS = (
    "CONTACTS_API_URL",
    "CONTACTS_API_TIMEOUT",
    "CONTACTS_ID_FIELD",
    "CONTACTS_KEEP_DRAFT_ON_FAILURE",
    "CONTACTS_LOG_LEVEL",
    "CM_ENV",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    for name in _VARS:
        # setenv first so teardown also removes values loaded from dotenv files
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    # Keep load_dotenv from picking up a developer's .env
    monkeypatch.chdir(tmp_path)


def _load(tmp_path):
    return load_settings(env_file=str(tmp_path / "missing.env"))


def test_defaults(tmp_path):
    settings = _load(tmp_path)

    assert settings.api_url == DEFAULT_API_URL
    assert settings.timeout_seconds == 15.0
    assert settings.id_field == "_id"
    assert settings.keep_draft_on_failure is False
    assert settings.log_level == "WARNING"
    assert settings.environment == "local"


def test_environment_overrides(tmp_path, monkeypatch):
    monkeypatch.setenv("CONTACTS_API_URL", "http://localhost:5000/contacts/")
    monkeypatch.setenv("CONTACTS_API_TIMEOUT", "2.5")
    monkeypatch.setenv("CONTACTS_ID_FIELD", "id")
    monkeypatch.setenv("CONTACTS_KEEP_DRAFT_ON_FAILURE", "1")
    monkeypatch.setenv("CONTACTS_LOG_LEVEL", "debug")
    monkeypatch.setenv("CM_ENV", "test")

    settings = _load(tmp_path)

    assert settings.api_url == "http://localhost:5000/contacts"
    assert settings.timeout_seconds == 2.5
    assert settings.id_field == "id"
    assert settings.keep_draft_on_failure is True
    assert settings.log_level == "DEBUG"
    assert settings.environment == "test"


def test_dotenv_file_is_read(tmp_path):
    env_file = tmp_path / "contacts.env"
    env_file.write_text("CONTACTS_API_URL=http://dotenv.test/contacts\n", encoding="utf-8")

    settings = load_settings(env_file=str(env_file))

    assert settings.api_url == "http://dotenv.test/contacts"


@pytest.mark.parametrize("value", ["abc", "0", "-3"])
def test_bad_timeout_raises(tmp_path, monkeypatch, value):
    monkeypatch.setenv("CONTACTS_API_TIMEOUT", value)

    with pytest.raises(ConfigError, match="CONTACTS_API_TIMEOUT"):
        _load(tmp_path)


def test_blank_url_raises(tmp_path, monkeypatch):
    monkeypatch.setenv("CONTACTS_API_URL", "   ")

    with pytest.raises(ConfigError, match="CONTACTS_API_URL"):
        _load(tmp_path)
