"""Tests for configuration module."""

from pathlib import Path

from blog_moderation.config import DEFAULT_STORAGE_KEY, AppConfig, Settings, StorageConfig, load_settings


def test_storage_config_defaults(monkeypatch):
    for key in ["BLOG_MODERATION_STORAGE_BACKEND", "BLOG_MODERATION_DATA_DIR", "BLOG_MODERATION_STORAGE_KEY"]:
        monkeypatch.delenv(key, raising=False)
    config = StorageConfig()
    assert config.backend == "file"
    assert config.data_dir == Path(".data")
    assert config.key == DEFAULT_STORAGE_KEY


def test_storage_config_from_env(monkeypatch, tmp_path):
    monkeypatch.setenv("BLOG_MODERATION_STORAGE_BACKEND", "memory")
    monkeypatch.setenv("BLOG_MODERATION_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("BLOG_MODERATION_STORAGE_KEY", "custom")
    config = StorageConfig()
    assert config.backend == "memory"
    assert config.data_dir == tmp_path
    assert config.key == "custom"


def test_app_config_defaults(monkeypatch):
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.delenv("LOG_FILE", raising=False)
    config = AppConfig()
    assert config.log_level == "INFO"
    assert config.log_file == ""


def test_app_config_from_env(monkeypatch, tmp_path):
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("LOG_FILE", str(tmp_path / "moderation.log"))
    config = AppConfig()
    assert config.log_level == "DEBUG"
    assert config.log_file == str(tmp_path / "moderation.log")


def test_load_settings_creates_all_sub_configs():
    settings = load_settings()
    assert isinstance(settings, Settings)
    assert isinstance(settings.storage, StorageConfig)
    assert isinstance(settings.app, AppConfig)
