"""Unit tests for application settings configuration."""

from pathlib import Path

from host_manager.config import Settings


def test_settings_uses_backend_env_file_independent_of_cwd():
    """Settings should always include backend/.env as an env source."""
    env_files = Settings.model_config.get("env_file")
    assert env_files is not None

    normalized = {str(Path(item)) for item in env_files}
    expected_backend_env = str(Path(__file__).resolve().parents[2] / ".env")

    assert expected_backend_env in normalized
    assert str(Path(".env")) in normalized


def test_settings_defaults_to_database_storage(monkeypatch):
    monkeypatch.delenv("STORAGE_BACKEND", raising=False)
    settings = Settings(_env_file=None)
    assert settings.storage_backend == "database"
    assert settings.seed_demo_data is False


def test_settings_reads_storage_backend_from_environment(monkeypatch):
    monkeypatch.setenv("STORAGE_BACKEND", "json")
    monkeypatch.setenv("JSON_STORE_PATH", "/tmp/hm-store.json")
    settings = Settings(_env_file=None)
    assert settings.storage_backend == "json"
    assert settings.json_store_path == "/tmp/hm-store.json"
