"""Tests for settings loading."""

from pathlib import Path

from customers.config import Settings


class TestSettings:
    """Tests for Settings defaults and environment overrides."""

    def test_defaults(self, monkeypatch):
        """Test the built-in defaults."""
        for name in ("CUSTOMERS_STORAGE_FILE", "CUSTOMERS_PORT", "CUSTOMERS_LOG_LEVEL"):
            monkeypatch.delenv(name, raising=False)
        settings = Settings(_env_file=None)

        assert settings.storage_file == Path("customers.json")
        assert settings.port == 8000
        assert settings.log_level == "INFO"

    def test_environment_override(self, monkeypatch, tmp_path):
        """Test that CUSTOMERS_-prefixed variables override defaults."""
        monkeypatch.setenv("CUSTOMERS_STORAGE_FILE", str(tmp_path / "data.json"))
        monkeypatch.setenv("CUSTOMERS_PORT", "9001")

        settings = Settings(_env_file=None)

        assert settings.storage_file == tmp_path / "data.json"
        assert settings.port == 9001
