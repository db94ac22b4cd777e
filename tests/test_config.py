"""Tests for configuration loading."""

from pathlib import Path

from glossa.config import Settings, load_settings


class TestSettings:
    """Tests for the Settings class."""

    def test_defaults(self, monkeypatch, tmp_path: Path):
        """Test default values without environment overrides."""
        monkeypatch.chdir(tmp_path)
        for name in ["GLOSSA_DIRECTIVE", "GLOSSA_CLASS_PREFIX", "GLOSSA_FORMAT", "GLOSSA_STRICT"]:
            monkeypatch.delenv(name, raising=False)

        settings = Settings()

        assert settings.directive_name == "gloss"
        assert settings.class_prefix == "gloss"
        assert settings.default_format == ".html"
        assert settings.fail_on_error is False

    def test_environment_override(self, monkeypatch):
        """Test reading values from the environment."""
        monkeypatch.setenv("GLOSSA_DIRECTIVE", "ilg")
        monkeypatch.setenv("GLOSSA_STRICT", "true")

        settings = Settings()

        assert settings.directive_name == "ilg"
        assert settings.fail_on_error is True

    def test_load_from_env_file(self, tmp_path: Path, monkeypatch):
        """Test loading a specific .env file."""
        monkeypatch.delenv("GLOSSA_CLASS_PREFIX", raising=False)
        env_file = tmp_path / "custom.env"
        env_file.write_text("GLOSSA_CLASS_PREFIX=interlinear\n")

        settings = load_settings(env_file)
        try:
            assert settings.class_prefix == "interlinear"
        finally:
            load_settings()
