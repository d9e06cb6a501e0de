import json
import unittest

import pytest

from local_preview.core.config import ConfigManager
from local_preview.core.config_models import PreviewSettings
from local_preview.exceptions import ConfigurationError


def _write_settings(config_dir, preview):
    config_dir.mkdir(exist_ok=True)
    (config_dir / "settings.json").write_text(json.dumps({"preview": preview}), encoding="utf-8")


class PreviewSettingsTests(unittest.TestCase):
    def test_defaults_match_original_behaviour(self):
        settings = PreviewSettings()
        self.assertEqual(settings.browser, "chrome")
        self.assertFalse(settings.headless)
        self.assertEqual(settings.wait_seconds, 10.0)
        self.assertEqual(settings.page_path, "index.html")
        self.assertIsNone(settings.window_dimensions())

    def test_browser_is_normalized(self):
        self.assertEqual(PreviewSettings(browser=" Firefox ").browser, "firefox")

    def test_window_dimensions(self):
        self.assertEqual(PreviewSettings(window_size="1024x768").window_dimensions(), (1024, 768))


def test_load_all_defaults_when_nothing_configured(tmp_path):
    cfg = ConfigManager(config_dir=tmp_path / "config").load_all()
    assert cfg.settings == PreviewSettings()
    assert cfg.loaded_env_file is None


def test_settings_json_is_applied(tmp_path):
    _write_settings(tmp_path / "config", {"browser": "edge", "wait_seconds": 3})
    settings = ConfigManager(config_dir=tmp_path / "config").load_all().settings
    assert settings.browser == "edge"
    assert settings.wait_seconds == 3


def test_environment_beats_settings_json(tmp_path, monkeypatch):
    _write_settings(tmp_path / "config", {"browser": "edge", "headless": False})
    monkeypatch.setenv("PREVIEW_BROWSER", "firefox")
    monkeypatch.setenv("PREVIEW_HEADLESS", "yes")

    settings = ConfigManager(config_dir=tmp_path / "config").load_all().settings
    assert settings.browser == "firefox"
    assert settings.headless is True


def test_overrides_beat_environment_and_skip_none(tmp_path, monkeypatch):
    monkeypatch.setenv("PREVIEW_WAIT_SECONDS", "4")
    monkeypatch.setenv("PREVIEW_BROWSER", "firefox")
    cfg = ConfigManager(config_dir=tmp_path / "config").load_all()

    settings = cfg.settings_with(wait_seconds=1.5, browser=None)
    assert settings.wait_seconds == 1.5
    assert settings.browser == "firefox"


def test_credentials_env_file_is_loaded(tmp_path):
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    (config_dir / "credentials.env").write_text("PREVIEW_PAGE=docs/home.html\n", encoding="utf-8")

    cfg = ConfigManager(config_dir=config_dir).load_all()
    assert cfg.loaded_env_file == config_dir / "credentials.env"
    assert cfg.settings.page_path == "docs/home.html"


def test_unknown_browser_is_a_configuration_error(tmp_path, monkeypatch):
    monkeypatch.setenv("PREVIEW_BROWSER", "netscape")
    with pytest.raises(ConfigurationError, match="unsupported browser"):
        ConfigManager(config_dir=tmp_path / "config").load_all()


def test_negative_wait_is_rejected(tmp_path):
    cfg = ConfigManager(config_dir=tmp_path / "config").load_all()
    with pytest.raises(ConfigurationError):
        cfg.settings_with(wait_seconds=-1)


def test_malformed_settings_json(tmp_path):
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    (config_dir / "settings.json").write_text("{not json", encoding="utf-8")

    with pytest.raises(ConfigurationError, match="settings.json"):
        ConfigManager(config_dir=config_dir).load_all()


if __name__ == "__main__":
    unittest.main()
