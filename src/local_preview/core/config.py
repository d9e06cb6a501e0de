"""
Purpose: Load environment and JSON configuration for previews.
Constraints: Pure config I/O only; no browser side effects.
"""

# Imports
import os
import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

from dotenv import load_dotenv
from pydantic import ValidationError

from local_preview.core.config_models import PreviewSettings
from local_preview.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

_TRUTHY = ("true", "1", "yes", "y", "on")

# Environment variable -> PreviewSettings field
ENV_FIELDS = {
    "PREVIEW_BROWSER": "browser",
    "PREVIEW_HEADLESS": "headless",
    "PREVIEW_WAIT_SECONDS": "wait_seconds",
    "PREVIEW_PAGE": "page_path",
    "PREVIEW_PAGE_LOAD_TIMEOUT": "page_load_timeout",
    "PREVIEW_WINDOW_SIZE": "window_size",
    "PREVIEW_DRIVER_PATH": "driver_path",
    "PREVIEW_USE_WEBDRIVER_MANAGER": "use_webdriver_manager",
    "LOG_LEVEL": "log_level",
}

_BOOL_FIELDS = {"headless", "use_webdriver_manager"}


def _default_config_dir() -> Path:
    return Path.cwd() / "config"


# Public API
class ConfigManager:
    """Collects preview settings from defaults, settings.json and the environment"""

    def __init__(self, config_dir: Optional[Path] = None):
        self.config_dir = Path(config_dir) if config_dir else _default_config_dir()
        self.file_settings: Dict[str, Any] = {}
        self.env_settings: Dict[str, Any] = {}
        self.loaded_env_file: Optional[Path] = None
        self.settings = PreviewSettings()

    def load_all(self):
        """Load dotenv, settings.json and environment, then validate"""
        self.load_env()
        self.load_settings()
        self.settings = self._validate({**self.file_settings, **self.env_settings})
        return self

    def load_env(self):
        """Load the first env file found and collect PREVIEW_* variables"""
        env_files = [
            self.config_dir / "credentials.env",
            Path.cwd() / ".env",
            Path.home() / ".local_preview.env",
        ]

        for env_file in env_files:
            if env_file.exists():
                load_dotenv(env_file)
                self.loaded_env_file = env_file
                break

        if self.loaded_env_file:
            logger.debug(f"Loaded environment from: {self.loaded_env_file}")

        values: Dict[str, Any] = {}
        for env_name, field in ENV_FIELDS.items():
            raw = os.getenv(env_name)
            if raw is None or raw.strip() == "":
                continue
            if field in _BOOL_FIELDS:
                values[field] = raw.strip().lower() in _TRUTHY
            else:
                values[field] = raw.strip()
        self.env_settings = values
        return self

    def load_settings(self):
        """Load the "preview" section of settings.json if present"""
        settings_file = self.config_dir / "settings.json"
        if not settings_file.exists():
            self.file_settings = {}
            return self

        try:
            with open(settings_file, "r", encoding="utf-8") as f:
                raw = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigurationError(f"Error reading {settings_file}: {e}") from e

        section = (raw or {}).get("preview", {}) if isinstance(raw, dict) else {}
        if not isinstance(section, dict):
            raise ConfigurationError(f'{settings_file}: "preview" must be an object')
        self.file_settings = section
        return self

    def settings_with(self, **overrides: Any) -> PreviewSettings:
        """Return settings with non-None overrides applied on top"""
        merged = self.settings.model_dump()
        merged.update({k: v for k, v in overrides.items() if v is not None})
        return self._validate(merged)

    @staticmethod
    def _validate(values: Dict[str, Any]) -> PreviewSettings:
        try:
            return PreviewSettings(**values)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid preview settings: {e}") from e
