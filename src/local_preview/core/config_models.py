"""
Purpose: Typed preview settings with validation.
Constraints: Pure models; no file I/O or side effects.
"""

from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict, Field, field_validator

SUPPORTED_BROWSERS = ("chrome", "firefox", "edge")

_WINDOW_SIZE = re.compile(r"^\s*(\d+)\s*[xX,]\s*(\d+)\s*$")


class PreviewSettings(BaseModel):
    model_config = ConfigDict(extra="allow")
    browser: str = "chrome"
    headless: bool = False
    wait_seconds: float = Field(default=10.0, ge=0)
    page_path: str = "index.html"
    page_load_timeout: float = Field(default=30.0, gt=0)
    window_size: str = ""
    driver_path: str = ""
    use_webdriver_manager: bool = True
    log_level: str = "INFO"

    @field_validator("browser")
    @classmethod
    def _known_browser(cls, value: str) -> str:
        name = (value or "").strip().lower()
        if name not in SUPPORTED_BROWSERS:
            raise ValueError(
                f"unsupported browser {value!r}; expected one of {', '.join(SUPPORTED_BROWSERS)}"
            )
        return name

    @field_validator("window_size")
    @classmethod
    def _window_size_format(cls, value: str) -> str:
        if value and not _WINDOW_SIZE.match(value):
            raise ValueError(f"window_size must look like 1280x800, got {value!r}")
        return value.strip()

    @field_validator("log_level")
    @classmethod
    def _upper_level(cls, value: str) -> str:
        return (value or "INFO").upper()

    def window_dimensions(self) -> tuple[int, int] | None:
        """Return (width, height) or None when the browser default is used."""
        match = _WINDOW_SIZE.match(self.window_size) if self.window_size else None
        if not match:
            return None
        return int(match.group(1)), int(match.group(2))
