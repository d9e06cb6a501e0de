"""Exception hierarchy for local page previews."""

from __future__ import annotations

from pathlib import Path
from typing import Union


class PreviewError(Exception):
    """Base exception for all preview errors."""


class ConfigurationError(PreviewError):
    """Raised when settings are invalid or cannot be loaded."""


class PageNotFoundError(ConfigurationError):
    """Raised when the page to open does not exist.

    Attributes:
        path: The resolved path that was looked up.
    """

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path)
        super().__init__(f"Page not found: {self.path}")


class BrowserLaunchError(PreviewError):
    """Raised when a WebDriver session cannot be started."""

    def __init__(self, browser: str, reason: str = "") -> None:
        self.browser = browser
        message = f"Could not start {browser} driver"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class SessionClosedError(PreviewError):
    """Raised when a session operation needs a driver but none is held."""
