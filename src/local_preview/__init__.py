"""Open local HTML pages in a Selenium-driven browser for a fixed time."""

from local_preview.browser import BrowserManager, PreviewSession
from local_preview.core.config import ConfigManager
from local_preview.core.config_models import PreviewSettings
from local_preview.exceptions import (
    BrowserLaunchError,
    ConfigurationError,
    PageNotFoundError,
    PreviewError,
    SessionClosedError,
)
from local_preview.runner import PreviewResult, run_preview

__all__ = [
    "BrowserLaunchError",
    "BrowserManager",
    "ConfigManager",
    "ConfigurationError",
    "PageNotFoundError",
    "PreviewError",
    "PreviewResult",
    "PreviewSession",
    "PreviewSettings",
    "SessionClosedError",
    "run_preview",
]

__version__ = "0.1.0"
