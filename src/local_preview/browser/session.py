"""
Purpose: Scoped ownership of a single browser session.
Constraints: The driver is quit exactly once, on every exit path.
"""

from __future__ import annotations

import logging
import time
from typing import Optional

from local_preview.browser.browser_manager import BrowserManager
from local_preview.core.config_models import PreviewSettings
from local_preview.exceptions import SessionClosedError

logger = logging.getLogger(__name__)


class PreviewSession:
    """
    Owns one WebDriver handle from open() until close().
    Use as a context manager so the browser is closed even when navigation fails.
    """

    def __init__(self, settings: Optional[PreviewSettings] = None, browser_manager: Optional[BrowserManager] = None):
        self.settings = settings or PreviewSettings()
        self.browser_manager = browser_manager or BrowserManager(self.settings)
        self.driver = None

    def __enter__(self) -> "PreviewSession":
        self.open()
        return self

    def __exit__(self, exc_type, exc, tb):
        try:
            self.close()
        except Exception as close_error:
            if exc_type is None:
                raise
            # Keep the original failure as the one that surfaces
            logger.warning(f"Browser close failed while handling {exc_type.__name__}: {close_error}")
        return False

    @property
    def is_open(self) -> bool:
        return self.driver is not None

    def open(self):
        if self.driver is None:
            self.driver = self.browser_manager.create_driver()
        return self.driver

    def navigate(self, url: str) -> None:
        driver = self._require_driver()
        logger.info(f"Navigating to {url}")
        driver.get(url)

    def hold(self, seconds: float) -> None:
        """Keep the page on screen for ``seconds``"""
        if seconds < 0:
            raise ValueError(f"hold time must be >= 0, got {seconds}")
        self._require_driver()
        logger.info(f"Holding page for {seconds:g}s")
        time.sleep(seconds)

    @property
    def title(self) -> str:
        return self._require_driver().title

    def close(self) -> None:
        """Quit the browser; later calls are no-ops"""
        driver, self.driver = self.driver, None
        if driver is None:
            return
        try:
            driver.quit()
        except Exception as e:
            logger.error(f"Error while closing browser: {e}")
            raise
        logger.info("Browser closed")

    def _require_driver(self):
        if self.driver is None:
            raise SessionClosedError("No open browser session")
        return self.driver
