"""
Purpose: Open a local page in a browser, keep it on screen, then close the browser.
Constraints: One sequential session; errors propagate after the browser is closed.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from local_preview.browser.browser_manager import BrowserManager
from local_preview.browser.session import PreviewSession
from local_preview.core.config_models import PreviewSettings
from local_preview.core.logging import UnifiedLogger, set_package_level
from local_preview.pages import page_url, resolve_page


@dataclass
class PreviewResult:
    url: str
    browser: str
    title: str
    waited_seconds: float
    duration_seconds: float


def run_preview(
    settings: Optional[PreviewSettings] = None,
    base_dir: Optional[Union[str, Path]] = None,
    browser_manager: Optional[BrowserManager] = None,
) -> PreviewResult:
    """Launch, navigate to the page, wait ``settings.wait_seconds``, quit.

    The page is resolved before any browser starts, so a missing file fails
    without launching anything.
    """
    settings = settings or PreviewSettings()
    set_package_level(settings.log_level)
    unified = UnifiedLogger("local_preview.runner", log_level=settings.log_level)
    logger = unified.get_logger()

    page = resolve_page(settings.page_path, base_dir=base_dir)
    url = page_url(page)
    started = time.monotonic()

    unified.log_step("launch", {"browser": settings.browser, "headless": settings.headless})
    try:
        with PreviewSession(settings, browser_manager=browser_manager) as session:
            with unified.time_operation("navigate"):
                session.navigate(url)
            unified.log_step("hold", {"seconds": settings.wait_seconds})
            session.hold(settings.wait_seconds)
            title = session.title
    except BaseException as e:
        unified.log_error_with_context(e, {"url": url, "browser": settings.browser})
        raise

    duration = time.monotonic() - started
    logger.info(f"Preview of {page.name} finished in {duration:.2f}s")
    return PreviewResult(
        url=url,
        browser=settings.browser,
        title=title,
        waited_seconds=settings.wait_seconds,
        duration_seconds=duration,
    )
