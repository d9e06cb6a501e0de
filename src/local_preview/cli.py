#!/usr/bin/env python3
"""
Command-line entry point for opening a local page in a browser.
"""

import argparse
from pathlib import Path
from typing import Optional, Sequence

from local_preview.core.config import ConfigManager
from local_preview.core.config_models import SUPPORTED_BROWSERS
from local_preview.core.logging import set_package_level, setup_logger
from local_preview.exceptions import ConfigurationError
from local_preview.runner import run_preview

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_CONFIG = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="local-preview",
        description="Open a local HTML page in a WebDriver-controlled browser, wait, then close it",
    )
    parser.add_argument("page", nargs="?", default=None, help="HTML file to open (default: index.html)")
    parser.add_argument("--browser", choices=SUPPORTED_BROWSERS, default=None)
    parser.add_argument("--headless", action="store_true", default=None, help="Run without a visible window")
    parser.add_argument("--wait", type=float, default=None, dest="wait_seconds", help="Seconds to keep the page open")
    parser.add_argument("--window-size", default=None, help="Window size as WIDTHxHEIGHT")
    parser.add_argument("--driver-path", default=None, help="Explicit driver binary")
    parser.add_argument(
        "--no-webdriver-manager",
        action="store_false",
        default=None,
        dest="use_webdriver_manager",
        help="Let Selenium Manager locate the driver instead of webdriver-manager",
    )
    parser.add_argument("--config-dir", type=Path, default=None, help="Directory holding settings.json")
    parser.add_argument("--log-level", default=None)
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logger = setup_logger("local_preview.cli", log_level=args.log_level)

    try:
        config = ConfigManager(config_dir=args.config_dir).load_all()
        settings = config.settings_with(
            browser=args.browser,
            headless=args.headless,
            wait_seconds=args.wait_seconds,
            page_path=args.page,
            window_size=args.window_size,
            driver_path=args.driver_path,
            use_webdriver_manager=args.use_webdriver_manager,
            log_level=args.log_level,
        )
        set_package_level(settings.log_level)
        logger = setup_logger("local_preview.cli", log_level=settings.log_level)
        result = run_preview(settings, base_dir=Path.cwd())
    except ConfigurationError as e:
        logger.error(str(e))
        return EXIT_CONFIG
    except Exception as e:
        # Launch and navigation errors; already logged with context by the runner
        logger.debug(f"Preview failed: {type(e).__name__}: {e}", exc_info=True)
        return EXIT_FAILURE

    logger.info(f"Closed {result.browser} after showing '{result.title}'")
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
