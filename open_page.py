#!/usr/bin/env python3
"""
Open index.html from this script's directory in Chrome, keep it up for ten
seconds, then close the browser. PREVIEW_* environment variables still apply.
"""

from pathlib import Path

from local_preview.core.config import ConfigManager
from local_preview.runner import run_preview

HERE = Path(__file__).resolve().parent


def main() -> None:
    settings = ConfigManager(config_dir=HERE / "config").load_all().settings
    run_preview(settings, base_dir=HERE)


if __name__ == "__main__":
    main()
