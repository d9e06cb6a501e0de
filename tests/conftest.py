import logging
import os

import pytest

from local_preview.core.config import ENV_FIELDS


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Keep tests away from real env files, log directories and PREVIEW_* settings."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("ENABLE_FILE_LOGGING", "0")
    for name in ENV_FIELDS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    yield
    # load_dotenv writes straight into os.environ
    for name in ENV_FIELDS:
        os.environ.pop(name, None)


@pytest.fixture(autouse=True)
def reset_logger_levels():
    yield
    for name in ("local_preview", "local_preview.cli", "local_preview.runner"):
        logging.getLogger(name).setLevel(logging.NOTSET)


@pytest.fixture
def page(tmp_path):
    path = tmp_path / "index.html"
    path.write_text("<html><head><title>Test</title></head><body>ok</body></html>", encoding="utf-8")
    return path
