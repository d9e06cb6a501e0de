"""
Purpose: Resolve local HTML pages and build the file:// URLs opened by the browser.
Constraints: Filesystem lookups only.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

from local_preview.exceptions import PageNotFoundError


def resolve_page(page_path: Union[str, Path], base_dir: Optional[Union[str, Path]] = None) -> Path:
    """Return the absolute path of an existing page.

    Relative paths are taken from ``base_dir`` (the current directory when
    omitted).
    """
    path = Path(page_path).expanduser()
    if not path.is_absolute():
        path = Path(base_dir or Path.cwd()).expanduser() / path
    path = path.resolve()
    if not path.is_file():
        raise PageNotFoundError(path)
    return path


def page_url(path: Union[str, Path]) -> str:
    """file:// URI for a page, percent-encoded."""
    return Path(path).resolve().as_uri()
