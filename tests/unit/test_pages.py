import pytest

from local_preview.exceptions import PageNotFoundError
from local_preview.pages import page_url, resolve_page


def test_relative_page_resolves_against_base_dir(page, tmp_path):
    assert resolve_page("index.html", base_dir=tmp_path) == page.resolve()


def test_relative_page_defaults_to_cwd(page):
    assert resolve_page("index.html") == page.resolve()


def test_absolute_page_ignores_base_dir(page, tmp_path):
    other = tmp_path / "elsewhere"
    other.mkdir()
    assert resolve_page(str(page), base_dir=other) == page.resolve()


def test_missing_page_raises(tmp_path):
    with pytest.raises(PageNotFoundError) as excinfo:
        resolve_page("nope.html", base_dir=tmp_path)
    assert excinfo.value.path == (tmp_path / "nope.html").resolve()


def test_directory_is_not_a_page(tmp_path):
    (tmp_path / "site").mkdir()
    with pytest.raises(PageNotFoundError):
        resolve_page("site", base_dir=tmp_path)


def test_page_url_is_percent_encoded_file_uri(tmp_path):
    path = tmp_path / "my page.html"
    path.write_text("<html></html>", encoding="utf-8")

    url = page_url(path)
    assert url.startswith("file:///")
    assert url.endswith("/my%20page.html")
