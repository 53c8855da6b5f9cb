"""Tests for URL-backed path values."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest
import requests
from pytest_mock import MockerFixture

from pathwise.features.path.remote import RemotePath, register_reader
from pathwise.shared.errors import InvalidInputKindError, UnsupportedSchemeError


def _response(content: bytes) -> MagicMock:
    response = MagicMock(spec=requests.Response)
    response.content = content
    return response


def test_url_parts_are_exposed() -> None:
    url = RemotePath("http://host.com:8080/dir/file.ext?a=1&b=two")

    assert url.scheme == "http"
    assert url.protocol == "http"
    assert url.host == "host.com"
    assert url.port == 8080
    assert url.query == {"a": "1", "b": "two"}
    assert url.dirs == ["dir"]
    assert url.filename == "file.ext"
    assert url.ext == "ext"
    assert url.is_uri


def test_default_ports_and_missing_query() -> None:
    assert RemotePath("https://example.org/").port == 443
    assert RemotePath("http://example.org/x").port == 80
    assert RemotePath("ftp://example.org/x").port == 21
    assert RemotePath("https://example.org/x").query is None


def test_bare_host_url_is_preserved() -> None:
    bare = RemotePath("http://example.org?q=1")

    assert bare.url == "http://example.org?q=1"
    assert str(RemotePath("http://example.org")) == "http://example.org"
    assert bare.dirs == []


def test_bare_host_url_gains_a_path_once_edited() -> None:
    bare = RemotePath("http://example.org")

    bare.filename = "index.html"

    assert bare.url == "http://example.org/index.html"


def test_component_edits_rebuild_the_url() -> None:
    url = RemotePath("https://example.org/a/report.csv?v=2")

    url.base = "summary"
    url.ext = "json"

    assert str(url) == "https://example.org/a/summary.json?v=2"


def test_join_resolves_like_a_browser() -> None:
    base = RemotePath("https://example.org/docs/index.html")

    assert (base / "guide.html").url == "https://example.org/docs/guide.html"
    assert base.join("../img/", "logo.png").url == "https://example.org/img/logo.png"


def test_non_string_input_is_rejected() -> None:
    with pytest.raises(InvalidInputKindError):
        _ = RemotePath(123)  # pyright: ignore[reportArgumentType]


def test_read_uses_requests_with_configured_timeout(mocker: MockerFixture) -> None:
    get = mocker.patch("pathwise.features.path.remote.requests.get", return_value=_response(b'{"ok": true}'))
    _ = mocker.patch("pathwise.features.path.remote.settings.URL_TIMEOUT", 5.0)

    url = RemotePath("https://example.org/status.json")

    assert url.read_json() == {"ok": True}
    get.assert_called_once_with("https://example.org/status.json", timeout=5.0)


def test_read_propagates_http_errors(mocker: MockerFixture) -> None:
    response = _response(b"")
    response.raise_for_status.side_effect = requests.HTTPError("404")
    _ = mocker.patch("pathwise.features.path.remote.requests.get", return_value=response)

    with pytest.raises(requests.HTTPError):
        _ = RemotePath("https://example.org/missing").read()


def test_unknown_scheme_has_no_reader() -> None:
    with pytest.raises(UnsupportedSchemeError):
        _ = RemotePath("gopher://example.org/x").read()


def test_registered_reader_is_used(mocker: MockerFixture) -> None:
    reader = mocker.Mock(return_value=b"payload")
    _ = mocker.patch.dict("pathwise.features.path.remote._READERS", clear=False)
    register_reader("memory", reader)

    assert RemotePath("memory://bucket/key.txt").read_text() == "payload"
    reader.assert_called_once()


def test_remote_paths_are_read_only() -> None:
    with pytest.raises(ValueError):
        _ = RemotePath("https://example.org/x").open("wb")
