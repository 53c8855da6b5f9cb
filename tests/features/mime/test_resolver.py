"""Tests for media type lookup and true-extension resolution."""

from __future__ import annotations

import sys
from types import SimpleNamespace

import pytest
from pytest_mock import MockerFixture

from pathwise.features.mime import (
    MimeType,
    mime_type_from_extension,
    resolve_true_extension,
    sniff_mime_type,
)

JPEG = MimeType("image/jpeg", ("jpe", "jpeg", "jpg"), "jpg")


def test_preferred_extension_is_the_longest_spelling() -> None:
    assert JPEG.preferred_extension == "jpeg"
    assert MimeType("application/x-empty").preferred_extension is None


def test_mime_type_from_extension() -> None:
    found = mime_type_from_extension(".png")

    assert found is not None
    assert found.name == "image/png"
    assert "png" in found.extensions
    assert mime_type_from_extension("definitely-not-real") is None
    assert mime_type_from_extension(None) is None


@pytest.mark.parametrize(
    ("ext", "sniffed", "expected"),
    [
        ("jpg", JPEG, "jpg"),
        ("txt", JPEG, "jpeg"),
        (None, JPEG, "jpeg"),
        ("dat", None, "dat"),
        (None, None, "unknown"),
        ("bin", MimeType("application/x-empty"), "bin"),
    ],
)
def test_resolve_true_extension(ext: str | None, sniffed: MimeType | None, expected: str) -> None:
    assert resolve_true_extension(ext, sniffed) == expected


def test_sniff_uses_python_magic(mocker: MockerFixture) -> None:
    fake_magic = SimpleNamespace(from_buffer=mocker.Mock(return_value="image/png"))
    _ = mocker.patch.dict(sys.modules, {"magic": fake_magic})

    sniffed = sniff_mime_type(b"\x89PNG\r\n\x1a\n")

    assert sniffed is not None
    assert sniffed.name == "image/png"
    fake_magic.from_buffer.assert_called_once_with(b"\x89PNG\r\n\x1a\n", mime=True)
