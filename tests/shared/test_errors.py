"""Tests for the pathwise exception hierarchy."""

from __future__ import annotations

import pytest

from pathwise.shared.errors import (
    AlreadyExistsError,
    InvalidComponentError,
    InvalidInputKindError,
    PathError,
    StubbedOperationError,
    UnsupportedFormatError,
    UnsupportedSchemeError,
)


@pytest.mark.parametrize(
    ("error", "builtin"),
    [
        (InvalidInputKindError(42), TypeError),
        (InvalidComponentError("ext", "a.b", "dotted"), ValueError),
        (AlreadyExistsError("rename", "/x"), FileExistsError),
        (UnsupportedFormatError("docx", path="/a.docx"), ValueError),
        (UnsupportedSchemeError("gopher", "gopher://x"), ValueError),
        (StubbedOperationError("is_owned", "/x"), NotImplementedError),
    ],
)
def test_errors_share_a_root_and_match_builtins(error: PathError, builtin: type[Exception]) -> None:
    assert isinstance(error, PathError)
    assert isinstance(error, builtin)


def test_messages_carry_context() -> None:
    assert "/a.docx" in str(UnsupportedFormatError("docx", path="/a.docx"))
    assert "int" in str(InvalidInputKindError(42))
    assert AlreadyExistsError("rename", "/x").destination == "/x"
