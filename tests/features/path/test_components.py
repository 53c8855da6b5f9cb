"""
Summary: Unit tests for the pure path decomposition model.
Why: Lock down parsing, component edits and derivation without touching disk.
"""

from __future__ import annotations

import pytest

from pathwise.features.path.domain.components import (
    PathComponents,
    split_filename,
)
from pathwise.shared.errors import InvalidComponentError


def _parse(raw: str) -> PathComponents:
    value = PathComponents()
    value.path = raw
    return value


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("song.mp3", ("song", "mp3")),
        ("archive.tar.gz", ("archive.tar", "gz")),
        (".bashrc", (".bashrc", None)),
        (".config.toml", (".config", "toml")),
        ("README", ("README", None)),
        ("trailing.", ("trailing.", None)),
    ],
)
def test_split_filename(name: str, expected: tuple[str, str | None]) -> None:
    assert split_filename(name) == expected


def test_path_string_decomposes_into_components() -> None:
    value = _parse("/music/album/song.mp3")

    assert value.dirs == ["music", "album"]
    assert value.base == "song"
    assert value.ext == "mp3"
    assert value.filename == "song.mp3"
    assert value.dir == "/music/album"
    assert value.path == "/music/album/song.mp3"


def test_trailing_separator_means_directory_only() -> None:
    value = _parse("/music/album/")

    assert value.dirs == ["music", "album"]
    assert value.filename is None
    assert value.base is None
    assert value.ext is None
    assert value.path == "/music/album/"


def test_root_path_round_trips() -> None:
    value = _parse("/")

    assert value.dirs == []
    assert value.path == "/"


@pytest.mark.parametrize(
    "raw",
    ["/a/b/c.txt", "/a/b/", "/archive.tar.gz", "/home/user/.bashrc", "/x/README"],
)
def test_canonical_paths_round_trip(raw: str) -> None:
    assert _parse(raw).path == raw


def test_dirs_getter_returns_a_copy() -> None:
    value = _parse("/a/b/file.txt")

    dirs = value.dirs
    dirs.append("c")

    assert value.dirs == ["a", "b"]


def test_dirs_setter_splits_on_separators() -> None:
    value = _parse("/a/file.txt")

    value.dirs = ["x/y", "", "z"]

    assert value.path == "/x/y/z/file.txt"


def test_ext_setter_strips_one_leading_dot() -> None:
    value = _parse("/a/file.txt")

    value.ext = ".md"

    assert value.ext == "md"
    assert value.filename == "file.md"


@pytest.mark.parametrize("blank", [None, "", "   ", ".", ". "])
def test_blank_ext_clears_extension(blank: str | None) -> None:
    value = _parse("/a/file.txt")

    value.ext = blank

    assert value.ext is None
    assert value.path == "/a/file"


def test_dotted_ext_is_rejected() -> None:
    value = _parse("/a/file.txt")

    with pytest.raises(InvalidComponentError):
        value.ext = "tar.gz"


def test_non_string_ext_raises_component_error() -> None:
    value = _parse("/a/file.txt")

    with pytest.raises(InvalidComponentError):
        value.ext = 5  # pyright: ignore[reportAttributeAccessIssue]


def test_ext_without_base_is_rejected() -> None:
    value = _parse("/a/")

    with pytest.raises(InvalidComponentError):
        value.ext = "txt"


def test_clearing_base_clears_extension() -> None:
    value = _parse("/a/file.txt")

    value.base = None

    assert value.ext is None
    assert value.path == "/a/"


def test_filename_with_separator_is_rejected() -> None:
    value = _parse("/a/file.txt")

    with pytest.raises(InvalidComponentError):
        value.filename = "b/c.txt"


def test_missing_extension_concatenation_fails_fast() -> None:
    value = _parse("/a/README")

    with pytest.raises(TypeError):
        _ = value.ext + ".bak"  # pyright: ignore[reportOptionalOperand]


def test_append_ext_adds_a_suffix() -> None:
    assert _parse("/a/notes.txt").append_ext("bak").path == "/a/notes.txt.bak"
    assert _parse("/a/notes").append_ext(".bak").path == "/a/notes.bak"


def test_exts_lists_every_suffix() -> None:
    assert _parse("/a/archive.tar.gz").exts == ["tar", "gz"]
    assert _parse("/a/.bashrc").exts == []


def test_derive_leaves_receiver_untouched() -> None:
    value = _parse("/music/song.mp3")
    snapshot = (value.dirs, value.base, value.ext, value.path)

    derived = value.derive(base="Song", ext="aac", dir="/music2")

    assert derived.path == "/music2/Song.aac"
    assert (value.dirs, value.base, value.ext, value.path) == snapshot


def test_derive_applies_specific_overrides_last() -> None:
    value = _parse("/a/file.txt")

    derived = value.derive(path="/b/other.md", base="final")

    assert derived.path == "/b/final.md"


def test_derive_filename_none_gives_directory() -> None:
    assert _parse("/a/b/file.txt").derive(filename=None).path == "/a/b/"


def test_relative_to_ascends_then_descends() -> None:
    target = _parse("/usr/local/lib/pkg/mod.py")
    anchor = _parse("/usr/local/bin/")

    relative = target.relative_to(anchor)

    assert relative.is_relative
    assert relative.dirs == ["..", "lib", "pkg"]
    assert relative.path == "../lib/pkg/mod.py"
    assert not target.is_relative


def test_relative_to_same_directory_gives_bare_filename() -> None:
    relative = _parse("/a/b/file.txt").relative_to(_parse("/a/b/"))

    assert relative.path == "file.txt"
    assert relative.dir == "."


def test_parent_of_and_child_of_use_proper_prefixes() -> None:
    parent = _parse("/a/b/")
    child = _parse("/a/b/c/file.txt")

    assert parent.parent_of(child)
    assert child.child_of(parent)
    assert not parent.parent_of(parent)
    assert not child.parent_of(parent)


def test_equality_and_ordering_use_path_string() -> None:
    first = _parse("/a/file.txt")
    second = _parse("/b/file.txt")

    assert first == "/a/file.txt"
    assert first == _parse("/a/file.txt")
    assert first < second
    assert sorted([second, first]) == [first, second]
    assert len({first, _parse("/a/file.txt")}) == 1


def test_copy_shares_no_state() -> None:
    value = _parse("/a/file.txt")
    clone = value.copy()

    clone.dirs = ["z"]

    assert value.path == "/a/file.txt"
    assert clone.path == "/z/file.txt"


def test_derive_ext_with_or_without_dot_is_identical() -> None:
    value = _parse("/logs/app.log")

    assert value.derive(ext=".gz") == value.derive(ext="gz")
    assert value.derive(ext="").ext is None


@pytest.mark.parametrize("raw", ["/a/archive.tar.gz", "/a/.bashrc", "/a/README", "/a/"])
def test_filename_splitting_is_idempotent(raw: str) -> None:
    value = _parse(raw)

    assert (value.filename is None) == (value.base is None)
    if value.filename is not None:
        assert split_filename(value.filename) == (value.base, value.ext)


@pytest.mark.parametrize("base", ["v1.2", "archive.tar"])
def test_base_that_would_resplit_is_rejected(base: str) -> None:
    value = _parse("/a/README")

    with pytest.raises(InvalidComponentError):
        _ = value.derive(base=base)
    assert value.path == "/a/README"


def test_dotted_base_is_accepted_alongside_an_extension() -> None:
    value = _parse("/a/README")

    derived = value.derive(base="v1.2", ext="txt")

    assert derived.filename == "v1.2.txt"
    assert split_filename(derived.filename) == ("v1.2", "txt")


def test_dotted_base_in_constructor_keeps_split_consistent() -> None:
    value = PathComponents(["a"], "v1.2", "txt")

    assert value.path == "/a/v1.2.txt"
    with pytest.raises(InvalidComponentError):
        _ = PathComponents(["a"], "v1.2")


def test_parent_of_requires_matching_segments() -> None:
    etc = PathComponents(["etc"])

    assert etc.parent_of(PathComponents(["etc", "ssh"]))
    assert not etc.parent_of(PathComponents(["etc2", "ssh"]))
