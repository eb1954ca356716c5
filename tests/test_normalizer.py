from __future__ import annotations

import pytest

from anypath import exceptions, normalizer
from anypath.config.models import BoundaryPolicy, FormatOptions
from anypath.segments import PathKind, SegmentModel

# --- normalize: current and parent directories ---


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("", "."),
        (".", "."),
        ("./", "."),
        (".\\", "."),
        ("./.", "."),
        ("vendor/..", "."),
        ("vendor/bin\\../..", "."),
        ("vendor/..\\bin/..\\", "."),
        ("..", ".."),
        ("../", ".."),
        ("..\\..", "../.."),
        ("vendor/bin/../../..", ".."),
        ("vendor/bin/../../..\\..", "../.."),
        ("var/..\\..", ".."),
    ],
)
def test_normalize_dots(raw: str, expected: str) -> None:
    assert normalizer.normalize(raw) == expected


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("usr/..", "."),
        ("usr/../home", "home"),
        ("usr/../home/..", "."),
        ("usr/../home/user/../admin", "home/admin"),
        ("a/d/../b/e/f/g/../../../c", "a/b/c"),
    ],
)
def test_normalize_collapses_parent_segments(raw: str, expected: str) -> None:
    assert normalizer.normalize(raw) == expected


# --- normalize: roots ---


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("c:", "C:/"),
        ("c:\\", "C:/"),
        ("C://", "C:/"),
        ("/", "/"),
        ("\\", "/"),
        ("////", "/"),
        ("\\\\", "/"),
    ],
)
def test_normalize_roots(raw: str, expected: str) -> None:
    assert normalizer.normalize(raw) == expected


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("c:\\..", "C:/"),
        ("c:\\../.", "C:/"),
        ("/..", "/"),
        ("/..\\..\\", "/"),
        ("c:\\../Windows", "C:/Windows"),
        ("/..\\..\\var", "/var"),
        ("C:\\a\\b/../..", "C:/"),
    ],
)
def test_normalize_clamps_jumps_out_of_root(raw: str, expected: str) -> None:
    assert normalizer.normalize(raw) == expected


# --- normalize: relative and absolute ---


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("file.txt", "file.txt"),
        (".git", ".git"),
        ("Windows/Fonts", "Windows/Fonts"),
        ("./Windows/..\\\\/Windows/./Fonts\\", "Windows/Fonts"),
        ("./usr/../usr/bin\\\\php\\.", "usr/bin/php"),
        ("./usr/www/./././html/.", "usr/www/html"),
        ("c:\\Windows/Fonts", "C:/Windows/Fonts"),
        ("c:\\./Windows/..\\\\/Windows/./Fonts\\", "C:/Windows/Fonts"),
        ("/./usr/../usr/bin\\\\php\\.", "/usr/bin/php"),
        ("C:////./Windows/../Windows/Fonts", "C:/Windows/Fonts"),
        ("vendor///autoload.php", "vendor/autoload.php"),
        ("a/b\\c", "a/b/c"),
        ("vendor\\bin\\", "vendor/bin"),
    ],
)
def test_normalize_paths(raw: str, expected: str) -> None:
    assert normalizer.normalize(raw) == expected


def test_normalize_with_backslash_and_trailing_slash() -> None:
    result = normalizer.normalize("/a/b/..////d/./c", {"separator": "\\", "trailing_slash": True})
    assert result == "\\a\\d\\c\\"


@pytest.mark.parametrize(
    ("raw", "separator", "expected"),
    [
        ("///", "/", "/"),
        ("///", "\\", "\\"),
        ("/a//b", "\\", "\\a\\b"),
        ("C:/a//b", "\\", "C:\\a\\b"),
        ("C:", "\\", "C:\\"),
    ],
)
def test_normalize_uses_separator(raw: str, separator: str, expected: str) -> None:
    assert normalizer.normalize(raw, FormatOptions(separator=separator)) == expected


# --- trailing slash options ---


def test_preserve_slash_keeps_trailing_separator() -> None:
    assert normalizer.normalize("/a/b/", {"preserveSlash": True}) == "/a/b/"


def test_preserve_slash_does_not_add_separator() -> None:
    assert normalizer.normalize("/a/b", {"preserveSlash": True}) == "/a/b"


def test_trailing_slash_is_forced() -> None:
    assert normalizer.normalize("/a/b", {"trailingSlash": True}) == "/a/b/"


@pytest.mark.parametrize("raw", ["/", "C:", "C:\\"])
def test_trailing_slash_never_doubles_root(raw: str) -> None:
    result = normalizer.normalize(raw, {"trailing_slash": True})
    assert not result.endswith("//")


# --- boundary policy ---


@pytest.mark.parametrize("raw", ["..", "/a/../..", "C:/..", "/../var", "a/../.."])
def test_error_policy_raises(raw: str) -> None:
    with pytest.raises(exceptions.TooManyParentJumpsError, match="too many parent jumps") as exc_info:
        normalizer.normalize(raw, {"boundary_policy": "error"})
    assert exc_info.value.path == raw


def test_error_policy_allows_balanced_jumps() -> None:
    assert normalizer.normalize("a/b/../..", {"boundary_policy": "error"}) == "."


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("..", "."), ("../a", "a"), ("a/../../b", "b"), ("/../var", "/var")],
)
def test_clamp_policy_drops_extra_jumps(raw: str, expected: str) -> None:
    assert normalizer.normalize(raw, {"boundary_policy": BoundaryPolicy.CLAMP}) == expected


def test_retain_policy_never_collapses_retained_parent() -> None:
    assert normalizer.normalize("../../a/..") == "../.."


def test_invalid_separator_raises() -> None:
    with pytest.raises(exceptions.InvalidSeparatorError, match="Invalid separator ' '"):
        normalizer.normalize("a/b", {"separator": " "})


# --- collapse / render / normalize_model ---


def test_collapse_keeps_anchor() -> None:
    model = SegmentModel.parse("/a/b/..")
    assert normalizer.collapse(model, BoundaryPolicy.RETAIN, "/a/b/..") == ["", "a"]


def test_collapse_current_directory_is_empty() -> None:
    model = SegmentModel.parse("a/..")
    assert normalizer.collapse(model, BoundaryPolicy.RETAIN, "a/..") == []


@pytest.mark.parametrize(
    ("parts", "absolute", "expected"),
    [
        ([""], True, "/"),
        (["C:"], True, "C:/"),
        (["", "a", "b"], True, "/a/b"),
        (["C:", "a"], True, "C:/a"),
        ([], False, "."),
        (["a", "b"], False, "a/b"),
        (["c:", "x"], False, "./c:/x"),
    ],
)
def test_render(parts: list[str], absolute: bool, expected: str) -> None:
    assert normalizer.render(parts, absolute=absolute) == expected


def test_normalize_model_collapses_to_root() -> None:
    model = normalizer.normalize_model("C:\\Windows\\..")
    assert model.kind is PathKind.ROOT
    assert model.segments == ("C:",)


def test_normalize_model_of_collapsed_relative_is_current_directory() -> None:
    model = normalizer.normalize_model("vendor/..")
    assert model.kind is PathKind.RELATIVE
    assert model.segments == (".",)


def test_render_current_directory_gets_no_trailing_slash() -> None:
    assert normalizer.render(["."], absolute=False, trailing_slash=True) == "."


# --- drive-like names in relative paths ---


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("./c:/x", "./c:/x"),
        ("a/../c:/b", "./c:/b"),
        ("./c:", "./c:"),
        (".\\C:", "./C:"),
        ("a/c:/b", "a/c:/b"),
    ],
)
def test_relative_drive_like_name_stays_relative(raw: str, expected: str) -> None:
    assert normalizer.normalize(raw) == expected
    assert normalizer.normalize(expected) == expected
    assert normalizer.normalize_model(raw).kind is PathKind.RELATIVE


def test_relative_drive_like_name_with_backslash() -> None:
    assert normalizer.normalize("./c:/x", {"separator": "\\"}) == ".\\c:\\x"
