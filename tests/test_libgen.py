import pytest

from tclib.libgen import basename, dirname


@pytest.mark.parametrize(
    "path, expected",
    [
        ("/usr/lib", "lib"),
        ("/usr/", "usr"),
        ("usr", "usr"),
        ("/", "/"),
        (".", "."),
        ("..", ".."),
    ],
)
def test_basename(path, expected):
    assert basename(path) == expected


@pytest.mark.parametrize(
    "path, expected",
    [
        ("/usr/lib", "/usr"),
        ("/usr/", "/"),
        ("usr", "."),
        ("/", "/"),
        (".", "."),
        ("..", "."),
    ],
)
def test_dirname(path, expected):
    assert dirname(path) == expected


@pytest.mark.parametrize("path", [None, ""])
def test_empty_paths(path):
    assert basename(path) == "."
    assert dirname(path) == "."