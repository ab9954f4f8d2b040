import pytest

from tclib.md2 import md2_hexdigest

RFC1319_CASES = [
    ("", "8350e5a3e24c153df2275c9f80692773"),
    ("a", "32ec01ec4a6dac72c0ab96fb34c0b5d1"),
    ("abc", "da853b0d3f88d99b30283a69e6ded6bb"),
    ("message digest", "ab4f496bfb2a530b219ff33031fe06b0"),
    ("abcdefghijklmnopqrstuvwxyz", "4e8ddff3650292ab5a4108c3aa47940b"),
    (
        "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789",
        "da33def2a42df13975352846c30338cd",
    ),
    (
        "1234567890123456789012345678901234567890"
        "1234567890123456789012345678901234567890",
        "d5976f79d83d3a0dc9806c3c66f3efd8",
    ),
]


@pytest.mark.parametrize("text, expected", RFC1319_CASES)
def test_rfc1319_vectors(text, expected):
    assert md2_hexdigest(text.encode("ascii")) == expected


@pytest.mark.parametrize("text, expected", RFC1319_CASES)
def test_text_input_matches_bytes(text, expected):
    assert md2_hexdigest(text) == expected


def test_digest_shape():
    digest = md2_hexdigest(b"\x00\xff" * 20)
    assert len(digest) == 32
    assert set(digest) <= set("0123456789abcdef")


def test_block_boundary_inputs_differ():
    assert md2_hexdigest(b"x" * 16) != md2_hexdigest(b"x" * 15)
    assert md2_hexdigest(b"x" * 16) != md2_hexdigest(b"x" * 17)


def test_bytearray_accepted():
    assert md2_hexdigest(bytearray(b"abc")) == "da853b0d3f88d99b30283a69e6ded6bb"