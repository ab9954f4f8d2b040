import io

import pytest

from tclib.errors import ErrorCode, perror, strerror


def test_generic():
    assert strerror(ErrorCode.EGENERIC) == "Generic Error"


def test_io():
    assert strerror(ErrorCode.EIO) == "I/O error"


def test_fbig():
    assert strerror(ErrorCode.EFBIG) == "File too large"


@pytest.mark.parametrize("code", [-1, 9999999])
def test_out_of_range_maps_to_generic(code):
    assert strerror(code) == "Generic Error"


def test_ok_and_first_code():
    assert strerror(ErrorCode.OK) == "OK"
    assert strerror(ErrorCode.EACCES) == "Permission denied"


def test_every_code_has_a_message():
    for code in ErrorCode:
        assert strerror(code)
    assert strerror(len(ErrorCode)) == "Generic Error"


def test_perror_writes_message_and_newline():
    out = io.StringIO()
    perror(ErrorCode.EIO, out)
    assert out.getvalue() == "I/O error\n"


def test_perror_default_code():
    out = io.StringIO()
    perror(file=out)
    assert out.getvalue() == "Generic Error\n"