import pytest

from tclib.adif import is_valid_data_type_specifier


@pytest.mark.parametrize("ch", list("BNDTSMEL"))
def test_valid_data_type_specifiers(ch):
    assert is_valid_data_type_specifier(ch) is True


@pytest.mark.parametrize("ch", list("bndtsmel"))
def test_lower_case_is_accepted(ch):
    assert is_valid_data_type_specifier(ch) is True


@pytest.mark.parametrize("ch", list("XAZ0 <"))
def test_invalid_specifiers(ch):
    assert is_valid_data_type_specifier(ch) is False


def test_integer_codes():
    assert is_valid_data_type_specifier(ord("N")) is True
    assert is_valid_data_type_specifier(ord("q")) is False