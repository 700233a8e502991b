import pathlib
import sys

import pytest

PROJECT_ROOT = pathlib.Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from errors import InvalidNumberError
from notation import (
    exponential_to_standard,
    format_integer,
    normalize_exponential,
    parse_integer,
    split_canonical,
)


def test_normalize_plain_numbers():
    assert normalize_exponential("123.45") == "1.2345e+2"
    assert normalize_exponential("-1200") == "-1.2e+3"
    assert normalize_exponential("+7") == "7e+0"
    assert normalize_exponential("000123") == "1.23e+2"


def test_normalize_fractions():
    assert normalize_exponential("0.05") == "5e-2"
    assert normalize_exponential(".5") == "5e-1"
    assert normalize_exponential("5.") == "5e+0"


def test_normalize_exponential_input():
    assert normalize_exponential("12e-3") == "1.2e-2"
    assert normalize_exponential("1.5E+3010") == "1.5e+3010"
    assert normalize_exponential("250e3") == "2.5e+5"


def test_normalize_zero_drops_sign():
    assert normalize_exponential("0") == "0e+0"
    assert normalize_exponential("-0.000") == "0e+0"


def test_normalize_custom_decimal_point():
    assert normalize_exponential("1234,5", decimal_point=",") == "1.2345e+3"
    with pytest.raises(InvalidNumberError):
        normalize_exponential("1.5", decimal_point=",")


def test_normalize_rejects_malformed_input():
    for value in ["", "abc", "1e", ".", "-", "1.2.3", "1e2.5", "--1", "0x10"]:
        with pytest.raises(InvalidNumberError):
            normalize_exponential(value)


def test_split_canonical():
    assert split_canonical("-1.25e+3") == (True, "125", 3)
    assert split_canonical("7e-2") == (False, "7", -2)
    with pytest.raises(InvalidNumberError):
        split_canonical("125")


def test_exponential_to_standard():
    assert exponential_to_standard("1.2345e+2") == "123.45"
    assert exponential_to_standard("5e-2") == "0.05"
    assert exponential_to_standard("1.5e-1") == "0.15"
    assert exponential_to_standard("-1e+3") == "-1000.0"
    assert exponential_to_standard("9.99e+1") == "99.9"
    assert exponential_to_standard("0e+0") == "0.0"
    assert exponential_to_standard("1e-7") == "0.0000001"


def test_exponential_to_standard_is_exact():
    mantissa = "1." + "0" * 25 + "1"
    assert exponential_to_standard(mantissa + "e+25") == "1" + "0" * 25 + ".1"
    assert exponential_to_standard("3e+40") == "3" + "0" * 40 + ".0"


def test_non_ascii_digits_rejected():
    for value in ["١٢", "٠e3010", "1e٣", "１２", "12\n"]:
        with pytest.raises(InvalidNumberError):
            normalize_exponential(value)
    with pytest.raises(InvalidNumberError):
        split_canonical("٠e+3010")


def test_integers_past_string_conversion_limit():
    assert format_integer(10**5000) == "1" + "0" * 5000
    assert parse_integer("9" * 5000) == 10**5000 - 1
    assert parse_integer("-12") == -12
    assert format_integer(5, signed=True) == "+5"
    assert format_integer(-5, signed=True) == "-5"
    assert format_integer(0, signed=True) == "+0"


def test_normalize_exponent_past_string_conversion_limit():
    exponent = "9" * 5000
    assert normalize_exponential("1e" + exponent) == "1e+" + exponent
    assert normalize_exponential("10e" + exponent) == "1e+1" + "0" * 5000
    assert split_canonical("-2e-" + exponent) == (True, "2", -(10**5000 - 1))
