"""Exact conversions between plain, exponential and standard number notation.

Everything here works on digit strings so that no precision is lost, however
large or small the number is.

The canonical exponential form is ``[-]d[.ddd]e(+|-)n``: one leading digit
(non-zero unless the number is zero), optional fractional mantissa digits, and
a signed exponent. Canonical strings always use ``.`` as the decimal point.
"""

from __future__ import annotations

import re
from decimal import Decimal
from typing import List, Tuple

from errors import InvalidNumberError

EXPONENT_SYMBOL = "e"
NEGATIVE_SYMBOL = "-"

CANONICAL_PATTERN = re.compile(r"^([+-]?)([0-9])(?:\.([0-9]+))?e([+-][0-9]+)$")
_PLAIN_NUMBER_PATTERN = re.compile(
    r"^([+-]?)([0-9]*)(?:\.([0-9]*))?(?:[eE]([+-]?[0-9]+))?$"
)


def parse_integer(digits: str) -> int:
    """Parse a signed decimal integer string of any length."""

    # int(str) refuses strings past sys.get_int_max_str_digits(); Decimal does not.
    return int(Decimal(digits))


def format_integer(value: int, signed: bool = False) -> str:
    """Format an integer of any size as plain decimal digits."""

    text = str(Decimal(value))
    if signed and value >= 0:
        return "+" + text
    return text


def normalize_exponential(value: str, decimal_point: str = ".") -> str:
    """Return *value* in canonical exponential form.

    Args:
        value: A number such as ``"-1234.5"``, ``".5"``, ``"12e-3"`` or
            ``"1.5E+3010"``, without digit grouping symbols.
        decimal_point: The decimal point symbol used by *value*.

    Raises:
        InvalidNumberError: if *value* is not a number.
    """

    text = value
    if decimal_point != ".":
        if "." in text:
            raise InvalidNumberError(value)
        text = text.replace(decimal_point, ".")

    match = _PLAIN_NUMBER_PATTERN.fullmatch(text)
    if not match:
        raise InvalidNumberError(value)

    sign, integer_digits, fractional_digits, exponent_str = match.groups()
    fractional_digits = fractional_digits or ""
    digits = integer_digits + fractional_digits
    if not digits:
        raise InvalidNumberError(value)

    significant = digits.lstrip("0")
    exponent = parse_integer(exponent_str or "0") + len(integer_digits) - 1
    exponent -= len(digits) - len(significant)
    significant = significant.rstrip("0")

    if not significant:
        return f"0{EXPONENT_SYMBOL}+0"

    mantissa = significant[0]
    if len(significant) > 1:
        mantissa += "." + significant[1:]
    prefix = NEGATIVE_SYMBOL if sign == NEGATIVE_SYMBOL else ""
    exponent_text = format_integer(exponent, signed=True)
    return f"{prefix}{mantissa}{EXPONENT_SYMBOL}{exponent_text}"


def split_canonical(number: str) -> Tuple[bool, str, int]:
    """Split a canonical number into (is_negative, mantissa digits, exponent)."""

    match = CANONICAL_PATTERN.fullmatch(number)
    if not match:
        raise InvalidNumberError(number)
    sign, leading_digit, fractional_digits, exponent = match.groups()
    digits = leading_digit + (fractional_digits or "")
    return sign == NEGATIVE_SYMBOL, digits, parse_integer(exponent)


def exponential_to_standard(number: str) -> str:
    """Convert a canonical exponential number to ``[-]integer.fraction``.

    Examples:
        "1.2345e+2" -> "123.45"
        "5e-2" -> "0.05"
        "-1e+3" -> "-1000.0"
    """

    is_negative, digits, exponent = split_canonical(number)

    if exponent < 0:
        # Keep the zeroes between the decimal point and the first digit.
        digits = "0" * (-exponent - 1) + digits

    integer_part: List[str] = []
    fractional_part: List[str] = []
    for digit in digits:
        if exponent >= 0:
            integer_part.append(digit)
        else:
            fractional_part.append(digit)
        exponent -= 1

    if exponent >= 0:
        integer_part.append("0" * (exponent + 1))

    integer_str = "".join(integer_part).lstrip("0") or "0"
    fractional_str = "".join(fractional_part).rstrip("0") or "0"

    return f"{NEGATIVE_SYMBOL if is_negative else ''}{integer_str}.{fractional_str}"
