"""Convert numbers of any size into their English names.

Examples (American system):
    0 -> "zero"
    1234 -> "one thousand two hundred thirty four"
    -42.5 -> "negative forty two point five"
    "1e3010" -> "ten milliaduotillion"

Numbers whose exponent magnitude is below
:data:`LARGE_NUMBER_EXPONENT_THRESHOLD` are named exactly from their full
integer value. Larger numbers are named from their significant digits only,
with group names derived from the exponent, so a name for ``1e3000000`` never
needs a million digit integer.
"""

from __future__ import annotations

import logging
import re
from decimal import Decimal
from typing import Any, List, Mapping, Optional, Union

from errors import InvalidNumberError, UnsupportedVariantError
from language_systems import get_language_system
from latin_powers import power_name, split_in_threes
from models import LanguageSystem, NamingConfig
from notation import (
    exponential_to_standard,
    format_integer,
    normalize_exponential,
    split_canonical,
)

logger = logging.getLogger(__name__)

LARGE_NUMBER_EXPONENT_THRESHOLD = 3006

TEN = 10
ONE_HUNDRED = 100

_WHITESPACE_PATTERN = re.compile(r"\s+")


def hundred_words(number: int, system: LanguageSystem) -> List[str]:
    """Name a number in the range 0..999.

    Returns an empty list for 0; callers decide whether zero is spoken.

    Examples:
        7 -> ["seven"]
        115 -> ["one", "hundred", "fifteen"]
        640 -> ["six", "hundred", "forty"]
    """

    hundreds = number // ONE_HUNDRED
    tens = number // TEN % TEN
    ones = number % TEN
    words: List[str] = []

    if hundreds > 0:
        words.append(system.units_word(hundreds))
        words.append(system.base.hundred)

    if tens == 1:
        words.append(system.teens_word(ones))
        return words

    if tens > 1:
        words.append(system.tens_word(tens))

    if ones > 0:
        words.append(system.units_word(ones))

    return words


class NumberName:
    """Number name converter bound to one immutable configuration.

    Args:
        config: A :class:`NamingConfig` or a mapping of its fields (camelCase
            aliases such as ``isShortMillia`` are accepted).
        **options: Fields for a new :class:`NamingConfig` when *config* is
            omitted.

    Raises:
        UnsupportedSystemError: if the configured system is unknown.
        UnsupportedVariantError: if the system has no tables for the variant.
    """

    def __init__(
        self,
        config: Optional[Union[NamingConfig, Mapping[str, Any]]] = None,
        **options: Any,
    ):
        if config is None:
            config = NamingConfig(**options)
        elif not isinstance(config, NamingConfig):
            config = NamingConfig.model_validate(dict(config, **options))

        self.config = config
        self.system = get_language_system(config.system)

        if config.variant not in self.system.prefixes.units:
            raise UnsupportedVariantError(config.variant, self.system.name)

        logger.debug(
            "Number names use the %s system (variant=%s, dashes=%s, short_millia=%s)",
            self.system.name,
            config.variant,
            config.dashes,
            config.short_millia,
        )

    @property
    def digit_grouping_symbol(self) -> str:
        return self.system.symbols.digit_grouping

    @property
    def decimal_point_symbol(self) -> str:
        return self.system.symbols.decimal_point

    def normalize(self, number: Any) -> str:
        """Return *number* in canonical exponential form.

        Strings may contain whitespace and the system's digit grouping
        symbol, and use the system's decimal point. ``int``, ``float`` and
        ``Decimal`` values are taken as they are.
        """

        if isinstance(number, bool):
            raise InvalidNumberError(number)

        if isinstance(number, (int, float, Decimal)):
            if isinstance(number, float):
                text = repr(number)
            elif isinstance(number, int):
                text = format_integer(number)
            else:
                text = str(number)
            normalized = normalize_exponential(text)
        else:
            text = _WHITESPACE_PATTERN.sub("", str(number))
            if self.digit_grouping_symbol:
                text = text.replace(self.digit_grouping_symbol, "")
            try:
                normalized = normalize_exponential(
                    text, decimal_point=self.decimal_point_symbol
                )
            except InvalidNumberError:
                raise InvalidNumberError(number) from None

        return normalized

    def to_name(self, number: Any) -> str:
        """Return the name of *number*.

        Raises:
            InvalidNumberError: if *number* is not a number.
        """

        normalized = self.normalize(number)
        _, _, exponent = split_canonical(normalized)

        if abs(exponent) >= LARGE_NUMBER_EXPONENT_THRESHOLD:
            logger.debug("Naming %s from its significant digits", normalized)
            return self._name_large(normalized, exponent)

        return self._name_small(normalized)

    def _group_words(self, group: int, power: int, group_count: int) -> List[str]:
        if group == 0:
            if group_count < 2 and power == 0:
                return [self.system.base.zero]
            return []

        words = hundred_words(group, self.system)
        name = power_name(power, self.system, self.config)
        if name:
            words.append(name)
        return words

    def _integer_words(self, groups: List[int], lowest_power: int = 0) -> List[str]:
        """Name digit *groups* (least significant first) starting at 1000**lowest_power."""

        words: List[str] = []
        for offset in reversed(range(len(groups))):
            words.extend(
                self._group_words(groups[offset], lowest_power + offset, len(groups))
            )
        return words

    def _fraction_words(self, fractional_part: str) -> List[str]:
        if self.config.fraction_type == "digits":
            words = [self.system.base.decimal_point]
            words.extend(self.system.units_word(int(digit)) for digit in fractional_part)
            return words
        return []

    def _join(self, is_negative: bool, integer_words: List[str], fractional_part: str) -> str:
        words: List[str] = []
        if is_negative:
            words.append(self.system.base.negative)
        words.extend(integer_words)
        if fractional_part:
            words.extend(self._fraction_words(fractional_part))
        return " ".join(words)

    def _name_small(self, normalized: str) -> str:
        standard = exponential_to_standard(normalized)
        is_negative = standard.startswith("-")
        integer_part, _, fractional_part = standard.lstrip("-").partition(".")
        fractional_part = fractional_part.rstrip("0")

        value = int(integer_part)
        groups = split_in_threes(str(value))
        integer_words = self._integer_words(groups)

        is_negative = is_negative and (value != 0 or bool(fractional_part))
        return self._join(is_negative, integer_words, fractional_part)

    def _name_large(self, normalized: str, exponent: int) -> str:
        is_negative, digits, _ = split_canonical(normalized)
        digits = digits.rstrip("0")

        if exponent < 0:
            fractional_part = "0" * (-exponent - 1) + digits
            return self._join(is_negative, [self.system.base.zero], fractional_part)

        integer_digits = digits[: exponent + 1]
        fractional_part = digits[exponent + 1 :]

        # Put the leading digit at its place within its group of three.
        padded = "0" * (2 - exponent % 3) + integer_digits
        padded += "0" * (-len(padded) % 3)

        groups = split_in_threes(padded)
        lowest_power = exponent // 3 - len(groups) + 1
        return self._join(
            is_negative, self._integer_words(groups, lowest_power), fractional_part
        )


def to_name(number: Any, **options: Any) -> str:
    """Name *number* with a converter built from *options*."""

    return NumberName(**options).to_name(number)
