"""Built-in language systems for naming numbers in English.

Three systems share the same base words and Latin roots and differ in how
powers of one thousand are counted:

- ``american``: short count, every new -illion is 1000 times the previous.
- ``british``: long count, odd powers read "thousand <n>illion".
- ``european``: long count, odd powers use the -illiard suffix.

Each system carries two prefix variants. ``modern`` uses "duo" throughout
("duodecillion", "duocentillion"); ``traditional`` keeps the older "do"/"du"
roots ("dodecillion", "ducentillion").
"""

from __future__ import annotations

import logging
from typing import Dict, List, Union

from errors import UnsupportedSystemError
from models import (
    BaseWords,
    LanguageSystem,
    LatinPrefixes,
    LocaleSymbols,
    PowerSuffixes,
)

logger = logging.getLogger(__name__)

DEFAULT_SYSTEM = "american"
DEFAULT_VARIANT = "modern"

UNITS = [
    "one",
    "two",
    "three",
    "four",
    "five",
    "six",
    "seven",
    "eight",
    "nine",
]

TEENS = [
    "ten",
    "eleven",
    "twelve",
    "thirteen",
    "fourteen",
    "fifteen",
    "sixteen",
    "seventeen",
    "eighteen",
    "nineteen",
]

TENS = [
    "twenty",
    "thirty",
    "forty",
    "fifty",
    "sixty",
    "seventy",
    "eighty",
    "ninety",
]

# Latin powers 1-9 are irregular: mi-llion, bi-llion, tri-llion, ...
SPECIAL_PREFIXES = ["mi", "bi", "tri", "quadri", "quin", "sex", "sept", "oct", "non"]

TENS_PREFIXES = [
    "dec",
    "vigin",
    "trigin",
    "quadragin",
    "quinquagin",
    "sexagin",
    "septuagin",
    "octogin",
    "nonagin",
]

UNITS_PREFIXES = {
    "modern": ["un", "duo", "tre", "quattuor", "quin", "sex", "septen", "octo", "novem"],
    "traditional": ["un", "do", "tre", "quattuor", "quin", "sex", "septen", "octo", "novem"],
}

HUNDREDS_PREFIXES = {
    "modern": [
        "cen",
        "duocen",
        "trecen",
        "quadringen",
        "quingen",
        "sescen",
        "septingen",
        "octingen",
        "nongen",
    ],
    "traditional": [
        "cen",
        "ducen",
        "trecen",
        "quadringen",
        "quingen",
        "sescen",
        "septingen",
        "octingen",
        "nongen",
    ],
}

MILLIA_PREFIX = "millia"


def _english_base_words() -> BaseWords:
    return BaseWords(
        zero="zero",
        units=UNITS,
        teens=TEENS,
        tens=TENS,
        hundred="hundred",
        thousand="thousand",
        negative="negative",
        decimal_point="point",
    )


def _latin_prefixes() -> LatinPrefixes:
    variants = sorted(UNITS_PREFIXES)
    return LatinPrefixes(
        units={variant: UNITS_PREFIXES[variant] for variant in variants},
        tens={variant: TENS_PREFIXES for variant in variants},
        hundreds={variant: HUNDREDS_PREFIXES[variant] for variant in variants},
        special={variant: SPECIAL_PREFIXES for variant in variants},
        millia=MILLIA_PREFIX,
    )


def _build_systems() -> Dict[str, LanguageSystem]:
    base = _english_base_words()
    prefixes = _latin_prefixes()
    suffixes = PowerSuffixes(llion="llion", lliard="lliard")
    return {
        "american": LanguageSystem(
            name="american",
            long_count_type=None,
            base=base,
            prefixes=prefixes,
            suffixes=suffixes,
            symbols=LocaleSymbols(decimal_point=".", digit_grouping=","),
        ),
        "british": LanguageSystem(
            name="british",
            long_count_type="british",
            base=base,
            prefixes=prefixes,
            suffixes=suffixes,
            symbols=LocaleSymbols(decimal_point=".", digit_grouping=","),
        ),
        "european": LanguageSystem(
            name="european",
            long_count_type="european",
            base=base,
            prefixes=prefixes,
            suffixes=suffixes,
            symbols=LocaleSymbols(decimal_point=",", digit_grouping="."),
        ),
    }


SYSTEMS: Dict[str, LanguageSystem] = _build_systems()


def available_systems() -> List[str]:
    return sorted(SYSTEMS)


def get_language_system(system: Union[str, LanguageSystem]) -> LanguageSystem:
    """Resolve *system* to a :class:`LanguageSystem`.

    Strings are looked up case-insensitively among the built-in systems;
    ``LanguageSystem`` instances are returned as they are.

    Raises:
        UnsupportedSystemError: if *system* names no built-in system.
    """

    if isinstance(system, LanguageSystem):
        logger.debug("Using custom language system %r", system.name)
        return system

    try:
        return SYSTEMS[system.strip().lower()]
    except KeyError:
        raise UnsupportedSystemError(system) from None
