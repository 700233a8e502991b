"""Names for powers of one thousand ("million", "duodecillion", "milliatillion").

A power name is built from the *Latin power*: the number of -illion steps the
power sits at. Latin powers beyond the prefix tables are named by splitting
the Latin power itself into three digit "kilo-kilo" groups and qualifying
each group with as many millia- prefixes as its position, so
1000 is "millia", 1002 is "milliaduo", 2000 is "duomillia" and 1000000 is
"milliamillia".
"""

from __future__ import annotations

from typing import List

from models import LanguageSystem, NamingConfig
from notation import format_integer

TEN = 10
ONE_HUNDRED = 100
ONE_THOUSAND = 1000

DASH = "-"


def split_in_threes(digits: str) -> List[int]:
    """Split a digit string into three digit groups, least significant first.

    Example:
        "1234567" -> [567, 234, 1]
    """

    groups: List[int] = []
    for end in range(len(digits), 0, -3):
        groups.append(int(digits[max(end - 3, 0) : end]))
    return groups


def _separator(config: NamingConfig) -> str:
    return DASH if config.dashes else ""


def millia_fragments(
    millia_count: int, system: LanguageSystem, config: NamingConfig
) -> List[str]:
    """Return the millia- prefixes for a kilo-kilo *millia_count* tiers up."""

    if millia_count < 1:
        return []

    millia = system.prefixes.millia
    if config.short_millia:
        return [f"{millia}^{millia_count}" if millia_count > 1 else millia]
    return [millia] * millia_count


def _takes_unit_prefix(kilo: int, millia_count: int, last_tier: int) -> bool:
    # Unit prefix rule table:
    #   no millias at all         -> always
    #   below the highest tier    -> always
    #   highest tier              -> unless the group is exactly 1
    #                                (milliatillion, not unmilliatillion)
    if last_tier == 0:
        return True
    if millia_count < last_tier:
        return True
    return kilo > 1


def _kilo_kilo_prefix(
    kilo: int,
    millia_count: int,
    last_tier: int,
    system: LanguageSystem,
    config: NamingConfig,
) -> str:
    ones = kilo % TEN
    tens = kilo // TEN % TEN
    hundreds = kilo // ONE_HUNDRED % TEN
    fragments: List[str] = []

    if ones > 0 and _takes_unit_prefix(kilo, millia_count, last_tier):
        if kilo < TEN and millia_count == 0 and last_tier == 0:
            fragments.append(system.special_prefix(config.variant, ones))
        else:
            fragments.append(system.units_prefix(config.variant, ones))

    if tens > 0:
        fragments.append(system.tens_prefix(config.variant, tens))

    if hundreds > 0:
        fragments.insert(0, system.hundreds_prefix(config.variant, hundreds))

    if kilo > 0:
        fragments.extend(millia_fragments(millia_count, system, config))

    return _separator(config).join(fragments)


def latin_power_prefix(
    latin_power: int, system: LanguageSystem, config: NamingConfig
) -> str:
    """Compose the prefix naming *latin_power*, e.g. 12 -> "duodec".

    Returns an empty string for Latin power 0.
    """

    kilos = split_in_threes(format_integer(latin_power))
    last_tier = len(kilos) - 1
    prefixes = [
        _kilo_kilo_prefix(kilo, millia_count, last_tier, system, config)
        for millia_count, kilo in enumerate(kilos)
    ]
    return _separator(config).join(p for p in reversed(prefixes) if p)


def power_infix(latin_power: int) -> str:
    """Return the sound joining a prefix to -llion: "", "i" or "ti"."""

    kilo = latin_power % ONE_THOUSAND
    if 0 < kilo < 5 and latin_power < ONE_THOUSAND:
        return ""
    if 7 <= kilo <= TEN or kilo // TEN % TEN == 1:
        return "i"
    return "ti"


def to_latin_power(power: int, system: LanguageSystem) -> int:
    """Convert a digit group index (1000**power) to its Latin power."""

    if system.long_count_type is not None:
        return power // 2
    return power - 1


def power_name(power: int, system: LanguageSystem, config: NamingConfig) -> str:
    """Name the digit group at 1000**power.

    Power 0 has no name and power 1 is "thousand"; everything above is an
    -illion (or -illiard) name.
    """

    if power < 2:
        return system.base.thousand if power == 1 else ""

    latin_power = to_latin_power(power, system)
    prefix = latin_power_prefix(latin_power, system, config)

    if system.long_count_type == "european" and power % 2 == 1:
        suffix = system.suffixes.lliard
    else:
        suffix = system.suffixes.llion

    ending = power_infix(latin_power) + suffix
    if config.dashes and prefix:
        name = f"{prefix}{DASH}{ending}"
    else:
        name = prefix + ending

    if system.long_count_type == "british" and power % 2 == 1:
        return f"{system.base.thousand} {name}"
    return name
