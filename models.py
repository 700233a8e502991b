# File: models.py
# Pydantic models for naming options and language system data.

from typing import Dict, List, Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field


class BaseWords(BaseModel):
    """Plain words used for digit groups below one thousand."""

    model_config = ConfigDict(frozen=True)

    zero: str = Field(..., description="Word for the digit 0.")
    units: Tuple[str, ...] = Field(
        ..., min_length=9, max_length=9, description="Words for 1 through 9."
    )
    teens: Tuple[str, ...] = Field(
        ..., min_length=10, max_length=10, description="Words for 10 through 19."
    )
    tens: Tuple[str, ...] = Field(
        ..., min_length=8, max_length=8, description="Words for 20, 30, ... 90."
    )
    hundred: str = Field(..., description="Word for a hundred.")
    thousand: str = Field(
        ...,
        description="Word for a thousand. Also prefixes odd powers in British long count.",
    )
    negative: str = Field(..., description="Word prepended to negative numbers.")
    decimal_point: str = Field(..., description="Word spoken for the decimal point.")


class LatinPrefixes(BaseModel):
    """Latin power prefix tables, keyed by naming variant.

    Every table holds nine entries; entry ``n - 1`` is the prefix for the
    digit (or factor) ``n``.
    """

    model_config = ConfigDict(frozen=True)

    units: Dict[str, Tuple[str, ...]] = Field(
        ..., description="Unit prefixes (un-, duo-, ...) per variant."
    )
    tens: Dict[str, Tuple[str, ...]] = Field(
        ..., description="Tens prefixes (dec-, vigin-, ...) per variant."
    )
    hundreds: Dict[str, Tuple[str, ...]] = Field(
        ..., description="Hundreds prefixes (cen-, duocen-, ...) per variant."
    )
    special: Dict[str, Tuple[str, ...]] = Field(
        ...,
        description="Irregular prefixes for Latin powers 1-9 (mi-, bi-, tri-, ...) per variant.",
    )
    millia: str = Field(
        ..., description="Prefix naming one thousand tiers of Latin powers."
    )


class PowerSuffixes(BaseModel):
    model_config = ConfigDict(frozen=True)

    llion: str = Field("llion", description="Suffix of the -illion names.")
    lliard: str = Field(
        "lliard", description="Suffix of the -illiard names (European long count)."
    )


class LocaleSymbols(BaseModel):
    model_config = ConfigDict(frozen=True)

    decimal_point: str = Field(".", min_length=1)
    digit_grouping: str = Field(",")


class LanguageSystem(BaseModel):
    """Read-only word and prefix data for one naming system."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Identifier of the system.")
    long_count_type: Optional[Literal["british", "european"]] = Field(
        None,
        description="Long count flavour, or None for short count systems.",
    )
    base: BaseWords
    prefixes: LatinPrefixes
    suffixes: PowerSuffixes = Field(default_factory=PowerSuffixes)
    symbols: LocaleSymbols = Field(default_factory=LocaleSymbols)

    @property
    def variants(self) -> List[str]:
        return sorted(self.prefixes.units)

    def units_word(self, digit: int) -> str:
        if digit == 0:
            return self.base.zero
        return self.base.units[digit - 1]

    def teens_word(self, offset: int) -> str:
        return self.base.teens[offset]

    def tens_word(self, factor: int) -> str:
        return self.base.tens[factor - 2]

    def units_prefix(self, variant: str, digit: int) -> str:
        return self.prefixes.units[variant][digit - 1]

    def special_prefix(self, variant: str, digit: int) -> str:
        return self.prefixes.special[variant][digit - 1]

    def tens_prefix(self, variant: str, factor: int) -> str:
        return self.prefixes.tens[variant][factor - 1]

    def hundreds_prefix(self, variant: str, factor: int) -> str:
        return self.prefixes.hundreds[variant][factor - 1]


class NamingConfig(BaseModel):
    """Options for a number name converter."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    system: Union[str, LanguageSystem] = Field(
        "american",
        description="Built-in system id ('american', 'british', 'european') or a custom LanguageSystem.",
    )
    variant: str = Field(
        "modern",
        min_length=1,
        description="Prefix table column: 'modern' uses duo- roots, 'traditional' the original do-/du- roots.",
    )
    dashes: bool = Field(
        False,
        description="Join the fragments of synthesized prefixes with dashes for readability.",
    )
    fraction_type: Literal["digits"] = Field(
        "digits",
        alias="fractionType",
        description="How fractional parts are named. 'digits' names each digit after the decimal point.",
    )
    short_millia: bool = Field(
        False,
        alias="isShortMillia",
        description="Shorten repeated millia- prefixes (milliamilliatillion -> millia^2tillion).",
    )
