"""Exceptions raised while configuring a converter or naming a number."""

from typing import Any


class InvalidNumberError(ValueError):
    def __init__(self, number: Any):
        super().__init__(f'Invalid number: "{number}"')
        self.number = number


class UnsupportedSystemError(Exception):
    def __init__(self, system: str):
        super().__init__(f"Unsupported language system: {system}")
        self.system = system


class UnsupportedVariantError(Exception):
    def __init__(self, variant: str, system: str):
        super().__init__(f"Unsupported variant for {system}: {variant}")
        self.variant = variant
        self.system = system
